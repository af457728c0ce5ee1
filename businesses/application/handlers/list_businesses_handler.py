"""
ListBusinessesHandler.

Handler for listing live business records with customer and product names.
"""
from businesses.application.dto.business_dto import BusinessListItemDTO, BusinessPageDTO
from businesses.application.queries.list_businesses import ListBusinessesQuery
from businesses.domain.business import BusinessSearchCriteria
from businesses.ports.business_repository import BusinessRepository
from core.domain.value_objects import PageRequest
from customers.ports.customer_directory import CustomerDirectory
from products.ports.product_directory import ProductDirectory


class ListBusinessesHandler:
    """Handler for ListBusinessesQuery."""

    def __init__(
        self,
        business_repository: BusinessRepository,
        customer_directory: CustomerDirectory,
        product_directory: ProductDirectory,
    ):
        """Initialize handler with repository and directories."""
        self.business_repository = business_repository
        self.customer_directory = customer_directory
        self.product_directory = product_directory

    async def handle(self, query: ListBusinessesQuery) -> BusinessPageDTO:
        """
        Handle list businesses query.

        Args:
            query: ListBusinessesQuery

        Returns:
            BusinessPageDTO

        Raises:
            ValueError: If page or limit is below 1
        """
        page = PageRequest(page=query.page, limit=query.limit)
        criteria = BusinessSearchCriteria(name=query.name, available=query.available)

        # Total is taken over the whole filtered set, before paging
        total = await self.business_repository.count(criteria)
        businesses = await self.business_repository.search(
            criteria, page.offset, page.limit
        )

        customers = await self.customer_directory.find_many(
            business.customer_id for business in businesses
        )
        products = await self.product_directory.find_many(
            business.product_id for business in businesses
        )

        items = []
        for business in businesses:
            customer = customers.get(business.customer_id)
            product = products.get(business.product_id)
            items.append(
                BusinessListItemDTO.from_entity(
                    business,
                    customer_name=customer.name if customer else None,
                    product_name=product.name if product else None,
                    product_version=product.version if product else None,
                )
            )

        return BusinessPageDTO(
            items=items,
            total=total,
            page=page.page,
            total_pages=page.total_pages(total),
        )
