"""
GetBusinessHandler.

Handler for fetching one business record with customer, product
and license fields joined in.
"""
from typing import Optional

from businesses.application.dto.business_dto import BusinessDetailDTO
from businesses.application.queries.get_business import GetBusinessQuery
from businesses.domain.services import LicenseProjection
from businesses.ports.business_repository import BusinessRepository
from customers.ports.customer_directory import CustomerDirectory
from licenses.ports.license_directory import LicenseDirectory
from products.ports.product_directory import ProductDirectory


class GetBusinessHandler:
    """Handler for GetBusinessQuery."""

    def __init__(
        self,
        business_repository: BusinessRepository,
        customer_directory: CustomerDirectory,
        product_directory: ProductDirectory,
        license_directory: LicenseDirectory,
    ):
        """Initialize handler with repository and directories."""
        self.business_repository = business_repository
        self.customer_directory = customer_directory
        self.product_directory = product_directory
        self.license_directory = license_directory

    async def handle(self, query: GetBusinessQuery) -> Optional[BusinessDetailDTO]:
        """
        Handle get business query.

        Args:
            query: GetBusinessQuery

        Returns:
            BusinessDetailDTO, or None if the business is absent or removed
        """
        business = await self.business_repository.find_live_by_id(query.business_id)
        if business is None:
            return None

        customer = await self.customer_directory.find_by_id(business.customer_id)
        product = await self.product_directory.find_by_id(business.product_id)
        license = await self.license_directory.find_by_business_id(business.id)
        projection = LicenseProjection.of(license)

        return BusinessDetailDTO.from_entity(
            business,
            customer_name=customer.name if customer else None,
            product_name=product.name if product else None,
            product_version=product.version if product else None,
            license_key=projection.license_key,
            license_status=projection.license_status,
            license_issued=projection.license_issued,
            license_expired=projection.license_expired,
        )
