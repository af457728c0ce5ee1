"""
Product directory port (interface).

Read-only lookup of products by id.
"""
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from products.domain.product import ProductReference


class ProductDirectory(ABC):
    """
    Abstract read-only directory of products.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def find_by_id(self, product_id: int) -> Optional[ProductReference]:
        """
        Find a product by ID.

        Args:
            product_id: Product id

        Returns:
            ProductReference or None if not found
        """
        pass

    @abstractmethod
    async def find_many(
        self, product_ids: Iterable[int]
    ) -> Dict[int, ProductReference]:
        """
        Find several products at once.

        Args:
            product_ids: Product ids, duplicates allowed

        Returns:
            Mapping of id to ProductReference for the ids that exist
        """
        pass
