"""
Customer directory port (interface).

Read-only lookup of customers by id.
"""
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from customers.domain.customer import CustomerReference


class CustomerDirectory(ABC):
    """
    Abstract read-only directory of customers.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def find_by_id(self, customer_id: int) -> Optional[CustomerReference]:
        """
        Find a customer by ID.

        Args:
            customer_id: Customer id

        Returns:
            CustomerReference or None if not found
        """
        pass

    @abstractmethod
    async def find_many(
        self, customer_ids: Iterable[int]
    ) -> Dict[int, CustomerReference]:
        """
        Find several customers at once.

        Args:
            customer_ids: Customer ids, duplicates allowed

        Returns:
            Mapping of id to CustomerReference for the ids that exist
        """
        pass
