"""
Business repository port (interface).

This defines the contract for business persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from businesses.domain.business import Business, BusinessSearchCriteria


class BusinessRepository(ABC):
    """
    Abstract repository for Business entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, business: Business) -> Business:
        """
        Save a business entity.

        Inserts when ``business.id`` is None, updates otherwise.

        Args:
            business: Business entity to save

        Returns:
            Saved business entity with server-assigned id and timestamps
        """
        pass

    @abstractmethod
    async def find_by_id(self, business_id: int) -> Optional[Business]:
        """
        Find a business by ID, whether soft-deleted or not.

        Args:
            business_id: Business id

        Returns:
            Business entity or None if no row exists
        """
        pass

    @abstractmethod
    async def find_live_by_id(self, business_id: int) -> Optional[Business]:
        """
        Find a business by ID, ignoring soft-deleted rows.

        Args:
            business_id: Business id

        Returns:
            Business entity or None if absent or removed
        """
        pass

    @abstractmethod
    async def search(
        self, criteria: BusinessSearchCriteria, offset: int, limit: int
    ) -> List[Business]:
        """
        List live businesses matching the criteria.

        Rows are ordered newest first (``created`` then ``id``, descending).

        Args:
            criteria: Listing filters
            offset: Rows to skip
            limit: Maximum rows to return

        Returns:
            List of Business entities
        """
        pass

    @abstractmethod
    async def count(self, criteria: BusinessSearchCriteria) -> int:
        """
        Count live businesses matching the criteria.

        Args:
            criteria: Listing filters

        Returns:
            Number of matching rows
        """
        pass
