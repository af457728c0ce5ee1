"""
License directory port (interface).

Read-only lookup of licenses by id or by owning business.
Soft-deleted licenses are still returned; their ``removed`` timestamp is set.
"""
from abc import ABC, abstractmethod
from typing import Optional

from licenses.domain.license import LicenseReference


class LicenseDirectory(ABC):
    """
    Abstract read-only directory of licenses.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def find_by_id(self, license_id: str) -> Optional[LicenseReference]:
        """
        Find a license by ID, removed or not.

        Args:
            license_id: License id

        Returns:
            LicenseReference or None if not found
        """
        pass

    @abstractmethod
    async def find_by_business_id(
        self, business_id: int
    ) -> Optional[LicenseReference]:
        """
        Find the license issued to a business, removed or not.

        A live license wins over removed ones; among equals the newest wins.

        Args:
            business_id: Business id the license belongs to

        Returns:
            LicenseReference or None if the business has no license row
        """
        pass
