"""
Business domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Mapping, Optional

from businesses.domain.business import Business
from businesses.ports.business_repository import BusinessRepository
from core.domain.exceptions import BusinessNotFoundError, BusinessRecordMissingError
from core.domain.value_objects import to_second_precision
from licenses.domain.license import LicenseReference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LicenseProjection:
    """License fields shown next to a business record."""

    license_key: Optional[str] = None
    license_status: Optional[str] = None
    license_issued: Optional[datetime] = None
    license_expired: Optional[datetime] = None

    @classmethod
    def of(cls, license: Optional[LicenseReference]) -> "LicenseProjection":
        """
        Project a license onto the business detail fields.

        A missing or soft-deleted license projects to all-None fields.

        Args:
            license: Linked license, if any

        Returns:
            LicenseProjection
        """
        if license is None or license.is_removed:
            return cls()
        return cls(
            license_key=license.license_key,
            license_status=license.status,
            license_issued=license.issued,
            license_expired=license.expired,
        )


class BusinessRecordManager:
    """Domain service for the business record lifecycle."""

    @staticmethod
    async def find_one(
        business_id: int,
        repository: BusinessRepository,
    ) -> Business:
        """
        Load a live business for a write.

        Args:
            business_id: Business id
            repository: Business repository

        Returns:
            The live Business

        Raises:
            BusinessNotFoundError: If the business is absent or soft-deleted
        """
        business = await repository.find_live_by_id(business_id)
        if business is None:
            raise BusinessNotFoundError(business_id)
        return business

    @staticmethod
    async def find_raw(
        business_id: int,
        repository: BusinessRepository,
    ) -> Business:
        """
        Load a business row without the soft-delete filter.

        Args:
            business_id: Business id
            repository: Business repository

        Returns:
            The Business, possibly soft-deleted

        Raises:
            BusinessRecordMissingError: If no row exists
        """
        business = await repository.find_by_id(business_id)
        if business is None:
            raise BusinessRecordMissingError(business_id)
        return business

    @staticmethod
    async def update_business(
        business: Business,
        changes: Mapping[str, Any],
        repository: BusinessRepository,
    ) -> Business:
        """
        Shallow-merge changes into a business and persist it.

        Args:
            business: Loaded business
            changes: Fields to overwrite
            repository: Business repository

        Returns:
            Saved business
        """
        updated = business.apply_changes(changes)
        return await repository.save(updated)

    @staticmethod
    async def remove_business(
        business: Business,
        repository: BusinessRepository,
    ) -> Business:
        """
        Deregister the license, then soft-delete the business.

        The two writes are separate statements. If the second one fails
        the row stays live and unlicensed.

        Args:
            business: Loaded live business
            repository: Business repository

        Returns:
            Soft-deleted business
        """
        deregistered = await repository.save(business.deregister_license())
        return await repository.save(deregistered.mark_removed())

    @staticmethod
    async def register_license(
        business: Business,
        license_id: str,
        repository: BusinessRepository,
    ) -> Business:
        """
        Link a license to a business and persist it.

        Args:
            business: Loaded business
            license_id: License id
            repository: Business repository

        Returns:
            Saved business with ``updated`` truncated to whole seconds in UTC
        """
        if business.is_removed:
            logger.warning(
                "Registering license %s on removed business %s", license_id, business.id
            )
        saved = await repository.save(business.register_license(license_id))
        return replace(saved, updated=to_second_precision(saved.updated))
