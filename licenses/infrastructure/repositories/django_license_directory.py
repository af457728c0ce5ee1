"""
Django implementation of LicenseDirectory port.
"""
from typing import Optional

from asgiref.sync import sync_to_async
from django.db.models import F

from licenses.domain.license import LicenseReference
from licenses.infrastructure.models import License as LicenseModel
from licenses.ports.license_directory import LicenseDirectory


class DjangoLicenseDirectory(LicenseDirectory):
    """Django ORM implementation of LicenseDirectory."""

    def _to_domain(self, model: LicenseModel) -> LicenseReference:
        return LicenseReference(
            id=model.id,
            license_key=model.license_key,
            status=model.status,
            issued=model.issued,
            expired=model.expired,
            removed=model.removed,
        )

    @sync_to_async
    def find_by_id(self, license_id: str) -> Optional[LicenseReference]:
        """
        Find a license by ID.

        Args:
            license_id: License id

        Returns:
            LicenseReference or None if not found
        """
        if license_id is None:
            return None
        try:
            model = LicenseModel.objects.get(id=license_id)
            return self._to_domain(model)
        except LicenseModel.DoesNotExist:
            return None

    @sync_to_async
    def find_by_business_id(self, business_id: int) -> Optional[LicenseReference]:
        """
        Find the license issued to a business.

        Args:
            business_id: Business id

        Returns:
            LicenseReference or None if not found
        """
        if business_id is None:
            return None
        model = (
            LicenseModel.objects.filter(business_id=business_id)
            .order_by(F("removed").asc(nulls_first=True), "-created")
            .first()
        )
        return self._to_domain(model) if model else None
