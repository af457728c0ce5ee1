"""
Business domain entity.

This is the core domain entity representing a business record.
It links a customer, a product and an optional license.
"""
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

# Fields a caller may overwrite through an update.
UPDATABLE_FIELDS = frozenset({"name", "customer_id", "product_id", "license_id"})


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Business:
    """
    Business domain entity.

    Immutable: every state change returns a new instance.
    ``id`` is None until the record has been persisted.
    """

    id: Optional[int]
    name: str
    customer_id: int
    product_id: int
    license_id: Optional[str]
    created: datetime
    updated: datetime
    removed: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        name: str,
        customer_id: int,
        product_id: int,
        license_id: Optional[str] = None,
    ) -> "Business":
        """
        Create a new, not yet persisted, Business entity.

        Fields are taken verbatim; only timestamps are assigned here.

        Args:
            name: Business display name
            customer_id: Customer id
            product_id: Product id
            license_id: Optional license id

        Returns:
            Business entity instance
        """
        now = _utcnow()
        return cls(
            id=None,
            name=name,
            customer_id=customer_id,
            product_id=product_id,
            license_id=license_id,
            created=now,
            updated=now,
            removed=None,
        )

    @property
    def is_removed(self) -> bool:
        """True once the record has been soft-deleted."""
        return self.removed is not None

    @property
    def is_available(self) -> bool:
        """True while no license is linked."""
        return self.license_id is None

    def apply_changes(self, changes: Mapping[str, Any]) -> "Business":
        """
        Shallow-merge ``changes`` over this record.

        Every key present overwrites the field, absent keys are left alone.

        Args:
            changes: Field name to new value

        Returns:
            New Business instance with the merged fields

        Raises:
            ValueError: If a key is not an updatable field
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(
                f"Cannot update business field(s): {', '.join(sorted(unknown))}"
            )
        return replace(self, **dict(changes), updated=_utcnow())

    def register_license(self, license_id: str) -> "Business":
        """
        Link a license to this record.

        Args:
            license_id: License id

        Returns:
            New Business instance with the license linked
        """
        return replace(self, license_id=license_id, updated=_utcnow())

    def deregister_license(self) -> "Business":
        """
        Unlink the license from this record.

        Returns:
            New Business instance with no license
        """
        return replace(self, license_id=None, updated=_utcnow())

    def mark_removed(self) -> "Business":
        """
        Soft-delete this record.

        The license must already be deregistered.

        Returns:
            New Business instance with ``removed`` set

        Raises:
            ValueError: If a license is still linked
        """
        if self.license_id is not None:
            raise ValueError("Cannot remove a business that still holds a license")
        now = _utcnow()
        return replace(self, removed=now, updated=now)


@dataclass(frozen=True)
class BusinessSearchCriteria:
    """
    Filters for listing live business records.

    ``name`` matches anywhere in the business name. ``available`` only
    matters by presence: any non-empty value keeps unlicensed rows only.
    """

    name: Optional[str] = None
    available: Optional[str] = None

    @property
    def only_available(self) -> bool:
        return bool(self.available)
