"""
Business domain events.
"""
from dataclasses import dataclass
from typing import Optional

from core.domain.events import DomainEvent


@dataclass(frozen=True)
class BusinessCreated(DomainEvent):
    """Event raised when a business record is created."""

    name: str
    customer_id: int
    product_id: int


@dataclass(frozen=True)
class BusinessUpdated(DomainEvent):
    """Event raised when business fields are overwritten."""

    changed_fields: tuple


@dataclass(frozen=True)
class BusinessRemoved(DomainEvent):
    """Event raised when a business record is soft-deleted."""

    released_license_id: Optional[str] = None


@dataclass(frozen=True)
class BusinessLicenseRegistered(DomainEvent):
    """Event raised when a license is linked to a business record."""

    license_id: str
    previous_license_id: Optional[str] = None
