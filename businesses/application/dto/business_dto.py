"""
Business DTOs for the presentation layer.
"""
from dataclasses import asdict, dataclass, fields
from datetime import datetime
from typing import Any, Dict, List, Optional

from businesses.domain.business import Business
from core.domain.value_objects import format_timestamp


@dataclass
class BusinessDTO:
    """DTO for a business record."""

    id: int
    name: str
    customer_id: int
    product_id: int
    license_id: Optional[str]
    created: datetime
    updated: datetime
    removed: Optional[datetime]

    @classmethod
    def from_entity(cls, business: Business, **joined) -> "BusinessDTO":
        """
        Build the DTO from a Business entity plus any joined fields.

        Args:
            business: Business entity
            **joined: Values for the DTO's denormalized fields

        Returns:
            DTO instance
        """
        return cls(
            id=business.id,
            name=business.name,
            customer_id=business.customer_id,
            product_id=business.product_id,
            license_id=business.license_id,
            created=business.created,
            updated=business.updated,
            removed=business.removed,
            **joined,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a plain dict.

        Timestamps are rendered to whole seconds in UTC with a ``Z`` suffix.
        """
        data = asdict(self)
        for f in fields(self):
            if isinstance(data[f.name], datetime):
                data[f.name] = format_timestamp(data[f.name])
        return data


@dataclass
class BusinessListItemDTO(BusinessDTO):
    """DTO for a business list row with customer and product names."""

    customer_name: Optional[str] = None
    product_name: Optional[str] = None
    product_version: Optional[str] = None


@dataclass
class BusinessDetailDTO(BusinessListItemDTO):
    """DTO for a business detail view, including the license projection."""

    license_key: Optional[str] = None
    license_status: Optional[str] = None
    license_issued: Optional[datetime] = None
    license_expired: Optional[datetime] = None


@dataclass
class BusinessPageDTO:
    """DTO for one page of business records."""

    items: List[BusinessListItemDTO]
    total: int
    page: int
    total_pages: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict using the listing's wire names."""
        return {
            "items": [item.to_dict() for item in self.items],
            "total": self.total,
            "page": self.page,
            "totalPages": self.total_pages,
        }
