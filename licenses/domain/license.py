"""
License reference entity.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class LicenseReference:
    """
    License fields that business records display.

    ``removed`` is carried so callers can decide whether the rest
    of the fields may be shown.
    """

    id: str
    license_key: str
    status: str
    issued: Optional[datetime]
    expired: Optional[datetime]
    removed: Optional[datetime] = None

    @property
    def is_removed(self) -> bool:
        """True once the license has been soft-deleted."""
        return self.removed is not None
