"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class PageRequest:
    """
    One page window over an ordered result set.

    Pages are 1-based. Values below 1 are rejected rather than clamped.
    """

    page: int = 1
    limit: int = 10

    def __post_init__(self):
        """Validate page window."""
        if isinstance(self.page, bool) or not isinstance(self.page, int):
            raise ValueError(f"Page must be an integer: {self.page!r}")
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise ValueError(f"Limit must be an integer: {self.limit!r}")
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.limit < 1:
            raise ValueError("Limit must be at least 1")

    @property
    def offset(self) -> int:
        """Number of rows skipped before this page."""
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        """
        Number of pages needed for ``total`` rows.

        Args:
            total: Size of the filtered result set

        Returns:
            ceil(total / limit), 0 when there are no rows
        """
        return math.ceil(total / self.limit)


def to_second_precision(value: Optional[datetime]) -> Optional[datetime]:
    """
    Truncate a timestamp to whole seconds in UTC.

    Naive values are taken to be UTC already.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).replace(microsecond=0)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Render a timestamp as second-precision ISO-8601 with a ``Z`` suffix."""
    truncated = to_second_precision(value)
    if truncated is None:
        return None
    return truncated.strftime("%Y-%m-%dT%H:%M:%SZ")
