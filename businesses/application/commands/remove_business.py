"""
RemoveBusinessCommand.

Command to soft-delete a business record.
"""
from dataclasses import dataclass


@dataclass
class RemoveBusinessCommand:
    """Command to remove a business record."""

    business_id: int
