"""
CreateBusinessCommand.

Command to create a business record.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class CreateBusinessCommand:
    """Command to create a business record."""

    name: str
    customer_id: int
    product_id: int
    license_id: Optional[str] = None
