"""
Product reference entity.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ProductReference:
    """Product fields that business records display."""

    id: int
    name: str
    version: str
