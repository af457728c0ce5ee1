"""
Customer reference entity.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerReference:
    """Customer fields that business records display."""

    id: int
    name: str
