"""
ListBusinessesQuery.

Query to list live business records one page at a time.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListBusinessesQuery:
    """
    Query to list business records.

    ``available`` is a presence flag: any non-empty value restricts
    the listing to businesses without a license.
    """

    page: int = 1
    limit: int = 10
    name: Optional[str] = None
    available: Optional[str] = None
