"""
GetBusinessQuery.

Query to fetch one business record with its joined reference data.
"""
from dataclasses import dataclass


@dataclass
class GetBusinessQuery:
    """Query to get a business record by id."""

    business_id: int
