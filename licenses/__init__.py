"""
Licenses module - read-only License directory.

Licenses are issued to a business record. The business detail view
shows the key, status and validity window of its license while the
license itself is not removed.
"""
