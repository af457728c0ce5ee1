"""
UpdateBusinessCommand.

Command to overwrite some fields of a business record.
"""
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class UpdateBusinessCommand:
    """
    Command to update a business record.

    Only the keys present in ``changes`` are written.
    """

    business_id: int
    changes: Dict[str, Any] = field(default_factory=dict)
