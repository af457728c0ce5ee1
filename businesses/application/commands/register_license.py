"""
RegisterLicenseCommand.

Command to link a license to a business record.
"""
from dataclasses import dataclass


@dataclass
class RegisterLicenseCommand:
    """Command to register a license on a business record."""

    business_id: int
    license_id: str
