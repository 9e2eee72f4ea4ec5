"""
UpdateLicenseStatusCommand.

Command to set the status of a license explicitly.
"""

from dataclasses import dataclass


@dataclass
class UpdateLicenseStatusCommand:
    """Command to set a license status."""

    license_key: str
    status: str
