"""
DeleteLicenseCommand.

Command to delete a license record.
"""

from dataclasses import dataclass


@dataclass
class DeleteLicenseCommand:
    """Command to delete a license."""

    license_key: str
