"""
ActivateLicenseCommand.

Command to activate a license on the current device.
"""

from dataclasses import dataclass


@dataclass
class ActivateLicenseCommand:
    """Command to bind a license to the current device."""

    license_key: str
