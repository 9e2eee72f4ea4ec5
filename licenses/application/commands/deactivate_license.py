"""
DeactivateLicenseCommand.

Command to release the license activated on the current device.
"""

from dataclasses import dataclass


@dataclass
class DeactivateLicenseCommand:
    """Command to deactivate the current device's license."""
