"""
GetDeviceLicenseQuery.

Query to get the license active on the current device.
"""
from dataclasses import dataclass


@dataclass
class GetDeviceLicenseQuery:
    """Query to get the current device's license."""
