"""
GetLicenseQuery.

Query to get one license record.
"""
from dataclasses import dataclass


@dataclass
class GetLicenseQuery:
    """Query to get a license by key."""

    license_key: str
