"""
ListLicensesQuery.

Query to list license records.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListLicensesQuery:
    """Query to list licenses, optionally filtered by status."""

    status: Optional[str] = None
