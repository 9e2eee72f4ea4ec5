"""
ExportLicensesQuery.

Query to snapshot every license record for interchange.
"""
from dataclasses import dataclass


@dataclass
class ExportLicensesQuery:
    """Query to export all licenses."""
