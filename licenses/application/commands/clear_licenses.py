"""
ClearLicensesCommand.

Command to remove every license record.
"""

from dataclasses import dataclass


@dataclass
class ClearLicensesCommand:
    """Command to clear the license store."""
