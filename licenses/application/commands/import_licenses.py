"""
ImportLicensesCommand.

Command to replace the license store with an exported document.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ImportLicensesCommand:
    """Command to import an export document ({exportDate, version, licenses})."""

    data: Dict[str, Any]
