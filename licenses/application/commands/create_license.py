"""
CreateLicenseCommand.

Command to create a license record.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class CreateLicenseCommand:
    """Command to create a license; a key is generated when none is given."""

    license_key: Optional[str] = None
