"""
License DTOs for handler results and API responses.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from licenses.domain.license import License


@dataclass
class ActivationResultDTO:
    """DTO for activate/deactivate results."""

    success: bool
    message: str
    license: Optional[License] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "success": self.success,
            "message": self.message,
            "license": self.license.to_dict() if self.license else None,
        }


@dataclass
class LicenseExportDTO:
    """DTO for an export document."""

    export_date: str
    version: int
    licenses: List[License] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the interchange format."""
        return {
            "exportDate": self.export_date,
            "version": self.version,
            "licenses": [license.to_dict() for license in self.licenses],
        }


@dataclass
class DeviceStatusDTO:
    """DTO for the licensing status of the current device."""

    device_id: str
    is_licensed: bool
    license: Optional[License] = None
