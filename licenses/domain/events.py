"""
License domain events.

Domain events represent something that happened in the license domain.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from core.domain.events import DomainEvent


class LicenseCreated(DomainEvent):
    """Event raised when a license record is created."""

    def __init__(self, license_key: str, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=license_key, occurred_at=occurred_at)
        self.license_key = license_key


class LicenseActivated(DomainEvent):
    """Event raised when a license is bound to a device."""

    def __init__(
        self,
        license_key: str,
        device_id: str,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize LicenseActivated event.

        Args:
            license_key: License key
            device_id: Identifier of the device the license was bound to
            occurred_at: When the event occurred
        """
        super().__init__(aggregate_id=license_key, occurred_at=occurred_at)
        self.license_key = license_key
        self.device_id = device_id

    def payload(self) -> Dict[str, Any]:
        return {"device_id": self.device_id}


class LicenseDeactivated(DomainEvent):
    """Event raised when a license releases its device binding."""

    def __init__(
        self,
        license_key: str,
        device_id: str,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize LicenseDeactivated event.

        Args:
            license_key: License key
            device_id: Identifier of the device that was released
            occurred_at: When the event occurred
        """
        super().__init__(aggregate_id=license_key, occurred_at=occurred_at)
        self.license_key = license_key
        self.device_id = device_id

    def payload(self) -> Dict[str, Any]:
        return {"device_id": self.device_id}


class LicenseStatusChanged(DomainEvent):
    """Event raised when a license status is set explicitly."""

    def __init__(
        self,
        license_key: str,
        old_status: str,
        new_status: str,
        occurred_at: Optional[datetime] = None,
    ):
        super().__init__(aggregate_id=license_key, occurred_at=occurred_at)
        self.license_key = license_key
        self.old_status = old_status
        self.new_status = new_status

    def payload(self) -> Dict[str, Any]:
        return {"old_status": self.old_status, "new_status": self.new_status}


class LicenseDeleted(DomainEvent):
    """Event raised when a license record is deleted."""

    def __init__(self, license_key: str, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=license_key, occurred_at=occurred_at)
        self.license_key = license_key


class LicensesImported(DomainEvent):
    """Event raised after the store has been replaced by an import."""

    def __init__(self, count: int, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id="licenses", occurred_at=occurred_at)
        self.count = count

    def payload(self) -> Dict[str, Any]:
        return {"count": self.count}


class LicensesCleared(DomainEvent):
    """Event raised after every license record has been removed."""

    def __init__(self, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id="licenses", occurred_at=occurred_at)
