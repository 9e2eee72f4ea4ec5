"""
License domain entity.

This is the core domain entity representing one license record.
It contains business logic and is independent of infrastructure.
"""
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from core.domain.exceptions import InvalidLicenseRecordError
from core.domain.value_objects import LicenseStatus

# Wire names of the record fields; anything else is kept in License.extra.
KNOWN_FIELDS = ("key", "status", "createdAt", "activationDate", "deviceId", "lastActive")


def truncate_to_milliseconds(value: datetime) -> datetime:
    """Drop sub-millisecond precision, which the interchange format cannot carry."""
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def current_timestamp() -> datetime:
    """Current UTC time at millisecond precision."""
    return truncate_to_milliseconds(datetime.now(timezone.utc))


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Format a datetime as an ISO-8601 UTC string with millisecond precision."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: Any, field_name: str) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp.

    Args:
        value: Timestamp string, datetime or None
        field_name: Field name used in error messages

    Returns:
        Timezone-aware datetime or None

    Raises:
        InvalidLicenseRecordError: If value cannot be parsed
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value[:-1] + "+00:00" if value.endswith("Z") else value
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidLicenseRecordError(f"Invalid {field_name}: {value!r}") from e
    else:
        raise InvalidLicenseRecordError(f"Invalid {field_name}: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return truncate_to_milliseconds(parsed)


@dataclass(frozen=True)
class License:
    """
    License domain entity.

    Represents one issuable license key and its device binding.
    This is an immutable value object; every transition returns a new
    instance that must be written back to the store.
    """

    key: str
    status: str
    created_at: Optional[datetime]
    activation_date: Optional[datetime] = None
    device_id: Optional[str] = None
    last_active: Optional[datetime] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate license entity."""
        if not isinstance(self.key, str) or not self.key.strip():
            raise ValueError("License key cannot be empty")
        if not isinstance(self.status, str) or not self.status:
            raise ValueError("License status cannot be empty")

    @classmethod
    def create(cls, key: str, created_at: Optional[datetime] = None) -> "License":
        """
        Create a new, inactive and unbound License entity.

        Args:
            key: License key
            created_at: Creation time (defaults to the current millisecond)

        Returns:
            License entity instance
        """
        return cls(
            key=key,
            status=LicenseStatus.INACTIVE.value,
            created_at=created_at or current_timestamp(),
        )

    @property
    def is_active(self) -> bool:
        """True if the license is in the active state."""
        return self.status == LicenseStatus.ACTIVE.value

    @property
    def is_inactive(self) -> bool:
        """True if the license is in the inactive state."""
        return self.status == LicenseStatus.INACTIVE.value

    def is_bound_to(self, device_id: str) -> bool:
        """Check whether the license is bound to the given device."""
        return self.device_id is not None and self.device_id == device_id

    def activate(self, device_id: str, now: datetime) -> "License":
        """
        Bind the license to a device.

        Args:
            device_id: Identifier of the device
            now: Activation time

        Returns:
            New active License instance
        """
        return replace(
            self,
            status=LicenseStatus.ACTIVE.value,
            device_id=device_id,
            activation_date=now,
            last_active=now,
        )

    def deactivate(self, now: datetime) -> "License":
        """
        Release the device binding.

        Args:
            now: Deactivation time

        Returns:
            New inactive License instance
        """
        return replace(
            self,
            status=LicenseStatus.INACTIVE.value,
            device_id=None,
            activation_date=None,
            last_active=now,
        )

    def with_status(self, status: str) -> "License":
        """
        Return a copy with a new status.

        Moving to inactive also releases the device binding.
        """
        if status == LicenseStatus.INACTIVE.value:
            return replace(self, status=status, device_id=None, activation_date=None)
        return replace(self, status=status)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the interchange format (camelCase keys, ISO timestamps)."""
        data = dict(self.extra)
        data.update(
            {
                "key": self.key,
                "status": self.status,
                "createdAt": format_timestamp(self.created_at),
                "activationDate": format_timestamp(self.activation_date),
                "deviceId": self.device_id,
                "lastActive": format_timestamp(self.last_active),
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "License":
        """
        Build a License from the interchange format.

        Unknown keys are preserved in ``extra``.

        Raises:
            InvalidLicenseRecordError: If the record is malformed
        """
        if not isinstance(data, dict):
            raise InvalidLicenseRecordError("License record must be an object")
        key = data.get("key")
        if not isinstance(key, str) or not key.strip():
            raise InvalidLicenseRecordError("License record has no key")
        status = data.get("status") or LicenseStatus.INACTIVE.value
        if not isinstance(status, str):
            raise InvalidLicenseRecordError(f"Invalid status for license {key}")
        device_id = data.get("deviceId")
        if device_id is not None and not isinstance(device_id, str):
            raise InvalidLicenseRecordError(f"Invalid deviceId for license {key}")

        return cls(
            key=key,
            status=status,
            created_at=parse_timestamp(data.get("createdAt"), "createdAt"),
            activation_date=parse_timestamp(data.get("activationDate"), "activationDate"),
            device_id=device_id,
            last_active=parse_timestamp(data.get("lastActive"), "lastActive"),
            extra={k: v for k, v in data.items() if k not in KNOWN_FIELDS},
        )
