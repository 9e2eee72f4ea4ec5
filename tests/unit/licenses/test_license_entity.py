"""
Unit tests for License domain entity.
"""

from datetime import datetime, timedelta, timezone

import pytest

from core.domain.exceptions import InvalidLicenseRecordError
from core.domain.value_objects import LicenseStatus
from licenses.domain.license import (
    License,
    current_timestamp,
    format_timestamp,
    parse_timestamp,
    truncate_to_milliseconds,
)

NOW = datetime(2025, 1, 31, 12, 0, 0, tzinfo=timezone.utc)


class TestLicenseEntity:
    """Tests for License domain entity."""

    def test_create_license(self):
        """Test creating a license entity."""
        license = License.create("ABCD1234XXXXXXXX", created_at=NOW)

        assert license.key == "ABCD1234XXXXXXXX"
        assert license.status == LicenseStatus.INACTIVE.value
        assert license.is_inactive
        assert license.created_at == NOW
        assert license.activation_date is None
        assert license.device_id is None
        assert license.last_active is None

    def test_create_defaults_created_at(self):
        """Test creation time defaults to now, at millisecond precision."""
        before = truncate_to_milliseconds(datetime.now(timezone.utc))
        license = License.create("KEY")
        assert license.created_at >= before
        assert license.created_at.microsecond % 1000 == 0

    def test_empty_key_rejected(self):
        """Test validation of the key."""
        with pytest.raises(ValueError):
            License.create("  ")

    def test_empty_status_rejected(self):
        """Test validation of the status."""
        with pytest.raises(ValueError):
            License(key="KEY", status="", created_at=NOW)

    def test_activate(self):
        """Test binding to a device."""
        license = License.create("KEY", created_at=NOW)
        later = NOW + timedelta(hours=1)

        activated = license.activate("device_1a2b", later)

        assert activated.is_active
        assert activated.device_id == "device_1a2b"
        assert activated.activation_date == later
        assert activated.last_active == later
        assert activated.created_at == NOW
        # The original snapshot is untouched
        assert license.is_inactive
        assert license.device_id is None

    def test_deactivate(self):
        """Test releasing the device binding."""
        activated = License.create("KEY", created_at=NOW).activate("device_1a2b", NOW)
        later = NOW + timedelta(days=1)

        deactivated = activated.deactivate(later)

        assert deactivated.is_inactive
        assert deactivated.device_id is None
        assert deactivated.activation_date is None
        assert deactivated.last_active == later

    def test_is_bound_to(self):
        """Test device binding check."""
        activated = License.create("KEY").activate("device_1a2b", NOW)
        assert activated.is_bound_to("device_1a2b")
        assert not activated.is_bound_to("device_9f9f")
        assert not License.create("KEY").is_bound_to("device_1a2b")

    def test_with_status_inactive_releases_binding(self):
        """Test moving to inactive clears device and activation date."""
        activated = License.create("KEY").activate("device_1a2b", NOW)

        updated = activated.with_status("inactive")

        assert updated.is_inactive
        assert updated.device_id is None
        assert updated.activation_date is None
        assert updated.last_active == NOW

    def test_with_status_active_keeps_fields(self):
        """Test setting active does not bind a device."""
        updated = License.create("KEY").with_status("active")
        assert updated.is_active
        assert updated.device_id is None

    def test_with_status_custom_value(self):
        """Test statuses outside the two known values are stored as given."""
        updated = License.create("KEY").with_status("suspended")
        assert updated.status == "suspended"
        assert not updated.is_active
        assert not updated.is_inactive


class TestLicenseSerialization:
    """Tests for the interchange format."""

    def test_to_dict(self):
        """Test camelCase keys and millisecond timestamps."""
        license = License.create("KEY", created_at=NOW).activate("device_1a2b", NOW)

        assert license.to_dict() == {
            "key": "KEY",
            "status": "active",
            "createdAt": "2025-01-31T12:00:00.000Z",
            "activationDate": "2025-01-31T12:00:00.000Z",
            "deviceId": "device_1a2b",
            "lastActive": "2025-01-31T12:00:00.000Z",
        }

    def test_from_dict(self):
        """Test parsing a record."""
        license = License.from_dict(
            {
                "key": "KEY",
                "status": "active",
                "createdAt": "2025-01-31T12:00:00.000Z",
                "activationDate": "2025-02-01T08:30:00+00:00",
                "deviceId": "device_1a2b",
                "lastActive": None,
            }
        )

        assert license.key == "KEY"
        assert license.is_active
        assert license.created_at == NOW
        assert license.activation_date == datetime(2025, 2, 1, 8, 30, tzinfo=timezone.utc)
        assert license.device_id == "device_1a2b"
        assert license.last_active is None

    def test_from_dict_defaults(self):
        """Test missing optional fields."""
        license = License.from_dict({"key": "KEY"})
        assert license.is_inactive
        assert license.created_at is None
        assert license.device_id is None

    def test_unknown_fields_preserved(self):
        """Test unknown keys survive a round trip."""
        record = {"key": "KEY", "status": "inactive", "owner": "qa", "seats": 1}

        license = License.from_dict(record)

        assert license.extra == {"owner": "qa", "seats": 1}
        assert license.to_dict()["owner"] == "qa"
        assert license.to_dict()["seats"] == 1

    def test_known_fields_override_extra(self):
        """Test extra values never shadow record fields."""
        license = License(key="KEY", status="inactive", created_at=None, extra={"key": "OTHER"})
        assert license.to_dict()["key"] == "KEY"

    @pytest.mark.parametrize(
        "record",
        [
            "not a record",
            ["KEY"],
            {},
            {"key": ""},
            {"key": 42},
            {"key": "KEY", "status": 1},
            {"key": "KEY", "deviceId": 7},
            {"key": "KEY", "createdAt": "yesterday"},
            {"key": "KEY", "lastActive": 1700000000},
        ],
    )
    def test_malformed_records(self, record):
        """Test malformed records are rejected."""
        with pytest.raises(InvalidLicenseRecordError):
            License.from_dict(record)


class TestTimestamps:
    """Tests for timestamp helpers."""

    def test_format_naive_as_utc(self):
        """Test naive datetimes are treated as UTC."""
        assert format_timestamp(datetime(2025, 1, 31, 12, 0, 0, 123456)) == (
            "2025-01-31T12:00:00.123Z"
        )

    def test_format_converts_to_utc(self):
        """Test offsets are converted to UTC."""
        value = datetime(2025, 1, 31, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(value) == "2025-01-31T12:00:00.000Z"

    def test_format_none(self):
        """Test None passes through."""
        assert format_timestamp(None) is None

    def test_parse_without_zone(self):
        """Test strings without a zone are read as UTC."""
        assert parse_timestamp("2025-01-31T12:00:00", "createdAt") == NOW

    def test_parse_short_fraction(self):
        """Test fractions shorter than milliseconds are accepted."""
        assert parse_timestamp("2025-01-31T12:00:00.12Z", "createdAt") == NOW.replace(
            microsecond=120000
        )

    def test_parse_truncates_to_milliseconds(self):
        """Test sub-millisecond digits are dropped on parse."""
        assert parse_timestamp("2025-01-31T12:00:00.123456Z", "createdAt") == NOW.replace(
            microsecond=123000
        )

    def test_current_timestamp(self):
        """Test the clock is UTC and survives formatting and parsing unchanged."""
        now = current_timestamp()

        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)
        assert now.microsecond % 1000 == 0
        assert parse_timestamp(format_timestamp(now), "createdAt") == now

    def test_parse_empty(self):
        """Test empty values parse to None."""
        assert parse_timestamp("", "createdAt") is None
        assert parse_timestamp(None, "createdAt") is None
