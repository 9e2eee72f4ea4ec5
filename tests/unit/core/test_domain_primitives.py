"""
Unit tests for core value objects and domain exceptions.
"""

import pytest

from core.domain.exceptions import (
    DomainException,
    InvalidLicenseKeyError,
    InvalidLicenseRecordError,
    LicenseConflictError,
    LicenseException,
    LicenseNotFoundError,
    StoreError,
)
from core.domain.value_objects import LicenseStatus


class TestLicenseStatus:
    """Tests for LicenseStatus value object."""

    def test_values(self):
        """Test status values."""
        assert LicenseStatus.INACTIVE.value == "inactive"
        assert LicenseStatus.ACTIVE.value == "active"

    def test_str(self):
        """Test string conversion."""
        assert str(LicenseStatus.ACTIVE) == "active"

    def test_lookup_by_value(self):
        """Test parsing from the stored string."""
        assert LicenseStatus("inactive") is LicenseStatus.INACTIVE


class TestDomainExceptions:
    """Tests for domain exception codes and messages."""

    @pytest.mark.parametrize(
        "exc_class,code",
        [
            (StoreError, "STORE_ERROR"),
            (LicenseNotFoundError, "LICENSE_NOT_FOUND"),
            (LicenseConflictError, "LICENSE_CONFLICT"),
            (InvalidLicenseKeyError, "INVALID_LICENSE_KEY"),
            (InvalidLicenseRecordError, "INVALID_LICENSE_RECORD"),
        ],
    )
    def test_codes(self, exc_class, code):
        """Test each exception carries its error code."""
        exc = exc_class()
        assert exc.code == code
        assert isinstance(exc, DomainException)

    def test_license_exceptions_share_base(self):
        """Test license errors derive from LicenseException but store errors do not."""
        assert issubclass(LicenseConflictError, LicenseException)
        assert not issubclass(StoreError, LicenseException)

    def test_custom_message(self):
        """Test the message is kept and used as the exception text."""
        exc = LicenseNotFoundError("License ABC not found")
        assert exc.message == "License ABC not found"
        assert str(exc) == "License ABC not found"

    def test_default_code(self):
        """Test the class name is used when no code is given."""
        assert DomainException("boom").code == "DomainException"
