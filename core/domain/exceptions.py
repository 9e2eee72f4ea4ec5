"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class StoreError(DomainException):
    """Raised when the license store cannot be opened, read or written."""

    def __init__(self, message: str = "License store error"):
        super().__init__(message, code="STORE_ERROR")


class LicenseException(DomainException):
    """Base exception for license-related errors."""

    pass


class LicenseNotFoundError(LicenseException):
    """Raised when a license is not found."""

    def __init__(self, message: str = "License not found"):
        super().__init__(message, code="LICENSE_NOT_FOUND")


class LicenseConflictError(LicenseException):
    """Raised when a license is already bound to a different device."""

    def __init__(self, message: str = "License is already in use on another device"):
        super().__init__(message, code="LICENSE_CONFLICT")


class InvalidLicenseKeyError(LicenseException):
    """Raised when a license key is invalid."""

    def __init__(self, message: str = "Invalid license key"):
        super().__init__(message, code="INVALID_LICENSE_KEY")


class InvalidLicenseRecordError(LicenseException):
    """Raised when an imported license record cannot be parsed."""

    def __init__(self, message: str = "Invalid license record"):
        super().__init__(message, code="INVALID_LICENSE_RECORD")


class InvalidLicenseStatusError(LicenseException):
    """Raised when a license status is blank."""

    def __init__(self, message: str = "License status cannot be empty"):
        super().__init__(message, code="INVALID_LICENSE_STATUS")
