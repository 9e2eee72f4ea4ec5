"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from enum import Enum


class LicenseStatus(Enum):
    """
    License status value object.

    The record store accepts any status string; only these two
    values carry meaning for activation policy.
    """

    INACTIVE = "inactive"
    ACTIVE = "active"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value
