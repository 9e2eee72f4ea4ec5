"""
License domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
from typing import Optional

from core.domain.exceptions import LicenseConflictError
from licenses.domain.license import License


class DeviceBindingManager:
    """
    Domain service for the one-device-per-license rule.

    Binding is enforced on the record itself: an active record carries the
    identifier of the single device it belongs to. There is no central
    allocator, so concurrent activation from two devices is last write wins.
    """

    @staticmethod
    def requires_activation(license: License, device_id: str) -> bool:
        """
        Decide what activating a license on a device has to do.

        Args:
            license: License entity
            device_id: Identifier of the requesting device

        Returns:
            True if the license is inactive and must be bound,
            False if it is already bound to this device

        Raises:
            LicenseConflictError: If the license is bound to another device
        """
        if license.is_inactive:
            return True
        if license.is_bound_to(device_id):
            return False
        raise LicenseConflictError()

    @staticmethod
    def belongs_to_device(license: Optional[License], device_id: str) -> bool:
        """
        Check whether a stored record is the active license of a device.

        Args:
            license: License entity or None
            device_id: Identifier of the device

        Returns:
            True if the record exists, is active and bound to the device
        """
        return license is not None and license.is_active and license.is_bound_to(device_id)
