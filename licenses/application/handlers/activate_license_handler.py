"""
ActivateLicenseHandler.

Handler for activating a license on the current device.
"""
import logging

from core.domain.exceptions import LicenseConflictError, LicenseNotFoundError
from core.infrastructure.events import event_bus
from core.metrics import license_conflicts_total
from devices.application.services.device_identity_service import DeviceIdentityService
from licenses.application.commands.activate_license import ActivateLicenseCommand
from licenses.application.dto.license_dto import ActivationResultDTO
from licenses.application.services.active_license_pointer import ActiveLicensePointer
from licenses.domain.events import LicenseActivated
from licenses.domain.license import current_timestamp
from licenses.domain.services import DeviceBindingManager
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class ActivateLicenseHandler:
    """Handler for ActivateLicenseCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        device_identity: DeviceIdentityService,
        license_pointer: ActiveLicensePointer,
    ):
        """Initialize handler with repository and device services."""
        self.license_repository = license_repository
        self.device_identity = device_identity
        self.license_pointer = license_pointer

    async def handle(self, command: ActivateLicenseCommand) -> ActivationResultDTO:
        """
        Handle activate license command.

        Args:
            command: ActivateLicenseCommand

        Returns:
            ActivationResultDTO with the stored license

        Raises:
            LicenseNotFoundError: If no license exists for the key
            LicenseConflictError: If the license is bound to another device
        """
        device_id = await self.device_identity.current_device_id()

        license = await self.license_repository.get(command.license_key)
        if not license:
            raise LicenseNotFoundError(f"License {command.license_key} not found")

        try:
            needs_binding = DeviceBindingManager.requires_activation(license, device_id)
        except LicenseConflictError:
            license_conflicts_total.inc()
            logger.warning(
                "Activation of %s refused: bound to another device", command.license_key
            )
            raise

        if not needs_binding:
            return ActivationResultDTO(
                success=True,
                message="License already activated on this device",
                license=license,
            )

        activated = await self.license_repository.put(
            license.activate(device_id, current_timestamp())
        )
        await self.license_pointer.remember(activated.key)

        await event_bus.publish(LicenseActivated(license_key=activated.key, device_id=device_id))

        return ActivationResultDTO(
            success=True,
            message="License activated successfully",
            license=activated,
        )
