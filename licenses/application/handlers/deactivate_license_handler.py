"""
DeactivateLicenseHandler.

Handler for releasing the license activated on the current device.
"""
import logging

from core.infrastructure.events import event_bus
from devices.application.services.device_identity_service import DeviceIdentityService
from licenses.application.commands.deactivate_license import DeactivateLicenseCommand
from licenses.application.dto.license_dto import ActivationResultDTO
from licenses.application.services.active_license_pointer import ActiveLicensePointer
from licenses.domain.events import LicenseDeactivated
from licenses.domain.license import current_timestamp
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class DeactivateLicenseHandler:
    """Handler for DeactivateLicenseCommand."""

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

    async def handle(self, command: DeactivateLicenseCommand) -> ActivationResultDTO:
        """
        Handle deactivate license command.

        A pointer to a record that is gone or bound elsewhere is dropped
        and reported as success.

        Args:
            command: DeactivateLicenseCommand

        Returns:
            ActivationResultDTO, with the updated license when one was released
        """
        device_id = await self.device_identity.current_device_id()
        license_key = await self.license_pointer.get()

        if not license_key:
            return ActivationResultDTO(success=True, message="No active license found")

        license = await self.license_repository.get(license_key)
        if not license or not license.is_bound_to(device_id):
            logger.info("Dropping stale license pointer %s", license_key)
            await self.license_pointer.forget()
            return ActivationResultDTO(
                success=True, message="License not associated with this device"
            )

        deactivated = await self.license_repository.put(license.deactivate(current_timestamp()))
        await self.license_pointer.forget()

        await event_bus.publish(
            LicenseDeactivated(license_key=deactivated.key, device_id=device_id)
        )

        return ActivationResultDTO(
            success=True,
            message="License deactivated successfully",
            license=deactivated,
        )
