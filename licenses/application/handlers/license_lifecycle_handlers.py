"""
License lifecycle handlers.

Handlers for explicit status changes and deletion.
"""

from core.domain.exceptions import InvalidLicenseStatusError, LicenseNotFoundError
from core.infrastructure.events import event_bus
from licenses.application.commands.delete_license import DeleteLicenseCommand
from licenses.application.commands.update_license_status import UpdateLicenseStatusCommand
from licenses.domain.events import LicenseDeleted, LicenseStatusChanged
from licenses.domain.license import License
from licenses.ports.license_repository import LicenseRepository


class UpdateLicenseStatusHandler:
    """Handler for UpdateLicenseStatusCommand."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repository."""
        self.license_repository = license_repository

    async def handle(self, command: UpdateLicenseStatusCommand) -> License:
        """
        Handle update license status command.

        Setting ``inactive`` also releases the device binding.

        Args:
            command: UpdateLicenseStatusCommand

        Returns:
            Updated License entity

        Raises:
            LicenseNotFoundError: If license not found
            InvalidLicenseStatusError: If the status is blank
        """
        if not command.status or not command.status.strip():
            raise InvalidLicenseStatusError()

        license = await self.license_repository.get(command.license_key)
        if not license:
            raise LicenseNotFoundError(f"License {command.license_key} not found")

        updated = await self.license_repository.put(license.with_status(command.status))

        await event_bus.publish(
            LicenseStatusChanged(
                license_key=updated.key,
                old_status=license.status,
                new_status=updated.status,
            )
        )

        return updated


class DeleteLicenseHandler:
    """Handler for DeleteLicenseCommand."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repository."""
        self.license_repository = license_repository

    async def handle(self, command: DeleteLicenseCommand) -> None:
        """
        Handle delete license command. Deleting a missing key is a no-op.

        Args:
            command: DeleteLicenseCommand
        """
        await self.license_repository.delete(command.license_key)
        await event_bus.publish(LicenseDeleted(license_key=command.license_key))
