"""
CreateLicenseHandler.

Handler for creating license records.
"""

from core.domain.exceptions import InvalidLicenseKeyError
from core.infrastructure.events import event_bus
from licenses.application.commands.create_license import CreateLicenseCommand
from licenses.domain.events import LicenseCreated
from licenses.domain.license import License
from licenses.domain.license_key import generate_license_key
from licenses.ports.license_repository import LicenseRepository


class CreateLicenseHandler:
    """Handler for CreateLicenseCommand."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repository."""
        self.license_repository = license_repository

    async def handle(self, command: CreateLicenseCommand) -> License:
        """
        Handle create license command.

        Creating a key that already exists is not an error: the stored
        record is returned unchanged.

        Args:
            command: CreateLicenseCommand

        Returns:
            Stored License entity

        Raises:
            InvalidLicenseKeyError: If the given key is blank
        """
        key = command.license_key
        if key is None:
            key = generate_license_key()
        elif not key.strip():
            raise InvalidLicenseKeyError("License key cannot be empty")

        license, created = await self.license_repository.create(License.create(key))

        if created:
            await event_bus.publish(LicenseCreated(license_key=license.key))

        return license
