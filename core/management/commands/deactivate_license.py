"""
Django management command to release the license of this device.
"""
from core.management.base import LicenseCommand
from licenses.application.commands.deactivate_license import DeactivateLicenseCommand
from licenses.application.handlers.deactivate_license_handler import DeactivateLicenseHandler
from licenses.application.services.device_context import open_device_context


class Command(LicenseCommand):
    """Command to deactivate the license active on the current device."""

    help = "Deactivate the license active on this device"

    async def run(self, *args, **options):
        context = await open_device_context()
        handler = DeactivateLicenseHandler(
            license_repository=context.license_repository,
            device_identity=context.device_identity,
            license_pointer=context.license_pointer,
        )
        result = await handler.handle(DeactivateLicenseCommand())
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(result.message))
