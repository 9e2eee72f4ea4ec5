"""
Django management command to activate a license on this device.
"""
from core.management.base import LicenseCommand
from licenses.application.commands.activate_license import ActivateLicenseCommand
from licenses.application.handlers.activate_license_handler import ActivateLicenseHandler
from licenses.application.services.device_context import open_device_context


class Command(LicenseCommand):
    """Command to activate a license on the current device."""

    help = "Activate a license on this device"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("license_key", help="License key to activate")

    async def run(self, *args, **options):
        context = await open_device_context()
        handler = ActivateLicenseHandler(
            license_repository=context.license_repository,
            device_identity=context.device_identity,
            license_pointer=context.license_pointer,
        )
        result = await handler.handle(ActivateLicenseCommand(license_key=options["license_key"]))
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(result.message))
