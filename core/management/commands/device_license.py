"""
Django management command to show the license of this device.
"""
from core.management.base import LicenseCommand
from licenses.application.handlers.device_license_handlers import (
    GetDeviceLicenseHandler,
    GetDeviceStatusHandler,
)
from licenses.application.services.device_context import open_device_context


class Command(LicenseCommand):
    """Command to show the device identifier and its active license."""

    help = "Show this device's identifier and active license"

    async def run(self, *args, **options):
        context = await open_device_context()
        handler = GetDeviceStatusHandler(
            GetDeviceLicenseHandler(
                license_repository=context.license_repository,
                device_identity=context.device_identity,
                license_pointer=context.license_pointer,
            )
        )
        result = await handler.handle()

        self.stdout.write(f"Device: {result.device_id}")
        if not result.is_licensed:
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING("No active license on this device"))
            return
        self.write_license(result.license)
