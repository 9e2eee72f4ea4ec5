"""
Django management command to change the status of a license.
"""
from core.management.base import LicenseCommand
from licenses.application.commands.update_license_status import UpdateLicenseStatusCommand
from licenses.application.handlers.license_lifecycle_handlers import UpdateLicenseStatusHandler
from licenses.infrastructure.store import open_license_store


class Command(LicenseCommand):
    """Command to set the status of a license."""

    help = "Set the status of a license; 'inactive' also releases its device"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("license_key", help="License key")
        parser.add_argument("status", help="New status, e.g. active or inactive")

    async def run(self, *args, **options):
        handler = UpdateLicenseStatusHandler(license_repository=await open_license_store())
        license = await handler.handle(
            UpdateLicenseStatusCommand(
                license_key=options["license_key"],
                status=options["status"],
            )
        )
        self.write_license(license)
