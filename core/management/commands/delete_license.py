"""
Django management command to delete a license.
"""
from core.management.base import LicenseCommand
from licenses.application.commands.delete_license import DeleteLicenseCommand
from licenses.application.handlers.license_lifecycle_handlers import DeleteLicenseHandler
from licenses.infrastructure.store import open_license_store


class Command(LicenseCommand):
    """Command to delete a license."""

    help = "Delete a license. Unknown keys are ignored"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("license_key", help="License key to delete")

    async def run(self, *args, **options):
        handler = DeleteLicenseHandler(license_repository=await open_license_store())
        await handler.handle(DeleteLicenseCommand(license_key=options["license_key"]))
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"License {options['license_key']} deleted"))
