"""
Django management command to create licenses.
"""
from core.management.base import LicenseCommand
from licenses.application.commands.create_license import CreateLicenseCommand
from licenses.application.handlers.create_license_handler import CreateLicenseHandler
from licenses.infrastructure.store import open_license_store


class Command(LicenseCommand):
    """Command to create inactive licenses."""

    help = "Create licenses for the given keys, or one with a generated key"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "keys",
            nargs="*",
            help="License keys to create (default: one generated key)",
        )

    async def run(self, *args, **options):
        handler = CreateLicenseHandler(license_repository=await open_license_store())
        keys = options["keys"] or [None]

        for key in keys:
            license = await handler.handle(CreateLicenseCommand(license_key=key))
            # pylint: disable=no-member
            self.stdout.write(self.style.SUCCESS(f"License {license.key} ({license.status})"))
