"""
Django management command to generate license keys.
"""
from django.core.management.base import CommandError

from core.management.base import LicenseCommand
from licenses.application.commands.create_license import CreateLicenseCommand
from licenses.application.handlers.create_license_handler import CreateLicenseHandler
from licenses.domain.license_key import generate_license_key
from licenses.infrastructure.store import open_license_store


class Command(LicenseCommand):
    """Command to generate license keys, optionally storing them."""

    help = "Generate random 16 character license keys"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--count",
            type=int,
            default=1,
            help="Number of keys to generate (default: 1)",
        )
        parser.add_argument(
            "--create",
            action="store_true",
            help="Also create an inactive license for every generated key",
        )

    async def run(self, *args, **options):
        count = options["count"]
        if count < 1:
            raise CommandError("--count must be at least 1")

        keys = [generate_license_key() for _ in range(count)]

        if options["create"]:
            handler = CreateLicenseHandler(license_repository=await open_license_store())
            for key in keys:
                await handler.handle(CreateLicenseCommand(license_key=key))

        for key in keys:
            self.stdout.write(key)
