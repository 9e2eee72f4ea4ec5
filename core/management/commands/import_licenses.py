"""
Django management command to import an export document.

The license store is cleared before the records are inserted.
"""
import json

from django.core.management.base import CommandError

from core.management.base import LicenseCommand
from licenses.application.commands.import_licenses import ImportLicensesCommand
from licenses.application.handlers.license_transfer_handlers import ImportLicensesHandler
from licenses.infrastructure.store import open_license_store


class Command(LicenseCommand):
    """Command to replace the license store with an export document."""

    help = "Replace the license store with the records of an export document"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("file", help="Export document (JSON)")

    def handle(self, *args, **options):
        """Execute the command."""
        try:
            with open(options["file"], encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise CommandError(f"Cannot read {options['file']}: {e}") from e
        except json.JSONDecodeError as e:
            raise CommandError(f"{options['file']} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise CommandError(f"{options['file']} does not contain a JSON object")

        self.call(self.run, data=data)

    async def run(self, *args, **options):
        handler = ImportLicensesHandler(license_repository=await open_license_store())
        imported = await handler.handle(ImportLicensesCommand(data=options["data"]))
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Imported {imported} license(s)"))
