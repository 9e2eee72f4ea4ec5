"""
Django management command to export the license store.
"""
import json

from core.management.base import LicenseCommand
from licenses.application.handlers.license_transfer_handlers import ExportLicensesHandler
from licenses.application.queries.export_licenses import ExportLicensesQuery
from licenses.infrastructure.store import open_license_store


class Command(LicenseCommand):
    """Command to export every license as a JSON document."""

    help = "Export every license as a JSON document"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--output",
            type=str,
            default=None,
            help="File to write (default: stdout)",
        )

    async def run(self, *args, **options):
        handler = ExportLicensesHandler(license_repository=await open_license_store())
        export = await handler.handle(ExportLicensesQuery())
        document = json.dumps(export.to_dict(), indent=2)

        output = options["output"]
        if not output:
            self.stdout.write(document)
            return

        with open(output, "w", encoding="utf-8") as f:
            f.write(document)
        # pylint: disable=no-member
        self.stdout.write(
            self.style.SUCCESS(f"Exported {len(export.licenses)} license(s) to {output}")
        )
