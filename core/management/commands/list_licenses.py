"""
Django management command to list licenses.
"""
from core.management.base import LicenseCommand
from licenses.application.handlers.license_query_handlers import ListLicensesHandler
from licenses.application.queries.list_licenses import ListLicensesQuery
from licenses.domain.license import format_timestamp
from licenses.infrastructure.store import open_license_store


class Command(LicenseCommand):
    """Command to list stored licenses."""

    help = "List stored licenses"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--status",
            type=str,
            default=None,
            help="Only list licenses with this status",
        )

    async def run(self, *args, **options):
        handler = ListLicensesHandler(license_repository=await open_license_store())
        licenses = await handler.handle(ListLicensesQuery(status=options["status"]))

        if not licenses:
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING("No licenses found"))
            return

        for license in licenses:
            activated = format_timestamp(license.activation_date) or "-"
            self.stdout.write(
                f"{license.key}  {license.status:<8}  {license.device_id or '-'}  {activated}"
            )
        self.stdout.write(f"{len(licenses)} license(s)")
