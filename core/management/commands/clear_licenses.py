"""
Django management command to remove every license.
"""
from core.management.base import LicenseCommand
from licenses.application.commands.clear_licenses import ClearLicensesCommand
from licenses.application.handlers.license_transfer_handlers import ClearLicensesHandler
from licenses.infrastructure.store import open_license_store


class Command(LicenseCommand):
    """Command to clear the license store."""

    help = "Remove every license from the store"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--yes",
            action="store_true",
            help="Do not ask for confirmation",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        if not options["yes"]:
            answer = input("Remove every license from the store? [y/N] ")
            if answer.strip().lower() not in ("y", "yes"):
                # pylint: disable=no-member
                self.stdout.write(self.style.WARNING("Aborted"))
                return
        self.call(self.run, **options)

    async def run(self, *args, **options):
        handler = ClearLicensesHandler(license_repository=await open_license_store())
        await handler.handle(ClearLicensesCommand())
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS("License store cleared"))
