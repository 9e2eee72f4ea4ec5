"""
License transfer handlers.

Handlers for exporting, importing and clearing the whole license store.
"""
import logging

from django.conf import settings
from django.utils import timezone

from core.infrastructure.events import event_bus
from licenses.application.commands.clear_licenses import ClearLicensesCommand
from licenses.application.commands.import_licenses import ImportLicensesCommand
from licenses.application.dto.license_dto import LicenseExportDTO
from licenses.application.queries.export_licenses import ExportLicensesQuery
from licenses.domain.events import LicensesCleared, LicensesImported
from licenses.domain.license import License, format_timestamp
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


def export_version() -> int:
    """Schema version written to export documents."""
    return getattr(settings, "LICENSE_EXPORT_VERSION", 1)


class ExportLicensesHandler:
    """Handler for ExportLicensesQuery."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repository."""
        self.license_repository = license_repository

    async def handle(self, query: ExportLicensesQuery) -> LicenseExportDTO:
        """
        Handle export licenses query. Read-only.

        Args:
            query: ExportLicensesQuery

        Returns:
            LicenseExportDTO with every stored record
        """
        licenses = await self.license_repository.get_all()
        return LicenseExportDTO(
            export_date=format_timestamp(timezone.now()),
            version=export_version(),
            licenses=licenses,
        )


class ImportLicensesHandler:
    """Handler for ImportLicensesCommand."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repository."""
        self.license_repository = license_repository

    async def handle(self, command: ImportLicensesCommand) -> int:
        """
        Handle import licenses command.

        The store is cleared first, then every record is inserted. The two
        phases are not one transaction: a malformed record stops the import
        with the store partially populated. Take an export beforehand if
        that matters.

        Args:
            command: ImportLicensesCommand

        Returns:
            Number of records inserted

        Raises:
            InvalidLicenseRecordError: If a record is malformed
        """
        data = command.data if isinstance(command.data, dict) else {}
        records = data.get("licenses")

        await self.license_repository.clear()

        imported = 0
        if isinstance(records, list):
            for record in records:
                _, created = await self.license_repository.create(License.from_dict(record))
                if created:
                    imported += 1
        else:
            logger.warning("Import document has no licenses list, store left empty")

        logger.info("Imported %d license(s)", imported)
        await event_bus.publish(LicensesImported(count=imported))
        return imported


class ClearLicensesHandler:
    """Handler for ClearLicensesCommand."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repository."""
        self.license_repository = license_repository

    async def handle(self, command: ClearLicensesCommand) -> None:
        """
        Handle clear licenses command.

        Args:
            command: ClearLicensesCommand
        """
        await self.license_repository.clear()
        logger.info("License store cleared")
        await event_bus.publish(LicensesCleared())
