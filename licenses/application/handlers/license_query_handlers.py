"""
License query handlers.

Handlers for reading license records.
"""
from typing import List

from core.domain.exceptions import LicenseNotFoundError
from licenses.application.queries.get_license import GetLicenseQuery
from licenses.application.queries.list_licenses import ListLicensesQuery
from licenses.domain.license import License
from licenses.ports.license_repository import LicenseRepository


class GetLicenseHandler:
    """Handler for GetLicenseQuery."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repository."""
        self.license_repository = license_repository

    async def handle(self, query: GetLicenseQuery) -> License:
        """
        Handle get license query.

        Raises:
            LicenseNotFoundError: If license not found
        """
        license = await self.license_repository.get(query.license_key)
        if not license:
            raise LicenseNotFoundError(f"License {query.license_key} not found")
        return license


class ListLicensesHandler:
    """Handler for ListLicensesQuery."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repository."""
        self.license_repository = license_repository

    async def handle(self, query: ListLicensesQuery) -> List[License]:
        """
        Handle list licenses query.

        Args:
            query: ListLicensesQuery

        Returns:
            License entities sorted by key
        """
        licenses = await self.license_repository.get_all()
        if query.status:
            licenses = [license for license in licenses if license.status == query.status]
        return sorted(licenses, key=lambda license: license.key)
