"""
Device license handlers.

Handlers answering "which license is active on this device". The local
pointer is reconciled against the store on every call; a pointer that no
longer matches the stored record is dropped.
"""
import logging
from typing import Optional

from devices.application.services.device_identity_service import DeviceIdentityService
from licenses.application.dto.license_dto import DeviceStatusDTO
from licenses.application.queries.get_device_license import GetDeviceLicenseQuery
from licenses.application.services.active_license_pointer import ActiveLicensePointer
from licenses.domain.license import License
from licenses.domain.services import DeviceBindingManager
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class GetDeviceLicenseHandler:
    """Handler for GetDeviceLicenseQuery."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        device_identity: DeviceIdentityService,
        license_pointer: ActiveLicensePointer,
    ):
        """Initialize handler with repository and device services."""
        self.license_repository = license_repository
        self.device_identity = device_identity
        self.license_pointer = license_pointer

    async def handle(self, query: GetDeviceLicenseQuery) -> Optional[License]:
        """
        Handle get device license query.

        Args:
            query: GetDeviceLicenseQuery

        Returns:
            The active License bound to this device, or None
        """
        device_id = await self.device_identity.current_device_id()
        license_key = await self.license_pointer.get()
        if not license_key:
            return None

        license = await self.license_repository.get(license_key)
        if DeviceBindingManager.belongs_to_device(license, device_id):
            return license

        logger.info("License pointer %s no longer matches the store, dropping it", license_key)
        await self.license_pointer.forget()
        return None


class IsDeviceLicensedHandler:
    """Handler answering whether the current device holds an active license."""

    def __init__(self, device_license_handler: GetDeviceLicenseHandler):
        self.device_license_handler = device_license_handler

    async def handle(self) -> bool:
        license = await self.device_license_handler.handle(GetDeviceLicenseQuery())
        return license is not None


class GetDeviceStatusHandler:
    """Handler returning device id and licensing status together."""

    def __init__(self, device_license_handler: GetDeviceLicenseHandler):
        self.device_license_handler = device_license_handler

    async def handle(self) -> DeviceStatusDTO:
        license = await self.device_license_handler.handle(GetDeviceLicenseQuery())
        device_id = await self.device_license_handler.device_identity.current_device_id()
        return DeviceStatusDTO(
            device_id=device_id,
            is_licensed=license is not None,
            license=license,
        )
