"""
Device context wiring.

Bundles the collaborators the device-facing handlers need, built from the
process-wide store handle and device storage.
"""
from dataclasses import dataclass

from core.infrastructure.local_storage_adapters import get_local_storage
from devices.application.services.device_identity_service import DeviceIdentityService
from licenses.application.services.active_license_pointer import ActiveLicensePointer
from licenses.infrastructure.store import open_license_store
from licenses.ports.license_repository import LicenseRepository


@dataclass
class DeviceContext:
    """License store plus the device-scoped services."""

    license_repository: LicenseRepository
    device_identity: DeviceIdentityService
    license_pointer: ActiveLicensePointer


async def open_device_context() -> DeviceContext:
    """
    Open the license store and attach the current device's services.

    Raises:
        StoreError: If the license store cannot be opened
    """
    license_repository = await open_license_store()
    local_storage = get_local_storage()
    return DeviceContext(
        license_repository=license_repository,
        device_identity=DeviceIdentityService(local_storage),
        license_pointer=ActiveLicensePointer(local_storage),
    )
