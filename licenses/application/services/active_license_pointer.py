"""
Active license pointer.

Remembers, in device-scoped storage, which license key was activated on
this device. The pointer is only a hint: the license store stays
authoritative and every reader reconciles against it.
"""
import logging
from typing import Optional

from django.conf import settings

from core.infrastructure.local_storage import LocalStoragePort

logger = logging.getLogger(__name__)


class ActiveLicensePointer:
    """Service for the device's "current license" hint."""

    def __init__(self, local_storage: LocalStoragePort):
        self.local_storage = local_storage

    @property
    def storage_key(self) -> str:
        return getattr(settings, "ACTIVE_LICENSE_STORAGE_KEY", "license-key")

    async def get(self) -> Optional[str]:
        """Return the remembered license key, if any."""
        return await self.local_storage.get_item(self.storage_key)

    async def remember(self, license_key: str) -> None:
        """Remember a license key as active on this device."""
        await self.local_storage.set_item(self.storage_key, license_key)
        logger.debug("Remembered active license %s", license_key)

    async def forget(self) -> None:
        """Drop the remembered license key."""
        await self.local_storage.remove_item(self.storage_key)
        logger.debug("Forgot active license pointer")
