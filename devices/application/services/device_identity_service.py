"""
Device identity service.

Resolves the identifier of the current device, computing it once and
caching it in device-scoped local storage.
"""
import logging
from typing import Callable

from django.conf import settings

from core.infrastructure.local_storage import LocalStoragePort
from devices.domain.fingerprint import EnvironmentSignals, compute_device_fingerprint
from devices.infrastructure.environment import collect_environment_signals

logger = logging.getLogger(__name__)


class DeviceIdentityService:
    """
    Service returning the best-effort identifier of the current device.

    The identifier is derived from environment signals and is not
    guaranteed to be unique across devices.
    """

    def __init__(
        self,
        local_storage: LocalStoragePort,
        signal_collector: Callable[[], EnvironmentSignals] = collect_environment_signals,
    ):
        """
        Initialize service.

        Args:
            local_storage: Device-scoped storage holding the cached identifier
            signal_collector: Callable returning the environment signals
        """
        self.local_storage = local_storage
        self.signal_collector = signal_collector

    @property
    def storage_key(self) -> str:
        return getattr(settings, "DEVICE_ID_STORAGE_KEY", "device-id")

    async def current_device_id(self) -> str:
        """
        Get the current device identifier.

        The first call computes the identifier and persists it; later calls
        return the stored value.

        Returns:
            Device identifier string
        """
        device_id = await self.local_storage.get_item(self.storage_key)
        if device_id:
            return device_id

        device_id = compute_device_fingerprint(self.signal_collector())
        await self.local_storage.set_item(self.storage_key, device_id)
        logger.info("Generated device identifier %s", device_id)
        return device_id
