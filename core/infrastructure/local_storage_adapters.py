"""
Local storage adapter implementations.

Provides a Django cache backed implementation of LocalStoragePort and an
in-memory one for tests.
"""

import logging
from typing import Dict, Optional

from asgiref.sync import sync_to_async
from django.conf import settings
from django.core.cache import caches

from core.domain.exceptions import StoreError
from core.infrastructure.local_storage import LocalStoragePort

logger = logging.getLogger(__name__)


class DjangoCacheLocalStorage(LocalStoragePort):
    """
    Django cache adapter implementing LocalStoragePort.

    Uses a dedicated cache alias (file based by default) configured with
    no expiry, so values survive process restarts.
    """

    def __init__(self, alias: Optional[str] = None):
        """
        Initialize adapter.

        Args:
            alias: Cache alias (defaults to settings.DEVICE_STORAGE_CACHE_ALIAS)
        """
        self.alias = alias or getattr(settings, "DEVICE_STORAGE_CACHE_ALIAS", "default")

    @property
    def _cache(self):
        return caches[self.alias]

    async def get_item(self, key: str) -> Optional[str]:
        try:
            return await sync_to_async(self._cache.get)(key)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error reading local storage key %s: %s", key, e, exc_info=True)
            raise StoreError(f"Error reading local storage: {e}") from e

    async def set_item(self, key: str, value: str) -> None:
        try:
            await sync_to_async(self._cache.set)(key, value, timeout=None)
            logger.debug("Local storage set: %s", key)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error writing local storage key %s: %s", key, e, exc_info=True)
            raise StoreError(f"Error writing local storage: {e}") from e

    async def remove_item(self, key: str) -> None:
        try:
            await sync_to_async(self._cache.delete)(key)
            logger.debug("Local storage delete: %s", key)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error removing local storage key %s: %s", key, e, exc_info=True)
            raise StoreError(f"Error removing local storage: {e}") from e


class InMemoryLocalStorage(LocalStoragePort):
    """Dictionary backed local storage, used by tests and one-off scripts."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


_local_storage: Optional[LocalStoragePort] = None


def get_local_storage() -> LocalStoragePort:
    """Return the process-wide device storage adapter."""
    global _local_storage  # pylint: disable=global-statement
    if _local_storage is None:
        _local_storage = DjangoCacheLocalStorage()
    return _local_storage
