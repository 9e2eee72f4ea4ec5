"""
Unit tests for local storage adapters and the active license pointer.
"""

import pytest
from django.conf import settings
from django.core.cache import caches

from core.domain.exceptions import StoreError
from core.infrastructure.local_storage_adapters import (
    DjangoCacheLocalStorage,
    InMemoryLocalStorage,
    get_local_storage,
)
from licenses.application.services.active_license_pointer import ActiveLicensePointer


class BrokenCache:
    """Cache stand-in whose every call fails."""

    def get(self, *args, **kwargs):
        raise OSError("disk unavailable")

    set = get
    delete = get


@pytest.mark.asyncio
class TestDjangoCacheLocalStorage:
    """Tests for DjangoCacheLocalStorage."""

    async def test_set_get_remove(self):
        """Test values are written to the device cache."""
        storage = DjangoCacheLocalStorage()

        await storage.set_item("license-key", "ABCD1234XXXXXXXX")
        assert await storage.get_item("license-key") == "ABCD1234XXXXXXXX"
        assert caches[settings.DEVICE_STORAGE_CACHE_ALIAS].get("license-key") == (
            "ABCD1234XXXXXXXX"
        )

        await storage.remove_item("license-key")
        assert await storage.get_item("license-key") is None

    async def test_missing_key(self):
        """Test reading a key that was never written."""
        assert await DjangoCacheLocalStorage().get_item("nothing") is None

    async def test_remove_missing_key(self):
        """Test removing a key that was never written."""
        await DjangoCacheLocalStorage().remove_item("nothing")

    async def test_failures_raise_store_error(self, monkeypatch):
        """Test cache failures surface as StoreError."""
        storage = DjangoCacheLocalStorage()
        monkeypatch.setattr(DjangoCacheLocalStorage, "_cache", property(lambda self: BrokenCache()))

        with pytest.raises(StoreError):
            await storage.get_item("license-key")
        with pytest.raises(StoreError):
            await storage.set_item("license-key", "KEY")
        with pytest.raises(StoreError):
            await storage.remove_item("license-key")


def test_get_local_storage_is_shared():
    """Test the process-wide adapter targets the device cache."""
    storage = get_local_storage()
    assert storage is get_local_storage()
    assert storage.alias == settings.DEVICE_STORAGE_CACHE_ALIAS


@pytest.mark.asyncio
class TestActiveLicensePointer:
    """Tests for ActiveLicensePointer."""

    async def test_remember_and_forget(self):
        """Test the pointer lifecycle."""
        storage = InMemoryLocalStorage()
        pointer = ActiveLicensePointer(storage)

        assert await pointer.get() is None
        await pointer.remember("ABCD1234XXXXXXXX")
        assert await pointer.get() == "ABCD1234XXXXXXXX"
        assert await storage.get_item(settings.ACTIVE_LICENSE_STORAGE_KEY) == "ABCD1234XXXXXXXX"
        await pointer.forget()
        assert await pointer.get() is None

    async def test_forget_without_pointer(self):
        """Test forgetting an absent pointer."""
        await ActiveLicensePointer(InMemoryLocalStorage()).forget()
