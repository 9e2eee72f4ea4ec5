"""
Pytest configuration and shared fixtures.
"""

import pytest
from asgiref.sync import async_to_sync
from django.conf import settings
from django.core.cache import caches

from core.infrastructure.local_storage_adapters import InMemoryLocalStorage
from devices.application.services.device_identity_service import DeviceIdentityService
from devices.domain.fingerprint import EnvironmentSignals
from licenses.application.handlers.activate_license_handler import ActivateLicenseHandler
from licenses.application.handlers.create_license_handler import CreateLicenseHandler
from licenses.application.handlers.deactivate_license_handler import DeactivateLicenseHandler
from licenses.application.handlers.device_license_handlers import (
    GetDeviceLicenseHandler,
    IsDeviceLicensedHandler,
)
from licenses.application.services.active_license_pointer import ActiveLicensePointer
from licenses.domain.license import License
from licenses.infrastructure.repositories.django_license_repository import (
    DjangoLicenseRepository,
)
from licenses.infrastructure.repositories.in_memory_license_repository import (
    InMemoryLicenseRepository,
)
from licenses.infrastructure.store import reset_license_store

DEVICE_ID = "device_1a2b"
OTHER_DEVICE_ID = "device_9f9f"
LICENSE_KEY = "ABCD1234XXXXXXXX"


@pytest.fixture(autouse=True)
def clean_device_state():
    """Start every test with empty device storage and no open store handle."""
    caches[settings.DEVICE_STORAGE_CACHE_ALIAS].clear()
    reset_license_store()
    yield
    caches[settings.DEVICE_STORAGE_CACHE_ALIAS].clear()
    reset_license_store()


@pytest.fixture
def host_signals():
    """Fixture for fixed environment signals."""
    return EnvironmentSignals(
        user_agent="Linux/6.1 (x86_64; build-host)",
        language="en_US",
        hardware_concurrency=8,
        screen_width=1920,
        screen_height=1080,
        color_depth=24,
        timezone="UTC",
    )


@pytest.fixture
def license_repository():
    """Fixture for an empty in-memory LicenseRepository."""
    return InMemoryLicenseRepository()


@pytest.fixture
def local_storage():
    """Fixture for device storage with a known device identifier."""
    return InMemoryLocalStorage({settings.DEVICE_ID_STORAGE_KEY: DEVICE_ID})


@pytest.fixture
def switch_device(local_storage):
    """Fixture returning a function that changes the current device identifier."""

    async def switch(device_id):
        await local_storage.set_item(settings.DEVICE_ID_STORAGE_KEY, device_id)

    return switch


@pytest.fixture
def device_identity(local_storage, host_signals):
    """Fixture for DeviceIdentityService."""
    return DeviceIdentityService(local_storage, signal_collector=lambda: host_signals)


@pytest.fixture
def license_pointer(local_storage):
    """Fixture for ActiveLicensePointer."""
    return ActiveLicensePointer(local_storage)


@pytest.fixture
def create_handler(license_repository):
    """Fixture for CreateLicenseHandler."""
    return CreateLicenseHandler(license_repository=license_repository)


@pytest.fixture
def activate_handler(license_repository, device_identity, license_pointer):
    """Fixture for ActivateLicenseHandler."""
    return ActivateLicenseHandler(
        license_repository=license_repository,
        device_identity=device_identity,
        license_pointer=license_pointer,
    )


@pytest.fixture
def deactivate_handler(license_repository, device_identity, license_pointer):
    """Fixture for DeactivateLicenseHandler."""
    return DeactivateLicenseHandler(
        license_repository=license_repository,
        device_identity=device_identity,
        license_pointer=license_pointer,
    )


@pytest.fixture
def device_license_handler(license_repository, device_identity, license_pointer):
    """Fixture for GetDeviceLicenseHandler."""
    return GetDeviceLicenseHandler(
        license_repository=license_repository,
        device_identity=device_identity,
        license_pointer=license_pointer,
    )


@pytest.fixture
def is_licensed_handler(device_license_handler):
    """Fixture for IsDeviceLicensedHandler."""
    return IsDeviceLicensedHandler(device_license_handler)


@pytest.fixture
def django_license_repository():
    """Fixture for the Django LicenseRepository."""
    return DjangoLicenseRepository()


@pytest.fixture
def db_license(db, django_license_repository):
    """Fixture for an inactive License saved in the database."""
    license, _ = async_to_sync(django_license_repository.create)(License.create(LICENSE_KEY))
    return license


@pytest.fixture
def device_storage():
    """Fixture for the device cache used by the API and management commands."""
    cache = caches[settings.DEVICE_STORAGE_CACHE_ALIAS]
    cache.set(settings.DEVICE_ID_STORAGE_KEY, DEVICE_ID, timeout=None)
    return cache


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
