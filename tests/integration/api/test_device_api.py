"""
Integration tests for Device API endpoints.
"""

from datetime import datetime, timezone

import pytest
from asgiref.sync import async_to_sync
from django.conf import settings
from django.urls import reverse

from core.domain.exceptions import StoreError
from licenses.infrastructure.models import License as LicenseModel

DEVICE_ID = "device_1a2b"
OTHER_DEVICE_ID = "device_9f9f"


@pytest.mark.django_db
@pytest.mark.integration
class TestDeviceAPI:
    """Integration tests for activation on this device."""

    def test_activate(self, api_client, db_license, device_storage):
        """Test activating a license binds it to this device."""
        response = api_client.post(
            reverse("activate-license"), {"license_key": db_license.key}, format="json"
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "License activated successfully"
        assert data["license"]["deviceId"] == DEVICE_ID
        model = LicenseModel.objects.get(key=db_license.key)
        assert model.status == "active"
        assert model.device_id == DEVICE_ID
        assert device_storage.get(settings.ACTIVE_LICENSE_STORAGE_KEY) == db_license.key

    def test_activate_twice(self, api_client, db_license, device_storage):
        """Test activating again on the same device changes nothing."""
        url = reverse("activate-license")
        api_client.post(url, {"license_key": db_license.key}, format="json")
        before = LicenseModel.objects.get(key=db_license.key).activation_date

        response = api_client.post(url, {"license_key": db_license.key}, format="json")

        assert response.status_code == 200
        assert response.json()["message"] == "License already activated on this device"
        assert LicenseModel.objects.get(key=db_license.key).activation_date == before

    def test_activate_conflict(
        self, api_client, db_license, device_storage, django_license_repository
    ):
        """Test a license bound to another device is refused."""
        async_to_sync(django_license_repository.put)(
            db_license.activate(OTHER_DEVICE_ID, datetime.now(timezone.utc))
        )

        response = api_client.post(
            reverse("activate-license"), {"license_key": db_license.key}, format="json"
        )

        assert response.status_code == 409
        assert response.json() == {
            "error": {
                "code": "LICENSE_CONFLICT",
                "message": "License is already in use on another device",
            }
        }
        assert LicenseModel.objects.get(key=db_license.key).device_id == OTHER_DEVICE_ID

    def test_activate_unknown_license(self, api_client, db, device_storage):
        """Test activating a key that does not exist."""
        response = api_client.post(
            reverse("activate-license"), {"license_key": "MISSING"}, format="json"
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "LICENSE_NOT_FOUND"

    def test_activate_requires_key(self, api_client, db, device_storage):
        """Test the request body is validated."""
        response = api_client.post(reverse("activate-license"), {}, format="json")
        assert response.status_code == 400

    def test_device_license_and_status(self, api_client, db_license, device_storage):
        """Test reading the device's license before and after activation."""
        status = api_client.get(reverse("device-status")).json()
        assert status == {"device_id": DEVICE_ID, "is_licensed": False}
        assert api_client.get(reverse("device-license")).json()["license"] is None

        api_client.post(
            reverse("activate-license"), {"license_key": db_license.key}, format="json"
        )

        status = api_client.get(reverse("device-status")).json()
        assert status == {"device_id": DEVICE_ID, "is_licensed": True}
        license = api_client.get(reverse("device-license")).json()
        assert license["device_id"] == DEVICE_ID
        assert license["license"]["key"] == db_license.key

    def test_deactivate(self, api_client, db_license, device_storage):
        """Test releasing the license of this device."""
        api_client.post(
            reverse("activate-license"), {"license_key": db_license.key}, format="json"
        )

        response = api_client.post(reverse("deactivate-license"))

        assert response.status_code == 200
        assert response.json()["message"] == "License deactivated successfully"
        model = LicenseModel.objects.get(key=db_license.key)
        assert model.status == "inactive"
        assert model.device_id is None
        assert model.last_active is not None
        assert api_client.get(reverse("device-status")).json()["is_licensed"] is False

    def test_deactivate_without_license(self, api_client, db, device_storage):
        """Test deactivating with nothing active."""
        response = api_client.post(reverse("deactivate-license"))

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "No active license found",
            "license": None,
        }

    def test_device_id_computed_when_missing(self, api_client, db):
        """Test a device without a stored identifier gets one."""
        device_id = api_client.get(reverse("device-status")).json()["device_id"]
        assert device_id.startswith("device_")
        assert api_client.get(reverse("device-status")).json()["device_id"] == device_id

    def test_store_unavailable(self, api_client, db, device_storage, monkeypatch):
        """Test an unavailable store is reported as 503."""

        async def unavailable(alias="default"):
            raise StoreError("Database error: unable to open database file")

        monkeypatch.setattr(
            "licenses.application.services.device_context.open_license_store", unavailable
        )

        response = api_client.get(reverse("device-status"))

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "STORE_ERROR"


@pytest.mark.django_db
@pytest.mark.integration
class TestServiceEndpoints:
    """Integration tests for health and metrics endpoints."""

    def test_health(self, client):
        """Test the health endpoint."""
        response = client.get("/health/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_db(self, client):
        """Test the database health endpoint."""
        response = client.get("/health/db/")
        assert response.status_code == 200
        assert response.json()["database"] == "connected"

    def test_metrics(self, client):
        """Test Prometheus metrics are exposed."""
        response = client.get("/metrics/")
        assert response.status_code == 200
        assert b"licenses_created_total" in response.content

    def test_correlation_id(self, client):
        """Test the correlation id is echoed back."""
        response = client.get("/health/", HTTP_X_CORRELATION_ID="req-123")
        assert response["X-Correlation-ID"] == "req-123"
        assert "X-Request-Duration" in response
