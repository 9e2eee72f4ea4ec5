"""
Serializers for Device API endpoints.
"""

from rest_framework import serializers

from api.v1.licenses.serializers import LicenseRecordSerializer


class ActivateLicenseRequestSerializer(serializers.Serializer):
    """Serializer for activate license request."""

    license_key = serializers.CharField(required=True, max_length=255)


class ActivationResultSerializer(serializers.Serializer):
    """Serializer for activate/deactivate responses."""

    success = serializers.BooleanField()
    message = serializers.CharField()
    license = LicenseRecordSerializer(allow_null=True)


class DeviceLicenseSerializer(serializers.Serializer):
    """Serializer for the license active on this device."""

    device_id = serializers.CharField()
    license = LicenseRecordSerializer(allow_null=True)


class DeviceStatusSerializer(serializers.Serializer):
    """Serializer for device licensing status."""

    device_id = serializers.CharField()
    is_licensed = serializers.BooleanField()
