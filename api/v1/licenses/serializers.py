"""
Serializers for License API endpoints.

Records are exchanged in the camelCase interchange format used by export
documents.
"""

from rest_framework import serializers


class LicenseRecordSerializer(serializers.Serializer):
    """Serializer describing a license record."""

    key = serializers.CharField()
    status = serializers.CharField()
    createdAt = serializers.CharField(allow_null=True)  # noqa: N815
    activationDate = serializers.CharField(allow_null=True, required=False)  # noqa: N815
    deviceId = serializers.CharField(allow_null=True, required=False)  # noqa: N815
    lastActive = serializers.CharField(allow_null=True, required=False)  # noqa: N815


class CreateLicenseRequestSerializer(serializers.Serializer):
    """Serializer for create license request. The key is generated when omitted."""

    key = serializers.CharField(required=False, max_length=255)


class UpdateLicenseStatusRequestSerializer(serializers.Serializer):
    """Serializer for update license status request."""

    status = serializers.CharField(max_length=64, help_text="Either \"active\" or \"inactive\"")


class LicenseListQuerySerializer(serializers.Serializer):
    """Serializer for list licenses query parameters."""

    status = serializers.CharField(required=False, max_length=64)


class GeneratedKeySerializer(serializers.Serializer):
    """Serializer for generate key response."""

    key = serializers.CharField()


class LicenseExportSerializer(serializers.Serializer):
    """Serializer describing an export document."""

    exportDate = serializers.CharField()  # noqa: N815
    version = serializers.IntegerField()
    licenses = LicenseRecordSerializer(many=True)


class ImportResultSerializer(serializers.Serializer):
    """Serializer for import response."""

    imported = serializers.IntegerField()
