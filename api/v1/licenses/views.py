"""
License API views.

Administrative endpoints for the license store: create, read, update
status, delete, and the bulk export/import/clear operations.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.licenses.serializers import (
    CreateLicenseRequestSerializer,
    GeneratedKeySerializer,
    ImportResultSerializer,
    LicenseExportSerializer,
    LicenseListQuerySerializer,
    LicenseRecordSerializer,
    UpdateLicenseStatusRequestSerializer,
)
from licenses.application.commands.clear_licenses import ClearLicensesCommand
from licenses.application.commands.create_license import CreateLicenseCommand
from licenses.application.commands.delete_license import DeleteLicenseCommand
from licenses.application.commands.import_licenses import ImportLicensesCommand
from licenses.application.commands.update_license_status import UpdateLicenseStatusCommand
from licenses.application.handlers.create_license_handler import CreateLicenseHandler
from licenses.application.handlers.license_lifecycle_handlers import (
    DeleteLicenseHandler,
    UpdateLicenseStatusHandler,
)
from licenses.application.handlers.license_query_handlers import (
    GetLicenseHandler,
    ListLicensesHandler,
)
from licenses.application.handlers.license_transfer_handlers import (
    ClearLicensesHandler,
    ExportLicensesHandler,
    ImportLicensesHandler,
)
from licenses.application.queries.export_licenses import ExportLicensesQuery
from licenses.application.queries.get_license import GetLicenseQuery
from licenses.application.queries.list_licenses import ListLicensesQuery
from licenses.domain.license_key import generate_license_key
from licenses.infrastructure.store import open_license_store


class LicenseListCreateView(APIView):
    """View for listing and creating licenses."""

    @extend_schema(
        operation_id="list_licenses",
        summary="List Licenses",
        description="List every stored license, optionally filtered by status.",
        tags=["Licenses"],
        parameters=[
            OpenApiParameter(
                name="status",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Only return licenses with this status",
            ),
        ],
        responses={200: LicenseRecordSerializer(many=True)},
    )
    def get(self, request: Request) -> Response:
        """List licenses."""
        return async_to_sync(self._handle_list)(request)

    async def _handle_list(self, request: Request) -> Response:
        serializer = LicenseListQuerySerializer(data=request.query_params)
        if not serializer.is_valid():
            return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        handler = ListLicensesHandler(license_repository=await open_license_store())
        licenses = await handler.handle(
            ListLicensesQuery(status=serializer.validated_data.get("status"))
        )
        return Response([license.to_dict() for license in licenses], status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_license",
        summary="Create License",
        description=(
            "Create an inactive license. A key is generated when none is given. "
            "Creating an existing key returns the stored record unchanged."
        ),
        tags=["Licenses"],
        request=CreateLicenseRequestSerializer,
        responses={
            201: LicenseRecordSerializer,
            400: {"description": "Bad Request"},
            503: {"description": "License store unavailable"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create a license."""
        return async_to_sync(self._handle_create)(request)

    async def _handle_create(self, request: Request) -> Response:
        serializer = CreateLicenseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        handler = CreateLicenseHandler(license_repository=await open_license_store())
        license = await handler.handle(
            CreateLicenseCommand(license_key=serializer.validated_data.get("key"))
        )
        return Response(license.to_dict(), status=status.HTTP_201_CREATED)


class LicenseDetailView(APIView):
    """View for reading and deleting a single license."""

    @extend_schema(
        operation_id="get_license",
        summary="Get License",
        tags=["Licenses"],
        responses={200: LicenseRecordSerializer, 404: {"description": "License not found"}},
    )
    def get(self, request: Request, license_key: str) -> Response:
        """Get a license by key."""
        return async_to_sync(self._handle_get)(license_key)

    async def _handle_get(self, license_key: str) -> Response:
        handler = GetLicenseHandler(license_repository=await open_license_store())
        license = await handler.handle(GetLicenseQuery(license_key=license_key))
        return Response(license.to_dict(), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_license",
        summary="Delete License",
        description="Delete a license. Deleting an unknown key is not an error.",
        tags=["Licenses"],
        responses={204: None},
    )
    def delete(self, request: Request, license_key: str) -> Response:
        """Delete a license by key."""
        return async_to_sync(self._handle_delete)(license_key)

    async def _handle_delete(self, license_key: str) -> Response:
        handler = DeleteLicenseHandler(license_repository=await open_license_store())
        await handler.handle(DeleteLicenseCommand(license_key=license_key))
        return Response(status=status.HTTP_204_NO_CONTENT)


class LicenseStatusView(APIView):
    """View for changing the status of a license."""

    @extend_schema(
        operation_id="update_license_status",
        summary="Update License Status",
        description=(
            "Set the status of a license. Setting \"inactive\" also releases "
            "the device binding."
        ),
        tags=["Licenses"],
        request=UpdateLicenseStatusRequestSerializer,
        responses={
            200: LicenseRecordSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "License not found"},
        },
    )
    def patch(self, request: Request, license_key: str) -> Response:
        """Update license status."""
        return async_to_sync(self._handle_update_status)(request, license_key)

    async def _handle_update_status(self, request: Request, license_key: str) -> Response:
        serializer = UpdateLicenseStatusRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        handler = UpdateLicenseStatusHandler(license_repository=await open_license_store())
        license = await handler.handle(
            UpdateLicenseStatusCommand(
                license_key=license_key,
                status=serializer.validated_data["status"],
            )
        )
        return Response(license.to_dict(), status=status.HTTP_200_OK)


class GenerateLicenseKeyView(APIView):
    """View for generating a license key without storing it."""

    @extend_schema(
        operation_id="generate_license_key",
        summary="Generate License Key",
        description="Return a fresh 16 character key. Nothing is stored.",
        tags=["Licenses"],
        responses={200: GeneratedKeySerializer},
    )
    def get(self, request: Request) -> Response:
        """Generate a license key."""
        return Response({"key": generate_license_key()}, status=status.HTTP_200_OK)


class ExportLicensesView(APIView):
    """View for exporting the license store."""

    @extend_schema(
        operation_id="export_licenses",
        summary="Export Licenses",
        tags=["Licenses"],
        responses={200: LicenseExportSerializer},
    )
    def get(self, request: Request) -> Response:
        """Export every license as an interchange document."""
        return async_to_sync(self._handle_export)()

    async def _handle_export(self) -> Response:
        handler = ExportLicensesHandler(license_repository=await open_license_store())
        export = await handler.handle(ExportLicensesQuery())
        return Response(export.to_dict(), status=status.HTTP_200_OK)


class ImportLicensesView(APIView):
    """View for importing an export document."""

    @extend_schema(
        operation_id="import_licenses",
        summary="Import Licenses",
        description=(
            "Replace the license store with the records of an export document. "
            "The store is cleared first."
        ),
        tags=["Licenses"],
        request=LicenseExportSerializer,
        responses={
            200: ImportResultSerializer,
            400: {"description": "Malformed document or record"},
        },
    )
    def post(self, request: Request) -> Response:
        """Import licenses."""
        return async_to_sync(self._handle_import)(request)

    async def _handle_import(self, request: Request) -> Response:
        if not isinstance(request.data, dict):
            return Response(
                {"error": {"code": "INVALID_DOCUMENT", "message": "Expected a JSON object"}},
                status=status.HTTP_400_BAD_REQUEST,
            )

        handler = ImportLicensesHandler(license_repository=await open_license_store())
        imported = await handler.handle(ImportLicensesCommand(data=dict(request.data)))
        return Response({"imported": imported}, status=status.HTTP_200_OK)


class ClearLicensesView(APIView):
    """View for removing every license."""

    @extend_schema(
        operation_id="clear_licenses",
        summary="Clear Licenses",
        tags=["Licenses"],
        request=None,
        responses={204: None},
    )
    def post(self, request: Request) -> Response:
        """Clear the license store."""
        return async_to_sync(self._handle_clear)()

    async def _handle_clear(self) -> Response:
        handler = ClearLicensesHandler(license_repository=await open_license_store())
        await handler.handle(ClearLicensesCommand())
        return Response(status=status.HTTP_204_NO_CONTENT)
