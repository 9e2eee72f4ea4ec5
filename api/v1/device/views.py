"""
Device API views.

These endpoints are used by the application running on this device to:
- Activate a license on the device
- Check whether the device is licensed
- Release the device's license
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.device.serializers import (
    ActivateLicenseRequestSerializer,
    ActivationResultSerializer,
    DeviceLicenseSerializer,
    DeviceStatusSerializer,
)
from licenses.application.commands.activate_license import ActivateLicenseCommand
from licenses.application.commands.deactivate_license import DeactivateLicenseCommand
from licenses.application.handlers.activate_license_handler import ActivateLicenseHandler
from licenses.application.handlers.deactivate_license_handler import DeactivateLicenseHandler
from licenses.application.handlers.device_license_handlers import (
    GetDeviceLicenseHandler,
    GetDeviceStatusHandler,
)
from licenses.application.queries.get_device_license import GetDeviceLicenseQuery
from licenses.application.services.device_context import open_device_context


def _device_license_handler(context) -> GetDeviceLicenseHandler:
    return GetDeviceLicenseHandler(
        license_repository=context.license_repository,
        device_identity=context.device_identity,
        license_pointer=context.license_pointer,
    )


class ActivateLicenseView(APIView):
    """View for activating a license on this device."""

    @extend_schema(
        operation_id="activate_device_license",
        summary="Activate License",
        description=(
            "Bind a license to this device. Activating a license already bound "
            "to this device succeeds without changes."
        ),
        tags=["Device"],
        request=ActivateLicenseRequestSerializer,
        responses={
            200: ActivationResultSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "License not found"},
            409: {"description": "License is already in use on another device"},
            503: {"description": "License store unavailable"},
        },
    )
    def post(self, request: Request) -> Response:
        """Activate a license on this device."""
        return async_to_sync(self._handle_activate)(request)

    async def _handle_activate(self, request: Request) -> Response:
        """Async handler for activate license."""
        serializer = ActivateLicenseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        context = await open_device_context()
        handler = ActivateLicenseHandler(
            license_repository=context.license_repository,
            device_identity=context.device_identity,
            license_pointer=context.license_pointer,
        )
        result = await handler.handle(
            ActivateLicenseCommand(license_key=serializer.validated_data["license_key"])
        )
        return Response(result.to_dict(), status=status.HTTP_200_OK)


class DeactivateLicenseView(APIView):
    """View for releasing the license of this device."""

    @extend_schema(
        operation_id="deactivate_device_license",
        summary="Deactivate License",
        description="Release the license active on this device, if any.",
        tags=["Device"],
        request=None,
        responses={200: ActivationResultSerializer},
    )
    def post(self, request: Request) -> Response:
        """Deactivate the license on this device."""
        return async_to_sync(self._handle_deactivate)()

    async def _handle_deactivate(self) -> Response:
        """Async handler for deactivate license."""
        context = await open_device_context()
        handler = DeactivateLicenseHandler(
            license_repository=context.license_repository,
            device_identity=context.device_identity,
            license_pointer=context.license_pointer,
        )
        result = await handler.handle(DeactivateLicenseCommand())
        return Response(result.to_dict(), status=status.HTTP_200_OK)


class DeviceLicenseView(APIView):
    """View returning the license active on this device."""

    @extend_schema(
        operation_id="get_device_license",
        summary="Get Device License",
        tags=["Device"],
        responses={200: DeviceLicenseSerializer},
    )
    def get(self, request: Request) -> Response:
        """Get the license active on this device."""
        return async_to_sync(self._handle_get_device_license)()

    async def _handle_get_device_license(self) -> Response:
        context = await open_device_context()
        license = await _device_license_handler(context).handle(GetDeviceLicenseQuery())
        device_id = await context.device_identity.current_device_id()
        return Response(
            {"device_id": device_id, "license": license.to_dict() if license else None},
            status=status.HTTP_200_OK,
        )


class DeviceStatusView(APIView):
    """View answering whether this device is licensed."""

    @extend_schema(
        operation_id="get_device_status",
        summary="Get Device Status",
        tags=["Device"],
        responses={200: DeviceStatusSerializer},
    )
    def get(self, request: Request) -> Response:
        """Check whether this device holds an active license."""
        return async_to_sync(self._handle_get_status)()

    async def _handle_get_status(self) -> Response:
        context = await open_device_context()
        result = await GetDeviceStatusHandler(_device_license_handler(context)).handle()
        return Response(
            {"device_id": result.device_id, "is_licensed": result.is_licensed},
            status=status.HTTP_200_OK,
        )
