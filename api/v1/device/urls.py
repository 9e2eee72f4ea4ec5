"""
URL configuration for device API endpoints.
"""

from django.urls import path

from api.v1.device import views

urlpatterns = [
    path(
        "activate",
        views.ActivateLicenseView.as_view(),
        name="activate-license",
    ),
    path(
        "deactivate",
        views.DeactivateLicenseView.as_view(),
        name="deactivate-license",
    ),
    path(
        "license",
        views.DeviceLicenseView.as_view(),
        name="device-license",
    ),
    path(
        "status",
        views.DeviceStatusView.as_view(),
        name="device-status",
    ),
]
