"""
URL configuration for license API endpoints.
"""

from django.urls import path

from api.v1.licenses import views

urlpatterns = [
    path(
        "",
        views.LicenseListCreateView.as_view(),
        name="license-list",
    ),
    path(
        "generate-key",
        views.GenerateLicenseKeyView.as_view(),
        name="generate-license-key",
    ),
    path(
        "export",
        views.ExportLicensesView.as_view(),
        name="export-licenses",
    ),
    path(
        "import",
        views.ImportLicensesView.as_view(),
        name="import-licenses",
    ),
    path(
        "clear",
        views.ClearLicensesView.as_view(),
        name="clear-licenses",
    ),
    path(
        "<str:license_key>",
        views.LicenseDetailView.as_view(),
        name="license-detail",
    ),
    path(
        "<str:license_key>/status",
        views.LicenseStatusView.as_view(),
        name="license-status",
    ),
]
