"""
Django admin configuration for licenses app.
"""
import json

from django.contrib import admin
from django.utils.html import format_html

from licenses.infrastructure.models import License


@admin.register(License)
class LicenseAdmin(admin.ModelAdmin):
    """Admin interface for License model."""

    list_display = [
        "key",
        "status_display",
        "device_id",
        "activation_date",
        "last_active",
        "created_at",
    ]
    list_filter = ["status", "activation_date", "created_at"]
    search_fields = ["key", "device_id"]
    readonly_fields = ["key", "created_at", "extra_display"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("key", "status"),
            },
        ),
        (
            "Device Binding",
            {
                "fields": ("device_id", "activation_date", "last_active"),
            },
        ),
        (
            "Imported Fields",
            {
                "fields": ("extra_display",),
                "classes": ("collapse",),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at",),
                "classes": ("collapse",),
            },
        ),
    )

    def status_display(self, obj):
        """Display status with color coding."""
        colors = {
            "active": "green",
            "inactive": "gray",
        }
        color = colors.get(obj.status, "black")
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color,
            obj.status.upper(),
        )

    status_display.short_description = "Status"

    def extra_display(self, obj):
        """Display fields kept from imported records."""
        if obj.extra:
            return format_html(
                '<pre style="background: #f5f5f5; padding: 10px; '
                'border-radius: 4px; overflow-x: auto;">{}</pre>',
                json.dumps(obj.extra, indent=2),
            )
        return "-"

    extra_display.short_description = "Extra"
