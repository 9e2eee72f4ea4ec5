"""
License Django ORM model.

This is the infrastructure layer model for license records.
Domain entities are in licenses.domain.license.
"""
from django.db import models


class License(models.Model):
    """
    One issuable license key and its device binding.
    """

    key = models.CharField(primary_key=True, max_length=255)
    status = models.CharField(max_length=64, default="inactive", db_index=True)
    created_at = models.DateTimeField(null=True, blank=True)
    activation_date = models.DateTimeField(null=True, blank=True, db_index=True)
    device_id = models.CharField(max_length=255, null=True, blank=True, db_index=True)
    last_active = models.DateTimeField(null=True, blank=True)
    extra = models.JSONField(
        default=dict,
        blank=True,
        help_text="Fields of imported records without a dedicated column",
    )

    class Meta:
        db_table = "licenses"
        ordering = ["created_at", "key"]
        indexes = [
            models.Index(fields=["status", "device_id"], name="licenses_status_device_idx"),
        ]

    def clean(self):
        """Validate license fields."""
        from django.core.exceptions import ValidationError

        if not self.key or len(self.key.strip()) == 0:
            raise ValidationError("License key cannot be empty")
        if not self.status:
            raise ValidationError("License status cannot be empty")

    def __str__(self):
        return f"{self.key} ({self.status})"
