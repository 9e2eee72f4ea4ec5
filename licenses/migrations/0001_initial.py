from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="License",
            fields=[
                ("key", models.CharField(max_length=255, primary_key=True, serialize=False)),
                ("status", models.CharField(db_index=True, default="inactive", max_length=64)),
                ("created_at", models.DateTimeField(blank=True, null=True)),
                ("activation_date", models.DateTimeField(blank=True, db_index=True, null=True)),
                ("device_id", models.CharField(blank=True, db_index=True, max_length=255, null=True)),
                ("last_active", models.DateTimeField(blank=True, null=True)),
                (
                    "extra",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text="Fields of imported records without a dedicated column",
                    ),
                ),
            ],
            options={
                "db_table": "licenses",
                "ordering": ["created_at", "key"],
                "indexes": [
                    models.Index(fields=["status", "device_id"], name="licenses_status_device_idx"),
                ],
            },
        ),
    ]
