import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("organizations", "0001_initial"),
        ("meetings", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Registrant",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("first_name", models.CharField(max_length=255)),
                ("last_name", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=254)),
                ("phone", models.CharField(blank=True, default="", max_length=64)),
                ("address", models.CharField(blank=True, default="", max_length=255)),
                ("city", models.CharField(blank=True, default="", max_length=128)),
                ("country", models.CharField(blank=True, default="", max_length=128)),
                ("zip_code", models.CharField(blank=True, default="", max_length=32)),
                ("state", models.CharField(blank=True, default="", max_length=128)),
                ("company", models.CharField(blank=True, default="", max_length=255)),
                ("job_title", models.CharField(blank=True, default="", max_length=255)),
                ("industry", models.CharField(blank=True, default="", max_length=255)),
                ("purchasing_time_frame", models.CharField(blank=True, default="", max_length=128)),
                ("role_in_purchase_process", models.CharField(blank=True, default="", max_length=128)),
                ("number_of_employees", models.CharField(blank=True, default="", max_length=64)),
                ("comments", models.TextField(blank=True, default="")),
                ("custom_fields", models.JSONField(blank=True, default=dict)),
                ("synced_to_zoom", models.BooleanField(db_index=True, default=False)),
                ("sync_error", models.TextField(blank=True, default="")),
                ("zoom_registrant_id", models.CharField(blank=True, default="", max_length=128)),
                ("zoom_join_url", models.URLField(blank=True, default="", max_length=1024)),
                ("registered_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                (
                    "meeting",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="registrants",
                        to="meetings.meeting",
                    ),
                ),
                (
                    "organization",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="registrants",
                        to="organizations.organization",
                    ),
                ),
            ],
            options={
                "db_table": "registrants_registrant",
                "ordering": ["-registered_at"],
                "indexes": [models.Index(fields=["organization", "registered_at"], name="registrants_org_reg_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("meeting", "email"), name="uniq_registrant_meeting_email"),
                ],
            },
        ),
    ]
