import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("organizations", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Meeting",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("meeting_name", models.CharField(max_length=255)),
                (
                    "meeting_type",
                    models.CharField(choices=[("meeting", "Meeting"), ("webinar", "Webinar")], max_length=16),
                ),
                ("description", models.TextField(blank=True, default="")),
                ("zoom_meeting_id", models.CharField(blank=True, db_index=True, default="", max_length=64)),
                ("start_time", models.DateTimeField()),
                ("duration", models.PositiveIntegerField(default=60)),
                ("timezone", models.CharField(default="UTC", max_length=64)),
                ("landing_page_title", models.CharField(blank=True, default="", max_length=255)),
                ("landing_page_description", models.TextField(blank=True, default="")),
                ("form_fields", models.JSONField(blank=True, default=list)),
                ("is_active", models.BooleanField(db_index=True, default=True)),
                (
                    "organization",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="meetings",
                        to="organizations.organization",
                    ),
                ),
            ],
            options={
                "db_table": "meetings_meeting",
                "ordering": ["-start_time"],
                "indexes": [models.Index(fields=["organization", "is_active"], name="meetings_org_active_idx")],
            },
        ),
    ]
