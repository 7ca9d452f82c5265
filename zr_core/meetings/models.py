# zr_core/meetings/models.py
from django.db import models

from zr_core.common.models import UUIDModel


class MeetingType(models.TextChoices):
    MEETING = "meeting", "Meeting"
    WEBINAR = "webinar", "Webinar"


class FormFieldType(models.TextChoices):
    TEXT = "text", "Text"
    EMAIL = "email", "Email"
    TEL = "tel", "Phone"
    TEXTAREA = "textarea", "Textarea"
    SELECT = "select", "Select"


class Meeting(UUIDModel):
    """
    A meeting or webinar with a public registration page.

    zoom_meeting_id is blank when the meeting was never linked to Zoom;
    registrations still work, they are just never synced.
    """

    organization = models.ForeignKey(
        "organizations.Organization",
        on_delete=models.CASCADE,
        related_name="meetings",
    )

    meeting_name = models.CharField(max_length=255)
    # fixed at creation
    meeting_type = models.CharField(max_length=16, choices=MeetingType.choices)
    description = models.TextField(blank=True, default="")

    zoom_meeting_id = models.CharField(max_length=64, blank=True, default="", db_index=True)

    start_time = models.DateTimeField()
    duration = models.PositiveIntegerField(default=60)
    timezone = models.CharField(max_length=64, default="UTC")

    landing_page_title = models.CharField(max_length=255, blank=True, default="")
    landing_page_description = models.TextField(blank=True, default="")

    # list of {field_name, field_label, field_type, is_required,
    #          is_standard_zoom_field, zoom_field_key, options, order}
    form_fields = models.JSONField(default=list, blank=True)

    is_active = models.BooleanField(default=True, db_index=True)

    class Meta:
        db_table = "meetings_meeting"
        ordering = ["-start_time"]
        indexes = [
            models.Index(fields=["organization", "is_active"], name="meetings_org_active_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.meeting_name} [{self.meeting_type}]"

    @property
    def is_zoom_linked(self) -> bool:
        return bool((self.zoom_meeting_id or "").strip())
