# zr_core/registrants/models.py
import uuid

from django.db import models
from django.utils import timezone


class SyncStatus(models.TextChoices):
    NEVER_ATTEMPTED = "never_attempted", "Never attempted"
    SYNCED = "synced", "Synced"
    ERROR = "error", "Error"


class Registrant(models.Model):
    """
    One person registered for one meeting.

    The row is always written, whatever Zoom says. Sync outcome lives in
    synced_to_zoom / sync_error / zoom_registrant_id / zoom_join_url.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    meeting = models.ForeignKey("meetings.Meeting", on_delete=models.CASCADE, related_name="registrants")
    # denormalized from meeting.organization
    organization = models.ForeignKey(
        "organizations.Organization",
        on_delete=models.CASCADE,
        related_name="registrants",
    )

    first_name = models.CharField(max_length=255)
    last_name = models.CharField(max_length=255)
    email = models.EmailField()

    phone = models.CharField(max_length=64, blank=True, default="")
    address = models.CharField(max_length=255, blank=True, default="")
    city = models.CharField(max_length=128, blank=True, default="")
    country = models.CharField(max_length=128, blank=True, default="")
    zip_code = models.CharField(max_length=32, blank=True, default="")
    state = models.CharField(max_length=128, blank=True, default="")
    company = models.CharField(max_length=255, blank=True, default="")
    job_title = models.CharField(max_length=255, blank=True, default="")
    industry = models.CharField(max_length=255, blank=True, default="")
    purchasing_time_frame = models.CharField(max_length=128, blank=True, default="")
    role_in_purchase_process = models.CharField(max_length=128, blank=True, default="")
    number_of_employees = models.CharField(max_length=64, blank=True, default="")
    comments = models.TextField(blank=True, default="")

    # answers to non-standard form fields, keyed by field_name
    custom_fields = models.JSONField(default=dict, blank=True)

    synced_to_zoom = models.BooleanField(default=False, db_index=True)
    sync_error = models.TextField(blank=True, default="")
    zoom_registrant_id = models.CharField(max_length=128, blank=True, default="")
    zoom_join_url = models.URLField(max_length=1024, blank=True, default="")

    registered_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = "registrants_registrant"
        ordering = ["-registered_at"]
        constraints = [
            models.UniqueConstraint(fields=["meeting", "email"], name="uniq_registrant_meeting_email"),
        ]
        indexes = [
            models.Index(fields=["organization", "registered_at"], name="registrants_org_reg_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} <{self.email}>"

    @property
    def sync_status(self) -> str:
        if self.synced_to_zoom:
            return SyncStatus.SYNCED
        if self.sync_error:
            return SyncStatus.ERROR
        return SyncStatus.NEVER_ATTEMPTED
