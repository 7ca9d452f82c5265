# zr_core/meetings/services.py
from __future__ import annotations

import logging
from datetime import datetime, timezone as dt_timezone
from typing import Any, Optional

from django.db import transaction
from rest_framework.exceptions import ValidationError

from zr_core.common.api.exceptions import ZoomUpstreamError
from zr_core.meetings.models import Meeting, MeetingType
from zr_core.zoom import registry
from zr_core.zoom.exceptions import ZoomError
from zr_core.zoom.sync import create_remote_meeting, credentials_for

logger = logging.getLogger(__name__)

CREDENTIALS_MISSING_MSG = "Zoom credentials not configured. Please add them in settings first."
ZOOM_CREATE_FAILED_MSG = "Failed to create meeting in Zoom. Please check your credentials."

UPDATABLE_FIELDS = (
    "meeting_name",
    "description",
    "start_time",
    "duration",
    "timezone",
    "landing_page_title",
    "landing_page_description",
    "form_fields",
    "is_active",
)


def zoom_start_time(value: datetime) -> str:
    # Zoom expects UTC "yyyy-MM-ddTHH:mm:ssZ" when a timezone is also sent
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt_timezone.utc)
    return value.astimezone(dt_timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class MeetingService:
    @staticmethod
    def create(
        *,
        organization,
        meeting_name: str,
        meeting_type: str,
        start_time: datetime,
        description: str = "",
        duration: int = 60,
        timezone: str = "UTC",
        landing_page_title: str = "",
        landing_page_description: str = "",
        form_fields: Optional[list] = None,
        create_in_zoom: bool = False,
    ) -> Meeting:
        """
        Create a meeting, optionally creating its Zoom counterpart first.

        With create_in_zoom, nothing is stored locally unless Zoom accepted
        the meeting.
        """
        if meeting_type not in MeetingType.values:
            raise ValidationError({"meeting_type": 'Meeting type must be either "meeting" or "webinar"'})

        zoom_meeting_id = ""
        if create_in_zoom:
            creds = credentials_for(organization)
            if not creds.is_complete:
                raise ValidationError({"detail": CREDENTIALS_MISSING_MSG})

            try:
                zoom_meeting_id = create_remote_meeting(
                    creds,
                    meeting_type=meeting_type,
                    topic=meeting_name,
                    start_time=zoom_start_time(start_time),
                    duration=duration,
                    timezone=timezone,
                )
            except ZoomError as exc:
                logger.warning("Zoom %s creation failed organization=%s: %s", meeting_type, organization.id, exc.message)
                raise ZoomUpstreamError(ZOOM_CREATE_FAILED_MSG) from exc

        with transaction.atomic():
            meeting = Meeting.objects.create(
                organization=organization,
                meeting_name=meeting_name,
                meeting_type=meeting_type,
                description=description or "",
                zoom_meeting_id=zoom_meeting_id,
                start_time=start_time,
                duration=duration,
                timezone=timezone or "UTC",
                landing_page_title=landing_page_title or meeting_name,
                landing_page_description=landing_page_description or description or "",
                form_fields=form_fields or [],
            )

        logger.info("Meeting created id=%s organization=%s zoom_id=%s", meeting.id, organization.id, zoom_meeting_id or "-")
        return meeting

    @staticmethod
    @transaction.atomic
    def update(*, meeting: Meeting, changes: dict[str, Any]) -> Meeting:
        # meeting_type and zoom_meeting_id are fixed after creation
        fields = [f for f in UPDATABLE_FIELDS if f in changes]
        for f in fields:
            setattr(meeting, f, changes[f])

        if fields:
            meeting.save(update_fields=[*fields, "updated_at"])
        return meeting

    @staticmethod
    @transaction.atomic
    def delete(*, meeting: Meeting) -> None:
        # registrants cascade
        meeting_id = meeting.id
        meeting.delete()
        logger.info("Meeting deleted id=%s", meeting_id)

    @staticmethod
    def zoom_details(*, meeting: Meeting) -> dict:
        """Live read of the linked Zoom meeting/webinar (diagnostics only)."""
        if not meeting.is_zoom_linked:
            raise ValidationError({"detail": "Meeting does not have a Zoom ID"})

        creds = credentials_for(meeting.organization)
        if not creds.is_complete:
            raise ValidationError({"detail": "Zoom credentials not configured"})

        client = registry.client_for_credentials(creds)
        try:
            return client.get_details(meeting.meeting_type, meeting.zoom_meeting_id.strip())
        except ZoomError as exc:
            raise ZoomUpstreamError(exc.message) from exc
