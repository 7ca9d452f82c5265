# zr_core/meetings/selectors.py
from __future__ import annotations

from typing import Optional
from uuid import UUID

from django.db.models import Count, QuerySet

from zr_core.meetings.models import Meeting


def parse_uuid_or_none(value) -> Optional[UUID]:
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        return None


def meetings_for_organization(*, organization_id) -> QuerySet[Meeting]:
    return Meeting.objects.filter(organization_id=organization_id).order_by("-start_time")


def get_meeting_for_organization_or_none(*, organization_id, meeting_id) -> Optional[Meeting]:
    mid = parse_uuid_or_none(meeting_id)
    if mid is None:
        return None
    return Meeting.objects.filter(id=mid, organization_id=organization_id).first()


def get_public_meeting_or_none(*, organization_id, meeting_id) -> Optional[Meeting]:
    """Active meeting of an organization, for landing pages and public registration."""
    mid = parse_uuid_or_none(meeting_id)
    if mid is None:
        return None
    return (
        Meeting.objects.select_related("organization")
        .filter(id=mid, organization_id=organization_id, is_active=True)
        .first()
    )


def meetings_with_registrant_counts() -> QuerySet[Meeting]:
    return Meeting.objects.select_related("organization").annotate(registrant_count=Count("registrants"))
