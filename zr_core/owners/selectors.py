# zr_core/owners/selectors.py
from __future__ import annotations

from django.db.models import Q, QuerySet

from zr_core.meetings.models import Meeting
from zr_core.meetings.selectors import meetings_with_registrant_counts, parse_uuid_or_none


def owner_meetings(*, q: str = "", organization_id=None) -> QuerySet[Meeting]:
    qs = meetings_with_registrant_counts()
    q = (q or "").strip()
    if q:
        qs = qs.filter(
            Q(meeting_name__icontains=q)
            | Q(zoom_meeting_id__icontains=q)
            | Q(organization__organization_name__icontains=q)
        )
    if organization_id:
        oid = parse_uuid_or_none(organization_id)
        qs = qs.filter(organization_id=oid) if oid else qs.none()
    return qs.order_by("-created_at")
