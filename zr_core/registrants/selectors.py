# zr_core/registrants/selectors.py
from __future__ import annotations

from typing import Optional

from django.db.models import Q, QuerySet

from zr_core.meetings.selectors import parse_uuid_or_none
from zr_core.registrants.models import Registrant, SyncStatus


def registrants_for_organization(*, organization_id) -> QuerySet[Registrant]:
    return Registrant.objects.select_related("meeting").filter(organization_id=organization_id).order_by("-registered_at")


def registrants_for_meeting(*, organization_id, meeting_id) -> QuerySet[Registrant]:
    return registrants_for_organization(organization_id=organization_id).filter(meeting_id=meeting_id)


def get_registrant_for_organization_or_none(*, organization_id, registrant_id) -> Optional[Registrant]:
    rid = parse_uuid_or_none(registrant_id)
    if rid is None:
        return None
    return Registrant.objects.select_related("meeting").filter(id=rid, organization_id=organization_id).first()


def filter_sync_status(qs: QuerySet[Registrant], status: str) -> QuerySet[Registrant]:
    if status == SyncStatus.SYNCED:
        return qs.filter(synced_to_zoom=True)
    if status == SyncStatus.ERROR:
        return qs.filter(synced_to_zoom=False).exclude(sync_error="")
    if status == SyncStatus.NEVER_ATTEMPTED:
        return qs.filter(synced_to_zoom=False, sync_error="")
    return qs


def search_registrants(qs: QuerySet[Registrant], q: str) -> QuerySet[Registrant]:
    q = (q or "").strip()
    if not q:
        return qs
    return qs.filter(
        Q(first_name__icontains=q)
        | Q(last_name__icontains=q)
        | Q(email__icontains=q)
        | Q(company__icontains=q)
    )


def all_registrants() -> QuerySet[Registrant]:
    return Registrant.objects.select_related("meeting", "organization").order_by("-registered_at")
