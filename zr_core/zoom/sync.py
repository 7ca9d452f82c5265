# zr_core/zoom/sync.py
"""
Best-effort registrant sync.

The local registrant row is the source of truth. A Zoom call here can fail
for any reason and the caller still persists the row; the outcome is folded
into the registrant's sync fields via SyncResult.apply_to().
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from zr_core.zoom import registry
from zr_core.zoom.exceptions import ZoomAPIError, ZoomError
from zr_core.zoom.payloads import LOCAL_REGISTRANT_FIELDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZoomCredentials:
    account_id: str = ""
    client_id: str = ""
    client_secret: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.account_id and self.client_id and self.client_secret)


def credentials_for(organization) -> ZoomCredentials:
    return ZoomCredentials(
        account_id=(organization.zoom_account_id or "").strip(),
        client_id=(organization.zoom_client_id or "").strip(),
        client_secret=(organization.zoom_client_secret or "").strip(),
    )


def is_sync_eligible(credentials: ZoomCredentials, meeting) -> bool:
    return bool((meeting.zoom_meeting_id or "").strip()) and credentials.is_complete


def registrant_payload(source: Any) -> dict[str, Any]:
    """Zoom-mappable fields from a Registrant instance or a plain mapping."""
    if isinstance(source, Mapping):
        return {k: source.get(k) for k in LOCAL_REGISTRANT_FIELDS if k in source}
    return {k: getattr(source, k, None) for k in LOCAL_REGISTRANT_FIELDS}


@dataclass(frozen=True)
class SyncResult:
    success: bool
    zoom_registrant_id: str = ""
    zoom_join_url: str = ""
    error: str = ""

    def apply_to(self, registrant) -> None:
        if self.success:
            registrant.zoom_registrant_id = self.zoom_registrant_id
            registrant.zoom_join_url = self.zoom_join_url
            registrant.synced_to_zoom = True
            registrant.sync_error = ""
        else:
            registrant.sync_error = self.error


def sync_registrant(credentials: ZoomCredentials, meeting, registrant_fields: Mapping[str, Any]) -> SyncResult:
    """
    Push one registrant to the meeting's Zoom counterpart.

    Zoom failures come back as SyncResult(success=False); this never raises
    for them. Callers check is_sync_eligible() first.
    """
    meeting_id = (meeting.zoom_meeting_id or "").strip()
    client = registry.client_for_credentials(credentials)

    try:
        resp = client.add_registrant(meeting.meeting_type, meeting_id, registrant_fields)
    except ZoomError as exc:
        logger.warning(
            "Registrant sync failed meeting=%s zoom_id=%s: %s",
            meeting.pk,
            meeting_id,
            exc.message,
        )
        return SyncResult(success=False, error=exc.message)

    remote_id = resp.get("id") or resp.get("registrant_id") or ""
    logger.info("Registrant synced meeting=%s zoom_id=%s registrant=%s", meeting.pk, meeting_id, remote_id)
    return SyncResult(
        success=True,
        zoom_registrant_id=str(remote_id),
        zoom_join_url=resp.get("join_url") or "",
    )


def create_remote_meeting(
    credentials: ZoomCredentials,
    *,
    meeting_type: str,
    topic: str,
    start_time: str,
    duration: int,
    timezone: str,
) -> str:
    """Create the Zoom meeting/webinar and return its id. Raises ZoomError on failure."""
    client = registry.client_for_credentials(credentials)
    resp = client.create(meeting_type, topic=topic, start_time=start_time, duration=duration, timezone=timezone)
    remote_id = resp.get("id")
    if not remote_id:
        raise ZoomAPIError(f"Failed to create Zoom {meeting_type}")
    return str(remote_id)
