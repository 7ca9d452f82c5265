# zr_core/registrants/services.py
from __future__ import annotations

import logging
from typing import Any, Mapping

from django.db import IntegrityError, transaction
from rest_framework.exceptions import NotFound, ValidationError

from zr_core.common.api.exceptions import ConflictError, ZoomSyncFailed
from zr_core.meetings.selectors import get_public_meeting_or_none
from zr_core.organizations.selectors import get_active_by_subdomain_or_none
from zr_core.registrants.models import Registrant
from zr_core.registrants.selectors import get_registrant_for_organization_or_none
from zr_core.zoom.payloads import LOCAL_REGISTRANT_FIELDS
from zr_core.zoom.sync import credentials_for, is_sync_eligible, registrant_payload, sync_registrant

logger = logging.getLogger(__name__)

ALREADY_REGISTERED_MSG = "You are already registered for this event"


def _required_form_errors(meeting, fields: Mapping[str, Any], custom_fields: Mapping[str, Any]) -> dict[str, str]:
    """Required fields configured on the meeting's form that came in blank."""
    errors: dict[str, str] = {}
    for form_field in meeting.form_fields or []:
        if not form_field.get("is_required"):
            continue
        name = form_field.get("field_name") or ""
        if not name:
            continue
        source = fields if name in LOCAL_REGISTRANT_FIELDS else custom_fields
        value = source.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            errors[name] = "This field is required."
    return errors


class RegistrationService:
    """
    Public registration and operator retry.

    Zoom is called outside any DB transaction and the registrant row is
    written once, with the sync outcome already folded in.
    """

    @staticmethod
    def register(*, subdomain: str, meeting_id, fields: Mapping[str, Any]) -> Registrant:
        org = get_active_by_subdomain_or_none(subdomain=subdomain)
        if org is None:
            raise NotFound("Organization not found")

        meeting = get_public_meeting_or_none(organization_id=org.id, meeting_id=meeting_id)
        if meeting is None:
            raise NotFound("Meeting not found")

        data = {k: v for k, v in fields.items() if k in LOCAL_REGISTRANT_FIELDS}
        data["email"] = (data.get("email") or "").strip().lower()
        custom_fields = dict(fields.get("custom_fields") or {})

        errors = _required_form_errors(meeting, data, custom_fields)
        if errors:
            raise ValidationError(errors)

        if Registrant.objects.filter(meeting=meeting, email=data["email"]).exists():
            raise ConflictError(ALREADY_REGISTERED_MSG)

        registrant = Registrant(meeting=meeting, organization=org, custom_fields=custom_fields, **data)

        creds = credentials_for(org)
        if is_sync_eligible(creds, meeting):
            result = sync_registrant(creds, meeting, registrant_payload(registrant))
            result.apply_to(registrant)

        try:
            with transaction.atomic():
                registrant.save(force_insert=True)
        except IntegrityError as exc:
            # lost the race against a concurrent submission for the same email
            raise ConflictError(ALREADY_REGISTERED_MSG) from exc

        logger.info(
            "Registrant created id=%s meeting=%s status=%s",
            registrant.id,
            meeting.id,
            registrant.sync_status,
        )
        return registrant

    @staticmethod
    def retry_sync(*, organization, registrant_id) -> Registrant:
        registrant = get_registrant_for_organization_or_none(organization_id=organization.id, registrant_id=registrant_id)
        if registrant is None:
            raise NotFound("Registrant not found")

        if registrant.synced_to_zoom:
            raise ValidationError({"detail": "Registrant is already synced to Zoom"})

        meeting = registrant.meeting
        if not meeting.is_zoom_linked:
            raise ValidationError({"detail": "Meeting does not have a Zoom ID"})

        creds = credentials_for(organization)
        if not creds.is_complete:
            raise ValidationError({"detail": "Zoom credentials not configured"})

        result = sync_registrant(creds, meeting, registrant_payload(registrant))
        result.apply_to(registrant)

        with transaction.atomic():
            registrant.save(update_fields=["synced_to_zoom", "sync_error", "zoom_registrant_id", "zoom_join_url"])

        if not result.success:
            raise ZoomSyncFailed(result.error or ZoomSyncFailed.default_detail)

        logger.info("Registrant re-synced id=%s", registrant.id)
        return registrant

    @staticmethod
    @transaction.atomic
    def delete(*, registrant: Registrant) -> None:
        registrant_id = registrant.id
        registrant.delete()
        logger.info("Registrant deleted id=%s", registrant_id)
