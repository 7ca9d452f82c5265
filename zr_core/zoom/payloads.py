# zr_core/zoom/payloads.py
from __future__ import annotations

from typing import Any, Mapping

ENTITY_MEETING = "meeting"
ENTITY_WEBINAR = "webinar"

# Zoom API type codes
MEETING_TYPE_SCHEDULED = 2
WEBINAR_TYPE_SCHEDULED = 5

REQUIRED_REGISTRANT_FIELDS = ("email", "first_name", "last_name")

# (local field, Zoom registrant key)
OPTIONAL_REGISTRANT_FIELDS: tuple[tuple[str, str], ...] = (
    ("phone", "phone"),
    ("address", "address"),
    ("city", "city"),
    ("country", "country"),
    ("zip_code", "zip"),
    ("state", "state"),
    ("company", "org"),
    ("job_title", "job_title"),
    ("industry", "industry"),
    ("purchasing_time_frame", "purchasing_time_frame"),
    ("role_in_purchase_process", "role_in_purchase_process"),
    ("number_of_employees", "no_of_employees"),
    ("comments", "comments"),
)

LOCAL_REGISTRANT_FIELDS = REQUIRED_REGISTRANT_FIELDS + tuple(local for local, _ in OPTIONAL_REGISTRANT_FIELDS)


def entity_path(entity_type: str) -> str:
    if entity_type == ENTITY_MEETING:
        return "meetings"
    if entity_type == ENTITY_WEBINAR:
        return "webinars"
    raise ValueError(f"Unknown Zoom entity type: {entity_type!r}")


def registrant_body(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Zoom registrant body from local field names.
    Missing or blank optional values are left out entirely.
    """
    body: dict[str, Any] = {key: data.get(key) or "" for key in REQUIRED_REGISTRANT_FIELDS}
    for local_key, remote_key in OPTIONAL_REGISTRANT_FIELDS:
        value = data.get(local_key)
        if value is None:
            continue
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
        body[remote_key] = value
    return body


def meeting_body(*, topic: str, start_time: str, duration: int, timezone: str) -> dict[str, Any]:
    return {
        "topic": topic,
        "type": MEETING_TYPE_SCHEDULED,
        "start_time": start_time,
        "duration": duration,
        "timezone": timezone,
        "settings": {
            "approval_type": 0,
            "registration_type": 1,
            "join_before_host": True,
            "waiting_room": False,
        },
    }


def webinar_body(*, topic: str, start_time: str, duration: int, timezone: str) -> dict[str, Any]:
    return {
        "topic": topic,
        "type": WEBINAR_TYPE_SCHEDULED,
        "start_time": start_time,
        "duration": duration,
        "timezone": timezone,
        "settings": {
            "approval_type": 0,
            "registration_type": 1,
            "auto_recording": "none",
        },
    }
