# zr_core/zoom/client.py
"""
Zoom Server-to-Server OAuth client.

One instance holds one account's credentials and its cached access token.
Token refresh is serialized per instance, so a client shared across
threads fetches at most one token per expiry window.
"""
from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping

import requests
from django.conf import settings

from zr_core.zoom import payloads
from zr_core.zoom.exceptions import ZoomAPIError, ZoomAuthError

logger = logging.getLogger(__name__)

AUTH_FAILED_MSG = "Failed to authenticate with Zoom API"

# Upstream bodies are logged, never returned; keep log lines bounded.
_LOG_BODY_LIMIT = 500


@dataclass(frozen=True)
class ZoomSession:
    access_token: str
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return now < self.expires_at


def _body_for_log(resp) -> str:
    try:
        text = resp.text or ""
    except (AttributeError, ValueError):
        return ""
    return text[:_LOG_BODY_LIMIT]


class ZoomClient:
    def __init__(
        self,
        account_id: str,
        client_id: str,
        client_secret: str,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
        clock: Callable[[], float] = time.time,
    ):
        if not account_id or not client_id or not client_secret:
            raise ValueError("Zoom account_id, client_id and client_secret are required.")

        self.account_id = account_id
        self.client_id = client_id
        self.client_secret = client_secret

        # plain requests.post / requests.request unless a session is injected
        self._http = session or requests
        self._timeout = timeout if timeout is not None else settings.ZOOM_HTTP_TIMEOUT
        self._clock = clock
        self._session: ZoomSession | None = None
        self._lock = threading.Lock()

    # -----------------------------
    # OAuth
    # -----------------------------

    def get_access_token(self) -> str:
        with self._lock:
            current = self._session
            if current is not None and current.is_valid(self._clock()):
                return current.access_token

            self._session = self._fetch_token()
            return self._session.access_token

    def _fetch_token(self) -> ZoomSession:
        fetched_at = self._clock()
        try:
            resp = self._http.post(
                settings.ZOOM_OAUTH_URL,
                data={"grant_type": "account_credentials", "account_id": self.account_id},
                auth=(self.client_id, self.client_secret),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Zoom token request failed: %s", exc)
            raise ZoomAuthError(AUTH_FAILED_MSG) from exc

        if not resp.ok:
            logger.warning(
                "Zoom token request rejected: status=%s body=%s",
                resp.status_code,
                _body_for_log(resp),
            )
            raise ZoomAuthError(AUTH_FAILED_MSG, status_code=resp.status_code)

        try:
            data = resp.json()
            token = data["access_token"]
            expires_in = int(data.get("expires_in", 3600))
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("Zoom token response malformed: %s", _body_for_log(resp))
            raise ZoomAuthError(AUTH_FAILED_MSG) from exc

        margin = settings.ZOOM_TOKEN_SAFETY_MARGIN
        return ZoomSession(access_token=token, expires_at=fetched_at + expires_in - margin)

    # -----------------------------
    # API calls
    # -----------------------------

    def _request(self, method: str, path: str, *, error_message: str, json: Mapping[str, Any] | None = None) -> dict:
        # Auth failures surface as ZoomAuthError, not error_message.
        token = self.get_access_token()
        url = f"{settings.ZOOM_API_BASE_URL.rstrip('/')}/{path.lstrip('/')}"

        try:
            resp = self._http.request(
                method,
                url,
                json=json,
                headers={"Authorization": f"Bearer {token}"},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Zoom %s %s failed: %s", method, path, exc)
            raise ZoomAPIError(error_message) from exc

        if not resp.ok:
            logger.warning(
                "Zoom %s %s rejected: status=%s body=%s",
                method,
                path,
                resp.status_code,
                _body_for_log(resp),
            )
            raise ZoomAPIError(error_message, status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("Zoom %s %s returned non-JSON body", method, path)
            raise ZoomAPIError(error_message, status_code=resp.status_code) from exc

    def create_meeting(self, topic: str, start_time: str, duration: int, timezone: str) -> dict:
        return self._request(
            "POST",
            "users/me/meetings",
            json=payloads.meeting_body(topic=topic, start_time=start_time, duration=duration, timezone=timezone),
            error_message="Failed to create Zoom meeting",
        )

    def create_webinar(self, topic: str, start_time: str, duration: int, timezone: str) -> dict:
        return self._request(
            "POST",
            "users/me/webinars",
            json=payloads.webinar_body(topic=topic, start_time=start_time, duration=duration, timezone=timezone),
            error_message="Failed to create Zoom webinar",
        )

    def create(self, entity_type: str, *, topic: str, start_time: str, duration: int, timezone: str) -> dict:
        if entity_type == payloads.ENTITY_MEETING:
            return self.create_meeting(topic, start_time, duration, timezone)
        if entity_type == payloads.ENTITY_WEBINAR:
            return self.create_webinar(topic, start_time, duration, timezone)
        raise ValueError(f"Unknown Zoom entity type: {entity_type!r}")

    def add_registrant(self, entity_type: str, entity_id: str, registrant_data: Mapping[str, Any]) -> dict:
        path = payloads.entity_path(entity_type)
        return self._request(
            "POST",
            f"{path}/{entity_id}/registrants",
            json=payloads.registrant_body(registrant_data),
            error_message=f"Failed to add registrant to Zoom {entity_type}",
        )

    def get_details(self, entity_type: str, entity_id: str) -> dict:
        path = payloads.entity_path(entity_type)
        return self._request(
            "GET",
            f"{path}/{entity_id}",
            error_message=f"Failed to get Zoom {entity_type} details",
        )
