# zr_core/zoom/registry.py
"""
Where views and services get a ZoomClient for an organization's credentials.

By default every call builds a fresh client (one token fetch per request).
With ZOOM_SHARE_CLIENTS on, clients are reused per credential triple so the
cached token survives across requests.
"""
from __future__ import annotations

import hashlib
import threading

from django.conf import settings

from zr_core.zoom.client import ZoomClient

_clients: dict[str, ZoomClient] = {}
_lock = threading.Lock()


def fingerprint(creds) -> str:
    raw = "\x1f".join([creds.account_id, creds.client_id, creds.client_secret])
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()


def build_client(creds) -> ZoomClient:
    return ZoomClient(creds.account_id, creds.client_id, creds.client_secret)


def client_for_credentials(creds) -> ZoomClient:
    if not getattr(settings, "ZOOM_SHARE_CLIENTS", False):
        return build_client(creds)

    key = fingerprint(creds)
    with _lock:
        client = _clients.get(key)
        if client is None:
            client = build_client(creds)
            _clients[key] = client
        return client


def invalidate(creds) -> None:
    if not creds.is_complete:
        return
    with _lock:
        _clients.pop(fingerprint(creds), None)


def invalidate_all() -> None:
    with _lock:
        _clients.clear()
