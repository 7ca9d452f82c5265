from types import SimpleNamespace

import pytest

from zr_core.zoom import registry, sync
from zr_core.zoom.client import ZoomClient
from zr_core.zoom.sync import SyncResult, ZoomCredentials
from zr_core.zoom.tests.fakes import Clock, FakeResponse, FakeZoomSession

CREDS = ZoomCredentials(account_id="acc", client_id="cid", client_secret="sec")


def _meeting(zoom_id="999", meeting_type="meeting"):
    return SimpleNamespace(pk="m-1", zoom_meeting_id=zoom_id, meeting_type=meeting_type)


def _use_fake_http(monkeypatch, http):
    def build(creds):
        return ZoomClient(creds.account_id, creds.client_id, creds.client_secret, session=http, clock=Clock())

    monkeypatch.setattr("zr_core.zoom.registry.build_client", build)


@pytest.mark.parametrize(
    "creds,zoom_id,expected",
    [
        (CREDS, "999", True),
        (CREDS, "", False),
        (CREDS, "   ", False),
        (ZoomCredentials(account_id="acc", client_id="cid"), "999", False),
        (ZoomCredentials(), "999", False),
    ],
)
def test_is_sync_eligible(creds, zoom_id, expected):
    assert sync.is_sync_eligible(creds, _meeting(zoom_id=zoom_id)) is expected


def test_credentials_for_organization_strips_values():
    org = SimpleNamespace(zoom_account_id=" acc ", zoom_client_id="cid", zoom_client_secret=None)
    creds = sync.credentials_for(org)
    assert creds.account_id == "acc"
    assert creds.client_secret == ""
    assert not creds.is_complete


def test_sync_success_uses_id_and_join_url(monkeypatch):
    http = FakeZoomSession(
        api_responses={("POST", "/meetings/999/registrants"): FakeResponse(201, {"id": 12345, "join_url": "https://zoom.us/j/999"})}
    )
    _use_fake_http(monkeypatch, http)

    result = sync.sync_registrant(CREDS, _meeting(), {"email": "a@x.com", "first_name": "A", "last_name": "B"})

    assert result == SyncResult(success=True, zoom_registrant_id="12345", zoom_join_url="https://zoom.us/j/999")


def test_sync_falls_back_to_registrant_id(monkeypatch):
    http = FakeZoomSession(api_responses={("POST", "/webinars/7/registrants"): FakeResponse(201, {"registrant_id": "rid-9"})})
    _use_fake_http(monkeypatch, http)

    result = sync.sync_registrant(CREDS, _meeting(zoom_id="7", meeting_type="webinar"), {"email": "a@x.com"})

    assert result.success
    assert result.zoom_registrant_id == "rid-9"
    assert result.zoom_join_url == ""


def test_sync_failure_is_returned_not_raised(monkeypatch):
    http = FakeZoomSession(token_responses=[FakeResponse(401, {"reason": "invalid"})])
    _use_fake_http(monkeypatch, http)

    result = sync.sync_registrant(CREDS, _meeting(), {"email": "a@x.com", "first_name": "A", "last_name": "B"})

    assert not result.success
    assert result.error == "Failed to authenticate with Zoom API"


def test_apply_failure_keeps_synced_flag_false():
    reg = SimpleNamespace(synced_to_zoom=False, sync_error="", zoom_registrant_id="", zoom_join_url="")
    SyncResult(success=False, error="Failed to add registrant to Zoom meeting").apply_to(reg)
    assert reg.synced_to_zoom is False
    assert reg.sync_error == "Failed to add registrant to Zoom meeting"


def test_apply_success_clears_previous_error():
    reg = SimpleNamespace(synced_to_zoom=False, sync_error="old", zoom_registrant_id="", zoom_join_url="")
    SyncResult(success=True, zoom_registrant_id="r1", zoom_join_url="https://j").apply_to(reg)
    assert reg.synced_to_zoom is True
    assert reg.sync_error == ""
    assert reg.zoom_registrant_id == "r1"


def test_registrant_payload_from_mapping_drops_unknown_keys():
    out = sync.registrant_payload({"email": "a@x.com", "company": "Acme", "favourite_colour": "red"})
    assert out == {"email": "a@x.com", "company": "Acme"}


def test_create_remote_meeting_returns_string_id(monkeypatch):
    http = FakeZoomSession(api_responses={("POST", "/users/me/meetings"): FakeResponse(201, {"id": 8812345})})
    _use_fake_http(monkeypatch, http)

    zoom_id = sync.create_remote_meeting(
        CREDS, meeting_type="meeting", topic="Demo", start_time="2030-01-01T10:00:00Z", duration=30, timezone="UTC"
    )
    assert zoom_id == "8812345"


def test_registry_builds_fresh_clients_by_default(settings):
    settings.ZOOM_SHARE_CLIENTS = False
    assert registry.client_for_credentials(CREDS) is not registry.client_for_credentials(CREDS)


def test_registry_shares_and_invalidates(settings):
    settings.ZOOM_SHARE_CLIENTS = True
    registry.invalidate_all()

    a = registry.client_for_credentials(CREDS)
    assert registry.client_for_credentials(CREDS) is a

    other = ZoomCredentials(account_id="acc", client_id="cid", client_secret="rotated")
    assert registry.client_for_credentials(other) is not a

    registry.invalidate(CREDS)
    assert registry.client_for_credentials(CREDS) is not a
    registry.invalidate_all()
