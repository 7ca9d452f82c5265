import pytest
from rest_framework.test import APIClient

pytestmark = pytest.mark.django_db


def test_not_found_uses_envelope(api_client):
    r = api_client.get("/api/v1/meetings/8b4a1f3e-0000-4000-8000-000000000000/")
    assert r.status_code == 404, r.data

    err = r.data["error"]
    assert err["code"] == "not_found"
    assert err["message"] == "Meeting not found"
    assert err["request_id"]


def test_unauthenticated_envelope():
    r = APIClient().get("/api/v1/meetings/")
    assert r.status_code == 401
    assert r.data["error"]["code"] == "not_authenticated"


def test_validation_error_lists_fields(anon_client):
    r = anon_client.post("/api/v1/registrants/register/", {"subdomain": "acme"}, format="json")
    assert r.status_code == 400
    err = r.data["error"]
    assert err["code"] == "validation_error"
    assert "email" in err["details"]
    assert "meeting_id" in err["details"]


def test_inbound_request_id_is_echoed(api_client):
    r = api_client.get("/api/v1/organizations/profile/", HTTP_X_REQUEST_ID="trace-abc")
    assert r.status_code == 200
    assert r["X-Request-Id"] == "trace-abc"


def test_error_envelope_carries_same_request_id_as_header(api_client):
    r = api_client.delete("/api/v1/registrants/not-a-uuid/", HTTP_X_REQUEST_ID="trace-404")
    assert r.status_code == 404
    assert r.data["error"]["request_id"] == "trace-404"


def test_request_id_generated_when_absent(api_client):
    r = api_client.get("/api/v1/organizations/profile/")
    assert len(r["X-Request-Id"]) == 32
