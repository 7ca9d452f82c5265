import pytest

from zr_core.conftest import make_organization
from zr_core.organizations.models import Organization
from zr_core.zoom.sync import ZoomCredentials

pytestmark = pytest.mark.django_db


def test_update_credentials(db):
    from rest_framework.test import APIClient

    org = make_organization(name="Fresh", email="f@fresh.test", subdomain="fresh", with_zoom=False)
    c = APIClient()
    c.force_authenticate(user=org.user)

    r = c.put(
        "/api/v1/organizations/zoom-credentials/",
        {"zoom_account_id": "A", "zoom_client_id": "C", "zoom_client_secret": "S"},
        format="json",
    )
    assert r.status_code == 200, r.data
    assert r.data == {"message": "Zoom credentials updated successfully", "has_zoom_credentials": True}

    org.refresh_from_db()
    assert (org.zoom_account_id, org.zoom_client_id, org.zoom_client_secret) == ("A", "C", "S")


def test_all_three_credentials_required(api_client):
    r = api_client.put(
        "/api/v1/organizations/zoom-credentials/",
        {"zoom_account_id": "A", "zoom_client_id": "C"},
        format="json",
    )
    assert r.status_code == 400
    assert "zoom_client_secret" in r.data["error"]["details"]


def test_credential_update_drops_shared_client(api_client, organization, monkeypatch):
    dropped = []
    monkeypatch.setattr("zr_core.zoom.registry.invalidate", lambda creds: dropped.append(creds))

    r = api_client.put(
        "/api/v1/organizations/zoom-credentials/",
        {"zoom_account_id": "A2", "zoom_client_id": "C2", "zoom_client_secret": "S2"},
        format="json",
    )
    assert r.status_code == 200

    assert dropped == [ZoomCredentials(account_id="acc-123", client_id="cid-123", client_secret="secret-123")]
    assert Organization.objects.get(id=organization.id).zoom_client_id == "C2"
