import pytest
from django.core.management import call_command
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from zr_core.conftest import make_meeting, make_organization
from zr_core.meetings.models import Meeting
from zr_core.organizations.models import Organization
from zr_core.registrants.models import Registrant

pytestmark = pytest.mark.django_db


@pytest.fixture
def staff_client(staff_admin):
    c = APIClient()
    c.force_authenticate(user=staff_admin)
    return c


def _registrant(meeting, email, **kwargs):
    return Registrant.objects.create(
        meeting=meeting, organization=meeting.organization, first_name="F", last_name="L", email=email, **kwargs
    )


def test_organization_users_are_refused(api_client):
    assert api_client.get("/api/v1/owner/organizations/").status_code == 403
    assert api_client.get("/api/v1/owner/profile/").status_code == 403


def test_profile_get_and_update(owner_client, owner, staff_admin):
    r = owner_client.get("/api/v1/owner/profile/")
    assert r.status_code == 200
    assert r.data["email"] == "owner@zr.test"
    assert r.data["role"] == "owner"

    r = owner_client.put("/api/v1/owner/profile/", {"email": "staff@zr.test"}, format="json")
    assert r.status_code == 400

    r = owner_client.put("/api/v1/owner/profile/", {"name": "Olivia", "email": "Boss@ZR.test"}, format="json")
    assert r.status_code == 200, r.data
    owner.refresh_from_db()
    assert owner.username == "boss@zr.test"
    assert owner.first_name == "Olivia"


def test_change_password(owner_client, owner):
    r = owner_client.put(
        "/api/v1/owner/password/", {"current_password": "wrong", "new_password": "newpass1"}, format="json"
    )
    assert r.status_code == 400

    r = owner_client.put(
        "/api/v1/owner/password/", {"current_password": "Owner@12345", "new_password": "newpass1"}, format="json"
    )
    assert r.status_code == 200
    owner.refresh_from_db()
    assert owner.check_password("newpass1")


def test_organizations_list_with_counts_and_filters(owner_client, organization, db):
    dormant = make_organization(name="Dormant Ltd", email="d@dormant.test", subdomain="dormant", is_active=False)
    m = make_meeting(organization)
    _registrant(m, "a@x.com")
    _registrant(m, "b@x.com")

    r = owner_client.get("/api/v1/owner/organizations/")
    assert r.status_code == 200
    assert r.data["count"] == 2
    acme = next(o for o in r.data["results"] if o["subdomain"] == "acme")
    assert acme["meeting_count"] == 1
    assert acme["registrant_count"] == 2

    r = owner_client.get("/api/v1/owner/organizations/", {"status": "inactive"})
    assert [o["id"] for o in r.data["results"]] == [str(dormant.id)]

    r = owner_client.get("/api/v1/owner/organizations/", {"search": "acme"})
    assert [o["subdomain"] for o in r.data["results"]] == ["acme"]


def test_patch_organization(owner_client, organization, other_organization):
    url = f"/api/v1/owner/organizations/{organization.id}/"

    r = owner_client.patch(url, {"email": "it@globex.test"}, format="json")
    assert r.status_code == 400

    r = owner_client.patch(url, {"is_active": False, "email": "new@acme.test"}, format="json")
    assert r.status_code == 200, r.data
    assert r.data["organization"]["is_active"] is False

    assert get_user_model().objects.get(pk=organization.user_id).username == "new@acme.test"


def test_delete_organization_requires_owner_role(owner_client, staff_client, organization):
    make_meeting(organization)
    url = f"/api/v1/owner/organizations/{organization.id}/"

    assert staff_client.delete(url).status_code == 403
    assert owner_client.delete(url).status_code == 204

    assert not Organization.objects.exists()
    assert not Meeting.objects.exists()
    assert not get_user_model().objects.filter(username="ops@acme.test").exists()


def test_zoom_credentials_read_and_clear(owner_client, organization):
    url = f"/api/v1/owner/organizations/{organization.id}/zoom-credentials/"

    r = owner_client.get(url)
    assert r.status_code == 200
    assert r.data["zoom_client_secret"] == "secret-123"

    r = owner_client.put(url, {"zoom_account_id": "", "zoom_client_id": "", "zoom_client_secret": ""}, format="json")
    assert r.status_code == 200, r.data
    assert r.data["has_zoom_credentials"] is False


def test_meetings_across_tenants(owner_client, staff_client, organization, other_organization):
    mine = make_meeting(organization)
    make_meeting(other_organization, meeting_name="Globex Town Hall")

    r = owner_client.get("/api/v1/owner/meetings/")
    assert r.data["count"] == 2

    r = owner_client.get("/api/v1/owner/meetings/", {"organization": str(organization.id)})
    assert [m["id"] for m in r.data["results"]] == [str(mine.id)]

    r = owner_client.get("/api/v1/owner/meetings/", {"search": "town hall"})
    assert r.data["count"] == 1

    assert staff_client.delete(f"/api/v1/owner/meetings/{mine.id}/").status_code == 403
    assert owner_client.delete(f"/api/v1/owner/meetings/{mine.id}/").status_code == 204


def test_registrants_across_tenants(staff_client, organization, other_organization):
    a = _registrant(make_meeting(organization), "a@x.com", synced_to_zoom=True)
    b = _registrant(make_meeting(other_organization), "b@y.com")

    r = staff_client.get("/api/v1/owner/registrants/")
    assert r.data["count"] == 2

    r = staff_client.get("/api/v1/owner/registrants/", {"synced_to_zoom": "false"})
    assert [x["id"] for x in r.data["results"]] == [str(b.id)]

    r = staff_client.get("/api/v1/owner/registrants/", {"organization": str(organization.id)})
    assert [x["id"] for x in r.data["results"]] == [str(a.id)]

    assert staff_client.delete(f"/api/v1/owner/registrants/{a.id}/").status_code == 204
    assert Registrant.objects.count() == 1


def test_ensure_owner_command_is_idempotent(settings, db):
    settings.DEFAULT_OWNER_EMAIL = "root@zr.test"
    settings.DEFAULT_OWNER_PASSWORD = "changeme"
    User = get_user_model()

    call_command("ensure_owner")
    call_command("ensure_owner")

    owners = User.objects.filter(is_staff=True)
    assert owners.count() == 1
    assert owners.get().username == "root@zr.test"
    assert owners.get().is_superuser
    assert owners.get().check_password("changeme")
