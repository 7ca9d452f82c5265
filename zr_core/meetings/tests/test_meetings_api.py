import pytest
from rest_framework.test import APIClient

from zr_core.conftest import make_meeting, make_organization
from zr_core.meetings.models import Meeting
from zr_core.registrants.models import Registrant
from zr_core.zoom.tests.fakes import FakeResponse

pytestmark = pytest.mark.django_db

BASE = "/api/v1/meetings/"


def _payload(**overrides):
    data = {
        "meeting_name": "Quarterly Webinar",
        "meeting_type": "webinar",
        "start_time": "2030-03-01T15:00:00Z",
        "duration": 90,
        "timezone": "Europe/Berlin",
        "description": "All hands",
        "form_fields": [
            {"field_name": "company", "field_label": "Company", "is_standard_zoom_field": True, "zoom_field_key": "org", "order": 2},
            {"field_name": "team_size", "field_label": "Team size", "field_type": "select", "options": ["1-10", "11+"], "order": 1},
        ],
    }
    data.update(overrides)
    return data


def test_create_without_zoom(api_client, organization):
    r = api_client.post(BASE, _payload(), format="json")
    assert r.status_code == 201, r.data

    assert r.data["zoom_meeting_id"] == ""
    assert r.data["landing_page_title"] == "Quarterly Webinar"
    assert r.data["landing_page_description"] == "All hands"
    # sorted by order
    assert [f["field_name"] for f in r.data["form_fields"]] == ["team_size", "company"]
    assert Meeting.objects.get(id=r.data["id"]).organization_id == organization.id


def test_create_requires_core_fields(api_client):
    r = api_client.post(BASE, {"meeting_name": "x"}, format="json")
    assert r.status_code == 400
    assert {"meeting_type", "start_time"} <= set(r.data["error"]["details"])


def test_select_field_needs_options(api_client):
    r = api_client.post(
        BASE,
        _payload(form_fields=[{"field_name": "size", "field_label": "Size", "field_type": "select"}]),
        format="json",
    )
    assert r.status_code == 400


def test_create_in_zoom_requires_credentials(db):
    org = make_organization(name="NoZoom", email="n@nozoom.test", subdomain="nozoom", with_zoom=False)
    c = APIClient()
    c.force_authenticate(user=org.user)

    r = c.post(BASE, _payload(create_in_zoom=True), format="json")
    assert r.status_code == 400
    assert r.data["error"]["message"] == "Zoom credentials not configured. Please add them in settings first."
    assert not Meeting.objects.exists()


def test_create_in_zoom_stores_remote_id(api_client, fake_zoom):
    fake_zoom.api_responses = {("POST", "/users/me/webinars"): FakeResponse(201, {"id": 84512345678})}

    r = api_client.post(BASE, _payload(create_in_zoom=True), format="json")
    assert r.status_code == 201, r.data
    assert r.data["zoom_meeting_id"] == "84512345678"

    body = fake_zoom.api_calls[0]["json"]
    assert body["type"] == 5
    assert body["start_time"] == "2030-03-01T15:00:00Z"
    assert body["timezone"] == "Europe/Berlin"


def test_create_in_zoom_failure_writes_nothing(api_client, fake_zoom):
    fake_zoom.api_responses = {("POST", "/users/me/webinars"): FakeResponse(400, {"message": "Webinar plan is missing"})}

    r = api_client.post(BASE, _payload(create_in_zoom=True), format="json")
    assert r.status_code == 502
    assert r.data["error"]["message"] == "Failed to create meeting in Zoom. Please check your credentials."
    assert not Meeting.objects.exists()


def test_list_is_scoped_to_organization(api_client, organization, other_organization):
    mine = make_meeting(organization, meeting_name="Mine")
    make_meeting(other_organization, meeting_name="Theirs")

    r = api_client.get(BASE)
    assert r.status_code == 200
    assert r.data["count"] == 1
    assert r.data["results"][0]["id"] == str(mine.id)


def test_other_organizations_meeting_is_404(api_client, other_organization):
    theirs = make_meeting(other_organization)
    assert api_client.get(f"{BASE}{theirs.id}/").status_code == 404
    assert api_client.delete(f"{BASE}{theirs.id}/").status_code == 404
    assert Meeting.objects.filter(id=theirs.id).exists()


def test_update_keeps_type_and_zoom_link(api_client, meeting):
    r = api_client.patch(
        f"{BASE}{meeting.id}/",
        {"meeting_name": "Renamed", "is_active": False, "meeting_type": "webinar", "zoom_meeting_id": "1"},
        format="json",
    )
    assert r.status_code == 200, r.data

    meeting.refresh_from_db()
    assert meeting.meeting_name == "Renamed"
    assert meeting.is_active is False
    assert meeting.meeting_type == "meeting"
    assert meeting.zoom_meeting_id == "999"


def test_delete_cascades_registrants(api_client, meeting, organization):
    Registrant.objects.create(meeting=meeting, organization=organization, first_name="A", last_name="B", email="a@x.com")

    r = api_client.delete(f"{BASE}{meeting.id}/")
    assert r.status_code == 204
    assert not Registrant.objects.exists()


def test_public_landing_page(anon_client, meeting):
    r = anon_client.get(f"{BASE}public/acme/{meeting.id}/")
    assert r.status_code == 200, r.data
    assert r.data["meeting"]["landing_page_title"] == "Product Demo"
    assert "zoom_meeting_id" not in r.data["meeting"]
    assert r.data["organization"] == {"organization_name": "Acme Corp", "subdomain": "acme"}


def test_public_landing_page_hides_inactive_meeting(anon_client, organization):
    m = make_meeting(organization, is_active=False)
    assert anon_client.get(f"{BASE}public/acme/{m.id}/").status_code == 404


def test_public_landing_page_checks_owning_organization(anon_client, meeting, other_organization):
    assert anon_client.get(f"{BASE}public/globex/{meeting.id}/").status_code == 404


def test_zoom_details(api_client, meeting, fake_zoom):
    fake_zoom.api_responses = {("GET", "/meetings/999"): FakeResponse(200, {"id": 999, "topic": "Product Demo"})}

    r = api_client.get(f"{BASE}{meeting.id}/zoom-details/")
    assert r.status_code == 200, r.data
    assert r.data["topic"] == "Product Demo"


def test_zoom_details_requires_link(api_client, organization):
    m = make_meeting(organization, zoom_meeting_id="")
    r = api_client.get(f"{BASE}{m.id}/zoom-details/")
    assert r.status_code == 400
    assert r.data["error"]["message"] == "Meeting does not have a Zoom ID"


def test_zoom_details_upstream_failure_is_502(api_client, meeting, fake_zoom):
    r = api_client.get(f"{BASE}{meeting.id}/zoom-details/")
    assert r.status_code == 502
    assert r.data["error"]["message"] == "Failed to get Zoom meeting details"
