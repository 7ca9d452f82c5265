import pytest
from django.contrib.auth import get_user_model

from zr_core.organizations.models import Organization
from zr_core.registrants.models import Registrant

pytestmark = pytest.mark.django_db


@pytest.fixture
def owner_admin(client, owner):
    client.force_login(owner)
    return client


@pytest.fixture
def failed_registrant(meeting):
    return Registrant.objects.create(
        meeting=meeting,
        organization=meeting.organization,
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        sync_error="Failed to add registrant to Zoom meeting",
    )


def test_registrant_change_form_cannot_touch_sync_state(owner_admin, failed_registrant, other_organization):
    url = f"/admin/registrants/registrant/{failed_registrant.pk}/change/"

    page = owner_admin.get(url)
    assert page.status_code == 200
    html = page.content.decode()
    for field in ("synced_to_zoom", "zoom_registrant_id", "sync_error", "email", "meeting", "organization"):
        assert f'name="{field}"' not in html

    r = owner_admin.post(
        url,
        {
            "first_name": "Augusta",
            "last_name": "Lovelace",
            "custom_fields": "{}",
            "synced_to_zoom": "on",
            "zoom_registrant_id": "forged",
            "email": "other@example.com",
            "organization": str(other_organization.pk),
            "_save": "Save",
        },
    )
    assert r.status_code == 302

    failed_registrant.refresh_from_db()
    assert failed_registrant.first_name == "Augusta"
    assert failed_registrant.synced_to_zoom is False
    assert failed_registrant.zoom_registrant_id == ""
    assert failed_registrant.sync_error == "Failed to add registrant to Zoom meeting"
    assert failed_registrant.email == "ada@example.com"
    assert failed_registrant.organization_id == failed_registrant.meeting.organization_id
    assert failed_registrant.sync_status == "error"


def test_meeting_change_form_keeps_zoom_link_fixed(owner_admin, meeting):
    page = owner_admin.get(f"/admin/meetings/meeting/{meeting.pk}/change/")
    assert page.status_code == 200
    html = page.content.decode()
    assert 'name="zoom_meeting_id"' not in html
    assert 'name="meeting_type"' not in html
    assert 'name="meeting_name"' in html


def test_organization_change_form_hides_credentials(owner_admin, organization):
    page = owner_admin.get(f"/admin/organizations/organization/{organization.pk}/change/")
    assert page.status_code == 200
    html = page.content.decode()
    assert 'name="zoom_client_secret"' not in html
    assert 'name="zoom_account_id"' not in html
    assert "secret-123" not in html


def test_organization_admin_delete_goes_through_service(owner_admin, organization):
    user_id = organization.user_id

    r = owner_admin.post(f"/admin/organizations/organization/{organization.pk}/delete/", {"post": "yes"})
    assert r.status_code == 302

    assert not Organization.objects.filter(pk=organization.pk).exists()
    assert not get_user_model().objects.filter(pk=user_id).exists()
