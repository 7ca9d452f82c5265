# zr_core/conftest.py
from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient

from zr_core.meetings.models import Meeting
from zr_core.organizations.models import Organization
from zr_core.zoom.client import ZoomClient
from zr_core.zoom.tests.fakes import Clock, FakeResponse, FakeZoomSession


def make_organization(*, name, email, subdomain, with_zoom=True, is_active=True, password="Pass@12345"):
    User = get_user_model()
    user = User.objects.create_user(username=email, email=email, password=password)
    creds = (
        {"zoom_account_id": "acc-123", "zoom_client_id": "cid-123", "zoom_client_secret": "secret-123"}
        if with_zoom
        else {}
    )
    return Organization.objects.create(
        organization_name=name,
        email=email,
        subdomain=subdomain,
        user=user,
        is_active=is_active,
        **creds,
    )


def make_meeting(organization, *, zoom_meeting_id="999", meeting_type="meeting", **kwargs):
    defaults = {
        "meeting_name": "Product Demo",
        "start_time": timezone.now() + timedelta(days=7),
        "landing_page_title": "Product Demo",
    }
    defaults.update(kwargs)
    return Meeting.objects.create(
        organization=organization,
        meeting_type=meeting_type,
        zoom_meeting_id=zoom_meeting_id,
        **defaults,
    )


@pytest.fixture
def organization(db):
    return make_organization(name="Acme Corp", email="ops@acme.test", subdomain="acme")


@pytest.fixture
def other_organization(db):
    return make_organization(name="Globex", email="it@globex.test", subdomain="globex")


@pytest.fixture
def org_user(organization):
    return organization.user


@pytest.fixture
def api_client(org_user):
    c = APIClient()
    c.force_authenticate(user=org_user)
    return c


@pytest.fixture
def anon_client():
    return APIClient()


@pytest.fixture
def meeting(organization):
    return make_meeting(organization)


@pytest.fixture
def owner(db):
    User = get_user_model()
    return User.objects.create_superuser(
        username="owner@zr.test", email="owner@zr.test", password="Owner@12345", first_name="Olive"
    )


@pytest.fixture
def staff_admin(db):
    User = get_user_model()
    return User.objects.create_user(
        username="staff@zr.test", email="staff@zr.test", password="Staff@12345", is_staff=True
    )


@pytest.fixture
def owner_client(owner):
    c = APIClient()
    c.force_authenticate(user=owner)
    return c


@pytest.fixture
def fake_zoom(monkeypatch):
    """
    Route every ZoomClient built through the registry to one fake HTTP session.
    Tests configure `fake_zoom.api_responses` / `token_responses` as needed.
    """
    http = FakeZoomSession()

    def build(creds):
        return ZoomClient(creds.account_id, creds.client_id, creds.client_secret, session=http, clock=Clock())

    monkeypatch.setattr("zr_core.zoom.registry.build_client", build)
    return http


def zoom_registrant_ok(zoom_id="999", *, kind="meetings", registrant_id="reg-1", join_url="https://zoom.us/j/999?tk=abc"):
    return {("POST", f"/{kind}/{zoom_id}/registrants"): FakeResponse(201, {"id": registrant_id, "join_url": join_url})}
