# zr_core/api/urls.py
from __future__ import annotations

from django.urls import path
from rest_framework.routers import DefaultRouter

from zr_core.iam.api.auth import LoginView, LogoutView, OwnerLoginView, RefreshView
from zr_core.meetings.api.views import MeetingViewSet
from zr_core.organizations.api.views import OrganizationViewSet
from zr_core.owners.api.views import (
    OwnerMeetingViewSet,
    OwnerOrganizationViewSet,
    OwnerPasswordView,
    OwnerProfileView,
    OwnerRegistrantViewSet,
)
from zr_core.registrants.api.views import RegistrantViewSet

router = DefaultRouter()

# Organization-facing
router.register(r"organizations", OrganizationViewSet, basename="organizations")
router.register(r"meetings", MeetingViewSet, basename="meetings")
router.register(r"registrants", RegistrantViewSet, basename="registrants")

# Owner portal
router.register(r"owner/organizations", OwnerOrganizationViewSet, basename="owner-organizations")
router.register(r"owner/meetings", OwnerMeetingViewSet, basename="owner-meetings")
router.register(r"owner/registrants", OwnerRegistrantViewSet, basename="owner-registrants")

urlpatterns = [
    path("auth/login/", LoginView.as_view(), name="login"),
    path("auth/refresh/", RefreshView.as_view(), name="refresh"),
    path("auth/logout/", LogoutView.as_view(), name="logout"),

    path("owner/auth/login/", OwnerLoginView.as_view(), name="owner-login"),
    path("owner/profile/", OwnerProfileView.as_view(), name="owner-profile"),
    path("owner/password/", OwnerPasswordView.as_view(), name="owner-password"),

    # Router URLs last (so explicit paths win if ever overlapping)
    *router.urls,
]
