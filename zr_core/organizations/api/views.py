# zr_core/organizations/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from zr_core.common.permissions import IsOrganizationUser
from zr_core.iam.api.auth import login_response
from zr_core.organizations.api.serializers import (
    OrganizationProfileSerializer,
    OrganizationPublicSerializer,
    OrganizationSignupSerializer,
    SignupResponseSerializer,
    ZoomCredentialsResponseSerializer,
    ZoomCredentialsSerializer,
)
from zr_core.organizations.models import Organization
from zr_core.organizations.selectors import get_active_by_subdomain_or_none
from zr_core.organizations.services import OrganizationService


@extend_schema_view(
    register=extend_schema(tags=["Organizations"], operation_id="v1_organizations_register", request=OrganizationSignupSerializer, responses={201: SignupResponseSerializer}),
    profile=extend_schema(tags=["Organizations"], operation_id="v1_organizations_profile", responses={200: OrganizationProfileSerializer}),
    zoom_credentials=extend_schema(tags=["Organizations"], operation_id="v1_organizations_zoom_credentials", request=ZoomCredentialsSerializer, responses={200: ZoomCredentialsResponseSerializer}),
    by_subdomain=extend_schema(tags=["Organizations"], operation_id="v1_organizations_by_subdomain", responses={200: OrganizationPublicSerializer}),
)
class OrganizationViewSet(viewsets.ViewSet):
    """
    The caller's own organization. Signup and subdomain lookup are public.
    """

    serializer_class = OrganizationProfileSerializer
    queryset = Organization.objects.none()

    PUBLIC_ACTIONS = {"register", "by_subdomain"}

    def get_permissions(self):
        if self.action in self.PUBLIC_ACTIONS:
            return [AllowAny()]
        return [IsOrganizationUser()]

    @action(detail=False, methods=["post"], url_path="register")
    def register(self, request):
        ser = OrganizationSignupSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        org = OrganizationService.signup(**ser.validated_data)
        return login_response(
            user=org.user,
            body={
                "message": "Organization registered successfully",
                "organization": OrganizationProfileSerializer(org).data,
            },
            status_code=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["get"], url_path="profile")
    def profile(self, request):
        return Response(OrganizationProfileSerializer(request.organization).data, status=status.HTTP_200_OK)

    @action(detail=False, methods=["put"], url_path="zoom-credentials")
    def zoom_credentials(self, request):
        ser = ZoomCredentialsSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        org = OrganizationService.set_zoom_credentials(
            organization_id=request.organization.id,
            account_id=ser.validated_data["zoom_account_id"],
            client_id=ser.validated_data["zoom_client_id"],
            client_secret=ser.validated_data["zoom_client_secret"],
        )
        return Response(
            {"message": "Zoom credentials updated successfully", "has_zoom_credentials": org.has_zoom_credentials},
            status=status.HTTP_200_OK,
        )

    @action(detail=False, methods=["get"], url_path=r"subdomain/(?P<subdomain>[a-z0-9-]+)")
    def by_subdomain(self, request, subdomain=None):
        org = get_active_by_subdomain_or_none(subdomain=subdomain)
        if org is None:
            raise NotFound("Organization not found")
        return Response(OrganizationPublicSerializer(org).data, status=status.HTTP_200_OK)
