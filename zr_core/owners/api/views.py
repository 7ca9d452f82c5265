# zr_core/owners/api/views.py
from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import APIView

from zr_core.common.permissions import IsOwner, IsOwnerRole
from zr_core.iam.api.serializers import OwnerSerializer
from zr_core.meetings.models import Meeting
from zr_core.meetings.selectors import parse_uuid_or_none
from zr_core.meetings.services import MeetingService
from zr_core.organizations.models import Organization
from zr_core.organizations.selectors import organizations_with_counts, search_organizations
from zr_core.organizations.services import OrganizationService, OrganizationUpdate
from zr_core.owners.api.serializers import (
    OwnerMeetingSerializer,
    OwnerOrganizationSerializer,
    OwnerOrganizationUpdateSerializer,
    OwnerPasswordSerializer,
    OwnerProfileUpdateSerializer,
    OwnerRegistrantSerializer,
    OwnerZoomCredentialsReadSerializer,
    OwnerZoomCredentialsSerializer,
)
from zr_core.owners.filters import OwnerRegistrantFilter
from zr_core.owners.selectors import owner_meetings
from zr_core.owners.services import OwnerService
from zr_core.registrants.models import Registrant
from zr_core.registrants.selectors import all_registrants
from zr_core.registrants.services import RegistrationService

SEARCH_PARAM = OpenApiParameter(name="search", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY, required=False)


class OwnerProfileView(APIView):
    permission_classes = [IsOwner]

    @extend_schema(tags=["Owner"], responses={200: OwnerSerializer})
    def get(self, request):
        return Response(OwnerSerializer(request.user).data, status=status.HTTP_200_OK)

    @extend_schema(tags=["Owner"], request=OwnerProfileUpdateSerializer, responses={200: OwnerSerializer})
    def put(self, request):
        ser = OwnerProfileUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        user = OwnerService.update_profile(user=request.user, **ser.validated_data)
        return Response(
            {"message": "Profile updated successfully", "owner": OwnerSerializer(user).data},
            status=status.HTTP_200_OK,
        )


class OwnerPasswordView(APIView):
    permission_classes = [IsOwner]

    @extend_schema(tags=["Owner"], request=OwnerPasswordSerializer, responses={200: OpenApiTypes.OBJECT})
    def put(self, request):
        ser = OwnerPasswordSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        OwnerService.change_password(user=request.user, **ser.validated_data)
        return Response({"message": "Password changed successfully"}, status=status.HTTP_200_OK)


@extend_schema_view(
    list=extend_schema(
        tags=["Owner"],
        operation_id="v1_owner_organizations_list",
        parameters=[
            SEARCH_PARAM,
            OpenApiParameter(name="status", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY, required=False, enum=["all", "active", "inactive"]),
        ],
    ),
    retrieve=extend_schema(tags=["Owner"], operation_id="v1_owner_organizations_retrieve"),
    partial_update=extend_schema(tags=["Owner"], operation_id="v1_owner_organizations_partial_update", request=OwnerOrganizationUpdateSerializer),
    destroy=extend_schema(tags=["Owner"], operation_id="v1_owner_organizations_destroy", responses={204: None}),
    zoom_credentials=extend_schema(tags=["Owner"], operation_id="v1_owner_organizations_zoom_credentials", request=OwnerZoomCredentialsSerializer, responses={200: OwnerZoomCredentialsReadSerializer}),
)
class OwnerOrganizationViewSet(viewsets.GenericViewSet):
    """
    Cross-tenant organization management for the owner portal.
    """

    serializer_class = OwnerOrganizationSerializer
    queryset = Organization.objects.none()
    filter_backends = []

    def get_permissions(self):
        if self.action == "destroy":
            return [IsOwnerRole()]
        return [IsOwner()]

    def _get(self, pk) -> Organization:
        oid = parse_uuid_or_none(pk)
        org = organizations_with_counts().filter(id=oid).first() if oid else None
        if org is None:
            raise NotFound("Organization not found")
        return org

    def list(self, request):
        qs = search_organizations(
            q=request.query_params.get("search", ""),
            status=request.query_params.get("status", "all"),
        )
        page = self.paginate_queryset(qs)
        return self.get_paginated_response(OwnerOrganizationSerializer(page, many=True).data)

    def retrieve(self, request, pk=None):
        return Response(OwnerOrganizationSerializer(self._get(pk)).data, status=status.HTTP_200_OK)

    def partial_update(self, request, pk=None):
        org = self._get(pk)

        ser = OwnerOrganizationUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        OrganizationService.update(organization_id=org.id, patch=OrganizationUpdate(**ser.validated_data))
        return Response(
            {"message": "Organization updated successfully", "organization": OwnerOrganizationSerializer(self._get(pk)).data},
            status=status.HTTP_200_OK,
        )

    def destroy(self, request, pk=None):
        org = self._get(pk)
        OrganizationService.delete(organization_id=org.id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["get", "put"], url_path="zoom-credentials")
    def zoom_credentials(self, request, pk=None):
        org = self._get(pk)

        if request.method == "GET":
            return Response(OwnerZoomCredentialsReadSerializer(org).data, status=status.HTTP_200_OK)

        ser = OwnerZoomCredentialsSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        org = OrganizationService.set_zoom_credentials(
            organization_id=org.id,
            account_id=ser.validated_data["zoom_account_id"],
            client_id=ser.validated_data["zoom_client_id"],
            client_secret=ser.validated_data["zoom_client_secret"],
        )
        return Response(
            {"message": "Zoom credentials updated successfully", "has_zoom_credentials": org.has_zoom_credentials},
            status=status.HTTP_200_OK,
        )


@extend_schema_view(
    list=extend_schema(
        tags=["Owner"],
        operation_id="v1_owner_meetings_list",
        parameters=[
            SEARCH_PARAM,
            OpenApiParameter(name="organization", type=OpenApiTypes.UUID, location=OpenApiParameter.QUERY, required=False),
        ],
    ),
    destroy=extend_schema(tags=["Owner"], operation_id="v1_owner_meetings_destroy", responses={204: None}),
)
class OwnerMeetingViewSet(viewsets.GenericViewSet):
    serializer_class = OwnerMeetingSerializer
    queryset = Meeting.objects.none()
    filter_backends = []

    def get_permissions(self):
        if self.action == "destroy":
            return [IsOwnerRole()]
        return [IsOwner()]

    def list(self, request):
        qs = owner_meetings(
            q=request.query_params.get("search", ""),
            organization_id=request.query_params.get("organization"),
        )
        page = self.paginate_queryset(qs)
        return self.get_paginated_response(OwnerMeetingSerializer(page, many=True).data)

    def destroy(self, request, pk=None):
        mid = parse_uuid_or_none(pk)
        meeting = Meeting.objects.filter(id=mid).first() if mid else None
        if meeting is None:
            raise NotFound("Meeting not found")
        MeetingService.delete(meeting=meeting)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema_view(
    list=extend_schema(tags=["Owner"], operation_id="v1_owner_registrants_list"),
    destroy=extend_schema(tags=["Owner"], operation_id="v1_owner_registrants_destroy", responses={204: None}),
)
class OwnerRegistrantViewSet(viewsets.GenericViewSet):
    permission_classes = [IsOwner]
    serializer_class = OwnerRegistrantSerializer
    queryset = Registrant.objects.none()
    filter_backends = [DjangoFilterBackend]
    filterset_class = OwnerRegistrantFilter

    def get_queryset(self):
        return all_registrants()

    def list(self, request):
        qs = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(qs)
        return self.get_paginated_response(OwnerRegistrantSerializer(page, many=True).data)

    def destroy(self, request, pk=None):
        rid = parse_uuid_or_none(pk)
        registrant = Registrant.objects.filter(id=rid).first() if rid else None
        if registrant is None:
            raise NotFound("Registrant not found")
        RegistrationService.delete(registrant=registrant)
        return Response(status=status.HTTP_204_NO_CONTENT)
