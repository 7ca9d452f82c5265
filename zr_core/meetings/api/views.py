# zr_core/meetings/api/views.py
from __future__ import annotations

from drf_spectacular.utils import OpenApiTypes, extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from zr_core.common.api.pagination import paginate
from zr_core.common.permissions import IsOrganizationUser
from zr_core.meetings.api.serializers import (
    MeetingCreateSerializer,
    MeetingSerializer,
    MeetingUpdateSerializer,
    PublicMeetingResponseSerializer,
    PublicMeetingSerializer,
)
from zr_core.meetings.models import Meeting
from zr_core.meetings.selectors import (
    get_meeting_for_organization_or_none,
    get_public_meeting_or_none,
    meetings_for_organization,
)
from zr_core.meetings.services import MeetingService
from zr_core.organizations.selectors import get_active_by_subdomain_or_none

MEETING_NOT_FOUND_MSG = "Meeting not found"


@extend_schema_view(
    list=extend_schema(tags=["Meetings"], operation_id="v1_meetings_list", responses={200: MeetingSerializer(many=True)}),
    retrieve=extend_schema(tags=["Meetings"], operation_id="v1_meetings_retrieve", responses={200: MeetingSerializer}),
    create=extend_schema(tags=["Meetings"], operation_id="v1_meetings_create", request=MeetingCreateSerializer, responses={201: MeetingSerializer}),
    update=extend_schema(tags=["Meetings"], operation_id="v1_meetings_update", request=MeetingUpdateSerializer, responses={200: MeetingSerializer}),
    partial_update=extend_schema(tags=["Meetings"], operation_id="v1_meetings_partial_update", request=MeetingUpdateSerializer, responses={200: MeetingSerializer}),
    destroy=extend_schema(tags=["Meetings"], operation_id="v1_meetings_destroy", responses={204: None}),
    zoom_details=extend_schema(tags=["Meetings"], operation_id="v1_meetings_zoom_details", responses={200: OpenApiTypes.OBJECT}),
    public=extend_schema(tags=["Meetings"], operation_id="v1_meetings_public", responses={200: PublicMeetingResponseSerializer}),
)
class MeetingViewSet(viewsets.ViewSet):
    """
    Meetings of the caller's organization, plus the public landing-page read.
    """

    serializer_class = MeetingSerializer
    queryset = Meeting.objects.none()

    def get_permissions(self):
        if self.action == "public":
            return [AllowAny()]
        return [IsOrganizationUser()]

    def _get_owned(self, request, pk) -> Meeting:
        meeting = get_meeting_for_organization_or_none(organization_id=request.organization.id, meeting_id=pk)
        if meeting is None:
            raise NotFound(MEETING_NOT_FOUND_MSG)
        return meeting

    def list(self, request):
        qs = meetings_for_organization(organization_id=request.organization.id)
        return paginate(request, qs, MeetingSerializer)

    def retrieve(self, request, pk=None):
        return Response(MeetingSerializer(self._get_owned(request, pk)).data, status=status.HTTP_200_OK)

    def create(self, request):
        ser = MeetingCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        meeting = MeetingService.create(organization=request.organization, **ser.validated_data)
        return Response(MeetingSerializer(meeting).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        meeting = self._get_owned(request, pk)

        ser = MeetingUpdateSerializer(data=request.data, partial=True)
        ser.is_valid(raise_exception=True)

        meeting = MeetingService.update(meeting=meeting, changes=ser.validated_data)
        return Response(MeetingSerializer(meeting).data, status=status.HTTP_200_OK)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        MeetingService.delete(meeting=self._get_owned(request, pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["get"], url_path="zoom-details")
    def zoom_details(self, request, pk=None):
        meeting = self._get_owned(request, pk)
        return Response(MeetingService.zoom_details(meeting=meeting), status=status.HTTP_200_OK)

    @action(detail=False, methods=["get"], url_path=r"public/(?P<subdomain>[a-z0-9-]+)/(?P<meeting_id>[0-9a-fA-F-]+)")
    def public(self, request, subdomain=None, meeting_id=None):
        org = get_active_by_subdomain_or_none(subdomain=subdomain)
        if org is None:
            raise NotFound("Organization not found")

        meeting = get_public_meeting_or_none(organization_id=org.id, meeting_id=meeting_id)
        if meeting is None:
            raise NotFound(MEETING_NOT_FOUND_MSG)

        return Response(
            {
                "meeting": PublicMeetingSerializer(meeting).data,
                "organization": {"organization_name": org.organization_name, "subdomain": org.subdomain},
            },
            status=status.HTTP_200_OK,
        )
