# zr_core/registrants/api/views.py
from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from zr_core.common.permissions import IsOrganizationUser
from zr_core.meetings.selectors import get_meeting_for_organization_or_none
from zr_core.registrants.api.serializers import (
    RegistrantSerializer,
    RegistrationResponseSerializer,
    RegistrationResultSerializer,
    RegistrationSerializer,
    RetrySyncResponseSerializer,
)
from zr_core.registrants.filters import RegistrantFilter
from zr_core.registrants.models import Registrant
from zr_core.registrants.selectors import (
    get_registrant_for_organization_or_none,
    registrants_for_meeting,
    registrants_for_organization,
)
from zr_core.registrants.services import RegistrationService


@extend_schema_view(
    list=extend_schema(tags=["Registrants"], operation_id="v1_registrants_list"),
    destroy=extend_schema(tags=["Registrants"], operation_id="v1_registrants_destroy", responses={204: None}),
    register=extend_schema(tags=["Registrants"], operation_id="v1_registrants_register", request=RegistrationSerializer, responses={201: RegistrationResponseSerializer}),
    for_meeting=extend_schema(tags=["Registrants"], operation_id="v1_registrants_for_meeting", filters=False),
    sync=extend_schema(tags=["Registrants"], operation_id="v1_registrants_sync", request=None, responses={200: RetrySyncResponseSerializer}),
)
class RegistrantViewSet(viewsets.GenericViewSet):
    """
    Registrants of the caller's organization. `register` is the public form post.
    """

    serializer_class = RegistrantSerializer
    queryset = Registrant.objects.none()
    filter_backends = [DjangoFilterBackend]
    filterset_class = RegistrantFilter

    def get_permissions(self):
        if self.action == "register":
            return [AllowAny()]
        return [IsOrganizationUser()]

    def get_queryset(self):
        if getattr(self, "swagger_fake_view", False):
            return Registrant.objects.none()
        return registrants_for_organization(organization_id=self.request.organization.id)

    def _paginated(self, qs):
        page = self.paginate_queryset(qs)
        if page is not None:
            return self.get_paginated_response(RegistrantSerializer(page, many=True).data)
        return Response(RegistrantSerializer(qs, many=True).data)

    def list(self, request):
        return self._paginated(self.filter_queryset(self.get_queryset()))

    def destroy(self, request, pk=None):
        registrant = get_registrant_for_organization_or_none(organization_id=request.organization.id, registrant_id=pk)
        if registrant is None:
            raise NotFound("Registrant not found")
        RegistrationService.delete(registrant=registrant)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["post"], url_path="register")
    def register(self, request):
        ser = RegistrationSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        fields = dict(ser.validated_data)
        subdomain = fields.pop("subdomain")
        meeting_id = fields.pop("meeting_id")

        registrant = RegistrationService.register(subdomain=subdomain, meeting_id=meeting_id, fields=fields)
        return Response(
            {"message": "Registration successful", "registrant": RegistrationResultSerializer(registrant).data},
            status=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["get"], url_path=r"meeting/(?P<meeting_id>[0-9a-fA-F-]+)")
    def for_meeting(self, request, meeting_id=None):
        meeting = get_meeting_for_organization_or_none(organization_id=request.organization.id, meeting_id=meeting_id)
        if meeting is None:
            raise NotFound("Meeting not found")
        return self._paginated(registrants_for_meeting(organization_id=request.organization.id, meeting_id=meeting.id))

    @action(detail=True, methods=["post"], url_path="sync")
    def sync(self, request, pk=None):
        registrant = RegistrationService.retry_sync(organization=request.organization, registrant_id=pk)
        return Response(
            {"message": "Registrant synced to Zoom successfully", "registrant": RegistrantSerializer(registrant).data},
            status=status.HTTP_200_OK,
        )
