# zr_core/owners/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from zr_core.meetings.models import Meeting
from zr_core.organizations.models import Organization
from zr_core.registrants.models import Registrant


class OwnerProfileUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150, required=False, allow_blank=True)
    email = serializers.EmailField(required=False)


class OwnerPasswordSerializer(serializers.Serializer):
    current_password = serializers.CharField(trim_whitespace=False)
    new_password = serializers.CharField(min_length=6, trim_whitespace=False)


class OwnerOrganizationSerializer(serializers.ModelSerializer):
    has_zoom_credentials = serializers.BooleanField(read_only=True)
    meeting_count = serializers.IntegerField(read_only=True, default=0)
    registrant_count = serializers.IntegerField(read_only=True, default=0)

    class Meta:
        model = Organization
        fields = [
            "id",
            "organization_name",
            "email",
            "subdomain",
            "is_active",
            "has_zoom_credentials",
            "meeting_count",
            "registrant_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class OwnerOrganizationUpdateSerializer(serializers.Serializer):
    organization_name = serializers.CharField(max_length=255, required=False)
    email = serializers.EmailField(required=False)
    is_active = serializers.BooleanField(required=False)


class OwnerZoomCredentialsSerializer(serializers.Serializer):
    # blanks allowed: owners may clear an organization's credentials
    zoom_account_id = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    zoom_client_id = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    zoom_client_secret = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")


class OwnerZoomCredentialsReadSerializer(serializers.ModelSerializer):
    organization_id = serializers.UUIDField(source="id", read_only=True)

    class Meta:
        model = Organization
        fields = [
            "organization_id",
            "organization_name",
            "subdomain",
            "zoom_account_id",
            "zoom_client_id",
            "zoom_client_secret",
        ]
        read_only_fields = fields


class OwnerMeetingSerializer(serializers.ModelSerializer):
    organization_name = serializers.CharField(source="organization.organization_name", read_only=True)
    subdomain = serializers.CharField(source="organization.subdomain", read_only=True)
    registrant_count = serializers.IntegerField(read_only=True, default=0)

    class Meta:
        model = Meeting
        fields = [
            "id",
            "organization",
            "organization_name",
            "subdomain",
            "meeting_name",
            "meeting_type",
            "zoom_meeting_id",
            "start_time",
            "duration",
            "timezone",
            "is_active",
            "registrant_count",
            "created_at",
        ]
        read_only_fields = fields


class OwnerRegistrantSerializer(serializers.ModelSerializer):
    organization_name = serializers.CharField(source="organization.organization_name", read_only=True)
    meeting_name = serializers.CharField(source="meeting.meeting_name", read_only=True)
    sync_status = serializers.CharField(read_only=True)

    class Meta:
        model = Registrant
        fields = [
            "id",
            "organization",
            "organization_name",
            "meeting",
            "meeting_name",
            "first_name",
            "last_name",
            "email",
            "company",
            "synced_to_zoom",
            "sync_status",
            "sync_error",
            "registered_at",
        ]
        read_only_fields = fields
