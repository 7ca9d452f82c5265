# zr_core/organizations/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from zr_core.organizations.models import Organization


class OrganizationProfileSerializer(serializers.ModelSerializer):
    has_zoom_credentials = serializers.BooleanField(read_only=True)

    class Meta:
        model = Organization
        fields = [
            "id",
            "organization_name",
            "email",
            "subdomain",
            "has_zoom_credentials",
            "created_at",
        ]
        read_only_fields = fields


class OrganizationPublicSerializer(serializers.ModelSerializer):
    class Meta:
        model = Organization
        fields = ["organization_name", "subdomain"]
        read_only_fields = fields


class OrganizationSignupSerializer(serializers.Serializer):
    organization_name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6, trim_whitespace=False)


class SignupResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    access = serializers.CharField()
    organization = OrganizationProfileSerializer()


class ZoomCredentialsSerializer(serializers.Serializer):
    zoom_account_id = serializers.CharField(max_length=255)
    zoom_client_id = serializers.CharField(max_length=255)
    zoom_client_secret = serializers.CharField(max_length=255)


class ZoomCredentialsResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    has_zoom_credentials = serializers.BooleanField()
