# zr_core/iam/api/serializers.py
from __future__ import annotations

from rest_framework import serializers


class LoginRequestSerializer(serializers.Serializer):
    email = serializers.CharField(max_length=254)
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class OrganizationSummarySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    organization_name = serializers.CharField()
    email = serializers.EmailField()
    subdomain = serializers.CharField()
    has_zoom_credentials = serializers.BooleanField()


class LoginResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    access = serializers.CharField()
    organization = OrganizationSummarySerializer()


class OwnerSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.SerializerMethodField()
    email = serializers.EmailField()
    role = serializers.SerializerMethodField()
    is_active = serializers.BooleanField()
    last_login = serializers.DateTimeField(allow_null=True)

    def get_name(self, obj) -> str:
        return obj.get_full_name() or obj.username

    def get_role(self, obj) -> str:
        return "owner" if obj.is_superuser else "admin"


class OwnerLoginResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    access = serializers.CharField()
    owner = OwnerSerializer()


class RefreshRequestSerializer(serializers.Serializer):
    refresh = serializers.CharField(required=False)


class DetailResponseSerializer(serializers.Serializer):
    detail = serializers.CharField()
