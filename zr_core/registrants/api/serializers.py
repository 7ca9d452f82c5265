# zr_core/registrants/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from zr_core.registrants.models import Registrant


class RegistrationSerializer(serializers.Serializer):
    subdomain = serializers.CharField(max_length=100)
    meeting_id = serializers.CharField(max_length=64)

    first_name = serializers.CharField(max_length=255)
    last_name = serializers.CharField(max_length=255)
    email = serializers.EmailField()

    phone = serializers.CharField(max_length=64, required=False, allow_blank=True)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True)
    city = serializers.CharField(max_length=128, required=False, allow_blank=True)
    country = serializers.CharField(max_length=128, required=False, allow_blank=True)
    zip_code = serializers.CharField(max_length=32, required=False, allow_blank=True)
    state = serializers.CharField(max_length=128, required=False, allow_blank=True)
    company = serializers.CharField(max_length=255, required=False, allow_blank=True)
    job_title = serializers.CharField(max_length=255, required=False, allow_blank=True)
    industry = serializers.CharField(max_length=255, required=False, allow_blank=True)
    purchasing_time_frame = serializers.CharField(max_length=128, required=False, allow_blank=True)
    role_in_purchase_process = serializers.CharField(max_length=128, required=False, allow_blank=True)
    number_of_employees = serializers.CharField(max_length=64, required=False, allow_blank=True)
    comments = serializers.CharField(required=False, allow_blank=True)

    custom_fields = serializers.DictField(required=False, default=dict)


class RegistrationResultSerializer(serializers.ModelSerializer):
    class Meta:
        model = Registrant
        fields = ["id", "first_name", "last_name", "email", "synced_to_zoom", "zoom_join_url"]
        read_only_fields = fields


class RegistrationResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    registrant = RegistrationResultSerializer()


class RegistrantSerializer(serializers.ModelSerializer):
    sync_status = serializers.CharField(read_only=True)
    meeting_name = serializers.CharField(source="meeting.meeting_name", read_only=True)

    class Meta:
        model = Registrant
        fields = [
            "id",
            "meeting",
            "meeting_name",
            "first_name",
            "last_name",
            "email",
            "phone",
            "address",
            "city",
            "country",
            "zip_code",
            "state",
            "company",
            "job_title",
            "industry",
            "purchasing_time_frame",
            "role_in_purchase_process",
            "number_of_employees",
            "comments",
            "custom_fields",
            "synced_to_zoom",
            "sync_status",
            "sync_error",
            "zoom_registrant_id",
            "zoom_join_url",
            "registered_at",
        ]
        read_only_fields = fields


class RetrySyncResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    registrant = RegistrantSerializer()
