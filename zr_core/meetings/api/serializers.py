# zr_core/meetings/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from zr_core.meetings.models import FormFieldType, Meeting, MeetingType


class FormFieldSerializer(serializers.Serializer):
    field_name = serializers.CharField(max_length=100)
    field_label = serializers.CharField(max_length=255)
    field_type = serializers.ChoiceField(choices=FormFieldType.choices, default=FormFieldType.TEXT)
    is_required = serializers.BooleanField(default=False)
    is_standard_zoom_field = serializers.BooleanField(default=False)
    zoom_field_key = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    options = serializers.ListField(child=serializers.CharField(max_length=255), required=False, default=list)
    order = serializers.IntegerField(required=False, default=0)

    def validate(self, attrs):
        if attrs["field_type"] == FormFieldType.SELECT and not attrs.get("options"):
            raise serializers.ValidationError({"options": "Select fields need at least one option."})
        return attrs


def _validate_unique_field_names(fields: list) -> list:
    names = [f["field_name"] for f in fields]
    if len(names) != len(set(names)):
        raise serializers.ValidationError("Form field names must be unique.")
    return sorted(fields, key=lambda f: f.get("order", 0))


class MeetingSerializer(serializers.ModelSerializer):
    class Meta:
        model = Meeting
        fields = [
            "id",
            "meeting_name",
            "meeting_type",
            "description",
            "zoom_meeting_id",
            "start_time",
            "duration",
            "timezone",
            "landing_page_title",
            "landing_page_description",
            "form_fields",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class MeetingCreateSerializer(serializers.Serializer):
    meeting_name = serializers.CharField(max_length=255)
    meeting_type = serializers.ChoiceField(choices=MeetingType.choices)
    start_time = serializers.DateTimeField()
    description = serializers.CharField(required=False, allow_blank=True, default="")
    duration = serializers.IntegerField(required=False, min_value=1, default=60)
    timezone = serializers.CharField(required=False, max_length=64, default="UTC")
    landing_page_title = serializers.CharField(required=False, allow_blank=True, max_length=255, default="")
    landing_page_description = serializers.CharField(required=False, allow_blank=True, default="")
    form_fields = FormFieldSerializer(many=True, required=False, default=list)
    create_in_zoom = serializers.BooleanField(required=False, default=False)

    def validate_form_fields(self, value):
        return _validate_unique_field_names(value)


class MeetingUpdateSerializer(serializers.Serializer):
    meeting_name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    start_time = serializers.DateTimeField(required=False)
    duration = serializers.IntegerField(required=False, min_value=1)
    timezone = serializers.CharField(required=False, max_length=64)
    landing_page_title = serializers.CharField(required=False, allow_blank=True, max_length=255)
    landing_page_description = serializers.CharField(required=False, allow_blank=True)
    form_fields = FormFieldSerializer(many=True, required=False)
    is_active = serializers.BooleanField(required=False)

    def validate_form_fields(self, value):
        return _validate_unique_field_names(value)


class PublicMeetingSerializer(serializers.ModelSerializer):
    class Meta:
        model = Meeting
        fields = [
            "id",
            "meeting_name",
            "meeting_type",
            "description",
            "start_time",
            "duration",
            "timezone",
            "landing_page_title",
            "landing_page_description",
            "form_fields",
        ]
        read_only_fields = fields


class PublicMeetingResponseSerializer(serializers.Serializer):
    meeting = PublicMeetingSerializer()
    organization = serializers.DictField()
