from django.contrib import admin

from zr_core.meetings.models import Meeting


@admin.register(Meeting)
class MeetingAdmin(admin.ModelAdmin):
    list_display = ("meeting_name", "meeting_type", "organization", "zoom_meeting_id", "start_time", "is_active")
    list_filter = ("meeting_type", "is_active")
    search_fields = ("meeting_name", "zoom_meeting_id", "organization__organization_name")
    ordering = ("-start_time",)
    # fixed at creation
    readonly_fields = ("id", "organization", "meeting_type", "zoom_meeting_id", "created_at", "updated_at")
