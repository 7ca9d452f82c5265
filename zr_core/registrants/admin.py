from django.contrib import admin

from zr_core.registrants.models import Registrant


@admin.register(Registrant)
class RegistrantAdmin(admin.ModelAdmin):
    list_display = ("email", "first_name", "last_name", "meeting", "synced_to_zoom", "registered_at")
    list_filter = ("synced_to_zoom", "registered_at")
    search_fields = ("email", "first_name", "last_name", "company")
    ordering = ("-registered_at",)
    # sync state only moves through registration or the retry endpoint
    readonly_fields = (
        "id",
        "meeting",
        "organization",
        "email",
        "synced_to_zoom",
        "zoom_registrant_id",
        "zoom_join_url",
        "sync_error",
        "registered_at",
    )
