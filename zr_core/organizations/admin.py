from django.contrib import admin

from zr_core.organizations.models import Organization
from zr_core.organizations.services import OrganizationService


@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):
    list_display = ("organization_name", "subdomain", "email", "is_active", "created_at")
    list_filter = ("is_active", "created_at")
    search_fields = ("organization_name", "subdomain", "email")
    ordering = ("-created_at",)
    # credentials are edited through the API so shared Zoom clients get invalidated
    readonly_fields = (
        "id",
        "user",
        "zoom_account_id",
        "zoom_client_id",
        "has_zoom_credentials",
        "created_at",
        "updated_at",
    )

    fieldsets = (
        (None, {"fields": ("id", "organization_name", "email", "subdomain", "user", "is_active")}),
        ("Zoom", {"fields": ("zoom_account_id", "zoom_client_id", "has_zoom_credentials")}),
        ("Timestamps", {"fields": ("created_at", "updated_at")}),
    )

    def delete_model(self, request, obj):
        OrganizationService.delete(organization_id=obj.pk)

    def delete_queryset(self, request, queryset):
        for org_id in queryset.values_list("id", flat=True):
            OrganizationService.delete(organization_id=org_id)
