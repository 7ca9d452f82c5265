# zr_core/organizations/models.py
from django.conf import settings
from django.db import models

from zr_core.common.models import UUIDModel


class Organization(UUIDModel):
    """
    Tenant. Every meeting and registrant hangs off one of these.
    The linked auth user is the login identity (username == email).
    """

    organization_name = models.CharField(max_length=255)
    email = models.EmailField(unique=True)
    subdomain = models.SlugField(max_length=100, unique=True)

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="organization",
    )

    # gates public pages and login
    is_active = models.BooleanField(default=True, db_index=True)

    # Zoom Server-to-Server OAuth app; never verified on save
    zoom_account_id = models.CharField(max_length=255, blank=True, default="")
    zoom_client_id = models.CharField(max_length=255, blank=True, default="")
    zoom_client_secret = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        db_table = "organizations_organization"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.organization_name} ({self.subdomain})"

    @property
    def has_zoom_credentials(self) -> bool:
        return bool(self.zoom_account_id and self.zoom_client_id and self.zoom_client_secret)
