# zr_core/organizations/services.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework.exceptions import ValidationError

from zr_core.organizations.models import Organization
from zr_core.zoom import registry
from zr_core.zoom.sync import credentials_for

logger = logging.getLogger(__name__)

EMAIL_TAKEN_MSG = "Organization with this email already exists"

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def slugify_subdomain(name: str) -> str:
    slug = _NON_SLUG.sub("-", (name or "").lower()).strip("-")
    return slug or "org"


def unique_subdomain(name: str) -> str:
    """
    Lower-cased slug of the name; on collision append -1, -2, ... to the
    base slug until free.
    """
    base = slugify_subdomain(name)
    candidate = base
    n = 0
    while Organization.objects.filter(subdomain=candidate).exists():
        n += 1
        candidate = f"{base}-{n}"
    return candidate


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def _email_taken(email: str, *, exclude_org_id=None) -> bool:
    User = get_user_model()
    orgs = Organization.objects.filter(email=email)
    users = User.objects.filter(username=email)
    if exclude_org_id is not None:
        orgs = orgs.exclude(id=exclude_org_id)
        users = users.exclude(organization__id=exclude_org_id)
    return orgs.exists() or users.exists()


@dataclass(frozen=True)
class OrganizationUpdate:
    organization_name: Optional[str] = None
    email: Optional[str] = None
    is_active: Optional[bool] = None


class OrganizationService:
    """
    Organization writes (signup, profile edits, Zoom credentials).
    """

    @staticmethod
    @transaction.atomic
    def signup(*, organization_name: str, email: str, password: str) -> Organization:
        name = (organization_name or "").strip()
        email = normalize_email(email)

        if not name:
            raise ValidationError({"organization_name": "This field is required."})
        if not email:
            raise ValidationError({"email": "This field is required."})
        if not password:
            raise ValidationError({"password": "This field is required."})

        if _email_taken(email):
            raise ValidationError({"email": EMAIL_TAKEN_MSG})

        User = get_user_model()
        user = User.objects.create_user(username=email, email=email, password=password)

        org = Organization.objects.create(
            organization_name=name,
            email=email,
            subdomain=unique_subdomain(name),
            user=user,
        )
        logger.info("Organization registered id=%s subdomain=%s", org.id, org.subdomain)
        return org

    @staticmethod
    @transaction.atomic
    def update(*, organization_id, patch: OrganizationUpdate) -> Organization:
        org = Organization.objects.select_for_update().select_related("user").get(id=organization_id)

        fields: list[str] = []
        user_fields: list[str] = []

        if patch.organization_name is not None:
            name = patch.organization_name.strip()
            if not name:
                raise ValidationError({"organization_name": "This field may not be blank."})
            org.organization_name = name
            fields.append("organization_name")

        if patch.email is not None:
            email = normalize_email(patch.email)
            if not email:
                raise ValidationError({"email": "This field may not be blank."})
            if email != org.email:
                if _email_taken(email, exclude_org_id=org.id):
                    raise ValidationError({"email": "Email already in use"})
                org.email = email
                fields.append("email")
                org.user.username = email
                org.user.email = email
                user_fields += ["username", "email"]

        if patch.is_active is not None and patch.is_active != org.is_active:
            org.is_active = patch.is_active
            fields.append("is_active")

        if fields:
            org.save(update_fields=[*fields, "updated_at"])
        if user_fields:
            org.user.save(update_fields=user_fields)
        return org

    @staticmethod
    @transaction.atomic
    def set_zoom_credentials(
        *,
        organization_id,
        account_id: str,
        client_id: str,
        client_secret: str,
    ) -> Organization:
        """
        Store credentials as given (blanks allowed, nothing verified against Zoom)
        and drop any shared client built from the previous set.
        """
        org = Organization.objects.select_for_update().get(id=organization_id)
        previous = credentials_for(org)

        org.zoom_account_id = (account_id or "").strip()
        org.zoom_client_id = (client_id or "").strip()
        org.zoom_client_secret = (client_secret or "").strip()
        org.save(update_fields=["zoom_account_id", "zoom_client_id", "zoom_client_secret", "updated_at"])

        registry.invalidate(previous)
        logger.info("Zoom credentials updated organization=%s complete=%s", org.id, org.has_zoom_credentials)
        return org

    @staticmethod
    @transaction.atomic
    def delete(*, organization_id) -> None:
        # meetings and registrants cascade; the login user goes with the org
        org = Organization.objects.select_related("user").get(id=organization_id)
        registry.invalidate(credentials_for(org))
        user = org.user
        org.delete()
        user.delete()
        logger.info("Organization deleted id=%s", organization_id)
