# zr_core/owners/services.py
from __future__ import annotations

import logging
from typing import Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework.exceptions import ValidationError

logger = logging.getLogger(__name__)


class OwnerService:
    """
    Owner accounts are Django staff users: superuser = role "owner",
    plain staff = role "admin".
    """

    @staticmethod
    @transaction.atomic
    def update_profile(*, user, name: Optional[str] = None, email: Optional[str] = None):
        User = get_user_model()
        fields: list[str] = []

        if email is not None:
            email = email.strip().lower()
            if email and email != user.username:
                if User.objects.filter(username=email).exclude(pk=user.pk).exists():
                    raise ValidationError({"email": "Email already in use"})
                user.username = email
                user.email = email
                fields += ["username", "email"]

        if name is not None and name.strip():
            user.first_name = name.strip()
            user.last_name = ""
            fields += ["first_name", "last_name"]

        if fields:
            user.save(update_fields=fields)
        return user

    @staticmethod
    @transaction.atomic
    def change_password(*, user, current_password: str, new_password: str) -> None:
        if not user.check_password(current_password):
            raise ValidationError({"current_password": "Current password is incorrect"})
        user.set_password(new_password)
        user.save(update_fields=["password"])
        logger.info("Owner password changed user=%s", user.pk)

    @staticmethod
    @transaction.atomic
    def ensure_default_owner(*, email: Optional[str] = None, password: Optional[str] = None) -> tuple[object, bool]:
        """
        Create the bootstrap owner when no staff account exists yet.
        Returns (user, created). Idempotent.
        """
        User = get_user_model()
        existing = User.objects.filter(is_staff=True).order_by("pk").first()
        if existing is not None:
            return existing, False

        email = (email or settings.DEFAULT_OWNER_EMAIL).strip().lower()
        password = password or settings.DEFAULT_OWNER_PASSWORD

        user = User.objects.create_superuser(username=email, email=email, password=password, first_name="Owner")
        logger.warning("Default owner account created email=%s; change its password", email)
        return user, True
