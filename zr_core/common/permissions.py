# zr_core/common/permissions.py
from __future__ import annotations

from rest_framework.permissions import BasePermission


class IsOrganizationUser(BasePermission):
    """
    Tenant-scoped endpoints.

    Resolves the caller's organization and attaches it as request.organization
    so views and services never read a tenant id from the client.
    A deactivated organization is refused even with a still-valid token.
    """
    message = "Organization account required."

    def has_permission(self, request, view) -> bool:
        from zr_core.organizations.models import Organization

        user = request.user
        if not user or not getattr(user, "is_authenticated", False):
            return False

        try:
            org = Organization.objects.get(user_id=user.pk)
        except Organization.DoesNotExist:
            return False

        if not org.is_active:
            self.message = "Organization account is deactivated."
            return False

        request.organization = org
        return True


class IsOwner(BasePermission):
    """Owner portal: any active staff account."""
    message = "Owner access required."

    def has_permission(self, request, view) -> bool:
        user = request.user
        return bool(
            user
            and getattr(user, "is_authenticated", False)
            and user.is_active
            and user.is_staff
        )


class IsOwnerRole(IsOwner):
    """Destructive owner actions: role `owner` (superuser) only, `admin` staff is refused."""
    message = "Only the owner role can perform this action."

    def has_permission(self, request, view) -> bool:
        return super().has_permission(request, view) and request.user.is_superuser
