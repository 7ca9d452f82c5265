# zr_core/organizations/selectors.py
from __future__ import annotations

from typing import Optional

from django.db.models import Count, Q, QuerySet

from zr_core.organizations.models import Organization


def organization_qs() -> QuerySet[Organization]:
    return Organization.objects.all()


def get_active_by_subdomain_or_none(*, subdomain: str) -> Optional[Organization]:
    return Organization.objects.filter(subdomain=(subdomain or "").strip().lower(), is_active=True).first()


def organizations_with_counts() -> QuerySet[Organization]:
    return Organization.objects.annotate(
        meeting_count=Count("meetings", distinct=True),
        registrant_count=Count("registrants", distinct=True),
    )


def search_organizations(*, q: str = "", status: str = "all") -> QuerySet[Organization]:
    qs = organizations_with_counts()
    q = (q or "").strip()
    if q:
        qs = qs.filter(Q(organization_name__icontains=q) | Q(email__icontains=q) | Q(subdomain__icontains=q))
    if status == "active":
        qs = qs.filter(is_active=True)
    elif status == "inactive":
        qs = qs.filter(is_active=False)
    return qs.order_by("-created_at")
