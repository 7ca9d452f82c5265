# zr_core/owners/filters.py
import django_filters

from zr_core.registrants.models import Registrant
from zr_core.registrants.selectors import search_registrants


class OwnerRegistrantFilter(django_filters.FilterSet):
    organization = django_filters.UUIDFilter(field_name="organization_id")
    meeting = django_filters.UUIDFilter(field_name="meeting_id")
    synced_to_zoom = django_filters.BooleanFilter()
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Registrant
        fields = ["organization", "meeting", "synced_to_zoom", "search"]

    def filter_search(self, queryset, name, value):
        return search_registrants(queryset, value)
