# zr_core/registrants/filters.py
import django_filters

from zr_core.registrants.models import Registrant, SyncStatus
from zr_core.registrants.selectors import filter_sync_status, search_registrants


class RegistrantFilter(django_filters.FilterSet):
    meeting = django_filters.UUIDFilter(field_name="meeting_id")
    sync_status = django_filters.ChoiceFilter(choices=SyncStatus.choices, method="filter_sync_status")
    q = django_filters.CharFilter(method="filter_q")

    class Meta:
        model = Registrant
        fields = ["meeting", "sync_status", "q"]

    def filter_sync_status(self, queryset, name, value):
        return filter_sync_status(queryset, value)

    def filter_q(self, queryset, name, value):
        return search_registrants(queryset, value)
