# services/sortie-service/src/apps/core/filters.py
"""
Sortie Search Filters

Query-string filters for sortie search. Every supplied filter narrows
the result; they combine with AND.
"""

import django_filters
from django.db.models import Q

from .models import Sortie


class SortieFilter(django_filters.FilterSet):
    """Filters accepted by sortie search."""

    aircraft = django_filters.CharFilter(
        field_name='aircraft__tail_number',
        lookup_expr='exact',
        help_text="Aircraft tail number"
    )
    location = django_filters.CharFilter(
        method='filter_location',
        help_text="Location code, matched against departure or arrival"
    )
    mission_type = django_filters.ChoiceFilter(
        choices=Sortie.MissionType.choices
    )
    start_date = django_filters.DateFilter(
        field_name='takeoff_time',
        lookup_expr='date__gte'
    )
    end_date = django_filters.DateFilter(
        field_name='takeoff_time',
        lookup_expr='date__lte'
    )
    sortie_number = django_filters.CharFilter(
        field_name='sortie_number',
        lookup_expr='icontains'
    )

    class Meta:
        model = Sortie
        fields = []

    def filter_location(self, queryset, name, value):
        return queryset.filter(
            Q(departure_location__code=value) | Q(arrival_location__code=value)
        )
