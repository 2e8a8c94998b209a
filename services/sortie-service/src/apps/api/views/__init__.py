# services/sortie-service/src/apps/api/views/__init__.py
"""
Sortie Service API Views

REST API views for sortie recording and reporting.
"""

from .sortie_views import SortieViewSet
from .report_views import ReportViewSet
from .reference_views import AircraftViewSet, LocationViewSet, PersonnelViewSet

__all__ = [
    'SortieViewSet',
    'ReportViewSet',
    'AircraftViewSet',
    'LocationViewSet',
    'PersonnelViewSet',
]
