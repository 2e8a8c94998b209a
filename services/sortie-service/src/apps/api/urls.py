# services/sortie-service/src/apps/api/urls.py
"""
Sortie Service API URL Configuration

Defines URL patterns for all sortie service endpoints.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.api.views import (
    SortieViewSet,
    ReportViewSet,
    AircraftViewSet,
    LocationViewSet,
    PersonnelViewSet,
)

app_name = 'api'

# Create router and register viewsets
router = DefaultRouter()
router.register(r'sorties', SortieViewSet, basename='sortie')
router.register(r'reports', ReportViewSet, basename='report')
router.register(r'aircraft', AircraftViewSet, basename='aircraft')
router.register(r'locations', LocationViewSet, basename='location')
router.register(r'personnel', PersonnelViewSet, basename='personnel')

urlpatterns = [
    # Router URLs
    path('', include(router.urls)),
]

# =============================================================================
# API Endpoint Summary
# =============================================================================
#
# Sorties:
#   GET    /api/v1/sorties/sorties/                          - List sorties
#   POST   /api/v1/sorties/sorties/                          - Record sortie
#   GET    /api/v1/sorties/sorties/{id}/                     - Sortie details
#   DELETE /api/v1/sorties/sorties/{id}/                     - Delete sortie
#   POST   /api/v1/sorties/sorties/{id}/status/              - Change status
#   GET    /api/v1/sorties/sorties/search/                   - Search sorties
#
# Reports:
#   GET    /api/v1/sorties/reports/daily/                    - Daily operations
#   GET    /api/v1/sorties/reports/aircraft-utilization/     - Aircraft utilization
#   GET    /api/v1/sorties/reports/passenger-movement/       - Passenger movement
#
# Reference Data:
#   GET    /api/v1/sorties/aircraft/                         - Active aircraft
#   GET    /api/v1/sorties/locations/                        - Active locations
#   GET    /api/v1/sorties/personnel/                        - Active personnel
#
# =============================================================================
