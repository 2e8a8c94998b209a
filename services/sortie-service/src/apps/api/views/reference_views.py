# services/sortie-service/src/apps/api/views/reference_views.py
"""
Reference Data Views

Active aircraft, locations and personnel for sortie entry forms.
"""

from rest_framework.response import Response

from apps.core.services import ReferenceDataService
from apps.api.serializers import (
    AircraftSerializer,
    LocationSerializer,
    PersonnelSerializer,
)
from .base import BaseSortieViewSet


class AircraftViewSet(BaseSortieViewSet):
    def list(self, request):
        """GET /api/v1/sorties/aircraft/"""
        aircraft = ReferenceDataService.active_aircraft()
        return Response(AircraftSerializer(aircraft, many=True).data)


class LocationViewSet(BaseSortieViewSet):
    def list(self, request):
        """GET /api/v1/sorties/locations/"""
        locations = ReferenceDataService.active_locations()
        return Response(LocationSerializer(locations, many=True).data)


class PersonnelViewSet(BaseSortieViewSet):
    def list(self, request):
        """GET /api/v1/sorties/personnel/"""
        personnel = ReferenceDataService.active_personnel()
        return Response(PersonnelSerializer(personnel, many=True).data)
