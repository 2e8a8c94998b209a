# services/sortie-service/src/apps/core/services/reference_service.py
"""
Reference Data Service

Active aircraft, locations and personnel offered when recording sorties.
"""

from ..models import Aircraft, Location, Personnel


class ReferenceDataService:
    """Read-only lookups of reference data still in service."""

    @classmethod
    def active_aircraft(cls):
        return (
            Aircraft.objects
            .active()
            .select_related('current_location')
            .order_by('name')
        )

    @classmethod
    def active_locations(cls):
        return Location.objects.active().order_by('code')

    @classmethod
    def active_personnel(cls):
        return (
            Personnel.objects
            .active()
            .select_related('current_location')
            .order_by('full_name')
        )
