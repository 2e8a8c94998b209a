# services/sortie-service/src/apps/api/serializers/__init__.py
"""
Sortie Service API Serializers

REST API serializers for sortie recording and reporting.
"""

from .sortie_serializers import (
    SortieCreateSerializer,
    SortieStatusSerializer,
    SortieSummarySerializer,
    CrewAssignmentSerializer,
    PassengerRecordSerializer,
    CargoRecordSerializer,
)

from .report_serializers import (
    DailyReportQuerySerializer,
    UtilizationQuerySerializer,
    PassengerMovementQuerySerializer,
    DailyOperationsSerializer,
    AircraftUtilizationSerializer,
    PassengerMovementSerializer,
)

from .reference_serializers import (
    AircraftSerializer,
    LocationSerializer,
    PersonnelSerializer,
)

__all__ = [
    # Sortie
    'SortieCreateSerializer',
    'SortieStatusSerializer',
    'SortieSummarySerializer',
    'CrewAssignmentSerializer',
    'PassengerRecordSerializer',
    'CargoRecordSerializer',
    # Reports
    'DailyReportQuerySerializer',
    'UtilizationQuerySerializer',
    'PassengerMovementQuerySerializer',
    'DailyOperationsSerializer',
    'AircraftUtilizationSerializer',
    'PassengerMovementSerializer',
    # Reference data
    'AircraftSerializer',
    'LocationSerializer',
    'PersonnelSerializer',
]
