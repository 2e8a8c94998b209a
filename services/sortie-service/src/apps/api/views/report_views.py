# services/sortie-service/src/apps/api/views/report_views.py
"""
Report Views

REST API views for sortie reports.
"""

from django.utils import timezone
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.services import ReportService
from apps.api.serializers import (
    DailyReportQuerySerializer,
    UtilizationQuerySerializer,
    PassengerMovementQuerySerializer,
    DailyOperationsSerializer,
    AircraftUtilizationSerializer,
    PassengerMovementSerializer,
)
from .base import BaseSortieViewSet


class ReportViewSet(BaseSortieViewSet):
    """ViewSet for aggregate sortie reports."""

    @action(detail=False, methods=['get'])
    def daily(self, request):
        """
        Completed sorties for one day, by mission type.

        GET /api/v1/sorties/reports/daily/?date=YYYY-MM-DD
        """
        params = self.validate_input(DailyReportQuerySerializer, request.query_params)
        report_date = params.validated_data.get('date') or timezone.localdate()

        rows = ReportService.daily_operations(report_date)

        return Response({
            'date': report_date,
            'results': DailyOperationsSerializer(rows, many=True).data,
        })

    @action(detail=False, methods=['get'], url_path='aircraft-utilization')
    def aircraft_utilization(self, request):
        """
        Completed-sortie usage per active aircraft.

        GET /api/v1/sorties/reports/aircraft-utilization/?days=30
        """
        params = self.validate_input(UtilizationQuerySerializer, request.query_params)

        rows = ReportService.aircraft_utilization(params.validated_data.get('days'))

        return Response({
            'results': AircraftUtilizationSerializer(rows, many=True).data,
        })

    @action(detail=False, methods=['get'], url_path='passenger-movement')
    def passenger_movement(self, request):
        """
        Passenger totals per category.

        GET /api/v1/sorties/reports/passenger-movement/?start_date=&end_date=
        """
        params = self.validate_input(PassengerMovementQuerySerializer, request.query_params)

        rows = ReportService.passenger_movement(
            start=params.validated_data.get('start_date'),
            end=params.validated_data.get('end_date'),
        )

        return Response({
            'results': PassengerMovementSerializer(rows, many=True).data,
        })
