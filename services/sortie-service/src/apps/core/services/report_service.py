# services/sortie-service/src/apps/core/services/report_service.py
"""
Report Service

Aggregate reports over completed sorties.
"""

import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import List, Dict, Any, Optional

from django.conf import settings
from django.db.models import Avg, Count, Q, Sum, Value
from django.db.models.functions import Coalesce
from django.utils import timezone

from ..models import Aircraft, PassengerRecord, Sortie
from .exceptions import SortieValidationError

logger = logging.getLogger(__name__)


class ReportService:
    """Service class for sortie reports."""

    @staticmethod
    def _minutes_to_hours(minutes) -> Decimal:
        return (Decimal(minutes or 0) / Decimal(60)).quantize(Decimal('0.01'))

    # ==========================================================================
    # Daily Operations
    # ==========================================================================

    @classmethod
    def daily_operations(cls, report_date: date = None) -> List[Dict[str, Any]]:
        """
        Completed sorties for one takeoff date, one row per mission type.

        Args:
            report_date: Takeoff date, today by default

        Returns:
            Rows with sortie count and total flight minutes/hours
        """
        report_date = report_date or timezone.localdate()

        rows = (
            Sortie.objects
            .filter(takeoff_time__date=report_date)
            .daily_operations()
            .order_by('mission_type')
        )

        return [
            {
                'flight_date': row['flight_date'],
                'mission_type': row['mission_type'],
                'sortie_count': row['sortie_count'],
                'total_flight_minutes': row['total_flight_minutes'],
                'total_flight_hours': cls._minutes_to_hours(row['total_flight_minutes']),
            }
            for row in rows
        ]

    # ==========================================================================
    # Aircraft Utilization
    # ==========================================================================

    @classmethod
    def aircraft_utilization(cls, days: int = None) -> List[Dict[str, Any]]:
        """
        Completed-sortie usage of every active aircraft over the last days.

        Aircraft without sorties in the window are included with zeros.
        """
        days = days or settings.REPORT_UTILIZATION_DAYS
        if days < 1:
            raise SortieValidationError(
                message="Report window must be at least one day",
                field="days"
            )

        since = timezone.localdate() - timedelta(days=days)
        in_window = Q(
            sorties__status=Sortie.Status.COMPLETED,
            sorties__takeoff_time__date__gte=since,
        )

        aircraft = (
            Aircraft.objects
            .active()
            .annotate(
                total_sorties=Count('sorties', filter=in_window),
                period_minutes=Coalesce(
                    Sum('sorties__flight_duration_minutes', filter=in_window),
                    Value(0)
                ),
                avg_flight_minutes=Avg('sorties__flight_duration_minutes', filter=in_window),
            )
            .order_by('-total_sorties', 'name')
        )

        return [
            {
                'aircraft_id': a.id,
                'tail_number': a.tail_number,
                'name': a.name,
                'total_flight_hours': a.total_flight_hours,
                'total_sorties': a.total_sorties,
                'flight_hours_period': cls._minutes_to_hours(a.period_minutes),
                'avg_flight_minutes': (
                    round(a.avg_flight_minutes, 1)
                    if a.avg_flight_minutes is not None else None
                ),
            }
            for a in aircraft
        ]

    # ==========================================================================
    # Passenger Movement
    # ==========================================================================

    @classmethod
    def passenger_movement(
        cls,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Dict[str, Any]]:
        """
        Passenger totals per category for completed sorties.

        Args:
            start: Window start (takeoff time), 30 days ago by default
            end: Window end, inclusive, now by default

        Returns:
            One row per passenger type, largest onload first
        """
        end = cls._as_datetime(end, end_of_day=True) or timezone.now()
        start = cls._as_datetime(start) or end - timedelta(days=30)

        if end < start:
            raise SortieValidationError(
                message="end_date must be after start_date",
                field="end_date"
            )

        rows = list(
            PassengerRecord.objects
            .filter(
                sortie__status=Sortie.Status.COMPLETED,
                sortie__takeoff_time__range=(start, end),
            )
            .values('passenger_type')
            .annotate(
                total_onload=Sum('onload_count'),
                total_offload=Sum('offload_count'),
                sorties_count=Count('sortie', distinct=True),
            )
            .order_by('-total_onload', 'passenger_type')
        )

        logger.debug(f"Passenger movement from {start} to {end}: {len(rows)} types")
        return rows

    @staticmethod
    def _as_datetime(value, end_of_day: bool = False) -> Optional[datetime]:
        """Accept dates for whole-day windows and make datetimes aware."""
        if value is None:
            return None
        if not isinstance(value, datetime):
            value = datetime.combine(value, time.max if end_of_day else time.min)
        if timezone.is_naive(value):
            value = timezone.make_aware(value)
        return value
