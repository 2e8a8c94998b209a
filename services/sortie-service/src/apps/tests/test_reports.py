# services/sortie-service/src/apps/tests/test_reports.py
"""
Report Tests

Tests for daily operations, aircraft utilization and passenger movement.
"""

from datetime import timedelta
from decimal import Decimal

import pytest


@pytest.mark.django_db
class TestDailyOperations:
    """Tests for ReportService.daily_operations."""

    def test_groups_completed_by_mission_type(self, report_service, make_sortie, takeoff_time):
        make_sortie(mission_type='Lift', status='Completed')
        make_sortie(
            mission_type='Lift',
            status='Completed',
            landing_time=takeoff_time + timedelta(minutes=30),
        )
        make_sortie(mission_type='CASEVAC', status='Completed')
        make_sortie(mission_type='CASEVAC', status='Cancelled')

        rows = report_service.daily_operations(takeoff_time.date())

        assert [row['mission_type'] for row in rows] == ['CASEVAC', 'Lift']
        lift = rows[1]
        assert lift['sortie_count'] == 2
        assert lift['total_flight_minutes'] == 90
        assert lift['total_flight_hours'] == Decimal('1.50')
        assert rows[0]['sortie_count'] == 1

    def test_other_days_excluded(self, report_service, make_sortie, takeoff_time):
        make_sortie(status='Completed', takeoff_time=takeoff_time - timedelta(days=1))

        assert report_service.daily_operations(takeoff_time.date()) == []


@pytest.mark.django_db
class TestAircraftUtilization:
    """Tests for ReportService.aircraft_utilization."""

    def test_counts_sorties_in_window(
        self, report_service, make_sortie, aircraft, second_aircraft, takeoff_time
    ):
        make_sortie(status='Completed')
        make_sortie(status='Completed', landing_time=takeoff_time + timedelta(minutes=120))
        make_sortie(status='Completed', takeoff_time=takeoff_time - timedelta(days=45))
        make_sortie(status='Planned')

        rows = report_service.aircraft_utilization(days=30)

        assert [row['tail_number'] for row in rows] == ['N101SR', 'N202SR']
        busy, idle = rows
        assert busy['total_sorties'] == 2
        assert busy['flight_hours_period'] == Decimal('3.00')
        assert busy['avg_flight_minutes'] == 90.0
        assert busy['total_flight_hours'] == Decimal('4.00')
        assert idle['total_sorties'] == 0
        assert idle['flight_hours_period'] == Decimal('0.00')
        assert idle['avg_flight_minutes'] is None

    def test_inactive_aircraft_excluded(self, report_service, aircraft, second_aircraft):
        second_aircraft.deactivate()

        rows = report_service.aircraft_utilization()

        assert [row['tail_number'] for row in rows] == ['N101SR']

    def test_rejects_empty_window(self, report_service):
        from apps.core.services import SortieValidationError

        with pytest.raises(SortieValidationError):
            report_service.aircraft_utilization(days=-1)


@pytest.mark.django_db
class TestPassengerMovement:
    """Tests for ReportService.passenger_movement."""

    def test_totals_per_category(self, report_service, sortie, sortie_service, full_submission, user_id):
        sortie_service.create_sortie(full_submission, created_by=user_id)

        rows = report_service.passenger_movement()

        assert rows[0] == {
            'passenger_type': 'Military',
            'total_onload': 8,
            'total_offload': 4,
            'sorties_count': 2,
        }
        assert rows[1]['passenger_type'] == 'Civilian'
        assert rows[1]['total_onload'] == 2

    def test_date_window(self, report_service, sortie, takeoff_time):
        later = takeoff_time.date() + timedelta(days=1)

        assert report_service.passenger_movement(start=later, end=later) == []

    def test_rejects_reversed_window(self, report_service, takeoff_time):
        from apps.core.services import SortieValidationError

        day = takeoff_time.date()

        with pytest.raises(SortieValidationError):
            report_service.passenger_movement(start=day, end=day - timedelta(days=2))
