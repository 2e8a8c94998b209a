# services/sortie-service/src/apps/tests/test_models.py
"""
Model Tests

Tests for sortie service models and their database constraints.
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.db import IntegrityError, transaction


# =============================================================================
# Sortie Model Tests
# =============================================================================

@pytest.mark.django_db
class TestSortieModel:
    """Tests for Sortie model."""

    def test_duration_is_derived_from_times(self, make_sortie, takeoff_time):
        sortie = make_sortie(landing_time=takeoff_time + timedelta(minutes=90))

        assert sortie.flight_duration_minutes == 90
        assert sortie.flight_hours == Decimal('1.50')

    def test_duration_rounds_to_whole_minutes(self, make_sortie, takeoff_time):
        sortie = make_sortie(landing_time=takeoff_time + timedelta(minutes=45, seconds=40))

        assert sortie.flight_duration_minutes == 46

    def test_duration_recomputed_on_save(self, make_sortie, takeoff_time):
        sortie = make_sortie()
        assert sortie.flight_duration_minutes == 60

        sortie.landing_time = takeoff_time + timedelta(minutes=75)
        sortie.save()
        sortie.refresh_from_db()

        assert sortie.flight_duration_minutes == 75

    def test_duration_recomputed_with_update_fields(self, make_sortie, takeoff_time):
        sortie = make_sortie()

        sortie.landing_time = takeoff_time + timedelta(minutes=30)
        sortie.save(update_fields=['landing_time'])
        sortie.refresh_from_db()

        assert sortie.flight_duration_minutes == 30

    def test_landing_must_follow_takeoff(self, make_sortie, takeoff_time):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                make_sortie(landing_time=takeoff_time - timedelta(minutes=5))

    def test_zero_length_sortie_rejected(self, make_sortie, takeoff_time):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                make_sortie(landing_time=takeoff_time)

    def test_sortie_number_unique(self, make_sortie):
        make_sortie(sortie_number='S-2024-0001')

        with pytest.raises(IntegrityError):
            with transaction.atomic():
                make_sortie(sortie_number='S-2024-0001')

    def test_default_status_planned(self, make_sortie):
        from apps.core.models import Sortie

        sortie = make_sortie()

        assert sortie.status == Sortie.Status.PLANNED
        assert sortie.completed_at is None

    def test_str(self, make_sortie):
        sortie = make_sortie(sortie_number='S-2024-0042')

        assert str(sortie) == 'S-2024-0042 Lift'


# =============================================================================
# Flight Hours Accrual Tests
# =============================================================================

@pytest.mark.django_db
class TestFlightHoursAccrual:
    """Tests for the completion side effect on aircraft hours."""

    def test_completing_adds_hours_once(self, make_sortie, aircraft, takeoff_time):
        from apps.core.models import Sortie

        sortie = make_sortie(landing_time=takeoff_time + timedelta(minutes=90))
        aircraft.refresh_from_db()
        assert aircraft.total_flight_hours == Decimal('0.00')

        sortie.status = Sortie.Status.COMPLETED
        sortie.save()
        aircraft.refresh_from_db()
        assert aircraft.total_flight_hours == Decimal('1.50')
        assert sortie.completed_at is not None

        sortie.comments = 'Debrief notes'
        sortie.save()
        aircraft.refresh_from_db()
        assert aircraft.total_flight_hours == Decimal('1.50')

    def test_created_completed_accrues(self, make_sortie, aircraft, takeoff_time):
        from apps.core.models import Sortie

        make_sortie(
            status=Sortie.Status.COMPLETED,
            landing_time=takeoff_time + timedelta(minutes=120),
        )
        aircraft.refresh_from_db()

        assert aircraft.total_flight_hours == Decimal('2.00')

    def test_other_statuses_do_not_accrue(self, make_sortie, aircraft):
        from apps.core.models import Sortie

        sortie = make_sortie()
        for status in (Sortie.Status.IN_FLIGHT, Sortie.Status.ABORTED):
            sortie.status = status
            sortie.save()

        aircraft.refresh_from_db()
        assert aircraft.total_flight_hours == Decimal('0.00')

    def test_hours_add_to_existing_total(self, make_sortie, aircraft):
        from apps.core.models import Sortie

        aircraft.total_flight_hours = Decimal('1000.25')
        aircraft.save()

        make_sortie(status=Sortie.Status.COMPLETED)
        aircraft.refresh_from_db()

        assert aircraft.total_flight_hours == Decimal('1001.25')

    def test_partial_save_stores_completed_status(self, make_sortie, aircraft):
        from apps.core.models import Sortie

        sortie = make_sortie()
        sortie.status = Sortie.Status.COMPLETED
        sortie.comments = 'Landed'
        sortie.save(update_fields=['comments'])

        sortie.refresh_from_db()
        aircraft.refresh_from_db()
        assert sortie.status == Sortie.Status.COMPLETED
        assert sortie.completed_at is not None
        assert aircraft.total_flight_hours == Decimal('1.00')

        sortie.save()
        aircraft.refresh_from_db()
        assert aircraft.total_flight_hours == Decimal('1.00')

    def test_retiming_completed_sortie_adjusts_hours(self, make_sortie, aircraft, takeoff_time):
        from apps.core.models import Sortie

        sortie = make_sortie(status=Sortie.Status.COMPLETED)
        aircraft.refresh_from_db()
        assert aircraft.total_flight_hours == Decimal('1.00')

        sortie.landing_time = takeoff_time + timedelta(minutes=90)
        sortie.save()
        aircraft.refresh_from_db()
        assert aircraft.total_flight_hours == Decimal('1.50')

        sortie.landing_time = takeoff_time + timedelta(minutes=30)
        sortie.save()
        aircraft.refresh_from_db()
        assert aircraft.total_flight_hours == Decimal('0.50')

    def test_retiming_planned_sortie_leaves_hours(self, make_sortie, aircraft, takeoff_time):
        sortie = make_sortie()
        sortie.landing_time = takeoff_time + timedelta(minutes=90)
        sortie.save()

        aircraft.refresh_from_db()
        assert aircraft.total_flight_hours == Decimal('0.00')


# =============================================================================
# Crew Assignment Tests
# =============================================================================

@pytest.mark.django_db
class TestCrewAssignment:
    """Tests for CrewAssignment model."""

    def test_person_assigned_once_per_sortie(self, make_sortie, pilot):
        from apps.core.models import CrewAssignment

        sortie = make_sortie()
        CrewAssignment.objects.create(
            sortie=sortie, personnel=pilot, position=CrewAssignment.Position.PIC
        )

        with pytest.raises(IntegrityError):
            with transaction.atomic():
                CrewAssignment.objects.create(
                    sortie=sortie,
                    personnel=pilot,
                    position=CrewAssignment.Position.OTHER,
                    position_other='Observer',
                )

    def test_person_can_fly_different_sorties(self, make_sortie, pilot):
        from apps.core.models import CrewAssignment

        for sortie in (make_sortie(), make_sortie()):
            CrewAssignment.objects.create(
                sortie=sortie, personnel=pilot, position=CrewAssignment.Position.PIC
            )

        assert pilot.crew_assignments.count() == 2

    def test_other_position_needs_description(self, make_sortie, medic):
        from apps.core.models import CrewAssignment

        sortie = make_sortie()

        with pytest.raises(IntegrityError):
            with transaction.atomic():
                CrewAssignment.objects.create(
                    sortie=sortie,
                    personnel=medic,
                    position=CrewAssignment.Position.OTHER,
                )

    def test_position_label(self, make_sortie, pilot, medic):
        from apps.core.models import CrewAssignment

        sortie = make_sortie()
        pic = CrewAssignment.objects.create(
            sortie=sortie, personnel=pilot, position=CrewAssignment.Position.PIC
        )
        other = CrewAssignment.objects.create(
            sortie=sortie,
            personnel=medic,
            position=CrewAssignment.Position.OTHER,
            position_other='Flight Medic',
        )

        assert pic.position_label == 'PIC'
        assert other.position_label == 'Flight Medic'


# =============================================================================
# Manifest Tests
# =============================================================================

@pytest.mark.django_db
class TestManifest:
    """Tests for passenger and cargo records."""

    def test_one_record_per_passenger_type(self, make_sortie):
        from apps.core.models import PassengerRecord

        sortie = make_sortie()
        PassengerRecord.objects.create(
            sortie=sortie, passenger_type='Military', onload_count=2
        )

        with pytest.raises(IntegrityError):
            with transaction.atomic():
                PassengerRecord.objects.create(
                    sortie=sortie, passenger_type='Military', onload_count=1
                )

    def test_negative_passenger_count_rejected(self, make_sortie):
        from apps.core.models import PassengerRecord

        sortie = make_sortie()

        with pytest.raises(IntegrityError):
            with transaction.atomic():
                PassengerRecord.objects.create(
                    sortie=sortie, passenger_type='Civilian', offload_count=-1
                )

    def test_one_cargo_record_per_sortie(self, make_sortie):
        from apps.core.models import CargoRecord

        sortie = make_sortie()
        CargoRecord.objects.create(sortie=sortie)

        with pytest.raises(IntegrityError):
            with transaction.atomic():
                CargoRecord.objects.create(sortie=sortie)

    def test_delete_cascades(self, make_sortie, pilot):
        from apps.core.models import CargoRecord, CrewAssignment, PassengerRecord

        sortie = make_sortie()
        CrewAssignment.objects.create(
            sortie=sortie, personnel=pilot, position=CrewAssignment.Position.PIC
        )
        PassengerRecord.objects.create(sortie=sortie, passenger_type='Military')
        CargoRecord.objects.create(sortie=sortie)

        sortie.delete()

        assert CrewAssignment.objects.count() == 0
        assert PassengerRecord.objects.count() == 0
        assert CargoRecord.objects.count() == 0


# =============================================================================
# Reference Data Tests
# =============================================================================

@pytest.mark.django_db
class TestReferenceData:
    """Tests for reference data models."""

    def test_deactivate_hides_from_active(self, aircraft, second_aircraft):
        from apps.core.models import Aircraft

        second_aircraft.deactivate()

        assert list(Aircraft.objects.active()) == [aircraft]
        assert Aircraft.objects.count() == 2

    def test_aircraft_defaults(self, aircraft):
        assert aircraft.max_passengers == 11
        assert aircraft.max_cargo_weight == Decimal('2640.00')
        assert aircraft.status == 'Mission Ready'

    def test_personnel_str_includes_rank(self, pilot):
        assert str(pilot) == 'CPT Alex Hale'

    def test_aircraft_in_use_cannot_be_deleted(self, make_sortie, aircraft):
        from django.db.models import ProtectedError

        make_sortie()

        with pytest.raises(ProtectedError):
            aircraft.delete()
