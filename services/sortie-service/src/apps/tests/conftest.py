# services/sortie-service/src/apps/tests/conftest.py
"""
Pytest Configuration and Fixtures

Shared fixtures for sortie service tests.
"""

import uuid
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone


# =============================================================================
# Reference Data Fixtures
# =============================================================================

@pytest.fixture
def operator(db):
    """Create the operator recording sorties."""
    from apps.core.models import Operator
    return Operator.objects.create(
        username='ops.manager',
        email='ops.manager@example.com',
        full_name='Dana Ops',
        role=Operator.Role.OPERATIONS_MANAGER,
    )


@pytest.fixture
def user_id(operator):
    """ID of an existing operator."""
    return operator.id


@pytest.fixture
def base_location(db):
    from apps.core.models import Location
    return Location.objects.create(code='LOC-01', name='Main Base', time_zone='UTC')


@pytest.fixture
def forward_location(db):
    from apps.core.models import Location
    return Location.objects.create(code='LOC-02', name='Forward Site', time_zone='UTC')


@pytest.fixture
def aircraft(db, base_location):
    """Create a mission ready aircraft with no flight hours."""
    from apps.core.models import Aircraft
    return Aircraft.objects.create(
        tail_number='N101SR',
        name='Ranger 1',
        aircraft_type='UH-60',
        current_location=base_location,
    )


@pytest.fixture
def second_aircraft(db, base_location):
    from apps.core.models import Aircraft
    return Aircraft.objects.create(
        tail_number='N202SR',
        name='Ranger 2',
        aircraft_type='UH-60',
        current_location=base_location,
    )


@pytest.fixture
def pilot(db, base_location):
    from apps.core.models import Personnel
    return Personnel.objects.create(
        full_name='Alex Hale',
        rank_title='CPT',
        role='Pilot',
        current_location=base_location,
        is_pilot=True,
    )


@pytest.fixture
def copilot(db, base_location):
    from apps.core.models import Personnel
    return Personnel.objects.create(
        full_name='Sam Reyes',
        rank_title='1LT',
        role='Pilot',
        current_location=base_location,
        is_pilot=True,
    )


@pytest.fixture
def crew_chief(db, base_location):
    from apps.core.models import Personnel
    return Personnel.objects.create(
        full_name='Jordan Pike',
        rank_title='SGT',
        role='Crew Chief',
        current_location=base_location,
    )


@pytest.fixture
def medic(db, base_location):
    from apps.core.models import Personnel
    return Personnel.objects.create(
        full_name='Riley Moss',
        rank_title='SPC',
        role='Flight Medic',
        current_location=base_location,
    )


# =============================================================================
# Time Fixtures
# =============================================================================

@pytest.fixture
def takeoff_time():
    """Three hours ago, to the second."""
    now = timezone.now().replace(microsecond=0)
    return now - timedelta(hours=3)


@pytest.fixture
def landing_time(takeoff_time):
    return takeoff_time + timedelta(minutes=90)


# =============================================================================
# Submission Fixtures
# =============================================================================

@pytest.fixture
def sortie_details(aircraft, base_location, forward_location, takeoff_time, landing_time):
    """Sortie section of a valid submission."""
    from apps.core.services.submission import SortieDetails
    return SortieDetails(
        mission_type='CASEVAC',
        aircraft_id=aircraft.id,
        departure_location_id=base_location.id,
        arrival_location_id=forward_location.id,
        takeoff_time=takeoff_time,
        landing_time=landing_time,
        comments='Urgent pickup',
    )


@pytest.fixture
def full_submission(sortie_details, pilot, copilot, crew_chief, medic):
    """Submission with all crew slots, two passenger categories and cargo."""
    from apps.core.services.submission import (
        AdditionalCrewMember,
        CargoSubmission,
        CrewSlot,
        CrewSubmission,
        PassengerCount,
        PassengerSubmission,
        SortieSubmission,
    )
    return SortieSubmission(
        sortie=sortie_details,
        crew=CrewSubmission(
            pic=CrewSlot(personnel_id=pilot.id),
            sic=CrewSlot(personnel_id=copilot.id),
            oi=CrewSlot(personnel_id=crew_chief.id, remarks='Door gunner'),
            additional=(
                AdditionalCrewMember(personnel_id=medic.id, position='Flight Medic'),
            ),
        ),
        passengers=PassengerSubmission(
            military=PassengerCount(onload=4, offload=2),
            civilian=PassengerCount(onload=1, offload=0),
        ),
        cargo=CargoSubmission(
            onload_weight=Decimal('350.50'),
            offload_weight=Decimal('120.00'),
            description='Medical supplies',
            hazmat=True,
        ),
    )


@pytest.fixture
def minimal_submission(sortie_details):
    """Submission with only the sortie section."""
    from apps.core.services.submission import SortieSubmission
    return SortieSubmission(sortie=sortie_details)


@pytest.fixture
def sortie_payload(aircraft, base_location, forward_location, takeoff_time, landing_time, pilot, copilot, medic):
    """API request body for sortie creation."""
    return {
        'sortie': {
            'missionType': 'CASEVAC',
            'aircraftId': str(aircraft.id),
            'departureLocationId': str(base_location.id),
            'arrivalLocationId': str(forward_location.id),
            'takeoffTime': takeoff_time.isoformat(),
            'landingTime': landing_time.isoformat(),
            'comments': 'Urgent pickup',
        },
        'crew': {
            'pic': {'personnelId': str(pilot.id)},
            'sic': {'personnelId': str(copilot.id)},
            'oi': {'personnelId': None},
            'additional': [
                {'personnelId': str(medic.id), 'position': 'Flight Medic', 'remarks': ''},
            ],
        },
        'passengers': {
            'military': {'onload': 4, 'offload': 2},
            'partnerForces': {'onload': 3, 'offload': 3},
        },
        'cargo': {
            'onloadWeight': '350.50',
            'offloadWeight': '120.00',
            'description': 'Medical supplies',
            'hazmat': False,
        },
    }


# =============================================================================
# Model Fixtures
# =============================================================================

@pytest.fixture
def make_sortie(db, operator, aircraft, base_location, forward_location, takeoff_time):
    """
    Factory fixture for sorties written straight through the ORM.

    Bypasses the creation protocol; status defaults to Planned so no
    flight hours accrue unless a test asks for Completed.
    """
    from apps.core.models import Sortie

    counter = {'value': 0}

    def _make_sortie(**overrides):
        counter['value'] += 1
        start = overrides.pop('takeoff_time', takeoff_time)
        data = {
            'sortie_number': f"S-1999-{counter['value']:04d}",
            'mission_type': Sortie.MissionType.LIFT,
            'aircraft': aircraft,
            'departure_location': base_location,
            'arrival_location': forward_location,
            'takeoff_time': start,
            'landing_time': start + timedelta(minutes=60),
            'created_by': operator,
        }
        data.update(overrides)
        return Sortie.objects.create(**data)

    return _make_sortie


@pytest.fixture
def sortie(db, sortie_service, full_submission, user_id):
    """A sortie recorded through the creation protocol."""
    return sortie_service.create_sortie(full_submission, created_by=user_id)


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def sortie_service():
    """Get SortieService class."""
    from apps.core.services import SortieService
    return SortieService


@pytest.fixture
def numbering_service():
    """Get SortieNumberService class."""
    from apps.core.services import SortieNumberService
    return SortieNumberService


@pytest.fixture
def report_service():
    """Get ReportService class."""
    from apps.core.services import ReportService
    return ReportService


# =============================================================================
# API Client Fixtures
# =============================================================================

@pytest.fixture
def api_client():
    """Create API client."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def authenticated_client(api_client, user_id):
    """API client acting as an existing operator."""
    api_client.credentials(HTTP_X_USER_ID=str(user_id))
    return api_client


@pytest.fixture
def unknown_id():
    return uuid.uuid4()
