# services/sortie-service/src/apps/core/services/submission.py
"""
Sortie Submission Types

Typed input for the sortie creation protocol. Crew uses three named
slots plus an ordered list of additional members; passengers use one
optional count per known category.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Iterator, Optional, Tuple

from ..models import CrewAssignment, PassengerRecord


@dataclass(frozen=True)
class CrewSlot:
    """A person in one of the fixed PIC, SIC or O/I positions."""
    personnel_id: uuid.UUID
    remarks: str = ''


@dataclass(frozen=True)
class AdditionalCrewMember:
    """A person in a free-form position, stored as Other."""
    personnel_id: uuid.UUID
    position: str
    remarks: str = ''


@dataclass(frozen=True)
class CrewSubmission:
    pic: Optional[CrewSlot] = None
    sic: Optional[CrewSlot] = None
    oi: Optional[CrewSlot] = None
    additional: Tuple[AdditionalCrewMember, ...] = ()

    def fixed_slots(self) -> Iterator[Tuple[str, CrewSlot]]:
        """Occupied fixed slots as (position, slot) pairs in PIC, SIC, O/I order."""
        for position, slot in (
            (CrewAssignment.Position.PIC, self.pic),
            (CrewAssignment.Position.SIC, self.sic),
            (CrewAssignment.Position.OI, self.oi),
        ):
            if slot is not None:
                yield position, slot

    def personnel_ids(self):
        """Every assigned personnel id, in assignment order."""
        ids = [slot.personnel_id for _, slot in self.fixed_slots()]
        ids.extend(member.personnel_id for member in self.additional)
        return ids


@dataclass(frozen=True)
class PassengerCount:
    onload: int = 0
    offload: int = 0
    notes: str = ''


@dataclass(frozen=True)
class PassengerSubmission:
    """
    Passenger counts by category.

    None means the category was not submitted and gets no record;
    a PassengerCount of zeros still produces one.
    """
    military: Optional[PassengerCount] = None
    civilian: Optional[PassengerCount] = None
    contractor: Optional[PassengerCount] = None
    partner_forces: Optional[PassengerCount] = None
    other: Optional[PassengerCount] = None

    def records(self) -> Iterator[Tuple[str, PassengerCount]]:
        """Present categories as (passenger type, count) pairs."""
        for passenger_type, count in (
            (PassengerRecord.PassengerType.MILITARY, self.military),
            (PassengerRecord.PassengerType.CIVILIAN, self.civilian),
            (PassengerRecord.PassengerType.CONTRACTOR, self.contractor),
            (PassengerRecord.PassengerType.PARTNER_FORCES, self.partner_forces),
            (PassengerRecord.PassengerType.OTHER, self.other),
        ):
            if count is not None:
                yield passenger_type, count


@dataclass(frozen=True)
class CargoSubmission:
    onload_weight: Decimal = Decimal('0.00')
    offload_weight: Decimal = Decimal('0.00')
    description: str = ''
    hazmat: bool = False
    special_handling: str = ''


@dataclass(frozen=True)
class SortieDetails:
    mission_type: str
    aircraft_id: uuid.UUID
    departure_location_id: uuid.UUID
    arrival_location_id: uuid.UUID
    takeoff_time: datetime
    landing_time: datetime
    comments: str = ''


@dataclass(frozen=True)
class SortieSubmission:
    """Everything needed to record one sortie aggregate."""
    sortie: SortieDetails
    crew: CrewSubmission = field(default_factory=CrewSubmission)
    passengers: PassengerSubmission = field(default_factory=PassengerSubmission)
    cargo: CargoSubmission = field(default_factory=CargoSubmission)
