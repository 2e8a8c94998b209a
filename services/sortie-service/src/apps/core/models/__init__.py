# services/sortie-service/src/apps/core/models/__init__.py
"""
Sortie Service Models

Database models for sortie recording:
- Reference data (operators, locations, aircraft, personnel)
- Sorties with crew, passenger and cargo records
- Per-year sortie number sequences
"""

from .operator import Operator
from .location import Location
from .aircraft import Aircraft
from .personnel import Personnel
from .sortie import Sortie
from .sortie_crew import CrewAssignment
from .sortie_manifest import PassengerRecord, CargoRecord
from .sortie_sequence import SortieNumberSequence

__all__ = [
    # Reference Data
    'Operator',
    'Location',
    'Aircraft',
    'Personnel',

    # Sortie Aggregate
    'Sortie',
    'CrewAssignment',
    'PassengerRecord',
    'CargoRecord',

    # Numbering
    'SortieNumberSequence',
]
