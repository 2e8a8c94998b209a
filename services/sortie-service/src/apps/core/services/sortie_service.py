# services/sortie-service/src/apps/core/services/sortie_service.py
"""
Sortie Service

Core business logic for recording sorties and their crew, passenger
and cargo data.
"""

import uuid
import logging
from collections import Counter
from typing import Dict, Any, Optional

from django.conf import settings
from django.db import (
    DatabaseError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    transaction,
)
from django.core.paginator import Paginator

from ..filters import SortieFilter
from ..models import (
    Aircraft,
    CargoRecord,
    CrewAssignment,
    Location,
    Operator,
    PassengerRecord,
    Personnel,
    Sortie,
)
from .exceptions import (
    SortieConflictError,
    SortieCreationError,
    SortieNotFoundError,
    SortieValidationError,
    StoreUnavailableError,
)
from .numbering_service import SortieNumberService
from .submission import (
    CargoSubmission,
    CrewSubmission,
    PassengerSubmission,
    SortieSubmission,
)

logger = logging.getLogger(__name__)


class SortieService:
    """
    Service class for sortie operations.

    Sortie creation writes the sortie, its crew, passenger and cargo
    rows and consumes a sortie number in one transaction. Either all of
    it is committed or none of it is.
    """

    # ==========================================================================
    # Sortie Creation
    # ==========================================================================

    @classmethod
    def create_sortie(
        cls,
        submission: SortieSubmission,
        created_by: Optional[uuid.UUID],
    ) -> Sortie:
        """
        Record a sortie with all of its dependent rows.

        Args:
            submission: Typed sortie, crew, passenger and cargo data
            created_by: Operator UUID recorded as the creator

        Returns:
            Committed Sortie instance, numbered

        Raises:
            SortieValidationError: If the submission is rejected; nothing is written
            SortieConflictError: If the database rejects a row on a constraint
            StoreUnavailableError: If the database is unreachable or a lock wait timed out
            SortieCreationError: If the write fails for any other database reason
        """
        details = submission.sortie
        logger.info(
            f"Creating {details.mission_type} sortie for aircraft "
            f"{details.aircraft_id} by operator {created_by}"
        )

        try:
            cls._validate_submission(submission, created_by)

            with transaction.atomic():
                sortie = Sortie.objects.create(
                    sortie_number=SortieNumberService.next_number(),
                    mission_type=details.mission_type,
                    aircraft_id=details.aircraft_id,
                    departure_location_id=details.departure_location_id,
                    arrival_location_id=details.arrival_location_id,
                    takeoff_time=details.takeoff_time,
                    landing_time=details.landing_time,
                    comments=details.comments,
                    status=Sortie.Status.COMPLETED,
                    created_by_id=created_by,
                )
                cls._create_crew(sortie, submission.crew)
                cls._create_passengers(sortie, submission.passengers)
                cls._create_cargo(sortie, submission.cargo)
        except IntegrityError as e:
            logger.warning(f"Sortie creation rolled back on integrity error: {e}")
            raise SortieConflictError(reason=str(e)) from e
        except (OperationalError, InterfaceError) as e:
            logger.warning(f"Sortie creation rolled back, database unavailable: {e}")
            raise StoreUnavailableError(reason=str(e)) from e
        except DatabaseError as e:
            logger.error(f"Sortie creation rolled back on database error: {e}")
            raise SortieCreationError(reason=str(e)) from e

        logger.info(
            f"Sortie {sortie.sortie_number} ({sortie.id}) created by operator {created_by}"
        )
        return sortie

    @classmethod
    def _create_crew(cls, sortie: Sortie, crew: CrewSubmission):
        """Insert fixed-slot crew first, then additional crew as Other."""
        assignments = [
            CrewAssignment(
                sortie=sortie,
                personnel_id=slot.personnel_id,
                position=position,
                remarks=slot.remarks,
            )
            for position, slot in crew.fixed_slots()
        ]
        assignments.extend(
            CrewAssignment(
                sortie=sortie,
                personnel_id=member.personnel_id,
                position=CrewAssignment.Position.OTHER,
                position_other=member.position,
                remarks=member.remarks,
            )
            for member in crew.additional
        )
        if assignments:
            CrewAssignment.objects.bulk_create(assignments)

    @classmethod
    def _create_passengers(cls, sortie: Sortie, passengers: PassengerSubmission):
        records = [
            PassengerRecord(
                sortie=sortie,
                passenger_type=passenger_type,
                onload_count=count.onload,
                offload_count=count.offload,
                notes=count.notes,
            )
            for passenger_type, count in passengers.records()
        ]
        if records:
            PassengerRecord.objects.bulk_create(records)

    @classmethod
    def _create_cargo(cls, sortie: Sortie, cargo: CargoSubmission) -> CargoRecord:
        return CargoRecord.objects.create(
            sortie=sortie,
            onload_weight=cargo.onload_weight,
            offload_weight=cargo.offload_weight,
            description=cargo.description,
            hazmat=cargo.hazmat,
            special_handling=cargo.special_handling,
        )

    # ==========================================================================
    # Validation
    # ==========================================================================

    @classmethod
    def _validate_submission(
        cls,
        submission: SortieSubmission,
        created_by: Optional[uuid.UUID],
    ):
        """Reject a submission before anything is written."""
        details = submission.sortie

        if created_by is None:
            raise SortieValidationError(
                message="The recording operator is required",
                field="created_by"
            )

        if details.mission_type not in Sortie.MissionType.values:
            raise SortieValidationError(
                message=f"Unknown mission type: {details.mission_type}",
                field="mission_type",
                details={"allowed": list(Sortie.MissionType.values)}
            )

        if details.landing_time <= details.takeoff_time:
            raise SortieValidationError(
                message="Landing time must be after takeoff time",
                field="landing_time"
            )

        cls._validate_crew(submission.crew)
        cls._validate_manifest(submission.passengers, submission.cargo)
        cls._validate_references(submission, created_by)

    @classmethod
    def _validate_crew(cls, crew: CrewSubmission):
        for member in crew.additional:
            if not (member.position or '').strip():
                raise SortieValidationError(
                    message="Additional crew members need a position",
                    field="crew.additional",
                    details={"personnel_id": str(member.personnel_id)}
                )

        duplicates = [
            str(personnel_id)
            for personnel_id, count in Counter(crew.personnel_ids()).items()
            if count > 1
        ]
        if duplicates:
            raise SortieValidationError(
                message="A person can only be assigned once per sortie",
                field="crew",
                details={"duplicate_personnel_ids": duplicates}
            )

    @classmethod
    def _validate_manifest(cls, passengers: PassengerSubmission, cargo: CargoSubmission):
        for passenger_type, count in passengers.records():
            if count.onload < 0 or count.offload < 0:
                raise SortieValidationError(
                    message=f"{passenger_type} passenger counts cannot be negative",
                    field="passengers"
                )

        if cargo.onload_weight < 0 or cargo.offload_weight < 0:
            raise SortieValidationError(
                message="Cargo weights cannot be negative",
                field="cargo"
            )

    @classmethod
    def _validate_references(
        cls,
        submission: SortieSubmission,
        created_by: uuid.UUID,
    ):
        """Every referenced operator, aircraft, location and person must exist."""
        details = submission.sortie

        if not Operator.objects.filter(id=created_by).exists():
            raise SortieValidationError(
                message=f"Unknown operator: {created_by}",
                field="created_by"
            )

        if not Aircraft.objects.filter(id=details.aircraft_id).exists():
            raise SortieValidationError(
                message=f"Unknown aircraft: {details.aircraft_id}",
                field="aircraft_id"
            )

        location_ids = {details.departure_location_id, details.arrival_location_id}
        found_locations = set(
            Location.objects.filter(id__in=location_ids).values_list('id', flat=True)
        )
        for field_name in ('departure_location_id', 'arrival_location_id'):
            location_id = getattr(details, field_name)
            if location_id not in found_locations:
                raise SortieValidationError(
                    message=f"Unknown location: {location_id}",
                    field=field_name
                )

        personnel_ids = submission.crew.personnel_ids()
        if personnel_ids:
            found_personnel = set(
                Personnel.objects.filter(id__in=personnel_ids).values_list('id', flat=True)
            )
            missing = [str(pid) for pid in personnel_ids if pid not in found_personnel]
            if missing:
                raise SortieValidationError(
                    message="Unknown personnel assigned to crew",
                    field="crew",
                    details={"missing_personnel_ids": missing}
                )

    # ==========================================================================
    # Sortie Retrieval
    # ==========================================================================

    @classmethod
    def get_sortie(cls, sortie_id: uuid.UUID) -> Sortie:
        """
        Get a sortie by ID, annotated with its summary fields.

        Raises:
            SortieNotFoundError: If sortie not found
        """
        try:
            return Sortie.objects.with_summary().get(id=sortie_id)
        except Sortie.DoesNotExist:
            raise SortieNotFoundError(sortie_id=str(sortie_id))

    @classmethod
    def get_sortie_with_details(cls, sortie_id: uuid.UUID) -> Dict[str, Any]:
        """
        Get a sortie with its crew, passengers and cargo.

        Returns:
            Dictionary with sortie and related data
        """
        sortie = cls.get_sortie(sortie_id)

        crew = (
            CrewAssignment.objects
            .filter(sortie=sortie)
            .select_related('personnel')
            .order_by('created_at')
        )
        passengers = PassengerRecord.objects.filter(sortie=sortie)
        cargo = CargoRecord.objects.filter(sortie=sortie).first()

        return {
            'sortie': sortie,
            'crew': list(crew),
            'passengers': list(passengers),
            'cargo': cargo,
        }

    # ==========================================================================
    # Sortie Listing and Search
    # ==========================================================================

    @classmethod
    def list_sorties(
        cls,
        page: int = 1,
        page_size: int = None,
    ) -> Dict[str, Any]:
        """
        List sorties, newest takeoff first, with pagination.

        Args:
            page: Page number (1-indexed)
            page_size: Items per page, SORTIE_LIST_PAGE_SIZE by default

        Returns:
            Dictionary with sorties and pagination info
        """
        page_size = page_size or settings.SORTIE_LIST_PAGE_SIZE
        queryset = Sortie.objects.with_summary().order_by('-takeoff_time')

        paginator = Paginator(queryset, page_size)
        page_obj = paginator.get_page(page)

        return {
            'sorties': list(page_obj.object_list),
            'total': paginator.count,
            'page': page_obj.number,
            'page_size': page_size,
            'total_pages': paginator.num_pages,
            'has_next': page_obj.has_next(),
            'has_previous': page_obj.has_previous(),
        }

    @classmethod
    def search_sorties(cls, filters: Dict[str, Any]):
        """
        Search sorties with AND-combined filters.

        Args:
            filters: Query parameters understood by SortieFilter

        Returns:
            List of at most SORTIE_SEARCH_LIMIT sorties, newest takeoff first

        Raises:
            SortieValidationError: If a filter value is malformed
        """
        filterset = SortieFilter(
            data=filters,
            queryset=Sortie.objects.with_summary()
        )
        if not filterset.is_valid():
            raise SortieValidationError(
                message="Invalid search filters",
                details={"errors": filterset.errors.get_json_data()}
            )

        queryset = filterset.qs.order_by('-takeoff_time')
        return list(queryset[:settings.SORTIE_SEARCH_LIMIT])

    # ==========================================================================
    # Status and Deletion
    # ==========================================================================

    @classmethod
    @transaction.atomic
    def update_status(
        cls,
        sortie_id: uuid.UUID,
        status: str,
        changed_by: uuid.UUID,
    ) -> Sortie:
        """
        Change a sortie's status.

        Moving into Completed adds the sortie's hours to its aircraft in
        the same transaction.

        Raises:
            SortieNotFoundError: If sortie not found
            SortieValidationError: If the status is unknown
        """
        if status not in Sortie.Status.values:
            raise SortieValidationError(
                message=f"Unknown sortie status: {status}",
                field="status",
                details={"allowed": list(Sortie.Status.values)}
            )

        try:
            sortie = Sortie.objects.select_for_update().get(id=sortie_id)
        except Sortie.DoesNotExist:
            raise SortieNotFoundError(sortie_id=str(sortie_id))

        previous = sortie.status
        sortie.status = status
        sortie.save()

        logger.info(
            f"Sortie {sortie.sortie_number} status {previous} -> {status} "
            f"by operator {changed_by}"
        )
        return sortie

    @classmethod
    @transaction.atomic
    def delete_sortie(
        cls,
        sortie_id: uuid.UUID,
        deleted_by: uuid.UUID,
    ) -> bool:
        """
        Delete a sortie together with its crew, passenger and cargo rows.

        The number is not reissued; the year's sequence keeps its value.

        Raises:
            SortieNotFoundError: If sortie not found
        """
        try:
            sortie = Sortie.objects.get(id=sortie_id)
        except Sortie.DoesNotExist:
            raise SortieNotFoundError(sortie_id=str(sortie_id))

        sortie_number = sortie.sortie_number
        sortie.delete()

        logger.info(f"Sortie {sortie_number} deleted by operator {deleted_by}")
        return True
