# services/sortie-service/src/apps/api/serializers/sortie_serializers.py
"""
Sortie Serializers

REST API serializers for sortie submission and sortie records.
Submissions use the camelCase keys of the sortie entry client.
"""

from collections.abc import Mapping
from decimal import Decimal

from rest_framework import serializers

from apps.core.models import Sortie, CrewAssignment, PassengerRecord, CargoRecord
from apps.core.services.submission import (
    AdditionalCrewMember,
    CargoSubmission,
    CrewSlot,
    CrewSubmission,
    PassengerCount,
    PassengerSubmission,
    SortieDetails,
    SortieSubmission,
)


# =============================================================================
# Submission
# =============================================================================

class StrictSubmissionSerializer(serializers.Serializer):
    """Rejects keys it does not declare instead of dropping them."""

    def to_internal_value(self, data):
        if isinstance(data, Mapping):
            unknown = sorted(set(data) - set(self.fields))
            if unknown:
                raise serializers.ValidationError(
                    {key: ["Unknown field."] for key in unknown}
                )
        return super().to_internal_value(data)


class CrewSlotSerializer(StrictSubmissionSerializer):
    """PIC, SIC or O/I slot; a slot without personnelId is left empty."""

    personnelId = serializers.UUIDField(
        source='personnel_id', required=False, allow_null=True
    )
    remarks = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )


class AdditionalCrewSerializer(CrewSlotSerializer):
    position = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )


class CrewSerializer(StrictSubmissionSerializer):
    pic = CrewSlotSerializer(required=False, allow_null=True)
    sic = CrewSlotSerializer(required=False, allow_null=True)
    oi = CrewSlotSerializer(required=False, allow_null=True)
    additional = AdditionalCrewSerializer(many=True, required=False)


class PassengerCountSerializer(StrictSubmissionSerializer):
    onload = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    offload = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class PassengersSerializer(StrictSubmissionSerializer):
    military = PassengerCountSerializer(required=False, allow_null=True)
    civilian = PassengerCountSerializer(required=False, allow_null=True)
    contractor = PassengerCountSerializer(required=False, allow_null=True)
    partnerForces = PassengerCountSerializer(
        source='partner_forces', required=False, allow_null=True
    )
    other = PassengerCountSerializer(required=False, allow_null=True)


class CargoSerializer(StrictSubmissionSerializer):
    onloadWeight = serializers.DecimalField(
        source='onload_weight', max_digits=10, decimal_places=2,
        min_value=Decimal('0'), required=False, allow_null=True
    )
    offloadWeight = serializers.DecimalField(
        source='offload_weight', max_digits=10, decimal_places=2,
        min_value=Decimal('0'), required=False, allow_null=True
    )
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    hazmat = serializers.BooleanField(required=False, allow_null=True)
    specialHandling = serializers.CharField(
        source='special_handling', required=False, allow_blank=True, allow_null=True
    )


class SortieDetailsSerializer(StrictSubmissionSerializer):
    missionType = serializers.ChoiceField(
        source='mission_type', choices=Sortie.MissionType.choices
    )
    aircraftId = serializers.UUIDField(source='aircraft_id')
    departureLocationId = serializers.UUIDField(source='departure_location_id')
    arrivalLocationId = serializers.UUIDField(source='arrival_location_id')
    takeoffTime = serializers.DateTimeField(source='takeoff_time')
    landingTime = serializers.DateTimeField(source='landing_time')
    comments = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class SortieCreateSerializer(StrictSubmissionSerializer):
    """
    Serializer for sortie submissions.

    Only the sortie section is required. Missing crew slots and passenger
    categories produce no rows; cargo always produces one row.
    """

    sortie = SortieDetailsSerializer()
    crew = CrewSerializer(required=False, allow_null=True)
    passengers = PassengersSerializer(required=False, allow_null=True)
    cargo = CargoSerializer(required=False, allow_null=True)

    def to_submission(self) -> SortieSubmission:
        """Build the typed submission from validated data."""
        data = self.validated_data
        details = data['sortie']

        return SortieSubmission(
            sortie=SortieDetails(
                mission_type=details['mission_type'],
                aircraft_id=details['aircraft_id'],
                departure_location_id=details['departure_location_id'],
                arrival_location_id=details['arrival_location_id'],
                takeoff_time=details['takeoff_time'],
                landing_time=details['landing_time'],
                comments=details.get('comments') or '',
            ),
            crew=self._crew(data.get('crew') or {}),
            passengers=self._passengers(data.get('passengers') or {}),
            cargo=self._cargo(data.get('cargo') or {}),
        )

    @staticmethod
    def _slot(slot):
        if not slot or not slot.get('personnel_id'):
            return None
        return CrewSlot(
            personnel_id=slot['personnel_id'],
            remarks=slot.get('remarks') or '',
        )

    def _crew(self, crew) -> CrewSubmission:
        additional = tuple(
            AdditionalCrewMember(
                personnel_id=member['personnel_id'],
                position=member.get('position') or '',
                remarks=member.get('remarks') or '',
            )
            for member in crew.get('additional') or []
            if member.get('personnel_id')
        )
        return CrewSubmission(
            pic=self._slot(crew.get('pic')),
            sic=self._slot(crew.get('sic')),
            oi=self._slot(crew.get('oi')),
            additional=additional,
        )

    @staticmethod
    def _count(count):
        if count is None:
            return None
        return PassengerCount(
            onload=count.get('onload') or 0,
            offload=count.get('offload') or 0,
            notes=count.get('notes') or '',
        )

    def _passengers(self, passengers) -> PassengerSubmission:
        return PassengerSubmission(
            military=self._count(passengers.get('military')),
            civilian=self._count(passengers.get('civilian')),
            contractor=self._count(passengers.get('contractor')),
            partner_forces=self._count(passengers.get('partner_forces')),
            other=self._count(passengers.get('other')),
        )

    @staticmethod
    def _cargo(cargo) -> CargoSubmission:
        return CargoSubmission(
            onload_weight=cargo.get('onload_weight') or Decimal('0.00'),
            offload_weight=cargo.get('offload_weight') or Decimal('0.00'),
            description=cargo.get('description') or '',
            hazmat=bool(cargo.get('hazmat')),
            special_handling=cargo.get('special_handling') or '',
        )


class SortieStatusSerializer(serializers.Serializer):
    """Serializer for sortie status changes."""

    status = serializers.ChoiceField(choices=Sortie.Status.choices)


# =============================================================================
# Records
# =============================================================================

class SortieSummarySerializer(serializers.ModelSerializer):
    """
    Serializer for the complete sortie summary.

    Expects sorties loaded through Sortie.objects.with_summary().
    """

    aircraft_tail_number = serializers.CharField(source='aircraft.tail_number', read_only=True)
    aircraft_name = serializers.CharField(source='aircraft.name', read_only=True)
    departure_code = serializers.CharField(source='departure_location.code', read_only=True)
    departure_name = serializers.CharField(source='departure_location.name', read_only=True)
    arrival_code = serializers.CharField(source='arrival_location.code', read_only=True)
    arrival_name = serializers.CharField(source='arrival_location.name', read_only=True)
    created_by_name = serializers.CharField(source='created_by.full_name', read_only=True)

    pic_name = serializers.CharField(read_only=True, allow_null=True)
    pic_rank = serializers.CharField(read_only=True, allow_null=True)
    total_passengers_onload = serializers.IntegerField(read_only=True)
    total_passengers_offload = serializers.IntegerField(read_only=True)
    cargo_onload_weight = serializers.DecimalField(
        max_digits=10, decimal_places=2, read_only=True, allow_null=True
    )
    cargo_offload_weight = serializers.DecimalField(
        max_digits=10, decimal_places=2, read_only=True, allow_null=True
    )
    flight_hours = serializers.DecimalField(
        max_digits=6, decimal_places=2, read_only=True
    )

    class Meta:
        model = Sortie
        fields = [
            'id',
            'sortie_number',
            'mission_type',
            'status',
            'aircraft',
            'aircraft_tail_number',
            'aircraft_name',
            'departure_location',
            'departure_code',
            'departure_name',
            'arrival_location',
            'arrival_code',
            'arrival_name',
            'takeoff_time',
            'landing_time',
            'flight_duration_minutes',
            'flight_hours',
            'pic_name',
            'pic_rank',
            'total_passengers_onload',
            'total_passengers_offload',
            'cargo_onload_weight',
            'cargo_offload_weight',
            'comments',
            'created_by',
            'created_by_name',
            'created_at',
            'updated_at',
            'completed_at',
        ]
        read_only_fields = fields


class CrewAssignmentSerializer(serializers.ModelSerializer):
    personnel_name = serializers.CharField(source='personnel.full_name', read_only=True)
    rank_title = serializers.CharField(source='personnel.rank_title', read_only=True)
    position_label = serializers.CharField(read_only=True)

    class Meta:
        model = CrewAssignment
        fields = [
            'id',
            'personnel',
            'personnel_name',
            'rank_title',
            'position',
            'position_other',
            'position_label',
            'remarks',
            'is_primary',
        ]
        read_only_fields = fields


class PassengerRecordSerializer(serializers.ModelSerializer):
    class Meta:
        model = PassengerRecord
        fields = [
            'id',
            'passenger_type',
            'onload_count',
            'offload_count',
            'notes',
        ]
        read_only_fields = fields


class CargoRecordSerializer(serializers.ModelSerializer):
    class Meta:
        model = CargoRecord
        fields = [
            'id',
            'onload_weight',
            'offload_weight',
            'description',
            'hazmat',
            'special_handling',
        ]
        read_only_fields = fields
