# services/sortie-service/src/apps/api/serializers/report_serializers.py
"""
Report Serializers

Query parameter validation and row serializers for sortie reports.
"""

from rest_framework import serializers

from apps.core.models import PassengerRecord, Sortie


# =============================================================================
# Query Parameters
# =============================================================================

class DailyReportQuerySerializer(serializers.Serializer):
    date = serializers.DateField(required=False)


class UtilizationQuerySerializer(serializers.Serializer):
    days = serializers.IntegerField(min_value=1, max_value=366, required=False)


class PassengerMovementQuerySerializer(serializers.Serializer):
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, attrs):
        start_date = attrs.get('start_date')
        end_date = attrs.get('end_date')
        if start_date and end_date and end_date < start_date:
            raise serializers.ValidationError({
                'end_date': "end_date must be after start_date"
            })
        return attrs


# =============================================================================
# Report Rows
# =============================================================================

class DailyOperationsSerializer(serializers.Serializer):
    flight_date = serializers.DateField()
    mission_type = serializers.ChoiceField(choices=Sortie.MissionType.choices)
    sortie_count = serializers.IntegerField()
    total_flight_minutes = serializers.IntegerField()
    total_flight_hours = serializers.DecimalField(max_digits=8, decimal_places=2)


class AircraftUtilizationSerializer(serializers.Serializer):
    aircraft_id = serializers.UUIDField()
    tail_number = serializers.CharField()
    name = serializers.CharField()
    total_flight_hours = serializers.DecimalField(max_digits=10, decimal_places=2)
    total_sorties = serializers.IntegerField()
    flight_hours_period = serializers.DecimalField(max_digits=8, decimal_places=2)
    avg_flight_minutes = serializers.FloatField(allow_null=True)


class PassengerMovementSerializer(serializers.Serializer):
    passenger_type = serializers.ChoiceField(choices=PassengerRecord.PassengerType.choices)
    total_onload = serializers.IntegerField()
    total_offload = serializers.IntegerField()
    sorties_count = serializers.IntegerField()
