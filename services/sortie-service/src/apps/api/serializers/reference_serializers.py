# services/sortie-service/src/apps/api/serializers/reference_serializers.py
"""
Reference Data Serializers
"""

from rest_framework import serializers

from apps.core.models import Aircraft, Location, Personnel


class LocationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Location
        fields = [
            'id',
            'code',
            'name',
            'latitude',
            'longitude',
            'time_zone',
        ]
        read_only_fields = fields


class AircraftSerializer(serializers.ModelSerializer):
    current_location_code = serializers.CharField(
        source='current_location.code', read_only=True, allow_null=True
    )

    class Meta:
        model = Aircraft
        fields = [
            'id',
            'tail_number',
            'name',
            'aircraft_type',
            'max_passengers',
            'max_cargo_weight',
            'current_location',
            'current_location_code',
            'status',
            'total_flight_hours',
        ]
        read_only_fields = fields


class PersonnelSerializer(serializers.ModelSerializer):
    current_location_code = serializers.CharField(
        source='current_location.code', read_only=True, allow_null=True
    )

    class Meta:
        model = Personnel
        fields = [
            'id',
            'full_name',
            'rank_title',
            'role',
            'current_location',
            'current_location_code',
            'status',
            'is_pilot',
        ]
        read_only_fields = fields
