from django.contrib import admin
from .models import (
    Aircraft,
    CargoRecord,
    CrewAssignment,
    Location,
    Operator,
    PassengerRecord,
    Personnel,
    Sortie,
    SortieNumberSequence,
)


class CrewAssignmentInline(admin.TabularInline):
    model = CrewAssignment
    extra = 0


class PassengerRecordInline(admin.TabularInline):
    model = PassengerRecord
    extra = 0


class CargoRecordInline(admin.StackedInline):
    model = CargoRecord
    extra = 0


@admin.register(Sortie)
class SortieAdmin(admin.ModelAdmin):
    list_display = ['sortie_number', 'mission_type', 'status', 'aircraft', 'takeoff_time', 'flight_duration_minutes']
    list_filter = ['status', 'mission_type']
    search_fields = ['sortie_number', 'aircraft__tail_number']
    readonly_fields = ['sortie_number', 'flight_duration_minutes', 'completed_at']
    inlines = [CrewAssignmentInline, PassengerRecordInline, CargoRecordInline]


@admin.register(Aircraft)
class AircraftAdmin(admin.ModelAdmin):
    list_display = ['tail_number', 'name', 'aircraft_type', 'status', 'total_flight_hours', 'is_active']
    list_filter = ['status', 'is_active']


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ['code', 'name', 'time_zone', 'is_active']


@admin.register(Personnel)
class PersonnelAdmin(admin.ModelAdmin):
    list_display = ['full_name', 'rank_title', 'role', 'status', 'is_pilot', 'is_active']
    list_filter = ['status', 'is_pilot', 'is_active']


@admin.register(Operator)
class OperatorAdmin(admin.ModelAdmin):
    list_display = ['username', 'full_name', 'role', 'last_login', 'is_active']


@admin.register(SortieNumberSequence)
class SortieNumberSequenceAdmin(admin.ModelAdmin):
    list_display = ['year', 'last_value', 'updated_at']
