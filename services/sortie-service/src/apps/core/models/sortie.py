# services/sortie-service/src/apps/core/models/sortie.py
"""
Sortie Model

A sortie is one flight mission and the root of the record aggregate:
crew assignments, passenger records and the cargo record all belong
to it and are deleted with it.
"""

import logging
from decimal import Decimal

from django.db import models, transaction
from django.db.models import Count, F, IntegerField, OuterRef, Q, Subquery, Sum, Value
from django.db.models.functions import Coalesce, TruncDate
from django.utils import timezone

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin

logger = logging.getLogger(__name__)


class SortieQuerySet(models.QuerySet):
    """Query builders for the derived sortie views."""

    def with_summary(self):
        """
        Annotate each sortie with the fields of the complete-sortie view.

        Adds the PIC's name and rank, passenger onload/offload totals and
        the cargo weights. Related rows are read through subqueries so
        that crew and passenger rows never multiply each other.
        """
        from .sortie_crew import CrewAssignment
        from .sortie_manifest import CargoRecord, PassengerRecord

        pic = CrewAssignment.objects.filter(
            sortie=OuterRef('pk'),
            position=CrewAssignment.Position.PIC
        )
        passengers = (
            PassengerRecord.objects
            .filter(sortie=OuterRef('pk'))
            .order_by()
            .values('sortie')
        )
        cargo = CargoRecord.objects.filter(sortie=OuterRef('pk'))

        return self.select_related(
            'aircraft',
            'departure_location',
            'arrival_location',
            'created_by',
        ).annotate(
            pic_name=Subquery(pic.values('personnel__full_name')[:1]),
            pic_rank=Subquery(pic.values('personnel__rank_title')[:1]),
            total_passengers_onload=Coalesce(
                Subquery(
                    passengers.annotate(total=Sum('onload_count')).values('total'),
                    output_field=IntegerField()
                ),
                Value(0)
            ),
            total_passengers_offload=Coalesce(
                Subquery(
                    passengers.annotate(total=Sum('offload_count')).values('total'),
                    output_field=IntegerField()
                ),
                Value(0)
            ),
            cargo_onload_weight=Subquery(cargo.values('onload_weight')[:1]),
            cargo_offload_weight=Subquery(cargo.values('offload_weight')[:1]),
        )

    def completed(self):
        return self.filter(status=Sortie.Status.COMPLETED)

    def daily_operations(self):
        """Completed sorties grouped by takeoff date and mission type."""
        return (
            self.completed()
            .annotate(flight_date=TruncDate('takeoff_time'))
            .values('flight_date', 'mission_type')
            .annotate(
                sortie_count=Count('id'),
                total_flight_minutes=Coalesce(Sum('flight_duration_minutes'), Value(0)),
            )
            .order_by('flight_date', 'mission_type')
        )


class Sortie(UUIDPrimaryKeyMixin, TimestampMixin, models.Model):
    """
    Flight sortie record.

    The flight duration is derived from the takeoff and landing times on
    every save and is never taken as input. Entering Completed status adds
    the sortie's hours to the aircraft's flight-hours total exactly once.
    """

    class MissionType(models.TextChoices):
        CASEVAC = 'CASEVAC', 'CASEVAC'
        PR = 'PR', 'Personnel Recovery'
        ENABLING = 'Enabling', 'Enabling'
        TRAINING = 'Training', 'Training'
        LIFT = 'Lift', 'Lift'

    class Status(models.TextChoices):
        PLANNED = 'Planned', 'Planned'
        IN_FLIGHT = 'In-Flight', 'In-Flight'
        COMPLETED = 'Completed', 'Completed'
        CANCELLED = 'Cancelled', 'Cancelled'
        ABORTED = 'Aborted', 'Aborted'

    # ==========================================================================
    # Identification
    # ==========================================================================
    sortie_number = models.CharField(
        max_length=50,
        unique=True,
        help_text="S-<year>-<4 digit sequence>"
    )
    mission_type = models.CharField(
        max_length=50,
        choices=MissionType.choices
    )

    # ==========================================================================
    # Aircraft and Route
    # ==========================================================================
    aircraft = models.ForeignKey(
        'core.Aircraft',
        on_delete=models.PROTECT,
        related_name='sorties'
    )
    departure_location = models.ForeignKey(
        'core.Location',
        on_delete=models.PROTECT,
        related_name='departing_sorties'
    )
    arrival_location = models.ForeignKey(
        'core.Location',
        on_delete=models.PROTECT,
        related_name='arriving_sorties'
    )

    # ==========================================================================
    # Times
    # ==========================================================================
    takeoff_time = models.DateTimeField(help_text="Wheels up")
    landing_time = models.DateTimeField(help_text="Wheels down")
    flight_duration_minutes = models.IntegerField(
        default=0,
        editable=False,
        help_text="Landing minus takeoff, rounded to whole minutes"
    )

    # ==========================================================================
    # Status and Audit
    # ==========================================================================
    status = models.CharField(
        max_length=50,
        choices=Status.choices,
        default=Status.PLANNED
    )
    comments = models.TextField(blank=True, default='')
    created_by = models.ForeignKey(
        'core.Operator',
        on_delete=models.PROTECT,
        related_name='sorties'
    )
    completed_at = models.DateTimeField(blank=True, null=True)

    objects = SortieQuerySet.as_manager()

    class Meta:
        db_table = 'sorties'
        ordering = ['-takeoff_time']
        indexes = [
            models.Index(fields=['takeoff_time']),
            models.Index(fields=['status']),
            models.Index(fields=['mission_type']),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(landing_time__gt=F('takeoff_time')),
                name='sortie_landing_after_takeoff',
            ),
        ]

    def __str__(self):
        return f"{self.sortie_number} {self.mission_type}"

    # ==========================================================================
    # Properties
    # ==========================================================================

    @property
    def flight_hours(self) -> Decimal:
        """Duration in decimal hours, two places."""
        return self._minutes_to_hours(self.flight_duration_minutes)

    @property
    def is_completed(self) -> bool:
        return self.status == self.Status.COMPLETED

    # ==========================================================================
    # Methods
    # ==========================================================================

    def calculate_duration_minutes(self) -> int:
        """Whole minutes between takeoff and landing."""
        if not self.takeoff_time or not self.landing_time:
            return 0
        seconds = (self.landing_time - self.takeoff_time).total_seconds()
        return round(seconds / 60)

    @staticmethod
    def _minutes_to_hours(minutes) -> Decimal:
        return (Decimal(minutes) / Decimal(60)).quantize(Decimal('0.01'))

    def _stored_state(self):
        """
        Status and duration as currently stored, or None for a new sortie.

        The row is read under a lock so that two concurrent saves of the
        same sortie cannot both change the aircraft's flight hours.
        """
        if self._state.adding:
            return None
        return (
            Sortie.objects
            .select_for_update()
            .filter(pk=self.pk)
            .values('status', 'flight_duration_minutes')
            .first()
        )

    def save(self, *args, **kwargs):
        self.flight_duration_minutes = self.calculate_duration_minutes()

        with transaction.atomic():
            stored = self._stored_state()
            was_completed = (
                stored is not None and stored['status'] == self.Status.COMPLETED
            )
            entering_completed = self.is_completed and not was_completed

            # Hours to add: the full duration on entering Completed, the
            # change in duration when a Completed sortie is re-timed.
            hours = Decimal('0.00')
            if entering_completed:
                hours = self.flight_hours
                if self.completed_at is None:
                    self.completed_at = timezone.now()
            elif was_completed and self.is_completed:
                hours = self.flight_hours - self._minutes_to_hours(
                    stored['flight_duration_minutes']
                )

            update_fields = kwargs.get('update_fields')
            if update_fields is not None:
                derived = {'flight_duration_minutes', 'completed_at', 'updated_at'}
                if entering_completed:
                    derived.add('status')
                kwargs['update_fields'] = set(update_fields) | derived

            super().save(*args, **kwargs)

            if hours:
                self.aircraft.add_flight_hours(hours)
                if entering_completed:
                    logger.info(
                        f"Sortie {self.sortie_number} completed, "
                        f"added {hours} h to aircraft {self.aircraft.tail_number}"
                    )
                else:
                    logger.info(
                        f"Sortie {self.sortie_number} re-timed, "
                        f"adjusted aircraft {self.aircraft.tail_number} by {hours} h"
                    )
