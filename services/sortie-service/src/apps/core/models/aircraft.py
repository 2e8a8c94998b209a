# services/sortie-service/src/apps/core/models/aircraft.py
"""
Aircraft Model

Fleet aircraft and their cumulative flight hours.
"""

from decimal import Decimal

from django.db import models
from django.db.models import F
from django.core.validators import MinValueValidator

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin, ActiveMixin


class Aircraft(UUIDPrimaryKeyMixin, TimestampMixin, ActiveMixin, models.Model):
    """
    An aircraft in the fleet.

    total_flight_hours is an accumulator: it only changes when one of
    the aircraft's sorties enters Completed status.
    """

    class Status(models.TextChoices):
        MISSION_READY = 'Mission Ready', 'Mission Ready'
        MAINTENANCE = 'Maintenance', 'Maintenance'
        LIMITED_USE = 'Limited Use', 'Limited Use'
        OUT_OF_SERVICE = 'Out of Service', 'Out of Service'

    tail_number = models.CharField(max_length=20, unique=True)
    name = models.CharField(max_length=100)
    aircraft_type = models.CharField(max_length=50, blank=True, default='')

    max_passengers = models.PositiveIntegerField(default=11)
    max_cargo_weight = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('2640.00'),
        validators=[MinValueValidator(Decimal('0'))]
    )

    current_location = models.ForeignKey(
        'core.Location',
        on_delete=models.PROTECT,
        related_name='based_aircraft',
        blank=True,
        null=True
    )
    status = models.CharField(
        max_length=50,
        choices=Status.choices,
        default=Status.MISSION_READY
    )
    total_flight_hours = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00')
    )

    class Meta:
        db_table = 'aircraft'
        verbose_name_plural = 'aircraft'
        ordering = ['name']
        indexes = [
            models.Index(fields=['status']),
        ]

    def __str__(self):
        return f"{self.tail_number} ({self.name})"

    def add_flight_hours(self, hours: Decimal):
        """
        Add hours to the accumulator with a single UPDATE.

        The in-memory instance is refreshed so callers see the stored total.
        """
        Aircraft.objects.filter(pk=self.pk).update(
            total_flight_hours=F('total_flight_hours') + hours
        )
        self.refresh_from_db(fields=['total_flight_hours'])
