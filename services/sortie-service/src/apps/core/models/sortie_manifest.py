# services/sortie-service/src/apps/core/models/sortie_manifest.py
"""
Sortie Manifest Models

Passenger counts per category and the cargo record of a sortie.
"""

from decimal import Decimal

from django.db import models
from django.db.models import Q
from django.core.validators import MinValueValidator

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class PassengerRecord(UUIDPrimaryKeyMixin, TimestampMixin, models.Model):
    """Onload/offload counts for one passenger category on one sortie."""

    class PassengerType(models.TextChoices):
        MILITARY = 'Military', 'Military'
        CIVILIAN = 'Civilian', 'Civilian'
        CONTRACTOR = 'Contractor', 'Contractor'
        PARTNER_FORCES = 'Partner Forces', 'Partner Forces'
        OTHER = 'Other', 'Other'

    sortie = models.ForeignKey(
        'core.Sortie',
        on_delete=models.CASCADE,
        related_name='passengers'
    )
    passenger_type = models.CharField(
        max_length=50,
        choices=PassengerType.choices
    )
    onload_count = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)]
    )
    offload_count = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)]
    )
    notes = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'sortie_passengers'
        ordering = ['sortie', 'passenger_type']
        constraints = [
            models.UniqueConstraint(
                fields=['sortie', 'passenger_type'],
                name='sortie_passengers_unique_type',
            ),
            models.CheckConstraint(
                condition=Q(onload_count__gte=0) & Q(offload_count__gte=0),
                name='sortie_passengers_counts_non_negative',
            ),
        ]

    def __str__(self):
        return f"{self.passenger_type}: +{self.onload_count}/-{self.offload_count}"


class CargoRecord(UUIDPrimaryKeyMixin, TimestampMixin, models.Model):
    """Weight and handling details, one per sortie."""

    sortie = models.OneToOneField(
        'core.Sortie',
        on_delete=models.CASCADE,
        related_name='cargo'
    )
    onload_weight = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    offload_weight = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    description = models.TextField(blank=True, default='')
    hazmat = models.BooleanField(default=False)
    special_handling = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'sortie_cargo'
        constraints = [
            models.CheckConstraint(
                condition=Q(onload_weight__gte=0) & Q(offload_weight__gte=0),
                name='sortie_cargo_weights_non_negative',
            ),
        ]

    def __str__(self):
        return f"Cargo for {self.sortie_id}: {self.onload_weight}/{self.offload_weight}"
