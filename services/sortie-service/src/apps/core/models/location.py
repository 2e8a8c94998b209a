# services/sortie-service/src/apps/core/models/location.py
"""
Location Model

Operational locations sorties depart from and arrive at.
"""

from django.db import models

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin, ActiveMixin


class Location(UUIDPrimaryKeyMixin, TimestampMixin, ActiveMixin, models.Model):
    """An operational site identified by a short unique code."""

    code = models.CharField(
        max_length=20,
        unique=True,
        help_text="Short location code, e.g. LOC-01"
    )
    name = models.CharField(max_length=100)
    latitude = models.DecimalField(
        max_digits=10,
        decimal_places=8,
        blank=True,
        null=True
    )
    longitude = models.DecimalField(
        max_digits=11,
        decimal_places=8,
        blank=True,
        null=True
    )
    time_zone = models.CharField(max_length=50, blank=True, default='')

    class Meta:
        db_table = 'locations'
        ordering = ['code']

    def __str__(self):
        return f"{self.code} - {self.name}"
