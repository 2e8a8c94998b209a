# services/sortie-service/src/apps/core/models/personnel.py
"""
Personnel Model
"""

from django.db import models

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin, ActiveMixin


class Personnel(UUIDPrimaryKeyMixin, TimestampMixin, ActiveMixin, models.Model):
    """A person who can be assigned to a sortie crew."""

    class Status(models.TextChoices):
        PRESENT = 'Present', 'Present'
        IN_TRANSIT = 'In-Transit', 'In-Transit'
        ON_LEAVE = 'On Leave', 'On Leave'
        MEDICAL = 'Medical', 'Medical'
        UNAVAILABLE = 'Unavailable', 'Unavailable'

    full_name = models.CharField(max_length=200)
    rank_title = models.CharField(max_length=50, blank=True, default='')
    role = models.CharField(max_length=100)
    current_location = models.ForeignKey(
        'core.Location',
        on_delete=models.PROTECT,
        related_name='personnel',
        blank=True,
        null=True
    )
    status = models.CharField(
        max_length=50,
        choices=Status.choices,
        default=Status.PRESENT
    )
    is_pilot = models.BooleanField(default=False)

    class Meta:
        db_table = 'personnel'
        verbose_name_plural = 'personnel'
        ordering = ['full_name']

    def __str__(self):
        if self.rank_title:
            return f"{self.rank_title} {self.full_name}"
        return self.full_name
