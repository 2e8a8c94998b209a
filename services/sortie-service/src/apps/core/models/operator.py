# services/sortie-service/src/apps/core/models/operator.py
"""
Operator Model

Accounts of the people who record sorties. An operator is the audited
actor of every write; there is no login or permission model here.
"""

from django.db import models

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin, ActiveMixin


class Operator(UUIDPrimaryKeyMixin, TimestampMixin, ActiveMixin, models.Model):
    """An application user recorded as the creator of sorties."""

    class Role(models.TextChoices):
        PILOT = 'Pilot', 'Pilot'
        CREW = 'Crew', 'Crew'
        OPERATIONS_MANAGER = 'Operations Manager', 'Operations Manager'
        MAINTENANCE = 'Maintenance', 'Maintenance'
        MEDICAL_COORDINATOR = 'Medical Coordinator', 'Medical Coordinator'
        ADMIN = 'Admin', 'Admin'

    username = models.CharField(max_length=100, unique=True)
    email = models.EmailField(max_length=255, unique=True)
    full_name = models.CharField(max_length=200)
    role = models.CharField(max_length=50, choices=Role.choices)
    last_login = models.DateTimeField(blank=True, null=True)

    class Meta:
        db_table = 'operators'
        ordering = ['full_name']

    def __str__(self):
        return f"{self.full_name} ({self.username})"
