# services/sortie-service/src/apps/core/models/sortie_crew.py
"""
Crew Assignment Model
"""

from django.db import models
from django.db.models import Q

from shared.common.mixins import UUIDPrimaryKeyMixin


class CrewAssignment(UUIDPrimaryKeyMixin, models.Model):
    """
    Binding of one person to one position on one sortie.

    A person appears at most once per sortie. The Other position carries
    its free-text description in position_other.
    """

    class Position(models.TextChoices):
        PIC = 'PIC', 'Pilot in Command'
        SIC = 'SIC', 'Second in Command'
        OI = 'O/I', 'Observer/Instructor'
        OTHER = 'Other', 'Other'

    sortie = models.ForeignKey(
        'core.Sortie',
        on_delete=models.CASCADE,
        related_name='crew'
    )
    personnel = models.ForeignKey(
        'core.Personnel',
        on_delete=models.PROTECT,
        related_name='crew_assignments'
    )
    position = models.CharField(max_length=50, choices=Position.choices)
    position_other = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        help_text="Required when position is Other"
    )
    remarks = models.TextField(blank=True, default='')
    is_primary = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'sortie_crew'
        ordering = ['sortie', 'created_at']
        indexes = [
            models.Index(fields=['position']),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['sortie', 'personnel'],
                name='sortie_crew_unique_person',
            ),
            models.CheckConstraint(
                condition=(
                    ~Q(position='Other')
                    | (Q(position_other__isnull=False) & ~Q(position_other=''))
                ),
                name='sortie_crew_other_described',
            ),
        ]

    def __str__(self):
        return f"{self.sortie_id} {self.position_label}: {self.personnel_id}"

    @property
    def position_label(self) -> str:
        """Position as shown on crew lists; Other shows its description."""
        if self.position == self.Position.OTHER and self.position_other:
            return self.position_other
        return self.position
