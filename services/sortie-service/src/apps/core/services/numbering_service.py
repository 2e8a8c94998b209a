# services/sortie-service/src/apps/core/services/numbering_service.py
"""
Sortie Numbering Service

Issues sortie numbers of the form S-<year>-<sequence>, with the sequence
zero-padded to four digits and restarting at 0001 each year.
"""

import logging

from django.db import transaction
from django.db.models import IntegerField, Max
from django.db.models.functions import Cast, Substr
from django.utils import timezone

from ..models import Sortie, SortieNumberSequence

logger = logging.getLogger(__name__)


class SortieNumberService:
    """
    Service class for sortie number generation.

    Numbers are issued from a per-year counter row locked with
    SELECT ... FOR UPDATE. The lock and the increment belong to the
    caller's transaction, so a rolled-back creation gives its number back
    and concurrent creators in any process are served one at a time.
    """

    PREFIX = 'S'
    PAD_WIDTH = 4

    # ==========================================================================
    # Formatting
    # ==========================================================================

    @classmethod
    def format_number(cls, year: int, value: int) -> str:
        """Format a sequence value, e.g. (2024, 7) -> 'S-2024-0007'."""
        return f"{cls.PREFIX}-{year}-{str(value).zfill(cls.PAD_WIDTH)}"

    # ==========================================================================
    # Issuing
    # ==========================================================================

    @classmethod
    def highest_issued(cls, year: int) -> int:
        """Largest sequence among existing sorties numbered for the year, or 0."""
        prefix = f"{cls.PREFIX}-{year}-"
        result = (
            Sortie.objects
            .filter(sortie_number__regex=rf'^{cls.PREFIX}-{year}-[0-9]+$')
            .annotate(
                sequence=Cast(Substr('sortie_number', len(prefix) + 1), IntegerField())
            )
            .aggregate(highest=Max('sequence'))
        )
        return result['highest'] or 0

    @classmethod
    def next_number(cls, year: int = None) -> str:
        """
        Reserve and return the next sortie number for the year.

        Must be called inside transaction.atomic(). The counter row stays
        locked until that transaction ends. Sorties numbered outside the
        counter (imports, manual fixes) are respected through
        highest_issued().
        """
        if not transaction.get_connection().in_atomic_block:
            raise RuntimeError("Sortie numbers must be issued inside a transaction")

        year = year or timezone.now().year

        sequence, created = (
            SortieNumberSequence.objects
            .select_for_update()
            .get_or_create(year=year)
        )
        if created:
            logger.info(f"Started sortie number sequence for {year}")

        value = max(sequence.last_value, cls.highest_issued(year)) + 1
        sequence.last_value = value
        sequence.save(update_fields=['last_value', 'updated_at'])

        return cls.format_number(year, value)
