# services/sortie-service/src/apps/core/models/sortie_sequence.py
"""
Sortie Number Sequence Model
"""

from django.db import models


class SortieNumberSequence(models.Model):
    """
    Per-year counter for sortie numbers.

    The row is locked while a number is issued, which serializes
    numbering for the year across processes. last_value is the highest
    sequence handed out and is never decreased.
    """

    year = models.PositiveIntegerField(unique=True)
    last_value = models.PositiveIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sortie_number_sequences'
        ordering = ['year']

    def __str__(self):
        return f"{self.year}: {self.last_value}"
