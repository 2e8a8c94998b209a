# services/sortie-service/src/apps/tests/test_numbering.py
"""
Sortie Numbering Tests
"""

import pytest
from django.db import transaction


class TestNumberFormat:
    """Tests for number formatting."""

    def test_format_pads_to_four_digits(self, numbering_service):
        assert numbering_service.format_number(2024, 7) == 'S-2024-0007'
        assert numbering_service.format_number(2024, 123) == 'S-2024-0123'

    def test_format_grows_past_four_digits(self, numbering_service):
        assert numbering_service.format_number(2024, 10001) == 'S-2024-10001'


@pytest.mark.django_db
class TestNextNumber:
    """Tests for issuing numbers from the per-year sequence."""

    def test_first_number_of_year(self, numbering_service):
        with transaction.atomic():
            number = numbering_service.next_number(year=2025)

        assert number == 'S-2025-0001'

    def test_follows_existing_sorties(self, numbering_service, make_sortie):
        for value in range(1, 8):
            make_sortie(sortie_number=f'S-2024-{value:04d}')

        with transaction.atomic():
            number = numbering_service.next_number(year=2024)

        assert number == 'S-2024-0008'

    def test_consecutive_numbers(self, numbering_service):
        with transaction.atomic():
            first = numbering_service.next_number(year=2024)
            second = numbering_service.next_number(year=2024)

        assert (first, second) == ('S-2024-0001', 'S-2024-0002')

    def test_years_are_independent(self, numbering_service, make_sortie):
        make_sortie(sortie_number='S-2024-0005')

        with transaction.atomic():
            number = numbering_service.next_number(year=2025)

        assert number == 'S-2025-0001'

    def test_counter_persists_value(self, numbering_service):
        from apps.core.models import SortieNumberSequence

        with transaction.atomic():
            numbering_service.next_number(year=2024)
            numbering_service.next_number(year=2024)

        assert SortieNumberSequence.objects.get(year=2024).last_value == 2

    def test_respects_numbers_issued_outside_counter(self, numbering_service, make_sortie):
        from apps.core.models import SortieNumberSequence

        SortieNumberSequence.objects.create(year=2024, last_value=3)
        make_sortie(sortie_number='S-2024-0012')

        with transaction.atomic():
            number = numbering_service.next_number(year=2024)

        assert number == 'S-2024-0013'

    def test_counter_never_moves_backwards(self, numbering_service):
        from apps.core.models import SortieNumberSequence

        SortieNumberSequence.objects.create(year=2024, last_value=20)

        with transaction.atomic():
            number = numbering_service.next_number(year=2024)

        assert number == 'S-2024-0021'

    def test_highest_issued_ignores_other_years_and_malformed(
        self, numbering_service, make_sortie
    ):
        make_sortie(sortie_number='S-2024-0004')
        make_sortie(sortie_number='S-2023-0900')
        make_sortie(sortie_number='S-2024-LEGACY')

        assert numbering_service.highest_issued(2024) == 4

    def test_rolled_back_number_is_reissued(self, numbering_service):
        from apps.core.models import SortieNumberSequence

        with pytest.raises(ValueError):
            with transaction.atomic():
                assert numbering_service.next_number(year=2025) == 'S-2025-0001'
                raise ValueError("creation failed")

        assert not SortieNumberSequence.objects.filter(year=2025).exists()

        with transaction.atomic():
            assert numbering_service.next_number(year=2025) == 'S-2025-0001'

    def test_defaults_to_current_year(self, numbering_service):
        from django.utils import timezone

        with transaction.atomic():
            number = numbering_service.next_number()

        assert number == f'S-{timezone.now().year}-0001'


@pytest.mark.django_db(transaction=True)
def test_next_number_requires_transaction(numbering_service):
    with pytest.raises(RuntimeError):
        numbering_service.next_number(year=2024)
