"""Tests for the electoral allocator."""

import pytest

from conftest import make_party
from formation.data import dutch_2023
from formation.errors import InvalidInputError, NoEligiblePartiesError
from formation.services.electoral import ElectoralAllocator


def votes(**counts):
    return [make_party(pid, votes=v) for pid, v in counts.items()]


class TestAllocate:
    def test_seats_sum_to_total(self):
        result = ElectoralAllocator(total_seats=150).allocate(votes(A=5000, B=3000, C=1500, D=499))
        assert sum(result.seat_allocation.values()) == 150

    def test_every_party_listed(self):
        result = ElectoralAllocator(total_seats=10, threshold=0.2).allocate(votes(A=900, B=100))
        assert set(result.seat_allocation) == {"A", "B"}

    def test_threshold_excludes(self):
        result = ElectoralAllocator(total_seats=10, threshold=0.2).allocate(votes(A=900, B=100))
        assert result.seat_allocation == {"A": 10, "B": 0}
        assert result.excluded == ("B",)

    def test_zero_votes_excluded(self):
        result = ElectoralAllocator(total_seats=5).allocate(votes(A=10, B=0))
        assert result.seats_for("B") == 0
        assert "B" in result.excluded

    def test_idempotent(self):
        allocator = ElectoralAllocator(total_seats=150)
        parties = votes(A=5000, B=3000, C=1500)
        assert allocator.allocate(parties).seat_allocation == allocator.allocate(parties).seat_allocation

    def test_monotonic(self):
        allocator = ElectoralAllocator(total_seats=25)
        before = allocator.allocate(votes(A=300, B=200, C=100))
        after = allocator.allocate(votes(A=330, B=200, C=100))
        assert after.seats_for("A") >= before.seats_for("A")

    def test_override_per_call(self):
        result = ElectoralAllocator(total_seats=150).allocate(votes(A=60, B=40), total_seats=10)
        assert result.total_seats == 10
        assert result.seat_allocation == {"A": 6, "B": 4}

    def test_majority(self):
        result = ElectoralAllocator(total_seats=150).allocate(votes(A=60, B=40))
        assert result.majority == 76


class TestValidation:
    def test_empty(self):
        with pytest.raises(InvalidInputError):
            ElectoralAllocator().allocate([])

    def test_negative_votes(self):
        with pytest.raises(InvalidInputError):
            ElectoralAllocator().allocate(votes(A=10, B=-1))

    def test_duplicate_ids(self):
        with pytest.raises(InvalidInputError):
            ElectoralAllocator().allocate([make_party("A", votes=1), make_party("A", votes=2)])

    @pytest.mark.parametrize("seats", [0, -5, 1.5, True])
    def test_bad_seat_count(self, seats):
        with pytest.raises(InvalidInputError):
            ElectoralAllocator(total_seats=seats).allocate(votes(A=10))

    @pytest.mark.parametrize("threshold", [-0.1, 1.0])
    def test_bad_threshold(self, threshold):
        with pytest.raises(InvalidInputError):
            ElectoralAllocator(threshold=threshold).allocate(votes(A=10))

    def test_no_eligible_parties(self):
        with pytest.raises(NoEligiblePartiesError):
            ElectoralAllocator().allocate(votes(A=0, B=0))


class TestResultTable:
    def test_rows_sorted_by_seats(self):
        result = ElectoralAllocator(total_seats=10).allocate(votes(B=200, A=800))
        assert [r.party for r in result.rows()] == ["A", "B"]
        assert result.rows()[0].votes_pct == 80.0

    def test_to_frame(self):
        result = ElectoralAllocator(total_seats=10).allocate(votes(A=800, B=200))
        frame = result.to_frame()
        assert frame.height == 2
        assert frame["seats"].sum() == 10

    def test_apply_fills_seats(self):
        parties = votes(A=800, B=200)
        result = ElectoralAllocator(total_seats=10).allocate(parties)
        assert [p.seats for p in result.apply(parties)] == [8, 2]


class TestDutch2023:
    def test_official_seat_table(self):
        allocator = ElectoralAllocator(total_seats=dutch_2023.TOTAL_SEATS, threshold=dutch_2023.THRESHOLD)
        result = allocator.allocate(dutch_2023.parties())
        assert result.seat_allocation == dutch_2023.EXPECTED_SEATS
        assert allocator.validate_against(result, dutch_2023.EXPECTED_SEATS) == []

    def test_validate_against_reports_mismatch(self):
        allocator = ElectoralAllocator(total_seats=dutch_2023.TOTAL_SEATS, threshold=dutch_2023.THRESHOLD)
        result = allocator.allocate(dutch_2023.parties())
        expected = dict(dutch_2023.EXPECTED_SEATS, PVV=36)
        issues = allocator.validate_against(result, expected)
        assert any("PVV" in i for i in issues)
