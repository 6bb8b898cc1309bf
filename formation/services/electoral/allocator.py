"""Electoral allocator - D'Hondt seats with an electoral threshold."""

from collections.abc import Mapping, Sequence

from loguru import logger

from formation import formulas, settings
from formation.errors import InvalidInputError, NoEligiblePartiesError, validate_seats, validate_threshold
from formation.models.election import ElectionResult, Party


class ElectoralAllocator:
    """Turns vote totals into integer parliamentary seats."""

    def __init__(self, total_seats: int = settings.TOTAL_SEATS, threshold: float = settings.ELECTORAL_THRESHOLD):
        self._total_seats = total_seats
        self._threshold = threshold
        logger.debug("ElectoralAllocator initialized: seats={}, threshold={}", total_seats, threshold)

    def allocate(
        self,
        parties: Sequence[Party],
        total_seats: int | None = None,
        threshold: float | None = None,
    ) -> ElectionResult:
        """Allocate ``total_seats`` over ``parties``.

        Parties under ``threshold`` (a fraction of all valid votes) get no
        seats. Raises InvalidInputError for malformed data and
        NoEligiblePartiesError when nobody qualifies.
        """
        total_seats = self._total_seats if total_seats is None else total_seats
        threshold = self._threshold if threshold is None else threshold

        validate_seats(total_seats)
        validate_threshold(threshold)
        self._validate_parties(parties)

        votes = {p.id: p.vote_count for p in parties}
        total_votes = sum(votes.values())

        eligible = {p: v for p, v in votes.items() if v > 0 and v >= threshold * total_votes}
        excluded = tuple(p for p in votes if p not in eligible)
        if not eligible:
            raise NoEligiblePartiesError(
                f"None of {len(parties)} parties reached the threshold of {threshold:.2%}"
            )

        won = formulas.dhondt(eligible, total_seats)
        allocation = {p: won.get(p, 0) for p in votes}

        logger.info(
            "Allocated {} seats to {} of {} parties ({} below threshold)",
            total_seats,
            sum(1 for s in allocation.values() if s),
            len(parties),
            len(excluded),
        )
        return ElectionResult(
            total_seats=total_seats,
            threshold=threshold,
            seat_allocation=allocation,
            votes=votes,
            total_votes=total_votes,
            excluded=excluded,
        )

    def validate_against(self, result: ElectionResult, expected: Mapping[str, int]) -> list[str]:
        """Compare with a reference seat table. Returns mismatch messages."""
        issues = []
        for party, seats in expected.items():
            actual = result.seats_for(party)
            if actual != seats:
                issues.append(f"{party}: expected {seats} seats, got {actual}")

        allocated = sum(result.seat_allocation.values())
        if allocated != sum(expected.values()):
            issues.append(f"Total seats mismatch: allocated {allocated}, expected {sum(expected.values())}")

        for issue in issues:
            logger.warning("Validation failed: {}", issue)
        return issues

    @staticmethod
    def _validate_parties(parties: Sequence[Party]) -> None:
        if not parties:
            raise InvalidInputError("Party list cannot be empty")

        seen = set()
        for p in parties:
            if p.id in seen:
                raise InvalidInputError(f"Duplicate party id: {p.id}")
            seen.add(p.id)
            if p.vote_count < 0:
                raise InvalidInputError(f"Negative vote count for {p.id}: {p.vote_count}")
