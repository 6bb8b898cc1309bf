"""Shared fixtures."""

import pytest

from formation import FormationEngine
from formation.data import dutch_2023
from formation.models import ElectionResult, Party


def make_party(pid: str, seats: int = 0, votes: int | None = None, economic: float = 0.0, social: float = 0.0, **kwargs) -> Party:
    """Party with sensible defaults for tests."""
    return Party(
        id=pid,
        name=pid,
        vote_count=seats if votes is None else votes,
        seats=seats,
        economic_axis=economic,
        social_axis=social,
        **kwargs,
    )


def make_result(seats: dict[str, int], total_seats: int | None = None) -> ElectionResult:
    """Result with the given allocation, votes equal to seats."""
    return ElectionResult(
        total_seats=total_seats or sum(seats.values()),
        threshold=0.0,
        seat_allocation=dict(seats),
        votes=dict(seats),
        total_votes=sum(seats.values()),
    )


@pytest.fixture
def dutch_engine():
    return FormationEngine(
        issues=dutch_2023.ISSUES,
        affinities=dutch_2023.affinities(),
        total_seats=dutch_2023.TOTAL_SEATS,
        threshold=dutch_2023.THRESHOLD,
    )


@pytest.fixture
def dutch_election(dutch_engine):
    """(result, parties with seats) for the 2023 election."""
    return dutch_engine.elect(dutch_2023.parties())
