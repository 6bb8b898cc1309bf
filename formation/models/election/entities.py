"""Election domain entities - parties, issues and seat allocations."""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any

import polars as pl

from formation import formulas
from formation.models.common import BaseEntity


@dataclass(frozen=True)
class Issue(BaseEntity):
    """A policy issue with its public importance (0..1)."""

    id: str
    name: str = ""
    importance: float = 0.5


@dataclass(frozen=True)
class Party(BaseEntity):
    """A party as it enters a formation cycle. Read-only after the election."""

    id: str
    name: str
    vote_count: int
    seats: int = 0
    issue_positions: Mapping[str, float] = field(default_factory=dict, hash=False)
    economic_axis: float = 0.0
    social_axis: float = 0.0
    explicit_exclusions: frozenset[str] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "issue_positions", MappingProxyType(dict(self.issue_positions)))

    def to_dict(self) -> dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["issue_positions"] = dict(self.issue_positions)
        return data

    def excludes(self, other: "Party") -> bool:
        """True if this party refuses to govern with ``other``."""
        return other.id in self.explicit_exclusions

    def position(self, issue: str) -> float:
        """Position on an issue, 0.0 (centre) when the party has none."""
        return self.issue_positions.get(issue, 0.0)

    def with_seats(self, seats: int) -> "Party":
        return replace(self, seats=seats)


@dataclass(frozen=True)
class SeatRow(BaseEntity):
    """One line of an election result table."""

    party: str
    votes: int
    seats: int
    votes_pct: float
    seats_pct: float


@dataclass
class ElectionResult(BaseEntity):
    """Seat allocation for one election. Seats sum exactly to ``total_seats``."""

    total_seats: int
    threshold: float
    seat_allocation: dict[str, int]
    votes: dict[str, int] = field(default_factory=dict)
    total_votes: int = 0
    excluded: tuple[str, ...] = ()

    @property
    def majority(self) -> int:
        return formulas.majority(self.total_seats)

    def seats_for(self, party_id: str) -> int:
        return self.seat_allocation.get(party_id, 0)

    def apply(self, parties: list[Party]) -> list[Party]:
        """Return the parties with their allocated seats filled in."""
        return [p.with_seats(self.seats_for(p.id)) for p in parties]

    def rows(self) -> list[SeatRow]:
        """Per-party rows, most seats first."""
        result = [
            SeatRow(
                party=p,
                votes=v,
                seats=self.seats_for(p),
                votes_pct=round(v / self.total_votes * 100, 2) if self.total_votes else 0.0,
                seats_pct=round(self.seats_for(p) / self.total_seats * 100, 2),
            )
            for p, v in self.votes.items()
        ]
        return sorted(result, key=lambda r: (-r.seats, -r.votes))

    def to_frame(self) -> pl.DataFrame:
        """Result table as a DataFrame for display."""
        return pl.DataFrame(
            [r.to_dict() for r in self.rows()],
            schema={
                "party": pl.Utf8,
                "votes": pl.Int64,
                "seats": pl.Int64,
                "votes_pct": pl.Float64,
                "seats_pct": pl.Float64,
            },
        )
