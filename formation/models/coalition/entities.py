"""Coalition domain entities - search results."""

from dataclasses import dataclass, field

from formation.models.common import BaseEntity


@dataclass(frozen=True)
class CoalitionCandidate(BaseEntity):
    """A majority coalition found by the search.

    ``party_ids`` is the negotiation order: seat count descending, ties in
    input order.
    """

    party_ids: tuple[str, ...]
    total_seats: int
    compatibility_score: float
    formation_difficulty: float
    score: float
    min_compatibility: float
    surplus: int
    is_minimal_winning: bool
    bloc: str = "centre"

    @property
    def size(self) -> int:
        return len(self.party_ids)

    def __contains__(self, party_id: object) -> bool:
        return party_id in self.party_ids

    def label(self) -> str:
        return "-".join(self.party_ids)


@dataclass(frozen=True)
class RedLineViolation(BaseEntity):
    """``party`` refuses to govern with ``excluded``."""

    party: str
    excluded: str


@dataclass(frozen=True)
class BlockedCoalition(BaseEntity):
    """A coalition the search rejected because of red lines."""

    party_ids: tuple[str, ...]
    violations: tuple[RedLineViolation, ...]

    def label(self) -> str:
        return "-".join(self.party_ids)


@dataclass(frozen=True)
class CoalitionEvaluation(BaseEntity):
    """Assessment of one named coalition, majority or not.

    ``viable`` means a majority, no red line crossed and every pair at or
    above the viability floor.
    """

    party_ids: tuple[str, ...]
    total_seats: int
    has_majority: bool
    compatibility_score: float
    min_compatibility: float
    formation_difficulty: float
    score: float
    surplus: int
    is_minimal_winning: bool
    violations: tuple[RedLineViolation, ...] = ()
    viable: bool = False

    def label(self) -> str:
        return "-".join(self.party_ids)


@dataclass
class CoalitionAnalysis(BaseEntity):
    """Ranked candidates plus search statistics."""

    candidates: list[CoalitionCandidate] = field(default_factory=list)
    majority: int = 0
    nodes_explored: int = 0
    pruned_by_seats: int = 0
    pruned_by_compatibility: int = 0
    blocked: list[BlockedCoalition] = field(default_factory=list)

    @property
    def blocked_by_exclusion(self) -> int:
        return len(self.blocked)

    @property
    def most_compatible(self) -> CoalitionCandidate | None:
        if not self.candidates:
            return None
        return max(self.candidates, key=lambda c: c.compatibility_score)

    @property
    def most_minimal(self) -> CoalitionCandidate | None:
        """Smallest surplus among minimal winning coalitions."""
        minimal = [c for c in self.candidates if c.is_minimal_winning]
        if not minimal:
            return None
        return min(minimal, key=lambda c: (c.surplus, c.size))
