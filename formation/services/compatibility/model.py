"""Compatibility model - pairwise ideological compatibility between parties."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from loguru import logger

from formation import formulas
from formation.models.election import Issue, Party


@dataclass(frozen=True)
class CompatibilityConfig:
    """Tunables of the compatibility formula."""

    salience_threshold: float = 0.5
    issue_penalty_weight: float = 0.3
    affinity_weight: float = 0.1
    max_distance: float = formulas.MAX_AXIS_DISTANCE


@dataclass
class CompatibilityModel:
    """Symmetric party compatibility in [0, 1], memoised per unordered pair.

    ``importance`` is the public importance of each issue (0..1); only issues
    at or above ``salience_threshold`` count towards the disagreement
    penalty. ``affinities`` optionally holds historical partnership bonuses
    in [-1, 1] keyed by unordered pairs of party ids.
    """

    importance: Mapping[str, float] = field(default_factory=dict)
    affinities: Mapping[frozenset[str], float] = field(default_factory=dict)
    config: CompatibilityConfig = field(default_factory=CompatibilityConfig)

    def __post_init__(self):
        self._cache: dict[frozenset[str], float] = {}
        self._salient = {
            i: w for i, w in self.importance.items() if w >= self.config.salience_threshold
        }
        logger.debug("CompatibilityModel initialized: {} salient issues", len(self._salient))

    @classmethod
    def from_issues(cls, issues: Sequence[Issue], **kwargs) -> "CompatibilityModel":
        return cls(importance={i.id: i.importance for i in issues}, **kwargs)

    def compatibility(self, a: Party, b: Party) -> float:
        """Compatibility of two parties; 0.0 if either excludes the other."""
        if a.id == b.id:
            return 1.0
        key = frozenset((a.id, b.id))
        if key not in self._cache:
            self._cache[key] = self._compute(a, b)
        return self._cache[key]

    def _compute(self, a: Party, b: Party) -> float:
        if a.excludes(b) or b.excludes(a):
            return 0.0

        # Fixed argument order keeps the float arithmetic identical both ways
        a, b = sorted((a, b), key=lambda p: p.id)
        distance = formulas.axis_distance(
            (a.economic_axis, a.social_axis),
            (b.economic_axis, b.social_axis),
        )
        penalty = formulas.issue_penalty(a.issue_positions, b.issue_positions, self._salient)
        affinity = self.affinities.get(frozenset((a.id, b.id)), 0.0)

        score = (
            1.0
            - distance / self.config.max_distance
            - self.config.issue_penalty_weight * penalty
            + self.config.affinity_weight * affinity
        )
        return formulas.clamp(score)

    def pairwise(self, parties: Sequence[Party]) -> list[float]:
        return [self.compatibility(a, b) for a, b in formulas.pairs(parties)]

    def min_pairwise(self, parties: Sequence[Party]) -> float:
        """Weakest link of a coalition; 1.0 for a single party."""
        values = self.pairwise(parties)
        return min(values) if values else 1.0

    def mean_pairwise(self, parties: Sequence[Party]) -> float:
        values = self.pairwise(parties)
        return sum(values) / len(values) if values else 1.0

    def issue_compatibility(self, parties: Sequence[Party], issue: str) -> float:
        """Agreement of a coalition on one issue (1.0 = identical positions)."""
        return formulas.spread_compatibility(p.position(issue) for p in parties)

    def clear_cache(self) -> None:
        """Clear memoised pair scores."""
        self._cache.clear()
        logger.debug("Compatibility cache cleared")
