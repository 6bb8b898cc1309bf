"""Coalition search - branch and bound over majority coalitions."""

from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from formation import formulas, settings
from formation.errors import InvalidInputError
from formation.models.coalition import (
    BlockedCoalition,
    CoalitionAnalysis,
    CoalitionCandidate,
    CoalitionEvaluation,
    RedLineViolation,
)
from formation.models.election import ElectionResult, Party
from formation.services.compatibility import CompatibilityModel

BLOC_THRESHOLD = 3.0


def red_line_violations(members: Sequence[Party]) -> tuple[RedLineViolation, ...]:
    """Every (party, excluded) pair inside the group, in member order."""
    return tuple(
        RedLineViolation(party=a.id, excluded=b.id) for a in members for b in members if a is not b and a.excludes(b)
    )


@dataclass(frozen=True)
class SearchConfig:
    """Search bounds."""

    max_size: int = settings.MAX_COALITION_SIZE
    viability_floor: float = settings.VIABILITY_FLOOR


class CoalitionSearch:
    """Enumerates and ranks coalitions that command a majority."""

    def __init__(self, compatibility: CompatibilityModel, config: SearchConfig | None = None):
        self._compat = compatibility
        self._config = config or SearchConfig()
        logger.debug(
            "CoalitionSearch initialized: max_size={}, floor={}",
            self._config.max_size,
            self._config.viability_floor,
        )

    @property
    def compatibility(self) -> CompatibilityModel:
        return self._compat

    def find_viable_coalitions(
        self,
        result: ElectionResult,
        parties: Sequence[Party],
        max_size: int | None = None,
    ) -> list[CoalitionCandidate]:
        """Ranked majority coalitions, best first. Empty if none exists."""
        return self.analyze(result, parties, max_size).candidates

    def analyze(
        self,
        result: ElectionResult,
        parties: Sequence[Party],
        max_size: int | None = None,
    ) -> CoalitionAnalysis:
        """Run the search and keep its statistics."""
        max_size = self._config.max_size if max_size is None else max_size
        if max_size < 1:
            raise InvalidInputError(f"Invalid max_size: {max_size}. Must be at least 1")

        seated = [p.with_seats(result.seats_for(p.id)) for p in parties if result.seats_for(p.id) > 0]
        # Stable sort keeps input order between equal seat counts
        order = sorted(seated, key=lambda p: -p.seats)

        analysis = CoalitionAnalysis(majority=result.majority)
        self._branch(analysis, order, result.total_seats, max_size, 0, [], 0, 1.0)

        analysis.candidates.sort(key=lambda c: (-c.score, c.total_seats, c.party_ids))
        if analysis.candidates:
            logger.info(
                "Found {} coalitions ({} nodes, {} pruned by seats, {} by compatibility, {} blocked)",
                len(analysis.candidates),
                analysis.nodes_explored,
                analysis.pruned_by_seats,
                analysis.pruned_by_compatibility,
                analysis.blocked_by_exclusion,
            )
        else:
            logger.warning("No coalition reaches {} of {} seats", result.majority, result.total_seats)
        return analysis

    def evaluate(
        self,
        result: ElectionResult,
        parties: Sequence[Party],
        party_ids: Sequence[str],
    ) -> CoalitionEvaluation:
        """Score a named coalition whether or not the search would keep it."""
        if not party_ids:
            raise InvalidInputError("Coalition needs at least one party")
        if len(set(party_ids)) != len(party_ids):
            raise InvalidInputError(f"Duplicate parties in coalition: {', '.join(party_ids)}")

        by_id = {p.id: p for p in parties}
        missing = [pid for pid in party_ids if pid not in by_id]
        if missing:
            raise InvalidInputError(f"Unknown coalition parties: {', '.join(missing)}")

        members = sorted(
            (by_id[pid].with_seats(result.seats_for(pid)) for pid in party_ids),
            key=lambda p: -p.seats,
        )
        seats = sum(p.seats for p in members)
        min_compat = self._compat.min_pairwise(members)
        violations = red_line_violations(members)
        max_size = max(self._config.max_size, len(members))

        candidate = self._candidate(members, seats, min_compat, result.total_seats, result.majority, max_size)
        has_majority = seats >= result.majority
        evaluation = CoalitionEvaluation(
            party_ids=candidate.party_ids,
            total_seats=seats,
            has_majority=has_majority,
            compatibility_score=candidate.compatibility_score,
            min_compatibility=min_compat,
            formation_difficulty=candidate.formation_difficulty,
            score=candidate.score,
            surplus=candidate.surplus,
            is_minimal_winning=candidate.is_minimal_winning,
            violations=violations,
            viable=has_majority and not violations and min_compat >= self._config.viability_floor,
        )
        logger.debug(
            "Evaluated {}: {} seats, compat {:.2f}, {} red lines, viable={}",
            evaluation.label(),
            seats,
            evaluation.compatibility_score,
            len(violations),
            evaluation.viable,
        )
        return evaluation

    def _branch(
        self,
        analysis: CoalitionAnalysis,
        order: list[Party],
        total_seats: int,
        max_size: int,
        start: int,
        members: list[Party],
        seats: int,
        min_compat: float,
    ) -> None:
        quota = analysis.majority
        room = max_size - len(members)

        for i in range(start, len(order)):
            # Parties are sorted by seats, so later windows can only be smaller
            if seats + sum(p.seats for p in order[i : i + room]) < quota:
                analysis.pruned_by_seats += 1
                break

            party = order[i]
            analysis.nodes_explored += 1

            if any(party.excludes(m) or m.excludes(party) for m in members):
                blocked = members + [party]
                analysis.blocked.append(
                    BlockedCoalition(party_ids=tuple(p.id for p in blocked), violations=red_line_violations(blocked))
                )
                continue

            link = min((self._compat.compatibility(party, m) for m in members), default=1.0)
            if link < self._config.viability_floor:
                analysis.pruned_by_compatibility += 1
                continue

            coalition = members + [party]
            coalition_seats = seats + party.seats
            coalition_min = min(min_compat, link)

            if coalition_seats >= quota:
                analysis.candidates.append(
                    self._candidate(coalition, coalition_seats, coalition_min, total_seats, quota, max_size)
                )

            if len(coalition) < max_size:
                self._branch(analysis, order, total_seats, max_size, i + 1, coalition, coalition_seats, coalition_min)

    def _candidate(
        self,
        members: list[Party],
        seats: int,
        min_compat: float,
        total_seats: int,
        quota: int,
        max_size: int,
    ) -> CoalitionCandidate:
        compat = self._compat.mean_pairwise(members)
        size = formulas.size_component(len(members), max_size)
        margin = formulas.seat_margin_bonus(seats, total_seats)
        economic = sum(p.economic_axis for p in members) / len(members)

        if economic <= -BLOC_THRESHOLD:
            bloc = "left"
        elif economic >= BLOC_THRESHOLD:
            bloc = "right"
        else:
            bloc = "centre"

        return CoalitionCandidate(
            party_ids=tuple(p.id for p in members),
            total_seats=seats,
            compatibility_score=compat,
            formation_difficulty=formulas.formation_difficulty(len(members), max_size, min_compat),
            score=formulas.coalition_score(compat, size, margin),
            min_compatibility=min_compat,
            surplus=seats - quota,
            is_minimal_winning=formulas.is_minimal_winning({p.id: p.seats for p in members}, quota),
            bloc=bloc,
        )
