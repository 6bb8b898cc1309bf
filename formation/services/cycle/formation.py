"""Formation cycle - candidate bookkeeping across attempts."""

from collections.abc import Iterable, Sequence

from loguru import logger

from formation.models.coalition import CoalitionCandidate
from formation.models.election import ElectionResult, Party
from formation.models.government import Government
from formation.models.negotiation import FailureReason, FormationFailed
from formation.services.coalition import CoalitionSearch
from formation.services.negotiation import NegotiationConfig, NegotiationMachine


class FormationCycle:
    """Hands out ranked candidates one attempt at a time.

    Never retries on its own: the caller decides whether a failed attempt is
    followed by the next candidate.
    """

    def __init__(
        self,
        result: ElectionResult,
        parties: Sequence[Party],
        search: CoalitionSearch,
        config: NegotiationConfig | None = None,
        issues: Iterable[str] | None = None,
        exclude: Iterable[frozenset[str]] = (),
    ):
        self._result = result
        self._parties = result.apply(list(parties))
        self._search = search
        self._config = config
        self._issues = tuple(issues) if issues is not None else None
        self._exclude = frozenset(exclude)

        found = search.find_viable_coalitions(result, self._parties)
        # A fallen coalition cannot return, alone or with extra partners
        self._candidates = [c for c in found if not any(ex <= frozenset(c.party_ids) for ex in self._exclude)]
        self._next = 0
        self._failures: list[FormationFailed] = []
        logger.debug("FormationCycle initialized: {} candidates", len(self._candidates))

    @property
    def candidates(self) -> list[CoalitionCandidate]:
        return list(self._candidates)

    @property
    def remaining(self) -> list[CoalitionCandidate]:
        return self._candidates[self._next :]

    @property
    def failures(self) -> list[FormationFailed]:
        return list(self._failures)

    def next_attempt(self, seed: int) -> NegotiationMachine | FormationFailed:
        """Negotiation for the next untried candidate, or exhaustion."""
        if self._next >= len(self._candidates):
            logger.warning("All {} candidates exhausted; new elections required", len(self._candidates))
            return FormationFailed(
                reason=FailureReason.CANDIDATES_EXHAUSTED,
                exhausted_candidates=True,
                detail=f"{len(self._candidates)} candidates tried",
            )

        candidate = self._candidates[self._next]
        self._next += 1
        logger.info("Attempt {}: {} ({} seats)", self._next, candidate.label(), candidate.total_seats)
        return NegotiationMachine(
            candidate,
            self._parties,
            self._search.compatibility,
            seed=seed,
            issues=self._issues,
            config=self._config,
        )

    def record_failure(self, failure: FormationFailed) -> None:
        """Keep a failed attempt for the formation history."""
        self._failures.append(failure)
        logger.info("Recorded failure #{}: {}", len(self._failures), failure.reason)

    def after_collapse(self, government: Government) -> "FormationCycle | FormationFailed":
        """Reformation without the fallen coalition or any cabinet containing it.

        Returns FormationFailed (new elections) when nothing else is viable.
        """
        exclude = self._exclude | {frozenset(government.coalition_parties)}
        cycle = FormationCycle(
            self._result,
            self._parties,
            self._search,
            config=self._config,
            issues=self._issues,
            exclude=exclude,
        )
        if not cycle.candidates:
            logger.warning("No alternative to {}; new elections required", "-".join(government.coalition_parties))
            return FormationFailed(
                reason=FailureReason.NEW_ELECTION_REQUIRED,
                exhausted_candidates=True,
                detail="no viable coalition among remaining parties",
            )
        return cycle
