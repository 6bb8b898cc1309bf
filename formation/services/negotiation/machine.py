"""Negotiation state machine - scout, informateur and formateur phases.

The machine advances one simulated day per ``tick()``. All randomness comes
from one numpy Generator seeded with ``NegotiationState.rng_seed`` and every
set is iterated in sorted order, so a run is reproducible from its seed.
"""

import asyncio
from collections.abc import AsyncIterable, Callable, Iterable, Sequence
from dataclasses import dataclass, field

import numpy as np
from loguru import logger

from formation import settings
from formation.errors import InvalidInputError, InvalidStateError, InvalidTransitionError
from formation.models.coalition import CoalitionCandidate
from formation.models.election import Party
from formation.models.government import DUTCH_MINISTRIES, Government, Ministry
from formation.models.negotiation import (
    EventKind,
    FailureReason,
    FormationFailed,
    NegotiationEvent,
    NegotiationPhase,
    NegotiationSnapshot,
    NegotiationState,
    TickStatus,
)
from formation.services.compatibility import CompatibilityModel
from formation.services.government import allocate_ministries, form_government

Phase = NegotiationPhase

# Legal transitions: (from_phase, to_phase)
_TRANSITIONS: set[tuple[NegotiationPhase, NegotiationPhase]] = {
    (Phase.SCOUT, Phase.INFORMATEUR),
    (Phase.INFORMATEUR, Phase.FORMATEUR),
    (Phase.FORMATEUR, Phase.SUCCESS),
    # Abandonment, disruption or timeout
    (Phase.SCOUT, Phase.FAILURE),
    (Phase.INFORMATEUR, Phase.FAILURE),
    (Phase.FORMATEUR, Phase.FAILURE),
}

# Floor on issue draw weights so fully divisive issues still get picked
_MIN_ISSUE_WEIGHT = 0.05


@dataclass(frozen=True)
class DisruptionSpec:
    """One row of the disruption table."""

    kind: str
    weight: float
    severity: float
    reopens: int = 0
    trust_loss: float = 0.0


DEFAULT_DISRUPTIONS: tuple[DisruptionSpec, ...] = (
    DisruptionSpec("concession_withdrawn", weight=5, severity=0.3, reopens=1),
    DisruptionSpec("external_scandal", weight=3, severity=0.5, trust_loss=0.15),
    DisruptionSpec("leaked_documents", weight=2, severity=0.6, reopens=2),
    DisruptionSpec("party_walkout", weight=1, severity=0.9),
)


@dataclass(frozen=True)
class NegotiationConfig:
    """Tunables of the negotiation process."""

    scout_days: int = 2
    formateur_days: int = 2
    max_negotiation_days: int = settings.MAX_NEGOTIATION_DAYS
    disruption_probability: float = settings.DISRUPTION_PROBABILITY
    disruption_table: tuple[DisruptionSpec, ...] = DEFAULT_DISRUPTIONS
    severe_threshold: float = 0.8
    min_resolution: float = 0.15
    max_resolution: float = 0.65
    min_trust: float = 0.2
    ministries: tuple[Ministry, ...] = field(default=DUTCH_MINISTRIES)

    def __post_init__(self):
        if self.scout_days not in (1, 2):
            raise InvalidInputError(f"Invalid scout_days: {self.scout_days}. Must be 1 or 2")
        if self.formateur_days < 1:
            raise InvalidInputError(f"Invalid formateur_days: {self.formateur_days}")
        if self.max_negotiation_days <= self.scout_days:
            raise InvalidInputError(
                f"Invalid max_negotiation_days: {self.max_negotiation_days}. Must exceed scout_days"
            )
        for name in ("disruption_probability", "min_resolution", "max_resolution", "min_trust"):
            if not 0 <= getattr(self, name) <= 1:
                raise InvalidInputError(f"Invalid {name}: {getattr(self, name)}. Must be in [0, 1]")
        if not self.disruption_table or sum(d.weight for d in self.disruption_table) <= 0:
            raise InvalidInputError("Disruption table needs at least one positive weight")
        if any(d.weight < 0 for d in self.disruption_table):
            raise InvalidInputError("Disruption weights cannot be negative")


class NegotiationMachine:
    """Drives one coalition candidate to a government or a failure."""

    def __init__(
        self,
        candidate: CoalitionCandidate,
        parties: Sequence[Party],
        compatibility: CompatibilityModel,
        seed: int,
        issues: Iterable[str] | None = None,
        config: NegotiationConfig | None = None,
    ):
        by_id = {p.id: p for p in parties}
        missing = [pid for pid in candidate.party_ids if pid not in by_id]
        if missing:
            raise InvalidInputError(f"Unknown coalition parties: {', '.join(missing)}")

        members = tuple(by_id[pid] for pid in candidate.party_ids)
        pool = issues if issues is not None else {i for p in members for i in p.issue_positions}
        agenda = sorted(i for i in set(pool) if any(i in p.issue_positions for p in members))

        self._config = config or NegotiationConfig()
        self._rng = np.random.default_rng(seed)
        self._issue_compat = {i: compatibility.issue_compatibility(members, i) for i in agenda}
        self._listeners: list[Callable[[NegotiationSnapshot], None]] = []
        self._government: Government | None = None
        self._state = NegotiationState(
            candidate=candidate,
            parties=members,
            rng_seed=seed,
            issues_outstanding=set(agenda),
        )
        self._log(EventKind.PHASE_TRANSITION, detail=f"opened {candidate.label()} with {len(agenda)} issues")
        logger.debug("NegotiationMachine initialized: {} (seed={})", candidate.label(), seed)

    @property
    def state(self) -> NegotiationState:
        return self._state

    @property
    def phase(self) -> NegotiationPhase:
        return self._state.phase

    @property
    def finished(self) -> bool:
        return self._state.phase.terminal

    @property
    def outcome(self) -> Government | FormationFailed | None:
        """Government on success, FormationFailed on failure, else None."""
        if self._state.phase == Phase.SUCCESS:
            if self._government is None:
                self._government = form_government(self._state)
            return self._government
        return self._state.failure

    def subscribe(self, listener: Callable[[NegotiationSnapshot], None]) -> None:
        """Register an observer for snapshots."""
        self._listeners.append(listener)

    def snapshot(self) -> NegotiationSnapshot:
        return NegotiationSnapshot.of(self._state)

    def tick(self, day: int | None = None) -> TickStatus:
        """Advance one simulated day."""
        state = self._state
        if state.phase.terminal:
            raise InvalidStateError(f"Negotiation already finished ({state.phase})")
        if day is not None and day != state.days_elapsed + 1:
            raise InvalidStateError(f"Expected day {state.days_elapsed + 1}, got {day}")

        state.days_elapsed += 1
        state.phase_days += 1
        self._log(EventKind.DAY_ELAPSED)

        if state.phase == Phase.SCOUT:
            if state.phase_days >= self._config.scout_days:
                self._transition(Phase.INFORMATEUR)
        elif state.phase == Phase.INFORMATEUR:
            self._bargain()
        elif state.phase == Phase.FORMATEUR:
            if state.phase_days >= self._config.formateur_days:
                self._finalize()

        if not state.phase.terminal and state.days_elapsed >= self._config.max_negotiation_days:
            self._fail(FailureReason.TIMEOUT, f"no agreement after {state.days_elapsed} days")

        self._publish()
        return TickStatus(
            phase=state.phase,
            day=state.days_elapsed,
            terminal=state.phase.terminal,
            outcome=state.failure,
        )

    def abandon(self, detail: str = "abandoned by caller") -> FormationFailed | None:
        """Stop at the current day boundary. No-op once finished."""
        if self.finished:
            return self._state.failure
        self._fail(FailureReason.USER_ABANDONED, detail)
        return self._state.failure

    def run(self) -> Government | FormationFailed:
        """Tick until the negotiation ends."""
        while not self.finished:
            self.tick()
        return self.outcome

    async def run_async(self, ticks: AsyncIterable[int]) -> Government | FormationFailed | None:
        """Advance on externally supplied day ticks; cancellation abandons."""
        try:
            async for day in ticks:
                if self.tick(day).terminal:
                    break
        except asyncio.CancelledError:
            self.abandon("negotiation task cancelled")
            raise
        return self.outcome

    def _bargain(self) -> None:
        state = self._state
        if self._roll_disruption():
            return

        if state.issues_outstanding:
            self._attempt_resolution()

        if not state.issues_outstanding:
            self._transition(Phase.FORMATEUR)

    def _roll_disruption(self) -> bool:
        """Daily disruption roll. Returns True if it ended the negotiation."""
        cfg = self._config
        if self._rng.random() >= cfg.disruption_probability:
            return False

        weights = np.array([d.weight for d in cfg.disruption_table], dtype=float)
        spec = cfg.disruption_table[int(self._rng.choice(len(weights), p=weights / weights.sum()))]
        self._log(EventKind.DISRUPTION, detail=f"{spec.kind} (severity {spec.severity:.2f})")
        logger.info("Day {}: disruption {} in {}", self._state.days_elapsed, spec.kind, self._state.candidate.label())

        if spec.severity >= cfg.severe_threshold:
            self._fail(FailureReason.DISRUPTION, spec.kind)
            return True

        if spec.trust_loss:
            self._state.trust = max(cfg.min_trust, self._state.trust * (1 - spec.trust_loss))
        if spec.reopens:
            self._reopen(spec.reopens, spec.kind)
        return False

    def _reopen(self, count: int, cause: str) -> None:
        state = self._state
        resolved = sorted(state.issues_resolved)
        if not resolved:
            return

        picks = self._rng.choice(len(resolved), size=min(count, len(resolved)), replace=False)
        for idx in sorted(int(i) for i in picks):
            issue = resolved[idx]
            state.issues_resolved.discard(issue)
            state.issues_outstanding.add(issue)
            state.resolved_on.pop(issue, None)
            self._log(EventKind.ISSUE_REOPENED, issue=issue, detail=cause)

    def _attempt_resolution(self) -> None:
        cfg = self._config
        state = self._state
        outstanding = sorted(state.issues_outstanding)

        weights = np.array([self._issue_compat[i] + _MIN_ISSUE_WEIGHT for i in outstanding], dtype=float)
        issue = outstanding[int(self._rng.choice(len(outstanding), p=weights / weights.sum()))]

        compat = self._issue_compat[issue]
        chance = state.trust * (cfg.min_resolution + (cfg.max_resolution - cfg.min_resolution) * compat)
        if self._rng.random() < chance:
            state.issues_outstanding.discard(issue)
            state.issues_resolved.add(issue)
            state.resolved_on[issue] = state.days_elapsed
            self._log(EventKind.ISSUE_RESOLVED, issue=issue, detail=f"p={chance:.3f}")

    def _finalize(self) -> None:
        state = self._state
        state.ministry_allocation = allocate_ministries(state.parties, self._config.ministries)
        self._transition(Phase.SUCCESS, publish=False)
        self._log(EventKind.SUCCESS, detail=f"agreement on {len(state.issues_resolved)} issues")
        self._publish()
        logger.info("Coalition agreement for {} after {} days", state.candidate.label(), state.days_elapsed)

    def _fail(self, reason: FailureReason, detail: str) -> None:
        # Record the failure before observers see the terminal phase
        self._transition(Phase.FAILURE, detail=f"{reason}: {detail}", publish=False)
        state = self._state
        self._log(EventKind.FAILURE, detail=str(reason))
        state.failure = FormationFailed(
            reason=reason,
            exhausted_candidates=False,
            event_log=tuple(state.event_log),
            detail=detail,
        )
        logger.warning("Negotiation {} failed on day {}: {} ({})", state.candidate.label(), state.days_elapsed, reason, detail)
        self._publish()

    def _transition(self, target: NegotiationPhase, detail: str = "", publish: bool = True) -> None:
        state = self._state
        if (state.phase, target) not in _TRANSITIONS:
            raise InvalidTransitionError(f"Illegal transition: {state.phase} -> {target}")

        previous = state.phase
        state.phase = target
        state.phase_days = 0
        self._log(EventKind.PHASE_TRANSITION, detail=detail or f"{previous} -> {target}")
        logger.debug("Day {}: {} -> {}", state.days_elapsed, previous, target)
        if publish:
            self._publish()

    def _log(self, kind: EventKind, issue: str | None = None, detail: str = "") -> None:
        state = self._state
        state.event_log.append(
            NegotiationEvent(kind=kind, day=state.days_elapsed, phase=state.phase, issue=issue, detail=detail)
        )

    def _publish(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in self._listeners:
            listener(snapshot)
