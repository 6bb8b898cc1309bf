"""Negotiation domain entities - phases, events and state."""

from dataclasses import asdict, dataclass, field, replace
from enum import StrEnum
from typing import Any

from formation.models.coalition import CoalitionCandidate
from formation.models.common import BaseEntity
from formation.models.election import Party
from formation.models.government import Ministry


class NegotiationPhase(StrEnum):
    """Formation phases (verkenner, informateur, formateur) and outcomes."""

    SCOUT = "scout"
    INFORMATEUR = "informateur"
    FORMATEUR = "formateur"
    SUCCESS = "success"
    FAILURE = "failure"

    @property
    def terminal(self) -> bool:
        return self in (NegotiationPhase.SUCCESS, NegotiationPhase.FAILURE)


class EventKind(StrEnum):
    """Negotiation event types."""

    PHASE_TRANSITION = "phase_transition"
    DAY_ELAPSED = "day_elapsed"
    ISSUE_RESOLVED = "issue_resolved"
    ISSUE_REOPENED = "issue_reopened"
    DISRUPTION = "disruption"
    SUCCESS = "success"
    FAILURE = "failure"


class FailureReason(StrEnum):
    """Why a formation attempt ended without a government."""

    DISRUPTION = "disruption"
    TIMEOUT = "timeout"
    USER_ABANDONED = "user_abandoned"
    CANDIDATES_EXHAUSTED = "candidates_exhausted"
    NEW_ELECTION_REQUIRED = "new_election_required"


@dataclass(frozen=True)
class NegotiationEvent(BaseEntity):
    """One entry of the negotiation event log."""

    kind: EventKind
    day: int
    phase: NegotiationPhase
    issue: str | None = None
    detail: str = ""


@dataclass(frozen=True)
class FormationFailed(BaseEntity):
    """Terminal failure with the events that led to it."""

    reason: FailureReason
    exhausted_candidates: bool = False
    event_log: tuple[NegotiationEvent, ...] = ()
    detail: str = ""


@dataclass
class NegotiationState(BaseEntity):
    """Mutable state of one formation attempt, owned by its machine."""

    candidate: CoalitionCandidate
    parties: tuple[Party, ...]
    rng_seed: int
    issues_outstanding: set[str] = field(default_factory=set)
    issues_resolved: set[str] = field(default_factory=set)
    phase: NegotiationPhase = NegotiationPhase.SCOUT
    days_elapsed: int = 0
    phase_days: int = 0
    trust: float = 1.0
    resolved_on: dict[str, int] = field(default_factory=dict)
    event_log: list[NegotiationEvent] = field(default_factory=list)
    ministry_allocation: dict[str, list[Ministry]] = field(default_factory=dict)
    failure: FormationFailed | None = None

    @property
    def party_ids(self) -> tuple[str, ...]:
        return tuple(p.id for p in self.parties)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(replace(self, parties=()))
        data["parties"] = [p.to_dict() for p in self.parties]
        return data


@dataclass(frozen=True)
class NegotiationSnapshot(BaseEntity):
    """Immutable view of a negotiation published to observers."""

    phase: NegotiationPhase
    parties: tuple[str, ...]
    days_elapsed: int
    issues_resolved: tuple[str, ...]
    issues_outstanding: tuple[str, ...]
    trust: float
    rng_seed: int
    events: tuple[NegotiationEvent, ...]
    failure: FormationFailed | None = None

    @classmethod
    def of(cls, state: NegotiationState) -> "NegotiationSnapshot":
        return cls(
            phase=state.phase,
            parties=state.party_ids,
            days_elapsed=state.days_elapsed,
            issues_resolved=tuple(sorted(state.issues_resolved)),
            issues_outstanding=tuple(sorted(state.issues_outstanding)),
            trust=state.trust,
            rng_seed=state.rng_seed,
            events=tuple(state.event_log),
            failure=state.failure,
        )


@dataclass(frozen=True)
class TickStatus(BaseEntity):
    """What a single ``tick()`` did."""

    phase: NegotiationPhase
    day: int
    terminal: bool
    outcome: FormationFailed | None = None
