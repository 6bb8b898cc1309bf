"""Output schemas - election results, negotiation snapshots and governments."""

from pydantic import BaseModel, Field

from formation.models.election import ElectionResult
from formation.models.government import AgreementPoint, ConfidenceCrisis, Government, Ministry, PoliticalEvent
from formation.models.negotiation import (
    EventKind,
    FailureReason,
    FormationFailed,
    NegotiationEvent,
    NegotiationPhase,
    NegotiationSnapshot,
)


class ElectionResultSchema(BaseModel):
    """Seat allocation of one election."""

    total_seats: int = Field(alias="totalSeats", gt=0)
    threshold: float = 0.0
    seat_allocation: dict[str, int] = Field(alias="seatAllocation")
    votes: dict[str, int] = {}
    total_votes: int = Field(alias="totalVotes", default=0)
    excluded: list[str] = []

    class Config:
        populate_by_name = True

    def to_entity(self) -> ElectionResult:
        return ElectionResult(
            total_seats=self.total_seats,
            threshold=self.threshold,
            seat_allocation=dict(self.seat_allocation),
            votes=dict(self.votes),
            total_votes=self.total_votes,
            excluded=tuple(self.excluded),
        )

    @classmethod
    def from_entity(cls, result: ElectionResult) -> "ElectionResultSchema":
        return cls(
            total_seats=result.total_seats,
            threshold=result.threshold,
            seat_allocation=dict(result.seat_allocation),
            votes=dict(result.votes),
            total_votes=result.total_votes,
            excluded=list(result.excluded),
        )


class NegotiationEventSchema(BaseModel):
    kind: EventKind
    day: int
    phase: NegotiationPhase
    issue: str | None = None
    detail: str = ""

    def to_entity(self) -> NegotiationEvent:
        return NegotiationEvent(kind=self.kind, day=self.day, phase=self.phase, issue=self.issue, detail=self.detail)


class FormationFailedSchema(BaseModel):
    """Failed formation attempt."""

    reason: FailureReason
    exhausted_candidates: bool = Field(alias="exhaustedCandidates", default=False)
    event_log: list[NegotiationEventSchema] = Field(alias="eventLog", default_factory=list)
    detail: str = ""

    class Config:
        populate_by_name = True

    def to_entity(self) -> FormationFailed:
        return FormationFailed(
            reason=self.reason,
            exhausted_candidates=self.exhausted_candidates,
            event_log=tuple(e.to_entity() for e in self.event_log),
            detail=self.detail,
        )

    @classmethod
    def from_entity(cls, failure: FormationFailed) -> "FormationFailedSchema":
        return cls.model_validate(failure.to_dict())


class NegotiationSnapshotSchema(BaseModel):
    """Read-only negotiation view for observers."""

    phase: NegotiationPhase
    parties: list[str]
    days_elapsed: int = Field(alias="daysElapsed")
    issues_resolved: list[str] = Field(alias="issuesResolved", default_factory=list)
    issues_outstanding: list[str] = Field(alias="issuesOutstanding", default_factory=list)
    trust: float = 1.0
    rng_seed: int = Field(alias="rngSeed")
    events: list[NegotiationEventSchema] = []
    failure: FormationFailedSchema | None = None

    class Config:
        populate_by_name = True

    def to_entity(self) -> NegotiationSnapshot:
        return NegotiationSnapshot(
            phase=self.phase,
            parties=tuple(self.parties),
            days_elapsed=self.days_elapsed,
            issues_resolved=tuple(self.issues_resolved),
            issues_outstanding=tuple(self.issues_outstanding),
            trust=self.trust,
            rng_seed=self.rng_seed,
            events=tuple(e.to_entity() for e in self.events),
            failure=self.failure.to_entity() if self.failure else None,
        )

    @classmethod
    def from_entity(cls, snapshot: NegotiationSnapshot) -> "NegotiationSnapshotSchema":
        return cls.model_validate(snapshot.to_dict())


class MinistrySchema(BaseModel):
    name: str
    rank: int


class AgreementPointSchema(BaseModel):
    issue: str
    position: float
    agreed_on_day: int = Field(alias="agreedOnDay")

    class Config:
        populate_by_name = True


class PoliticalEventSchema(BaseModel):
    description: str
    impact: float


class ConfidenceCrisisSchema(BaseModel):
    rating: float
    threshold: float
    event: PoliticalEventSchema


class GovernmentSchema(BaseModel):
    """Sitting cabinet."""

    coalition_parties: list[str] = Field(alias="coalitionParties")
    prime_minister_party: str = Field(alias="primeMinisterParty")
    ministry_allocation: dict[str, list[MinistrySchema]] = Field(alias="ministryAllocation")
    stability_rating: float = Field(alias="stabilityRating", ge=0, le=100)
    coalition_agreement: list[AgreementPointSchema] = Field(alias="coalitionAgreement", default_factory=list)
    crises: list[ConfidenceCrisisSchema] = []
    in_crisis: bool = Field(alias="inCrisis", default=False)
    collapsed: bool = False

    class Config:
        populate_by_name = True

    def to_entity(self) -> Government:
        return Government(
            coalition_parties=tuple(self.coalition_parties),
            prime_minister_party=self.prime_minister_party,
            ministry_allocation={
                party: [Ministry(name=m.name, rank=m.rank) for m in posts]
                for party, posts in self.ministry_allocation.items()
            },
            stability_rating=self.stability_rating,
            coalition_agreement=[
                AgreementPoint(issue=a.issue, position=a.position, agreed_on_day=a.agreed_on_day)
                for a in self.coalition_agreement
            ],
            crises=[
                ConfidenceCrisis(
                    rating=c.rating,
                    threshold=c.threshold,
                    event=PoliticalEvent(description=c.event.description, impact=c.event.impact),
                )
                for c in self.crises
            ],
            in_crisis=self.in_crisis,
            collapsed=self.collapsed,
        )

    @classmethod
    def from_entity(cls, government: Government) -> "GovernmentSchema":
        return cls.model_validate(government.to_dict())
