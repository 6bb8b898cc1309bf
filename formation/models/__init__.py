"""Models package - entities for all domains."""

from formation.models.coalition import (
    BlockedCoalition,
    CoalitionAnalysis,
    CoalitionCandidate,
    CoalitionEvaluation,
    RedLineViolation,
)
from formation.models.common import BaseEntity
from formation.models.election import ElectionResult, Issue, Party, SeatRow
from formation.models.government import (
    DUTCH_MINISTRIES,
    AgreementPoint,
    ConfidenceCrisis,
    Government,
    Ministry,
    PoliticalEvent,
)
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

__all__ = [
    # Common
    "BaseEntity",
    # Election
    "Issue",
    "Party",
    "SeatRow",
    "ElectionResult",
    # Coalition
    "CoalitionCandidate",
    "CoalitionAnalysis",
    "CoalitionEvaluation",
    "RedLineViolation",
    "BlockedCoalition",
    # Negotiation
    "NegotiationPhase",
    "EventKind",
    "FailureReason",
    "NegotiationEvent",
    "FormationFailed",
    "NegotiationState",
    "NegotiationSnapshot",
    "TickStatus",
    # Government
    "DUTCH_MINISTRIES",
    "Ministry",
    "AgreementPoint",
    "PoliticalEvent",
    "ConfidenceCrisis",
    "Government",
]
