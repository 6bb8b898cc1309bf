"""Negotiation domain models."""

from formation.models.negotiation.entities import (
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
    "NegotiationPhase",
    "EventKind",
    "FailureReason",
    "NegotiationEvent",
    "FormationFailed",
    "NegotiationState",
    "NegotiationSnapshot",
    "TickStatus",
]
