"""Schemas package - pydantic models for data crossing the engine boundary."""

from formation.schemas.party import IssueSchema, PartySchema
from formation.schemas.results import (
    AgreementPointSchema,
    ConfidenceCrisisSchema,
    ElectionResultSchema,
    FormationFailedSchema,
    GovernmentSchema,
    MinistrySchema,
    NegotiationEventSchema,
    NegotiationSnapshotSchema,
    PoliticalEventSchema,
)

__all__ = [
    # Input
    "IssueSchema",
    "PartySchema",
    # Output
    "ElectionResultSchema",
    "NegotiationEventSchema",
    "FormationFailedSchema",
    "NegotiationSnapshotSchema",
    "MinistrySchema",
    "AgreementPointSchema",
    "PoliticalEventSchema",
    "ConfidenceCrisisSchema",
    "GovernmentSchema",
]
