"""Government domain models."""

from formation.models.government.entities import (
    DUTCH_MINISTRIES,
    AgreementPoint,
    ConfidenceCrisis,
    Government,
    Ministry,
    PoliticalEvent,
)

__all__ = [
    "DUTCH_MINISTRIES",
    "Ministry",
    "AgreementPoint",
    "PoliticalEvent",
    "ConfidenceCrisis",
    "Government",
]
