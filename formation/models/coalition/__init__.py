"""Coalition domain models."""

from formation.models.coalition.entities import (
    BlockedCoalition,
    CoalitionAnalysis,
    CoalitionCandidate,
    CoalitionEvaluation,
    RedLineViolation,
)

__all__ = [
    "CoalitionCandidate",
    "CoalitionAnalysis",
    "CoalitionEvaluation",
    "RedLineViolation",
    "BlockedCoalition",
]
