"""Election domain models - parties, issues and results."""

from formation.models.election.entities import ElectionResult, Issue, Party, SeatRow

__all__ = [
    "Issue",
    "Party",
    "SeatRow",
    "ElectionResult",
]
