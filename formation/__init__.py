"""Coalition formation engine - seats, coalitions, negotiation, government."""

from formation import formulas, models
from formation.container import FormationEngine
from formation.errors import (
    FormationError,
    InvalidInputError,
    InvalidStateError,
    InvalidTransitionError,
    NoEligiblePartiesError,
)

__all__ = [
    "formulas",
    "models",
    "FormationEngine",
    "FormationError",
    "InvalidInputError",
    "InvalidStateError",
    "InvalidTransitionError",
    "NoEligiblePartiesError",
]
