"""Engine errors and input validation helpers."""


class FormationError(Exception):
    """Base class for coalition formation errors."""

    def __init__(self, message: str = "Formation error"):
        self.message = message
        super().__init__(self.message)


class InvalidInputError(FormationError):
    """Malformed election data (negative votes, zero seats, ...)."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message)


class NoEligiblePartiesError(FormationError):
    """Every party fell below the electoral threshold."""

    def __init__(self, message: str = "No party reached the electoral threshold"):
        super().__init__(message)


class InvalidStateError(FormationError):
    """Operation not allowed in the current negotiation or government state."""

    def __init__(self, message: str = "Invalid state"):
        super().__init__(message)


class InvalidTransitionError(InvalidStateError):
    """Negotiation phase transition not in the allowed table."""

    def __init__(self, message: str = "Illegal phase transition"):
        super().__init__(message)


def validate_seats(total_seats: int) -> None:
    """Validate the size of the house."""
    if isinstance(total_seats, bool) or not isinstance(total_seats, int) or total_seats <= 0:
        raise InvalidInputError(f"Invalid total_seats: {total_seats}. Must be a positive integer")


def validate_threshold(threshold: float) -> None:
    """Validate threshold is a fraction in [0, 1)."""
    if not 0 <= threshold < 1:
        raise InvalidInputError(f"Invalid threshold: {threshold}. Must be in [0, 1)")
