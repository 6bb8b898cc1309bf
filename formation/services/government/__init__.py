"""Government services."""

from formation.services.government.model import (
    GovernmentConfig,
    GovernmentModel,
    allocate_ministries,
    form_government,
    prime_minister_party,
)

__all__ = [
    "GovernmentConfig",
    "GovernmentModel",
    "allocate_ministries",
    "form_government",
    "prime_minister_party",
]
