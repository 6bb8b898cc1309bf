"""Base entity class for all domain entities."""

from dataclasses import asdict
from typing import Any


class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)
