"""Compatibility services."""

from formation.services.compatibility.model import CompatibilityConfig, CompatibilityModel

__all__ = [
    "CompatibilityConfig",
    "CompatibilityModel",
]
