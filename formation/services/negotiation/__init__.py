"""Negotiation services."""

from formation.services.negotiation.machine import (
    DEFAULT_DISRUPTIONS,
    DisruptionSpec,
    NegotiationConfig,
    NegotiationMachine,
)

__all__ = [
    "DEFAULT_DISRUPTIONS",
    "DisruptionSpec",
    "NegotiationConfig",
    "NegotiationMachine",
]
