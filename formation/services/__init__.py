"""Services package - service class exports."""

from formation.services.coalition import CoalitionSearch, SearchConfig
from formation.services.compatibility import CompatibilityConfig, CompatibilityModel
from formation.services.cycle import FormationCycle
from formation.services.electoral import ElectoralAllocator
from formation.services.government import GovernmentConfig, GovernmentModel, form_government
from formation.services.negotiation import DisruptionSpec, NegotiationConfig, NegotiationMachine

__all__ = [
    "ElectoralAllocator",
    "CompatibilityConfig",
    "CompatibilityModel",
    "CoalitionSearch",
    "SearchConfig",
    "DisruptionSpec",
    "NegotiationConfig",
    "NegotiationMachine",
    "GovernmentConfig",
    "GovernmentModel",
    "form_government",
    "FormationCycle",
]
