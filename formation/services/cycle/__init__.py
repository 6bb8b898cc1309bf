"""Formation cycle services."""

from formation.services.cycle.formation import FormationCycle

__all__ = ["FormationCycle"]
