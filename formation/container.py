"""Engine wiring - explicit dependency container built by the caller."""

from collections.abc import Mapping, Sequence

from loguru import logger

from formation import settings
from formation.models.election import ElectionResult, Issue, Party
from formation.models.government import Government
from formation.services.coalition import CoalitionSearch, SearchConfig
from formation.services.compatibility import CompatibilityConfig, CompatibilityModel
from formation.services.cycle import FormationCycle
from formation.services.electoral import ElectoralAllocator
from formation.services.government import GovernmentConfig, GovernmentModel
from formation.services.negotiation import NegotiationConfig


class FormationEngine:
    """Holds one configured instance of every service.

    Unlike a process-wide singleton, each engine receives its issues and
    configuration explicitly, so several engines can run side by side.
    """

    def __init__(
        self,
        issues: Sequence[Issue] = (),
        affinities: Mapping[frozenset[str], float] | None = None,
        total_seats: int = settings.TOTAL_SEATS,
        threshold: float = settings.ELECTORAL_THRESHOLD,
        compatibility_config: CompatibilityConfig | None = None,
        search_config: SearchConfig | None = None,
        negotiation_config: NegotiationConfig | None = None,
        government_config: GovernmentConfig | None = None,
    ):
        self.issues = tuple(issues)
        self.negotiation_config = negotiation_config or NegotiationConfig()
        self.government_config = government_config or GovernmentConfig()

        self.allocator = ElectoralAllocator(total_seats=total_seats, threshold=threshold)
        self.compatibility = CompatibilityModel.from_issues(
            self.issues,
            affinities=affinities or {},
            config=compatibility_config or CompatibilityConfig(),
        )
        self.search = CoalitionSearch(self.compatibility, search_config)
        logger.debug("FormationEngine initialized with {} issues", len(self.issues))

    def elect(self, parties: Sequence[Party]) -> tuple[ElectionResult, list[Party]]:
        """Allocate seats; returns the result and the parties with seats set."""
        result = self.allocator.allocate(parties)
        return result, result.apply(list(parties))

    def cycle(self, result: ElectionResult, parties: Sequence[Party]) -> FormationCycle:
        """Start a formation cycle over the ranked candidates."""
        return FormationCycle(
            result,
            parties,
            self.search,
            config=self.negotiation_config,
            issues=[i.id for i in self.issues] if self.issues else None,
        )

    def govern(self, government: Government) -> GovernmentModel:
        """Stability tracking for a freshly formed government."""
        return GovernmentModel(government, self.government_config)
