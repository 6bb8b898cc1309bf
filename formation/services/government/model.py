"""Government model - cabinet construction and stability tracking."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from loguru import logger

from formation import formulas, settings
from formation.errors import InvalidStateError
from formation.models.election import Party
from formation.models.government import (
    DUTCH_MINISTRIES,
    AgreementPoint,
    ConfidenceCrisis,
    Government,
    Ministry,
    PoliticalEvent,
)
from formation.models.negotiation import NegotiationPhase, NegotiationState


@dataclass(frozen=True)
class GovernmentConfig:
    """Stability thresholds."""

    confidence_threshold: float = settings.CONFIDENCE_THRESHOLD
    collapse_threshold: float = settings.COLLAPSE_THRESHOLD
    fragility_per_party: float = 0.05


def prime_minister_party(parties: Sequence[Party]) -> Party:
    """Largest party; the earliest in negotiation order on equal seats."""
    return sorted(parties, key=lambda p: -p.seats)[0]


def allocate_ministries(
    parties: Sequence[Party],
    ministries: Sequence[Ministry] = DUTCH_MINISTRIES,
) -> dict[str, list[Ministry]]:
    """Distribute cabinet posts.

    Post counts follow seat share (D'Hondt over seats). Parties then draft in
    rounds, largest first, ties in negotiation order, so the largest party
    takes the premiership and the first pick.
    """
    draft = sorted(parties, key=lambda p: -p.seats)
    posts = sorted(ministries, key=lambda m: m.rank)
    quotas = formulas.dhondt({p.id: max(p.seats, 0) for p in draft}, len(posts))

    allocation: dict[str, list[Ministry]] = {p.id: [] for p in draft}
    queue = list(posts)
    while queue:
        picked = False
        for p in draft:
            if queue and len(allocation[p.id]) < quotas[p.id]:
                allocation[p.id].append(queue.pop(0))
                picked = True
        if not picked:
            break

    return allocation


def initial_stability(compatibility: float, trust: float, difficulty: float) -> float:
    """Starting rating (0..100) of a fresh cabinet."""
    return formulas.clamp(100 * (0.5 * compatibility + 0.3 * trust + 0.2 * (1 - difficulty)), 0.0, 100.0)


def form_government(negotiation: NegotiationState) -> Government:
    """Build the cabinet from a successful negotiation."""
    if negotiation.phase != NegotiationPhase.SUCCESS:
        raise InvalidStateError(f"Cannot form a government from a negotiation in phase {negotiation.phase}")

    parties = negotiation.parties
    seats = {p.id: p.seats for p in parties}
    agreement = [
        AgreementPoint(
            issue=issue,
            position=round(formulas.weighted_position({p.id: p.position(issue) for p in parties}, seats), 2),
            agreed_on_day=negotiation.resolved_on.get(issue, negotiation.days_elapsed),
        )
        for issue in sorted(negotiation.issues_resolved, key=lambda i: (negotiation.resolved_on.get(i, 0), i))
    ]
    allocation = negotiation.ministry_allocation or allocate_ministries(parties)
    candidate = negotiation.candidate

    government = Government(
        coalition_parties=negotiation.party_ids,
        prime_minister_party=prime_minister_party(parties).id,
        ministry_allocation={p: list(m) for p, m in allocation.items()},
        stability_rating=initial_stability(
            candidate.compatibility_score, negotiation.trust, candidate.formation_difficulty
        ),
        coalition_agreement=agreement,
    )
    logger.info(
        "Government formed: {} (PM {}), stability {:.1f}",
        "-".join(government.coalition_parties),
        government.prime_minister_party,
        government.stability_rating,
    )
    return government


class GovernmentModel:
    """Tracks a sitting government's stability and confidence crises."""

    def __init__(self, government: Government, config: GovernmentConfig | None = None):
        self._government = government
        self._config = config or GovernmentConfig()
        self._listeners: list[Callable[[ConfidenceCrisis], None]] = []
        logger.debug("GovernmentModel initialized for {}", "-".join(government.coalition_parties))

    @property
    def government(self) -> Government:
        return self._government

    def subscribe(self, listener: Callable[[ConfidenceCrisis], None]) -> None:
        """Register a confidence crisis listener."""
        self._listeners.append(listener)

    def update_stability(self, event: PoliticalEvent) -> float:
        """Apply an event and return the new rating (0..100).

        Falling under the confidence threshold raises one crisis; another is
        only raised after the rating has recovered to the threshold first.
        """
        gov = self._government
        if gov.collapsed:
            raise InvalidStateError("Government has already collapsed")

        impact = event.impact
        if impact < 0:
            impact *= 1 + self._config.fragility_per_party * (len(gov.coalition_parties) - 1)
        rating = formulas.clamp(gov.stability_rating + impact, 0.0, 100.0)
        gov.stability_rating = rating
        logger.debug("Stability {:+.1f} -> {:.1f} ({})", impact, rating, event.description)

        threshold = self._config.confidence_threshold
        if rating < threshold and not gov.in_crisis:
            gov.in_crisis = True
            crisis = ConfidenceCrisis(rating=rating, threshold=threshold, event=event)
            gov.crises.append(crisis)
            logger.warning("Confidence crisis: stability {:.1f} below {}", rating, threshold)
            for listener in self._listeners:
                listener(crisis)
        elif rating >= threshold and gov.in_crisis:
            gov.in_crisis = False
            logger.info("Confidence restored: stability {:.1f}", rating)

        if rating <= self._config.collapse_threshold:
            self._collapse(f"stability fell to {rating:.1f}")

        return rating

    def resolve_confidence_vote(self, passed: bool) -> Government:
        """Outcome of a confidence vote; a lost vote brings the cabinet down."""
        if self._government.collapsed:
            raise InvalidStateError("Government has already collapsed")
        if not passed:
            self._collapse("confidence vote lost")
        else:
            logger.info("Confidence vote survived at stability {:.1f}", self._government.stability_rating)
        return self._government

    def _collapse(self, reason: str) -> None:
        self._government.collapsed = True
        logger.warning("Government {} collapsed: {}", "-".join(self._government.coalition_parties), reason)
