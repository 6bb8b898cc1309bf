"""Government domain entities - cabinet, agreement and stability."""

from dataclasses import dataclass, field

from formation.models.common import BaseEntity


@dataclass(frozen=True)
class Ministry(BaseEntity):
    """A cabinet post. Lower rank is picked earlier; rank 0 is the premiership."""

    name: str
    rank: int


# Dutch cabinet, in the order parties traditionally claim them.
DUTCH_MINISTRIES: tuple[Ministry, ...] = (
    Ministry("General Affairs", 0),
    Ministry("Finance", 1),
    Ministry("Foreign Affairs", 2),
    Ministry("Justice and Security", 3),
    Ministry("Interior and Kingdom Relations", 4),
    Ministry("Economic Affairs and Climate", 5),
    Ministry("Health, Welfare and Sport", 6),
    Ministry("Social Affairs and Employment", 7),
    Ministry("Education, Culture and Science", 8),
    Ministry("Infrastructure and Water Management", 9),
    Ministry("Defence", 10),
    Ministry("Agriculture, Nature and Food Quality", 11),
    Ministry("Housing and Spatial Planning", 12),
    Ministry("Asylum and Migration", 13),
)


@dataclass(frozen=True)
class AgreementPoint(BaseEntity):
    """One settled issue of the coalition agreement."""

    issue: str
    position: float
    agreed_on_day: int


@dataclass(frozen=True)
class PoliticalEvent(BaseEntity):
    """External event moving government stability; ``impact`` is signed."""

    description: str
    impact: float


@dataclass(frozen=True)
class ConfidenceCrisis(BaseEntity):
    """Raised once when stability drops under the confidence threshold."""

    rating: float
    threshold: float
    event: PoliticalEvent


@dataclass
class Government(BaseEntity):
    """A sitting cabinet formed from a successful negotiation."""

    coalition_parties: tuple[str, ...]
    prime_minister_party: str
    ministry_allocation: dict[str, list[Ministry]]
    stability_rating: float
    coalition_agreement: list[AgreementPoint] = field(default_factory=list)
    crises: list[ConfidenceCrisis] = field(default_factory=list)
    in_crisis: bool = False
    collapsed: bool = False

    def ministries_of(self, party_id: str) -> list[Ministry]:
        return self.ministry_allocation.get(party_id, [])
