"""Tweede Kamer election of 22 November 2023 - reference data set."""

from formation.models.election import Issue, Party

TOTAL_SEATS = 150
# Kiesdeler: one full seat quota
THRESHOLD = 1 / 150

ISSUES: tuple[Issue, ...] = (
    Issue("immigration", "Immigration and asylum", importance=0.9),
    Issue("european", "European integration", importance=0.6),
    Issue("economy", "Taxes and public spending", importance=0.4),
    Issue("social", "Medical ethics and social values", importance=0.3),
)

# id, name, votes, economic, social, european, immigration, excluded partners
_PARTIES = [
    ("PVV", "Partij voor de Vrijheid", 2450878, 3, -8, -6, -9, ("GL-PvdA", "D66", "DENK", "Volt")),
    ("GL-PvdA", "GroenLinks-PvdA", 1643073, -7, 8, 8, 7, ("PVV", "FvD", "JA21")),
    ("VVD", "Volkspartij voor Vrijheid en Democratie", 1589519, 6, 3, 6, -2, ("SP", "FvD")),
    ("NSC", "Nieuw Sociaal Contract", 1343287, 4, -1, 2, -3, ("FvD", "DENK")),
    ("D66", "Democraten 66", 656292, 2, 7, 9, 5, ("PVV", "FvD", "JA21")),
    ("BBB", "BoerBurgerBeweging", 485551, 1, -4, -3, -5, ("GL-PvdA", "D66", "PvdD")),
    ("CDA", "Christen-Democratisch Appèl", 345822, 3, -3, 5, -2, ("FvD", "SP")),
    ("SP", "Socialistische Partij", 328225, -8, 4, -4, 2, ("VVD", "PVV", "FvD", "JA21")),
    ("DENK", "DENK", 246765, -4, 7, 2, 9, ("PVV", "FvD", "JA21")),
    ("PvdD", "Partij voor de Dieren", 235148, -3, 6, 4, 4, ("PVV", "FvD", "BBB")),
    ("FvD", "Forum voor Democratie", 232963, 4, -7, -8, -8, ("GL-PvdA", "D66", "Volt", "DENK", "CU")),
    ("SGP", "Staatkundig Gereformeerde Partij", 217270, 2, -9, -2, -4, ("D66", "GL-PvdA", "PvdD", "DENK")),
    ("CU", "ChristenUnie", 212532, -1, -5, 3, 0, ("FvD", "PVV")),
    ("Volt", "Volt Nederland", 178802, 1, 8, 10, 7, ("PVV", "FvD", "JA21")),
    ("JA21", "JA21", 71345, 5, -6, -4, -7, ("GL-PvdA", "D66", "DENK")),
]

EXPECTED_SEATS: dict[str, int] = {
    "PVV": 37,
    "GL-PvdA": 25,
    "VVD": 24,
    "NSC": 20,
    "D66": 9,
    "BBB": 7,
    "CDA": 5,
    "SP": 5,
    "DENK": 3,
    "PvdD": 3,
    "FvD": 3,
    "SGP": 3,
    "CU": 3,
    "Volt": 2,
    "JA21": 1,
}

# Stated coalition preferences during the campaign
PREFERRED_PARTNERS: dict[str, tuple[str, ...]] = {
    "PVV": ("VVD", "BBB", "NSC"),
    "GL-PvdA": ("D66", "Volt", "CU", "PvdD"),
    "VVD": ("D66", "CDA", "NSC", "CU"),
    "NSC": ("VVD", "CDA", "CU", "D66"),
    "D66": ("VVD", "GL-PvdA", "Volt", "CU"),
    "BBB": ("PVV", "VVD", "NSC", "CDA"),
    "CDA": ("VVD", "D66", "NSC", "CU"),
    "SP": ("GL-PvdA", "PvdD"),
    "FvD": ("PVV", "JA21"),
    "PvdD": ("GL-PvdA", "Volt", "SP"),
    "CU": ("VVD", "D66", "CDA", "NSC"),
    "Volt": ("D66", "GL-PvdA", "VVD"),
    "JA21": ("PVV", "VVD", "FvD"),
    "SGP": ("CU", "CDA"),
    "DENK": ("GL-PvdA", "SP"),
}


# Coalitions debated during the 2023-2024 formation
SCENARIOS: dict[str, tuple[str, ...]] = {
    "Current Government": ("PVV", "VVD", "NSC", "BBB"),
    "Purple Coalition": ("VVD", "GL-PvdA", "D66"),
    "Left Coalition": ("GL-PvdA", "D66", "Volt", "PvdD", "SP"),
    "Right Coalition": ("PVV", "VVD", "FvD", "JA21", "BBB"),
    "Center Coalition": ("VVD", "NSC", "D66", "CDA", "CU"),
    "Grand Coalition": ("PVV", "GL-PvdA", "VVD", "NSC"),
    "Minority Government": ("VVD", "D66", "NSC"),
}

def parties() -> list[Party]:
    """Parties in order of vote count, seats not yet allocated."""
    return [
        Party(
            id=pid,
            name=name,
            vote_count=votes,
            issue_positions={
                "immigration": float(immigration),
                "european": float(european),
                "economy": float(economic),
                "social": float(social),
            },
            economic_axis=float(economic),
            social_axis=float(social),
            explicit_exclusions=frozenset(excluded),
        )
        for pid, name, votes, economic, social, european, immigration, excluded in _PARTIES
    ]


def affinities() -> dict[frozenset[str], float]:
    """Partnership bonus: 1.0 when both sides prefer each other, 0.5 one way."""
    result: dict[frozenset[str], float] = {}
    for party, partners in PREFERRED_PARTNERS.items():
        for partner in partners:
            pair = frozenset((party, partner))
            mutual = party in PREFERRED_PARTNERS.get(partner, ())
            result[pair] = 1.0 if mutual else 0.5
    return result
