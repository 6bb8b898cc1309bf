"""Coalition search services."""

from formation.services.coalition.search import CoalitionSearch, SearchConfig, red_line_violations

__all__ = [
    "CoalitionSearch",
    "SearchConfig",
    "red_line_violations",
]
