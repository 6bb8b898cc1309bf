"""Pure math formulas - no engine state, easily testable."""
from collections.abc import Iterable, Mapping
from itertools import combinations

import numpy as np

POSITION_RANGE = 20.0
MAX_AXIS_DISTANCE = float(np.hypot(POSITION_RANGE, POSITION_RANGE))


def majority(total_seats: int) -> int:
    """Smallest seat count strictly above half the house."""
    return total_seats // 2 + 1


def dhondt(votes: Mapping[str, int], seats: int) -> dict[str, int]:
    """D'Hondt highest averages.

    Quotients are compared by integer cross multiplication, so there is no
    floating point involved. On equal quotients the party that comes first
    in ``votes`` wins, then the lexically smaller id.
    """
    position = {p: i for i, p in enumerate(votes)}
    order = sorted(votes, key=lambda p: (position[p], p))
    allocation = {p: 0 for p in votes}

    for _ in range(seats):
        best = None
        for p in order:
            if votes[p] <= 0:
                continue
            if best is None or votes[p] * (allocation[best] + 1) > votes[best] * (allocation[p] + 1):
                best = p
        if best is None:
            break
        allocation[best] += 1

    return allocation


def axis_distance(a: Iterable[float], b: Iterable[float]) -> float:
    """Euclidean distance between two ideological points."""
    return float(np.linalg.norm(np.asarray(list(a), dtype=float) - np.asarray(list(b), dtype=float)))


def issue_penalty(a: Mapping[str, float], b: Mapping[str, float], weights: Mapping[str, float]) -> float:
    """Weighted mean disagreement (0..1) over issues both sides hold a position on."""
    shared = sorted(i for i in weights if i in a and i in b)
    if not shared:
        return 0.0

    w = np.array([weights[i] for i in shared], dtype=float)
    if w.sum() <= 0:
        return 0.0
    gaps = np.abs(np.array([a[i] for i in shared]) - np.array([b[i] for i in shared])) / POSITION_RANGE
    return float((w * gaps).sum() / w.sum())


def spread_compatibility(positions: Iterable[float]) -> float:
    """1.0 for full agreement, 0.0 for positions at opposite ends of the scale."""
    values = list(positions)
    if len(values) < 2:
        return 1.0
    return 1.0 - (max(values) - min(values)) / POSITION_RANGE


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def size_component(party_count: int, max_size: int) -> float:
    """Decreases with party count: 1.0 for a single party."""
    if max_size <= 0:
        return 0.0
    return clamp(1.0 - (party_count - 1) / max_size)


def seat_margin_bonus(seats: int, total_seats: int) -> float:
    """1.0 for a bare majority, falling to 0.0 for the whole house."""
    quota = majority(total_seats)
    room = total_seats - quota
    if room <= 0:
        return 1.0
    return clamp(1.0 - (seats - quota) / room)


def coalition_score(compatibility: float, size: float, margin: float) -> float:
    """Weighted candidate score."""
    return compatibility * 0.6 + size * 0.25 + margin * 0.15


def formation_difficulty(party_count: int, max_size: int, min_compatibility: float) -> float:
    """0 (easy) .. 1 (hard), from cabinet size and ideological spread."""
    size = (party_count - 1) / max(max_size - 1, 1)
    return clamp(0.5 * size + 0.5 * (1.0 - min_compatibility))


def is_minimal_winning(seats: Mapping[str, int], quota: int) -> bool:
    """No member can leave without losing the majority."""
    total = sum(seats.values())
    return total >= quota and all(total - s < quota for s in seats.values())


def weighted_position(positions: Mapping[str, float], seats: Mapping[str, int]) -> float:
    """Seat-weighted mean position."""
    total = sum(seats[p] for p in positions)
    if not total:
        return float(np.mean(list(positions.values()))) if positions else 0.0
    return sum(positions[p] * seats[p] for p in positions) / total


def pairs(items: Iterable) -> list[tuple]:
    """All unordered pairs."""
    return list(combinations(items, 2))
