#!/usr/bin/env python3
"""
Simulate a Dutch cabinet formation on the 2023 election results.

Usage:
    python simulate.py                 # One formation, seed 0
    python simulate.py 42              # Specific seed
    python simulate.py 42 --top 10     # Show more coalition candidates
    python simulate.py --seats         # Seat allocation only
    python simulate.py --scenarios     # Assess the debated coalitions
    python simulate.py 42 --verbose    # Debug logging
    python simulate.py 42 --trace      # Write a JSON negotiation trace to logs/
"""

import sys

from formation import FormationEngine
from formation.data import dutch_2023
from formation.models import FormationFailed, Government, PoliticalEvent
from formation.settings.logging import setup_logging

MAX_ATTEMPTS = 10


def print_seats(result):
    """Print the seat table."""
    print("\n" + "=" * 60)
    print(f"ELECTION RESULT ({result.total_seats} seats, majority {result.majority})")
    print("=" * 60)
    for row in result.to_frame().iter_rows(named=True):
        print(f"  {row['party']:<8} {row['votes']:>10,} {row['votes_pct']:>6.2f}%  {row['seats']:>3} seats")
    if result.excluded:
        print(f"  Below threshold: {', '.join(result.excluded)}")


def print_candidates(candidates, top: int):
    print("\n" + "=" * 60)
    print(f"TOP {min(top, len(candidates))} OF {len(candidates)} COALITIONS")
    print("=" * 60)
    for c in candidates[:top]:
        minimal = " (minimal)" if c.is_minimal_winning else ""
        print(f"  {c.label():<28} {c.total_seats:>3} seats  score {c.score:.3f}  compat {c.compatibility_score:.2f}{minimal}")


def print_scenarios(engine, result, parties):
    print("\n" + "=" * 60)
    print("DEBATED COALITIONS")
    print("=" * 60)
    for name, party_ids in dutch_2023.SCENARIOS.items():
        e = engine.search.evaluate(result, parties, party_ids)
        status = "viable" if e.viable else "not viable"
        print(f"  {name:<20} {e.label():<30} {e.total_seats:>3} seats  compat {e.compatibility_score:.2f}  {status}")
        if not e.has_majority:
            print(f"  {'':<20} short of a majority by {-e.surplus} seats")
        for v in e.violations:
            print(f"  {'':<20} {v.party} rules out {v.excluded}")


def print_government(government: Government):
    print("\n" + "=" * 60)
    print(f"CABINET {'-'.join(government.coalition_parties)}")
    print("=" * 60)
    print(f"  Prime minister: {government.prime_minister_party}")
    print(f"  Stability: {government.stability_rating:.1f}")
    for party, posts in government.ministry_allocation.items():
        print(f"  {party:<8} {', '.join(m.name for m in posts)}")
    for point in government.coalition_agreement:
        print(f"  Agreed on {point.issue} at {point.position:+.2f} (day {point.agreed_on_day})")


def simulate(seed: int, top: int) -> bool:
    """Run one formation cycle. Returns True if a government was formed."""
    engine = FormationEngine(
        issues=dutch_2023.ISSUES,
        affinities=dutch_2023.affinities(),
        total_seats=dutch_2023.TOTAL_SEATS,
        threshold=dutch_2023.THRESHOLD,
    )
    result, parties = engine.elect(dutch_2023.parties())
    print_seats(result)

    cycle = engine.cycle(result, parties)
    print_candidates(cycle.candidates, top)

    for attempt in range(MAX_ATTEMPTS):
        machine = cycle.next_attempt(seed + attempt)
        if isinstance(machine, FormationFailed):
            print(f"\n❌ {machine.reason}: {machine.detail}\n")
            return False

        outcome = machine.run()
        if isinstance(outcome, Government):
            print(f"\n✅ Agreement after {machine.state.days_elapsed} days")
            print_government(outcome)
            model = engine.govern(outcome)
            rating = model.update_stability(PoliticalEvent("first budget debate", -10))
            print(f"\n  After first budget debate: stability {rating:.1f}\n")
            return True

        print(f"\n⚠️  {machine.state.candidate.label()} failed: {outcome.reason} ({outcome.detail})")
        cycle.record_failure(outcome)

    print(f"\n❌ No cabinet after {MAX_ATTEMPTS} attempts\n")
    return False


def main():
    args = sys.argv[1:]
    verbose = "--verbose" in args or "-v" in args
    setup_logging(level="DEBUG" if verbose else "WARNING", trace_negotiations="--trace" in args)

    top = 5
    if "--top" in args:
        top = int(args[args.index("--top") + 1])
        args = args[: args.index("--top")] + args[args.index("--top") + 2 :]

    if "--seats" in args:
        engine = FormationEngine(total_seats=dutch_2023.TOTAL_SEATS, threshold=dutch_2023.THRESHOLD)
        result, _ = engine.elect(dutch_2023.parties())
        print_seats(result)
        mismatches = engine.allocator.validate_against(result, dutch_2023.EXPECTED_SEATS)
        print("\n✅ Matches official result\n" if not mismatches else f"\n❌ {len(mismatches)} mismatches\n")
        return

    if "--scenarios" in args:
        engine = FormationEngine(
            issues=dutch_2023.ISSUES,
            affinities=dutch_2023.affinities(),
            total_seats=dutch_2023.TOTAL_SEATS,
            threshold=dutch_2023.THRESHOLD,
        )
        result, parties = engine.elect(dutch_2023.parties())
        print_scenarios(engine, result, parties)
        print()
        return

    seeds = [a for a in args if a.isdigit()]
    seed = int(seeds[0]) if seeds else 0
    ok = simulate(seed, top)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
