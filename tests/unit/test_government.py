"""Tests for cabinet construction and stability."""

import pytest

from conftest import make_party
from formation.errors import InvalidStateError
from formation.models import DUTCH_MINISTRIES, Government, NegotiationState, PoliticalEvent
from formation.models.coalition import CoalitionCandidate
from formation.services.government import (
    GovernmentConfig,
    GovernmentModel,
    allocate_ministries,
    form_government,
    prime_minister_party,
)
from formation.services.government.model import initial_stability


def government(rating: float = 50.0, parties=("A", "B")) -> Government:
    return Government(
        coalition_parties=parties,
        prime_minister_party=parties[0],
        ministry_allocation={},
        stability_rating=rating,
    )


class TestCabinet:
    def test_prime_minister_is_largest(self):
        parties = [make_party("B", 30), make_party("A", 40)]
        assert prime_minister_party(parties).id == "A"

    def test_prime_minister_tie_keeps_order(self):
        parties = [make_party("B", 30), make_party("A", 30)]
        assert prime_minister_party(parties).id == "B"

    def test_all_ministries_allocated(self):
        allocation = allocate_ministries([make_party("A", 50), make_party("B", 30), make_party("C", 20)])
        assert sum(len(posts) for posts in allocation.values()) == len(DUTCH_MINISTRIES)

    def test_largest_takes_premiership(self):
        allocation = allocate_ministries([make_party("B", 30), make_party("A", 50)])
        assert allocation["A"][0].name == "General Affairs"

    def test_posts_follow_seat_share(self):
        allocation = allocate_ministries([make_party("A", 50), make_party("B", 30), make_party("C", 20)])
        assert len(allocation["A"]) > len(allocation["B"]) > len(allocation["C"])

    def test_initial_stability(self):
        assert initial_stability(1.0, 1.0, 0.0) == pytest.approx(100.0)
        assert initial_stability(0.0, 0.0, 1.0) == 0.0

    def test_form_requires_success(self):
        candidate = CoalitionCandidate(
            party_ids=("A",),
            total_seats=60,
            compatibility_score=1.0,
            formation_difficulty=0.0,
            score=1.0,
            min_compatibility=1.0,
            surplus=9,
            is_minimal_winning=True,
        )
        state = NegotiationState(candidate=candidate, parties=(make_party("A", 60),), rng_seed=0)
        with pytest.raises(InvalidStateError):
            form_government(state)


class TestStability:
    def test_positive_event(self):
        model = GovernmentModel(government())
        assert model.update_stability(PoliticalEvent("budget passed", 10)) == pytest.approx(60.0)

    def test_negative_event_amplified_by_size(self):
        model = GovernmentModel(government(parties=("A", "B", "C")))
        assert model.update_stability(PoliticalEvent("scandal", -10)) == pytest.approx(39.0)

    def test_clamped(self):
        model = GovernmentModel(government(95.0))
        assert model.update_stability(PoliticalEvent("rally", 20)) == 100.0

    def test_single_crisis_while_below(self):
        model = GovernmentModel(government(parties=("A",)))
        raised = []
        model.subscribe(raised.append)

        model.update_stability(PoliticalEvent("scandal", -35))
        model.update_stability(PoliticalEvent("leak", -2))
        model.update_stability(PoliticalEvent("poll", -1))
        assert len(raised) == 1
        assert model.government.in_crisis
        assert raised[0].rating == pytest.approx(15.0)

    def test_new_crisis_after_recovery(self):
        model = GovernmentModel(government(parties=("A",)))
        model.update_stability(PoliticalEvent("scandal", -35))
        model.update_stability(PoliticalEvent("recovery", 20))
        assert not model.government.in_crisis
        model.update_stability(PoliticalEvent("second scandal", -20))
        assert len(model.government.crises) == 2

    def test_collapse_on_low_rating(self):
        model = GovernmentModel(government(parties=("A",)))
        model.update_stability(PoliticalEvent("resignation", -46))
        assert model.government.collapsed
        with pytest.raises(InvalidStateError):
            model.update_stability(PoliticalEvent("anything", 1))

    def test_custom_thresholds(self):
        model = GovernmentModel(government(parties=("A",)), GovernmentConfig(confidence_threshold=45))
        model.update_stability(PoliticalEvent("scandal", -10))
        assert model.government.in_crisis


class TestConfidenceVote:
    def test_vote_lost(self):
        model = GovernmentModel(government())
        assert model.resolve_confidence_vote(False).collapsed

    def test_vote_survived(self):
        model = GovernmentModel(government())
        assert not model.resolve_confidence_vote(True).collapsed

    def test_vote_after_collapse(self):
        model = GovernmentModel(government())
        model.resolve_confidence_vote(False)
        with pytest.raises(InvalidStateError):
            model.resolve_confidence_vote(True)
