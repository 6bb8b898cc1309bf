"""Tests for the compatibility model."""

import pytest

from conftest import make_party
from formation.data import dutch_2023
from formation.formulas import pairs
from formation.services.compatibility import CompatibilityConfig, CompatibilityModel


class TestPairCompatibility:
    def test_identical_positions(self):
        model = CompatibilityModel()
        assert model.compatibility(make_party("A"), make_party("B")) == 1.0

    def test_same_party(self):
        a = make_party("A", economic=-10, social=10)
        assert CompatibilityModel().compatibility(a, a) == 1.0

    def test_opposite_corners(self):
        a = make_party("A", economic=-10, social=-10)
        b = make_party("B", economic=10, social=10)
        assert CompatibilityModel().compatibility(a, b) == pytest.approx(0.0)

    def test_exclusion_one_way(self):
        a = make_party("A", explicit_exclusions=frozenset({"B"}))
        b = make_party("B")
        model = CompatibilityModel()
        assert model.compatibility(a, b) == 0.0
        assert model.compatibility(b, a) == 0.0

    def test_salient_issue_penalised(self):
        a = make_party("A", issue_positions={"tax": 10.0})
        b = make_party("B", issue_positions={"tax": -10.0})
        model = CompatibilityModel(importance={"tax": 0.9})
        assert model.compatibility(a, b) == pytest.approx(0.7)

    def test_minor_issue_ignored(self):
        a = make_party("A", issue_positions={"tax": 10.0})
        b = make_party("B", issue_positions={"tax": -10.0})
        model = CompatibilityModel(importance={"tax": 0.4})
        assert model.compatibility(a, b) == 1.0

    def test_affinity_bonus(self):
        a = make_party("A", economic=-5)
        b = make_party("B", economic=5)
        plain = CompatibilityModel().compatibility(a, b)
        bonus = CompatibilityModel(affinities={frozenset({"A", "B"}): 1.0}).compatibility(a, b)
        assert bonus == pytest.approx(plain + 0.1)

    def test_clamped_to_unit_interval(self):
        model = CompatibilityModel(affinities={frozenset({"A", "B"}): 1.0})
        assert model.compatibility(make_party("A"), make_party("B")) == 1.0

    def test_custom_weights(self):
        a = make_party("A", issue_positions={"tax": 10.0})
        b = make_party("B", issue_positions={"tax": -10.0})
        model = CompatibilityModel(importance={"tax": 0.9}, config=CompatibilityConfig(issue_penalty_weight=0.5))
        assert model.compatibility(a, b) == pytest.approx(0.5)


class TestDutchCompatibility:
    @pytest.fixture
    def model(self):
        return CompatibilityModel.from_issues(dutch_2023.ISSUES, affinities=dutch_2023.affinities())

    def test_symmetric(self, model):
        for a, b in pairs(dutch_2023.parties()):
            assert model.compatibility(a, b) == model.compatibility(b, a)

    def test_in_range(self, model):
        for a, b in pairs(dutch_2023.parties()):
            assert 0.0 <= model.compatibility(a, b) <= 1.0

    def test_mutual_red_line(self, model):
        by_id = {p.id: p for p in dutch_2023.parties()}
        assert model.compatibility(by_id["PVV"], by_id["GL-PvdA"]) == 0.0
        assert model.compatibility(by_id["D66"], by_id["PVV"]) == 0.0

    def test_close_partners_score_higher(self, model):
        by_id = {p.id: p for p in dutch_2023.parties()}
        assert model.compatibility(by_id["CDA"], by_id["NSC"]) > model.compatibility(by_id["VVD"], by_id["SGP"])

    def test_clear_cache_keeps_values(self, model):
        parties = dutch_2023.parties()
        before = model.compatibility(parties[2], parties[3])
        model.clear_cache()
        assert model.compatibility(parties[2], parties[3]) == before


class TestCoalitionAggregates:
    def test_single_party(self):
        model = CompatibilityModel()
        assert model.min_pairwise([make_party("A")]) == 1.0
        assert model.mean_pairwise([make_party("A")]) == 1.0

    def test_weakest_link(self):
        model = CompatibilityModel()
        parties = [make_party("A"), make_party("B"), make_party("C", explicit_exclusions=frozenset({"A"}))]
        assert model.min_pairwise(parties) == 0.0
        assert model.mean_pairwise(parties) == pytest.approx(2 / 3)

    def test_issue_compatibility(self):
        parties = [make_party("A", issue_positions={"eu": 5.0}), make_party("B", issue_positions={"eu": -5.0})]
        assert CompatibilityModel().issue_compatibility(parties, "eu") == pytest.approx(0.5)

    def test_issue_compatibility_missing_position(self):
        parties = [make_party("A", issue_positions={"eu": 10.0}), make_party("B")]
        assert CompatibilityModel().issue_compatibility(parties, "eu") == pytest.approx(0.5)
