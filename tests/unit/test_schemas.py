"""Tests for pydantic schemas."""

import pytest
from pydantic import ValidationError

from conftest import make_party, make_result
from formation.data import dutch_2023
from formation.models import Government, Ministry, NegotiationPhase
from formation.schemas import (
    ElectionResultSchema,
    GovernmentSchema,
    IssueSchema,
    NegotiationSnapshotSchema,
    PartySchema,
)
from formation.services.coalition import CoalitionSearch
from formation.services.compatibility import CompatibilityModel
from formation.services.negotiation import NegotiationConfig, NegotiationMachine


class TestPartySchema:
    def test_camel_case_input(self):
        schema = PartySchema.model_validate(
            {
                "id": "VVD",
                "name": "Volkspartij voor Vrijheid en Democratie",
                "voteCount": 1589519,
                "issuePositions": {"european": 6},
                "economicAxis": 6,
                "socialAxis": 3,
                "explicitExclusions": ["SP", "FvD"],
            }
        )
        party = schema.to_entity()
        assert party.vote_count == 1589519
        assert party.explicit_exclusions == frozenset({"SP", "FvD"})
        assert party.position("european") == 6.0

    def test_negative_votes_rejected(self):
        with pytest.raises(ValidationError):
            PartySchema(id="X", name="X", voteCount=-1)

    def test_axis_out_of_range(self):
        with pytest.raises(ValidationError):
            PartySchema(id="X", name="X", voteCount=1, economicAxis=11)

    def test_round_trip(self):
        for party in dutch_2023.parties():
            assert PartySchema.from_entity(party).to_entity() == party

    def test_dump_by_alias(self):
        dumped = PartySchema.from_entity(make_party("A", votes=10)).model_dump(by_alias=True)
        assert dumped["voteCount"] == 10

    def test_issue_round_trip(self):
        for issue in dutch_2023.ISSUES:
            assert IssueSchema.from_entity(issue).to_entity() == issue

    def test_issue_importance_range(self):
        with pytest.raises(ValidationError):
            IssueSchema(id="x", importance=1.5)


class TestResultSchemas:
    def test_election_result_round_trip(self):
        result = make_result({"A": 40, "B": 30})
        assert ElectionResultSchema.from_entity(result).to_entity() == result

    def test_government_round_trip(self):
        government = Government(
            coalition_parties=("A", "B"),
            prime_minister_party="A",
            ministry_allocation={"A": [Ministry("General Affairs", 0)], "B": [Ministry("Finance", 1)]},
            stability_rating=72.5,
        )
        schema = GovernmentSchema.from_entity(government)
        assert schema.model_dump(by_alias=True)["primeMinisterParty"] == "A"
        assert schema.to_entity() == government

    def test_snapshot_round_trip(self):
        seats = {"A": 40, "B": 30, "C": 20}
        parties = [make_party(pid, s, issue_positions={"tax": float(s) / 10}) for pid, s in seats.items()]
        model = CompatibilityModel()
        candidate = CoalitionSearch(model).find_viable_coalitions(make_result(seats), parties)[0]
        stalled = NegotiationConfig(disruption_probability=0.0, min_resolution=0.0, max_resolution=0.0)
        machine = NegotiationMachine(candidate, parties, model, seed=3, config=stalled)
        for _ in range(4):
            machine.tick()

        snapshot = machine.snapshot()
        schema = NegotiationSnapshotSchema.from_entity(snapshot)
        assert schema.phase == NegotiationPhase.INFORMATEUR
        assert schema.to_entity() == snapshot

    def test_failed_snapshot_round_trip(self):
        seats = {"A": 60, "B": 40}
        parties = [make_party(pid, s) for pid, s in seats.items()]
        model = CompatibilityModel()
        candidate = CoalitionSearch(model).find_viable_coalitions(make_result(seats), parties)[0]
        machine = NegotiationMachine(candidate, parties, model, seed=0)
        machine.abandon()

        snapshot = machine.snapshot()
        assert NegotiationSnapshotSchema.from_entity(snapshot).to_entity() == snapshot
