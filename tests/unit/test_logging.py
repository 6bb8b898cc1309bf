"""Tests for logging setup."""

import json

import pytest
from loguru import logger

from conftest import make_party, make_result
from formation.services.coalition import CoalitionSearch
from formation.services.compatibility import CompatibilityModel
from formation.services.negotiation import NegotiationConfig, NegotiationMachine
from formation.settings.logging import setup_logging, stage_of


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr("formation.settings.logging.LOG_DIR", tmp_path)
    yield tmp_path
    logger.remove()


def run_negotiation():
    seats = {"A": 40, "B": 30, "C": 20}
    parties = [make_party(pid, s, issue_positions={"tax": s / 10}) for pid, s in seats.items()]
    model = CompatibilityModel()
    candidate = CoalitionSearch(model).find_viable_coalitions(make_result(seats), parties)[0]
    config = NegotiationConfig(disruption_probability=0.0, min_resolution=1.0, max_resolution=1.0)
    NegotiationMachine(candidate, parties, model, seed=1, config=config).run()


class TestStage:
    def test_service_modules(self):
        assert stage_of("formation.services.negotiation.machine") == "negotiation"
        assert stage_of("formation.services.coalition.search") == "coalition"

    def test_other_modules(self):
        assert stage_of("formation.container") == "engine"
        assert stage_of("__main__") == "engine"
        assert stage_of(None) == "engine"


class TestSetupLogging:
    def test_negotiation_trace(self, log_dir):
        setup_logging(level="WARNING", trace_negotiations=True)
        run_negotiation()
        logger.remove()

        traces = list(log_dir.glob("negotiations_*.jsonl"))
        assert len(traces) == 1
        records = [json.loads(line)["record"] for line in traces[0].read_text().splitlines()]
        assert records
        assert all(r["extra"]["stage"] == "negotiation" for r in records)
        assert any("Coalition agreement" in r["message"] for r in records)

    def test_no_files_by_default(self, log_dir):
        setup_logging(level="WARNING", to_file=False, trace_negotiations=False)
        run_negotiation()
        assert list(log_dir.iterdir()) == []

    def test_file_sink(self, log_dir):
        setup_logging(level="WARNING", to_file=True, trace_negotiations=False)
        run_negotiation()
        logger.remove()

        logs = list(log_dir.glob("formation_*.log"))
        assert len(logs) == 1
        text = logs[0].read_text()
        assert "negotiation" in text
        assert "coalition" in text
