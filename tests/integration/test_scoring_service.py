"""Integration tests for the property scoring service"""

import json
import logging
import pytest
from prometheus_client import REGISTRY
from nspire_engine.config import settings
from nspire_engine.domain.exceptions import DefectSourceError, MalformedDefectRowError, ScoreComputationError
from nspire_engine.infrastructure.observability.logging import LOG_FORMAT, CustomJsonFormatter
from nspire_engine.services.scoring_service import PropertyScoringService


def sample(name: str, labels: dict | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


def test_sample_size_for_property(service):
    assert service.sample_size("P1") == 5
    assert service.sample_size("P2") == 1


def test_score_property_ten_units(service):
    """Test duplicates fold, repaired and foreign rows are ignored, smoke detector is listed"""
    verdict = service.score_property("P1")

    assert verdict.sample_size == 5
    assert verdict.property_score.total_score == pytest.approx(99.5)
    assert verdict.property_score.defect_count == 3
    assert verdict.property_score.unique_defect_count == 1
    assert [d.id for d in verdict.property_score.unscored_items] == ["r4"]
    assert verdict.unit_performance.score == pytest.approx(0.5)
    assert verdict.passed is True


def test_score_property_without_units_or_defects(service):
    verdict = service.score_property("P2")

    assert verdict.property_score.total_score == 100.0
    assert verdict.passed is True


def test_score_property_records_metrics(service):
    """Test verdict metrics are exported"""
    before = sample("nspire_score_computations_total", {"outcome": "pass"})
    count_before = sample("nspire_property_score_count")

    service.score_property("P1")

    assert sample("nspire_score_computations_total", {"outcome": "pass"}) == before + 1
    assert sample("nspire_property_score_count") == count_before + 1


def test_score_property_auto_fail_metric(service, source, make_row):
    """Test UPS auto-fail is counted even when the property score passes"""
    source.add_property("P3", 3)
    for i in range(12):
        source.add_defect_row(make_row(f"x{i}", f"unit-{i:03d}", property_id="P3", category="Electrical", severity="severe"))
    before = sample("nspire_ups_auto_fail_total")

    verdict = service.score_property("P3")

    assert verdict.property_score.pass_fail is True
    assert verdict.passed is False
    assert sample("nspire_ups_auto_fail_total") == before + 1


def test_score_property_logs_outcome(service, caplog):
    """Test structured log record for a computed verdict"""
    caplog.set_level(logging.INFO)

    service.score_property("P1")

    records = [r for r in caplog.records if r.getMessage() == "Score computed"]
    assert len(records) == 1
    assert records[0].property_id == "P1"
    assert records[0].sample_size == 5
    assert records[0].inspection_outcome == "pass"


def test_unknown_property_surfaces_as_score_error(service):
    """Test source failures surface as 'unable to compute score'"""
    before = sample("nspire_scoring_errors_total", {"reason": "source_unavailable"})

    with pytest.raises(ScoreComputationError) as exc_info:
        service.score_property("missing")

    assert "Unable to compute score" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, DefectSourceError)
    assert sample("nspire_scoring_errors_total", {"reason": "source_unavailable"}) == before + 1


def test_malformed_row_surfaces_as_score_error(service, source, make_row, caplog):
    """Test rows rejected at the boundary fail the whole computation"""
    source.add_defect_row(make_row("bad", "unit-017", unit_id=None))
    before = sample("nspire_scoring_errors_total", {"reason": "invalid_input"})

    with pytest.raises(ScoreComputationError) as exc_info:
        service.score_property("P1")

    assert isinstance(exc_info.value.__cause__, MalformedDefectRowError)
    assert exc_info.value.property_id == "P1"
    assert sample("nspire_scoring_errors_total", {"reason": "invalid_input"}) == before + 1
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_repair_queue(service):
    """Test life-threatening smoke detector outranks the scored electrical defects"""
    queue = service.repair_queue("P1")

    assert [r.defect.id for r in queue] == ["r4", "r1", "r2", "r3"]
    assert queue[0].priority_rank == 1


def test_json_formatter_adds_service_metadata():
    formatter = CustomJsonFormatter(LOG_FORMAT)
    record = logging.LogRecord("nspire", logging.INFO, __file__, 1, "hello", None, None)

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["service"] == settings.service_name
    assert "timestamp" in payload


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_installs_json_logging(source, capsys, monkeypatch, restore_root_logger):
    """Test the configured service logs each score as one JSON line on stdout"""
    monkeypatch.setattr(settings, "log_level", "debug")

    service = PropertyScoringService.configure(source)
    service.score_property("P1")

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, CustomJsonFormatter)

    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    scored = [line for line in lines if line["message"] == "Score computed"]
    assert len(scored) == 1
    assert scored[0]["service"] == settings.service_name
    assert scored[0]["level"] == "INFO"
    assert scored[0]["property_id"] == "P1"
    assert scored[0]["inspection_outcome"] == "pass"
