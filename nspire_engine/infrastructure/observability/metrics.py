"""Prometheus metrics for monitoring inspection outcomes and scoring failures"""

from prometheus_client import Counter, Histogram
from nspire_engine.domain.models import InspectionVerdict

# Scoring outcome metrics
score_computation_counter = Counter(
    "nspire_score_computations_total",
    "Total NSPIRE verdicts computed",
    ["outcome"],  # pass | fail
)

ups_auto_fail_counter = Counter(
    "nspire_ups_auto_fail_total",
    "Verdicts failed by the Unit Performance Score threshold",
)

property_score_histogram = Histogram(
    "nspire_property_score",
    "Distribution of property scores",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

# Failure metrics
scoring_error_counter = Counter(
    "nspire_scoring_errors_total",
    "Score computations that could not complete",
    ["reason"],  # invalid_input | source_unavailable
)

scoring_duration_histogram = Histogram(
    "nspire_scoring_duration_seconds",
    "Time to fetch a snapshot and score it",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)


def record_verdict(verdict: InspectionVerdict) -> None:
    """Record verdict metrics for monitoring pass rates and score distribution"""
    outcome = "pass" if verdict.passed else "fail"
    score_computation_counter.labels(outcome=outcome).inc()

    if verdict.unit_performance.is_auto_fail:
        ups_auto_fail_counter.inc()

    property_score_histogram.observe(verdict.property_score.total_score)
