"""Property scoring service - fetches one defect snapshot and runs the NSPIRE engine"""

import time
import logging
from datetime import date
from typing import List

from nspire_engine.config import settings
from nspire_engine.domain.exceptions import DefectSourceError, InvalidArgumentError, ScoreComputationError
from nspire_engine.domain.models import InspectionVerdict, RepairItem
from nspire_engine.domain.repairs import build_repair_queue
from nspire_engine.domain.sampling import get_hud_sample_size
from nspire_engine.domain.scoring import evaluate_inspection
from nspire_engine.infrastructure.defect_source import DefectSource, map_defect_rows
from nspire_engine.infrastructure.observability.logging import log_score, setup_logging
from nspire_engine.infrastructure.observability.metrics import (
    record_verdict,
    scoring_duration_histogram,
    scoring_error_counter,
)


class PropertyScoringService:
    """Scores properties from a caller-supplied defect source"""

    def __init__(self, source: DefectSource):
        self.source = source

    @classmethod
    def configure(cls, source: DefectSource) -> "PropertyScoringService":
        """Build a service for a long-running process, with JSON logging at NSPIRE_LOG_LEVEL"""
        setup_logging(settings.log_level)
        return cls(source)

    def sample_size(self, property_id: str) -> int:
        """HUD sample size for the property's current unit count"""
        return get_hud_sample_size(self.source.get_unit_count(property_id))

    def score_property(self, property_id: str) -> InspectionVerdict:
        """
        Compute the NSPIRE verdict for a property.

        Flow:
        1. Fetch unit count and open defect rows from the source
        2. Validate rows and map them to engine records
        3. Score property and UPS against the resolved sample size
        4. Record metrics and log the outcome

        Raises:
            ScoreComputationError: Source unavailable or input rejected by the engine
        """
        start_time = time.time()

        try:
            unit_count = self.source.get_unit_count(property_id)
            defects = map_defect_rows(self.source.get_open_defect_rows(property_id), property_id)
            verdict = evaluate_inspection(defects, unit_count)

        except DefectSourceError as e:
            scoring_error_counter.labels(reason="source_unavailable").inc()
            logging.error(f"Defect source error: {e}", extra={"property_id": property_id})
            raise ScoreComputationError(property_id, "defect source unavailable") from e

        except InvalidArgumentError as e:
            scoring_error_counter.labels(reason="invalid_input").inc()
            logging.warning(f"Invalid scoring input: {e}", extra={"property_id": property_id})
            raise ScoreComputationError(property_id, str(e)) from e

        duration = time.time() - start_time
        scoring_duration_histogram.observe(duration)
        record_verdict(verdict)
        log_score(
            property_id,
            verdict.sample_size,
            verdict.property_score.total_score,
            verdict.unit_performance.score,
            verdict.unit_performance.is_auto_fail,
            verdict.passed,
            duration * 1000,
        )

        return verdict

    def repair_queue(self, property_id: str, from_date: date | None = None) -> List[RepairItem]:
        """Open defects for the property in priority order, unscored H&S items included"""
        try:
            defects = map_defect_rows(self.source.get_open_defect_rows(property_id), property_id)
        except (DefectSourceError, InvalidArgumentError) as e:
            raise ScoreComputationError(property_id, str(e)) from e
        return build_repair_queue(defects, from_date)
