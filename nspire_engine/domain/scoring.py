"""NSPIRE scoring engine - HUD point-deduction logic for inspection verdicts"""

from typing import Dict, Iterable, List, Optional, Tuple
from nspire_engine.config import settings
from nspire_engine.domain.models import (
    CategoryDeduction,
    DefectForScoring,
    InspectionArea,
    InspectionVerdict,
    ScoreBreakdown,
    UnitPerformanceScore,
)
from nspire_engine.domain.exceptions import InvalidArgumentError
from nspire_engine.domain.sampling import get_hud_sample_size
from nspire_engine.domain.weights import get_category_weight, get_severity_factor

MAX_SCORE = 100.0


def _validate(defects: List[DefectForScoring], sample_size: int) -> None:
    if isinstance(sample_size, bool) or not isinstance(sample_size, int) or sample_size <= 0:
        raise InvalidArgumentError(f"sample_size must be a positive integer, got {sample_size!r}")

    for defect in defects:
        if defect.area == InspectionArea.UNIT and not defect.unit_id:
            raise InvalidArgumentError(f"Unit defect {defect.id} has no unit_id")


def dedup_key(defect: DefectForScoring) -> Tuple[str, str, Optional[str]]:
    """Location-scoped identity of a defect type: unit defects per unit, others per property"""
    unit_id = defect.unit_id if defect.area == InspectionArea.UNIT else None
    return (defect.nspire_item_id, defect.area.value, unit_id)


def deduplicate_defects(defects: Iterable[DefectForScoring]) -> List[DefectForScoring]:
    """
    Fold repeated findings of the same defect type in the same location.

    Ten cracked tiles in one unit count once; the first occurrence is kept.
    """
    seen = set()
    result = []

    for defect in defects:
        key = dedup_key(defect)
        if key not in seen:
            seen.add(key)
            result.append(defect)

    return result


def defect_point_loss(defect: DefectForScoring, severity_factors: Optional[Dict[str, float]] = None) -> float:
    """Raw (un-normalized) point loss: explicit override, else category weight scaled by severity"""
    if defect.point_value is not None:
        return float(defect.point_value)
    return get_category_weight(defect.category) * get_severity_factor(defect.severity, severity_factors)


def calculate_property_score(
    defects: List[DefectForScoring],
    sample_size: int,
    *,
    pass_threshold: Optional[float] = None,
    severity_factors: Optional[Dict[str, float]] = None,
) -> ScoreBreakdown:
    """
    Calculate the NSPIRE property score.

    Rules:
    - Start at 100
    - Unscored H&S items (smoke/CO detectors) never deduct points
    - Each unique defect type deducts its point loss / sample size
    - No caps on any area; the score floors at 0

    Raises:
        InvalidArgumentError: sample_size <= 0, or a unit defect without unit_id
    """
    _validate(defects, sample_size)
    threshold = pass_threshold if pass_threshold is not None else settings.pass_threshold

    scored = [d for d in defects if not d.is_unscored]
    unscored = [d for d in defects if d.is_unscored]
    deduped = deduplicate_defects(scored)

    # Group by category in first-seen order
    groups: Dict[str, List[DefectForScoring]] = {}
    for defect in deduped:
        groups.setdefault(defect.category, []).append(defect)

    deductions = []
    total_deductions = 0.0

    for category, category_defects in groups.items():
        total_points = sum(defect_point_loss(d, severity_factors) / sample_size for d in category_defects)
        deductions.append(
            CategoryDeduction(
                category=category,
                weight=get_category_weight(category),
                unique_defects=len(category_defects),
                total_points=total_points,
            )
        )
        total_deductions += total_points

    total_score = max(0.0, MAX_SCORE - total_deductions)

    return ScoreBreakdown(
        total_score=total_score,
        deductions=deductions,
        total_deductions=total_deductions,
        defect_count=len(scored),
        unique_defect_count=len(deduped),
        pass_fail=total_score >= threshold,  # HUD: a score below the threshold fails, so exactly 60 passes
        pass_threshold=threshold,
        unscored_items=unscored,
    )


def calculate_unit_performance_score(
    defects: List[DefectForScoring],
    sample_size: int,
    *,
    auto_fail_threshold: Optional[float] = None,
    severity_factors: Optional[Dict[str, float]] = None,
) -> UnitPerformanceScore:
    """
    Calculate the Unit Performance Score (UPS).

    Sum of unique unit-area point loss across all inspected units. Outside and
    inside defects are ignored. A UPS at or above the threshold (30) fails the
    whole inspection regardless of the property score.
    """
    _validate(defects, sample_size)
    threshold = auto_fail_threshold if auto_fail_threshold is not None else settings.ups_auto_fail_threshold

    unit_defects = [d for d in defects if d.area == InspectionArea.UNIT and not d.is_unscored]
    deduped = deduplicate_defects(unit_defects)

    score = 0.0
    for defect in deduped:
        score += defect_point_loss(defect, severity_factors) / sample_size

    return UnitPerformanceScore(
        score=score,
        is_auto_fail=score >= threshold,
        threshold=threshold,
        unique_defect_count=len(deduped),
    )


def evaluate_inspection(defects: List[DefectForScoring], unit_count: int) -> InspectionVerdict:
    """
    Main entry point: resolve the sample size and score one snapshot of open defects.

    Returns the property breakdown and UPS; the inspection passes only when the
    property score passes and the UPS is not an auto-fail.
    """
    sample_size = get_hud_sample_size(unit_count)
    property_score = calculate_property_score(defects, sample_size)
    unit_performance = calculate_unit_performance_score(defects, sample_size)

    return InspectionVerdict(
        sample_size=sample_size,
        property_score=property_score,
        unit_performance=unit_performance,
    )
