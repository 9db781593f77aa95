"""Domain models - pure Python dataclasses representing inspection entities"""

import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional
from nspire_engine.domain.exceptions import InvalidArgumentError


class Severity(str, Enum):
    """NSPIRE defect severity level"""

    SEVERE = "severe"
    MODERATE = "moderate"
    LOW = "low"


class InspectionArea(str, Enum):
    """One of the three NSPIRE inspectable areas"""

    OUTSIDE = "outside"
    INSIDE = "inside"
    UNIT = "unit"


def _coerce(enum_cls, value, field_name: str):
    try:
        return enum_cls(value)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown {field_name}: {value!r}") from e


@dataclass(frozen=True)
class DefectForScoring:
    """Open (unrepaired) defect as consumed by the scoring engine"""

    id: str
    nspire_item_id: str
    category: str
    severity: Severity
    area: InspectionArea
    life_threatening: bool = False
    unit_id: Optional[str] = None  # Required when area == unit
    is_unscored: bool = False
    point_value: Optional[float] = None  # Overrides the category weight when set

    def __post_init__(self) -> None:
        object.__setattr__(self, "severity", _coerce(Severity, self.severity, "severity"))
        object.__setattr__(self, "area", _coerce(InspectionArea, self.area, "area"))
        if self.point_value is not None and not (math.isfinite(self.point_value) and self.point_value >= 0):
            raise InvalidArgumentError(f"Defect {self.id} has invalid point_value: {self.point_value!r}")


@dataclass(frozen=True)
class DefectCatalogItem:
    """NSPIRE Standards Book catalog entry"""

    id: str
    area: InspectionArea
    category: str
    item: str
    default_severity: Severity
    point_value: Optional[float]  # None for unscored H&S items
    is_life_threatening: bool = False
    is_unscored: bool = False
    proof_required: bool = False


@dataclass
class CategoryDeduction:
    """
    Accumulated point loss for one category.

    weight is the table weight for the category. Defects with an explicit
    point_value deduct that value instead, so total_points need not equal
    weight * unique_defects / sample_size.
    """

    category: str
    weight: float
    unique_defects: int
    total_points: float


@dataclass
class ScoreBreakdown:
    """Property-level NSPIRE score"""

    total_score: float
    deductions: List[CategoryDeduction]
    total_deductions: float
    defect_count: int  # Scored defects before dedup
    unique_defect_count: int  # Scored defects after dedup
    pass_fail: bool
    pass_threshold: float
    unscored_items: List[DefectForScoring] = field(default_factory=list)

    @property
    def deductions_by_category(self) -> Dict[str, float]:
        return {d.category: d.total_points for d in self.deductions}


@dataclass
class UnitPerformanceScore:
    """Accumulated unit-area point loss; higher is worse"""

    score: float
    is_auto_fail: bool
    threshold: float
    unique_defect_count: int


@dataclass
class InspectionVerdict:
    """Property score and UPS combined into one inspection outcome"""

    sample_size: int
    property_score: ScoreBreakdown
    unit_performance: UnitPerformanceScore

    @property
    def passed(self) -> bool:
        return self.property_score.pass_fail and not self.unit_performance.is_auto_fail


@dataclass
class RepairItem:
    """Open defect placed in the repair queue"""

    defect: DefectForScoring
    priority_rank: int  # 1 = highest impact, 12 = lowest
    deadline: date
