"""Repair prioritization: the NSPIRE priority pyramid and severity-driven deadlines"""

from datetime import date
from typing import Dict, Iterable, List
from nspire_engine.domain.models import DefectForScoring, InspectionArea, RepairItem, Severity
from nspire_engine.utils.date_utils import add_calendar_days

# Days allowed to repair, by severity
SEVERITY_DEADLINE_DAYS: Dict[Severity, int] = {
    Severity.SEVERE: 1,  # 24 hours
    Severity.MODERATE: 30,
    Severity.LOW: 60,
}

_AREA_OFFSET = {InspectionArea.UNIT: 0, InspectionArea.INSIDE: 1, InspectionArea.OUTSIDE: 2}


def get_priority_rank(area: InspectionArea, severity: Severity, life_threatening: bool) -> int:
    """
    Rank a defect on the priority pyramid (1 = highest impact, 12 = lowest).

    Tiers: life-threatening severe, severe, moderate, low. Within a tier,
    unit defects outrank inside, which outrank outside. The life-threatening
    flag only counts on severe defects.
    """
    severity = Severity(severity)
    offset = _AREA_OFFSET[InspectionArea(area)]

    if life_threatening and severity == Severity.SEVERE:
        tier = 0
    elif severity == Severity.SEVERE:
        tier = 1
    elif severity == Severity.MODERATE:
        tier = 2
    else:
        tier = 3

    return tier * 3 + offset + 1


def calculate_deadline(severity: Severity, from_date: date | None = None) -> date:
    """Repair due date: severe next day, moderate 30 days, low 60 days"""
    return add_calendar_days(from_date or date.today(), SEVERITY_DEADLINE_DAYS[Severity(severity)])


def build_repair_queue(defects: Iterable[DefectForScoring], from_date: date | None = None) -> List[RepairItem]:
    """
    Order open defects for repair, highest priority first.

    Unscored H&S items are included: they carry no points but still need a fix
    on the severity clock. Ties break on defect id for a stable order.
    """
    queue = [
        RepairItem(
            defect=d,
            priority_rank=get_priority_rank(d.area, d.severity, d.life_threatening),
            deadline=calculate_deadline(d.severity, from_date),
        )
        for d in defects
    ]
    return sorted(queue, key=lambda r: (r.priority_rank, r.defect.id))
