"""Unit tests for repair prioritization and deadlines"""

import pytest
from datetime import date, timedelta
from nspire_engine.domain.models import InspectionArea, Severity
from nspire_engine.domain.repairs import build_repair_queue, calculate_deadline, get_priority_rank
from nspire_engine.utils.date_utils import is_cooling_season, is_heating_season


@pytest.mark.parametrize(
    "area, severity, life_threatening, expected",
    [
        (InspectionArea.UNIT, Severity.SEVERE, True, 1),
        (InspectionArea.INSIDE, Severity.SEVERE, True, 2),
        (InspectionArea.OUTSIDE, Severity.SEVERE, True, 3),
        (InspectionArea.UNIT, Severity.SEVERE, False, 4),
        (InspectionArea.OUTSIDE, Severity.SEVERE, False, 6),
        (InspectionArea.INSIDE, Severity.MODERATE, False, 8),
        (InspectionArea.UNIT, Severity.LOW, False, 10),
        (InspectionArea.OUTSIDE, Severity.LOW, False, 12),
    ],
)
def test_priority_rank(area, severity, life_threatening, expected):
    assert get_priority_rank(area, severity, life_threatening) == expected


def test_life_threatening_only_counts_when_severe():
    assert get_priority_rank("unit", "moderate", True) == get_priority_rank("unit", "moderate", False)


def test_deadlines_by_severity():
    start = date(2026, 3, 1)

    assert calculate_deadline(Severity.SEVERE, start) == start + timedelta(days=1)
    assert calculate_deadline("moderate", start) == start + timedelta(days=30)
    assert calculate_deadline("low", start) == start + timedelta(days=60)


def test_repair_queue_orders_by_priority(make_defect):
    """Test queue puts life-threatening unit defects first and keeps unscored items"""
    start = date(2026, 3, 1)
    low_outside = make_defect(id="a", area="outside", unit_id=None, severity="low")
    smoke = make_defect(id="b", nspire_item_id="unit-020", is_unscored=True)
    lt_unit = make_defect(id="c", life_threatening=True)

    queue = build_repair_queue([low_outside, smoke, lt_unit], from_date=start)

    assert [r.defect.id for r in queue] == ["c", "b", "a"]
    assert [r.priority_rank for r in queue] == [1, 4, 12]
    assert queue[0].deadline == date(2026, 3, 2)
    assert queue[-1].deadline == date(2026, 4, 30)


def test_seasons():
    assert is_heating_season(date(2026, 1, 15)) is True
    assert is_heating_season(date(2026, 10, 1)) is True
    assert is_heating_season(date(2026, 7, 1)) is False
    assert is_cooling_season(date(2026, 4, 1)) is True
    assert is_cooling_season(date(2026, 9, 30)) is True
    assert is_cooling_season(date(2026, 12, 1)) is False
