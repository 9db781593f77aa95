"""Pytest fixtures for testing"""

import pytest
from typing import Callable
from nspire_engine.domain.models import DefectForScoring
from nspire_engine.infrastructure.defect_source import InMemoryDefectSource
from nspire_engine.services.scoring_service import PropertyScoringService


@pytest.fixture
def make_defect() -> Callable[..., DefectForScoring]:
    """Factory for engine defects with sensible unit-area defaults"""
    counter = {"n": 0}

    def _make(**overrides) -> DefectForScoring:
        counter["n"] += 1
        fields = {
            "id": f"d{counter['n']}",
            "nspire_item_id": "unit-017",
            "category": "Electrical",
            "severity": "severe",
            "area": "unit",
            "unit_id": "U1",
        }
        fields.update(overrides)
        return DefectForScoring(**fields)

    return _make


def defect_row(
    row_id: str,
    nspire_item_id: str,
    property_id: str = "P1",
    area: str = "unit",
    unit_id: str | None = "U1",
    **fields,
) -> dict:
    """Raw row in the shape of the defects/inspections join"""
    row = {
        "id": row_id,
        "nspire_item_id": nspire_item_id,
        "repaired_at": None,
        "inspection": {"property_id": property_id, "area": area, "unit_id": unit_id},
    }
    row.update(fields)
    return row


@pytest.fixture
def source() -> InMemoryDefectSource:
    """Ten-unit property P1 with one electrical defect found three times and one smoke detector"""
    return InMemoryDefectSource(
        unit_counts={"P1": 10, "P2": 0},
        defect_rows=[
            defect_row("r1", "unit-017", category="Electrical", severity="severe"),
            defect_row("r2", "unit-017", category="Electrical", severity="severe"),
            defect_row("r3", "unit-017", category="Electrical", severity="severe"),
            defect_row("r4", "unit-020", life_threatening=True),
            defect_row("r5", "out-024", area="outside", unit_id=None, repaired_at="2026-01-05"),
            defect_row("r6", "out-024", property_id="P9", area="outside", unit_id=None),
        ],
    )


@pytest.fixture
def service(source: InMemoryDefectSource) -> PropertyScoringService:
    return PropertyScoringService(source)


@pytest.fixture
def make_row() -> Callable[..., dict]:
    return defect_row
