"""Defect source collaborators and the row-to-domain mapping step"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol
from pydantic import ValidationError
from nspire_engine.domain.catalog import get_catalog_item
from nspire_engine.domain.exceptions import DefectSourceError, MalformedDefectRowError
from nspire_engine.domain.models import DefectForScoring
from nspire_engine.infrastructure.schemas import DefectRow


def _property_of(row: Mapping[str, Any]) -> Optional[str]:
    inspection = row.get("inspection")
    return inspection.get("property_id") if isinstance(inspection, Mapping) else None


class DefectSource(Protocol):
    """Supplies one consistent snapshot of a property's units and open defects"""

    def get_unit_count(self, property_id: str) -> int: ...

    def get_open_defect_rows(self, property_id: str) -> List[Mapping[str, Any]]: ...


class InMemoryDefectSource:
    """Dict-backed defect source for tests and local runs"""

    def __init__(
        self,
        unit_counts: Optional[Dict[str, int]] = None,
        defect_rows: Optional[List[Mapping[str, Any]]] = None,
    ):
        self.unit_counts = dict(unit_counts or {})
        self.defect_rows = list(defect_rows or [])

    def add_property(self, property_id: str, unit_count: int) -> None:
        self.unit_counts[property_id] = unit_count

    def add_defect_row(self, row: Mapping[str, Any]) -> None:
        self.defect_rows.append(row)

    def get_unit_count(self, property_id: str) -> int:
        if property_id not in self.unit_counts:
            raise DefectSourceError(f"Unknown property: {property_id}")
        return self.unit_counts[property_id]

    def get_open_defect_rows(self, property_id: str) -> List[Mapping[str, Any]]:
        """Open defects for the property; repaired rows are excluded"""
        if property_id not in self.unit_counts:
            raise DefectSourceError(f"Unknown property: {property_id}")
        return [
            row
            for row in self.defect_rows
            if row.get("repaired_at") is None
            and _property_of(row) == property_id
        ]


def map_defect_row(raw: Mapping[str, Any]) -> DefectForScoring:
    """
    Validate a raw row and build the engine's defect record.

    Field precedence: explicit row value, then catalog item, then default.
    A catalog miss is not an error; a row with no category from either place is.

    Raises:
        MalformedDefectRowError: On missing/invalid fields
    """
    try:
        row = DefectRow.model_validate(raw)
    except ValidationError as e:
        row_id = raw.get("id", "<unknown>") if isinstance(raw, Mapping) else "<unknown>"
        raise MalformedDefectRowError(f"Invalid defect row {row_id}: {e}") from e

    item = get_catalog_item(row.nspire_item_id)

    category = row.category or (item.category if item else None)
    severity = row.severity or (item.default_severity if item else None)
    if not category or severity is None:
        raise MalformedDefectRowError(
            f"Defect row {row.id} has no category/severity and {row.nspire_item_id} is not in the catalog"
        )

    if row.is_unscored is not None:
        is_unscored = row.is_unscored
    else:
        is_unscored = item.is_unscored if item else False

    return DefectForScoring(
        id=row.id,
        nspire_item_id=row.nspire_item_id,
        category=category,
        severity=severity,
        area=row.inspection.area,
        life_threatening=bool(row.life_threatening),
        unit_id=row.inspection.unit_id,
        is_unscored=is_unscored,
        point_value=row.point_value,
    )


def map_defect_rows(rows: Iterable[Mapping[str, Any]], property_id: Optional[str] = None) -> List[DefectForScoring]:
    """Map rows in order, skipping rows that belong to another property"""
    defects = []
    for raw in rows:
        if property_id is not None and _property_of(raw) not in (None, property_id):
            continue
        defects.append(map_defect_row(raw))
    return defects
