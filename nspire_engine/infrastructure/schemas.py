"""Pydantic schemas for validating raw defect rows before they reach the engine"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional
from nspire_engine.domain.models import InspectionArea, Severity


class InspectionRef(BaseModel):
    """Inspection joined onto a defect row"""

    model_config = ConfigDict(extra="ignore")

    property_id: str = Field(..., min_length=1)
    area: InspectionArea
    unit_id: Optional[str] = None


class DefectRow(BaseModel):
    """One open defect as returned by the defects/inspections join"""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    nspire_item_id: str = Field(..., min_length=1)
    category: Optional[str] = None  # Falls back to the catalog
    severity: Optional[Severity] = None  # Falls back to the catalog
    life_threatening: Optional[bool] = None
    point_value: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    is_unscored: Optional[bool] = None  # Falls back to the catalog
    inspection: InspectionRef

    @model_validator(mode="after")
    def unit_defects_need_unit(self) -> "DefectRow":
        if self.inspection.area == InspectionArea.UNIT and not self.inspection.unit_id:
            raise ValueError("unit inspection defect is missing unit_id")
        return self
