"""
NSPIRE defect catalog (Standards Book).

Static reference data: each item carries its area, category, default severity,
point value for its area, and whether it is a life-threatening or an unscored
health-and-safety item. Smoke and CO detectors are unscored: they generate a
24-hour work order but never deduct points.
"""

from functools import lru_cache
from typing import Dict, List, Optional
from nspire_engine.domain.models import DefectCatalogItem, InspectionArea, Severity

OUTSIDE, INSIDE, UNIT = InspectionArea.OUTSIDE, InspectionArea.INSIDE, InspectionArea.UNIT
SEVERE, MODERATE, LOW = Severity.SEVERE, Severity.MODERATE, Severity.LOW

# (id, area, category, item, default_severity, point_value, life_threatening, unscored, proof_required)
_CATALOG_ROWS = [
    ("out-001", OUTSIDE, "Electrical", "GFCI/AFCI Protection", SEVERE, 2.5, False, False, True),
    ("out-002", OUTSIDE, "Electrical", "Electrical Enclosures", SEVERE, 2.5, False, False, True),
    ("out-003", OUTSIDE, "Electrical", "Outlets/Switches", MODERATE, 2.5, False, False, False),
    ("out-004", OUTSIDE, "Electrical", "Unshielded Wires/Conductors", SEVERE, 2.5, True, False, True),
    ("out-005", OUTSIDE, "Electrical", "Lighting", LOW, 1.0, False, False, False),
    ("out-006", OUTSIDE, "Safety", "Tripping Hazards", MODERATE, 2.5, False, False, False),
    ("out-007", OUTSIDE, "Safety", "Guardrails", SEVERE, 2.5, False, False, True),
    ("out-008", OUTSIDE, "Safety", "Handrails", SEVERE, 2.5, False, False, True),
    ("out-009", OUTSIDE, "Safety", "Sharp Edges", MODERATE, 2.5, False, False, False),
    ("out-010", OUTSIDE, "Safety", "Infestation", MODERATE, 2.5, False, False, False),
    ("out-011", OUTSIDE, "Fire Safety", "Fire Extinguishers", SEVERE, 3.0, False, False, True),
    ("out-012", OUTSIDE, "Fire Safety", "Flammable/Combustible Items", SEVERE, 3.0, True, False, True),
    ("out-013", OUTSIDE, "Fire Safety", "Sprinkler Assembly", SEVERE, 3.0, False, False, True),
    ("out-014", OUTSIDE, "HVAC", "Dryer Vents", MODERATE, 2.0, False, False, False),
    ("out-015", OUTSIDE, "HVAC", "Chimney/Fireplace", MODERATE, 2.0, False, False, False),
    ("out-016", OUTSIDE, "Signage", "Address and Required Signage", LOW, 1.0, False, False, False),
    ("out-017", OUTSIDE, "Site", "Fencing/Security Fencing", MODERATE, 1.5, False, False, False),
    ("out-018", OUTSIDE, "Site", "Drainage/Site Drainage", MODERATE, 1.5, False, False, False),
    ("out-019", OUTSIDE, "Site", "Parking Lot/Roads", MODERATE, 1.5, False, False, False),
    ("out-020", OUTSIDE, "Site", "Walks and Ramps", MODERATE, 1.5, False, False, False),
    ("out-021", OUTSIDE, "Site", "Steps/Stairs", MODERATE, 1.5, False, False, False),
    ("out-022", OUTSIDE, "Site", "Retaining Walls", MODERATE, 1.5, False, False, False),
    ("out-023", OUTSIDE, "Site", "Erosion", MODERATE, 1.5, False, False, False),
    ("out-024", OUTSIDE, "Site", "Litter", LOW, 1.0, False, False, False),
    ("out-025", OUTSIDE, "Site", "Garage Doors", MODERATE, 1.5, False, False, False),
    ("out-026", OUTSIDE, "Plumbing", "Leaks and Wastewater", SEVERE, 2.0, False, False, True),
    ("out-027", OUTSIDE, "Plumbing", "Guttering/Downspouts", LOW, 1.5, False, False, False),
    ("out-028", OUTSIDE, "Structure", "Wall Covering/Siding", MODERATE, 2.5, False, False, False),
    ("out-029", OUTSIDE, "Structure", "Roofing Material", MODERATE, 2.5, False, False, False),
    ("out-030", OUTSIDE, "Structure", "Soffit/Fascia", LOW, 1.5, False, False, False),
    ("out-031", OUTSIDE, "Structure", "Foundation/Structural Defects", SEVERE, 2.5, False, False, True),
    ("out-032", OUTSIDE, "Structure", "General Hardware/Surface Damage", LOW, 1.0, False, False, False),
    ("out-033", OUTSIDE, "Egress", "Obstructed Exit/Fire Escape", SEVERE, 3.0, True, False, True),
    ("out-034", OUTSIDE, "Lead Paint", "Lead-Based Paint (Pre-1978)", SEVERE, 3.0, False, False, True),
    ("out-035", OUTSIDE, "Health", "Mold-Like Substance", MODERATE, 2.0, False, False, False),
    ("in-001", INSIDE, "Egress", "Emergency Exits", SEVERE, 3.0, True, False, True),
    ("in-002", INSIDE, "Egress", "Exit Signs", SEVERE, 3.0, False, False, True),
    ("in-003", INSIDE, "Egress", "Fire Escapes", SEVERE, 3.0, True, False, True),
    ("in-004", INSIDE, "Electrical", "Electrical Enclosures", SEVERE, 2.5, False, False, True),
    ("in-005", INSIDE, "Electrical", "Outlets/Switches", MODERATE, 2.5, False, False, False),
    ("in-006", INSIDE, "Electrical", "GFCI Protection", SEVERE, 2.5, False, False, True),
    ("in-007", INSIDE, "Electrical", "Unshielded Wires/Conductors", SEVERE, 2.5, True, False, True),
    ("in-008", INSIDE, "Electrical", "Light Fixtures", LOW, 1.5, False, False, False),
    ("in-009", INSIDE, "Structure", "Foundation/Basement Infiltration", MODERATE, 2.5, False, False, False),
    ("in-010", INSIDE, "Structure", "Structural Defects", SEVERE, 2.5, True, False, True),
    ("in-011", INSIDE, "Structure", "Ceilings", LOW, 1.5, False, False, False),
    ("in-012", INSIDE, "Structure", "Walls/Wall Covering", MODERATE, 2.0, False, False, False),
    ("in-013", INSIDE, "Structure", "Floors", LOW, 1.5, False, False, False),
    ("in-014", INSIDE, "Lead Paint", "Lead-Based Paint (Pre-1978)", SEVERE, 3.0, False, False, True),
    ("in-015", INSIDE, "Fire Safety", "Smoke Detectors (Common Area)", SEVERE, None, False, True, True),
    ("in-016", INSIDE, "Fire Safety", "Carbon Monoxide Detector", SEVERE, None, False, True, True),
    ("in-017", INSIDE, "Fire Safety", "Fire Alarm System", SEVERE, 3.0, True, False, True),
    ("in-018", INSIDE, "Fire Safety", "Fire Extinguishers (Common)", SEVERE, 3.0, False, False, True),
    ("in-019", INSIDE, "Fire Safety", "Flammable/Combustible Items", SEVERE, 3.0, True, False, True),
    ("in-020", INSIDE, "Fire Safety", "Sprinkler Assembly (Common)", SEVERE, 3.0, False, False, True),
    ("in-021", INSIDE, "Fire Safety", "Auxiliary Lights/Emergency Lighting", SEVERE, 3.0, False, False, True),
    ("in-022", INSIDE, "Safety", "Stairway Condition", MODERATE, 2.0, False, False, False),
    ("in-023", INSIDE, "Safety", "Guardrails (Common)", SEVERE, 2.5, False, False, True),
    ("in-024", INSIDE, "Safety", "Handrails (Common)", SEVERE, 2.5, False, False, True),
    ("in-025", INSIDE, "Safety", "Sharp Edges (Common)", MODERATE, 2.0, False, False, False),
    ("in-026", INSIDE, "Safety", "Trip Hazards (Common)", MODERATE, 2.0, False, False, False),
    ("in-027", INSIDE, "Safety", "Elevator", SEVERE, 2.5, False, False, True),
    ("in-028", INSIDE, "Safety", "Infestation (Common)", MODERATE, 2.5, False, False, False),
    ("in-029", INSIDE, "HVAC", "Heating System (Common)", SEVERE, 2.5, False, False, True),
    ("in-030", INSIDE, "HVAC", "Cooling System (Common)", MODERATE, 2.0, False, False, False),
    ("in-031", INSIDE, "HVAC", "Dryer Vent (Common)", SEVERE, 2.5, False, False, True),
    ("in-032", INSIDE, "HVAC", "Water Heater (Common)", MODERATE, 2.0, False, False, False),
    ("in-033", INSIDE, "Plumbing", "Leaks and Wastewater (Common)", SEVERE, 2.0, False, False, True),
    ("in-034", INSIDE, "Plumbing", "Floor Drain (Common)", MODERATE, 1.5, False, False, False),
    ("in-035", INSIDE, "Doors", "General Doors (Common)", LOW, 1.5, False, False, False),
    ("in-036", INSIDE, "Doors", "Fire-Rated Doors", SEVERE, 3.0, True, False, True),
    ("in-037", INSIDE, "Health", "Mold-Like Substance (Common)", MODERATE, 2.5, False, False, False),
    ("in-038", INSIDE, "Health", "Litter/Debris (Common)", LOW, 1.0, False, False, False),
    ("in-039", INSIDE, "Windows", "Windows (Common)", LOW, 1.5, False, False, False),
    ("in-040", INSIDE, "Safety", "Call-for-Aid (Common)", SEVERE, 2.5, False, False, True),
    ("in-041", INSIDE, "Safety", "Trash Chute", MODERATE, 2.0, False, False, False),
    ("unit-001", UNIT, "Bathroom", "Bath Ventilation", MODERATE, 2.0, False, False, False),
    ("unit-002", UNIT, "Bathroom", "Tub/Shower Hardware", LOW, 1.5, False, False, False),
    ("unit-003", UNIT, "Bathroom", "Toilet", MODERATE, 2.0, False, False, False),
    ("unit-004", UNIT, "Bathroom", "Sink", LOW, 1.5, False, False, False),
    ("unit-005", UNIT, "Bathroom", "Grab Bars", MODERATE, 2.0, False, False, False),
    ("unit-006", UNIT, "Bathroom", "Cabinets/Countertops", LOW, 1.0, False, False, False),
    ("unit-007", UNIT, "Kitchen", "Range/Oven", MODERATE, 2.0, False, False, False),
    ("unit-008", UNIT, "Kitchen", "Refrigerator", MODERATE, 2.0, False, False, False),
    ("unit-009", UNIT, "Kitchen", "Kitchen Ventilation", LOW, 1.5, False, False, False),
    ("unit-010", UNIT, "Kitchen", "Kitchen Sink", LOW, 1.5, False, False, False),
    ("unit-011", UNIT, "Kitchen", "Kitchen Cabinets/Countertops", LOW, 1.0, False, False, False),
    ("unit-012", UNIT, "HVAC", "Dryer Vent", SEVERE, 2.5, False, False, True),
    ("unit-013", UNIT, "HVAC", "HVAC System", MODERATE, 2.5, False, False, False),
    ("unit-014", UNIT, "HVAC", "Water Heater", MODERATE, 2.0, False, False, False),
    ("unit-015", UNIT, "Electrical", "GFCI (Within 6 Feet)", SEVERE, 2.5, False, False, True),
    ("unit-016", UNIT, "Electrical", "Unshielded Wires", SEVERE, 2.5, True, False, True),
    ("unit-017", UNIT, "Electrical", "Outlets/Switches", MODERATE, 2.0, False, False, False),
    ("unit-018", UNIT, "Electrical", "Electrical Enclosures", SEVERE, 2.5, False, False, True),
    ("unit-019", UNIT, "Electrical", "Light Fixtures", LOW, 1.0, False, False, False),
    ("unit-020", UNIT, "Fire Safety", "Smoke Detector", SEVERE, None, False, True, True),
    ("unit-021", UNIT, "Fire Safety", "CO Detector", SEVERE, None, False, True, True),
    ("unit-022", UNIT, "Fire Safety", "Fire Extinguisher (Unit)", MODERATE, 1.5, False, False, False),
    ("unit-023", UNIT, "Fire Safety", "Sprinkler Assembly (Unit)", SEVERE, 3.0, False, False, True),
    ("unit-024", UNIT, "Safety", "Trip Hazards", LOW, 1.5, False, False, False),
    ("unit-025", UNIT, "Safety", "Sharp Edges", MODERATE, 2.0, False, False, False),
    ("unit-026", UNIT, "Safety", "Guardrails (Unit)", SEVERE, 2.5, False, False, True),
    ("unit-027", UNIT, "Safety", "Handrails (Unit)", SEVERE, 2.5, False, False, True),
    ("unit-028", UNIT, "Safety", "Stairs/Steps (Unit)", MODERATE, 2.0, False, False, False),
    ("unit-029", UNIT, "Safety", "Infestation", SEVERE, 2.5, False, False, True),
    ("unit-030", UNIT, "Health", "Mold-Like Substance", MODERATE, 2.5, False, False, False),
    ("unit-031", UNIT, "Health", "Litter/Debris (Unit)", LOW, 1.0, False, False, False),
    ("unit-032", UNIT, "Security", "Door Locks", MODERATE, 1.5, False, False, False),
    ("unit-033", UNIT, "Security", "Window Security", LOW, 1.0, False, False, False),
    ("unit-034", UNIT, "Security", "Secondary Entry Door", MODERATE, 1.5, False, False, False),
    ("unit-035", UNIT, "Doors", "General Doors (Unit)", LOW, 1.0, False, False, False),
    ("unit-036", UNIT, "Structure", "Ceilings (Unit)", LOW, 1.5, False, False, False),
    ("unit-037", UNIT, "Structure", "Walls/Wall Covering (Unit)", MODERATE, 2.0, False, False, False),
    ("unit-038", UNIT, "Structure", "Floors (Unit)", LOW, 1.5, False, False, False),
    ("unit-039", UNIT, "Structure", "Structural Defects (Unit)", SEVERE, 2.5, True, False, True),
    ("unit-040", UNIT, "Windows", "Windows (Unit)", LOW, 1.5, False, False, False),
    ("unit-041", UNIT, "Egress", "Bedroom Egress", SEVERE, 3.0, True, False, True),
    ("unit-042", UNIT, "Plumbing", "Leaks and Wastewater (Unit)", SEVERE, 2.0, False, False, True),
    ("unit-043", UNIT, "Plumbing", "Hot Water", MODERATE, 2.0, False, False, False),
    ("unit-044", UNIT, "Lead Paint", "Lead-Based Paint (Pre-1978)", SEVERE, 3.0, False, False, True),
    ("unit-045", UNIT, "Fire Safety", "Flammable/Combustible Items (Unit)", SEVERE, 3.0, True, False, True),
    ("unit-046", UNIT, "Safety", "Call-for-Aid (Unit)", SEVERE, 2.5, False, False, True),
    ("unit-047", UNIT, "Bathroom", "Floor Drain (Unit)", MODERATE, 1.5, False, False, False),
    ("unit-048", UNIT, "HVAC", "Chimney/Fireplace (Unit)", MODERATE, 2.0, False, False, False),
    ("unit-049", UNIT, "Electrical", "AFCI Protection", SEVERE, 2.5, False, False, True),
    ("unit-050", UNIT, "Health", "Paint Condition (Post-1978)", LOW, 1.0, False, False, False),
    ("unit-051", UNIT, "Doors", "Fire-Rated Door (Unit)", SEVERE, 3.0, True, False, True),
    ("unit-052", UNIT, "Safety", "Balcony/Patio", MODERATE, 2.0, False, False, False),
    ("unit-053", UNIT, "Plumbing", "Washer Connection", LOW, 1.5, False, False, False),
    ("unit-054", UNIT, "Windows", "Window Coverings", LOW, 1.0, False, False, False),
    ("unit-055", UNIT, "Safety", "Closet/Storage Safety", MODERATE, 1.5, False, False, False),
]

DEFECT_CATALOG: List[DefectCatalogItem] = [
    DefectCatalogItem(
        id=row[0],
        area=row[1],
        category=row[2],
        item=row[3],
        default_severity=row[4],
        point_value=row[5],
        is_life_threatening=row[6],
        is_unscored=row[7],
        proof_required=row[8],
    )
    for row in _CATALOG_ROWS
]


@lru_cache(maxsize=1)
def _catalog_index() -> Dict[str, DefectCatalogItem]:
    return {item.id: item for item in DEFECT_CATALOG}


def get_defect_catalog(area: Optional[InspectionArea] = None) -> List[DefectCatalogItem]:
    """All catalog items, or only those for one area"""
    if area is None:
        return list(DEFECT_CATALOG)
    area = InspectionArea(area)
    return [item for item in DEFECT_CATALOG if item.area == area]


def get_catalog_item(item_id: str) -> Optional[DefectCatalogItem]:
    """Look up an item by id; a miss returns None rather than raising"""
    return _catalog_index().get(item_id)


def get_categories(area: InspectionArea) -> List[str]:
    """Unique categories for an area, in catalog order"""
    return list(dict.fromkeys(item.category for item in get_defect_catalog(area)))


def get_items_by_category(area: InspectionArea, category: str) -> List[DefectCatalogItem]:
    return [item for item in get_defect_catalog(area) if item.category == category]


def get_unscored_item_ids() -> List[str]:
    return [item.id for item in DEFECT_CATALOG if item.is_unscored]
