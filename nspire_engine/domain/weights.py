"""Category weights and severity factors for point deductions"""

import math
from typing import Dict, Optional
from nspire_engine.config import settings
from nspire_engine.domain.exceptions import InvalidArgumentError
from nspire_engine.domain.models import InspectionArea, Severity

# Twelve scoring categories from the Standards Book, with the area each is
# listed under.
SCORING_WEIGHTS: Dict[str, tuple[InspectionArea, float]] = {
    "Electrical": (InspectionArea.OUTSIDE, 2.5),
    "Safety": (InspectionArea.OUTSIDE, 2.5),
    "Fire Safety": (InspectionArea.OUTSIDE, 3.0),
    "HVAC": (InspectionArea.OUTSIDE, 2.0),
    "Signage": (InspectionArea.OUTSIDE, 1.0),
    "Site": (InspectionArea.OUTSIDE, 1.5),
    "Plumbing": (InspectionArea.OUTSIDE, 2.0),
    "Structure": (InspectionArea.OUTSIDE, 2.5),
    "Egress": (InspectionArea.INSIDE, 3.0),
    "Lead Paint": (InspectionArea.INSIDE, 3.0),
    "Health": (InspectionArea.UNIT, 2.5),
    "Security": (InspectionArea.UNIT, 1.5),
}

# Catalog categories outside the twelve, mapped to their closest weight
SUPPLEMENTAL_WEIGHTS: Dict[str, float] = {
    "Bathroom": 2.0,
    "Kitchen": 2.0,
    "Doors": 1.5,
    "Windows": 1.5,
}


def get_category_weight(category: str, default: Optional[float] = None) -> float:
    """Base point weight for a category; unknown categories get the configured default"""
    if category in SCORING_WEIGHTS:
        return SCORING_WEIGHTS[category][1]
    if category in SUPPLEMENTAL_WEIGHTS:
        return SUPPLEMENTAL_WEIGHTS[category]
    return default if default is not None else settings.default_category_weight


def get_severity_factor(severity: Severity, factors: Optional[Dict[str, float]] = None) -> float:
    """Multiplier applied to the category weight; missing severities scale by 1.0"""
    factors = factors if factors is not None else settings.severity_factors
    factor = factors.get(Severity(severity).value, 1.0)
    if not (math.isfinite(factor) and factor >= 0):
        raise InvalidArgumentError(f"Severity factor for {Severity(severity).value} must be finite and >= 0, got {factor!r}")
    return factor
