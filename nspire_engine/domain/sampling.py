"""HUD NSPIRE sample-size lookup"""

from typing import List, Tuple

# (min_units, max_units, sample_size) per the NSPIRE sampling table.
# The last band is open-ended.
HUD_SAMPLE_SIZE_TABLE: List[Tuple[int, float, int]] = [
    (1, 4, 1),
    (5, 24, 5),
    (25, 49, 10),
    (50, 74, 15),
    (75, 99, 18),
    (100, 149, 22),
    (150, 199, 27),
    (200, 249, 31),
    (250, 299, 35),
    (300, 399, 40),
    (400, 499, 45),
    (500, 624, 50),
    (625, 749, 55),
    (750, 920, 60),
    (921, float("inf"), 65),
]

MIN_SAMPLE_SIZE = 1


def get_hud_sample_size(unit_count: int) -> int:
    """
    Map a property's total unit count to the number of units HUD inspects.

    Total over its input: a property with no units (or a negative count from a
    bad upstream query) resolves to the minimum sample of 1 so callers never
    divide by zero.
    """
    for min_units, max_units, sample_size in HUD_SAMPLE_SIZE_TABLE:
        if min_units <= unit_count <= max_units:
            return sample_size
    return MIN_SAMPLE_SIZE
