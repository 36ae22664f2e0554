"""Numeric generalization into string ranges.

Three policies, chosen by magnitude:
- ``[0, 120]``: fixed age-like bands.
- ``>= 1000``: a band one order of magnitude below the value (``1500-1599``).
- anything else: ``value ± max(1, floor(value * 0.1))``.
"""

import math

from app.anonymization.models import NumericProfile
from app.table.values import to_text

AGE_BANDS: list[tuple[float, str]] = [
    (5, "0-5"),
    (12, "6-12"),
    (18, "13-18"),
    (25, "19-25"),
    (35, "26-35"),
    (45, "36-45"),
    (55, "46-55"),
    (65, "56-65"),
    (75, "66-75"),
]
AGE_TOP_BAND = "76+"
AGE_MAX = 120
LARGE_MIN = 1000
MAX_UNIQUE_RATIO = 0.5


def should_shuffle(profile: NumericProfile) -> bool:
    """High-cardinality columns are permuted instead of generalized."""
    return profile.unique_ratio > MAX_UNIQUE_RATIO


def bucket(value: float) -> str:
    if 0 <= value <= AGE_MAX:
        return age_band(value)
    if value >= LARGE_MIN:
        return magnitude_band(value)
    return proportional_band(value)


def age_band(value: float) -> str:
    for upper, label in AGE_BANDS:
        if value <= upper:
            return label
    return AGE_TOP_BAND


def magnitude_band(value: float) -> str:
    width = 10 ** (math.floor(math.log10(value)) - 1)
    lower = math.floor(value / width) * width
    upper = lower + width - 1
    return f"{lower}-{upper}"


def proportional_band(value: float) -> str:
    width = max(1, math.floor(value * 0.1))
    return f"{to_text(float(value - width))}-{to_text(float(value + width))}"
