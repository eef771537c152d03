"""Map a Fahrenheit temperature onto one of the four ordinal weather categories."""

from __future__ import annotations

import math

from models.taxonomy import TEMPERATURE_THRESHOLDS_F


def classify_temperature(temp_f: float) -> str:
    """Return ``cold``, ``cool``, ``warm`` or ``hot`` for a forecast high.

    Each threshold is exclusive on the upper side: 45 is cool, 65 is warm and
    80 is hot.
    """

    value = float(temp_f)
    if math.isnan(value):
        raise ValueError("temperature must be a number, got NaN")
    for category, upper_bound in TEMPERATURE_THRESHOLDS_F.items():
        if value < upper_bound:
            return category
    return "hot"


__all__ = ["classify_temperature"]
