"""Average rating arithmetic."""

from __future__ import annotations

import math


def round_up_to_half(value: float) -> float:
    """Round up to the nearest 0.5, e.g. 3.25 -> 3.5 and 3.5 -> 3.5."""
    return math.ceil(value * 2) / 2
