from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def format_fixed(value: float, digits: int = 2) -> str:
    """Format like JavaScript's ``Number.prototype.toFixed``.

    Rounds half away from zero on the exact binary value of the float and
    renders NaN as ``"NaN"``, which is what existing API clients parse.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
