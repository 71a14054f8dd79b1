from __future__ import annotations

import math
from decimal import Decimal
from typing import TypeAlias


# Use where optimal type is `float`, but other types are also acceptable (and will be converted to `float`)
FloatLike: TypeAlias = float | int | str | Decimal


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divides like IEEE 754 floats do, instead of raising `ZeroDivisionError`.

    Division by zero yields a signed infinity, and 0/0 yields NaN.

    Args:
        numerator: Dividend.
        denominator: Divisor, may be zero.

    Returns:
        The quotient.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)

    return numerator / denominator
