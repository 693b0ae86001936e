from decimal import Decimal, ROUND_HALF_UP
import math

from ..types.constants import ALPHA_PRECISION

_ALPHA_QUANTUM = Decimal(1).scaleb(-ALPHA_PRECISION)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return int(math.floor(value + 0.5))


def round_alpha(value: float) -> float:
    """Round alpha to ``ALPHA_PRECISION`` decimals, halves away from zero.

    Works on the exact binary value of ``value`` so 0.0625 becomes 0.063.
    """
    if not math.isfinite(value):
        return value
    return float(Decimal(value).quantize(_ALPHA_QUANTUM, rounding=ROUND_HALF_UP))
