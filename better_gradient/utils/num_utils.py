from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float]


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def round_half_up(value: Number, places: int = 2) -> Decimal:
    """
    Round the exact binary value of a float, ties away from zero.

    This is the rule JavaScript's Number.prototype.toFixed applies, so
    0.125 rounds to 0.13 where Python's round() would give 0.12.

    Args:
        value: Number to round
        places: Decimal places to keep

    Returns:
        Decimal quantized to `places` decimal places
    """
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    # -0.00 -> 0.00
    return rounded.copy_abs() if rounded.is_zero() else rounded


def to_fixed(value: Number, places: int = 2) -> str:
    """Format with exactly `places` decimals ('0.5' -> '0.50')."""
    return f"{round_half_up(value, places):f}"


def to_compact(value: Number, places: int = 2) -> str:
    """Round to `places` decimals and drop trailing zeros ('20.00' -> '20')."""
    rounded = round_half_up(value, places)
    if rounded == rounded.to_integral_value():
        return str(int(rounded))
    return f"{rounded.normalize():f}"
