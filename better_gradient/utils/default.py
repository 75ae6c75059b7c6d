import math
import numbers
from typing import Optional, TypeVar

from .num_utils import is_close_to_int

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default


def int_or_none(value: object) -> Optional[int]:
    """
    Parse an integer from an int, a whole float or a numeric string.

    Strings go through float() so '6.0' parses like 6.0; strings with
    trailing units ('12px') and fractional values give None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            pass
        try:
            value = float(value)
        except ValueError:
            return None
    if isinstance(value, numbers.Real):
        as_float = float(value)
        if math.isfinite(as_float) and is_close_to_int(as_float):
            return int(round(as_float))
        return None
    return None
