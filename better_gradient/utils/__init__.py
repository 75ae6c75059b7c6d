from .default import value_or_default, int_or_none
from .num_utils import is_close_to_int, round_half_up, to_fixed, to_compact

__all__ = [
    "value_or_default",
    "int_or_none",
    "is_close_to_int",
    "round_half_up",
    "to_fixed",
    "to_compact",
]
