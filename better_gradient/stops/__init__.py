from .table import GRADIENT_DATA, SUPPORTED_STEPS, MIN_STEPS, MAX_STEPS, DEFAULT_STEPS, lookup
from .generator import (
    FADE_ANGLE,
    generate_gradient_stops,
    format_gradient_stops,
    gradient_stops_string,
    linear_gradient,
)

__all__ = [
    "GRADIENT_DATA",
    "SUPPORTED_STEPS",
    "MIN_STEPS",
    "MAX_STEPS",
    "DEFAULT_STEPS",
    "lookup",
    "FADE_ANGLE",
    "generate_gradient_stops",
    "format_gradient_stops",
    "gradient_stops_string",
    "linear_gradient",
]
