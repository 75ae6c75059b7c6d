from .direction_type import (
    Direction,
    DIRECTION_ANGLES,
    DIRECTION_LABELS,
    DEFAULT_DIRECTION,
    to_direction,
    direction_angle,
)
from .stop_types import StepProfile, GradientStop, GradientSpec, OKLCH_FUNCTION

__all__ = [
    "Direction",
    "DIRECTION_ANGLES",
    "DIRECTION_LABELS",
    "DEFAULT_DIRECTION",
    "to_direction",
    "direction_angle",
    "StepProfile",
    "GradientStop",
    "GradientSpec",
    "OKLCH_FUNCTION",
]
