# No dependencies
import logging
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    T = "t"
    B = "b"
    L = "l"
    R = "r"
    TL = "tl"
    TR = "tr"
    BL = "bl"
    BR = "br"


DIRECTION_ANGLES = {
    Direction.T: 0,
    Direction.B: 180,
    Direction.L: 270,
    Direction.R: 90,
    Direction.TL: 315,
    Direction.TR: 45,
    Direction.BL: 225,
    Direction.BR: 135,
}

DIRECTION_LABELS = {
    Direction.T: ("Top", "↑"),
    Direction.B: ("Bottom", "↓"),
    Direction.L: ("Left", "←"),
    Direction.R: ("Right", "→"),
    Direction.TL: ("Top Left", "↖"),
    Direction.TR: ("Top Right", "↗"),
    Direction.BL: ("Bottom Left", "↙"),
    Direction.BR: ("Bottom Right", "↘"),
}

DEFAULT_DIRECTION = Direction.B


def to_direction(value: Union[Direction, str, None]) -> Direction:
    """
    Normalize a direction token.

    Args:
        value: Direction member or its string token ('t', 'br', ...)

    Returns:
        The matching Direction, or DEFAULT_DIRECTION for anything unknown
    """
    if isinstance(value, Direction):
        return value
    try:
        return Direction(str(value).lower())
    except ValueError:
        logger.debug("unknown direction %r, falling back to %s", value, DEFAULT_DIRECTION.value)
        return DEFAULT_DIRECTION


def direction_angle(value: Union[Direction, str, None]) -> int:
    """Angle in degrees for a direction token; unknown tokens map to 180."""
    return DIRECTION_ANGLES[to_direction(value)]
