"""Standalone CSS output for white and black fades, as shown by the playground."""

from __future__ import annotations

from typing import Dict, Optional, Union

from .stops.generator import format_gradient_stops, generate_gradient_stops
from .stops.table import lookup
from .types.direction_type import Direction, direction_angle
from .types.stop_types import StepProfile
from .utils.default import int_or_none

COLOR_TO_HSLA: Dict[str, str] = {
    "white": "hsla(0, 0%, 100%, {opacity})",
    "black": "hsla(0, 0%, 0%, {opacity})",
}

DEFAULT_CSS_COLOR = "white"


def get_gradient_data(steps: Union[int, str]) -> Optional[StepProfile]:
    """
    Positions and opacities behind a default-easing fade.

    Args:
        steps: Step count

    Returns:
        The authored profile when one exists, a synthesized one otherwise,
        or None for non-numeric and sub-1 step counts
    """
    parsed = int_or_none(steps)
    if parsed is None:
        return None
    profile = lookup(parsed)
    if profile is not None:
        return profile

    stops = generate_gradient_stops(parsed)
    if not stops:
        return None
    return StepProfile(
        steps=parsed,
        positions=tuple(stop.position for stop in stops),
        opacities=tuple(stop.opacity for stop in stops),
    )


def generate_css(color: str, direction: Union[Direction, str], steps: Union[int, str]) -> str:
    """
    Build a readable multi-line linear-gradient() value.

    Args:
        color: 'white' or 'black'; anything else renders white
        direction: Direction token; unknown tokens render at 180deg
        steps: Step count

    Returns:
        e.g. 'linear-gradient(\\n  180deg,\\n    hsla(0, 0%, 100%, 1.00) 0%,\\n ...)'
        or '' when the step count yields no stops
    """
    color_function = COLOR_TO_HSLA.get(color, COLOR_TO_HSLA[DEFAULT_CSS_COLOR])
    stops = format_gradient_stops(generate_gradient_stops(steps), color_function)
    if not stops:
        return ""

    stops_string = ",\n".join(f"    {stop}" for stop in stops)
    return f"linear-gradient(\n  {direction_angle(direction)}deg,\n{stops_string}\n)"
