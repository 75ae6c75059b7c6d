"""
Gradient stop generation.

Turns a step count, a direction flag and an easing name into the ordered
(opacity, position) stops of a fade. The authored table is used verbatim
for the default easing; every other request is computed from the easing
curve, on the table's positions when an entry exists and on evenly spaced
positions otherwise.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..easing import DEFAULT_EASING, get_easing, resolve_easing_name
from ..types.stop_types import OKLCH_FUNCTION, GradientStop
from ..utils.default import int_or_none
from ..utils.num_utils import round_half_up
from .table import lookup

logger = logging.getLogger(__name__)

FADE_ANGLE = "var(--fade-angle, 0deg)"


def _even_positions(steps: int) -> np.ndarray:
    """steps + 1 positions from 0 to 100 inclusive."""
    return np.arange(steps + 1, dtype=float) / steps * 100


@lru_cache(maxsize=1024)
def _compute_stops(steps: int, reverse: bool, easing: str) -> Tuple[GradientStop, ...]:
    profile = lookup(steps)

    if profile is not None and easing == DEFAULT_EASING:
        positions = np.asarray(profile.positions, dtype=float)
        opacities = np.asarray(profile.opacities, dtype=float)
        if reverse:
            # positions stay 0 -> 100, only the opacity ramp flips
            opacities = opacities[::-1]
    else:
        if profile is not None:
            positions = np.asarray(profile.positions, dtype=float)
        else:
            positions = _even_positions(steps)
        eased = np.clip(get_easing(easing)(positions / 100), 0.0, 1.0)
        opacities = eased if reverse else 1 - eased

    return tuple(
        GradientStop(
            opacity=float(round_half_up(opacity)),
            position=float(round_half_up(position)),
        )
        for opacity, position in zip(opacities, positions)
    )


def generate_gradient_stops(
    steps: Union[int, str],
    reverse: bool = False,
    easing: Optional[str] = DEFAULT_EASING,
) -> List[GradientStop]:
    """
    Compute the stops of a fade.

    Args:
        steps: Step count; table entries exist for 2..24, anything else
            is synthesized as steps + 1 evenly spaced stops
        reverse: If True fade from transparent to color (opacity 0 -> 1),
            otherwise from color to transparent
        easing: Easing curve name; unknown names use the default curve

    Returns:
        Stops in ascending position order. Empty for non-numeric or
        sub-1 step counts.
    """
    parsed = int_or_none(steps)
    if parsed is None or parsed < 1:
        logger.debug("no stops for step count %r", steps)
        return []
    return list(_compute_stops(parsed, bool(reverse), resolve_easing_name(easing)))


def format_gradient_stops(
    stops: Iterable[GradientStop],
    color_function: str = OKLCH_FUNCTION,
) -> List[str]:
    """Render stops as CSS color-stop tokens."""
    return [stop.format(color_function) for stop in stops]


def gradient_stops_string(
    steps: Union[int, str],
    reverse: bool = False,
    easing: Optional[str] = DEFAULT_EASING,
    color_function: str = OKLCH_FUNCTION,
) -> str:
    """Stops for (steps, reverse, easing) joined into one linear-gradient argument list."""
    tokens = format_gradient_stops(generate_gradient_stops(steps, reverse, easing), color_function)
    return ", ".join(tokens)


def linear_gradient(
    stops: Union[str, Sequence[str]],
    angle: str = FADE_ANGLE,
    important: bool = False,
) -> str:
    """
    Wrap stop tokens in a linear-gradient() value.

    Args:
        stops: Joined stop string or a sequence of stop tokens
        angle: CSS angle expression
        important: Append '!important'

    Returns:
        The background-image value, or '' when there are no stops
    """
    if not isinstance(stops, str):
        stops = ", ".join(stops)
    if not stops:
        return ""
    value = f"linear-gradient({angle}, {stops})"
    return f"{value} !important" if important else value
