"""
Class-name resolution for fade utilities.

Maps a (color, direction, steps, easing) selection to the utility class
names that reproduce it. Default values contribute no class so the common
case stays short:

    =============  ==============  =======================
    steps == 6     default easing  step/easing class
    =============  ==============  =======================
    yes            yes             (none)
    yes            no              fade-<easing>-6
    no             yes             fade-<steps>
    no             no              fade-<easing>-<steps>
    =============  ==============  =======================

A custom easing with a step count outside 2..24 falls back to
fade-<easing>-6, so every emitted class names a registered utility.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Union

from .easing import DEFAULT_EASING, resolve_easing_name
from .stops.table import DEFAULT_STEPS, MAX_STEPS, MIN_STEPS
from .types.direction_type import Direction, to_direction
from .types.stop_types import GradientSpec
from .utils.default import int_or_none

logger = logging.getLogger(__name__)

DEFAULT_COLOR_CLASS = "fade-from-blue-500"

COLORS: List[str] = [
    "red",
    "orange",
    "amber",
    "yellow",
    "lime",
    "green",
    "emerald",
    "teal",
    "cyan",
    "sky",
    "blue",
    "indigo",
    "violet",
    "purple",
    "fuchsia",
    "pink",
    "rose",
    "slate",
]

# Step counts offered by the playground
STEPS: List[int] = [2, 4, 6, 8, 12, 16, 20, 24]

FADE_COLOR_CLASSES: Dict[str, str] = {
    **{color: f"fade-from-{color}-500" for color in COLORS},
    "slate-900": "fade-from-slate-900",
    "black": "fade-from-black",
    "white": "fade-from-white",
}

FADE_DIRECTION_CLASSES: Dict[Direction, str] = {
    direction: f"fade-to-{direction.value}" for direction in Direction
}

SIMPLE_GRADIENT_DIRECTION_CLASSES: Dict[Direction, str] = {
    direction: f"bg-gradient-to-{direction.value}" for direction in Direction
}


def get_fade_color_class(color: Optional[str]) -> str:
    """Color class for a playground color; unknown colors get fade-from-blue-500."""
    css_class = FADE_COLOR_CLASSES.get(color or "")
    if css_class is None:
        logger.debug("unknown color %r, falling back to %s", color, DEFAULT_COLOR_CLASS)
        return DEFAULT_COLOR_CLASS
    return css_class


def get_fade_direction_class(direction: Union[Direction, str, None]) -> str:
    return FADE_DIRECTION_CLASSES[to_direction(direction)]


def get_fade_step_class(step: Union[int, str, None]) -> str:
    """
    Step class for a step count.

    Returns '' for the default step (6) and for anything outside 2..24,
    otherwise 'fade-<step>'.
    """
    parsed = int_or_none(step)
    if parsed is None or parsed == DEFAULT_STEPS:
        return ""
    if MIN_STEPS <= parsed <= MAX_STEPS:
        return f"fade-{parsed}"
    return ""


def get_fade_easing_step_class(step: Union[int, str, None], easing: Optional[str] = DEFAULT_EASING) -> str:
    """Apply the step/easing collapsing table; '' when both are defaults."""
    easing = resolve_easing_name(easing)
    parsed = int_or_none(step)
    is_default_step = parsed == DEFAULT_STEPS
    is_default_easing = easing == DEFAULT_EASING

    if is_default_step and is_default_easing:
        return ""
    if is_default_step:
        return f"fade-{easing}-{DEFAULT_STEPS}"
    if is_default_easing:
        return get_fade_step_class(parsed)
    if parsed is None or not MIN_STEPS <= parsed <= MAX_STEPS:
        # only 2..24 are registered as fade-<easing>-<step> utilities
        logger.debug("unusable step count %r, using default steps with %s", step, easing)
        return f"fade-{easing}-{DEFAULT_STEPS}"
    return f"fade-{easing}-{parsed}"


def resolve_classes(
    color: Optional[str],
    direction: Union[Direction, str, None],
    steps: Union[int, str, None] = DEFAULT_STEPS,
    easing: Optional[str] = DEFAULT_EASING,
) -> List[str]:
    """
    Resolve a fade selection to its class list.

    Args:
        color: Playground color ('blue', 'slate-900', 'white', ...)
        direction: Direction token ('t', 'br', ...)
        steps: Step count
        easing: Easing curve name

    Returns:
        [color class, direction class, step/easing class], with the last
        omitted when both steps and easing are defaults
    """
    parsed = int_or_none(steps)
    # slate switches to its 900 shade at non-default step counts
    if color == "slate" and parsed != DEFAULT_STEPS:
        color = "slate-900"

    classes = [
        get_fade_color_class(color),
        get_fade_direction_class(direction),
        get_fade_easing_step_class(steps, easing),
    ]
    return [css_class for css_class in classes if css_class]


def resolve_spec_classes(spec: GradientSpec) -> List[str]:
    """resolve_classes() for a GradientSpec, after its fallbacks are applied."""
    spec = spec.normalized()
    return resolve_classes(spec.color, spec.direction, spec.steps, spec.easing)


def get_fade_class(
    color: Optional[str],
    direction: Union[Direction, str, None],
    steps: Union[int, str, None] = DEFAULT_STEPS,
    easing: Optional[str] = DEFAULT_EASING,
) -> str:
    """resolve_classes() joined into a class attribute value."""
    return " ".join(resolve_classes(color, direction, steps, easing))


def get_simple_gradient_class(color: str, direction: Union[Direction, str, None]) -> str:
    """
    Stock Tailwind gradient classes for the same selection, without fade utilities.

    Used to compare a plain two-stop gradient against the eased fade.
    """
    gradient_direction = SIMPLE_GRADIENT_DIRECTION_CLASSES[to_direction(direction)]

    if color in ("white", "black"):
        color_class = f"from-{color}/100 to-{color}/0"
    else:
        color_class = f"from-{color}-500/100 to-{color}-500/0"

    return f"{gradient_direction} {color_class}"
