"""
Fade utility definitions.

Everything here is data: class names mapped to flat style-declaration maps,
plus the matcher functions for the two dynamic utility families. A
UtilityHost adapter submits the data to whatever CSS build tool is in use.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Mapping, Optional

from .config import FadeConfig
from .easing import DEFAULT_EASING, EASING_NAMES, is_easing
from .stops.generator import gradient_stops_string, linear_gradient
from .stops.table import MAX_STEPS, MIN_STEPS
from .types.direction_type import DIRECTION_ANGLES
from .utils.default import int_or_none

logger = logging.getLogger(__name__)

StyleMap = Dict[str, str]
UtilityResolver = Callable[[str], StyleMap]

STEP_VALUES: Dict[str, str] = {str(step): str(step) for step in range(MIN_STEPS, MAX_STEPS + 1)}
EASING_VALUES: Dict[str, str] = {name: name for name in EASING_NAMES}


class UtilityHost(ABC):
    """Receiver for utility definitions, implemented per CSS build tool."""

    @abstractmethod
    def register_static(self, name: str, style_map: StyleMap) -> None:
        """Register a class name with a fixed style map."""

    @abstractmethod
    def register_dynamic(
        self,
        prefix: str,
        value_domain: Mapping[str, str],
        resolver: UtilityResolver,
    ) -> None:
        """
        Register a utility family '<prefix>-<value>'.

        Args:
            prefix: Class name prefix, e.g. 'fade'
            value_domain: Accepted value tokens mapped to the value passed
                to the resolver
            resolver: Computes the style map for one value; an empty map
                means no rule
        """


def direction_utilities(legacy: bool = True) -> Dict[str, StyleMap]:
    """fade-to-<d> angle utilities, plus the older fade-<d> names when `legacy`."""
    utilities = {
        f"fade-to-{direction.value}": {"--fade-angle": f"{angle}deg"}
        for direction, angle in DIRECTION_ANGLES.items()
    }
    if legacy:
        utilities.update({
            f"fade-{direction.value}": {"--fade-angle": f"{angle}deg"}
            for direction, angle in DIRECTION_ANGLES.items()
        })
    return utilities


def base_utility(config: FadeConfig) -> Dict[str, StyleMap]:
    return {
        "fade": {
            "--fade-oklch": config.base_color,
            "--fade-easing": DEFAULT_EASING,
            "background-image": linear_gradient(gradient_stops_string(config.steps)),
            "background-repeat": "no-repeat",
        }
    }


def color_utilities(config: FadeConfig) -> Dict[str, StyleMap]:
    """
    fade-from-<color> and fade-to-<color> for every flattened palette entry.

    'from' fades the color out to transparent, 'to' fades in from
    transparent. Both use the default easing; fade-ease-* overrides it.
    """
    from_image = linear_gradient(gradient_stops_string(config.steps, reverse=False))
    to_image = linear_gradient(gradient_stops_string(config.steps, reverse=True))

    utilities: Dict[str, StyleMap] = {}
    for color_path, color_value in config.flat_colors().items():
        utilities[f"fade-from-{color_path}"] = {
            "--fade-oklch": color_value,
            "--fade-easing": DEFAULT_EASING,
            "background-image": from_image,
            "background-repeat": "no-repeat",
        }
        utilities[f"fade-to-{color_path}"] = {
            "--fade-oklch": color_value,
            "--fade-easing": DEFAULT_EASING,
            "background-image": to_image,
            "background-repeat": "no-repeat",
        }
    return utilities


def easing_step_utilities() -> Dict[str, StyleMap]:
    """Precomputed fade-<easing>-<step> for every easing and every step in 2..24."""
    utilities: Dict[str, StyleMap] = {}
    for easing in EASING_NAMES:
        for step in range(MIN_STEPS, MAX_STEPS + 1):
            utilities[f"fade-{easing}-{step}"] = {
                "background-image": linear_gradient(
                    gradient_stops_string(step, easing=easing), important=True
                ),
            }
    return utilities


def build_static_utilities(config: Optional[FadeConfig] = None) -> Dict[str, StyleMap]:
    config = config or FadeConfig()
    utilities: Dict[str, StyleMap] = {}
    utilities.update(direction_utilities(config.legacy_directions))
    utilities.update(base_utility(config))
    utilities.update(color_utilities(config))
    utilities.update(easing_step_utilities())
    return utilities


def fade_step_utility(value: str) -> StyleMap:
    """
    Style map for fade-<n>.

    Non-numeric and sub-1 values give an empty background-image so the
    class is a visual no-op.
    """
    steps = int_or_none(value)
    if steps is None or steps < 1:
        logger.debug("fade step %r is not a positive integer", value)
        return {"background-image": ""}
    return {
        "background-image": linear_gradient(gradient_stops_string(steps), important=True),
    }


def fade_easing_utility(value: str, config: Optional[FadeConfig] = None) -> StyleMap:
    """Style map for fade-ease-<name>; unknown easing names produce no rule."""
    if not is_easing(value):
        logger.debug("fade-ease value %r is not a known easing", value)
        return {}
    config = config or FadeConfig()
    return {
        "--fade-easing": value,
        "background-image": linear_gradient(
            gradient_stops_string(config.steps, easing=value), important=True
        ),
    }


def register_utilities(host: UtilityHost, config: Optional[FadeConfig] = None) -> None:
    """Submit every fade utility to `host`."""
    config = config or FadeConfig()

    for name, style_map in direction_utilities(config.legacy_directions).items():
        host.register_static(name, style_map)

    host.register_dynamic(
        "fade-ease",
        EASING_VALUES,
        lambda value: fade_easing_utility(value, config),
    )

    for name, style_map in base_utility(config).items():
        host.register_static(name, style_map)
    for name, style_map in color_utilities(config).items():
        host.register_static(name, style_map)

    host.register_dynamic("fade", STEP_VALUES, fade_step_utility)

    for name, style_map in easing_step_utilities().items():
        host.register_static(name, style_map)
