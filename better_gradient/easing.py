"""
Easing curves for gradient opacity falloff.

Each curve maps a unit parameter t in [0, 1] to [0, 1] with f(0) = 0 and
f(1) = 1. The equations are Robert Penner's; every function is vectorized so
a whole column of stop positions is eased in one call.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)

UnitTransform = Callable[[NDArray], NDArray]
EasingRegistry = Dict[str, UnitTransform]

DEFAULT_EASING = "ease-out-cubic"


def linear(t: ArrayLike) -> NDArray:
    return np.asarray(t, dtype=float)


def ease_in_quad(t: ArrayLike) -> NDArray:
    t = np.asarray(t, dtype=float)
    return t * t


def ease_out_quad(t: ArrayLike) -> NDArray:
    t = np.asarray(t, dtype=float)
    return t * (2 - t)


def ease_in_out_quad(t: ArrayLike) -> NDArray:
    t = np.asarray(t, dtype=float)
    return np.where(t < 0.5, 2 * t * t, -1 + (4 - 2 * t) * t)


def ease_in_cubic(t: ArrayLike) -> NDArray:
    t = np.asarray(t, dtype=float)
    return t * t * t


def ease_out_cubic(t: ArrayLike) -> NDArray:
    t = np.asarray(t, dtype=float)
    return 1 - np.power(1 - t, 3)


def ease_in_out_cubic(t: ArrayLike) -> NDArray:
    t = np.asarray(t, dtype=float)
    return np.where(t < 0.5, 4 * t * t * t, 1 - np.power(-2 * t + 2, 3) / 2)


def ease_in_quart(t: ArrayLike) -> NDArray:
    t = np.asarray(t, dtype=float)
    return t * t * t * t


def ease_out_quart(t: ArrayLike) -> NDArray:
    t = np.asarray(t, dtype=float)
    return 1 - np.power(1 - t, 4)


def ease_in_out_quart(t: ArrayLike) -> NDArray:
    t = np.asarray(t, dtype=float)
    return np.where(t < 0.5, 8 * t * t * t * t, 1 - np.power(-2 * t + 2, 4) / 2)


# Insertion order is the order the precomputed utility classes are emitted in.
EASING_FUNCTIONS: EasingRegistry = {
    "linear": linear,
    "ease-in-quad": ease_in_quad,
    "ease-out-quad": ease_out_quad,
    "ease-in-out-quad": ease_in_out_quad,
    "ease-in-cubic": ease_in_cubic,
    "ease-out-cubic": ease_out_cubic,
    "ease-in-out-cubic": ease_in_out_cubic,
    "ease-in-quart": ease_in_quart,
    "ease-out-quart": ease_out_quart,
    "ease-in-out-quart": ease_in_out_quart,
}

EASING_NAMES: List[str] = list(EASING_FUNCTIONS)

EASING_LABELS: Dict[str, str] = {
    name: " ".join(part.capitalize() for part in name.split("-"))
    for name in EASING_NAMES
}


def is_easing(name: Optional[str]) -> bool:
    """Check whether `name` is a registered easing curve."""
    return name in EASING_FUNCTIONS


def resolve_easing_name(name: Optional[str]) -> str:
    """Return `name` if it is registered, otherwise DEFAULT_EASING."""
    if is_easing(name):
        return name  # type: ignore[return-value]
    logger.debug("unknown easing %r, falling back to %s", name, DEFAULT_EASING)
    return DEFAULT_EASING


def get_easing(name: Optional[str] = DEFAULT_EASING) -> UnitTransform:
    """
    Look up an easing curve by name.

    Args:
        name: Registered easing key, e.g. 'ease-in-out-quad'

    Returns:
        The easing function; unknown names get the default curve
    """
    return EASING_FUNCTIONS[resolve_easing_name(name)]
