"""
Authored gradient stop table.

Each entry approximates an ease-out-cubic falloff from opacity 1.0 to 0.0
and was tuned by hand, so the values are kept literally rather than derived
from the easing curve. Entries 2 to 17 hold exactly `steps` stops while
18 to 24 hold `steps + 1`; both are kept as authored. Step counts 2 to 19 come
from the smooth-overlays reference; 20 to 24 extend the same pattern.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from ..types.stop_types import DEFAULT_STEPS, StepProfile

MIN_STEPS = 2
MAX_STEPS = 24

_RAW_GRADIENT_DATA: Dict[int, Tuple[List[float], List[float]]] = {
    2: ([0, 100], [1.0, 0.0]),
    3: ([0, 50, 100], [1.0, 0.13, 0.0]),
    4: ([0, 33, 67, 100], [1.0, 0.3, 0.04, 0.0]),
    5: ([0, 25, 50, 75, 100], [1.0, 0.42, 0.13, 0.02, 0.0]),
    6: ([0, 20, 40, 60, 80, 100], [1.0, 0.51, 0.22, 0.06, 0.01, 0.0]),
    7: ([0, 17, 33, 50, 67, 83, 100], [1.0, 0.58, 0.3, 0.13, 0.04, 0.0, 0.0]),
    8: (
        [0, 14, 29, 43, 57, 71, 86, 100],
        [1.0, 0.63, 0.36, 0.19, 0.08, 0.02, 0.0, 0.0],
    ),
    9: (
        [0, 13, 25, 38, 50, 63, 75, 88, 100],
        [1.0, 0.67, 0.42, 0.24, 0.13, 0.05, 0.02, 0.0, 0.0],
    ),
    10: (
        [0, 11, 22, 33, 44, 56, 67, 78, 89, 100],
        [1.0, 0.7, 0.47, 0.3, 0.17, 0.09, 0.04, 0.01, 0.0, 0.0],
    ),
    11: (
        [0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
        [1.0, 0.73, 0.51, 0.34, 0.22, 0.13, 0.06, 0.03, 0.01, 0.0, 0.0],
    ),
    12: (
        [0, 9, 18, 27, 36, 45, 55, 64, 73, 82, 91, 100],
        [1.0, 0.75, 0.55, 0.38, 0.26, 0.16, 0.09, 0.05, 0.02, 0.01, 0.0, 0.0],
    ),
    13: (
        [0, 8, 17, 25, 33, 42, 50, 58, 67, 75, 83, 92, 100],
        [1.0, 0.77, 0.58, 0.42, 0.3, 0.2, 0.13, 0.07, 0.04, 0.02, 0.0, 0.0, 0.0],
    ),
    14: (
        [0, 8, 15, 23, 31, 38, 46, 54, 62, 69, 77, 85, 92, 100],
        [1.0, 0.79, 0.61, 0.46, 0.33, 0.23, 0.16, 0.1, 0.06, 0.03, 0.01, 0.0, 0.0, 0.0],
    ),
    15: (
        [0, 7, 14, 21, 29, 36, 43, 50, 57, 64, 71, 79, 86, 93, 100],
        [1.0, 0.8, 0.63, 0.49, 0.36, 0.27, 0.19, 0.13, 0.08, 0.05, 0.02, 0.01, 0.0, 0.0, 0.0],
    ),
    16: (
        [0, 7, 13, 20, 27, 33, 40, 47, 53, 60, 67, 73, 80, 87, 93, 100],
        [1.0, 0.81, 0.65, 0.51, 0.39, 0.3, 0.22, 0.15, 0.1, 0.06, 0.04, 0.02, 0.01, 0.0, 0.0, 0.0],
    ),
    17: (
        [0, 6, 13, 19, 25, 31, 38, 44, 50, 56, 63, 69, 75, 81, 88, 94, 100],
        [
            1.0, 0.82, 0.67, 0.54, 0.42, 0.32, 0.24, 0.18, 0.13, 0.08, 0.05, 0.03, 0.02,
            0.01, 0.0, 0.0, 0.0,
        ],
    ),
    18: (
        [0, 6, 11, 17, 22, 28, 33, 39, 44, 50, 56, 61, 67, 72, 78, 83, 89, 94, 100],
        [
            1.0, 0.84, 0.7, 0.58, 0.47, 0.38, 0.3, 0.23, 0.17, 0.13, 0.09, 0.06, 0.04,
            0.02, 0.01, 0.0, 0.0, 0.0, 0.0,
        ],
    ),
    19: (
        [0, 5, 11, 16, 21, 26, 32, 37, 42, 47, 53, 58, 63, 68, 74, 79, 84, 89, 95, 100],
        [
            1.0, 0.85, 0.72, 0.6, 0.49, 0.4, 0.32, 0.25, 0.19, 0.15, 0.11, 0.07, 0.05,
            0.03, 0.02, 0.01, 0.0, 0.0, 0.0, 0.0,
        ],
    ),
    20: (
        [0, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70, 75, 80, 85, 90, 95, 100],
        [
            1.0, 0.86, 0.74, 0.63, 0.53, 0.44, 0.36, 0.29, 0.23, 0.18, 0.14, 0.1, 0.07,
            0.05, 0.03, 0.02, 0.01, 0.0, 0.0, 0.0, 0.0,
        ],
    ),
    21: (
        [0, 5, 10, 14, 19, 24, 29, 33, 38, 43, 48, 52, 57, 62, 67, 71, 76, 81, 86, 90, 95, 100],
        [
            1.0, 0.87, 0.75, 0.64, 0.54, 0.45, 0.37, 0.3, 0.24, 0.19, 0.15, 0.11, 0.08,
            0.06, 0.04, 0.03, 0.02, 0.01, 0.0, 0.0, 0.0, 0.0,
        ],
    ),
    22: (
        [0, 5, 9, 14, 18, 23, 27, 32, 36, 41, 45, 50, 55, 59, 64, 68, 73, 77, 82, 86, 91, 95, 100],
        [
            1.0, 0.88, 0.76, 0.65, 0.55, 0.46, 0.38, 0.31, 0.25, 0.2, 0.16, 0.12, 0.09,
            0.07, 0.05, 0.03, 0.02, 0.01, 0.0, 0.0, 0.0, 0.0, 0.0,
        ],
    ),
    23: (
        [0, 4, 9, 13, 18, 22, 27, 31, 36, 40, 45, 49, 54, 58, 63, 67, 72, 76, 81, 85, 90, 94, 99, 100],
        [
            1.0, 0.89, 0.77, 0.66, 0.56, 0.47, 0.39, 0.32, 0.26, 0.21, 0.17, 0.13, 0.1,
            0.07, 0.05, 0.04, 0.03, 0.02, 0.01, 0.0, 0.0, 0.0, 0.0, 0.0,
        ],
    ),
    24: (
        [
            0, 4, 8, 13, 17, 21, 25, 30, 34, 38, 43, 47, 51, 56, 60, 64, 69, 73, 77, 82,
            86, 90, 95, 99, 100,
        ],
        [
            1.0, 0.9, 0.78, 0.67, 0.57, 0.48, 0.4, 0.33, 0.27, 0.22, 0.18, 0.14, 0.11,
            0.08, 0.06, 0.04, 0.03, 0.02, 0.01, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0,
        ],
    ),
}

GRADIENT_DATA: Mapping[int, StepProfile] = MappingProxyType({
    steps: StepProfile(steps, tuple(positions), tuple(opacities))
    for steps, (positions, opacities) in _RAW_GRADIENT_DATA.items()
})

SUPPORTED_STEPS: Tuple[int, ...] = tuple(sorted(GRADIENT_DATA))


def lookup(steps: int) -> Optional[StepProfile]:
    """Return the authored profile for `steps`, or None when there is none."""
    return GRADIENT_DATA.get(steps)
