from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple, Union

from ..easing import DEFAULT_EASING, resolve_easing_name
from ..utils.default import int_or_none
from ..utils.num_utils import to_compact, to_fixed
from .direction_type import DEFAULT_DIRECTION, Direction, to_direction

OKLCH_FUNCTION = "oklch(from var(--fade-oklch) l c h / {opacity})"

DEFAULT_STEPS = 6


@dataclass(frozen=True)
class StepProfile:
    """
    Authored stop positions and opacities for one step count.

    positions are percentages from 0 to 100, opacities fall from 1.0 to 0.0.
    """

    steps: int
    positions: Tuple[float, ...]
    opacities: Tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.positions) != len(self.opacities):
            raise ValueError(
                f"step profile {self.steps}: {len(self.positions)} positions "
                f"but {len(self.opacities)} opacities"
            )
        if len(self.positions) < 2:
            raise ValueError(f"step profile {self.steps} needs at least two stops")
        if self.positions[0] != 0 or self.positions[-1] != 100:
            raise ValueError(f"step profile {self.steps} must span 0% to 100%")
        if any(b < a for a, b in zip(self.positions, self.positions[1:])):
            raise ValueError(f"step profile {self.steps} positions must be non-decreasing")
        if any(not 0.0 <= o <= 1.0 for o in self.opacities):
            raise ValueError(f"step profile {self.steps} opacities must lie in [0, 1]")

    def __len__(self) -> int:
        return len(self.positions)


@dataclass(frozen=True)
class GradientStop:
    """One (opacity, position%) pair, both rounded to two decimals."""

    opacity: float
    position: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.opacity, self.position

    def format(self, color_function: str = OKLCH_FUNCTION) -> str:
        """
        Render the stop as a CSS color-stop token.

        The opacity always carries two decimals; the position drops trailing
        zeros (20%, 16.67%) to match the published utility output.

        Args:
            color_function: Color expression with an `{opacity}` placeholder
                for the alpha channel

        Returns:
            e.g. 'oklch(from var(--fade-oklch) l c h / 0.51) 20%'
        """
        color = color_function.format(opacity=to_fixed(self.opacity))
        return f"{color} {to_compact(self.position)}%"


@dataclass(frozen=True)
class GradientSpec:
    """A single fade request: what to draw, in which direction, how smooth."""

    color: str
    direction: Union[Direction, str] = DEFAULT_DIRECTION
    steps: Union[int, str] = DEFAULT_STEPS
    easing: str = DEFAULT_EASING
    reverse: bool = False

    def normalized(self) -> GradientSpec:
        """
        Copy with the direction, easing and step fallbacks applied.

        Unusable step counts (non-numeric or below 1) become DEFAULT_STEPS.
        Colors are kept as given; the class resolver maps unknown colors.
        """
        steps = int_or_none(self.steps)
        if steps is None or steps < 1:
            steps = DEFAULT_STEPS
        return replace(
            self,
            steps=steps,
            direction=to_direction(self.direction),
            easing=resolve_easing_name(self.easing),
        )
