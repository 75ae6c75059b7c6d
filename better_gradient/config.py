"""Plugin configuration: default step count, base color and palette."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .palette import flatten_colors
from .samples.palette import SAMPLE_PALETTE
from .stops.table import DEFAULT_STEPS
from .utils.default import int_or_none, value_or_default

logger = logging.getLogger(__name__)

THEME_KEY = "betterGradient"
DEFAULT_BASE_COLOR = "var(--color-background, white)"


@dataclass(frozen=True)
class FadeConfig:
    steps: int = DEFAULT_STEPS
    base_color: str = DEFAULT_BASE_COLOR
    colors: Mapping[str, Any] = field(default_factory=lambda: SAMPLE_PALETTE)
    legacy_directions: bool = True

    def __post_init__(self) -> None:
        steps = int_or_none(self.steps)
        if steps is None or steps < 1:
            logger.debug("invalid default step count %r, using %d", self.steps, DEFAULT_STEPS)
            steps = DEFAULT_STEPS
        object.__setattr__(self, "steps", steps)

    def flat_colors(self) -> Dict[str, str]:
        return flatten_colors(self.colors)

    @classmethod
    def from_theme(cls, theme: Optional[Mapping[str, Any]] = None) -> FadeConfig:
        """
        Build a config from a theme mapping.

        Reads `betterGradient.steps`, `betterGradient.baseColor`,
        `betterGradient.legacyDirections` and `colors`; missing keys keep
        their defaults.
        """
        theme = theme or {}
        options = theme.get(THEME_KEY) or {}
        if not isinstance(options, Mapping):
            options = {}
        colors = theme.get("colors")
        return cls(
            steps=value_or_default(options.get("steps"), DEFAULT_STEPS),
            base_color=value_or_default(options.get("baseColor"), DEFAULT_BASE_COLOR),
            colors=colors if isinstance(colors, Mapping) else SAMPLE_PALETTE,
            legacy_directions=bool(options.get("legacyDirections", True)),
        )


def load_config(path: Optional[Path] = None) -> FadeConfig:
    """Load a JSON theme file; a missing or unreadable file gives the defaults."""
    if path is None or not path.exists():
        return FadeConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.warning("could not read theme file %s, using defaults", path)
        return FadeConfig()

    if not isinstance(raw, Mapping):
        logger.warning("theme file %s is not a JSON object, using defaults", path)
        return FadeConfig()
    return FadeConfig.from_theme(raw)
