"""Better Gradient: eased CSS gradient fade utilities."""

import logging

from .easing import (
    DEFAULT_EASING,
    EASING_FUNCTIONS,
    EASING_NAMES,
    get_easing,
    is_easing,
    resolve_easing_name,
)
from .types import (
    Direction,
    DIRECTION_ANGLES,
    DEFAULT_DIRECTION,
    to_direction,
    direction_angle,
    StepProfile,
    GradientStop,
    GradientSpec,
    OKLCH_FUNCTION,
)
from .stops import (
    GRADIENT_DATA,
    SUPPORTED_STEPS,
    DEFAULT_STEPS,
    lookup,
    generate_gradient_stops,
    format_gradient_stops,
    gradient_stops_string,
    linear_gradient,
)
from .palette import flatten_colors
from .resolver import (
    get_fade_color_class,
    get_fade_direction_class,
    get_fade_step_class,
    get_fade_easing_step_class,
    resolve_classes,
    resolve_spec_classes,
    get_fade_class,
    get_simple_gradient_class,
)
from .css_generator import generate_css, get_gradient_data
from .config import FadeConfig, load_config
from .utilities import (
    UtilityHost,
    build_static_utilities,
    fade_step_utility,
    fade_easing_utility,
    register_utilities,
)
from .stylesheet import StylesheetHost

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # easing
    "DEFAULT_EASING",
    "EASING_FUNCTIONS",
    "EASING_NAMES",
    "get_easing",
    "is_easing",
    "resolve_easing_name",
    # types
    "Direction",
    "DIRECTION_ANGLES",
    "DEFAULT_DIRECTION",
    "to_direction",
    "direction_angle",
    "StepProfile",
    "GradientStop",
    "GradientSpec",
    "OKLCH_FUNCTION",
    # stops
    "GRADIENT_DATA",
    "SUPPORTED_STEPS",
    "DEFAULT_STEPS",
    "lookup",
    "generate_gradient_stops",
    "format_gradient_stops",
    "gradient_stops_string",
    "linear_gradient",
    # class names
    "flatten_colors",
    "get_fade_color_class",
    "get_fade_direction_class",
    "get_fade_step_class",
    "get_fade_easing_step_class",
    "resolve_classes",
    "resolve_spec_classes",
    "get_fade_class",
    "get_simple_gradient_class",
    "generate_css",
    "get_gradient_data",
    # utilities
    "FadeConfig",
    "load_config",
    "UtilityHost",
    "build_static_utilities",
    "fade_step_utility",
    "fade_easing_utility",
    "register_utilities",
    "StylesheetHost",
    "__version__",
]
