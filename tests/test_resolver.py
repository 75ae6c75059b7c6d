import pytest

from better_gradient.resolver import (
    COLORS,
    STEPS,
    get_fade_class,
    get_fade_color_class,
    get_fade_direction_class,
    get_fade_easing_step_class,
    get_fade_step_class,
    get_simple_gradient_class,
    resolve_classes,
    resolve_spec_classes,
)
from better_gradient.config import FadeConfig
from better_gradient.easing import EASING_NAMES
from better_gradient.stylesheet import StylesheetHost
from better_gradient.types import GradientSpec
from better_gradient.utilities import register_utilities


def test_defaults_collapse():
    assert resolve_classes("blue", "b", 6, "ease-out-cubic") == ["fade-from-blue-500", "fade-to-b"]


def test_default_steps_custom_easing():
    assert resolve_classes("blue", "b", 6, "linear") == ["fade-from-blue-500", "fade-to-b", "fade-linear-6"]


def test_custom_steps_default_easing():
    assert resolve_classes("blue", "b", 12, "ease-out-cubic") == ["fade-from-blue-500", "fade-to-b", "fade-12"]


def test_custom_steps_custom_easing():
    assert resolve_classes("blue", "b", 12, "linear") == ["fade-from-blue-500", "fade-to-b", "fade-linear-12"]


@pytest.mark.parametrize(
    "steps, easing, expected",
    [
        (6, "ease-out-cubic", ""),
        (6, "ease-in-quad", "fade-ease-in-quad-6"),
        (2, "ease-out-cubic", "fade-2"),
        (24, "ease-in-out-quart", "fade-ease-in-out-quart-24"),
        (6, "bogus", ""),
        (12, "bogus", "fade-12"),
        (30, "ease-out-cubic", ""),
        (30, "linear", "fade-linear-6"),
        (1, "linear", "fade-linear-6"),
        ("abc", "linear", "fade-linear-6"),
    ],
)
def test_easing_step_table(steps, easing, expected):
    assert get_fade_easing_step_class(steps, easing) == expected


def test_direction_always_emitted():
    for direction in ["t", "b", "l", "r", "tl", "tr", "bl", "br"]:
        assert get_fade_direction_class(direction) == f"fade-to-{direction}"


def test_unknown_direction_falls_back_to_bottom():
    assert get_fade_direction_class("up") == "fade-to-b"
    assert get_fade_direction_class(None) == "fade-to-b"


def test_color_classes():
    for color in COLORS:
        assert get_fade_color_class(color) == f"fade-from-{color}-500"
    assert get_fade_color_class("black") == "fade-from-black"
    assert get_fade_color_class("white") == "fade-from-white"
    assert get_fade_color_class("slate-900") == "fade-from-slate-900"


def test_unknown_color_falls_back_to_blue():
    assert get_fade_color_class("chartreuse") == "fade-from-blue-500"
    assert get_fade_color_class(None) == "fade-from-blue-500"
    assert resolve_classes("chartreuse", "up") == ["fade-from-blue-500", "fade-to-b"]


def test_step_classes():
    assert get_fade_step_class(6) == ""
    assert get_fade_step_class(2) == "fade-2"
    assert get_fade_step_class("16") == "fade-16"
    assert get_fade_step_class(1) == ""
    assert get_fade_step_class(25) == ""
    assert get_fade_step_class("abc") == ""
    assert [get_fade_step_class(step) for step in STEPS] == [
        "fade-2", "fade-4", "", "fade-8", "fade-12", "fade-16", "fade-20", "fade-24",
    ]


def test_slate_uses_900_for_non_default_steps():
    assert resolve_classes("slate", "t", 12) == ["fade-from-slate-900", "fade-to-t", "fade-12"]
    assert resolve_classes("slate", "t", 6, "linear") == ["fade-from-slate-500", "fade-to-t", "fade-linear-6"]
    assert resolve_classes("slate", "t") == ["fade-from-slate-500", "fade-to-t"]


def test_get_fade_class_joins():
    assert get_fade_class("red", "tl", 8, "ease-in-cubic") == "fade-from-red-500 fade-to-tl fade-ease-in-cubic-8"
    assert get_fade_class("white", "r") == "fade-from-white fade-to-r"


def test_simple_gradient_class():
    assert get_simple_gradient_class("white", "t") == "bg-gradient-to-t from-white/100 to-white/0"
    assert get_simple_gradient_class("black", "br") == "bg-gradient-to-br from-black/100 to-black/0"
    assert get_simple_gradient_class("red", "zz") == "bg-gradient-to-b from-red-500/100 to-red-500/0"


def test_resolve_spec_classes_applies_fallbacks():
    spec = GradientSpec(color="chartreuse", direction="up", steps="abc", easing="bogus")
    assert resolve_spec_classes(spec) == ["fade-from-blue-500", "fade-to-b"]
    spec = GradientSpec(color="red", direction="tl", steps="8", easing="ease-in-cubic")
    assert resolve_spec_classes(spec) == ["fade-from-red-500", "fade-to-tl", "fade-ease-in-cubic-8"]


@pytest.fixture(scope="module")
def stylesheet():
    host = StylesheetHost()
    register_utilities(host, FadeConfig())
    return host


@pytest.mark.parametrize("easing", list(EASING_NAMES) + ["bogus"])
@pytest.mark.parametrize("steps", [1, 2, 6, 12, 24, 25, 30, 0, "abc"])
def test_every_resolved_class_has_a_rule(stylesheet, steps, easing):
    for color in COLORS + ["black", "white", "slate-900", "chartreuse"]:
        for direction in ["t", "br", "up"]:
            for css_class in resolve_classes(color, direction, steps, easing):
                assert stylesheet.resolve(css_class), css_class
