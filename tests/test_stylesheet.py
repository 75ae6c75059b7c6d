import pytest

from better_gradient.config import FadeConfig
from better_gradient.stops.generator import gradient_stops_string, linear_gradient
from better_gradient.stylesheet import StylesheetHost, escape_class
from better_gradient.utilities import fade_step_utility, register_utilities


@pytest.fixture
def host(small_palette):
    stylesheet = StylesheetHost()
    register_utilities(stylesheet, FadeConfig(colors=small_palette))
    return stylesheet


def test_escape_class():
    assert escape_class("fade-to-b") == "fade-to-b"
    assert escape_class("fade-[7]") == "fade-\\[7\\]"
    assert escape_class("fade-[3.5]") == "fade-\\[3\\.5\\]"


def test_dynamic_prefixes_longest_first(host):
    assert host.dynamic_prefixes == ["fade-ease", "fade"]


def test_render_direction_rule(host):
    assert host.render(["fade-to-b"]) == ".fade-to-b { --fade-angle: 180deg; }\n"


def test_resolve_static(host):
    assert host.resolve("fade-tl") == {"--fade-angle": "315deg"}
    assert host.resolve("fade-from-blue-500")["--fade-oklch"] == "#3b82f6"


def test_resolve_dynamic_step(host):
    assert host.resolve("fade-12") == fade_step_utility("12")
    assert host.resolve("fade-99") is None
    assert host.resolve("fade-1") is None


def test_resolve_dynamic_easing(host):
    style = host.resolve("fade-ease-linear")
    assert style["--fade-easing"] == "linear"
    assert style["background-image"] == linear_gradient(
        gradient_stops_string(6, easing="linear"), important=True
    )


def test_resolve_arbitrary_values(host):
    assert host.resolve("fade-[7]") == fade_step_utility("7")
    assert host.resolve("fade-[30]") == fade_step_utility("30")
    assert host.resolve("fade-ease-[bogus]") is None
    assert host.resolve("fade-ease-[linear]")["--fade-easing"] == "linear"


def test_resolve_unknown(host):
    assert host.resolve("fade-from-teal-500") is None
    assert host.resolve("bg-red-500") is None


def test_empty_declarations_render_nothing(host):
    assert host.render(["fade-[0]"]) == ""
    assert host.render(["fade-[abc]"]) == ""


def test_render_skips_unknown_and_duplicates(host):
    css = host.render(["fade-to-t", "nope", "fade-to-t", "fade-to-r"])
    assert css == (
        ".fade-to-t { --fade-angle: 0deg; }\n"
        ".fade-to-r { --fade-angle: 90deg; }\n"
    )


def test_render_escapes_arbitrary_selector(host):
    css = host.render(["fade-[7]"])
    assert css.startswith(".fade-\\[7\\] { background-image: linear-gradient(")
    assert css.endswith(" !important; }\n")


def test_render_everything(host):
    css = host.render()
    lines = css.splitlines()
    assert len(lines) == len(host.all_class_names())
    assert ".fade-to-b { --fade-angle: 180deg; }" in lines
    assert any(line.startswith(".fade-ease-ease-in-quad {") for line in lines)
    assert any(line.startswith(".fade-24 {") for line in lines)


def test_register_static_merges():
    stylesheet = StylesheetHost()
    stylesheet.register_static("fade", {"a": "1", "b": "2"})
    stylesheet.register_static("fade", {"b": "3"})
    assert stylesheet.resolve("fade") == {"a": "1", "b": "3"}
    assert stylesheet.static_names == ["fade"]


def test_empty_host_renders_empty_string():
    assert StylesheetHost().render() == ""


def test_easing_names_keep_their_own_prefix(host):
    assert host.resolve("fade-ease-ease-in-cubic")["--fade-easing"] == "ease-in-cubic"
    assert host.resolve("fade-ease-in-cubic") is None
    assert host.resolve("fade-ease-in-cubic-12") is not None
