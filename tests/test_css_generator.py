from better_gradient.css_generator import generate_css, get_gradient_data
from better_gradient.stops.table import GRADIENT_DATA


def test_white_two_steps_to_top():
    assert generate_css("white", "t", 2) == (
        "linear-gradient(\n"
        "  0deg,\n"
        "    hsla(0, 0%, 100%, 1.00) 0%,\n"
        "    hsla(0, 0%, 100%, 0.00) 100%\n"
        ")"
    )


def test_black_uses_black_hsla():
    css = generate_css("black", "r", 6)
    assert css.startswith("linear-gradient(\n  90deg,\n")
    assert "    hsla(0, 0%, 0%, 0.51) 20%," in css


def test_unknown_color_and_direction_fall_back():
    assert generate_css("teal", "sideways", 2) == generate_css("white", "b", 2)
    assert "180deg" in generate_css("white", "sideways", 2)


def test_fallback_steps_use_synthesized_positions():
    css = generate_css("white", "b", 30)
    assert "hsla(0, 0%, 100%, 1.00) 0%" in css
    assert " 3.33%," in css
    assert css.count("hsla(") == 31


def test_no_stops_no_css():
    assert generate_css("white", "b", 0) == ""
    assert generate_css("white", "b", "x") == ""


def test_gradient_data():
    assert get_gradient_data(6) is GRADIENT_DATA[6]
    synthesized = get_gradient_data(30)
    assert len(synthesized) == 31
    assert synthesized.positions[0] == 0 and synthesized.positions[-1] == 100
    assert synthesized.opacities[0] == 1.0 and synthesized.opacities[-1] == 0.0
    assert get_gradient_data(1).positions == (0.0, 100.0)
    assert get_gradient_data(0) is None
    assert get_gradient_data("abc") is None
