import json

import pytest

from better_gradient.cli import build_parser, main
from better_gradient.css_generator import generate_css


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_stops(capsys):
    assert main(["stops", "6"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "oklch(from var(--fade-oklch) l c h / 1.00) 0%"
    assert lines[1] == "oklch(from var(--fade-oklch) l c h / 0.51) 20%"
    assert len(lines) == 6


def test_stops_json_reverse(capsys):
    assert main(["stops", "2", "--reverse", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == [{"opacity": 0.0, "position": 0.0}, {"opacity": 1.0, "position": 100.0}]


def test_classes(capsys):
    assert main(["classes", "--color", "blue", "--steps", "12", "--easing", "linear"]) == 0
    assert capsys.readouterr().out.strip() == "fade-from-blue-500 fade-to-b fade-linear-12"


def test_classes_defaults(capsys):
    assert main(["classes"]) == 0
    assert capsys.readouterr().out.strip() == "fade-from-blue-500 fade-to-b"


def test_classes_rejects_unknown_direction():
    with pytest.raises(SystemExit):
        main(["classes", "--direction", "up"])


def test_css_plain(capsys):
    assert main(["css", "--plain", "black", "--direction", "t", "--steps", "2"]) == 0
    assert capsys.readouterr().out == generate_css("black", "t", 2) + "\n"


def test_css_selected_classes(capsys):
    assert main(["css", "fade-to-b", "fade-to-t"]) == 0
    assert capsys.readouterr().out == (
        ".fade-to-b { --fade-angle: 180deg; }\n"
        ".fade-to-t { --fade-angle: 0deg; }\n"
    )


def test_css_with_theme_to_file(tmp_path, small_palette, capsys):
    theme = tmp_path / "theme.json"
    theme.write_text(json.dumps({"colors": small_palette}))
    out = tmp_path / "dist" / "fade.css"

    assert main(["css", "--theme", str(theme), "--output", str(out), "fade-from-white"]) == 0

    css = out.read_text(encoding="utf-8")
    assert css.startswith(".fade-from-white { --fade-oklch: #ffffff;")
    assert "wrote 1 rules" in capsys.readouterr().err


def test_easings(capsys):
    assert main(["easings"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 10
    assert lines[0].startswith("linear ")
    assert any(line.endswith("(default)") and line.startswith("ease-out-cubic") for line in lines)


def test_verbose_logs_fallbacks(capsys):
    assert main(["-v", "classes", "--easing", "bogus"]) == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == "fade-from-blue-500 fade-to-b"
    assert "bogus" in captured.err


def test_classes_out_of_range_steps_keep_easing(capsys):
    assert main(["classes", "--steps", "30", "--easing", "linear"]) == 0
    assert capsys.readouterr().out.strip() == "fade-from-blue-500 fade-to-b fade-linear-6"
