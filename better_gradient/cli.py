"""Command line entry points: stop tables, class names and stylesheet output."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_config
from .css_generator import generate_css
from .easing import DEFAULT_EASING, EASING_LABELS, EASING_NAMES
from .logging_setup import configure_logging
from .resolver import resolve_spec_classes
from .stops.generator import format_gradient_stops, generate_gradient_stops
from .stops.table import DEFAULT_STEPS
from .stylesheet import StylesheetHost
from .types.direction_type import DEFAULT_DIRECTION, Direction
from .types.stop_types import GradientSpec
from .utilities import register_utilities


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2))


def cmd_stops(args: argparse.Namespace) -> int:
    stops = generate_gradient_stops(args.steps, reverse=args.reverse, easing=args.easing)
    if args.json:
        _print_json([{"opacity": stop.opacity, "position": stop.position} for stop in stops])
    else:
        for token in format_gradient_stops(stops):
            print(token)
    return 0


def cmd_classes(args: argparse.Namespace) -> int:
    spec = GradientSpec(args.color, args.direction, args.steps, args.easing)
    print(" ".join(resolve_spec_classes(spec)))
    return 0


def cmd_css(args: argparse.Namespace) -> int:
    if args.plain:
        print(generate_css(args.plain, args.direction, args.steps))
        return 0

    config = load_config(Path(args.theme) if args.theme else None)
    host = StylesheetHost()
    register_utilities(host, config)
    css = host.render(args.classes or None)

    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(css, encoding="utf-8")
        print(f"wrote {len(css.splitlines())} rules to {out}", file=sys.stderr)
    else:
        sys.stdout.write(css)
    return 0


def cmd_easings(_args: argparse.Namespace) -> int:
    for name in EASING_NAMES:
        marker = " (default)" if name == DEFAULT_EASING else ""
        print(f"{name:<20} {EASING_LABELS[name]}{marker}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="better-gradient", description="Eased CSS gradient fade utilities")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log fallbacks and debug output")
    sub = parser.add_subparsers(dest="command", required=True)

    directions = [d.value for d in Direction]

    stops_cmd = sub.add_parser("stops", help="Print gradient stops")
    stops_cmd.add_argument("steps", type=int, nargs="?", default=DEFAULT_STEPS)
    stops_cmd.add_argument("--easing", default=DEFAULT_EASING)
    stops_cmd.add_argument("--reverse", action="store_true", help="Fade from transparent to color")
    stops_cmd.add_argument("--json", action="store_true", help="Print (opacity, position) pairs as JSON")
    stops_cmd.set_defaults(func=cmd_stops)

    classes_cmd = sub.add_parser("classes", help="Resolve fade utility class names")
    classes_cmd.add_argument("--color", default="blue")
    classes_cmd.add_argument("--direction", default=DEFAULT_DIRECTION.value, choices=directions)
    classes_cmd.add_argument("--steps", type=int, default=DEFAULT_STEPS)
    classes_cmd.add_argument("--easing", default=DEFAULT_EASING)
    classes_cmd.set_defaults(func=cmd_classes)

    css_cmd = sub.add_parser("css", help="Render the fade utility stylesheet")
    css_cmd.add_argument("--theme", default=None, help="JSON theme with 'colors' and 'betterGradient'")
    css_cmd.add_argument("--output", default=None, help="Write to a file instead of stdout")
    css_cmd.add_argument("classes", nargs="*", help="Only render these class names")
    css_cmd.add_argument(
        "--plain",
        choices=["white", "black"],
        default=None,
        help="Print a standalone hsla() gradient instead of utilities",
    )
    css_cmd.add_argument("--direction", default=DEFAULT_DIRECTION.value, choices=directions)
    css_cmd.add_argument("--steps", type=int, default=DEFAULT_STEPS)
    css_cmd.set_defaults(func=cmd_css)

    easings_cmd = sub.add_parser("easings", help="List easing curves")
    easings_cmd.set_defaults(func=cmd_easings)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
