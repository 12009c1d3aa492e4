"""
blockicon/cli.py
Command-line interface for blockicon

Usage:
    python -m blockicon generate --seed alice --output alice.png
    python -m blockicon generate --seed alice --size 12 --scale 8 -o big.png
    python -m blockicon show --seed alice
    python -m blockicon show --seed alice --json
"""

import argparse
import json
import re
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .config import FORMAT_VERSION, load_defaults
from .logger import logger

CELL_GLYPHS = {0: ".", 1: "#"}
SPOT_GLYPH = "*"

MAX_STEM_LENGTH = 64
_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


def _build(args: argparse.Namespace):
    """Build an icon from parsed args. Returns (icon, builder) or None on bad input."""
    from .assemble import IconBuilder
    from .models import IconOptions

    if args.config and not Path(args.config).exists():
        print(f"ERROR: Config file not found: {args.config}")
        return None

    defaults = load_defaults(args.config)
    options = IconOptions(
        seed=args.seed,
        size=args.size,
        scale=args.scale,
        color=args.color,
        bg_color=args.bg_color,
        spot_color=args.spot_color,
    )
    builder = IconBuilder(options, defaults)
    try:
        icon = builder.build()
    except ValueError as e:
        print(f"ERROR: {e}")
        return None
    return icon, builder


def default_filename(seed: str) -> str:
    """
    Output name for an icon written without --output.

    Seeds are arbitrary text, so anything outside [A-Za-z0-9_-] collapses to
    "_". The name never contains a path separator or a leading dot.
    """
    stem = _UNSAFE_FILENAME_CHARS.sub("_", seed).strip("_")[:MAX_STEM_LENGTH]
    return f"{stem or 'icon'}.png"


def format_grid(grid) -> str:
    """Render a grid as text, one line per row."""
    return "\n".join(
        "".join(CELL_GLYPHS.get(int(v), SPOT_GLYPH) for v in row)
        for row in grid
    )


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate an icon and write it as PNG."""
    from .export import save_json, save_png
    from .colors import to_rgb

    built = _build(args)
    if built is None:
        return 1
    icon, builder = built

    for name in ("color", "bg_color", "spot_color"):
        try:
            to_rgb(getattr(icon, name))
        except ValueError:
            print(f"ERROR: Unrecognized {name.replace('_', '-')}: {getattr(icon, name)}")
            return 1

    output = Path(args.output) if args.output else Path(default_filename(icon.seed))
    save_png(icon, output)

    print(f"Seed:   {icon.seed!r}{' (generated)' if icon.seed_generated else ''}")
    print(f"Size:   {icon.size} cells x {icon.scale} px = {icon.pixel_size} px")
    print(f"Output: {output}")

    if args.json:
        json_path = output.with_suffix(".json")
        save_json(icon, json_path)
        print(f"JSON:   {json_path}")

    if args.verbose:
        report = builder.report
        print(f"Draws:  {report.color_draws} color + {report.bitmap_draws} bitmap")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Print an icon's grid and colors."""
    built = _build(args)
    if built is None:
        return 1
    icon, builder = built

    if args.json:
        print(json.dumps(icon.to_dict(), indent=2))
        return 0

    print(f"Seed:  {icon.seed!r}{' (generated)' if icon.seed_generated else ''}")
    print(f"Color: {icon.color}")
    print(f"Bg:    {icon.bg_color}")
    print(f"Spot:  {icon.spot_color}")
    print()
    print(format_grid(icon.grid))

    if args.verbose:
        report = builder.report
        print()
        print(f"Draws: {report.color_draws} color + {report.bitmap_draws} bitmap")
    return 0


def _add_icon_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--seed", "-s", type=str, help="Seed text (random if omitted)")
    parser.add_argument("--size", type=int, help="Cells per side (default 8)")
    parser.add_argument("--scale", type=int, help="Pixels per cell (default 4)")
    parser.add_argument("--color", type=str, help="Foreground color")
    parser.add_argument("--bg-color", type=str, help="Background color")
    parser.add_argument("--spot-color", type=str, help="Spot color")
    parser.add_argument("--config", "-c", type=str, help="JSON file with size/scale defaults")
    parser.add_argument("--json", "-j", action="store_true", help="Also emit JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug info")
    parser.add_argument("--log-file", type=str, help="Also write debug log to this file")


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="blockicon",
        description="Deterministic pixel-art identicons",
    )
    parser.add_argument(
        "--version", action="version",
        version=f"%(prog)s {__version__} (format {FORMAT_VERSION})"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    gen_parser = subparsers.add_parser("generate", help="Write an icon as PNG")
    _add_icon_arguments(gen_parser)
    gen_parser.add_argument("--output", "-o", type=str, help="Output .png path")
    gen_parser.set_defaults(func=cmd_generate)

    show_parser = subparsers.add_parser("show", help="Print an icon's grid and colors")
    _add_icon_arguments(show_parser)
    show_parser.set_defaults(func=cmd_show)

    args = parser.parse_args(argv)
    logger.configure(verbose=args.verbose, log_file=args.log_file)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
