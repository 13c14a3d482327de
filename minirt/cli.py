"""Command line entry point: render a scene file to a PPM image."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from minirt.parser import ParseError, load_scene
from minirt.render import HEIGHT, WIDTH, render


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minirt", description="Render a .rt scene description to a PPM image."
    )
    parser.add_argument("scene", help="scene file with the .rt suffix")
    parser.add_argument("-o", "--output", help="image file to write (default: scene name with .ppm)")
    parser.add_argument("--width", type=_positive, default=WIDTH, help="image width in pixels")
    parser.add_argument("--height", type=_positive, default=HEIGHT, help="image height in pixels")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse the scene, render it and write the image; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        scene = load_scene(args.scene)
    except ParseError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"{args.scene}: {exc.strerror or exc}", file=sys.stderr)
        return 1

    output = Path(args.output) if args.output else Path(args.scene).with_suffix(".ppm")
    image = render(scene, args.width, args.height)
    try:
        image.save_ppm(output)
    except OSError as exc:
        print(f"{output}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())