"""Command-line front-end: ``fasttexture-gen`` / ``python tools/gen_texture.py``.

Usage:
    fasttexture-gen -f texture.svg
    fasttexture-gen -f a3.svg -pw 297 -ph 420 -d 5000 -mw 3 -bl 200 --seed 7
    fasttexture-gen -f texture.svg --gt_json texture_gt.json --plot profile.png
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from ._api import OutputUnavailable, TextureConfig
from .gt import write_ground_truth
from .planner import make_rng, plan
from .svg import write_texture

BANNER = "University of Tokyo texture generator for FAST corner detector"


def build_parser() -> argparse.ArgumentParser:
    defaults = TextureConfig()
    parser = argparse.ArgumentParser(
        prog="fasttexture-gen",
        description="Generate a random plus-marker SVG texture for FAST corner detection tests",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("-f", "--out", type=str, default="texture.svg", help="Output SVG filename")
    parser.add_argument(
        "-pw", "--page_width", type=float, default=defaults.width_mm, help="Page width (mm)"
    )
    parser.add_argument(
        "-ph", "--page_height", type=float, default=defaults.height_mm, help="Page height (mm)"
    )
    parser.add_argument(
        "-d",
        "--density",
        type=float,
        default=defaults.density_per_m2,
        help="Marker density (markers per square meter)",
    )
    parser.add_argument(
        "-mw",
        "--min_width",
        type=float,
        default=defaults.minimum_size_mm,
        help="Minimum marker width (mm)",
    )
    parser.add_argument(
        "-bl",
        "--background",
        type=int,
        default=defaults.background_lightness,
        help="Background lightness (0-255)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed; when omitted the clock seeds it and every run differs",
    )
    parser.add_argument(
        "--gt_json",
        type=str,
        default=None,
        help="Also write marker centers and outline corners as ground-truth JSON",
    )
    parser.add_argument(
        "--plot",
        type=str,
        default=None,
        help="Also write a size/lightness profile plot (requires matplotlib)",
    )
    return parser


def print_banner() -> None:
    print()
    print(BANNER)
    print("-" * len(BANNER))
    print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    print_banner()
    parser = build_parser()
    args = parser.parse_args(argv)
    print("Use -h to see extra options.")
    print()

    config = TextureConfig.from_args(args)
    markers = plan(config, make_rng(args.seed))
    if args.gt_json is not None or args.plot is not None:
        markers = list(markers)

    try:
        count = write_texture(args.out, config, markers)
        if args.gt_json is not None:
            write_ground_truth(args.gt_json, config, markers, seed=args.seed)
            print(f"Ground truth written to {args.gt_json}")
    except OutputUnavailable as e:
        print(e)
        return 1

    if args.plot is not None:
        from .viz import plot_profile

        plot_profile(markers, config=config, out=args.plot)
        print(f"Profile plot written to {args.plot}")

    print(f"DONE: Drew {count} pluses in file {args.out}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
