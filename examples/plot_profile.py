#!/usr/bin/env python3
"""Plan a texture and plot its marker size/lightness profile.

Example:
  python examples/plot_profile.py --density 2000 --out profile.png
"""

from __future__ import annotations

import argparse
from pathlib import Path

import fasttexture
from fasttexture import viz


def main() -> None:
    parser = argparse.ArgumentParser(description="Plot the profile of a planned texture")
    parser.add_argument("--density", type=float, default=10000.0, help="Markers per square meter")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--out", type=Path, default=None, help="Optional output PNG path")
    args = parser.parse_args()

    config = fasttexture.TextureConfig(density_per_m2=args.density)
    markers = list(fasttexture.plan(config, fasttexture.make_rng(args.seed)))
    print(f"Planned markers: {len(markers)}")

    viz.plot_profile(markers, config=config, out=args.out)
    if args.out is not None:
        print(f"Wrote {args.out}")


if __name__ == "__main__":
    main()
