#!/usr/bin/env python3
"""Generate a plus-marker SVG texture for FAST corner detector tests.

Run from repository root after ``pip install -e .``:
    python tools/gen_texture.py -f tools/out/texture.svg --seed 1 \
        --gt_json tools/out/texture_gt.json
"""

import sys

from fasttexture.cli import main

if __name__ == "__main__":
    sys.exit(main())
