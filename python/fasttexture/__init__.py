"""fasttexture: random plus-marker SVG textures.

Printable test patterns for evaluating FAST-style corner detectors: gray
plus markers of graded size, random pose and contrasting lightness on a
uniform background.
"""

from ._api import (
    LIGHTNESS_GAP,
    PLUS_OUTLINE,
    FastTextureError,
    MarkerDescriptor,
    OutputUnavailable,
    TextureConfig,
    __version__,
)
from .gt import ground_truth_dict, write_ground_truth
from .planner import draw_lightness, make_rng, marker_size, marker_sizes, plan
from .svg import write_footer, write_header, write_marker, write_texture

__all__ = [
    "TextureConfig",
    "MarkerDescriptor",
    "FastTextureError",
    "OutputUnavailable",
    "LIGHTNESS_GAP",
    "PLUS_OUTLINE",
    "make_rng",
    "marker_size",
    "marker_sizes",
    "draw_lightness",
    "plan",
    "write_header",
    "write_marker",
    "write_footer",
    "write_texture",
    "ground_truth_dict",
    "write_ground_truth",
    "__version__",
]
