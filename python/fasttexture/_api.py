"""Typed data model shared by the planner, the SVG writer and the CLI.

Typical flow:
1. Build a :class:`TextureConfig` (defaults describe an A4 page).
2. Call :func:`fasttexture.plan` with an explicitly seeded random generator.
3. Stream the resulting :class:`MarkerDescriptor` values into
   :func:`fasttexture.write_texture`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

import numpy as np

__version__ = "0.1.0"

# Minimum lightness separation between a marker and the page background.
LIGHTNESS_GAP = 40

# Plus outline inscribed in the unit square, arms 1/3 wide. Vertex order
# traces the outline; changing it self-intersects the polygon.
PLUS_OUTLINE = np.array(
    [
        [-0.5, 0.5 / 3.0],
        [-0.5 / 3.0, 0.5 / 3.0],
        [-0.5 / 3.0, 0.5],
        [0.5 / 3.0, 0.5],
        [0.5 / 3.0, 0.5 / 3.0],
        [0.5, 0.5 / 3.0],
        [0.5, -0.5 / 3.0],
        [0.5 / 3.0, -0.5 / 3.0],
        [0.5 / 3.0, -0.5],
        [-0.5 / 3.0, -0.5],
        [-0.5 / 3.0, -0.5 / 3.0],
        [-0.5, -0.5 / 3.0],
    ],
    dtype=np.float64,
)


class FastTextureError(Exception):
    """Base class for errors raised by fasttexture."""


class OutputUnavailable(FastTextureError):
    """The texture destination could not be opened or written."""

    def __init__(self, path: str, reason: str | None = None, action: str = "open") -> None:
        self.path = path
        self.reason = reason
        self.action = action
        message = f"Unable to {action} {path} for output"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


def _require_mapping(value: Any, *, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeError(f"{name} must be a mapping")
    return value


@dataclass(slots=True)
class TextureConfig:
    """Page geometry and marker population of one texture.

    Values are taken as given: non-positive or inconsistent numbers flow into
    the geometry and may produce an empty or degenerate texture.
    """

    width_mm: float = 210.0
    height_mm: float = 297.0
    density_per_m2: float = 10000.0
    minimum_size_mm: float = 2.0
    background_lightness: int = 127

    @property
    def marker_count(self) -> int:
        """Number of markers, ``density * area`` rounded half up."""
        n = int(self.density_per_m2 * (self.width_mm / 1000.0) * (self.height_mm / 1000.0) + 0.5)
        return max(n, 0)

    @property
    def maximum_size_mm(self) -> float:
        return 0.8 * min(self.width_mm, self.height_mm)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TextureConfig":
        data = _require_mapping(data, name="data")
        defaults = cls()
        return cls(
            width_mm=float(data.get("width_mm", defaults.width_mm)),
            height_mm=float(data.get("height_mm", defaults.height_mm)),
            density_per_m2=float(data.get("density_per_m2", defaults.density_per_m2)),
            minimum_size_mm=float(data.get("minimum_size_mm", defaults.minimum_size_mm)),
            background_lightness=int(data.get("background_lightness", defaults.background_lightness)),
        )

    @classmethod
    def from_args(cls, args: Any) -> "TextureConfig":
        """Build a config from an ``argparse.Namespace`` produced by the CLI."""
        return cls(
            width_mm=float(args.page_width),
            height_mm=float(args.page_height),
            density_per_m2=float(args.density),
            minimum_size_mm=float(args.min_width),
            background_lightness=int(args.background),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "width_mm": float(self.width_mm),
            "height_mm": float(self.height_mm),
            "density_per_m2": float(self.density_per_m2),
            "minimum_size_mm": float(self.minimum_size_mm),
            "background_lightness": int(self.background_lightness),
        }


@dataclass(frozen=True, slots=True)
class MarkerDescriptor:
    """One plus marker: center, rotation (turns), bounding size and gray level."""

    x_mm: float
    y_mm: float
    rotation_turns: float
    size_mm: float
    lightness: int

    @property
    def rotation_rad(self) -> float:
        return self.rotation_turns * math.pi

    def corners(self) -> np.ndarray:
        """Outline vertices in page millimeters, shape ``(12, 2)``.

        Each unit-plus vertex is rotated, scaled by ``size_mm`` and moved to
        the marker center.
        """
        ca = math.cos(self.rotation_rad)
        sa = math.sin(self.rotation_rad)
        rot = np.array([[ca, -sa], [sa, ca]], dtype=np.float64)
        return (PLUS_OUTLINE @ rot.T) * self.size_mm + np.array([self.x_mm, self.y_mm])

    def to_dict(self) -> dict[str, Any]:
        return {
            "center_mm": [float(self.x_mm), float(self.y_mm)],
            "size_mm": float(self.size_mm),
            "rotation_turns": float(self.rotation_turns),
            "lightness": int(self.lightness),
            "corners_mm": [[float(x), float(y)] for x, y in self.corners()],
        }
