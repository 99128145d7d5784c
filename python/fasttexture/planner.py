"""Marker layout for plus textures.

Marker sizes are not drawn at random. They are interpolated linearly in
relative density (``1 / size**2``) from the largest marker down to the
smallest, so small markers are far more numerous than large ones. Position,
rotation and lightness are then drawn per marker from an injected
``numpy.random.RandomState``.
"""

from __future__ import annotations

from typing import Iterator, Optional

import numpy as np

from ._api import LIGHTNESS_GAP, MarkerDescriptor, TextureConfig


def make_rng(seed: Optional[int] = None) -> np.random.RandomState:
    """Create the generator used by :func:`plan`.

    ``seed=None`` seeds from OS entropy (or the clock), so runs differ.
    """
    return np.random.RandomState(seed)


def _uniform(rng: np.random.RandomState, lower: float, upper: float) -> float:
    # lower + span * u also behaves for inverted ranges (oversized markers).
    return lower + (upper - lower) * float(rng.random_sample())


def marker_size(config: TextureConfig, index: int, count: int) -> float:
    """Bounding-square edge (mm) of marker ``index`` out of ``count``.

    Sizes are interpolated linearly in relative density, largest first. A
    single marker gets the maximum size. Zero sizes are not rejected and
    yield inf/nan.
    """
    t = index / (count - 1) if count > 1 else 0.0

    with np.errstate(divide="ignore", invalid="ignore"):
        maximum_size = np.float64(config.maximum_size_mm)
        minimum_size = np.float64(config.minimum_size_mm)
        density_max = 1.0 / (maximum_size * maximum_size)
        density_min = 1.0 / (minimum_size * minimum_size)
        relative_density = t * (density_min - density_max) + density_max
        return float(np.sqrt(1.0 / relative_density))


def marker_sizes(config: TextureConfig) -> np.ndarray:
    """Sizes of every marker as one array, same values as :func:`marker_size`."""
    n = config.marker_count
    return np.fromiter((marker_size(config, i, n) for i in range(n)), dtype=np.float64, count=n)


def draw_lightness(rng: np.random.RandomState, background_lightness: int) -> int:
    """Random gray level kept out of the band just around the background."""
    lightness = int(rng.randint(0, 255 - LIGHTNESS_GAP))
    if lightness > background_lightness - LIGHTNESS_GAP // 2:
        lightness += LIGHTNESS_GAP
    return lightness


def plan(config: TextureConfig, rng: np.random.RandomState) -> Iterator[MarkerDescriptor]:
    """Lazily yield ``config.marker_count`` markers in drawing order.

    Random values are drawn per marker in the order x, y, rotation,
    lightness. Sizes are computed per index, so nothing is allocated up
    front and the planner does no I/O.
    """
    n = config.marker_count
    for i in range(n):
        size = marker_size(config, i, n)
        half_size = size / 2.0
        x = _uniform(rng, half_size, config.width_mm - half_size)
        y = _uniform(rng, half_size, config.height_mm - half_size)
        rotation = _uniform(rng, -0.25, 0.25)
        lightness = draw_lightness(rng, config.background_lightness)
        yield MarkerDescriptor(
            x_mm=x,
            y_mm=y,
            rotation_turns=rotation,
            size_mm=size,
            lightness=lightness,
        )
