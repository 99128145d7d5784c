"""Visualization helpers for planned textures.

Requires `matplotlib` (install with `fasttexture[viz]`). The import is
deferred until a plot is requested.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from ._api import LIGHTNESS_GAP, MarkerDescriptor, TextureConfig


def _load_matplotlib(out: str | Path | None):
    import matplotlib

    if out is not None:
        matplotlib.use("Agg")

    import matplotlib.pyplot as plt

    return plt


def plot_profile(
    markers: Sequence[MarkerDescriptor],
    config: Optional[TextureConfig] = None,
    out: str | Path | None = None,
) -> None:
    """Plot marker size against drawing order and the lightness histogram.

    Parameters
    ----------
    markers:
        Planned markers, in the order they are drawn.
    config:
        Optional texture config. When given, the size limits and the
        background band that markers avoid are drawn as guides.
    out:
        Optional output image path. If omitted, opens an interactive window.
    """

    plt = _load_matplotlib(out)

    sizes = np.array([m.size_mm for m in markers], dtype=np.float64)
    lightness = np.array([m.lightness for m in markers], dtype=np.int64)

    fig, (ax_size, ax_light) = plt.subplots(1, 2, figsize=(10, 4))

    ax_size.plot(np.arange(len(sizes)), sizes, "-", color="black", linewidth=1.0)
    ax_size.set_xlabel("marker index")
    ax_size.set_ylabel("size (mm)")
    if len(sizes) and np.all(sizes > 0):
        ax_size.set_yscale("log")
    if config is not None:
        ax_size.axhline(config.maximum_size_mm, color="tab:blue", linestyle="--", linewidth=0.8)
        ax_size.axhline(config.minimum_size_mm, color="tab:red", linestyle="--", linewidth=0.8)

    ax_light.hist(lightness, bins=np.arange(0, 257, 8), color="gray", edgecolor="black")
    ax_light.set_xlabel("lightness")
    ax_light.set_ylabel("markers")
    ax_light.set_xlim(0, 256)
    if config is not None:
        bg = config.background_lightness
        ax_light.axvspan(bg - LIGHTNESS_GAP // 2, bg + LIGHTNESS_GAP // 2, color="tab:orange", alpha=0.3)

    fig.suptitle(f"{len(sizes)} markers")
    fig.tight_layout()

    if out is None:
        plt.show()
        return

    out_path = Path(out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=100)
    plt.close(fig)
