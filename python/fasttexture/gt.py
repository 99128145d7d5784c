"""Ground-truth sidecar for scoring a corner detector against a texture."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Sequence

from ._api import MarkerDescriptor, OutputUnavailable, TextureConfig

GT_SCHEMA = "fasttexture.gt.v1"


def ground_truth_dict(
    config: TextureConfig,
    markers: Sequence[MarkerDescriptor],
    seed: Optional[int] = None,
) -> dict[str, Any]:
    gt_markers = []
    for idx, marker in enumerate(markers):
        entry = {"index": idx}
        entry.update(marker.to_dict())
        gt_markers.append(entry)

    return {
        "schema": GT_SCHEMA,
        "config": config.to_dict(),
        "seed": seed,
        "n_markers": len(gt_markers),
        "markers": gt_markers,
    }


def write_ground_truth(
    path: str | Path,
    config: TextureConfig,
    markers: Sequence[MarkerDescriptor],
    seed: Optional[int] = None,
) -> dict[str, Any]:
    """Write marker centers and outline corners (page mm) as JSON."""
    gt = ground_truth_dict(config, markers, seed=seed)
    try:
        f = open(path, "w", encoding="utf-8")
    except OSError as e:
        raise OutputUnavailable(str(path), e.strerror) from e
    try:
        with f:
            json.dump(gt, f, indent=2)
    except OSError as e:
        raise OutputUnavailable(str(path), e.strerror, action="write") from e
    return gt
