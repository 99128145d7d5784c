"""Streaming SVG writer for plus textures.

The document is written in three phases on an open text sink: header with
the gray background, one ``<path>`` per marker, footer. Nothing is buffered,
so arbitrarily dense textures are written in constant memory.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Iterable

from ._api import MarkerDescriptor, OutputUnavailable, TextureConfig

SVG_TITLE = "University of Tokyo texture generator"
SVG_DESC = "Generated texture for FAST corner detector"


def _svg_fmt(x: float) -> str:
    # Six significant digits, same as a default iostream.
    return f"{float(x):g}"


def _gray(lightness: int) -> str:
    channel = f"{int(lightness):02x}"
    return f"#{channel}{channel}{channel}"


def write_header(sink: IO[str], width: float, height: float, background_lightness: int) -> None:
    """Write the preamble, the ``<svg>`` root (1 user unit = 1 mm) and the background."""
    w = _svg_fmt(width)
    h = _svg_fmt(height)
    sink.write('<?xml version="1.0" standalone="no"?>\n')
    sink.write('<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN"\n')
    sink.write('    "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n')
    sink.write("\n")
    sink.write(f'<svg width="{w}mm" height="{h}mm" viewBox="0 0 {w} {h}"\n')
    sink.write('    xmlns="http://www.w3.org/2000/svg" version="1.1">\n')
    sink.write("\n")
    sink.write(f"  <title>{SVG_TITLE}</title>\n")
    sink.write(f"  <desc>{SVG_DESC}</desc>\n")
    sink.write("\n")
    sink.write(f'  <rect width="{w}" height="{h}" fill="{_gray(background_lightness)}" />\n')
    sink.write("\n")


def marker_path_data(marker: MarkerDescriptor) -> str:
    """Closed ``d`` attribute tracing the marker outline."""
    points = " ".join(f"{_svg_fmt(x)},{_svg_fmt(y)}" for x, y in marker.corners())
    return f"M {points} z"


def write_marker(sink: IO[str], marker: MarkerDescriptor) -> None:
    sink.write(f'  <path d="{marker_path_data(marker)}"\n')
    sink.write(f'    fill="{_gray(marker.lightness)}" />\n')
    sink.write("\n")


def write_footer(sink: IO[str]) -> None:
    sink.write("</svg>")


def write_texture(
    path: str | Path,
    config: TextureConfig,
    markers: Iterable[MarkerDescriptor],
) -> int:
    """Write a complete texture to ``path`` and return the number of markers.

    Raises :class:`OutputUnavailable` when the file cannot be opened or a
    write fails. A file left half written is not removed.
    """
    try:
        f = open(path, "w", encoding="utf-8")
    except OSError as e:
        raise OutputUnavailable(str(path), e.strerror) from e

    count = 0
    try:
        with f:
            write_header(f, config.width_mm, config.height_mm, config.background_lightness)
            for marker in markers:
                write_marker(f, marker)
                count += 1
            write_footer(f)
    except OSError as e:
        raise OutputUnavailable(str(path), e.strerror, action="write") from e
    return count
