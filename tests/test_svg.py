from __future__ import annotations

import errno
import io
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

import fasttexture
from fasttexture import svg

SVG_NS = "{http://www.w3.org/2000/svg}"


def _write(path: Path, config: fasttexture.TextureConfig, seed: int = 0) -> int:
    return fasttexture.write_texture(path, config, fasttexture.plan(config, fasttexture.make_rng(seed)))


def test_header_viewbox_and_background_roundtrip(tmp_path: Path) -> None:
    config = fasttexture.TextureConfig(density_per_m2=300.0)
    out = tmp_path / "texture.svg"
    count = _write(out, config)
    assert count == config.marker_count

    root = ET.parse(out).getroot()
    assert root.tag == f"{SVG_NS}svg"
    assert root.get("viewBox") == "0 0 210 297"
    assert root.get("width") == "210mm"
    assert root.get("height") == "297mm"
    assert root.get("version") == "1.1"
    assert root.find(f"{SVG_NS}title").text == svg.SVG_TITLE
    assert root.find(f"{SVG_NS}desc").text == svg.SVG_DESC

    rect = root.find(f"{SVG_NS}rect")
    assert rect.get("fill") == "#7f7f7f"
    assert rect.get("width") == "210"
    assert rect.get("height") == "297"

    paths = root.findall(f"{SVG_NS}path")
    assert len(paths) == count


def test_document_structure_order(tmp_path: Path) -> None:
    out = tmp_path / "texture.svg"
    _write(out, fasttexture.TextureConfig(density_per_m2=100.0, background_lightness=5))
    text = out.read_text(encoding="utf-8")

    assert text.startswith('<?xml version="1.0" standalone="no"?>\n<!DOCTYPE svg PUBLIC')
    assert text.index("<svg ") < text.index("<title>") < text.index("<rect ") < text.index("<path ")
    assert text.rindex("<path ") < text.index("</svg>")
    assert text.endswith("</svg>")
    assert 'fill="#050505"' in text


def test_zero_markers_is_header_then_footer(tmp_path: Path) -> None:
    out = tmp_path / "empty.svg"
    count = _write(out, fasttexture.TextureConfig(density_per_m2=0.0))
    assert count == 0

    header = io.StringIO()
    svg.write_header(header, 210.0, 297.0, 127)
    text = out.read_text(encoding="utf-8")
    assert text == header.getvalue() + "</svg>"
    assert "<path" not in text


def test_marker_path_traces_twelve_transformed_corners() -> None:
    marker = fasttexture.MarkerDescriptor(x_mm=50.0, y_mm=60.0, rotation_turns=0.1, size_mm=9.0, lightness=171)
    buf = io.StringIO()
    svg.write_marker(buf, marker)
    text = buf.getvalue()

    assert text.startswith('  <path d="M ')
    assert '    fill="#ababab" />' in text

    d = svg.marker_path_data(marker)
    assert d.startswith("M ") and d.endswith(" z")
    pairs = d[2:-2].split(" ")
    assert len(pairs) == 12
    points = [tuple(float(v) for v in p.split(",")) for p in pairs]
    for got, expected in zip(points, marker.corners()):
        assert got == pytest.approx(tuple(expected), abs=1e-3)


def test_number_and_color_formatting() -> None:
    assert svg._svg_fmt(168.0) == "168"
    assert svg._svg_fmt(623.7) == "623.7"
    assert svg._svg_fmt(1.0 / 3.0) == "0.333333"
    assert svg._gray(0) == "#000000"
    assert svg._gray(10) == "#0a0a0a"
    assert svg._gray(254) == "#fefefe"


def test_unwritable_destination_raises_output_unavailable(tmp_path: Path) -> None:
    target = tmp_path / "missing_dir" / "texture.svg"
    with pytest.raises(fasttexture.OutputUnavailable) as excinfo:
        _write(target, fasttexture.TextureConfig(density_per_m2=10.0))
    assert excinfo.value.path == str(target)
    assert str(target) in str(excinfo.value)
    assert isinstance(excinfo.value, fasttexture.FastTextureError)
    assert not target.exists()


def test_failure_mid_stream_leaves_partial_file(tmp_path: Path) -> None:
    config = fasttexture.TextureConfig()
    out = tmp_path / "partial.svg"

    def markers():
        yield fasttexture.MarkerDescriptor(x_mm=10.0, y_mm=10.0, rotation_turns=0.0, size_mm=4.0, lightness=0)
        raise RuntimeError("planner failed")

    with pytest.raises(RuntimeError):
        fasttexture.write_texture(out, config, markers())

    text = out.read_text(encoding="utf-8")
    assert text.count("<path") == 1
    assert not text.endswith("</svg>")


def test_write_failure_mid_stream_raises_output_unavailable(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def disk_full(sink, marker) -> None:
        raise OSError(errno.ENOSPC, "No space left on device")

    monkeypatch.setattr(svg, "write_marker", disk_full)
    out = tmp_path / "full.svg"
    with pytest.raises(fasttexture.OutputUnavailable) as excinfo:
        _write(out, fasttexture.TextureConfig(density_per_m2=100.0))

    assert excinfo.value.action == "write"
    assert excinfo.value.path == str(out)
    assert f"Unable to write {out} for output" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)
    assert out.exists()
