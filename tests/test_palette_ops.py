"""Tests for pmode_paint.palette_ops."""

import pytest

from pmode_paint.palette_ops import (
    PaletteError,
    build_palette,
    hex_to_rgb,
    palette_for_set,
    rgb_to_hex,
    write_act,
)


def test_builtin_sets():
    first = palette_for_set(0)
    second = palette_for_set(1)
    assert first.colors == ((0, 255, 0), (255, 0, 0), (255, 255, 0), (0, 0, 255))
    assert second.colors[3] == (255, 165, 0)
    assert first.names[0] == "GREEN"
    assert first.size == 4
    assert second.hex_colors() == ["#F5F5F5", "#00FFFF", "#FF00FF", "#FFA500"]


def test_unknown_set():
    with pytest.raises(PaletteError):
        palette_for_set(2)


def test_hex_helpers():
    assert hex_to_rgb("#ffa500") == (255, 165, 0)
    assert hex_to_rgb(" 00FF00 ") == (0, 255, 0)
    assert rgb_to_hex((1, 2, 255)) == "#0102FF"
    with pytest.raises(PaletteError):
        hex_to_rgb("#12345")
    with pytest.raises(PaletteError):
        hex_to_rgb("#GG0000")


def test_build_palette_needs_four_colors():
    with pytest.raises(PaletteError):
        build_palette(["#000000"] * 3, ["a", "b", "c"])
    with pytest.raises(PaletteError):
        build_palette(["#000000"] * 4, ["a"])


def test_write_act(tmp_path):
    path = tmp_path / "set.act"
    write_act(path, palette_for_set(0))
    data = path.read_bytes()
    assert len(data) == 768
    assert data[:12] == bytes([0, 255, 0, 255, 0, 0, 255, 255, 0, 0, 0, 255])
    assert data[12:] == bytes(756)
