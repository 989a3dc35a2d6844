"""Tests for pmode_paint.text: font tables and centred baking."""

import numpy as np
import pytest

from pmode_paint.constants import HEIGHT, WIDTH
from pmode_paint.fonts import FONT_3X5_ROWS
from pmode_paint.pixel_buffer import PixelBuffer
from pmode_paint.text import (
    FONTS,
    Font,
    InvalidCharacterError,
    bake_text,
    get_font,
    text_origin,
    text_width,
)


def lit(buffer, color):
    ys, xs = np.nonzero(buffer.pixels == color)
    return set(zip(xs.tolist(), ys.tolist()))


class TestFonts:
    def test_builtin_sizes(self):
        assert {key: (font.width, font.height) for key, font in FONTS.items()} == {
            "3x5": (3, 5),
            "4x6": (4, 6),
            "5x7": (5, 7),
        }

    def test_every_font_covers_printable_ascii(self):
        for font in FONTS.values():
            assert sorted(font.glyphs) == list(range(32, 127))

    def test_space_is_blank(self):
        for font in FONTS.values():
            assert not any(font.glyph(" "))

    def test_rejects_incomplete_table(self):
        table = dict(FONT_3X5_ROWS)
        del table["A"]
        with pytest.raises(ValueError):
            Font.from_rows("broken", 3, 5, table)

    def test_rejects_wide_rows(self):
        table = dict(FONT_3X5_ROWS)
        table["A"] = (0b1111, 0, 0, 0, 0)
        with pytest.raises(ValueError):
            Font.from_rows("broken", 3, 5, table)

    def test_unknown_font(self):
        with pytest.raises(ValueError):
            get_font("8x8")


class TestLayout:
    def test_width_includes_single_gap(self):
        assert text_width("A", FONTS["5x7"]) == 5
        assert text_width("AB", FONTS["5x7"]) == 11
        assert text_width("ABC", FONTS["3x5"]) == 11

    def test_origin_centres_on_anchor(self):
        assert text_origin("I", 10, 10, FONTS["3x5"]) == (9, 8)
        assert text_origin("II", 10, 10, FONTS["3x5"]) == (7, 8)
        assert text_origin("AB", 64, 48, FONTS["5x7"]) == (59, 45)


class TestBakeText:
    def test_single_glyph_pixels(self):
        buf = PixelBuffer.blank()
        written = bake_text(buf, "I", 10, 10, 2, FONTS["3x5"])
        expected = {(9, 8), (10, 8), (11, 8), (10, 9), (10, 10), (10, 11), (9, 12), (10, 12), (11, 12)}
        assert lit(buf, 2) == expected
        assert written == len(expected)

    def test_msb_is_leftmost_column(self):
        buf = PixelBuffer.blank()
        bake_text(buf, "L", 10, 10, 1, FONTS["3x5"])
        # top row of "L" is 0b100
        assert lit(buf, 1) & {(x, 8) for x in range(9, 12)} == {(9, 8)}

    def test_gap_column_between_glyphs(self):
        buf = PixelBuffer.blank()
        bake_text(buf, "II", 10, 10, 3, FONTS["3x5"])
        points = lit(buf, 3)
        assert all(x != 10 for x, _ in points)
        assert {x for x, _ in points} == {7, 8, 9, 11, 12, 13}

    def test_space_writes_nothing(self):
        buf = PixelBuffer.blank()
        assert bake_text(buf, "   ", 64, 48, 1, FONTS["5x7"]) == 0
        assert buf == PixelBuffer.blank()

    def test_empty_string(self):
        buf = PixelBuffer.blank()
        assert bake_text(buf, "", 64, 48, 1, FONTS["5x7"]) == 0

    def test_baking_twice_is_idempotent(self):
        buf = PixelBuffer.blank()
        bake_text(buf, "Hello, world!", 64, 48, 1, FONTS["4x6"])
        once = buf.copy()
        bake_text(buf, "Hello, world!", 64, 48, 1, FONTS["4x6"])
        assert buf == once

    def test_clips_at_canvas_edge(self):
        full = PixelBuffer.blank()
        clipped = PixelBuffer.blank()
        inside = bake_text(full, "HH", 64, 48, 1, FONTS["5x7"])
        edge = bake_text(clipped, "HH", 0, 0, 1, FONTS["5x7"])
        assert 0 < edge < inside
        assert bake_text(PixelBuffer.blank(), "HH", WIDTH + 50, HEIGHT + 50, 1, FONTS["5x7"]) == 0

    def test_rejects_non_printable_before_writing(self):
        buf = PixelBuffer.blank()
        with pytest.raises(InvalidCharacterError) as excinfo:
            bake_text(buf, "héllo", 64, 48, 1, FONTS["5x7"])
        assert excinfo.value.position == 1
        assert excinfo.value.char == "é"
        assert buf == PixelBuffer.blank()

    def test_rejects_control_codes(self):
        with pytest.raises(InvalidCharacterError):
            bake_text(PixelBuffer.blank(), "a\nb", 64, 48, 1, FONTS["3x5"])
        with pytest.raises(ValueError):
            bake_text(PixelBuffer.blank(), "\x7f", 64, 48, 1, FONTS["3x5"])
