"""Bitmap text baking into palette-indexed buffers."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from .fonts import FONT_3X5_ROWS, FONT_4X6_ROWS, FONT_5X7_ROWS, GlyphRows
from .pixel_buffer import PixelBuffer, centered_start, in_bounds


logger = logging.getLogger(__name__)

FIRST_PRINTABLE = 32
LAST_PRINTABLE = 126
GLYPH_SPACING = 1


class InvalidCharacterError(ValueError):
    """Raised when text contains a code outside printable ASCII (32-126)."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(
            f"Character {char!r} (code {ord(char)}) at position {position} has no glyph"
        )
        self.char = char
        self.position = position


@dataclass(frozen=True, slots=True)
class Font:
    """Fixed-size bitmap font keyed by character code."""

    name: str
    width: int
    height: int
    glyphs: Mapping[int, GlyphRows]

    @classmethod
    def from_rows(cls, name: str, width: int, height: int, table: Mapping[str, GlyphRows]) -> "Font":
        glyphs: Dict[int, GlyphRows] = {}
        for char, rows in table.items():
            if len(rows) != height:
                raise ValueError(f"{name}: glyph {char!r} has {len(rows)} rows, expected {height}")
            if any(row < 0 or row >= (1 << width) for row in rows):
                raise ValueError(f"{name}: glyph {char!r} is wider than {width} columns")
            glyphs[ord(char)] = tuple(rows)
        missing = [code for code in range(FIRST_PRINTABLE, LAST_PRINTABLE + 1) if code not in glyphs]
        if missing:
            raise ValueError(f"{name}: missing glyphs for codes {missing[:8]}")
        return cls(name=name, width=width, height=height, glyphs=glyphs)

    def glyph(self, char: str) -> GlyphRows:
        return self.glyphs[ord(char)]


FONTS: Dict[str, Font] = {
    "3x5": Font.from_rows("3x5", 3, 5, FONT_3X5_ROWS),
    "4x6": Font.from_rows("4x6", 4, 6, FONT_4X6_ROWS),
    "5x7": Font.from_rows("5x7", 5, 7, FONT_5X7_ROWS),
}


def get_font(key: str) -> Font:
    try:
        return FONTS[key]
    except KeyError:
        raise ValueError(f"Unknown font {key!r}; choose from {sorted(FONTS)}") from None


def validate_text(text: str) -> None:
    for position, char in enumerate(text):
        if not FIRST_PRINTABLE <= ord(char) <= LAST_PRINTABLE:
            raise InvalidCharacterError(char, position)


def text_width(text: str, font: Font) -> int:
    """Rendered width: glyphs plus one spacing column between neighbours."""

    return len(text) * (font.width + GLYPH_SPACING) - GLYPH_SPACING


def text_origin(text: str, x: int, y: int, font: Font) -> Tuple[int, int]:
    return centered_start(x, text_width(text, font)), centered_start(y, font.height)


def glyph_cells(text: str, x: int, y: int, font: Font) -> List[Tuple[int, int]]:
    """Absolute ``(x, y)`` of every lit glyph pixel for ``text`` centred at ``(x, y)``.

    Cells may fall off the canvas; callers clip.
    """

    validate_text(text)
    left, top = text_origin(text, x, y, font)
    cells: List[Tuple[int, int]] = []
    msb = 1 << (font.width - 1)
    for index, char in enumerate(text):
        gx = left + index * (font.width + GLYPH_SPACING)
        for row, mask in enumerate(font.glyph(char)):
            for col in range(font.width):
                if mask & (msb >> col):
                    cells.append((gx + col, top + row))
    return cells


def bake_text(buffer: PixelBuffer, text: str, x: int, y: int, color: int, font: Font) -> int:
    """Write ``text`` into ``buffer`` centred on ``(x, y)``; returns pixels written.

    Raises ``InvalidCharacterError`` before touching the buffer if any
    character lacks a glyph.
    """

    cells = glyph_cells(text, x, y, font)
    written = 0
    for cx, cy in cells:
        if in_bounds(cx, cy):
            buffer.pixels[cy, cx] = color
            written += 1
    logger.debug(
        "bake_text font=%s chars=%s anchor=(%s,%s) color=%s written=%s",
        font.name,
        len(text),
        x,
        y,
        color,
        written,
    )
    return written
