"""Palette records and colour helpers for the four-colour canvas."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from .constants import PALETTE_NAMES_SET, PALETTE_SET_LABELS, PALETTE_SETS, PALETTE_SIZE


ColorTuple = Tuple[int, int, int]


class PaletteError(RuntimeError):
    """Raised when palette data is malformed."""


@dataclass(frozen=True, slots=True)
class Palette:
    """One of the fixed four-colour palette sets.

    Indices are positional: swapping palettes changes how a buffer looks,
    never which index a pixel holds.
    """

    label: str
    colors: Tuple[ColorTuple, ...]
    names: Tuple[str, ...]

    @property
    def size(self) -> int:
        return len(self.colors)

    def hex_colors(self) -> List[str]:
        return [rgb_to_hex(color) for color in self.colors]

    def flat(self) -> List[int]:
        """Return ``[r0, g0, b0, r1, ...]`` as Pillow's ``putpalette`` expects."""

        flat: List[int] = []
        for color in self.colors:
            flat.extend(color)
        return flat


def hex_to_rgb(value: str) -> ColorTuple:
    value = value.strip()
    if value.startswith("#"):
        value = value[1:]
    if len(value) != 6:
        raise PaletteError(f"Expected hex RGB in the form RRGGBB, got {value!r}")
    try:
        r = int(value[0:2], 16)
        g = int(value[2:4], 16)
        b = int(value[4:6], 16)
    except ValueError as exc:
        raise PaletteError(f"Invalid hex colour {value!r}") from exc
    return (r, g, b)


def rgb_to_hex(color: ColorTuple) -> str:
    r, g, b = color
    return f"#{r:02X}{g:02X}{b:02X}"


def build_palette(hex_colors: Sequence[str], names: Sequence[str], label: str = "") -> Palette:
    if len(hex_colors) != PALETTE_SIZE:
        raise PaletteError(
            f"Palettes must have exactly {PALETTE_SIZE} colors, got {len(hex_colors)}"
        )
    if len(names) != len(hex_colors):
        raise PaletteError("Palette names must match colors one to one")
    colors = tuple(hex_to_rgb(value) for value in hex_colors)
    return Palette(label=label, colors=colors, names=tuple(names))


def palette_for_set(set_index: int) -> Palette:
    """Return the built-in palette set ``set_index`` (0 or 1)."""

    if not 0 <= set_index < len(PALETTE_SETS):
        raise PaletteError(f"Unknown palette set {set_index}")
    return build_palette(
        PALETTE_SETS[set_index],
        PALETTE_NAMES_SET[set_index],
        label=PALETTE_SET_LABELS[set_index],
    )


def write_act(path: Path, palette: Palette) -> None:
    """Write ``palette`` as a 256-entry Adobe ACT file."""

    colors = list(palette.colors[:256])
    padded = colors + [(0, 0, 0)] * (256 - len(colors))
    with path.open("wb") as fh:
        for r, g, b in padded:
            fh.write(bytes((r, g, b)))
