"""Palette-indexed pixel grid shared by every editing operation."""
from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from .constants import HEIGHT, PALETTE_SIZE, PIXEL_COUNT, WIDTH


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


class PixelBuffer:
    """Row-major ``WIDTH x HEIGHT`` grid of palette indices (0-3).

    ``pixels`` is a ``(HEIGHT, WIDTH)`` ``uint8`` array, so ``pixels[y, x]``
    is the cell at flat index ``y * WIDTH + x``.
    """

    __slots__ = ("pixels",)

    def __init__(self, pixels: np.ndarray | None = None) -> None:
        if pixels is None:
            pixels = np.zeros((HEIGHT, WIDTH), dtype=np.uint8)
        if pixels.shape != (HEIGHT, WIDTH):
            raise ValueError(
                f"Pixel buffers are {WIDTH}x{HEIGHT}, got array of shape {pixels.shape}"
            )
        self.pixels = pixels.astype(np.uint8, copy=False)

    @classmethod
    def blank(cls, fill: int = 0) -> "PixelBuffer":
        assert 0 <= fill < PALETTE_SIZE, f"palette index out of range: {fill}"
        return cls(np.full((HEIGHT, WIDTH), fill, dtype=np.uint8))

    @classmethod
    def from_bytes(cls, data: bytes) -> "PixelBuffer":
        if len(data) != PIXEL_COUNT:
            raise ValueError(f"Expected {PIXEL_COUNT} bytes, got {len(data)}")
        array = np.frombuffer(data, dtype=np.uint8).reshape((HEIGHT, WIDTH)).copy()
        return cls(array)

    @classmethod
    def from_indices(cls, indices: Iterable[int]) -> "PixelBuffer":
        array = np.fromiter(indices, dtype=np.uint8, count=PIXEL_COUNT)
        buffer = cls(array.reshape((HEIGHT, WIDTH)))
        buffer.check_indices()
        return buffer

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.pixels.copy())

    def to_bytes(self) -> bytes:
        return self.pixels.tobytes()

    def get(self, x: int, y: int) -> int:
        return int(self.pixels[y, x])

    def put(self, x: int, y: int, color: int) -> None:
        """Write ``color`` at ``(x, y)``; coordinates off the canvas are ignored."""

        if 0 <= x < WIDTH and 0 <= y < HEIGHT:
            self.pixels[y, x] = color

    def fill(self, color: int) -> None:
        assert 0 <= color < PALETTE_SIZE, f"palette index out of range: {color}"
        self.pixels.fill(color)

    def check_indices(self) -> None:
        assert int(self.pixels.max(initial=0)) < PALETTE_SIZE, "buffer holds an index outside the palette"

    def color_counts(self) -> list[int]:
        return np.bincount(self.pixels.ravel(), minlength=PALETTE_SIZE)[:PALETTE_SIZE].tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return bool(np.array_equal(self.pixels, other.pixels))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"PixelBuffer(counts={self.color_counts()})"


def centered_start(anchor: int, extent: int) -> int:
    """First cell of a span of ``extent`` cells centred on ``anchor``.

    Halves round up (``2.5 -> 3``), matching how pointer positions are
    snapped when placing pasted or typed content.
    """

    return int(math.floor(anchor - extent / 2 + 0.5))
