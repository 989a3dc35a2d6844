"""Shape drawing primitives for palette-indexed buffers.

Every primitive clips silently: pixels that land outside the canvas are
skipped, never wrapped and never reported.
"""
from __future__ import annotations

import logging
import math
from typing import List, Tuple

from .constants import HEIGHT, WIDTH
from .pixel_buffer import PixelBuffer


logger = logging.getLogger(__name__)


def draw_point(buffer: PixelBuffer, x: int, y: int, color: int) -> None:
    buffer.put(x, y, color)


def draw_line(buffer: PixelBuffer, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
    """Bresenham line including both endpoints.

    Endpoints are put in a canonical order first so a line and its reverse
    light exactly the same pixels.
    """

    if (x1, y1) < (x0, y0):
        x0, y0, x1, y1 = x1, y1, x0, y0
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    while True:
        buffer.put(x0, y0, color)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


def draw_rect(buffer: PixelBuffer, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
    """Outline of the rectangle spanned by two corners (interior untouched)."""

    left, right = min(x0, x1), max(x0, x1)
    top, bottom = min(y0, y1), max(y0, y1)
    for x in range(left, right + 1):
        buffer.put(x, top, color)
        buffer.put(x, bottom, color)
    for y in range(top, bottom + 1):
        buffer.put(left, y, color)
        buffer.put(right, y, color)


def circle_radius(xc: int, yc: int, x1: int, y1: int) -> int:
    return int(math.floor(math.sqrt((x1 - xc) ** 2 + (y1 - yc) ** 2)))


def draw_circle(buffer: PixelBuffer, xc: int, yc: int, x1: int, y1: int, color: int) -> None:
    """Midpoint circle centred on ``(xc, yc)`` passing near ``(x1, y1)``."""

    r = circle_radius(xc, yc, x1, y1)
    x = 0
    y = r
    d = 3 - 2 * r
    while y >= x:
        for px, py in (
            (x, y), (-x, y), (x, -y), (-x, -y),
            (y, x), (-y, x), (y, -x), (-y, -x),
        ):
            buffer.put(xc + px, yc + py, color)
        x += 1
        if d > 0:
            y -= 1
            d = d + 4 * (x - y) + 10
        else:
            d = d + 4 * x + 6


def flood_fill(buffer: PixelBuffer, x: int, y: int, color: int) -> int:
    """Four-connected fill from ``(x, y)``; returns the number of cells repainted.

    Uses an explicit work stack, so memory is bounded by the canvas size.
    """

    if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
        return 0
    pixels = buffer.pixels
    target = int(pixels[y, x])
    if target == color:
        return 0

    painted = 0
    stack: List[Tuple[int, int]] = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if cx < 0 or cx >= WIDTH or cy < 0 or cy >= HEIGHT:
            continue
        if pixels[cy, cx] != target:
            continue
        pixels[cy, cx] = color
        painted += 1
        stack.append((cx + 1, cy))
        stack.append((cx - 1, cy))
        stack.append((cx, cy + 1))
        stack.append((cx, cy - 1))
    logger.debug("flood_fill seed=(%s,%s) target=%s color=%s painted=%s", x, y, target, color, painted)
    return painted
