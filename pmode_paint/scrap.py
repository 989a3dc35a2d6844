"""Rectangular copy/paste of buffer regions."""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .constants import HEIGHT, WIDTH
from .pixel_buffer import PixelBuffer, centered_start


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Scrap:
    """Detached ``h x w`` block of palette indices."""

    data: np.ndarray

    @property
    def w(self) -> int:
        return int(self.data.shape[1])

    @property
    def h(self) -> int:
        return int(self.data.shape[0])


def extract_scrap(buffer: PixelBuffer, x0: int, y0: int, x1: int, y1: int) -> Scrap:
    """Copy the rectangle spanned by two corners (both inclusive)."""

    left, right = min(x0, x1), max(x0, x1)
    top, bottom = min(y0, y1), max(y0, y1)
    data = np.zeros((bottom - top + 1, right - left + 1), dtype=np.uint8)

    # corners outside the canvas leave the uncovered cells at index 0
    src_x0, src_y0 = max(0, left), max(0, top)
    src_x1, src_y1 = min(WIDTH - 1, right), min(HEIGHT - 1, bottom)
    if src_x0 <= src_x1 and src_y0 <= src_y1:
        data[src_y0 - top : src_y1 - top + 1, src_x0 - left : src_x1 - left + 1] = buffer.pixels[
            src_y0 : src_y1 + 1, src_x0 : src_x1 + 1
        ]
    scrap = Scrap(data=data)
    logger.debug("extract_scrap rect=(%s,%s)-(%s,%s) size=%sx%s", left, top, right, bottom, scrap.w, scrap.h)
    return scrap


def paste_origin(scrap: Scrap, cx: int, cy: int) -> tuple[int, int]:
    return centered_start(cx, scrap.w), centered_start(cy, scrap.h)


def paste_scrap(buffer: PixelBuffer, scrap: Scrap, cx: int, cy: int) -> None:
    """Stamp ``scrap`` centred on ``(cx, cy)``, truncating at the canvas edges."""

    place_x, place_y = paste_origin(scrap, cx, cy)

    src_x0 = max(0, -place_x)
    src_y0 = max(0, -place_y)
    dst_x0 = max(0, place_x)
    dst_y0 = max(0, place_y)

    copy_w = min(scrap.w - src_x0, WIDTH - dst_x0)
    copy_h = min(scrap.h - src_y0, HEIGHT - dst_y0)

    logger.debug(
        "paste_scrap size=%sx%s center=(%s,%s) place=(%s,%s) copy=%sx%s",
        scrap.w,
        scrap.h,
        cx,
        cy,
        place_x,
        place_y,
        copy_w,
        copy_h,
    )
    if copy_w <= 0 or copy_h <= 0:
        return
    buffer.pixels[dst_y0 : dst_y0 + copy_h, dst_x0 : dst_x0 + copy_w] = scrap.data[
        src_y0 : src_y0 + copy_h, src_x0 : src_x0 + copy_w
    ]
