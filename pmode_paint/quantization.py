"""Weighted nearest-colour quantization of true-colour images to the 4-colour palette."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np
from PIL import Image

from .constants import HEIGHT, PALETTE_SIZE, WIDTH
from .palette_ops import Palette
from .pixel_buffer import PixelBuffer


logger = logging.getLogger(__name__)

NEUTRAL_WEIGHTS = (0.0, 0.0, 0.0, 0.0)
# slider range offered by the import panel
WEIGHT_RANGE = (-3.0, 3.0)


@dataclass(slots=True)
class ImportBias:
    """Decoded import samples kept around for re-quantization on slider changes."""

    samples: np.ndarray
    weights: List[float] = field(default_factory=lambda: list(NEUTRAL_WEIGHTS))


def as_samples(image: Image.Image | np.ndarray) -> np.ndarray:
    """Return ``image`` as a ``(HEIGHT, WIDTH, 3|4)`` ``uint8`` array."""

    if isinstance(image, Image.Image):
        array = np.asarray(image.convert("RGBA"), dtype=np.uint8)
    else:
        array = np.asarray(image)
    if array.ndim != 3 or array.shape[:2] != (HEIGHT, WIDTH) or array.shape[2] not in (3, 4):
        raise ValueError(
            f"Expected {WIDTH}x{HEIGHT} RGB(A) samples, got array of shape {array.shape}"
        )
    return array


def weight_multipliers(weights: Sequence[float]) -> np.ndarray:
    """``2 ** -weight`` per slot: positive weights pull pixels toward that colour."""

    if len(weights) != PALETTE_SIZE:
        raise ValueError(f"Expected {PALETTE_SIZE} bias weights, got {len(weights)}")
    with np.errstate(over="ignore"):
        return np.power(2.0, -np.asarray(weights, dtype=np.float64))


def quantize_weighted(
    image: Image.Image | np.ndarray,
    palette: Palette,
    weights: Sequence[float] = NEUTRAL_WEIGHTS,
) -> PixelBuffer:
    """Map every pixel to the palette slot with the smallest weighted RGB distance.

    Alpha is ignored. Ties go to the lowest palette index, so identical input
    always produces an identical buffer.
    """

    samples = as_samples(image)
    multipliers = weight_multipliers(weights)
    rgb = samples[:, :, :3].astype(np.int64)
    colors = np.asarray(palette.colors, dtype=np.int64)

    # (HEIGHT, WIDTH, PALETTE_SIZE) squared distances
    diff = rgb[:, :, np.newaxis, :] - colors[np.newaxis, np.newaxis, :, :]
    dist_sq = np.sum(diff * diff, axis=-1)
    with np.errstate(invalid="ignore", over="ignore"):
        adjusted = dist_sq * multipliers
    adjusted = np.where(np.isnan(adjusted), np.inf, adjusted)
    indices = np.argmin(adjusted, axis=-1).astype(np.uint8)

    logger.debug(
        "quantize_weighted palette=%s weights=%s counts=%s",
        palette.label,
        list(weights),
        np.bincount(indices.ravel(), minlength=PALETTE_SIZE).tolist(),
    )
    return PixelBuffer(indices)
