"""Pillow boundary: decoded photos in, indexed PNG/ACT artwork out."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple

import numpy as np
from PIL import Image

from .constants import DEFAULT_COLOR_INDEX, DEFAULT_FONT, HEIGHT, WIDTH
from .palette_ops import ColorTuple, Palette, palette_for_set, write_act
from .permutations import apply_permutation
from .pixel_buffer import PixelBuffer
from .quantization import NEUTRAL_WEIGHTS, quantize_weighted
from .text import bake_text, get_font


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ConvertOptions:
    input_path: Path
    output_dir: Path
    palette_set: int = 0
    weights: Sequence[float] = NEUTRAL_WEIGHTS
    swap: Sequence[int] | None = None
    text: str | None = None
    text_at: Tuple[int, int] | None = None  # defaults to canvas centre
    text_color: int = DEFAULT_COLOR_INDEX
    font: str = DEFAULT_FONT
    write_act: bool = True


@dataclass(slots=True)
class ConvertResult:
    input_path: Path
    output_path: Path
    act_path: Path | None
    palette: Palette
    color_counts: List[int] = field(default_factory=list)


def _fit_box(width: int, height: int) -> Tuple[int, int, int, int]:
    """Aspect-preserving ``(dx, dy, dw, dh)`` placement inside the canvas."""

    target_aspect = WIDTH / HEIGHT
    image_aspect = width / height
    if image_aspect > target_aspect:
        dw = WIDTH
        dh = WIDTH / image_aspect
        dx = 0.0
        dy = (HEIGHT - dh) / 2
    else:
        dh = HEIGHT
        dw = HEIGHT * image_aspect
        dy = 0.0
        dx = (WIDTH - dw) / 2
    return int(round(dx)), int(round(dy)), max(1, int(round(dw))), max(1, int(round(dh)))


def fit_to_canvas(image: Image.Image, background: ColorTuple) -> np.ndarray:
    """Letterbox ``image`` into the canvas over ``background``.

    Returns ``(HEIGHT, WIDTH, 4)`` RGBA samples ready for quantization.
    """

    width, height = image.size
    if width <= 0 or height <= 0:
        raise ValueError("Cannot import an empty image")
    dx, dy, dw, dh = _fit_box(width, height)
    canvas = Image.new("RGBA", (WIDTH, HEIGHT), background + (255,))
    scaled = image.convert("RGBA").resize((dw, dh), Image.Resampling.BILINEAR)
    layer = Image.new("RGBA", (WIDTH, HEIGHT), (0, 0, 0, 0))
    layer.paste(scaled, (dx, dy))
    canvas = Image.alpha_composite(canvas, layer)
    logger.debug(
        "fit_to_canvas src=%sx%s place=(%s,%s) size=%sx%s background=%s",
        width,
        height,
        dx,
        dy,
        dw,
        dh,
        background,
    )
    return np.asarray(canvas, dtype=np.uint8).copy()


def load_samples(path: Path, palette: Palette) -> np.ndarray:
    with Image.open(path) as img:
        return fit_to_canvas(img, palette.colors[0])


def export_image(buffer: PixelBuffer, palette: Palette) -> Image.Image:
    """Indexed (mode ``P``) image carrying only the four palette entries."""

    buffer.check_indices()
    image = Image.frombytes("P", (WIDTH, HEIGHT), buffer.to_bytes())
    image.putpalette(palette.flat())
    return image


def save_artwork(
    buffer: PixelBuffer, palette: Palette, output_path: Path, *, act: bool = True
) -> Path | None:
    """Write ``buffer`` as an indexed PNG (plus ``.act`` palette); returns the ACT path."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    export_image(buffer, palette).save(output_path)
    if not act:
        return None
    act_path = output_path.with_suffix(".act")
    write_act(act_path, palette)
    return act_path


def convert_photo(options: ConvertOptions) -> ConvertResult:
    palette = palette_for_set(options.palette_set)
    samples = load_samples(options.input_path, palette)
    buffer = quantize_weighted(samples, palette, options.weights)
    if options.swap is not None:
        buffer = apply_permutation(buffer, options.swap)
    if options.text:
        anchor = options.text_at or (WIDTH // 2, HEIGHT // 2)
        bake_text(buffer, options.text, anchor[0], anchor[1], options.text_color, get_font(options.font))

    output_path = options.output_dir / (options.input_path.stem + ".png")
    act_path = save_artwork(buffer, palette, output_path, act=options.write_act)
    logger.debug("convert_photo input=%s output=%s", options.input_path, output_path)
    return ConvertResult(
        input_path=options.input_path,
        output_path=output_path,
        act_path=act_path,
        palette=palette,
        color_counts=buffer.color_counts(),
    )
