"""Editing session: the working buffer, its history and the tool gestures that change it."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Sequence, Tuple

import numpy as np
from PIL import Image

from .constants import (
    DEFAULT_COLOR_INDEX,
    DEFAULT_EXPORT_NAME,
    DEFAULT_FONT,
    HEIGHT,
    HISTORY_LIMIT,
    PALETTE_SIZE,
    WIDTH,
)
from .history import HistoryManager
from .palette_ops import Palette, palette_for_set
from .permutations import PermutationPreview, apply_permutation, build_previews
from .pixel_buffer import PixelBuffer
from .processing import load_samples, save_artwork
from .quantization import NEUTRAL_WEIGHTS, WEIGHT_RANGE, ImportBias, as_samples, quantize_weighted
from .raster import draw_circle, draw_line, draw_point, draw_rect, flood_fill
from .scrap import Scrap, extract_scrap, paste_scrap
from .text import Font, bake_text, get_font, validate_text


logger = logging.getLogger(__name__)

Point = Tuple[int, int]


class Tool(str, Enum):
    PENCIL = "Pencil"
    ERASER = "Eraser"
    BUCKET = "Bucket"
    LINE = "Line"
    RECT = "Rect"
    CIRCLE = "Circle"
    TEXT = "Text"
    COPY = "Copy"
    PASTE = "Paste"


_SHAPE_TOOLS = (Tool.LINE, Tool.RECT, Tool.CIRCLE)
_SHAPES = {
    Tool.LINE: draw_line,
    Tool.RECT: draw_rect,
    Tool.CIRCLE: draw_circle,
}


@dataclass(slots=True)
class SessionOptions:
    palette_set: int = 0
    color_index: int = DEFAULT_COLOR_INDEX
    font: str = DEFAULT_FONT
    history_limit: int = HISTORY_LIMIT


@dataclass(slots=True)
class _Gesture:
    tool: Tool
    start: Point
    last: Point


def _clamp(x: int, y: int) -> Point:
    return max(0, min(WIDTH - 1, int(x))), max(0, min(HEIGHT - 1, int(y)))


class EditorSession:
    """Owns everything one editor window mutates.

    ``working`` is what the renderer shows unless ``preview`` holds a pending
    shape, text or paste. Only ``commit`` (directly or at the end of a
    gesture) records history, exactly once per completed action.
    """

    def __init__(self, options: SessionOptions | None = None) -> None:
        options = options or SessionOptions()
        self.palette_set = options.palette_set
        palette_for_set(self.palette_set)
        self.color_index = DEFAULT_COLOR_INDEX
        self.select_color(options.color_index)
        self.font: Font = get_font(options.font)
        self.tool = Tool.PENCIL
        self.working = PixelBuffer.blank()
        self.preview: PixelBuffer | None = None
        self.history = HistoryManager(limit=options.history_limit)
        self.history.init(self.working, "blank")
        self.scrap: Scrap | None = None
        self.import_bias: ImportBias | None = None
        self.pending_text = ""
        self.permutation_mode = False
        self._gesture: _Gesture | None = None

    # ------------------------------------------------------------------
    # state exposed to the renderer / widgets

    @property
    def palette(self) -> Palette:
        return palette_for_set(self.palette_set)

    @property
    def display(self) -> PixelBuffer:
        return self.preview if self.preview is not None else self.working

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    @property
    def import_weights(self) -> List[float] | None:
        if self.import_bias is None:
            return None
        return list(self.import_bias.weights)

    @property
    def in_gesture(self) -> bool:
        return self._gesture is not None

    # ------------------------------------------------------------------
    # selection

    def select_tool(self, tool: Tool | str) -> None:
        tool = Tool(tool)
        self._end_gesture()
        self.tool = tool
        self.permutation_mode = False
        logger.debug("Session tool=%s", self.tool.value)

    def select_color(self, index: int) -> None:
        if not 0 <= index < PALETTE_SIZE:
            raise ValueError(f"Palette index must be 0-{PALETTE_SIZE - 1}, got {index}")
        self.color_index = index

    def select_font(self, key: str) -> None:
        self.font = get_font(key)

    def set_pending_text(self, text: str) -> None:
        validate_text(text)
        self.pending_text = text

    def toggle_palette(self) -> Palette:
        """Flip palette sets. Pixel indices are untouched, only their colours change."""

        self.palette_set = 1 if self.palette_set == 0 else 0
        if self.import_bias is not None:
            # an open import adjustment follows the new colours
            self.live_update(self._requantize())
        logger.debug("Session palette_set=%s", self.palette_set)
        return self.palette

    # ------------------------------------------------------------------
    # live / committed transitions

    def live_update(self, buffer: PixelBuffer) -> None:
        """Show ``buffer`` without recording it."""

        self.working = buffer

    def commit(self, label: str = "edit") -> None:
        self.working.check_indices()
        self.import_bias = None
        self.preview = None
        self.history.commit(self.working, label)

    def undo(self) -> bool:
        self.import_bias = None
        restored = self.history.undo()
        if restored is None:
            return False
        self._replace(restored)
        return True

    def redo(self) -> bool:
        self.import_bias = None
        restored = self.history.redo()
        if restored is None:
            return False
        self._replace(restored)
        return True

    def clear(self) -> None:
        self._replace(PixelBuffer.blank())
        self.commit("clear")
        if self.color_index == 0:
            self.color_index = DEFAULT_COLOR_INDEX

    def _replace(self, buffer: PixelBuffer) -> None:
        self.working = buffer
        self.preview = None
        self._gesture = None

    # ------------------------------------------------------------------
    # photo import

    def import_image(self, image: Image.Image | np.ndarray) -> PixelBuffer:
        """Quantize decoded samples with neutral bias and commit the result.

        The samples stay attached so ``set_import_weight`` can re-quantize
        until the next unrelated commit, undo or redo.
        """

        samples = as_samples(image).copy()
        bias = ImportBias(samples=samples, weights=list(NEUTRAL_WEIGHTS))
        self.import_bias = bias
        self._replace(quantize_weighted(samples, self.palette, bias.weights))
        self.history.commit(self.working, "import")
        logger.debug("Session import counts=%s", self.working.color_counts())
        return self.working

    def import_file(self, path: Path) -> PixelBuffer:
        """Letterbox ``path`` over palette colour 0 and import it."""

        return self.import_image(load_samples(Path(path), self.palette))

    def export(self, output_dir: Path, name: str = DEFAULT_EXPORT_NAME, *, act: bool = True) -> Path:
        """Write the committed working buffer as an indexed PNG; returns its path."""

        output_path = Path(output_dir) / name
        save_artwork(self.working, self.palette, output_path, act=act)
        logger.debug("Session export path=%s palette=%s", output_path, self.palette.label)
        return output_path

    def set_import_weight(self, slot: int, value: float) -> bool:
        if self.import_bias is None:
            return False
        if not 0 <= slot < PALETTE_SIZE:
            raise ValueError(f"Palette slot must be 0-{PALETTE_SIZE - 1}, got {slot}")
        low, high = WEIGHT_RANGE
        self.import_bias.weights[slot] = max(low, min(high, float(value)))
        self.live_update(self._requantize())
        return True

    def commit_import_weights(self) -> bool:
        """Record the current bias result; the sliders stay active."""

        if self.import_bias is None:
            return False
        self.history.commit(self.working, "import bias")
        return True

    def _requantize(self) -> PixelBuffer:
        assert self.import_bias is not None
        return quantize_weighted(self.import_bias.samples, self.palette, self.import_bias.weights)

    # ------------------------------------------------------------------
    # colour swap

    def enter_permutation_mode(self) -> List[PermutationPreview]:
        self._end_gesture()
        self.permutation_mode = True
        return build_previews(self.working)

    def choose_permutation(self, mapping: Sequence[int]) -> None:
        self._replace(apply_permutation(self.working, mapping))
        self.commit("permute")
        self.permutation_mode = False

    def cancel_permutation_mode(self) -> None:
        self.permutation_mode = False

    # ------------------------------------------------------------------
    # pointer gestures

    def pointer_down(self, x: int, y: int) -> None:
        if self.permutation_mode:
            return
        point = _clamp(x, y)
        self._gesture = _Gesture(tool=self.tool, start=point, last=point)
        tool = self.tool
        if tool in (Tool.PENCIL, Tool.ERASER):
            draw_point(self.working, point[0], point[1], self._stroke_color(tool))
        elif tool is Tool.BUCKET:
            flood_fill(self.working, point[0], point[1], self.color_index)
        elif tool in _SHAPE_TOOLS:
            self.preview = self._shape_preview(point, point)
        elif tool in (Tool.TEXT, Tool.PASTE):
            self.preview = self._placement_preview(point)

    def pointer_move(self, x: int, y: int) -> None:
        point = _clamp(x, y)
        gesture = self._gesture
        if gesture is None:
            # hover feedback for tools that place content on release
            if self.tool in (Tool.TEXT, Tool.PASTE) and not self.permutation_mode:
                self.preview = self._placement_preview(point)
            return
        tool = gesture.tool
        if tool in (Tool.PENCIL, Tool.ERASER):
            draw_line(self.working, gesture.last[0], gesture.last[1], point[0], point[1], self._stroke_color(tool))
        elif tool in _SHAPE_TOOLS:
            self.preview = self._shape_preview(gesture.start, point)
        elif tool in (Tool.TEXT, Tool.PASTE):
            self.preview = self._placement_preview(point)
        gesture.last = point

    def pointer_up(self, x: int, y: int) -> bool:
        """Finish the gesture at ``(x, y)``; returns True if history was recorded."""

        gesture = self._gesture
        if gesture is None:
            return False
        self._gesture = None
        self.preview = None
        point = _clamp(x, y)
        tool = gesture.tool
        if tool in (Tool.PENCIL, Tool.ERASER):
            draw_line(self.working, gesture.last[0], gesture.last[1], point[0], point[1], self._stroke_color(tool))
        elif tool in _SHAPE_TOOLS:
            _SHAPES[tool](self.working, gesture.start[0], gesture.start[1], point[0], point[1], self.color_index)
        elif tool is Tool.TEXT:
            if not self.pending_text:
                return False
            bake_text(self.working, self.pending_text, point[0], point[1], self.color_index, self.font)
        elif tool is Tool.COPY:
            self.scrap = extract_scrap(self.working, gesture.start[0], gesture.start[1], point[0], point[1])
            self.tool = Tool.PASTE
            return False
        elif tool is Tool.PASTE:
            if self.scrap is None:
                return False
            paste_scrap(self.working, self.scrap, point[0], point[1])
        # bucket filled on press; only its commit is left
        self.commit(tool.value.lower())
        return True

    def pointer_leave(self) -> bool:
        """Pointer left the canvas mid-gesture: finish at the last known point."""

        if self._gesture is None:
            self.discard_preview()
            return False
        last = self._gesture.last
        return self.pointer_up(last[0], last[1])

    def discard_preview(self) -> None:
        if self._gesture is None:
            self.preview = None

    def _end_gesture(self) -> None:
        """Close any open gesture before the tool or mode changes.

        Strokes that already painted into ``working`` are committed at their
        last point; tools that only showed a preview drop it.
        """

        gesture = self._gesture
        if gesture is not None and gesture.tool in (Tool.PENCIL, Tool.ERASER, Tool.BUCKET):
            self.pointer_up(gesture.last[0], gesture.last[1])
        self._gesture = None
        self.preview = None

    def _stroke_color(self, tool: Tool) -> int:
        return 0 if tool is Tool.ERASER else self.color_index

    def _shape_preview(self, start: Point, end: Point) -> PixelBuffer:
        preview = self.working.copy()
        _SHAPES[self.tool](preview, start[0], start[1], end[0], end[1], self.color_index)
        return preview

    def _placement_preview(self, point: Point) -> PixelBuffer | None:
        if self.tool is Tool.TEXT:
            if not self.pending_text:
                return None
            preview = self.working.copy()
            bake_text(preview, self.pending_text, point[0], point[1], self.color_index, self.font)
            return preview
        if self.scrap is None:
            return None
        preview = self.working.copy()
        paste_scrap(preview, self.scrap, point[0], point[1])
        return preview
