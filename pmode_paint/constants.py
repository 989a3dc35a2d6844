"""Fixed canvas geometry, palette sets and editor limits."""
from __future__ import annotations

from typing import List, Tuple

WIDTH = 128
HEIGHT = 96
PIXEL_COUNT = WIDTH * HEIGHT
PALETTE_SIZE = 4
HISTORY_LIMIT = 50
DEFAULT_COLOR_INDEX = 3
DEFAULT_FONT = "5x7"
DEFAULT_EXPORT_NAME = "pmode1_artwork.png"

PALETTE_SETS: List[List[str]] = [
    ["#00FF00", "#FF0000", "#FFFF00", "#0000FF"],
    ["#F5F5F5", "#00FFFF", "#FF00FF", "#FFA500"],
]

PALETTE_NAMES_SET: List[List[str]] = [
    ["GREEN", "RED", "YELLOW", "BLUE"],
    ["BUFF", "CYAN", "MAGENTA", "ORANGE"],
]

# short labels shown in the status line
PALETTE_SET_LABELS: Tuple[str, ...] = ("GRYB", "BCMO")
