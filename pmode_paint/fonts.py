"""Built-in fixed-width bitmap fonts.

Each glyph is a tuple of row masks, top row first, most significant bit
leftmost. Every table covers printable ASCII (space through tilde).
"""
from __future__ import annotations

from typing import Dict, Tuple

GlyphRows = Tuple[int, ...]

FONT_3X5_ROWS: Dict[str, GlyphRows] = {
    " ": (0b000, 0b000, 0b000, 0b000, 0b000),
    "!": (0b010, 0b010, 0b010, 0b000, 0b010),
    '"': (0b101, 0b101, 0b000, 0b000, 0b000),
    "#": (0b101, 0b111, 0b101, 0b111, 0b101),
    "$": (0b011, 0b110, 0b010, 0b011, 0b110),
    "%": (0b101, 0b001, 0b010, 0b100, 0b101),
    "&": (0b010, 0b101, 0b010, 0b101, 0b011),
    "'": (0b010, 0b010, 0b000, 0b000, 0b000),
    "(": (0b001, 0b010, 0b010, 0b010, 0b001),
    ")": (0b100, 0b010, 0b010, 0b010, 0b100),
    "*": (0b000, 0b101, 0b010, 0b101, 0b000),
    "+": (0b000, 0b010, 0b111, 0b010, 0b000),
    ",": (0b000, 0b000, 0b000, 0b010, 0b100),
    "-": (0b000, 0b000, 0b111, 0b000, 0b000),
    ".": (0b000, 0b000, 0b000, 0b000, 0b010),
    "/": (0b001, 0b001, 0b010, 0b100, 0b100),
    "0": (0b111, 0b101, 0b101, 0b101, 0b111),
    "1": (0b010, 0b110, 0b010, 0b010, 0b111),
    "2": (0b111, 0b001, 0b111, 0b100, 0b111),
    "3": (0b111, 0b001, 0b111, 0b001, 0b111),
    "4": (0b101, 0b101, 0b111, 0b001, 0b001),
    "5": (0b111, 0b100, 0b111, 0b001, 0b111),
    "6": (0b111, 0b100, 0b111, 0b101, 0b111),
    "7": (0b111, 0b001, 0b010, 0b010, 0b010),
    "8": (0b111, 0b101, 0b111, 0b101, 0b111),
    "9": (0b111, 0b101, 0b111, 0b001, 0b111),
    ":": (0b000, 0b010, 0b000, 0b010, 0b000),
    ";": (0b000, 0b010, 0b000, 0b010, 0b100),
    "<": (0b001, 0b010, 0b100, 0b010, 0b001),
    "=": (0b000, 0b111, 0b000, 0b111, 0b000),
    ">": (0b100, 0b010, 0b001, 0b010, 0b100),
    "?": (0b111, 0b001, 0b010, 0b000, 0b010),
    "@": (0b010, 0b101, 0b111, 0b100, 0b011),
    "A": (0b010, 0b101, 0b111, 0b101, 0b101),
    "B": (0b110, 0b101, 0b110, 0b101, 0b110),
    "C": (0b011, 0b100, 0b100, 0b100, 0b011),
    "D": (0b110, 0b101, 0b101, 0b101, 0b110),
    "E": (0b111, 0b100, 0b110, 0b100, 0b111),
    "F": (0b111, 0b100, 0b110, 0b100, 0b100),
    "G": (0b011, 0b100, 0b101, 0b101, 0b011),
    "H": (0b101, 0b101, 0b111, 0b101, 0b101),
    "I": (0b111, 0b010, 0b010, 0b010, 0b111),
    "J": (0b001, 0b001, 0b001, 0b101, 0b010),
    "K": (0b101, 0b110, 0b100, 0b110, 0b101),
    "L": (0b100, 0b100, 0b100, 0b100, 0b111),
    "M": (0b101, 0b111, 0b111, 0b101, 0b101),
    "N": (0b101, 0b111, 0b111, 0b111, 0b101),
    "O": (0b010, 0b101, 0b101, 0b101, 0b010),
    "P": (0b110, 0b101, 0b110, 0b100, 0b100),
    "Q": (0b010, 0b101, 0b101, 0b111, 0b011),
    "R": (0b110, 0b101, 0b110, 0b101, 0b101),
    "S": (0b011, 0b100, 0b010, 0b001, 0b110),
    "T": (0b111, 0b010, 0b010, 0b010, 0b010),
    "U": (0b101, 0b101, 0b101, 0b101, 0b111),
    "V": (0b101, 0b101, 0b101, 0b101, 0b010),
    "W": (0b101, 0b101, 0b111, 0b111, 0b101),
    "X": (0b101, 0b101, 0b010, 0b101, 0b101),
    "Y": (0b101, 0b101, 0b010, 0b010, 0b010),
    "Z": (0b111, 0b001, 0b010, 0b100, 0b111),
    "[": (0b110, 0b100, 0b100, 0b100, 0b110),
    "\\": (0b100, 0b100, 0b010, 0b001, 0b001),
    "]": (0b011, 0b001, 0b001, 0b001, 0b011),
    "^": (0b010, 0b101, 0b000, 0b000, 0b000),
    "_": (0b000, 0b000, 0b000, 0b000, 0b111),
    "`": (0b100, 0b010, 0b000, 0b000, 0b000),
    "a": (0b000, 0b011, 0b101, 0b101, 0b011),
    "b": (0b100, 0b110, 0b101, 0b101, 0b110),
    "c": (0b000, 0b011, 0b100, 0b100, 0b011),
    "d": (0b001, 0b011, 0b101, 0b101, 0b011),
    "e": (0b000, 0b011, 0b111, 0b100, 0b011),
    "f": (0b001, 0b010, 0b111, 0b010, 0b010),
    "g": (0b011, 0b101, 0b011, 0b001, 0b110),
    "h": (0b100, 0b110, 0b101, 0b101, 0b101),
    "i": (0b010, 0b000, 0b010, 0b010, 0b010),
    "j": (0b001, 0b000, 0b001, 0b101, 0b010),
    "k": (0b100, 0b101, 0b110, 0b110, 0b101),
    "l": (0b110, 0b010, 0b010, 0b010, 0b111),
    "m": (0b000, 0b111, 0b111, 0b101, 0b101),
    "n": (0b000, 0b110, 0b101, 0b101, 0b101),
    "o": (0b000, 0b010, 0b101, 0b101, 0b010),
    "p": (0b000, 0b110, 0b101, 0b110, 0b100),
    "q": (0b000, 0b011, 0b101, 0b011, 0b001),
    "r": (0b000, 0b011, 0b100, 0b100, 0b100),
    "s": (0b000, 0b011, 0b110, 0b011, 0b110),
    "t": (0b010, 0b111, 0b010, 0b010, 0b011),
    "u": (0b000, 0b101, 0b101, 0b101, 0b011),
    "v": (0b000, 0b101, 0b101, 0b111, 0b010),
    "w": (0b000, 0b101, 0b111, 0b111, 0b111),
    "x": (0b000, 0b101, 0b010, 0b010, 0b101),
    "y": (0b000, 0b101, 0b011, 0b001, 0b110),
    "z": (0b000, 0b111, 0b011, 0b110, 0b111),
    "{": (0b011, 0b010, 0b110, 0b010, 0b011),
    "|": (0b010, 0b010, 0b010, 0b010, 0b010),
    "}": (0b110, 0b010, 0b011, 0b010, 0b110),
    "~": (0b000, 0b011, 0b110, 0b000, 0b000),
}

# bottom row is reserved for descenders
FONT_4X6_ROWS: Dict[str, GlyphRows] = {
    " ": (0b0000, 0b0000, 0b0000, 0b0000, 0b0000, 0b0000),
    "!": (0b0100, 0b0100, 0b0100, 0b0000, 0b0100, 0b0000),
    '"': (0b1010, 0b1010, 0b0000, 0b0000, 0b0000, 0b0000),
    "#": (0b1010, 0b1111, 0b1010, 0b1111, 0b1010, 0b0000),
    "$": (0b0111, 0b1010, 0b0110, 0b0101, 0b1110, 0b0000),
    "%": (0b1001, 0b0010, 0b0100, 0b1001, 0b0000, 0b0000),
    "&": (0b0100, 0b1010, 0b0101, 0b1010, 0b0101, 0b0000),
    "'": (0b0100, 0b0100, 0b0000, 0b0000, 0b0000, 0b0000),
    "(": (0b0010, 0b0100, 0b0100, 0b0100, 0b0010, 0b0000),
    ")": (0b0100, 0b0010, 0b0010, 0b0010, 0b0100, 0b0000),
    "*": (0b0000, 0b1010, 0b0100, 0b1010, 0b0000, 0b0000),
    "+": (0b0000, 0b0100, 0b1110, 0b0100, 0b0000, 0b0000),
    ",": (0b0000, 0b0000, 0b0000, 0b0000, 0b0100, 0b1000),
    "-": (0b0000, 0b0000, 0b1110, 0b0000, 0b0000, 0b0000),
    ".": (0b0000, 0b0000, 0b0000, 0b0000, 0b0100, 0b0000),
    "/": (0b0010, 0b0010, 0b0100, 0b1000, 0b1000, 0b0000),
    "0": (0b0110, 0b1001, 0b1011, 0b1101, 0b0110, 0b0000),
    "1": (0b0100, 0b1100, 0b0100, 0b0100, 0b1110, 0b0000),
    "2": (0b0110, 0b1001, 0b0010, 0b0100, 0b1111, 0b0000),
    "3": (0b1110, 0b0001, 0b0110, 0b0001, 0b1110, 0b0000),
    "4": (0b0010, 0b0110, 0b1010, 0b1111, 0b0010, 0b0000),
    "5": (0b1111, 0b1000, 0b1110, 0b0001, 0b1110, 0b0000),
    "6": (0b0110, 0b1000, 0b1110, 0b1001, 0b0110, 0b0000),
    "7": (0b1111, 0b0001, 0b0010, 0b0100, 0b0100, 0b0000),
    "8": (0b0110, 0b1001, 0b0110, 0b1001, 0b0110, 0b0000),
    "9": (0b0110, 0b1001, 0b0111, 0b0001, 0b0110, 0b0000),
    ":": (0b0000, 0b0100, 0b0000, 0b0100, 0b0000, 0b0000),
    ";": (0b0000, 0b0100, 0b0000, 0b0100, 0b1000, 0b0000),
    "<": (0b0010, 0b0100, 0b1000, 0b0100, 0b0010, 0b0000),
    "=": (0b0000, 0b1110, 0b0000, 0b1110, 0b0000, 0b0000),
    ">": (0b1000, 0b0100, 0b0010, 0b0100, 0b1000, 0b0000),
    "?": (0b0110, 0b1001, 0b0010, 0b0000, 0b0010, 0b0000),
    "@": (0b0110, 0b1001, 0b1011, 0b1000, 0b0110, 0b0000),
    "A": (0b0110, 0b1001, 0b1111, 0b1001, 0b1001, 0b0000),
    "B": (0b1110, 0b1001, 0b1110, 0b1001, 0b1110, 0b0000),
    "C": (0b0111, 0b1000, 0b1000, 0b1000, 0b0111, 0b0000),
    "D": (0b1110, 0b1001, 0b1001, 0b1001, 0b1110, 0b0000),
    "E": (0b1111, 0b1000, 0b1110, 0b1000, 0b1111, 0b0000),
    "F": (0b1111, 0b1000, 0b1110, 0b1000, 0b1000, 0b0000),
    "G": (0b0111, 0b1000, 0b1011, 0b1001, 0b0111, 0b0000),
    "H": (0b1001, 0b1001, 0b1111, 0b1001, 0b1001, 0b0000),
    "I": (0b1110, 0b0100, 0b0100, 0b0100, 0b1110, 0b0000),
    "J": (0b0001, 0b0001, 0b0001, 0b1001, 0b0110, 0b0000),
    "K": (0b1001, 0b1010, 0b1100, 0b1010, 0b1001, 0b0000),
    "L": (0b1000, 0b1000, 0b1000, 0b1000, 0b1111, 0b0000),
    "M": (0b1001, 0b1111, 0b1111, 0b1001, 0b1001, 0b0000),
    "N": (0b1001, 0b1101, 0b1011, 0b1001, 0b1001, 0b0000),
    "O": (0b0110, 0b1001, 0b1001, 0b1001, 0b0110, 0b0000),
    "P": (0b1110, 0b1001, 0b1110, 0b1000, 0b1000, 0b0000),
    "Q": (0b0110, 0b1001, 0b1001, 0b1011, 0b0111, 0b0000),
    "R": (0b1110, 0b1001, 0b1110, 0b1010, 0b1001, 0b0000),
    "S": (0b0111, 0b1000, 0b0110, 0b0001, 0b1110, 0b0000),
    "T": (0b1110, 0b0100, 0b0100, 0b0100, 0b0100, 0b0000),
    "U": (0b1001, 0b1001, 0b1001, 0b1001, 0b0110, 0b0000),
    "V": (0b1001, 0b1001, 0b1001, 0b1010, 0b0100, 0b0000),
    "W": (0b1001, 0b1001, 0b1111, 0b1111, 0b1001, 0b0000),
    "X": (0b1001, 0b1001, 0b0110, 0b1001, 0b1001, 0b0000),
    "Y": (0b1010, 0b1010, 0b0100, 0b0100, 0b0100, 0b0000),
    "Z": (0b1111, 0b0010, 0b0100, 0b1000, 0b1111, 0b0000),
    "[": (0b0110, 0b0100, 0b0100, 0b0100, 0b0110, 0b0000),
    "\\": (0b1000, 0b1000, 0b0100, 0b0010, 0b0010, 0b0000),
    "]": (0b0110, 0b0010, 0b0010, 0b0010, 0b0110, 0b0000),
    "^": (0b0100, 0b1010, 0b0000, 0b0000, 0b0000, 0b0000),
    "_": (0b0000, 0b0000, 0b0000, 0b0000, 0b0000, 0b1111),
    "`": (0b1000, 0b0100, 0b0000, 0b0000, 0b0000, 0b0000),
    "a": (0b0000, 0b0111, 0b1001, 0b1001, 0b0111, 0b0000),
    "b": (0b1000, 0b1110, 0b1001, 0b1001, 0b1110, 0b0000),
    "c": (0b0000, 0b0111, 0b1000, 0b1000, 0b0111, 0b0000),
    "d": (0b0001, 0b0111, 0b1001, 0b1001, 0b0111, 0b0000),
    "e": (0b0000, 0b0110, 0b1111, 0b1000, 0b0111, 0b0000),
    "f": (0b0011, 0b0100, 0b1110, 0b0100, 0b0100, 0b0000),
    "g": (0b0000, 0b0111, 0b1001, 0b0111, 0b0001, 0b0110),
    "h": (0b1000, 0b1110, 0b1001, 0b1001, 0b1001, 0b0000),
    "i": (0b0100, 0b0000, 0b1100, 0b0100, 0b1110, 0b0000),
    "j": (0b0010, 0b0000, 0b0010, 0b0010, 0b1010, 0b0100),
    "k": (0b1000, 0b1010, 0b1100, 0b1010, 0b1001, 0b0000),
    "l": (0b1100, 0b0100, 0b0100, 0b0100, 0b1110, 0b0000),
    "m": (0b0000, 0b1010, 0b1111, 0b1001, 0b1001, 0b0000),
    "n": (0b0000, 0b1110, 0b1001, 0b1001, 0b1001, 0b0000),
    "o": (0b0000, 0b0110, 0b1001, 0b1001, 0b0110, 0b0000),
    "p": (0b0000, 0b1110, 0b1001, 0b1001, 0b1110, 0b1000),
    "q": (0b0000, 0b0111, 0b1001, 0b1001, 0b0111, 0b0001),
    "r": (0b0000, 0b1011, 0b1100, 0b1000, 0b1000, 0b0000),
    "s": (0b0000, 0b0111, 0b1100, 0b0011, 0b1110, 0b0000),
    "t": (0b0100, 0b1110, 0b0100, 0b0100, 0b0011, 0b0000),
    "u": (0b0000, 0b1001, 0b1001, 0b1001, 0b0111, 0b0000),
    "v": (0b0000, 0b1001, 0b1001, 0b1010, 0b0100, 0b0000),
    "w": (0b0000, 0b1001, 0b1001, 0b1111, 0b0110, 0b0000),
    "x": (0b0000, 0b1001, 0b0110, 0b0110, 0b1001, 0b0000),
    "y": (0b0000, 0b1001, 0b1001, 0b0111, 0b0001, 0b0110),
    "z": (0b0000, 0b1111, 0b0010, 0b0100, 0b1111, 0b0000),
    "{": (0b0010, 0b0100, 0b1100, 0b0100, 0b0010, 0b0000),
    "|": (0b0100, 0b0100, 0b0100, 0b0100, 0b0100, 0b0000),
    "}": (0b1000, 0b0100, 0b0110, 0b0100, 0b1000, 0b0000),
    "~": (0b0000, 0b0101, 0b1010, 0b0000, 0b0000, 0b0000),
}

FONT_5X7_ROWS: Dict[str, GlyphRows] = {
    " ": (0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00000),
    "!": (0b00100, 0b00100, 0b00100, 0b00100, 0b00100, 0b00000, 0b00100),
    '"': (0b01010, 0b01010, 0b01010, 0b00000, 0b00000, 0b00000, 0b00000),
    "#": (0b01010, 0b01010, 0b11111, 0b01010, 0b11111, 0b01010, 0b01010),
    "$": (0b00100, 0b01111, 0b10100, 0b01110, 0b00101, 0b11110, 0b00100),
    "%": (0b11000, 0b11001, 0b00010, 0b00100, 0b01000, 0b10011, 0b00011),
    "&": (0b01100, 0b10010, 0b10100, 0b01000, 0b10101, 0b10010, 0b01101),
    "'": (0b01100, 0b00100, 0b01000, 0b00000, 0b00000, 0b00000, 0b00000),
    "(": (0b00010, 0b00100, 0b01000, 0b01000, 0b01000, 0b00100, 0b00010),
    ")": (0b01000, 0b00100, 0b00010, 0b00010, 0b00010, 0b00100, 0b01000),
    "*": (0b00000, 0b00100, 0b10101, 0b01110, 0b10101, 0b00100, 0b00000),
    "+": (0b00000, 0b00100, 0b00100, 0b11111, 0b00100, 0b00100, 0b00000),
    ",": (0b00000, 0b00000, 0b00000, 0b00000, 0b01100, 0b00100, 0b01000),
    "-": (0b00000, 0b00000, 0b00000, 0b11111, 0b00000, 0b00000, 0b00000),
    ".": (0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b01100, 0b01100),
    "/": (0b00000, 0b00001, 0b00010, 0b00100, 0b01000, 0b10000, 0b00000),
    "0": (0b01110, 0b10001, 0b10011, 0b10101, 0b11001, 0b10001, 0b01110),
    "1": (0b00100, 0b01100, 0b00100, 0b00100, 0b00100, 0b00100, 0b01110),
    "2": (0b01110, 0b10001, 0b00001, 0b00010, 0b00100, 0b01000, 0b11111),
    "3": (0b11111, 0b00010, 0b00100, 0b00010, 0b00001, 0b10001, 0b01110),
    "4": (0b00010, 0b00110, 0b01010, 0b10010, 0b11111, 0b00010, 0b00010),
    "5": (0b11111, 0b10000, 0b11110, 0b00001, 0b00001, 0b10001, 0b01110),
    "6": (0b00110, 0b01000, 0b10000, 0b11110, 0b10001, 0b10001, 0b01110),
    "7": (0b11111, 0b00001, 0b00010, 0b00100, 0b01000, 0b01000, 0b01000),
    "8": (0b01110, 0b10001, 0b10001, 0b01110, 0b10001, 0b10001, 0b01110),
    "9": (0b01110, 0b10001, 0b10001, 0b01111, 0b00001, 0b00010, 0b01100),
    ":": (0b00000, 0b01100, 0b01100, 0b00000, 0b01100, 0b01100, 0b00000),
    ";": (0b00000, 0b01100, 0b01100, 0b00000, 0b01100, 0b00100, 0b01000),
    "<": (0b00010, 0b00100, 0b01000, 0b10000, 0b01000, 0b00100, 0b00010),
    "=": (0b00000, 0b00000, 0b11111, 0b00000, 0b11111, 0b00000, 0b00000),
    ">": (0b01000, 0b00100, 0b00010, 0b00001, 0b00010, 0b00100, 0b01000),
    "?": (0b01110, 0b10001, 0b00001, 0b00010, 0b00100, 0b00000, 0b00100),
    "@": (0b01110, 0b10001, 0b00001, 0b01101, 0b10101, 0b10101, 0b01110),
    "A": (0b01110, 0b10001, 0b10001, 0b11111, 0b10001, 0b10001, 0b10001),
    "B": (0b11110, 0b10001, 0b10001, 0b11110, 0b10001, 0b10001, 0b11110),
    "C": (0b01110, 0b10001, 0b10000, 0b10000, 0b10000, 0b10001, 0b01110),
    "D": (0b11100, 0b10010, 0b10001, 0b10001, 0b10001, 0b10010, 0b11100),
    "E": (0b11111, 0b10000, 0b10000, 0b11110, 0b10000, 0b10000, 0b11111),
    "F": (0b11111, 0b10000, 0b10000, 0b11110, 0b10000, 0b10000, 0b10000),
    "G": (0b01110, 0b10001, 0b10000, 0b10111, 0b10001, 0b10001, 0b01111),
    "H": (0b10001, 0b10001, 0b10001, 0b11111, 0b10001, 0b10001, 0b10001),
    "I": (0b01110, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100, 0b01110),
    "J": (0b00111, 0b00010, 0b00010, 0b00010, 0b00010, 0b10010, 0b01100),
    "K": (0b10001, 0b10010, 0b10100, 0b11000, 0b10100, 0b10010, 0b10001),
    "L": (0b10000, 0b10000, 0b10000, 0b10000, 0b10000, 0b10000, 0b11111),
    "M": (0b10001, 0b11011, 0b10101, 0b10101, 0b10001, 0b10001, 0b10001),
    "N": (0b10001, 0b10001, 0b11001, 0b10101, 0b10011, 0b10001, 0b10001),
    "O": (0b01110, 0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b01110),
    "P": (0b11110, 0b10001, 0b10001, 0b11110, 0b10000, 0b10000, 0b10000),
    "Q": (0b01110, 0b10001, 0b10001, 0b10001, 0b10101, 0b10010, 0b01101),
    "R": (0b11110, 0b10001, 0b10001, 0b11110, 0b10100, 0b10010, 0b10001),
    "S": (0b01111, 0b10000, 0b10000, 0b01110, 0b00001, 0b00001, 0b11110),
    "T": (0b11111, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100),
    "U": (0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b01110),
    "V": (0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b01010, 0b00100),
    "W": (0b10001, 0b10001, 0b10001, 0b10101, 0b10101, 0b10101, 0b01010),
    "X": (0b10001, 0b10001, 0b01010, 0b00100, 0b01010, 0b10001, 0b10001),
    "Y": (0b10001, 0b10001, 0b10001, 0b01010, 0b00100, 0b00100, 0b00100),
    "Z": (0b11111, 0b00001, 0b00010, 0b00100, 0b01000, 0b10000, 0b11111),
    "[": (0b01110, 0b01000, 0b01000, 0b01000, 0b01000, 0b01000, 0b01110),
    "\\": (0b00000, 0b10000, 0b01000, 0b00100, 0b00010, 0b00001, 0b00000),
    "]": (0b01110, 0b00010, 0b00010, 0b00010, 0b00010, 0b00010, 0b01110),
    "^": (0b00100, 0b01010, 0b10001, 0b00000, 0b00000, 0b00000, 0b00000),
    "_": (0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b11111),
    "`": (0b01000, 0b00100, 0b00010, 0b00000, 0b00000, 0b00000, 0b00000),
    "a": (0b00000, 0b00000, 0b01110, 0b00001, 0b01111, 0b10001, 0b01111),
    "b": (0b10000, 0b10000, 0b10110, 0b11001, 0b10001, 0b10001, 0b11110),
    "c": (0b00000, 0b00000, 0b01110, 0b10000, 0b10000, 0b10001, 0b01110),
    "d": (0b00001, 0b00001, 0b01101, 0b10011, 0b10001, 0b10001, 0b01111),
    "e": (0b00000, 0b00000, 0b01110, 0b10001, 0b11111, 0b10000, 0b01110),
    "f": (0b00110, 0b01001, 0b01000, 0b11100, 0b01000, 0b01000, 0b01000),
    "g": (0b00000, 0b01111, 0b10001, 0b10001, 0b01111, 0b00001, 0b01110),
    "h": (0b10000, 0b10000, 0b10110, 0b11001, 0b10001, 0b10001, 0b10001),
    "i": (0b00100, 0b00000, 0b01100, 0b00100, 0b00100, 0b00100, 0b01110),
    "j": (0b00010, 0b00000, 0b00110, 0b00010, 0b00010, 0b10010, 0b01100),
    "k": (0b10000, 0b10000, 0b10010, 0b10100, 0b11000, 0b10100, 0b10010),
    "l": (0b01100, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100, 0b01110),
    "m": (0b00000, 0b00000, 0b11010, 0b10101, 0b10101, 0b10001, 0b10001),
    "n": (0b00000, 0b00000, 0b10110, 0b11001, 0b10001, 0b10001, 0b10001),
    "o": (0b00000, 0b00000, 0b01110, 0b10001, 0b10001, 0b10001, 0b01110),
    "p": (0b00000, 0b00000, 0b11110, 0b10001, 0b11110, 0b10000, 0b10000),
    "q": (0b00000, 0b00000, 0b01101, 0b10011, 0b01111, 0b00001, 0b00001),
    "r": (0b00000, 0b00000, 0b10110, 0b11001, 0b10000, 0b10000, 0b10000),
    "s": (0b00000, 0b00000, 0b01110, 0b10000, 0b01110, 0b00001, 0b11110),
    "t": (0b01000, 0b01000, 0b11100, 0b01000, 0b01000, 0b01001, 0b00110),
    "u": (0b00000, 0b00000, 0b10001, 0b10001, 0b10001, 0b10011, 0b01101),
    "v": (0b00000, 0b00000, 0b10001, 0b10001, 0b10001, 0b01010, 0b00100),
    "w": (0b00000, 0b00000, 0b10001, 0b10001, 0b10101, 0b10101, 0b01010),
    "x": (0b00000, 0b00000, 0b10001, 0b01010, 0b00100, 0b01010, 0b10001),
    "y": (0b00000, 0b00000, 0b10001, 0b10001, 0b01111, 0b00001, 0b01110),
    "z": (0b00000, 0b00000, 0b11111, 0b00010, 0b00100, 0b01000, 0b11111),
    "{": (0b00010, 0b00100, 0b00100, 0b01000, 0b00100, 0b00100, 0b00010),
    "|": (0b00100, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100),
    "}": (0b01000, 0b00100, 0b00100, 0b00010, 0b00100, 0b00100, 0b01000),
    "~": (0b00000, 0b00000, 0b01000, 0b10101, 0b00010, 0b00000, 0b00000),
}
