"""Command-line interface: convert photos into four-colour PMODE artwork."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Sequence

from .constants import DEFAULT_COLOR_INDEX, DEFAULT_FONT, HEIGHT, PALETTE_SETS, WIDTH
from .debug_log import enable_console_logging, setup_debug_logging
from .palette_ops import PaletteError
from .processing import ConvertOptions, convert_photo
from .text import FONTS, InvalidCharacterError


def parse_swap(value: str) -> List[int]:
    """``"3201"`` -> ``[3, 2, 0, 1]``."""

    value = value.strip()
    if len(value) != 4 or sorted(value) != ["0", "1", "2", "3"]:
        raise argparse.ArgumentTypeError("--swap expects the digits 0-3, each once (e.g. 3201)")
    return [int(ch) for ch in value]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=f"Convert images into {WIDTH}x{HEIGHT} four-colour artwork"
    )
    parser.add_argument("inputs", nargs="+", type=Path, help="Input image files")
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Destination folder (defaults to <input>/out)",
    )
    parser.add_argument(
        "--palette-set",
        type=int,
        choices=range(len(PALETTE_SETS)),
        default=0,
        help="0 = green/red/yellow/blue, 1 = buff/cyan/magenta/orange",
    )
    parser.add_argument(
        "--bias",
        type=float,
        nargs=4,
        metavar=("B0", "B1", "B2", "B3"),
        default=[0.0, 0.0, 0.0, 0.0],
        help="Per-slot bias weights; positive values favour that colour",
    )
    parser.add_argument(
        "--swap",
        type=parse_swap,
        default=None,
        help="Re-index colours after quantizing, e.g. 1023 swaps slots 0 and 1",
    )
    parser.add_argument("--text", default=None, help="Caption to bake into the artwork")
    parser.add_argument(
        "--text-at",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Caption centre (defaults to canvas centre)",
    )
    parser.add_argument(
        "--text-color",
        type=int,
        choices=range(4),
        default=DEFAULT_COLOR_INDEX,
        help="Palette index used for the caption",
    )
    parser.add_argument("--font", choices=sorted(FONTS), default=DEFAULT_FONT, help="Caption font")
    parser.add_argument("--no-act", action="store_true", help="Skip writing the .act palette")
    parser.add_argument(
        "--debug-log",
        type=Path,
        default=None,
        help="Write a log file here (overrides PMODE_PAINT_DEBUG_LOG)",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING"),
        default="DEBUG",
        help="Level for the log file and --verbose output",
    )
    parser.add_argument("--verbose", action="store_true", help="Log to stderr")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = getattr(logging, args.log_level)
    setup_debug_logging(args.debug_log, level)
    if args.verbose:
        enable_console_logging(level)

    missing = [path for path in args.inputs if not path.is_file()]
    if missing:
        parser.error(f"Input path not found: {missing[0]}")

    successes = 0
    failures = 0
    for file_path in args.inputs:
        out_dir = args.out or (file_path.parent / "out")
        options = ConvertOptions(
            input_path=file_path,
            output_dir=out_dir,
            palette_set=args.palette_set,
            weights=args.bias,
            swap=args.swap,
            text=args.text,
            text_at=tuple(args.text_at) if args.text_at else None,
            text_color=args.text_color,
            font=args.font,
            write_act=not args.no_act,
        )
        try:
            result = convert_photo(options)
        except (PaletteError, InvalidCharacterError, ValueError, OSError) as exc:
            failures += 1
            print(f"[FAIL] {file_path}: {exc}")
            continue
        successes += 1
        counts = " ".join(str(count) for count in result.color_counts)
        print(f"[OK] {file_path.name} -> {result.output_path} (counts {counts})")

    print(f"Completed {successes} file(s), {failures} failure(s).")
    return 0 if failures == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
