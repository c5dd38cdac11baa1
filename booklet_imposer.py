#!/usr/bin/env python3
"""
Saddle-Stitch Booklet Imposer

Rearranges the pages of a PDF two-up on landscape A4 (or A3) sheets so that,
printed double-sided and folded in half, they read in the original order.
Works on a single file or on every PDF in a directory.
"""

import argparse
import math
import sys
from pathlib import Path
from typing import List, Optional

from src.config import SHEET_SIZES, DEFAULT_SHEET_SIZE, LARGE_SHEET_SIZE
from src.exceptions import BookletError, UsageError
from src.models import ImpositionConfig
from src.services import BookletService


class BookletArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def non_negative_float(value: str) -> float:
    """argparse type for --padding."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'")
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"must be a finite number, got '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    large_w, large_h = SHEET_SIZES[LARGE_SHEET_SIZE]
    parser = BookletArgumentParser(
        description="Impose PDFs into print-ready saddle-stitch booklets (2 pages per side).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s zine.pdf zine-booklet.pdf
  %(prog)s zine.pdf zine-booklet.pdf --a3
  %(prog)s zine.pdf zine-booklet.pdf --padding 18 --double
  %(prog)s scans/ booklets/                 # Batch mode: every *.pdf in scans/
        """
    )

    parser.add_argument('input_path', nargs='?', help='Input PDF file or directory (batch mode)')
    parser.add_argument('output_path', nargs='?',
                        help='Output PDF file, or directory in batch mode')
    parser.add_argument('--a3', action='store_true',
                        help=f'Use A3 sheets ({large_w:.0f}x{large_h:.0f}pt) instead of {DEFAULT_SHEET_SIZE.upper()}')
    parser.add_argument('--padding', type=non_negative_float, default=0.0,
                        help='Gap in points around each placed page (default: 0)')
    parser.add_argument('--double', action='store_true',
                        help='Print every page twice per side, stacked vertically')

    return parser


def run(input_path: Path, output_path: Path, config: ImpositionConfig) -> int:
    """
    Run single-file or batch mode.

    Returns:
        Process exit code
    """
    if not input_path.exists():
        raise UsageError(f"Input path not found: {input_path}")

    service = BookletService()

    if input_path.is_dir():
        batch = service.process_batch(input_path, output_path, config)
        return 0 if batch.all_succeeded() else 1

    service.create_booklet(input_path, output_path, config)
    print(f"\nSaddle-stitch booklet created successfully: {output_path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not (args.input_path and args.output_path):
        parser.print_help()
        return 1

    config = ImpositionConfig(
        padding=args.padding,
        double_print=args.double,
        use_large_sheet=args.a3,
    )

    try:
        return run(Path(args.input_path), Path(args.output_path), config)
    except BookletError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
