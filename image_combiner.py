#!/usr/bin/env python3
"""
Image Combiner command line entry point.

Usage:
    python image_combiner.py IMAGE_1 IMAGE_2 OUTPUT

Both inputs must be in the same container format (e.g. both PNG). The larger
image is resized to the smaller one, their pixels are interleaved in
alternating 4-byte groups and the result is written to OUTPUT in the
format of the inputs.
"""

from typing import List, Optional
import argparse
import logging
import sys

from IC_Libs.CombineLib.exceptions import ImageCombineError
from IC_Libs.PipelineLib.combine_pipeline import run_combine_pipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Combine two images by interleaving their pixel data."
    )
    parser.add_argument("image_1", help="First image")
    parser.add_argument("image_2", help="Second image (same format as the first)")
    parser.add_argument("output", help="Output file name")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        saved = run_combine_pipeline(args.image_1, args.image_2, args.output)
    except (ImageCombineError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Saved combined image -> {saved}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
