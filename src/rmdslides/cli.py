"""Command-line interface for rmdslides.

Usage:
    rmdslides book/inference/models.Rmd -d lectures/inference --author "Jane Doe"
    rmdslides chapter.Rmd -o chapter-slides --max-lines 12 --no-exercises -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from rmdslides import __version__
from rmdslides.config import SlideConfig
from rmdslides.converter import convert_file
from rmdslides.errors import RmdSlidesError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rmdslides",
        description=(
            "Convert an R Markdown chapter into R Markdown slides. "
            "Review the output before knitting: code output is not counted "
            "when deciding where pages break."
        ),
    )
    parser.add_argument("input", help="Chapter file to convert")
    parser.add_argument("-o", "--output", help="Output name without extension (default: input name)")
    parser.add_argument("-d", "--output-dir", default=".", help="Directory for the outputs")
    parser.add_argument(
        "--exercises", dest="output_exercises", help="Exercise output name without extension"
    )
    parser.add_argument("--suffix", default="Rmd", help="Output file extension (default: Rmd)")
    parser.add_argument("--img-dir", default="img", help="Image directory (default: img)")
    parser.add_argument("--title", help="Deck title (default: derived from output name)")
    parser.add_argument("--author", default="", help="Deck author")
    parser.add_argument("--max-lines", type=int, default=15, help="Lines per page (default: 15)")
    parser.add_argument(
        "--chars-per-line", type=int, default=60, help="Characters per line (default: 60)"
    )
    parser.add_argument(
        "--max-title-length",
        type=int,
        dest="max_section_title_length",
        help="Truncate section banners to this many characters",
    )
    parser.add_argument(
        "--no-exercises",
        dest="save_exercises",
        action="store_false",
        help="Do not write the exercise document",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every line as it is processed"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line.

    Returns:
        Exit status: 0 on success, 1 on a conversion error
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = SlideConfig.from_dict(vars(args))
        result = convert_file(
            args.input,
            output=args.output,
            output_dir=args.output_dir,
            output_exercises=args.output_exercises,
            suffix=args.suffix,
            config=config,
        )
    except RmdSlidesError as e:
        print(f"rmdslides: {e}", file=sys.stderr)
        return 1

    print(f"Slides: {result.deck_path} ({result.pages} pages)")
    if result.exercises_path is not None:
        print(f"Exercises: {result.exercises_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
