"""Conversion entry points: chapter text or file in, deck and exercises out.

convert_text runs entirely in memory. convert_file adds the file-system
contract: refuse to overwrite an existing deck, read the chapter, create
the output directory if needed, write the deck, and write the exercise
document only when there is something to put in it.
"""

from __future__ import annotations

import datetime
from collections.abc import Sequence
from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path

from rmdslides.classifier import ClassifiedDocument, classify_lines
from rmdslides.config import OutputPaths, SlideConfig, resolve_output_paths
from rmdslides.emitter import Emitter
from rmdslides.errors import InputReadError, OutputExistsError
from rmdslides.pagination import Paginator
from rmdslides.preamble import render_preamble
from rmdslides.preprocess import preprocess_lines
from rmdslides.protocols import TextSink
from rmdslides.stringbuilder import StringBuilder
from rmdslides.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SlideDeck:
    """Result of an in-memory conversion.

    Attributes:
        deck: Slide deck text, preamble included
        exercises: Exercise document text ("" when none or not saved)
        pages: Number of page breaks taken
        has_exercises: At least one exercise heading was found
        warnings: Recoverable problems found during the run

    """

    deck: str
    exercises: str
    pages: int
    has_exercises: bool
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Result of a file conversion.

    Attributes:
        deck_path: Written slide deck
        exercises_path: Written exercise document, or None if not written
        pages: Number of page breaks taken
        warnings: Recoverable problems found during the run

    """

    deck_path: Path
    exercises_path: Path | None
    pages: int
    warnings: tuple[str, ...] = ()


def _prepare(source: str | Sequence[str], config: SlideConfig) -> ClassifiedDocument:
    lines = source.splitlines() if isinstance(source, str) else source
    return classify_lines(preprocess_lines(lines), config.max_section_title_length)


def _run(
    document: ClassifiedDocument,
    config: SlideConfig,
    deck: TextSink,
    exercises: TextSink | None,
    today: datetime.date | None,
) -> int:
    emitter = Emitter(deck, exercises, save_exercises=config.save_exercises)
    emitter.preamble(render_preamble(config, today))
    return Paginator(document, emitter, config).run().page


def convert_text(
    source: str | Sequence[str],
    config: SlideConfig | None = None,
    *,
    today: datetime.date | None = None,
) -> SlideDeck:
    """Convert chapter text into a slide deck in memory.

    Args:
        source: Chapter text, or its lines
        config: Run configuration (defaults apply when None)
        today: Preamble date when config.date is unset (default: today)

    Returns:
        SlideDeck with both outputs and run statistics

    Example:
        >>> result = convert_text("# Intro\\nThis is one. This is two.")
        >>> result.deck.endswith("## Intro\\n\\n- This is one.\\n\\n- This is two.\\n\\n")
        True
    """
    config = config or SlideConfig()
    document = _prepare(source, config)

    deck = StringBuilder()
    exercises = StringBuilder()
    pages = _run(document, config, deck, exercises, today)

    return SlideDeck(
        deck=deck.build(),
        exercises=exercises.build(),
        pages=pages,
        has_exercises=document.has_exercises,
        warnings=tuple(document.warnings),
    )


def convert_file(
    input_path: str | Path,
    *,
    output: str | None = None,
    output_dir: str | Path = ".",
    output_exercises: str | None = None,
    suffix: str = "Rmd",
    config: SlideConfig | None = None,
    today: datetime.date | None = None,
) -> ConversionResult:
    """Convert a chapter file into a slide deck file.

    Args:
        input_path: Chapter to convert (read as UTF-8)
        output: Deck name without suffix (default: input basename)
        output_dir: Directory for both outputs (created if missing)
        output_exercises: Exercise document name without suffix
        suffix: File extension for both outputs
        config: Run configuration; a missing title is derived from output
        today: Preamble date when config.date is unset (default: today)

    Returns:
        ConversionResult with the written paths

    Raises:
        OutputExistsError: Deck path already exists (nothing is written)
        InputReadError: Input cannot be read or is not UTF-8
    """
    paths: OutputPaths = resolve_output_paths(
        input_path, output, output_dir, output_exercises, suffix
    )
    if paths.deck.exists():
        raise OutputExistsError(paths.deck)

    try:
        source = Path(input_path).read_text(encoding="utf-8")
    except OSError as e:
        raise InputReadError(input_path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise InputReadError(
            input_path, f"not valid UTF-8 (byte {e.start}: {e.reason})"
        ) from e

    config = (config or SlideConfig()).with_title_for(paths.name)
    document = _prepare(source, config)
    write_exercises = document.has_exercises and config.save_exercises

    paths.deck.parent.mkdir(parents=True, exist_ok=True)
    if write_exercises:
        paths.exercises.parent.mkdir(parents=True, exist_ok=True)

    with ExitStack() as stack:
        deck = stack.enter_context(paths.deck.open("w", encoding="utf-8"))
        exercises = None
        if write_exercises:
            exercises = stack.enter_context(paths.exercises.open("w", encoding="utf-8"))
        pages = _run(document, config, deck, exercises, today)

    logger.info("Wrote %s (%d pages)", paths.deck, pages)
    if write_exercises:
        logger.info("Wrote exercises to %s", paths.exercises)

    return ConversionResult(
        deck_path=paths.deck,
        exercises_path=paths.exercises if write_exercises else None,
        pages=pages,
        warnings=tuple(document.warnings),
    )


__all__ = [
    "ConversionResult",
    "SlideDeck",
    "convert_file",
    "convert_text",
]
