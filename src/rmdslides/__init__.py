"""
rmdslides: turn long-form R Markdown chapters into paginated slide decks.

Every prose sentence becomes a bullet, code chunks are kept, chunks that
draw a figure are split into a code page and a figure page, and
exercise sections are moved to a companion document. A new page starts
whenever the estimated page weight runs out.

Quick Start:
    >>> from rmdslides import convert_text
    >>> result = convert_text("# Intro\\nThis is one. This is two.")
    >>> print(result.deck.split("```")[-1].strip())
    ## Intro
    <BLANKLINE>
    - This is one.
    <BLANKLINE>
    - This is two.

    >>> # Or convert files, refusing to overwrite an existing deck
    >>> from rmdslides import SlideConfig, convert_file
    >>> convert_file("book/inference/models.Rmd", output_dir="lectures",
    ...              config=SlideConfig(max_lines=12, author="Jane Doe"))  # doctest: +SKIP

The generated deck is an estimate: output produced by running code is
not counted, so always review it before knitting.

Installation:
    pip install rmdslides              # Zero runtime dependencies
    pip install rmdslides[test]        # + pytest, hypothesis
"""

from rmdslides.classifier import ClassifiedDocument, classify_line, classify_lines
from rmdslides.config import OutputPaths, SlideConfig, resolve_output_paths
from rmdslides.converter import ConversionResult, SlideDeck, convert_file, convert_text
from rmdslides.emitter import Emitter
from rmdslides.errors import ConfigError, InputReadError, OutputExistsError, RmdSlidesError
from rmdslides.lines import Line, LineType, Region, RegionKind
from rmdslides.pagination import PaginationState, Paginator, paginate
from rmdslides.preamble import render_preamble
from rmdslides.preprocess import preprocess_lines
from rmdslides.regions import RegionSpans, find_regions
from rmdslides.sentences import format_bullet, split_sentences

__version__ = "0.1.0"

__all__ = [
    "ClassifiedDocument",
    "ConfigError",
    "ConversionResult",
    "Emitter",
    "InputReadError",
    "Line",
    "LineType",
    "OutputExistsError",
    "OutputPaths",
    "PaginationState",
    "Paginator",
    "Region",
    "RegionKind",
    "RegionSpans",
    "RmdSlidesError",
    "SlideConfig",
    "SlideDeck",
    "__version__",
    "classify_line",
    "classify_lines",
    "convert_file",
    "convert_text",
    "find_regions",
    "format_bullet",
    "paginate",
    "preprocess_lines",
    "render_preamble",
    "resolve_output_paths",
    "split_sentences",
]
