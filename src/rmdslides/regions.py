"""Region matcher: pairs code fences and display-math delimiters.

One forward scan per delimiter family. Code fences are matched first
and their spans are excluded from the math scan, so a ``$$`` inside a
code chunk never opens a math block.

Tables are not matched here. Their extent is discovered by one-line
lookahead while the paginator walks the document.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from rmdslides.classifiers.fence import is_fence
from rmdslides.classifiers.math import is_math_delimiter, is_oneline_math
from rmdslides.classifiers.plot import is_plot_line
from rmdslides.lines import Region, RegionKind, region_weight
from rmdslides.utils.logger import get_logger

logger = get_logger(__name__)

UNBALANCED_MATH_WARNING = "Detected unclosed latex on lines {lines}. Check output carefully."


@dataclass(slots=True)
class RegionSpans:
    """Matched spans for every delimiter family.

    Attributes:
        code: Non-empty code regions (kind CODE or PLOT_CODE), in order
        empty_code: Fence pairs with no interior lines
        unmatched_fences: Index of a trailing opener with no close, if any
        latex: Display-math regions (start == end for synthetic recovery)
        oneline_latex: Lines holding a self-contained ``$$ ... $$`` block
        warnings: Human-readable warnings raised while matching

    """

    code: list[Region] = field(default_factory=list)
    empty_code: list[Region] = field(default_factory=list)
    unmatched_fences: list[int] = field(default_factory=list)
    latex: list[Region] = field(default_factory=list)
    oneline_latex: list[int] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def covered(self) -> set[int]:
        """Indices claimed by any code or math region, delimiters included."""
        indices: set[int] = set(self.oneline_latex)
        for region in (*self.code, *self.empty_code, *self.latex):
            indices.update(range(region.start, region.end + 1))
        return indices


def match_fences(lines: Sequence[str]) -> tuple[list[Region], list[Region], list[int]]:
    """Pair code fences by toggling between open and closed.

    Args:
        lines: Cleaned line sequence

    Returns:
        (regions, empty_regions, unmatched_openers)
    """
    regions: list[Region] = []
    empty: list[Region] = []
    opener: int | None = None

    for i, line in enumerate(lines):
        if not is_fence(line):
            continue
        if opener is None:
            opener = i
            continue
        region = Region(RegionKind.CODE, opener, i, region_weight(opener, i))
        if region.is_empty:
            empty.append(region)
        else:
            regions.append(region)
        opener = None

    unmatched = [opener] if opener is not None else []
    return regions, empty, unmatched


def mark_plot_regions(regions: Sequence[Region], lines: Sequence[str]) -> list[Region]:
    """Reclassify code regions whose interior produces a figure.

    Example:
        >>> lines = ["```{r}", "hist(x)", "```"]
        >>> mark_plot_regions([Region(RegionKind.CODE, 0, 2)], lines)[0].kind
        <RegionKind.PLOT_CODE: 'plot_code'>
    """
    marked: list[Region] = []
    for region in regions:
        if any(is_plot_line(lines[i]) for i in region.interior):
            region = Region(RegionKind.PLOT_CODE, region.start, region.end, region.weight)
        marked.append(region)
    return marked


def match_math(
    lines: Sequence[str], excluded: set[int] | frozenset[int] = frozenset()
) -> tuple[list[Region], list[int], list[str]]:
    """Pair display-math delimiters sequentially.

    Lines with two delimiters are one-line blocks and are removed before
    pairing. The rest pair 1st with 2nd, 3rd with 4th, and so on. With an
    odd count the last delimiter is reused as a synthetic end, which turns
    it into a start-and-end block; a warning is returned.

    Args:
        lines: Cleaned line sequence
        excluded: Indices to ignore (lines inside code regions)

    Returns:
        (regions, oneline_indices, warnings)
    """
    delimiters: list[int] = []
    oneline: list[int] = []
    for i, line in enumerate(lines):
        if i in excluded or not is_math_delimiter(line):
            continue
        if is_oneline_math(line):
            oneline.append(i)
        else:
            delimiters.append(i)

    warnings: list[str] = []
    if len(delimiters) % 2:
        message = UNBALANCED_MATH_WARNING.format(lines=", ".join(str(i + 1) for i in delimiters))
        logger.warning(message)
        warnings.append(message)
        delimiters.append(delimiters[-1])

    regions = [
        Region(RegionKind.LATEX, start, end, region_weight(start, end))
        for start, end in zip(delimiters[::2], delimiters[1::2])
    ]
    return regions, oneline, warnings


def find_regions(lines: Sequence[str]) -> RegionSpans:
    """Match every delimited region in the cleaned line sequence.

    Args:
        lines: Cleaned line sequence

    Returns:
        RegionSpans with code, math and one-line math spans
    """
    code, empty, unmatched = match_fences(lines)
    spans = RegionSpans(
        code=mark_plot_regions(code, lines),
        empty_code=empty,
        unmatched_fences=unmatched,
    )
    if unmatched:
        logger.debug("Unmatched code fence at line %d passed through", unmatched[0] + 1)

    latex, oneline, warnings = match_math(lines, spans.covered())
    spans.latex = latex
    spans.oneline_latex = oneline
    spans.warnings.extend(warnings)
    return spans


__all__ = [
    "RegionSpans",
    "UNBALANCED_MATH_WARNING",
    "find_regions",
    "match_fences",
    "match_math",
    "mark_plot_regions",
]
