"""Line classifier: tags every cleaned line with exactly one LineType.

Region spans from the region matcher are applied first. Only lines that
no region claims are tested against the single-line predicates
(heading, quote, table); anything left over is prose.

A blank LAST_LINE sentinel is appended so that lookahead from the real
last line is always safe and the final block is flushed.

Usage:
    >>> doc = classify_lines(["# Intro", "Some text. More text."])
    >>> [line.type.value for line in doc.lines]
    ['section', 'prose', 'last_line']
    >>> doc.lines[0].text
    '## Intro'

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from rmdslides.classifiers.heading import is_exercise_heading, is_heading, normalize_heading
from rmdslides.classifiers.quote import is_quote
from rmdslides.classifiers.table import is_table_line
from rmdslides.lines import Line, LineType, Region, RegionKind
from rmdslides.regions import RegionSpans, find_regions

_CODE_DELIMITERS = {
    RegionKind.CODE: (LineType.CODE_START, LineType.CODE_END),
    RegionKind.PLOT_CODE: (LineType.PLOT_CODE_START, LineType.PLOT_CODE_END),
}


@dataclass(slots=True)
class ClassifiedDocument:
    """Tagged line sequence plus the regions that produced the tags.

    Attributes:
        lines: Tagged lines, ending with the LAST_LINE sentinel
        regions: Code and math regions keyed by their start index
        warnings: Warnings raised while matching regions

    """

    lines: list[Line]
    regions: dict[int, Region] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    @property
    def has_exercises(self) -> bool:
        """True when at least one exercise heading exists."""
        return any(line.type is LineType.EXERCISE_START for line in self.lines)

    def region_at(self, index: int) -> Region | None:
        """Region whose opening delimiter is at index, if any."""
        return self.regions.get(index)

    def types(self) -> list[LineType]:
        """Tags in line order, sentinel included."""
        return [line.type for line in self.lines]


def _tag_regions(lines: list[Line], spans: RegionSpans) -> set[int]:
    """Apply region tags and return the set of claimed indices."""
    claimed: set[int] = set()

    for region in spans.code:
        start_type, end_type = _CODE_DELIMITERS[region.kind]
        lines[region.start].type = start_type
        lines[region.end].type = end_type
        for i in region.interior:
            lines[i].type = LineType.CODE_INSIDE
        claimed.update(range(region.start, region.end + 1))

    for region in spans.empty_code:
        lines[region.start].type = LineType.DONT_PRINT
        lines[region.end].type = LineType.DONT_PRINT
        claimed.update((region.start, region.end))

    for i in spans.unmatched_fences:
        lines[i].type = LineType.CODE_INSIDE
        claimed.add(i)

    for region in spans.latex:
        if region.start == region.end:
            lines[region.start].type = LineType.LATEX_START_AND_END
            claimed.add(region.start)
            continue
        lines[region.start].type = LineType.LATEX_START
        lines[region.end].type = LineType.LATEX_END
        claimed.update((region.start, region.end))
        # Code claimed first; a math span never re-tags code lines
        for i in region.interior:
            if i not in claimed:
                lines[i].type = LineType.LATEX_INSIDE
                claimed.add(i)

    for i in spans.oneline_latex:
        lines[i].type = LineType.LATEX_ONELINE
        claimed.add(i)

    return claimed


def classify_line(text: str, max_title_length: int | None = None) -> tuple[LineType, str]:
    """Classify a line that no region claims.

    Args:
        text: Raw line text
        max_title_length: Banner truncation for headings (None = unlimited)

    Returns:
        (tag, text) where headings carry their normalized text

    Examples:
        >>> classify_line("### Exercises {-}")
        (<LineType.EXERCISE_START: 'exercise_start'>, '## Exercises')
        >>> classify_line(">> To be or not to be")[0]
        <LineType.QUOTE: 'quote'>
    """
    if is_heading(text):
        title = normalize_heading(text, max_title_length)
        if is_exercise_heading(title):
            return LineType.EXERCISE_START, title
        return LineType.SECTION, title
    if is_quote(text):
        return LineType.QUOTE, text
    if is_table_line(text):
        return LineType.TABLE, text
    return LineType.PROSE, text


def classify_lines(
    source: Sequence[str], max_title_length: int | None = None
) -> ClassifiedDocument:
    """Tag every line of a cleaned sequence.

    Args:
        source: Cleaned lines (see preprocess_lines)
        max_title_length: Banner truncation for headings (None = unlimited)

    Returns:
        ClassifiedDocument ending with the LAST_LINE sentinel
    """
    spans = find_regions(source)
    lines = [Line(text, LineType.PROSE, i) for i, text in enumerate(source)]
    claimed = _tag_regions(lines, spans)

    for line in lines:
        if line.index in claimed:
            continue
        line.type, line.text = classify_line(line.text, max_title_length)

    lines.append(Line("", LineType.LAST_LINE, len(lines)))

    regions = {region.start: region for region in (*spans.code, *spans.latex)}
    return ClassifiedDocument(lines=lines, regions=regions, warnings=list(spans.warnings))


__all__ = [
    "ClassifiedDocument",
    "classify_line",
    "classify_lines",
]
