"""Line, Region and LineType definitions for the rmdslides engine.

The classifier produces a sequence of Line objects that the paginator
consumes. Each Line carries its raw text and exactly one LineType tag.

Thread Safety:
Region is frozen (immutable) and safe to share across threads.
Line keeps its text immutable; only the tag is reassigned, and only by
the classifier during a single run.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LineType(Enum):
    """Structural role of a line.

    Organized by category for clarity:
    - Document structure (SECTION, EXERCISE_START, LAST_LINE)
    - Prose and single-line blocks (PROSE, QUOTE, TABLE)
    - Display math (LATEX_*)
    - Fenced code (CODE_*, PLOT_CODE_*)

    """

    # Document structure
    SECTION = "section"
    EXERCISE_START = "exercise_start"
    LAST_LINE = "last_line"
    DONT_PRINT = "dont_print"

    # Text blocks
    PROSE = "prose"
    QUOTE = "quote"
    TABLE = "table"

    # Display math
    LATEX_START = "latex_start"
    LATEX_INSIDE = "latex_inside"
    LATEX_END = "latex_end"
    LATEX_ONELINE = "latex_oneline"
    LATEX_START_AND_END = "latex_start_and_end"

    # Fenced code
    CODE_START = "code_start"
    CODE_INSIDE = "code_inside"
    CODE_END = "code_end"
    PLOT_CODE_START = "plot_code_start"
    PLOT_CODE_END = "plot_code_end"


class RegionKind(Enum):
    """Delimiter family of a Region."""

    CODE = "code"
    PLOT_CODE = "plot_code"
    LATEX = "latex"


@dataclass(slots=True)
class Line:
    """A raw input line and its structural tag.

    Attributes:
        text: Line text (headings hold their normalized title)
        type: Structural tag assigned by the classifier
        index: Position in the cleaned line sequence (0-indexed)

    """

    text: str
    type: LineType = LineType.PROSE
    index: int = 0

    def __repr__(self) -> str:
        return f"Line({self.type.value}, {self.text!r}, {self.index})"


@dataclass(frozen=True, slots=True)
class Region:
    """A delimited span ``[start, end]`` over the line sequence.

    ``weight`` is the page-space estimate used for break decisions; it
    is never a count of emitted lines.

    Attributes:
        kind: Delimiter family
        start: Index of the opening delimiter line
        end: Index of the closing delimiter line (== start for one-line blocks)
        weight: Page-space estimate, at least 1

    """

    kind: RegionKind
    start: int
    end: int
    weight: int = 1

    @property
    def interior(self) -> range:
        """Indices strictly between the delimiters."""
        return range(self.start + 1, self.end)

    @property
    def is_empty(self) -> bool:
        """True when the delimiters are adjacent (no interior lines)."""
        return self.end - self.start == 1


def region_weight(start: int, end: int) -> int:
    """Page-space estimate for a delimited block.

    Uses ``max(1, interior_line_count - 2)`` so that even a trivial
    region moves the page budget.

    Example:
        >>> region_weight(0, 6)  # five interior lines
        3
        >>> region_weight(0, 1)
        1
    """
    return max(1, (end - start - 1) - 2)
