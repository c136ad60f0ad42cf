"""Pagination controller: decides where page breaks go.

Walks the classified lines in order, keeping a running page weight.
Each line applies exactly one rule, chosen in priority order:

1. SECTION: break, leave exercise mode, remember the banner.
2. Exercise heading or exercise mode: route the raw line to the
   exercise sink; no weight.
3. Table lines: accumulate by one-line lookahead (+3 open, +2
   continuation, +3 close). Tables never force a break.
4. Quotes and one-line math: wrapped length + 1; no break check.
5. Code and math interior/closing lines: +1 per interior line (+2 for
   math). A code start breaks first if its region would overflow; a
   plot chunk end always breaks after it.
6. Plot chunk start: without echo/eval flags the chunk is written twice
   (code only, break, output only); with flags it breaks only once the
   page already holds more than two lines.
7. Prose: one bullet per sentence, breaking before any bullet that
   overflows. The new page starts with that bullet's weight.
8. Math start: breaks first if twice the region weight would overflow;
   a start-and-end block costs a flat 3.

Estimates ignore the output that executing code will produce, so the
generated deck always needs a manual review.

Thread Safety:
Paginator instances are single-use. Create one per document.
PaginationState is frozen; every transition returns a new value.

"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

from rmdslides.classifier import ClassifiedDocument
from rmdslides.classifiers.fence import (
    has_chunk_flags,
    mark_echo_suppressed,
    mark_eval_suppressed,
)
from rmdslides.config import SlideConfig
from rmdslides.emitter import Emitter
from rmdslides.lines import Line, LineType
from rmdslides.sentences import format_bullet, sentence_weight, split_sentences
from rmdslides.utils.logger import get_logger

logger = get_logger(__name__)

# Fixed table weights
TABLE_OPEN_WEIGHT = 3
TABLE_ROW_WEIGHT = 2
TABLE_CLOSE_WEIGHT = 3

# A single-line $$ ... $$ block reused as both delimiters
LATEX_START_AND_END_WEIGHT = 3

# Weight above which a flagged plot chunk starts on a fresh page
PLOT_BREAK_THRESHOLD = 2


@dataclass(frozen=True, slots=True)
class PaginationState:
    """Run-time counters for one pagination pass.

    Attributes:
        weight: Estimated lines used on the current page
        page: Number of page breaks so far
        section: Banner re-emitted at every break
        exercise_mode: Lines are routed to the exercise sink
        table_in_progress: A table opened and has not closed yet

    """

    weight: int = 0
    page: int = 0
    section: str = ""
    exercise_mode: bool = False
    table_in_progress: bool = False

    def page_break(self, seed: int = 0) -> tuple[PaginationState, str]:
        """Start a new page.

        Args:
            seed: Weight the new page starts with

        Returns:
            (post-break state, banner text to emit)

        Example:
            >>> state = PaginationState(weight=14, page=2, section="## Models")
            >>> state.page_break(seed=3)
            (PaginationState(weight=3, page=3, section='## Models', ...), '## Models')
        """
        return dataclasses.replace(self, weight=seed, page=self.page + 1), self.section

    def add(self, amount: int) -> PaginationState:
        """Return a state with amount added to the page weight."""
        return dataclasses.replace(self, weight=self.weight + amount)


class Paginator:
    """Single-pass pagination controller.

    Usage:
        >>> from rmdslides.classifier import classify_lines
        >>> from rmdslides.stringbuilder import StringBuilder
        >>> deck = StringBuilder()
        >>> doc = classify_lines(["# Intro", "One. Two."])
        >>> Paginator(doc, Emitter(deck), SlideConfig()).run().page
        1
        >>> deck.build()
        '\\n\\n## Intro\\n\\n- One.\\n\\n- Two.\\n\\n'

    """

    __slots__ = ("_document", "_emitter", "_config", "_trace_level", "state")

    def __init__(
        self,
        document: ClassifiedDocument,
        emitter: Emitter,
        config: SlideConfig,
    ) -> None:
        """Initialize paginator.

        Args:
            document: Classified lines ending with the LAST_LINE sentinel
            emitter: Writer for the deck and exercise sinks
            config: Page budget and trace settings
        """
        self._document = document
        self._emitter = emitter
        self._config = config
        self._trace_level = logging.INFO if config.verbose else logging.DEBUG
        self.state = PaginationState()

    def run(self) -> PaginationState:
        """Process every line once, in order.

        Returns:
            Final state (page holds the number of breaks taken)
        """
        for line in self._document.lines:
            logger.log(
                self._trace_level,
                "Page: %d, Line: %d, Type: %s, Section: %s",
                self.state.page,
                self.state.weight,
                line.type.value,
                self.state.section,
            )
            self._step(line)
        return self.state

    # =========================================================================
    # Transitions
    # =========================================================================

    def _break(self, seed: int = 0) -> None:
        self.state, banner = self.state.page_break(seed)
        self._emitter.banner(banner)

    def _add(self, amount: int) -> None:
        self.state = self.state.add(amount)

    def _step(self, line: Line) -> None:
        """Apply the single highest-priority rule for line."""
        kind = line.type

        if kind is LineType.SECTION:
            self.state = dataclasses.replace(
                self.state, section=line.text, exercise_mode=False
            )
            self._break()
            return

        if kind is LineType.EXERCISE_START or self.state.exercise_mode:
            self.state = dataclasses.replace(self.state, exercise_mode=True)
            if kind is not LineType.LAST_LINE:
                self._emitter.exercise(line.text)
            return

        if kind is LineType.TABLE or self.state.table_in_progress:
            self._table_line(line)
            return

        match kind:
            case LineType.QUOTE | LineType.LATEX_ONELINE:
                self._add(sentence_weight(line.text, self._config.chars_per_line))
                self._emitter.block(line.text, after=True)
            case LineType.CODE_START:
                region = self._document.region_at(line.index)
                if region is not None and self.state.weight + region.weight > self._config.max_lines:
                    self._break()
                self._emitter.line(line.text)
            case LineType.CODE_INSIDE:
                self._add(1)
                self._emitter.line(line.text)
            case LineType.LATEX_INSIDE:
                self._add(2)
                self._emitter.line(line.text)
            case LineType.CODE_END:
                self._emitter.block(line.text, after=True)
            case LineType.PLOT_CODE_END:
                self._emitter.line(line.text)
                self._break()
            case LineType.PLOT_CODE_START:
                self._plot_start(line)
            case LineType.PROSE:
                self._prose(line.text)
            case LineType.LATEX_START:
                region = self._document.region_at(line.index)
                weight = region.weight if region is not None else 1
                if self.state.weight + weight * 2 > self._config.max_lines:
                    self._break()
                self._emitter.block(line.text, before=True)
                self._add(1)
            case LineType.LATEX_END:
                self._emitter.block(line.text, after=True)
                self._add(1)
            case LineType.LATEX_START_AND_END:
                self._emitter.block(line.text, before=True, after=True)
                self._add(LATEX_START_AND_END_WEIGHT)
            case _:
                # DONT_PRINT and LAST_LINE produce no output
                pass

    def _table_line(self, line: Line) -> None:
        following = self._document.lines[line.index + 1]
        continues = following.type is LineType.TABLE

        if not self.state.table_in_progress:
            self._emitter.block(line.text, before=True)
            self._add(TABLE_OPEN_WEIGHT)
            if continues:
                self.state = dataclasses.replace(self.state, table_in_progress=True)
            else:
                self._emitter.blank()
            return

        if continues:
            self._emitter.line(line.text)
            self._add(TABLE_ROW_WEIGHT)
        else:
            self._emitter.block(line.text, after=True)
            self._add(TABLE_CLOSE_WEIGHT)
            self.state = dataclasses.replace(self.state, table_in_progress=False)

    def _plot_start(self, line: Line) -> None:
        if has_chunk_flags(line.text):
            if self.state.weight > PLOT_BREAK_THRESHOLD:
                self._break()
            self._emitter.line(line.text)
            return

        region = self._document.region_at(line.index)
        # First copy shows the code only
        self._emitter.line(mark_eval_suppressed(line.text))
        if region is not None:
            for i in range(region.start + 1, region.end + 1):
                self._emitter.line(self._document.lines[i].text)
        self._break()
        # Second copy runs the code; its body is emitted by the following lines
        self._emitter.line(mark_echo_suppressed(line.text))

    def _prose(self, text: str) -> None:
        max_lines = self._config.max_lines
        for sentence in split_sentences(text):
            weight = sentence_weight(sentence, self._config.chars_per_line)
            self._add(weight)
            if self.state.weight > max_lines:
                self._break(seed=weight)
            self._emitter.bullet(format_bullet(sentence))


def paginate(
    document: ClassifiedDocument, emitter: Emitter, config: SlideConfig
) -> PaginationState:
    """Run a Paginator over document and return its final state."""
    return Paginator(document, emitter, config).run()


__all__ = [
    "PaginationState",
    "Paginator",
    "paginate",
]
