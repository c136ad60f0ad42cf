"""Emitter: the only writer of the deck and exercise sinks.

Every content write carries the blank-line convention of its block
type, so the paginator only decides *what* goes out and *when*.

Thread Safety:
An Emitter owns its sinks for the duration of one run.
No shared mutable state.

"""

from __future__ import annotations

from rmdslides.protocols import TextSink


class Emitter:
    """Append-only writer with a deck sink and an optional exercise sink.

    Exercise writes are dropped when no exercise sink is given or when
    save_exercises is False; routing upstream is unaffected.

    Usage:
        >>> from rmdslides.stringbuilder import StringBuilder
        >>> deck = StringBuilder()
        >>> emitter = Emitter(deck)
        >>> emitter.banner("## Intro")
        >>> emitter.bullet("- First point.")
        >>> deck.build()
        '\\n\\n## Intro\\n\\n- First point.\\n\\n'

    """

    __slots__ = ("_deck", "_exercises", "_save_exercises")

    def __init__(
        self,
        deck: TextSink,
        exercises: TextSink | None = None,
        *,
        save_exercises: bool = True,
    ) -> None:
        """Initialize emitter.

        Args:
            deck: Slide deck sink
            exercises: Exercise sink (None = exercises are discarded)
            save_exercises: Write exercise lines when a sink exists
        """
        self._deck = deck
        self._exercises = exercises
        self._save_exercises = save_exercises

    def preamble(self, text: str) -> None:
        """Write the fixed preamble; call once, before any content."""
        self._deck.write(text)

    def banner(self, section: str) -> None:
        """Open a page with the current section heading."""
        self._deck.write(f"\n\n{section}\n\n")

    def bullet(self, text: str) -> None:
        """Write a formatted bullet followed by a blank line."""
        self._deck.write(f"{text}\n\n")

    def line(self, text: str) -> None:
        """Write a line verbatim (code, math interior)."""
        self._deck.write(f"{text}\n")

    def block(self, text: str, *, before: bool = False, after: bool = False) -> None:
        """Write a delimiter or one-line block with optional blank lines around it.

        Args:
            text: Line to write
            before: Precede with a blank line
            after: Follow with a blank line
        """
        prefix = "\n" if before else ""
        suffix = "\n\n" if after else "\n"
        self._deck.write(f"{prefix}{text}{suffix}")

    def blank(self) -> None:
        """Write a single blank line."""
        self._deck.write("\n")

    def exercise(self, text: str) -> None:
        """Route a raw line to the exercise sink."""
        if self._exercises is None or not self._save_exercises:
            return
        self._exercises.write(f"{text}\n")


__all__ = ["Emitter"]
