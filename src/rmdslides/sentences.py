"""Sentence splitter: turns one prose line into slide bullets.

Periods that do not end a sentence (a leading list number, decimals and
a few title abbreviations) are masked with a placeholder, the text is
split on a period followed by whitespace, and the masked periods are
restored in every fragment.

Example:
    >>> split_sentences("Dr. Smith measured 1.5 cm. It grew.")
    ['Dr. Smith measured 1.5 cm', 'It grew.']
    >>> [format_bullet(s) for s in split_sentences("1. Load the data. Then plot it")]
    ['  1. Load the data.', '- Then plot it.']

"""

from __future__ import annotations

import math
import re

# Private-use character; never appears in chapter text
PERIOD_PLACEHOLDER = "\ue000"

ABBREVIATIONS = ("Mr", "Mrs", "Ms", "Dr", "Prof", "vs", "e.g", "i.e")

# Endings that already close a bullet
TERMINAL_PUNCTUATION = frozenset(".?:,!")

_NUMBERED_MARKER = re.compile(r"^(\d+)\.(\s+)")
_DECIMAL = re.compile(r"(\d)\.(?=\d)")
_ABBREVIATION = re.compile(
    r"\b(" + "|".join(re.escape(a) for a in ABBREVIATIONS) + r")\."
)
_BOUNDARY = re.compile(r"\.\s+")
_NUMBERED_ITEM = re.compile(r"^\d+\.")


def _mask(text: str) -> str:
    text = _NUMBERED_MARKER.sub(rf"\1{PERIOD_PLACEHOLDER}\2", text)
    text = _DECIMAL.sub(rf"\1{PERIOD_PLACEHOLDER}", text)
    return _ABBREVIATION.sub(rf"\1{PERIOD_PLACEHOLDER}", text)


def split_sentences(text: str) -> list[str]:
    """Split a prose line into trimmed sentence fragments.

    The splitting period is consumed; the last fragment keeps whatever
    ending it had. Fragments that are empty after trimming are dropped.

    Args:
        text: One prose line

    Returns:
        Fragments in order, without added punctuation
    """
    masked = _mask(text.strip())
    fragments = (
        fragment.replace(PERIOD_PLACEHOLDER, ".").strip()
        for fragment in _BOUNDARY.split(masked)
    )
    return [fragment for fragment in fragments if fragment]


def is_numbered(sentence: str) -> bool:
    """Check whether a fragment starts with a ``1.``-style list marker."""
    return _NUMBERED_ITEM.match(sentence) is not None


def format_bullet(sentence: str) -> str:
    """Render one fragment as a slide bullet.

    A period is appended unless the fragment already ends in terminal
    punctuation. Numbered fragments are indented; others get a dash.

    Examples:
        >>> format_bullet("Is it normal?")
        '- Is it normal?'
        >>> format_bullet("2. Fit the model")
        '  2. Fit the model.'
    """
    if sentence[-1:] not in TERMINAL_PUNCTUATION:
        sentence = f"{sentence}."
    if is_numbered(sentence):
        return f"  {sentence}"
    return f"- {sentence}"


def sentence_weight(sentence: str, chars_per_line: int) -> int:
    """Page-space estimate of one bullet: wrapped lines plus spacing.

    Example:
        >>> sentence_weight("x" * 61, chars_per_line=60)
        3
    """
    return math.ceil(len(sentence) / chars_per_line) + 1


__all__ = [
    "ABBREVIATIONS",
    "PERIOD_PLACEHOLDER",
    "format_bullet",
    "is_numbered",
    "sentence_weight",
    "split_sentences",
]
