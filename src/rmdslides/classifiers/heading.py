"""ATX heading classifier."""

from __future__ import annotations

import re

# Secondary level every heading is collapsed to
HEADING_MARKER = "##"

_ATTRIBUTE_BLOCK = re.compile(r"\{.*\}")
_MARKER_RUN = re.compile(r"#+")
_EXERCISE = re.compile(r"## (?:exercise|ejercicio)", re.IGNORECASE)


def is_heading(text: str) -> bool:
    """Check whether text is an ATX heading.

    A heading starts with one or more ``#`` followed by whitespace. Unlike
    CommonMark there is no six-level limit and no indentation allowance.

    Examples:
        >>> is_heading("## Linear models")
        True
        >>> is_heading("#hashtag")
        False
    """
    pos = 0
    while pos < len(text) and text[pos] == "#":
        pos += 1
    if pos == 0 or pos == len(text):
        return False
    return text[pos] in " \t"


def normalize_heading(text: str, max_length: int | None = None) -> str:
    """Normalize heading text for use as a page banner.

    Strips a trailing ``{#id .class}`` attribute block, collapses every
    marker run to ``##``, trims, then truncates to max_length characters.

    Examples:
        >>> normalize_heading("### Regression {#sec-reg}")
        '## Regression'
        >>> normalize_heading("# Introduction to inference", max_length=10)
        '## Introdu'
    """
    text = _ATTRIBUTE_BLOCK.sub("", text)
    text = _MARKER_RUN.sub(HEADING_MARKER, text)
    text = text.strip()
    if max_length is not None:
        text = text[:max_length]
    return text


def is_exercise_heading(text: str) -> bool:
    """Check whether a normalized heading opens an exercise section.

    Matches English and Spanish titles, case-insensitively.

    Examples:
        >>> is_exercise_heading("## Exercises")
        True
        >>> is_exercise_heading("## Ejercicios")
        True
        >>> is_exercise_heading("## Exercising caution")
        False
    """
    return _EXERCISE.search(text) is not None
