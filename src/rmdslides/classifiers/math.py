"""Display-math delimiter classifier."""

from __future__ import annotations

MATH_DELIMITER = "$$"


def is_math_delimiter(text: str) -> bool:
    """Check whether a line contains at least one ``$$`` delimiter."""
    return MATH_DELIMITER in text


def is_oneline_math(text: str) -> bool:
    """Check whether a line holds a self-contained ``$$ ... $$`` block.

    The two delimiters must enclose at least one character.

    Examples:
        >>> is_oneline_math("$$ y = mx + b $$")
        True
        >>> is_oneline_math("$$")
        False
        >>> is_oneline_math("$$$$")
        False
    """
    first = text.find(MATH_DELIMITER)
    if first == -1:
        return False
    second = text.find(MATH_DELIMITER, first + len(MATH_DELIMITER) + 1)
    return second != -1
