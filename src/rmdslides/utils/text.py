"""Text utilities for deriving file names and deck titles.

Example:
    >>> from rmdslides.utils.text import title_from_name
    >>> title_from_name("intro-to-regression")
    'Intro To Regression'
"""

from __future__ import annotations

import re

_EXTENSION = re.compile(r"\.[a-zA-Z0-9]+$")


def strip_extension(name: str) -> str:
    """Remove a trailing alphanumeric file extension.

    Examples:
        >>> strip_extension("models.Rmd")
        'models'
        >>> strip_extension("archive.tar.gz")
        'archive.tar'
        >>> strip_extension("README")
        'README'
    """
    return _EXTENSION.sub("", name)


def title_from_name(name: str) -> str:
    """Turn a dash-separated file stem into a title.

    Every word is capitalized and the rest of the word lower-cased, the
    way a title-case conversion treats each whitespace-separated word.

    Examples:
        >>> title_from_name("linear-models")
        'Linear Models'
        >>> title_from_name("intro-to-ML")
        'Intro To Ml'
        >>> title_from_name("")
        ''
    """
    words = name.replace("-", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)
