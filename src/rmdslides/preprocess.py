"""Pre-classification filter stage.

Produces a new, cleaned line list before any classification happens:
blank lines, HTML comments and the book's internal ``img_path <-``
assignment are dropped, and knitr "conditional table" blocks are
collapsed into a single ``knitr::kable(name)`` call.

The input list is never modified; each stage builds a new list, so no
index arithmetic survives a removal.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence

from rmdslides.utils.logger import get_logger

logger = get_logger(__name__)

_COMMENT = "<!--"
_IMG_PATH = re.compile(r"img_path\s+<-")
_CONDITIONAL_TABLE = re.compile(r"if\(knitr::is_html_output\(\)\)\{")
_KABLE_NAME = re.compile(r"kable\((\w.*?),.*(?:latex|html)")


def drop_ignored_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines that carry slide content.

    Skips blank lines, lines containing an HTML comment opener, and
    image-path assignments.
    """
    for line in lines:
        if not line.strip():
            continue
        if _COMMENT in line:
            continue
        if _IMG_PATH.search(line):
            continue
        yield line


def _block_end(lines: Sequence[str], opener: int) -> int:
    """Find the index of the brace that closes a conditional block.

    Counting starts on the line after the opener: each ``}`` adds one and
    each ``{`` subtracts one, so ``} else {`` is neutral. Unbalanced
    blocks run to the end of the input.
    """
    balance = 0
    j = opener
    while balance < 1 and j + 1 < len(lines):
        j += 1
        if "}" in lines[j]:
            balance += 1
        if "{" in lines[j]:
            balance -= 1
    return j


def collapse_conditional_tables(lines: Sequence[str]) -> list[str]:
    """Replace ``if(knitr::is_html_output()){ ... }`` blocks with one kable call.

    Example:
        >>> collapse_conditional_tables([
        ...     "```{r}",
        ...     "if(knitr::is_html_output()){",
        ...     "  knitr::kable(tab, 'html')",
        ...     "} else {",
        ...     "  knitr::kable(tab, 'latex', booktabs = TRUE)",
        ...     "}",
        ...     "```",
        ... ])
        ['```{r}', '    knitr::kable(tab)', '```']
    """
    result: list[str] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if not _CONDITIONAL_TABLE.search(line):
            result.append(line)
            i += 1
            continue

        end = _block_end(lines, i)
        first = lines[i + 1] if i + 1 < len(lines) else ""
        match = _KABLE_NAME.search(first)
        if match:
            result.append(f"    knitr::kable({match.group(1)})")
        else:
            logger.debug("Dropping conditional table block at line %d: no kable name", i + 1)
        i = end + 1
    return result


def preprocess_lines(lines: Iterable[str]) -> list[str]:
    """Run the full filter stage.

    Args:
        lines: Raw input lines, with or without trailing newlines

    Returns:
        New list of cleaned lines, ready for classification
    """
    stripped = (line.rstrip("\r\n") for line in lines)
    return collapse_conditional_tables(list(drop_ignored_lines(stripped)))


__all__ = [
    "collapse_conditional_tables",
    "drop_ignored_lines",
    "preprocess_lines",
]
