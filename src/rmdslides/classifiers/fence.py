"""Fenced code chunk classifier and chunk-header rewriting."""

from __future__ import annotations

import re

FENCE = "```"

_FLAGS = re.compile(r"echo|eval")
_LABEL = re.compile(r"^```\{r[ ,]+([\w\-]+)(?=\s*[,}])")


def is_fence(text: str) -> bool:
    """Check whether text opens or closes a code chunk.

    Fences toggle: the classifier decides which one it is.
    """
    return text.startswith(FENCE)


def has_chunk_flags(header: str) -> bool:
    """Check whether a chunk header already sets echo or eval."""
    return _FLAGS.search(header) is not None


def _with_option(header: str, option: str) -> str:
    """Insert ``, option`` before the closing brace of the option block.

    A header without an option block (```` ```r ```` or a bare fence) is
    rewritten to ```` ```{lang, option} ````, defaulting the engine to r.
    """
    close = header.rfind("}")
    if close != -1 and "{" in header[:close]:
        return f"{header[:close]}, {option}{header[close:]}"
    engine = header[len(FENCE) :].strip() or "r"
    return f"{FENCE}{{{engine}, {option}}}"


def mark_eval_suppressed(header: str) -> str:
    """Header for the copy that shows code without running it.

    Example:
        >>> mark_eval_suppressed("```{r height-hist}")
        '```{r height-hist, eval=FALSE}'
    """
    return _with_option(header, "eval=FALSE")


def mark_echo_suppressed(header: str) -> str:
    """Header for the copy that runs code and shows only its output.

    The chunk label gets a ``-run`` suffix so the two copies never share a
    label. A header whose first token is an option (``name=value``) has no
    label and stays unlabelled; knitr numbers unlabelled chunks itself.

    Examples:
        >>> mark_echo_suppressed("```{r height-hist, fig.width=4}")
        '```{r height-hist-run, fig.width=4, echo=FALSE}'
        >>> mark_echo_suppressed("```{r, fig.width=4}")
        '```{r, fig.width=4, echo=FALSE}'
    """
    header = _LABEL.sub(r"```{r \1-run", header, count=1)
    return _with_option(header, "echo=FALSE")
