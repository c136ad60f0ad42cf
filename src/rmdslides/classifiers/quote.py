"""Block quote classifier."""

QUOTE_MARKER = ">>"


def is_quote(text: str) -> bool:
    """Check whether a line is a double-angle block quote."""
    return text.strip().startswith(QUOTE_MARKER)
