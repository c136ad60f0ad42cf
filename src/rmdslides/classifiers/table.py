"""Pipe table classifier."""

TABLE_MARKER = "|"


def is_table_line(text: str) -> bool:
    """Check whether a line belongs to a pipe table.

    Only the leading pipe matters: delimiter rows and body rows are not
    distinguished.
    """
    return text.strip().startswith(TABLE_MARKER)
