"""StringBuilder for O(n) string accumulation.

The in-memory sink behind convert_text. Appends to a list, joins once at
the end: O(n) total vs O(n²) for repeated string concatenation.

Thread Safety:
StringBuilder instances are local to each conversion.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Implements ``write`` so it can stand in for an open text file.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.write("## Intro")
            8
            >>> sb.write("\\n")
            1
            >>> sb.build()
            '## Intro\\n'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def write(self, s: str) -> int:
        """Append a string, file-style.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            Number of characters appended
        """
        if s:
            self._parts.append(s)
        return len(s)

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if anything has been written."""
        return bool(self._parts)
