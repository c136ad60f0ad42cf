"""Protocols for rmdslides.

Defines the contract for output sinks written by the Emitter.
"""

from __future__ import annotations

from typing import Protocol


class TextSink(Protocol):
    """Append-only text destination.

    Open text files and StringBuilder both conform.

    """

    def write(self, s: str, /) -> object:
        """Append s to the sink."""
        ...
