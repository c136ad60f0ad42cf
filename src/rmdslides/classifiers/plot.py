"""Plot-producing code detection."""

from __future__ import annotations

import re

# Calls whose output is an image rather than printed text
PLOT_KEYWORDS = ("plot", "hist", "include_graphics")

_PLOT = re.compile("|".join(re.escape(k) for k in PLOT_KEYWORDS))


def is_plot_line(text: str) -> bool:
    """Check whether a code line produces a figure.

    Substring match, so ``ggplot(...)``, ``qplot`` and ``hist(x)`` all count.
    """
    return _PLOT.search(text) is not None
