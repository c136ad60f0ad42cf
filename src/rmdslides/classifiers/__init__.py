"""Single-line predicates for the rmdslides classifier.

Each classifier is a pure function over line text. None of them look at
neighbouring lines or mutate state, so each can be tested and replaced
without touching the classifier or the paginator.
"""

from rmdslides.classifiers.fence import (
    has_chunk_flags,
    is_fence,
    mark_eval_suppressed,
    mark_echo_suppressed,
)
from rmdslides.classifiers.heading import (
    is_exercise_heading,
    is_heading,
    normalize_heading,
)
from rmdslides.classifiers.math import is_math_delimiter, is_oneline_math
from rmdslides.classifiers.plot import PLOT_KEYWORDS, is_plot_line
from rmdslides.classifiers.quote import is_quote
from rmdslides.classifiers.table import is_table_line

__all__ = [
    "PLOT_KEYWORDS",
    "has_chunk_flags",
    "is_exercise_heading",
    "is_fence",
    "is_heading",
    "is_math_delimiter",
    "is_oneline_math",
    "is_plot_line",
    "is_quote",
    "is_table_line",
    "mark_echo_suppressed",
    "mark_eval_suppressed",
    "normalize_heading",
]
