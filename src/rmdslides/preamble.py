"""Fixed deck preamble.

The preamble is hard-wired to the house style of the lecture decks:
YAML front matter for ioslides/beamer/slidy output followed by a setup
chunk that loads the plotting stack and sets chunk defaults.
"""

from __future__ import annotations

import datetime

from rmdslides.config import SlideConfig

PREAMBLE_TEMPLATE = """\
---
title: "{title}"
author: "{author}"
date: "{date}"
output:
  ioslides_presentation:
    fig_caption: no
    fig_height: 5
    fig_width: 7
    out_width: "70%"
  beamer_presentation: default
  slidy_presentation: default
---

```{{r setup, include=FALSE}}
library(tidyverse)
library(dslabs)
library(gridExtra)
library(ggthemes)
ds_theme_set()
options(digits = 3)
knitr::opts_chunk$set(
  comment = "#>",
  collapse = TRUE,
  cache = TRUE,
  out.width = "70%",
  fig.align = "center",
  fig.width = 6,
  fig.asp = 0.618,  # 1 / phi
  fig.show = "hold"
)

img_path <- "{img_dir}"
```"""


def render_preamble(config: SlideConfig, today: datetime.date | None = None) -> str:
    """Render the preamble for a deck.

    Args:
        config: Run configuration; title should already be resolved
        today: Date used when config.date is unset (default: today)

    Returns:
        Preamble text, without a trailing newline

    Example:
        >>> text = render_preamble(SlideConfig(title="Models"), datetime.date(2024, 3, 1))
        >>> text.splitlines()[1:4]
        ['title: "Models"', 'author: ""', 'date: "2024-03-01"']
    """
    date = config.date
    if date is None:
        date = (today or datetime.date.today()).isoformat()
    return PREAMBLE_TEMPLATE.format(
        title=config.title or "",
        author=config.author,
        date=date,
        img_dir=config.img_dir,
    )
