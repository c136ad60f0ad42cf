"""Run configuration for rmdslides.

SlideConfig holds every value the engine reads during a run. It is a
frozen dataclass: build it once, pass it to convert_text/convert_file,
and derive variants with dataclasses.replace or the with_* helpers.

Output file naming lives separately in resolve_output_paths because it
is per-call state, not configuration.

Usage:
    >>> config = SlideConfig(max_lines=12, author="R. Irizarry")
    >>> paths = resolve_output_paths("chapters/linear-models.Rmd", output_dir="slides")
    >>> paths.deck
    PosixPath('slides/linear-models.Rmd')
    >>> config.with_title_for(paths.name).title
    'Linear Models'

"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path

from rmdslides.errors import ConfigError
from rmdslides.utils.text import strip_extension, title_from_name

EXERCISES_SUFFIX = "-exercises"


@dataclass(frozen=True, slots=True)
class SlideConfig:
    """Immutable run configuration.

    Attributes:
        title: Deck title (None = derive from the output name)
        author: Author written into the preamble
        img_dir: Image directory referenced by the preamble
        max_lines: Page budget in estimated lines
        chars_per_line: Characters that make up one estimated line
        max_section_title_length: Banner truncation (None = unlimited)
        save_exercises: Write the companion exercise document
        verbose: Log a trace line for every input line at INFO level
        date: Date written into the preamble (None = today)

    """

    title: str | None = None
    author: str = ""
    img_dir: str = "img"
    max_lines: int = 15
    chars_per_line: int = 60
    max_section_title_length: int | None = None
    save_exercises: bool = True
    verbose: bool = False
    date: str | None = None

    def __post_init__(self) -> None:
        if self.max_lines < 1:
            raise ConfigError("max_lines", f"must be positive, got {self.max_lines}")
        if self.chars_per_line < 1:
            raise ConfigError(
                "chars_per_line", f"must be positive, got {self.chars_per_line}"
            )
        if self.max_section_title_length is not None and self.max_section_title_length < 1:
            raise ConfigError(
                "max_section_title_length",
                f"must be positive or None, got {self.max_section_title_length}",
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> SlideConfig:
        """Create SlideConfig from dictionary.

        Only includes keys that are valid SlideConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> SlideConfig.from_dict({"max_lines": 10, "theme": "ignored"}).max_lines
            10
        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def with_title_for(self, name: str) -> SlideConfig:
        """Return a config whose title is set, deriving it from name if missing."""
        if self.title is not None:
            return self
        return dataclasses.replace(self, title=title_from_name(Path(name).name))


@dataclass(frozen=True, slots=True)
class OutputPaths:
    """Resolved destination paths for one run.

    Attributes:
        name: Output stem (no directory, no suffix)
        deck: Slide deck path
        exercises: Companion exercise document path

    """

    name: str
    deck: Path
    exercises: Path


def resolve_output_paths(
    input_path: str | Path,
    output: str | None = None,
    output_dir: str | Path = ".",
    output_exercises: str | None = None,
    suffix: str = "Rmd",
) -> OutputPaths:
    """Derive deck and exercise paths from the input path.

    Args:
        input_path: Chapter being converted
        output: Output name without suffix (default: input basename sans extension)
        output_dir: Directory both outputs are placed in
        output_exercises: Exercise output name without suffix
            (default: output name + "-exercises")
        suffix: File extension for both outputs, without the dot

    Returns:
        OutputPaths with the stem name and both destination paths

    Example:
        >>> resolve_output_paths("book/inference/models.Rmd").exercises
        PosixPath('models-exercises.Rmd')
    """
    if output is None:
        output = strip_extension(Path(input_path).name)
    base = Path(output_dir) / output
    if output_exercises is None:
        exercises_base = base.with_name(base.name + EXERCISES_SUFFIX)
    else:
        exercises_base = Path(output_dir) / output_exercises
    return OutputPaths(
        name=Path(output).name,
        deck=base.with_name(f"{base.name}.{suffix}"),
        exercises=exercises_base.with_name(f"{exercises_base.name}.{suffix}"),
    )


__all__ = [
    "EXERCISES_SUFFIX",
    "OutputPaths",
    "SlideConfig",
    "resolve_output_paths",
]
