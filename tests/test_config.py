"""Tests for SlideConfig and output path resolution."""

from pathlib import Path

import pytest

from rmdslides.config import SlideConfig, resolve_output_paths
from rmdslides.errors import ConfigError


class TestSlideConfigDataclass:
    """Test SlideConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = SlideConfig()
        assert config.title is None
        assert config.author == ""
        assert config.img_dir == "img"
        assert config.max_lines == 15
        assert config.chars_per_line == 60
        assert config.max_section_title_length is None
        assert config.save_exercises is True
        assert config.verbose is False
        assert config.date is None

    def test_immutability(self) -> None:
        config = SlideConfig()
        with pytest.raises(AttributeError):
            config.max_lines = 10  # type: ignore[misc]

    @pytest.mark.parametrize(
        "field,value",
        [("max_lines", 0), ("chars_per_line", -1), ("max_section_title_length", 0)],
    )
    def test_invalid_values(self, field: str, value: int) -> None:
        with pytest.raises(ConfigError) as exc_info:
            SlideConfig(**{field: value})
        assert exc_info.value.field == field


class TestFromDict:
    """SlideConfig.from_dict filters unknown keys."""

    def test_known_keys(self) -> None:
        config = SlideConfig.from_dict({"max_lines": 12, "author": "Jane Doe"})
        assert config.max_lines == 12
        assert config.author == "Jane Doe"

    def test_unknown_keys_ignored(self) -> None:
        config = SlideConfig.from_dict({"input": "x.Rmd", "suffix": "md", "verbose": True})
        assert config.verbose is True

    def test_empty_dict(self) -> None:
        assert SlideConfig.from_dict({}) == SlideConfig()


class TestTitle:
    """Default titles come from the output name."""

    def test_derived(self) -> None:
        assert SlideConfig().with_title_for("linear-models").title == "Linear Models"

    def test_explicit_title_kept(self) -> None:
        config = SlideConfig(title="My Deck")
        assert config.with_title_for("linear-models") is config

    def test_directory_ignored(self) -> None:
        assert SlideConfig().with_title_for("lectures/intro-to-r").title == "Intro To R"


class TestResolveOutputPaths:
    """Deck and exercise paths."""

    def test_defaults(self) -> None:
        paths = resolve_output_paths("book/inference/models.Rmd")
        assert paths.name == "models"
        assert paths.deck == Path("models.Rmd")
        assert paths.exercises == Path("models-exercises.Rmd")

    def test_output_dir(self) -> None:
        paths = resolve_output_paths("models.Rmd", output_dir="lectures/inference")
        assert paths.deck == Path("lectures/inference/models.Rmd")
        assert paths.exercises == Path("lectures/inference/models-exercises.Rmd")

    def test_explicit_names_and_suffix(self) -> None:
        paths = resolve_output_paths(
            "models.Rmd", output="lecture-5", output_exercises="hw-5", suffix="md"
        )
        assert paths.deck == Path("lecture-5.md")
        assert paths.exercises == Path("hw-5.md")

    def test_only_last_extension_stripped(self) -> None:
        assert resolve_output_paths("notes.v2.Rmd").name == "notes.v2"
