"""Tests for the line classifier."""

from rmdslides.classifier import classify_line, classify_lines
from rmdslides.lines import LineType, RegionKind


def types(lines: list[str], **kwargs) -> list[str]:
    return [t.value for t in classify_lines(lines, **kwargs).types()]


class TestSingleLines:
    """Lines that no region claims."""

    def test_default_is_prose(self) -> None:
        assert classify_line("Some text.") == (LineType.PROSE, "Some text.")

    def test_section_text_is_normalized(self) -> None:
        assert classify_line("# Linear models {#linear}") == (LineType.SECTION, "## Linear models")

    def test_exercise_heading(self) -> None:
        assert classify_line("## Ejercicios")[0] is LineType.EXERCISE_START

    def test_title_truncation(self) -> None:
        assert classify_line("# Introduction", max_title_length=6) == (LineType.SECTION, "## Int")

    def test_quote_and_table(self) -> None:
        assert classify_line(">> quoted")[0] is LineType.QUOTE
        assert classify_line("| a |")[0] is LineType.TABLE


class TestClassifyLines:
    """Whole-document tagging."""

    def test_sentinel_appended(self) -> None:
        doc = classify_lines(["Text."])
        assert doc.lines[-1].type is LineType.LAST_LINE
        assert doc.lines[-1].text == ""
        assert doc.lines[-1].index == 1

    def test_code_chunk(self) -> None:
        assert types(["```{r}", "x <- 1", "y <- 2", "```"]) == [
            "code_start",
            "code_inside",
            "code_inside",
            "code_end",
            "last_line",
        ]

    def test_comment_in_code_is_not_a_section(self) -> None:
        doc = classify_lines(["```{r}", "# compute the mean", "mean(x)", "```"])
        assert doc.lines[1].type is LineType.CODE_INSIDE
        assert doc.lines[1].text == "# compute the mean"

    def test_plot_chunk(self) -> None:
        assert types(["```{r}", "plot(x)", "```"]) == [
            "plot_code_start",
            "code_inside",
            "plot_code_end",
            "last_line",
        ]

    def test_empty_chunk_not_printed(self) -> None:
        assert types(["```{r}", "```", "Text."]) == ["dont_print", "dont_print", "prose", "last_line"]

    def test_unmatched_fence_passes_through(self) -> None:
        assert types(["Text.", "```{r}", "More text."]) == [
            "prose",
            "code_inside",
            "prose",
            "last_line",
        ]

    def test_math_block(self) -> None:
        assert types(["$$", "y = x", "z = w", "$$"]) == [
            "latex_start",
            "latex_inside",
            "latex_inside",
            "latex_end",
            "last_line",
        ]

    def test_oneline_math(self) -> None:
        assert types(["$$ y = x $$"]) == ["latex_oneline", "last_line"]

    def test_unbalanced_math_recovers(self) -> None:
        doc = classify_lines(["$$", "a", "$$", "b", "$$"])
        assert [t.value for t in doc.types()] == [
            "latex_start",
            "latex_inside",
            "latex_end",
            "prose",
            "latex_start_and_end",
            "last_line",
        ]
        assert len(doc.warnings) == 1

    def test_mixed_document(self) -> None:
        lines = [
            "# Intro",
            "Prose here.",
            ">> A quote",
            "| a | b |",
            "|---|---|",
            "## Exercises",
            "1. Do this.",
        ]
        assert types(lines) == [
            "section",
            "prose",
            "quote",
            "table",
            "table",
            "exercise_start",
            "prose",
            "last_line",
        ]

    def test_regions_keyed_by_start(self) -> None:
        doc = classify_lines(["Text.", "```{r}", "hist(x)", "```", "$$", "a", "$$"])
        assert doc.region_at(1).kind is RegionKind.PLOT_CODE
        assert doc.region_at(4).kind is RegionKind.LATEX
        assert doc.region_at(0) is None

    def test_has_exercises(self) -> None:
        assert classify_lines(["## Exercises", "Do it."]).has_exercises
        assert not classify_lines(["## Examples", "Look."]).has_exercises

    def test_max_title_length(self) -> None:
        doc = classify_lines(["# A very long section title"], max_title_length=9)
        assert doc.lines[0].text == "## A very"
