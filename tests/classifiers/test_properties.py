"""Property-based tests for classification and pagination invariants."""

from hypothesis import given, settings
from hypothesis import strategies as st

from rmdslides.classifier import classify_lines
from rmdslides.config import SlideConfig
from rmdslides.emitter import Emitter
from rmdslides.lines import LineType
from rmdslides.pagination import Paginator
from rmdslides.stringbuilder import StringBuilder

CODE_LINES = st.sampled_from(["```{r}", "```", "x <- 1", "plot(x)", "Prose line."])
MATH_LINES = st.sampled_from(["$$", "x = 1", "Some text here."])
CHAPTER_LINES = st.sampled_from(
    [
        "# Section",
        "## Exercises",
        "1. Do this.",
        "Prose line. Another one.",
        "```{r}",
        "```",
        "x <- 1",
        "$$",
        "| a | b |",
        ">> quoted",
    ]
)
SENTENCE = st.text(alphabet="abcdefgh xyz", min_size=1, max_size=200).filter(str.strip)
PROSE_LINES = st.lists(SENTENCE, min_size=1, max_size=6).map(". ".join)

STARTS = {LineType.CODE_START, LineType.PLOT_CODE_START}
ENDS = {LineType.CODE_END, LineType.PLOT_CODE_END}


class TestClassificationInvariants:
    """Tagging invariants that hold for any input."""

    @given(st.lists(CHAPTER_LINES, max_size=40))
    @settings(max_examples=200)
    def test_one_tag_per_line_plus_sentinel(self, source: list[str]) -> None:
        doc = classify_lines(source)

        assert len(doc.lines) == len(source) + 1
        assert doc.lines[-1].type is LineType.LAST_LINE
        assert sum(1 for t in doc.types() if t is LineType.LAST_LINE) == 1
        assert [line.index for line in doc.lines] == list(range(len(doc.lines)))

    @given(st.lists(CODE_LINES, max_size=40))
    @settings(max_examples=200)
    def test_fences_pair_up(self, source: list[str]) -> None:
        doc = classify_lines(source)
        types = doc.types()

        assert sum(t in STARTS for t in types) == sum(t in ENDS for t in types)

        fences = [i for i, text in enumerate(source) if text.startswith("```")]
        if len(fences) % 2:
            assert types[fences[-1]] is LineType.CODE_INSIDE

        for region in doc.regions.values():
            if types[region.start] in STARTS:
                assert types[region.end] in ENDS
                assert all(types[i] is LineType.CODE_INSIDE for i in region.interior)

    @given(st.lists(MATH_LINES, max_size=40))
    @settings(max_examples=200)
    def test_unbalanced_math_warns(self, source: list[str]) -> None:
        doc = classify_lines(source)
        types = doc.types()
        delimiters = source.count("$$")

        assert types.count(LineType.LATEX_START) == types.count(LineType.LATEX_END)
        assert bool(doc.warnings) == bool(delimiters % 2)
        assert types.count(LineType.LATEX_START_AND_END) == delimiters % 2


class TestPaginationInvariants:
    """Invariants of a full pagination pass."""

    @given(st.lists(CHAPTER_LINES, max_size=40))
    @settings(max_examples=200)
    def test_exercise_lines_routed_in_order(self, source: list[str]) -> None:
        doc = classify_lines(source)
        expected = []
        in_exercises = False
        for line in doc.lines[:-1]:
            if line.type is LineType.SECTION:
                in_exercises = False
            elif line.type is LineType.EXERCISE_START:
                in_exercises = True
            if in_exercises:
                expected.append(line.text)

        deck, exercises = StringBuilder(), StringBuilder()
        Paginator(doc, Emitter(deck, exercises), SlideConfig()).run()

        assert exercises.build() == "".join(f"{text}\n" for text in expected)

    @given(
        st.lists(PROSE_LINES, min_size=1, max_size=10),
        st.integers(min_value=1, max_value=20),
        st.integers(min_value=10, max_value=80),
    )
    @settings(max_examples=200)
    def test_bullets_respect_page_budget(
        self, prose: list[str], max_lines: int, chars_per_line: int
    ) -> None:
        """A bullet overflows the budget only when it opens its own page."""
        config = SlideConfig(max_lines=max_lines, chars_per_line=chars_per_line)
        doc = classify_lines(["# Section", *prose])
        observed: list[tuple[int, bool]] = []

        class RecordingEmitter(Emitter):
            fresh_page = False

            def banner(self, section: str) -> None:
                self.fresh_page = True
                super().banner(section)

            def bullet(self, text: str) -> None:
                observed.append((paginator.state.weight, self.fresh_page))
                self.fresh_page = False
                super().bullet(text)

        paginator = Paginator(doc, RecordingEmitter(StringBuilder()), config)
        paginator.run()

        assert observed
        for weight, fresh_page in observed:
            assert weight <= max_lines or fresh_page
