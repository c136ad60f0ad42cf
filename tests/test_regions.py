"""Tests for the region matcher."""

import logging

from rmdslides.lines import Region, RegionKind, region_weight
from rmdslides.regions import find_regions, match_fences, match_math, mark_plot_regions


class TestRegionWeight:
    """Weight is max(1, interior - 2)."""

    def test_large_region(self) -> None:
        assert region_weight(0, 11) == 8  # ten interior lines

    def test_small_regions_floor_at_one(self) -> None:
        assert region_weight(0, 1) == 1
        assert region_weight(0, 2) == 1
        assert region_weight(0, 4) == 1
        assert region_weight(3, 3) == 1

    def test_region_bounds(self) -> None:
        region = Region(RegionKind.CODE, 2, 5, region_weight(2, 5))
        assert list(region.interior) == [3, 4]
        assert not region.is_empty


class TestMatchFences:
    """Fences toggle between open and closed."""

    def test_pairs(self) -> None:
        lines = ["```{r}", "x <- 1", "```", "prose", "```{r}", "y", "z", "```"]
        regions, empty, unmatched = match_fences(lines)
        assert [(r.start, r.end) for r in regions] == [(0, 2), (4, 7)]
        assert empty == []
        assert unmatched == []

    def test_empty_fence_pair(self) -> None:
        regions, empty, _ = match_fences(["```{r}", "```", "text"])
        assert regions == []
        assert [(r.start, r.end) for r in empty] == [(0, 1)]

    def test_unmatched_opener(self) -> None:
        regions, _, unmatched = match_fences(["```{r}", "x", "```", "```{r}", "y"])
        assert len(regions) == 1
        assert unmatched == [3]

    def test_weight(self) -> None:
        lines = ["```{r}", *[f"x{i}" for i in range(6)], "```"]
        regions, _, _ = match_fences(lines)
        assert regions[0].weight == 4


class TestPlotRegions:
    """Plot keywords in the interior turn a code region into a plot region."""

    def test_plot_detected(self) -> None:
        lines = ["```{r}", "heights %>% ggplot(aes(height))", "```"]
        regions = mark_plot_regions([Region(RegionKind.CODE, 0, 2)], lines)
        assert regions[0].kind is RegionKind.PLOT_CODE

    def test_fence_label_alone_is_not_a_plot(self) -> None:
        lines = ["```{r plot-setup}", "x <- 1", "```"]
        regions = mark_plot_regions([Region(RegionKind.CODE, 0, 2)], lines)
        assert regions[0].kind is RegionKind.CODE


class TestMatchMath:
    """Display math pairs sequentially; odd counts recover with a warning."""

    def test_pairs(self) -> None:
        lines = ["$$", "a", "$$", "text", "$$", "b", "c", "$$"]
        regions, oneline, warnings = match_math(lines)
        assert [(r.start, r.end) for r in regions] == [(0, 2), (4, 7)]
        assert oneline == []
        assert warnings == []

    def test_oneline_removed_before_pairing(self) -> None:
        lines = ["$$", "a", "$$ x = 1 $$", "$$"]
        regions, oneline, _ = match_math(lines)
        assert oneline == [2]
        assert [(r.start, r.end) for r in regions] == [(0, 3)]

    def test_odd_count_reuses_last_delimiter(self, caplog) -> None:
        lines = ["$$", "a", "$$", "b", "$$"]
        with caplog.at_level(logging.WARNING, logger="rmdslides"):
            regions, _, warnings = match_math(lines)
        assert [(r.start, r.end) for r in regions] == [(0, 2), (4, 4)]
        assert len(warnings) == 1
        assert "unclosed latex" in warnings[0]
        assert "unclosed latex" in caplog.text

    def test_excluded_lines_ignored(self) -> None:
        regions, _, warnings = match_math(["$$", "a", "$$"], excluded={0})
        assert warnings  # the lone remaining delimiter is unbalanced
        assert [(r.start, r.end) for r in regions] == [(2, 2)]


class TestFindRegions:
    """Code first, then math outside code."""

    def test_math_inside_code_ignored(self) -> None:
        lines = ["```{r}", "cat('$$')", "```", "$$", "x", "$$"]
        spans = find_regions(lines)
        assert [(r.start, r.end) for r in spans.code] == [(0, 2)]
        assert [(r.start, r.end) for r in spans.latex] == [(3, 5)]
        assert spans.warnings == []

    def test_covered(self) -> None:
        spans = find_regions(["```{r}", "x", "```", "prose", "$$ a $$"])
        assert spans.covered() == {0, 1, 2, 4}
