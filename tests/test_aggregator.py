"""Unit tests for the reading aggregator."""

from __future__ import annotations

import pytest

from reef_nutrients.analyzers.aggregator import (
    ReadingAnalyzer,
    build_series,
    date_labels,
    entry_ratio,
    sort_ascending,
    sort_descending,
    summarize,
)
from reef_nutrients.metrics.entry import Entry

pytestmark = pytest.mark.unit


def test_summarize_picks_latest_and_previous_by_date(entries: list[Entry]) -> None:
    """Latest is the maximum date, previous the next one down."""

    summary = summarize(entries)

    assert summary.latest.id == "d"
    assert summary.latest.date == max(e.date for e in entries)
    assert summary.previous.id == "c"
    assert summary.entry_count == 4


def test_summarize_delta_is_none_when_previous_lacks_metric(entries: list[Entry]) -> None:
    """A missing reading on either side gives no delta, not zero."""

    summary = summarize(entries)

    assert summary.delta_po4 is None
    assert summary.delta_no3 == pytest.approx(1.5)


def test_summarize_signed_deltas() -> None:
    """Deltas are latest minus previous and may be negative."""

    summary = summarize(
        [
            Entry(id="1", date="2024-01-01", po4=0.08, no3=12.0),
            Entry(id="2", date="2024-01-08", po4=0.05, no3=14.0),
        ]
    )

    assert summary.delta_po4 == pytest.approx(-0.03)
    assert summary.delta_no3 == pytest.approx(2.0)


def test_summarize_single_entry_has_no_previous_or_deltas() -> None:
    """One reading still has a current ratio but nothing to compare with."""

    summary = summarize([Entry(id="1", date="2024-01-01", po4=0.05, no3=10.0)])

    assert summary.previous is None
    assert not summary.has_previous
    assert summary.delta_po4 is None
    assert summary.delta_no3 is None
    assert summary.current_ratio == pytest.approx(200.0)
    assert summary.average_ratio == pytest.approx(200.0)


def test_summarize_empty_collection() -> None:
    """No entries gives an all-None summary."""

    summary = summarize([])

    assert summary.latest is None
    assert summary.previous is None
    assert summary.current_ratio is None
    assert summary.average_ratio is None
    assert summary.entry_count == 0


def test_average_ratio_excludes_zero_phosphate() -> None:
    """Entries with PO4 == 0 are left out of the average."""

    summary = summarize(
        [
            Entry(id="1", date="2024-01-01", po4=0.05, no3=5.0),
            Entry(id="2", date="2024-01-02", po4=0.1, no3=10.0),
            Entry(id="3", date="2024-01-03", po4=0.0, no3=3.0),
        ]
    )

    assert summary.average_ratio == pytest.approx(100.0)
    assert summary.current_ratio is None


def test_average_ratio_none_when_no_entry_has_both_readings() -> None:
    """Without any complete reading there is no average ratio."""

    summary = summarize(
        [
            Entry(id="1", date="2024-01-01", po4=0.05),
            Entry(id="2", date="2024-01-02", no3=10.0),
        ]
    )

    assert summary.average_ratio is None
    assert summary.current_ratio is None


def test_entry_ratio_requires_both_readings() -> None:
    """Ratio is only defined with both readings and non-zero PO4."""

    assert entry_ratio(Entry(id="1", date="2024-01-01", po4=0.04, no3=8.0)) == pytest.approx(200.0)
    assert entry_ratio(Entry(id="2", date="2024-01-01", po4=None, no3=8.0)) is None
    assert entry_ratio(Entry(id="3", date="2024-01-01", po4=0.04, no3=None)) is None
    assert entry_ratio(Entry(id="4", date="2024-01-01", po4=0.0, no3=8.0)) is None


def test_sorting_is_stable_for_equal_dates() -> None:
    """Same-date entries keep their input order in both views."""

    same_day = [
        Entry(id="first", date="2024-02-02", po4=0.01),
        Entry(id="second", date="2024-02-02", po4=0.02),
        Entry(id="older", date="2024-02-01", po4=0.03),
    ]

    assert [e.id for e in sort_descending(same_day)] == ["first", "second", "older"]
    assert [e.id for e in sort_ascending(same_day)] == ["older", "first", "second"]
    assert summarize(same_day).latest.id == "first"


def test_sorting_does_not_mutate_input(entries: list[Entry]) -> None:
    """Ordered views are new lists."""

    before = list(entries)
    sort_descending(entries)
    sort_ascending(entries)
    summarize(entries)

    assert entries == before


def test_build_series_keeps_full_list_indices(entries: list[Entry]) -> None:
    """Entries missing the metric leave a gap in the indices."""

    assert build_series(entries, "po4") == ((0, 0.10), (1, 0.05), (3, 0.04))
    assert [p.index for p in build_series(entries, "no3")] == [0, 1, 2, 3]


def test_build_series_rejects_unknown_metric(entries: list[Entry]) -> None:
    """Only po4 and no3 can be charted."""

    with pytest.raises(ValueError):
        build_series(entries, "ca")


def test_date_labels_are_ascending(entries: list[Entry]) -> None:
    """Labels line up with series indices."""

    assert date_labels(entries) == ["2024-03-01", "2024-03-05", "2024-03-12", "2024-03-19"]


def test_reading_analyzer_caches_summary(entries: list[Entry]) -> None:
    """The analyzer computes the summary once and exposes both views."""

    analyzer = ReadingAnalyzer(entries)

    assert analyzer.summary is analyzer.summary
    assert [e.id for e in analyzer.history] == ["d", "c", "b", "a"]
    assert analyzer.labels[0] == "2024-03-01"
    assert analyzer.series("no3")[-1].value == 8.0
