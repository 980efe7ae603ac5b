"""
Reading Aggregator - summary cards and chart series from raw entries.

Everything here is a pure function of the entry list: inputs are never
mutated and each ordering is built as its own fresh list.
"""

import numpy as np
from typing import Optional, Iterable, List

from reef_nutrients.metrics.entry import Entry, METRICS
from reef_nutrients.metrics.projection import ChartPoint, ChartSeries
from reef_nutrients.metrics.summary import DerivedSummary


# =============================================================================
# ORDERED VIEWS
# =============================================================================

def sort_descending(entries: Iterable[Entry]) -> List[Entry]:
    """Newest first. Entries sharing a date keep their input order."""
    return sorted(entries, key=lambda e: e.date, reverse=True)


def sort_ascending(entries: Iterable[Entry]) -> List[Entry]:
    """Oldest first, the order charts are drawn in."""
    return sorted(entries, key=lambda e: e.date)


# =============================================================================
# SUMMARY
# =============================================================================

def entry_ratio(entry: Entry) -> Optional[float]:
    """NO3:PO4 ratio for one entry (None if undefined)."""
    return entry.ratio


def _delta(latest: Entry, previous: Optional[Entry], metric: str) -> Optional[float]:
    if previous is None:
        return None
    current = latest.value(metric)
    before = previous.value(metric)
    if current is None or before is None:
        return None
    return current - before


def summarize(entries: Iterable[Entry]) -> DerivedSummary:
    """Compute the summary cards for a collection of entries.

    Args:
        entries: Entries in any order.

    Returns:
        DerivedSummary; every value that cannot be computed is None.
    """
    ordered = sort_descending(entries)
    if not ordered:
        return DerivedSummary()

    latest = ordered[0]
    previous = ordered[1] if len(ordered) > 1 else None

    ratios = [r for r in (entry_ratio(e) for e in ordered) if r is not None]
    average_ratio = float(np.mean(ratios)) if ratios else None

    return DerivedSummary(
        latest=latest,
        previous=previous,
        delta_po4=_delta(latest, previous, 'po4'),
        delta_no3=_delta(latest, previous, 'no3'),
        current_ratio=entry_ratio(latest),
        average_ratio=average_ratio,
        entry_count=len(ordered),
    )


# =============================================================================
# CHART VIEWS
# =============================================================================

def build_series(entries: Iterable[Entry], metric: str) -> ChartSeries:
    """Build the (index, value) series for one metric.

    Indices are positions in the full date-ascending list, so entries
    without this metric leave gaps instead of being renumbered.
    """
    if metric not in METRICS:
        raise ValueError(f"Unknown metric: {metric!r}")
    return tuple(
        ChartPoint(index, value)
        for index, value in enumerate(e.value(metric) for e in sort_ascending(entries))
        if value is not None
    )


def date_labels(entries: Iterable[Entry]) -> List[str]:
    """Dates in ascending order, aligned with series indices."""
    return [e.date for e in sort_ascending(entries)]


class ReadingAnalyzer:
    """Holds one snapshot of entries and derives the view data lazily.

    Used by the dashboard so each render summarizes and builds series once.
    """

    def __init__(self, entries: Iterable[Entry]):
        """Initialize analyzer.

        Args:
            entries: Entries in any order. A private copy is kept.
        """
        self.entries = list(entries)
        self._summary: Optional[DerivedSummary] = None

    @property
    def summary(self) -> DerivedSummary:
        """Get summary (calculates on first access)."""
        if self._summary is None:
            self._summary = summarize(self.entries)
        return self._summary

    @property
    def history(self) -> List[Entry]:
        """Entries newest first, for the history list."""
        return sort_descending(self.entries)

    @property
    def labels(self) -> List[str]:
        return date_labels(self.entries)

    def series(self, metric: str) -> ChartSeries:
        return build_series(self.entries, metric)
