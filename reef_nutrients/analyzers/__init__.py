"""Aggregation and chart projection engine."""

from reef_nutrients.analyzers.aggregator import (
    ReadingAnalyzer,
    summarize,
    build_series,
    date_labels,
    entry_ratio,
    sort_ascending,
    sort_descending,
)
from reef_nutrients.analyzers.projector import (
    ChartProjector,
    project,
    gridline_fractions,
    label_stride,
    short_date_label,
    x_label_positions,
)

__all__ = [
    "ReadingAnalyzer",
    "summarize",
    "build_series",
    "date_labels",
    "entry_ratio",
    "sort_ascending",
    "sort_descending",
    "ChartProjector",
    "project",
    "gridline_fractions",
    "label_stride",
    "short_date_label",
    "x_label_positions",
]
