"""Dataclasses for readings and derived view data."""

from reef_nutrients.metrics.entry import Entry, METRICS
from reef_nutrients.metrics.summary import DerivedSummary
from reef_nutrients.metrics.projection import (
    ChartPoint,
    ChartSeries,
    ChartProjection,
    ProjectedPoint,
    TargetBand,
)

__all__ = [
    "Entry",
    "METRICS",
    "DerivedSummary",
    "ChartPoint",
    "ChartSeries",
    "ChartProjection",
    "ProjectedPoint",
    "TargetBand",
]
