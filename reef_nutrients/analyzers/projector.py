"""
Chart Projector - axis scaling and normalized coordinates for line charts.

Turns a ChartSeries plus an optional target range into fractions in [0, 1]
that any renderer (Plotly, Matplotlib, a canvas) can map to its own pixels.
"""

from typing import Optional, Iterable, Tuple, List

from reef_nutrients.config import ChartSettings
from reef_nutrients.metrics.projection import (
    ChartPoint,
    ChartProjection,
    ProjectedPoint,
    TargetBand,
)


def gridline_fractions(divisions: int = 4) -> List[float]:
    """Horizontal gridline positions: i/divisions for i in 0..divisions."""
    return [i / divisions for i in range(divisions + 1)]


def label_stride(label_count: int, visible_labels: int = 6) -> int:
    """Show an x label only at indices that are multiples of this stride."""
    return max(1, label_count // visible_labels)


def short_date_label(date: str) -> str:
    """'2024-03-07' -> '03-07'."""
    return date[5:]


def x_label_positions(
    projection: ChartProjection,
    labels: List[str],
    visible_labels: int = 6,
) -> List[Tuple[float, str]]:
    """Thinned (x_fraction, MM-DD) ticks aligned with the projected points.

    Label i sits at i / max_index, the same mapping the points use. Dates
    after the last charted reading have no place on the axis and are dropped.
    """
    if projection.is_empty or not labels:
        return []
    max_index = max(p.index for p in projection.points)
    shown = labels[:max_index + 1]
    stride = label_stride(len(shown), visible_labels)
    return [
        (i / max_index if max_index else 0.0, short_date_label(label))
        for i, label in enumerate(shown)
        if i % stride == 0
    ]


def _clip(fraction: float) -> float:
    return min(1.0, max(0.0, fraction))


class ChartProjector:
    """Scales a series and projects it into normalized chart space.

    Stateless apart from its settings; safe to reuse across renders.
    """

    def __init__(self, settings: Optional[ChartSettings] = None):
        """Initialize projector.

        Args:
            settings: Optional chart settings. Uses defaults if None.
        """
        self.settings = settings or ChartSettings()

    def scale(
        self,
        values: List[float],
        target_min: Optional[float] = None,
        target_max: Optional[float] = None,
    ) -> Tuple[float, float]:
        """Compute padded (y_min, y_max).

        The target bounds are folded in so the band is always visible.
        A zero-width result is widened to a span of exactly 1.0.
        """
        if not values:
            return 0.0, 1.0

        candidates_low = values + ([target_min] if target_min is not None else [])
        candidates_high = values + ([target_max] if target_max is not None else [])
        y_min = min(candidates_low) * self.settings.padding_low
        y_max = max(candidates_high) * self.settings.padding_high

        if y_max - y_min == 0:
            y_max = y_min + 1.0
        return y_min, y_max

    def project(
        self,
        series: Iterable[Tuple[int, float]],
        target_min: Optional[float] = None,
        target_max: Optional[float] = None,
    ) -> ChartProjection:
        """Project a series into normalized chart coordinates.

        Args:
            series: (index, value) pairs in ascending index order.
            target_min: Lower bound of the target band, if any.
            target_max: Upper bound of the target band, if any.

        Returns:
            ChartProjection with y-scale, point fractions, the target band
            (only when both bounds are given) and gridline fractions.
        """
        points = [ChartPoint(int(i), float(v)) for i, v in series]
        gridlines = tuple(gridline_fractions(self.settings.gridline_divisions))

        if not points:
            return ChartProjection(y_min=0.0, y_max=1.0, gridlines=gridlines)

        # An inverted range is treated as the same band
        if target_min is not None and target_max is not None and target_min > target_max:
            target_min, target_max = target_max, target_min

        y_min, y_max = self.scale([p.value for p in points], target_min, target_max)
        y_range = y_max - y_min

        max_index = max(p.index for p in points)

        def y_fraction(value: float) -> float:
            return (value - y_min) / y_range

        projected = tuple(
            ProjectedPoint(
                index=p.index,
                value=p.value,
                x_fraction=p.index / max_index if max_index else 0.0,
                y_fraction=y_fraction(p.value),
            )
            for p in points
        )

        band = None
        if target_min is not None and target_max is not None:
            low, high = sorted((y_fraction(target_min), y_fraction(target_max)))
            band = TargetBand(low=_clip(low), high=_clip(high))

        return ChartProjection(
            y_min=y_min,
            y_max=y_max,
            points=projected,
            band=band,
            gridlines=gridlines,
        )

    def label_stride(self, label_count: int) -> int:
        return label_stride(label_count, self.settings.visible_labels)


def project(
    series: Iterable[Tuple[int, float]],
    target_min: Optional[float] = None,
    target_max: Optional[float] = None,
) -> ChartProjection:
    """Project a series with the default chart settings."""
    return ChartProjector().project(series, target_min, target_max)
