"""
Chart projection dataclasses.

All coordinates are fractions in [0, 1]; renderers map them to pixels.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple, Dict, Any


class ChartPoint(NamedTuple):
    """A reading placed at its position in the date-ascending entry list."""
    index: int
    value: float


ChartSeries = Tuple[ChartPoint, ...]


class ProjectedPoint(NamedTuple):
    index: int
    value: float
    x_fraction: float
    y_fraction: float


@dataclass(frozen=True)
class TargetBand:
    """Target range as (low, high) y-fractions, low <= high."""
    low: float
    high: float

    @property
    def height(self) -> float:
        return self.high - self.low


@dataclass(frozen=True)
class ChartProjection:
    """Axis scale plus normalized points for one metric chart."""
    y_min: float
    y_max: float
    points: Tuple[ProjectedPoint, ...] = ()
    band: Optional[TargetBand] = None
    gridlines: Tuple[float, ...] = ()

    @property
    def y_range(self) -> float:
        return self.y_max - self.y_min

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0

    def value_at(self, fraction: float) -> float:
        """Axis value at a y-fraction (for tick labels)."""
        return self.y_min + fraction * self.y_range

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'y_min': self.y_min,
            'y_max': self.y_max,
            'points': [p._asdict() for p in self.points],
            'band': (
                {'low': self.band.low, 'high': self.band.high}
                if self.band else None
            ),
            'gridlines': list(self.gridlines),
        }
