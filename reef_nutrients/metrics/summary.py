"""
Summary dataclass for the latest-reading cards.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from reef_nutrients.metrics.entry import Entry


@dataclass(frozen=True)
class DerivedSummary:
    """Latest reading, change since the previous one and NO3:PO4 ratios.

    Recomputed on every render. Anything that cannot be computed is None.
    """
    latest: Optional[Entry] = None
    previous: Optional[Entry] = None

    # latest - previous, per metric
    delta_po4: Optional[float] = None
    delta_no3: Optional[float] = None

    current_ratio: Optional[float] = None  # Latest entry only
    average_ratio: Optional[float] = None  # Mean over every entry with a ratio

    entry_count: int = 0

    @property
    def has_previous(self) -> bool:
        """Check if there is a reading to compare against."""
        return self.previous is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'latest': self.latest.to_dict() if self.latest else None,
            'previous': self.previous.to_dict() if self.previous else None,
            'delta_po4_ppm': self.delta_po4,
            'delta_no3_ppm': self.delta_no3,
            'current_ratio': self.current_ratio,
            'average_ratio': self.average_ratio,
            'entry_count': self.entry_count,
        }
