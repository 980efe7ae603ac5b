"""
Entry dataclass - a single dated nutrient reading.
"""

import uuid
from dataclasses import dataclass
from typing import Optional, Dict, Any

METRICS = ('po4', 'no3')


@dataclass(frozen=True)
class Entry:
    """One water test result.

    Either reading may be missing; a missing reading is None, never 0.
    `date` is a 'yyyy-MM-dd' string so that string order is date order.
    """
    id: str
    date: str
    po4: Optional[float] = None  # Phosphate, ppm
    no3: Optional[float] = None  # Nitrate, ppm
    notes: str = ""

    @classmethod
    def create(
        cls,
        date: str,
        po4: Optional[float] = None,
        no3: Optional[float] = None,
        notes: str = "",
    ) -> 'Entry':
        """Create an entry with a fresh id."""
        return cls(id=str(uuid.uuid4()), date=date, po4=po4, no3=no3, notes=notes)

    @property
    def ratio(self) -> Optional[float]:
        """NO3:PO4 ratio, or None when either reading is missing or PO4 is zero."""
        if self.po4 is None or self.no3 is None or self.po4 == 0:
            return None
        return self.no3 / self.po4

    def value(self, metric: str) -> Optional[float]:
        """Get the reading for 'po4' or 'no3'."""
        if metric not in METRICS:
            raise ValueError(f"Unknown metric: {metric!r}")
        return getattr(self, metric)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'id': self.id,
            'date': self.date,
            'po4': self.po4,
            'no3': self.no3,
            'notes': self.notes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Entry':
        """Build from a stored dictionary. Missing readings load as None."""
        po4 = data.get('po4')
        no3 = data.get('no3')
        return cls(
            id=str(data['id']),
            date=str(data['date']),
            po4=float(po4) if po4 is not None else None,
            no3=float(no3) if no3 is not None else None,
            notes=data.get('notes') or "",
        )
