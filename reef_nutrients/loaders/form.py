"""
Parsing of the add/edit reading form.
"""

import math
from datetime import datetime
from typing import Optional

from reef_nutrients.metrics.entry import Entry

DATE_FORMAT = "%Y-%m-%d"


def parse_reading(text: Optional[str]) -> Optional[float]:
    """Parse a ppm value typed by the user.

    Accepts ',' as the decimal separator. Blank or unparsable text gives None,
    and so do negative, NaN and infinite values.
    """
    if text is None:
        return None
    cleaned = text.strip().replace(',', '.')
    if not cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def validate_date(date: str) -> str:
    """Check a 'yyyy-MM-dd' date string.

    Raises:
        ValueError: If the string is not a real date in that exact format.
    """
    parsed = datetime.strptime(date, DATE_FORMAT)
    if parsed.strftime(DATE_FORMAT) != date:
        raise ValueError(f"Date must be yyyy-MM-dd, got {date!r}")
    return date


def build_entry(
    date: str,
    po4_text: Optional[str],
    no3_text: Optional[str],
    notes: str = "",
    entry_id: Optional[str] = None,
) -> Optional[Entry]:
    """Turn form fields into an Entry.

    Args:
        date: Reading date, 'yyyy-MM-dd'.
        po4_text: Phosphate as typed.
        no3_text: Nitrate as typed.
        notes: Free text, trimmed.
        entry_id: Id of the entry being edited; a new id is made if None.

    Returns:
        The entry, or None when neither reading was given.

    Raises:
        ValueError: If the date is malformed.
    """
    validate_date(date)
    po4 = parse_reading(po4_text)
    no3 = parse_reading(no3_text)
    if po4 is None and no3 is None:
        return None

    notes = (notes or "").strip()
    if entry_id is None:
        return Entry.create(date=date, po4=po4, no3=no3, notes=notes)
    return Entry(id=entry_id, date=date, po4=po4, no3=no3, notes=notes)
