"""
DataFrame views of entries for tables and CSV export.
"""

import pandas as pd
from typing import Iterable

from reef_nutrients.analyzers.aggregator import sort_descending
from reef_nutrients.metrics.entry import Entry

COLUMNS = ['date', 'po4', 'no3', 'ratio', 'notes']


def entries_to_dataframe(entries: Iterable[Entry]) -> pd.DataFrame:
    """Build a history table, newest first.

    Returns:
        DataFrame with columns: date, po4, no3, ratio, notes.
        Missing readings and undefined ratios are NaN.
    """
    rows = [
        {
            'date': e.date,
            'po4': e.po4,
            'no3': e.no3,
            'ratio': e.ratio,
            'notes': e.notes,
        }
        for e in sort_descending(entries)
    ]
    df = pd.DataFrame(rows, columns=COLUMNS)
    for col in ('po4', 'no3', 'ratio'):
        df[col] = pd.to_numeric(df[col], errors='coerce')
    return df


def dataframe_to_csv(df: pd.DataFrame) -> bytes:
    """Encode a history table as UTF-8 CSV."""
    return df.to_csv(index=False).encode('utf-8')
