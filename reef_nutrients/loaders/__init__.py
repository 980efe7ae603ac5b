"""Storage and input adapters around the engine."""

from reef_nutrients.loaders.json_store import EntryStore
from reef_nutrients.loaders.form import build_entry, parse_reading, validate_date
from reef_nutrients.loaders.frames import entries_to_dataframe, dataframe_to_csv

__all__ = [
    "EntryStore",
    "build_entry",
    "parse_reading",
    "validate_date",
    "entries_to_dataframe",
    "dataframe_to_csv",
]
