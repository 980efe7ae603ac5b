"""Integration tests for the DataFrame history view."""

from __future__ import annotations

import pandas as pd
import pytest

from reef_nutrients.loaders.frames import dataframe_to_csv, entries_to_dataframe
from reef_nutrients.metrics.entry import Entry

pytestmark = pytest.mark.integration


def test_history_table_is_newest_first_with_ratio(entries: list[Entry]) -> None:
    """Ratio column is NaN where undefined."""

    df = entries_to_dataframe(entries)

    assert list(df.columns) == ["date", "po4", "no3", "ratio", "notes"]
    assert df["date"].tolist() == ["2024-03-19", "2024-03-12", "2024-03-05", "2024-03-01"]
    assert df.loc[0, "ratio"] == pytest.approx(200.0)
    assert pd.isna(df.loc[1, "po4"])
    assert pd.isna(df.loc[1, "ratio"])


def test_empty_history_table() -> None:
    """No entries still gives the expected columns."""

    df = entries_to_dataframe([])

    assert df.empty
    assert list(df.columns) == ["date", "po4", "no3", "ratio", "notes"]


def test_csv_export(entries: list[Entry]) -> None:
    """CSV has a header and one row per entry."""

    csv = dataframe_to_csv(entries_to_dataframe(entries)).decode("utf-8")

    lines = csv.strip().splitlines()
    assert lines[0] == "date,po4,no3,ratio,notes"
    assert len(lines) == 5
    assert "after water change" in lines[1]
