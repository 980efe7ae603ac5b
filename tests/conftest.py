"""Pytest fixtures shared across the test suite."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from reef_nutrients.metrics.entry import Entry


@pytest.fixture
def entries() -> list[Entry]:
    """Four readings in no particular order, one missing PO4."""

    return [
        Entry(id="b", date="2024-03-05", po4=0.05, no3=5.0),
        Entry(id="d", date="2024-03-19", po4=0.04, no3=8.0, notes="after water change"),
        Entry(id="a", date="2024-03-01", po4=0.10, no3=10.0),
        Entry(id="c", date="2024-03-12", po4=None, no3=6.5),
    ]


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no file access.
    - `integration`: tests touching the filesystem or rendering libraries.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            invalid.append(item.nodeid)

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
