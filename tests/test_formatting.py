"""Unit tests for display formatting and colors."""

from __future__ import annotations

import pytest

from reef_nutrients.utils.colors import get_reading_color, get_reading_status, hex_to_rgba
from reef_nutrients.utils.formatting import format_delta, format_ratio, format_reading

pytestmark = pytest.mark.unit


def test_absent_values_use_placeholder() -> None:
    """None renders as the placeholder everywhere."""

    assert format_reading(None) == "—"
    assert format_delta(None) == "—"
    assert format_ratio(None, placeholder="n/a") == "n/a"


def test_number_formats() -> None:
    """Readings, signed deltas and ratios."""

    assert format_reading(0.04, 3) == "0.040"
    assert format_delta(-0.012, 3) == "-0.012"
    assert format_delta(1.5, 1) == "+1.5"
    assert format_ratio(125.0) == "125.0 : 1"


@pytest.mark.parametrize(
    ("value", "status"),
    [(0.01, "below"), (0.02, "in_range"), (0.05, "in_range"), (0.08, "in_range"), (0.2, "above")],
)
def test_reading_status(value: float, status: str) -> None:
    """Bounds are inclusive."""

    assert get_reading_status(value, (0.02, 0.08)) == status


def test_reading_color() -> None:
    """No reading, no color."""

    assert get_reading_color(None, (2.0, 15.0)) is None
    assert get_reading_color(10.0, (2.0, 15.0)) == "#22C55E"


def test_hex_to_rgba() -> None:
    """Band fill color for plotly."""

    assert hex_to_rgba("#22C55E", 0.15) == "rgba(34,197,94,0.15)"
