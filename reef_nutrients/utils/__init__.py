"""Utility functions for display and charting."""

from reef_nutrients.utils.formatting import (
    format_reading,
    format_delta,
    format_ratio,
    PLACEHOLDER,
)
from reef_nutrients.utils.colors import (
    get_reading_color,
    get_reading_status,
    hex_to_rgba,
    LINE_COLOR,
    BAND_COLOR,
)

__all__ = [
    "format_reading",
    "format_delta",
    "format_ratio",
    "PLACEHOLDER",
    "get_reading_color",
    "get_reading_status",
    "hex_to_rgba",
    "LINE_COLOR",
    "BAND_COLOR",
]
