"""
Color utilities for nutrient charts.

Provides the chart palette and mapping of readings against target ranges.
"""

from typing import Optional, Tuple


# =============================================================================
# CHART PALETTE
# =============================================================================

LINE_COLOR = '#0284C7'    # Series line and markers - sky blue
BAND_COLOR = '#22C55E'    # Target band - green
AXIS_COLOR = '#CBD5E1'    # Axis lines - slate
GRID_COLOR = '#E2E8F0'    # Gridlines - light slate
LABEL_COLOR = '#64748B'   # Tick labels - muted slate


# =============================================================================
# TARGET STATUS
# =============================================================================

STATUS_COLORS = {
    'below': '#F59E0B',   # Amber - under target
    'in_range': '#22C55E',  # Green - on target
    'above': '#EF4444',   # Red - over target
}


def get_reading_status(value: float, target: Tuple[float, float]) -> str:
    """Classify a reading against a (min, max) target range.

    Returns:
        One of 'below', 'in_range', 'above'.
    """
    low, high = sorted(target)
    if value < low:
        return 'below'
    if value > high:
        return 'above'
    return 'in_range'


def get_reading_color(
    value: Optional[float],
    target: Tuple[float, float],
) -> Optional[str]:
    """Get color for a reading, or None when there is no reading."""
    if value is None:
        return None
    return STATUS_COLORS[get_reading_status(value, target)]


def hex_to_rgba(hex_color: str, alpha: float) -> str:
    """'#22C55E', 0.15 -> 'rgba(34,197,94,0.15)'."""
    h = hex_color.lstrip('#')
    r, g, b = (int(h[i:i + 2], 16) for i in (0, 2, 4))
    return f'rgba({r},{g},{b},{alpha})'
