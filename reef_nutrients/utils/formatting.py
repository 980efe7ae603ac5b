"""
Text formatting for summary cards and the history table.
"""

from typing import Optional

PLACEHOLDER = "—"


def format_reading(
    value: Optional[float],
    decimals: int = 2,
    placeholder: str = PLACEHOLDER,
) -> str:
    if value is None:
        return placeholder
    return f"{value:.{decimals}f}"


def format_delta(
    value: Optional[float],
    decimals: int = 2,
    placeholder: str = PLACEHOLDER,
) -> str:
    """Signed change, e.g. '+0.012' or '-1.5'."""
    if value is None:
        return placeholder
    return f"{value:+.{decimals}f}"


def format_ratio(
    value: Optional[float],
    decimals: int = 1,
    placeholder: str = PLACEHOLDER,
) -> str:
    """NO3:PO4 ratio as 'N : 1'."""
    if value is None:
        return placeholder
    return f"{value:.{decimals}f} : 1"
