"""
Decimal Utilities
cfp_review/scoring/utils.py

Half-up rounding and display formatting for review scores and coverage.
Floats are converted through str() so 2.345 rounds as the decimal 2.345
rather than its binary approximation.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional


def to_decimal(value: float, places: int = 2) -> Decimal:
    """Convert float to Decimal with explicit precision."""
    return Decimal(str(value)).quantize(
        Decimal(10) ** -places, rounding=ROUND_HALF_UP
    )


def round_to(value: float, decimals: int = 2) -> float:
    """
    Round a number to the given decimal places using half-up rounding.

    Examples:
        >>> round_to(2.345)
        2.35
        >>> round_to(2.5, 0)
        3.0
    """
    return float(to_decimal(value, decimals))


def format_score(value: Optional[float]) -> str:
    """Format a score for display: at most 2 decimals, "-" when missing."""
    if value is None:
        return "-"
    rounded = to_decimal(value, 2)
    if rounded == 0:
        return "0"
    return format(rounded.normalize(), "f")


def format_percent(value: float) -> str:
    """Format a percentage as a whole number with a % suffix."""
    return f"{to_decimal(value, 0)}%"
