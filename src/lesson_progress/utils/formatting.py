"""
Display formatting helpers.
"""

import math
from typing import Optional

PLACEHOLDER = "-"


def format_percent(value: Optional[float]) -> str:
    """
    Format a rate as a whole percentage.

    Examples:
        >>> format_percent(0.75)
        '75%'
        >>> format_percent(None)
        '-'
    """
    if value is None or math.isnan(value) or math.isinf(value):
        return PLACEHOLDER
    return f"{value * 100:.0f}%"


def format_sessions(value: float) -> str:
    """Format a session total with one decimal place."""
    return f"{value:.1f}"
