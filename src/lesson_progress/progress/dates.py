"""
Date and number normalization helpers.

Every value coming from a record may be a string, a date, or garbage.
These helpers never raise on bad record data: unparseable dates become
None and unparseable numbers become 0.
"""

import calendar
import math
import re
from datetime import date, datetime, timedelta
from typing import Any, Optional, Tuple

from ..models.records import DateLike
from ..models.result import Result


_DATE_PATTERN = re.compile(r'^\s*(\d{4})-(\d{1,2})-(\d{1,2})(?:$|[T\s])')


def parse_date(value: Any) -> Optional[date]:
    """
    Normalize a date-like value to a calendar date.

    Args:
        value: date, datetime, or "YYYY-MM-DD" string (a longer
            timestamp string is accepted, its time part is dropped)

    Returns:
        The calendar date, or None if the value cannot be parsed

    Examples:
        >>> parse_date("2024-04-05")
        datetime.date(2024, 4, 5)
        >>> parse_date("2024-04-05T10:30:00")
        datetime.date(2024, 4, 5)
        >>> parse_date("") is None
        True
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    match = _DATE_PATTERN.match(value)
    if not match:
        return None

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def to_number(value: Any) -> float:
    """
    Normalize a count-like value to a float.

    Non-numeric, NaN and infinite values become 0.0.

    Examples:
        >>> to_number("2")
        2.0
        >>> to_number("abc")
        0.0
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def days_between_inclusive(start: date, end: date) -> int:
    """Number of calendar days from start to end, both included."""
    return (end - start).days + 1


def clamp_date(value: date, start: date, end: date) -> date:
    """Clamp a date into [start, end]."""
    if value < start:
        return start
    if value > end:
        return end
    return value


def date_to_str(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.strftime("%Y-%m-%d")


def month_key(value: date) -> str:
    """Format a date as YYYY-MM."""
    return value.strftime("%Y-%m")


def week_start(value: date) -> date:
    """
    Monday of the week containing ``value``.

    Examples:
        >>> week_start(date(2024, 4, 7))  # Sunday
        datetime.date(2024, 4, 1)
    """
    # weekday(): Monday=0 .. Sunday=6
    return value - timedelta(days=value.weekday())


def in_window(value: date, start: Optional[date], end: Optional[date]) -> bool:
    """Check ``start <= value <= end``; a missing bound is unbounded."""
    if start is not None and value < start:
        return False
    if end is not None and value > end:
        return False
    return True


def normalize_window(
    start: DateLike,
    end: DateLike
) -> Tuple[Optional[date], Optional[date]]:
    """
    Parse window bounds, swapping them when both are given and inverted.

    An unparseable bound is returned as None (unbounded).
    """
    window_start = parse_date(start)
    window_end = parse_date(end)
    if window_start and window_end and window_end < window_start:
        window_start, window_end = window_end, window_start
    return window_start, window_end


def month_bounds(value: date) -> Tuple[date, date]:
    """First and last day of the month containing ``value``."""
    last_day = calendar.monthrange(value.year, value.month)[1]
    return value.replace(day=1), value.replace(day=last_day)


def default_period(today: Optional[date] = None) -> Tuple[date, date]:
    """
    Default analysis period: first day of the current month to today.

    Args:
        today: Reference date (defaults to date.today())
    """
    today = today or date.today()
    return today.replace(day=1), today


def resolve_period(start: DateLike, end: DateLike) -> Result[Tuple[date, date]]:
    """
    Parse an analysis period entered by the user.

    An inverted pair is swapped rather than rejected.

    Args:
        start: Period start (date-like)
        end: Period end (date-like)

    Returns:
        Result with (start, end) on success, failure if either bound
        cannot be parsed

    Examples:
        >>> resolve_period("2024-04-30", "2024-04-01").value
        (datetime.date(2024, 4, 1), datetime.date(2024, 4, 30))
    """
    start_date = parse_date(start)
    end_date = parse_date(end)

    if start_date is None or end_date is None:
        return Result.failure(
            f"Invalid analysis period: {start!r} - {end!r} (expected YYYY-MM-DD)"
        )

    if end_date < start_date:
        start_date, end_date = end_date, start_date

    return Result.success((start_date, end_date))
