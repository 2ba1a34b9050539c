"""
Timeline bucketing of actual sessions for charts.
"""

import logging
from collections import defaultdict
from enum import Enum
from typing import Dict, Iterable, List, Tuple, Union

from ..models.records import DateLike, LessonLogData
from .classifier import is_planned
from .dates import (
    date_to_str,
    in_window,
    month_key,
    normalize_window,
    parse_date,
    to_number,
    week_start,
)


logger = logging.getLogger(__name__)


class TimelineUnit(Enum):
    """Bucket granularity."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


def bucket_key(value, unit: TimelineUnit) -> str:
    """
    Bucket key of a date.

    Keys sort chronologically as plain strings:
        day   -> YYYY-MM-DD
        week  -> YYYY-MM-DD of that week's Monday
        month -> YYYY-MM
    """
    if unit is TimelineUnit.DAY:
        return date_to_str(value)
    if unit is TimelineUnit.WEEK:
        return date_to_str(week_start(value))
    return month_key(value)


def bucketize(
    logs: Iterable[LessonLogData],
    window_start: DateLike,
    window_end: DateLike,
    unit: Union[TimelineUnit, str] = TimelineUnit.DAY
) -> List[Tuple[str, float]]:
    """
    Sum actual session counts per day, week or month.

    Args:
        logs: Lesson log records
        window_start: Window start (date-like), None for unbounded
        window_end: Window end (date-like), None for unbounded
        unit: TimelineUnit or its value ("day", "week", "month")

    Returns:
        (bucket_key, total_count) pairs sorted by key; empty when no
        actual log falls in the window

    Raises:
        ValueError: If unit is not a known TimelineUnit value

    Examples:
        >>> bucketize(logs, "2024-04-01", "2024-04-30", "week")
        [('2024-04-01', 2.0), ('2024-04-08', 3.0)]
    """
    unit = TimelineUnit(unit)
    start, end = normalize_window(window_start, window_end)

    buckets: Dict[str, float] = defaultdict(float)
    for log in logs:
        if is_planned(log):
            continue
        log_date = parse_date(log.get("date"))
        if log_date is None or not in_window(log_date, start, end):
            continue
        buckets[bucket_key(log_date, unit)] += to_number(log.get("count"))

    logger.debug(f"Bucketed actual logs into {len(buckets)} {unit.value} buckets")
    return sorted(buckets.items())
