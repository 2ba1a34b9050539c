"""
Date-range apportionment of planned sessions.

An enrollment plans N sessions over [start, end]. For a query window, the
share attributed to the window is N scaled by the number of overlapping
days over the number of days in the span.
"""

import logging
from typing import Any

from ..models.records import DateLike
from .dates import clamp_date, days_between_inclusive, parse_date, to_number


logger = logging.getLogger(__name__)


def apportion(
    total_planned: Any,
    course_start: DateLike,
    course_end: DateLike,
    window_start: DateLike = None,
    window_end: DateLike = None
) -> float:
    """
    Planned sessions attributable to a query window.

    Args:
        total_planned: Planned sessions over the whole enrollment span
        course_start: Enrollment span start (date-like, may be empty)
        course_end: Enrollment span end (date-like, may be empty)
        window_start: Query window start (date-like, optional)
        window_end: Query window end (date-like, optional)

    Returns:
        - 0 when nothing is planned or the window misses the span
        - total_planned when the span or the window is incomplete
        - total_planned * overlap_days / span_days otherwise

    Note:
        An inverted span or window (start after end) is swapped before use.

    Examples:
        >>> round(apportion(20, "2024-04-01", "2024-09-30",
        ...                 "2024-04-01", "2024-04-30"), 2)
        3.28
    """
    planned = to_number(total_planned)
    if planned <= 0:
        return 0.0

    span_start = parse_date(course_start)
    span_end = parse_date(course_end)
    if span_start is None or span_end is None:
        return planned

    if span_end < span_start:
        logger.debug(f"Inverted enrollment span {span_start} > {span_end}, swapping")
        span_start, span_end = span_end, span_start

    start = parse_date(window_start)
    end = parse_date(window_end)
    if start is None or end is None:
        return planned
    if end < start:
        start, end = end, start

    if span_end < start or span_start > end:
        return 0.0

    total_days = days_between_inclusive(span_start, span_end)
    overlap_start = clamp_date(start, span_start, span_end)
    overlap_end = clamp_date(end, span_start, span_end)
    overlap_days = days_between_inclusive(overlap_start, overlap_end)

    if total_days <= 0:
        return planned
    return planned * overlap_days / total_days
