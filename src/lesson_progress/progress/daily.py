"""
Daily roll-up of one student's logs for the calendar view.
"""

from typing import Dict, Iterable

from ..models.achievement import DailyTotals
from ..models.records import LessonLogData
from .classifier import is_planned
from .dates import date_to_str, parse_date, to_number


def daily_totals(
    logs: Iterable[LessonLogData],
    student_id: str,
    year: int,
    month: int
) -> Dict[str, DailyTotals]:
    """
    Planned and actual session counts per day of one month.

    Args:
        logs: Lesson log records
        student_id: Student whose logs are rolled up
        year: Calendar year
        month: Zero-based month (0 = January, 11 = December)

    Returns:
        Mapping of YYYY-MM-DD to DailyTotals. Days without logs are
        absent; callers fill zeros when drawing a full month grid.

    Examples:
        >>> totals = daily_totals(logs, "S001", 2024, 3)  # April
        >>> totals["2024-04-05"].actual
        2.0
    """
    totals: Dict[str, DailyTotals] = {}
    for log in logs:
        if log.get("student_id") != student_id:
            continue
        log_date = parse_date(log.get("date"))
        if log_date is None:
            continue
        if log_date.year != year or log_date.month != month + 1:
            continue

        day = totals.setdefault(date_to_str(log_date), DailyTotals())
        count = to_number(log.get("count"))
        if is_planned(log):
            day.planned += count
        else:
            day.actual += count
    return totals
