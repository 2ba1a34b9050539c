"""
Dashboard orchestrator.

Connects a RecordStore to the progress engine. Every call recomputes
from the current store contents; nothing is cached between writes.
"""

import logging
from datetime import date
from typing import Dict, List, Optional, Tuple, Union

from .models.achievement import (
    CourseAchievement,
    DailyTotals,
    DashboardSummary,
    EnrollmentProgress,
    StudentAchievement,
)
from .models.records import DateLike
from .models.store import RecordStore
from .progress.aggregator import (
    compute_course_achievement,
    compute_enrollment_progress,
    compute_student_achievement,
)
from .progress.daily import daily_totals
from .progress.dates import month_bounds
from .progress.timeline import TimelineUnit, bucketize


logger = logging.getLogger(__name__)


class Dashboard:
    """
    Progress views over one record store.

    Examples:
        >>> dashboard = Dashboard(store)
        >>> summary = dashboard.summary()
        >>> rows = dashboard.student_achievement("2024-04-01", "2024-04-30")
        >>> chart = dashboard.timeline("2024-04-01", "2024-04-30", "week")
    """

    def __init__(self, store: RecordStore):
        self.store = store

    def student_achievement(
        self,
        start: DateLike = None,
        end: DateLike = None
    ) -> List[StudentAchievement]:
        return compute_student_achievement(
            self.store.students,
            self.store.enrollments,
            self.store.logs,
            start,
            end
        )

    def course_achievement(
        self,
        start: DateLike = None,
        end: DateLike = None
    ) -> List[CourseAchievement]:
        return compute_course_achievement(
            self.store.courses,
            self.store.enrollments,
            self.store.logs,
            start,
            end
        )

    def timeline(
        self,
        start: DateLike,
        end: DateLike,
        unit: Union[TimelineUnit, str] = TimelineUnit.DAY
    ) -> List[Tuple[str, float]]:
        return bucketize(self.store.logs, start, end, unit)

    def calendar(self, student_id: str, year: int, month: int) -> Dict[str, DailyTotals]:
        """Per-day totals of one student; ``month`` is zero-based (0 = January)."""
        return daily_totals(self.store.logs, student_id, year, month)

    def enrollment_progress(self, student_id: str) -> List[EnrollmentProgress]:
        return compute_enrollment_progress(
            student_id,
            self.store.courses,
            self.store.enrollments,
            self.store.logs
        )

    def summary(self, today: Optional[date] = None) -> DashboardSummary:
        """
        Headline figures.

        Args:
            today: Reference date for "this month" (defaults to today)

        Returns:
            DashboardSummary with active student count, this month's
            actual sessions and the average achievement rate
        """
        active = sum(
            1 for s in self.store.students
            if str(s.get("status") or "").lower() == "active"
        )

        month_start, month_end = month_bounds(today or date.today())
        month_actual = sum(
            total for _, total in self.timeline(month_start, month_end, TimelineUnit.MONTH)
        )

        per_student = self.student_achievement()
        if not per_student:
            average = None
        else:
            rates = [row.rate for row in per_student if row.rate is not None]
            average = sum(rates) / len(rates) if rates else 0.0

        logger.debug(
            f"Dashboard summary: active={active}, month_actual={month_actual}, "
            f"average={average}"
        )
        return DashboardSummary(
            active_students=active,
            month_actual=month_actual,
            average_achievement=average
        )
