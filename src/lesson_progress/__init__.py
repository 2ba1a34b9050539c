"""
Lesson progress engine.

Reconciles planned lesson sessions (apportioned over enrollment periods)
against logged sessions per student, per course, over time and per day.

Usage:
    >>> from lesson_progress import Dashboard, load_record_store
    >>>
    >>> store = load_record_store("data")
    >>> dashboard = Dashboard(store)
    >>> rows = dashboard.student_achievement("2024-04-01", "2024-04-30")
    >>> chart = dashboard.timeline("2024-04-01", "2024-04-30", "week")
"""

from .models import (
    CourseAchievement,
    DailyTotals,
    DashboardSummary,
    EnrollmentProgress,
    RecordStore,
    Result,
    StudentAchievement,
)
from .progress import (
    TimelineUnit,
    apportion,
    bucketize,
    compute_course_achievement,
    compute_enrollment_progress,
    compute_student_achievement,
    daily_totals,
    is_planned,
)
from .dashboard import Dashboard
from .loader import load_record_store

__all__ = [
    "CourseAchievement",
    "DailyTotals",
    "DashboardSummary",
    "EnrollmentProgress",
    "RecordStore",
    "Result",
    "StudentAchievement",
    "TimelineUnit",
    "apportion",
    "bucketize",
    "compute_course_achievement",
    "compute_enrollment_progress",
    "compute_student_achievement",
    "daily_totals",
    "is_planned",
    "Dashboard",
    "load_record_store",
]

__version__ = "0.1.0"
