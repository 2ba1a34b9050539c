"""
Data models for the progress engine.

Record TypedDicts describe the loaded CSV rows; dataclasses carry
computed results back to the presentation layer.
"""

from .records import (
    CourseRecord,
    EnrollmentRecord,
    LessonLogData,
    LogKind,
    StudentRecord,
)
from .result import Result, ResultStatus
from .achievement import (
    CourseAchievement,
    DailyTotals,
    DashboardSummary,
    EnrollmentProgress,
    StudentAchievement,
)
from .store import RecordStore

__all__ = [
    # Records
    "CourseRecord",
    "EnrollmentRecord",
    "LessonLogData",
    "LogKind",
    "StudentRecord",
    # Result
    "Result",
    "ResultStatus",
    # Computed
    "CourseAchievement",
    "DailyTotals",
    "DashboardSummary",
    "EnrollmentProgress",
    "StudentAchievement",
    # Store
    "RecordStore",
]
