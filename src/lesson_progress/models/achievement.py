"""
Computed progress models.

These dataclasses are what the progress engine hands to the presentation
layer. Rates are derived on access and are None when nothing was planned.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .records import CourseRecord, EnrollmentRecord, StudentRecord


def _rate(actual: float, planned: float) -> Optional[float]:
    if planned > 0:
        return actual / planned
    return None


@dataclass
class StudentAchievement:
    """
    Planned vs. actual sessions for one student.

    Attributes:
        student: Student record the totals belong to
        planned: Apportioned planned sessions over the window
        actual: Actual sessions logged within the window

    Examples:
        >>> row = StudentAchievement(student=student, planned=8.0, actual=6.0)
        >>> row.rate
        0.75
    """

    student: StudentRecord
    planned: float
    actual: float

    @property
    def rate(self) -> Optional[float]:
        """Achievement rate (actual / planned), None when planned is 0."""
        return _rate(self.actual, self.planned)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "student_id": self.student.get("student_id"),
            "grade": self.student.get("grade", ""),
            "course_group": self.student.get("course_group", ""),
            "planned": self.planned,
            "actual": self.actual,
            "rate": self.rate
        }


@dataclass
class CourseAchievement:
    """
    Planned vs. actual sessions for one course.

    Attributes:
        course: Course record the totals belong to
        student_count: Distinct students enrolled in the course
        planned: Apportioned planned sessions over the window
        actual: Actual sessions logged within the window
    """

    course: CourseRecord
    student_count: int
    planned: float
    actual: float

    @property
    def rate(self) -> Optional[float]:
        """Achievement rate (actual / planned), None when planned is 0."""
        return _rate(self.actual, self.planned)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "course_id": self.course.get("course_id"),
            "course_name": self.course.get("course_name", ""),
            "student_count": self.student_count,
            "planned": self.planned,
            "actual": self.actual,
            "rate": self.rate
        }


@dataclass
class EnrollmentProgress:
    """
    All-time progress of one enrollment (student detail view).

    ``planned`` is the raw planned_sessions value, not apportioned.
    """

    enrollment: EnrollmentRecord
    course_name: str
    planned: float
    actual: float

    @property
    def rate(self) -> Optional[float]:
        return _rate(self.actual, self.planned)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "course_id": self.enrollment.get("course_id"),
            "course_name": self.course_name,
            "planned": self.planned,
            "actual": self.actual,
            "rate": self.rate,
            "start_date": self.enrollment.get("start_date", ""),
            "end_date": self.enrollment.get("end_date", "")
        }


@dataclass
class DailyTotals:
    """Planned and actual session counts for one calendar day."""

    planned: float = 0.0
    actual: float = 0.0


@dataclass
class DashboardSummary:
    """
    Headline figures for the dashboard.

    Attributes:
        active_students: Students whose status is "active"
        month_actual: Actual sessions logged in the current month
        average_achievement: Mean rate over students with planned > 0
            (0.0 when none qualify, None when there are no students)
    """

    active_students: int
    month_actual: float
    average_achievement: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "active_students": self.active_students,
            "month_actual": self.month_actual,
            "average_achievement": self.average_achievement
        }
