"""
Achievement aggregation.

Combines apportioned planned sessions (from enrollments) with actual
sessions (from lesson logs) per student and per course. Results keep the
order of the input collections; sorting is left to the presentation layer.
"""

import logging
from datetime import date
from typing import Iterable, List, Optional

from ..models.achievement import (
    CourseAchievement,
    EnrollmentProgress,
    StudentAchievement,
)
from ..models.records import (
    CourseRecord,
    DateLike,
    EnrollmentRecord,
    LessonLogData,
    StudentRecord,
)
from .apportion import apportion
from .classifier import is_planned
from .dates import in_window, normalize_window, parse_date, to_number


logger = logging.getLogger(__name__)


def _planned_total(
    enrollments: Iterable[EnrollmentRecord],
    window_start: Optional[date],
    window_end: Optional[date]
) -> float:
    return sum(
        apportion(
            enrollment.get("planned_sessions"),
            enrollment.get("start_date"),
            enrollment.get("end_date"),
            window_start,
            window_end
        )
        for enrollment in enrollments
    )


def _actual_total(
    logs: Iterable[LessonLogData],
    window_start: Optional[date],
    window_end: Optional[date]
) -> float:
    total = 0.0
    for log in logs:
        if is_planned(log):
            continue
        log_date = parse_date(log.get("date"))
        if log_date is None:
            continue
        if not in_window(log_date, window_start, window_end):
            continue
        total += to_number(log.get("count"))
    return total


def compute_student_achievement(
    students: Iterable[StudentRecord],
    enrollments: Iterable[EnrollmentRecord],
    logs: Iterable[LessonLogData],
    window_start: DateLike = None,
    window_end: DateLike = None
) -> List[StudentAchievement]:
    """
    Planned vs. actual sessions per student.

    Args:
        students: Student records (output order follows this collection)
        enrollments: Enrollment records
        logs: Lesson log records
        window_start: Window start (date-like), None for unbounded
        window_end: Window end (date-like), None for unbounded

    Returns:
        One StudentAchievement per student

    Examples:
        >>> rows = compute_student_achievement(students, enrollments, logs,
        ...                                    "2024-04-01", "2024-04-30")
        >>> [(r.student["student_id"], r.rate) for r in rows]
    """
    start, end = normalize_window(window_start, window_end)
    enrollments = list(enrollments)
    logs = list(logs)

    results = []
    for student in students:
        student_id = student.get("student_id")
        planned = _planned_total(
            (e for e in enrollments if e.get("student_id") == student_id),
            start,
            end
        )
        actual = _actual_total(
            (log for log in logs if log.get("student_id") == student_id),
            start,
            end
        )
        results.append(StudentAchievement(student=student, planned=planned, actual=actual))

    logger.debug(f"Computed achievement for {len(results)} students ({start} - {end})")
    return results


def compute_course_achievement(
    courses: Iterable[CourseRecord],
    enrollments: Iterable[EnrollmentRecord],
    logs: Iterable[LessonLogData],
    window_start: DateLike = None,
    window_end: DateLike = None
) -> List[CourseAchievement]:
    """
    Planned vs. actual sessions per course.

    Same arithmetic as compute_student_achievement(), grouped by course,
    plus the number of distinct students enrolled in each course.
    """
    start, end = normalize_window(window_start, window_end)
    enrollments = list(enrollments)
    logs = list(logs)

    results = []
    for course in courses:
        course_id = course.get("course_id")
        course_enrollments = [e for e in enrollments if e.get("course_id") == course_id]
        student_count = len({e.get("student_id") for e in course_enrollments})
        planned = _planned_total(course_enrollments, start, end)
        actual = _actual_total(
            (log for log in logs if log.get("course_id") == course_id),
            start,
            end
        )
        results.append(
            CourseAchievement(
                course=course,
                student_count=student_count,
                planned=planned,
                actual=actual
            )
        )

    logger.debug(f"Computed achievement for {len(results)} courses ({start} - {end})")
    return results


def compute_enrollment_progress(
    student_id: str,
    courses: Iterable[CourseRecord],
    enrollments: Iterable[EnrollmentRecord],
    logs: Iterable[LessonLogData]
) -> List[EnrollmentProgress]:
    """
    All-time progress of each of a student's enrollments.

    Planned is the raw planned_sessions value. Actual counts every
    non-planned log of the student for that course, whatever its date.
    """
    course_names = {c.get("course_id"): c.get("course_name", "") for c in courses}
    logs = list(logs)

    results = []
    for enrollment in enrollments:
        if enrollment.get("student_id") != student_id:
            continue
        course_id = enrollment.get("course_id")
        actual = sum(
            to_number(log.get("count"))
            for log in logs
            if log.get("student_id") == student_id
            and log.get("course_id") == course_id
            and not is_planned(log)
        )
        results.append(
            EnrollmentProgress(
                enrollment=enrollment,
                course_name=course_names.get(course_id) or "",
                planned=to_number(enrollment.get("planned_sessions")),
                actual=actual
            )
        )
    return results
