"""
In-memory record store.

Holds the four collections of one loaded snapshot. The store is passed
explicitly to whoever needs it; mutations are in place and visible to
the next computation immediately (write, then recompute).
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from ..validation.enrollment_validator import EnrollmentValidator
from ..validation.log_validator import LessonLogValidator
from .records import (
    CourseRecord,
    DEFAULT_LOG_KIND,
    EnrollmentRecord,
    LessonLogData,
    StudentRecord,
)
from .result import Result


logger = logging.getLogger(__name__)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class RecordStore:
    """
    Students, courses, enrollments and lesson logs of one snapshot.

    Attributes:
        students: Student records
        courses: Course records
        enrollments: Student-course bindings
        logs: Lesson log entries

    Examples:
        >>> store = RecordStore(students=[...], courses=[...])
        >>> result = store.add_log("2024-04-05", "S001", "C001", 2)
        >>> result.value["log_id"]
        '20240405-S001-1'
    """

    students: List[StudentRecord] = field(default_factory=list)
    courses: List[CourseRecord] = field(default_factory=list)
    enrollments: List[EnrollmentRecord] = field(default_factory=list)
    logs: List[LessonLogData] = field(default_factory=list)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def find_student(self, student_id: str) -> Optional[StudentRecord]:
        return next((s for s in self.students if s.get("student_id") == student_id), None)

    def find_course(self, course_id: str) -> Optional[CourseRecord]:
        return next((c for c in self.courses if c.get("course_id") == course_id), None)

    def find_enrollment(self, student_id: str, course_id: str) -> Optional[EnrollmentRecord]:
        return next(
            (
                e for e in self.enrollments
                if e.get("student_id") == student_id and e.get("course_id") == course_id
            ),
            None
        )

    def enrollments_for_student(self, student_id: str) -> List[EnrollmentRecord]:
        return [e for e in self.enrollments if e.get("student_id") == student_id]

    def logs_on(self, student_id: str, date_str: str) -> List[LessonLogData]:
        """Logs of one student on one day (day detail view)."""
        return [
            log for log in self.logs
            if log.get("student_id") == student_id and log.get("date") == date_str
        ]

    # ------------------------------------------------------------------
    # Lesson logs
    # ------------------------------------------------------------------

    def generate_log_id(self, date_str: str, student_id: str) -> str:
        """
        Next log id for a student on a day.

        Format is YYYYMMDD-<student_id>-<seq>, where seq is one more
        than the highest trailing number among that day's log ids.

        Examples:
            >>> store.generate_log_id("2024-04-05", "S001")
            '20240405-S001-1'
        """
        max_seq = 0
        for log in self.logs_on(student_id, date_str):
            seq = str(log.get("log_id") or "").split("-")[-1]
            if seq.isdigit():
                max_seq = max(max_seq, int(seq))

        return f"{date_str.replace('-', '')}-{student_id}-{max_seq + 1}"

    def add_log(
        self,
        date: str,
        student_id: str,
        course_id: str,
        count: Any,
        kind: str = DEFAULT_LOG_KIND,
        registered_by: str = "admin",
        created_at: Optional[str] = None
    ) -> Result[LessonLogData]:
        """
        Validate and append a lesson log.

        Args:
            date: Lesson date (YYYY-MM-DD)
            student_id: Student identifier
            course_id: Course identifier
            count: Number of sessions (> 0)
            kind: "actual" or "planned"
            registered_by: Registering account id
            created_at: Timestamp (ISO 8601), defaults to now

        Returns:
            Result with the appended log, or failure with validation errors
        """
        candidate = {
            "date": date,
            "student_id": student_id,
            "course_id": course_id,
            "count": count,
            "kind": kind
        }
        validation = LessonLogValidator().validate(candidate)
        if not validation.is_valid:
            logger.warning(f"Rejected lesson log: {validation.get_summary()}")
            return Result.failure(validation.get_summary())
        for warning in validation.warnings:
            logger.warning(warning)

        log: LessonLogData = {
            "log_id": self.generate_log_id(date, student_id),
            "date": date,
            "student_id": student_id,
            "course_id": course_id,
            "count": _as_text(float(count)),
            "registered_by": registered_by,
            "created_at": created_at or datetime.now().isoformat(),
            "kind": (kind or DEFAULT_LOG_KIND).lower()
        }
        self.logs.append(log)

        logger.info(f"Added lesson log {log['log_id']} ({log['kind']}, count={log['count']})")
        return Result.success(log, f"Added lesson log {log['log_id']}")

    def delete_log(self, log_id: str) -> Result[LessonLogData]:
        """Remove a lesson log by id."""
        for index, log in enumerate(self.logs):
            if log.get("log_id") == log_id:
                del self.logs[index]
                logger.info(f"Deleted lesson log {log_id}")
                return Result.success(log, f"Deleted lesson log {log_id}")

        return Result.failure(f"Lesson log not found: {log_id}")

    # ------------------------------------------------------------------
    # Enrollments
    # ------------------------------------------------------------------

    def add_enrollment(
        self,
        student_id: str,
        course_id: str,
        planned_sessions: Any = 0,
        start_date: str = "",
        end_date: str = ""
    ) -> Result[EnrollmentRecord]:
        """
        Bind a student to a course.

        Returns:
            Result with the new enrollment; failure if the pair already
            exists or the data is invalid
        """
        if self.find_enrollment(student_id, course_id) is not None:
            return Result.failure(
                f"Student {student_id} is already enrolled in {course_id}"
            )

        enrollment: EnrollmentRecord = {
            "student_id": student_id,
            "course_id": course_id,
            "planned_sessions": _as_text(planned_sessions) or "0",
            "start_date": start_date or "",
            "end_date": end_date or ""
        }
        validation = EnrollmentValidator().validate(enrollment)
        if not validation.is_valid:
            logger.warning(f"Rejected enrollment: {validation.get_summary()}")
            return Result.failure(validation.get_summary())
        for warning in validation.warnings:
            logger.warning(warning)

        self.enrollments.append(enrollment)
        logger.info(f"Enrolled {student_id} in {course_id}")
        return Result.success(enrollment, f"Enrolled {student_id} in {course_id}")

    def update_planned_sessions(
        self,
        student_id: str,
        course_id: str,
        planned_sessions: Any
    ) -> Result[EnrollmentRecord]:
        """Edit planned_sessions of an existing enrollment in place."""
        enrollment = self.find_enrollment(student_id, course_id)
        if enrollment is None:
            return Result.failure(f"Enrollment not found: {student_id} / {course_id}")

        error = EnrollmentValidator().validate_non_negative_number(
            planned_sessions,
            "planned_sessions"
        )
        if error:
            return Result.failure(error)

        enrollment["planned_sessions"] = _as_text(planned_sessions)
        logger.info(
            f"Updated planned_sessions of {student_id} / {course_id} "
            f"to {enrollment['planned_sessions']}"
        )
        return Result.success(enrollment)
