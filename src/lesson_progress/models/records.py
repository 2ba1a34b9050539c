"""
Record models for the four dashboard collections.

Records are kept as plain dictionaries (TypedDict for IDE autocomplete and
static type checking) because they arrive straight from CSV rows, where
every value is a string. The progress engine normalizes values on read.
"""

from datetime import date
from typing import TypedDict, Literal, Union


# Type aliases
LogKind = Literal["actual", "planned"]
DateLike = Union[date, str, None]

VALID_LOG_KINDS = ("actual", "planned")
DEFAULT_LOG_KIND: LogKind = "actual"


class StudentRecord(TypedDict):
    """
    Student master row.

    Attributes:
        student_id: Unique student identifier
        grade: School grade label
        course_group: Course group label (e.g., "理系")
        status: "active", "inactive" or any other free-form string
    """

    student_id: str
    grade: str
    course_group: str
    status: str


class CourseRecord(TypedDict):
    """
    Course master row.

    Attributes:
        course_id: Unique course identifier
        course_name: Display name
        target_grade: Intended grade
        standard_sessions: Standard number of sessions for the course
        note: Free-form note
    """

    course_id: str
    course_name: str
    target_grade: str
    standard_sessions: str
    note: str


class EnrollmentRecord(TypedDict):
    """
    Student-course binding with a planned session count.

    Attributes:
        student_id: Student identifier
        course_id: Course identifier
        planned_sessions: Planned sessions over the whole span (>= 0)
        start_date: Span start (YYYY-MM-DD) or empty
        end_date: Span end (YYYY-MM-DD) or empty

    Examples:
        >>> enrollment: EnrollmentRecord = {
        ...     "student_id": "S001",
        ...     "course_id": "C001",
        ...     "planned_sessions": "20",
        ...     "start_date": "2024-04-01",
        ...     "end_date": "2024-09-30"
        ... }
    """

    student_id: str
    course_id: str
    planned_sessions: str
    start_date: str
    end_date: str


class LessonLogData(TypedDict):
    """
    Lesson log entry (TypedDict for type safety).

    Attributes:
        log_id: Unique identifier (YYYYMMDD-<student_id>-<seq>)
        date: Lesson date (YYYY-MM-DD format)
        student_id: Student identifier
        course_id: Course identifier
        count: Number of sessions (> 0)
        registered_by: Account that registered the entry
        created_at: Registration timestamp (ISO 8601)
        kind: "actual" or "planned"

    Examples:
        >>> log: LessonLogData = {
        ...     "log_id": "20240405-S001-1",
        ...     "date": "2024-04-05",
        ...     "student_id": "S001",
        ...     "course_id": "C001",
        ...     "count": "2",
        ...     "registered_by": "tutor1",
        ...     "created_at": "2024-04-05T10:00:00",
        ...     "kind": "actual"
        ... }
    """

    log_id: str
    date: str
    student_id: str
    course_id: str
    count: str
    registered_by: str
    created_at: str
    kind: str
