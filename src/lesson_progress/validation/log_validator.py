"""
Lesson log validator.

Validates a lesson log before it is appended to the record store.
"""

from typing import Dict, Any

from ..models.records import VALID_LOG_KINDS
from .validators import Validator, ValidationResult


class LessonLogValidator(Validator):
    """
    Validator for lesson log entries.

    Validates:
    - Required fields
    - Date format
    - Business rules (count, kind)

    Examples:
        >>> validator = LessonLogValidator()
        >>> log = {
        ...     "date": "2024-04-05",
        ...     "student_id": "S001",
        ...     "course_id": "C001",
        ...     "count": 2,
        ...     "kind": "actual"
        ... }
        >>> validator.validate(log).is_valid
        True
    """

    # Business rule constraints
    MAX_COUNT_PER_DAY = 10  # sessions

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        """
        Validate lesson log data.

        Args:
            data: Lesson log dictionary

        Returns:
            ValidationResult with errors and warnings
        """
        result = ValidationResult(is_valid=True)

        required_fields = ["date", "student_id", "course_id", "count"]
        for error in self.validate_required_fields(data, required_fields):
            result.add_error(error)

        if not result.is_valid:
            return result

        error = self.validate_date_format(data["date"], "date")
        if error:
            result.add_error(error)

        error = self.validate_positive_number(data["count"], "count")
        if error:
            result.add_error(error)
        elif float(data["count"]) > self.MAX_COUNT_PER_DAY:
            result.add_warning(
                f"Count unusually high: {data['count']} sessions "
                f"(maximum recommended: {self.MAX_COUNT_PER_DAY})"
            )

        kind = str(data.get("kind") or "").lower()
        if kind and kind not in VALID_LOG_KINDS:
            result.add_error(
                f"Invalid kind: {data['kind']} "
                f"(must be one of: {', '.join(VALID_LOG_KINDS)})"
            )

        return result
