"""
Enrollment validator.

Validates student-course bindings before they are added to the store.
"""

from typing import Dict, Any

from ..progress.dates import parse_date
from .validators import Validator, ValidationResult


class EnrollmentValidator(Validator):
    """
    Validator for enrollment records.

    Validates:
    - Required fields (student_id, course_id)
    - planned_sessions is a non-negative number (blank means 0)
    - start_date / end_date are YYYY-MM-DD when given

    An inverted span (start after end) is only a warning: apportionment
    swaps the two dates.

    Examples:
        >>> validator = EnrollmentValidator()
        >>> result = validator.validate({
        ...     "student_id": "S001",
        ...     "course_id": "C001",
        ...     "planned_sessions": "20",
        ...     "start_date": "2024-09-30",
        ...     "end_date": "2024-04-01"
        ... })
        >>> result.is_valid, result.has_warnings
        (True, True)
    """

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        """
        Validate enrollment data.

        Args:
            data: Enrollment dictionary

        Returns:
            ValidationResult with errors and warnings
        """
        result = ValidationResult(is_valid=True)

        for error in self.validate_required_fields(data, ["student_id", "course_id"]):
            result.add_error(error)

        if not result.is_valid:
            return result

        error = self.validate_non_negative_number(
            data.get("planned_sessions"),
            "planned_sessions"
        )
        if error:
            result.add_error(error)

        for name in ("start_date", "end_date"):
            value = data.get(name)
            if value:
                error = self.validate_date_format(value, name)
                if error:
                    result.add_error(error)

        start = parse_date(data.get("start_date"))
        end = parse_date(data.get("end_date"))
        if start and end and start > end:
            result.add_warning(
                f"start_date {start} is after end_date {end}; "
                f"the span will be treated as {end} - {start}"
            )
        elif bool(start) != bool(end):
            result.add_warning(
                "Only one of start_date/end_date is set; "
                "planned sessions will not be apportioned by period"
            )

        return result
