"""
Unit tests for validation layer.
"""

import pytest

from lesson_progress.validation.validators import ValidationResult
from lesson_progress.validation.log_validator import LessonLogValidator
from lesson_progress.validation.enrollment_validator import EnrollmentValidator


class TestValidationResult:
    """Test cases for ValidationResult."""

    def test_valid_result(self):
        """Test creating a valid result."""
        result = ValidationResult(is_valid=True)

        assert result.is_valid
        assert not result.has_errors
        assert not result.has_warnings

    def test_add_error(self):
        """Test adding errors."""
        result = ValidationResult(is_valid=True)
        result.add_error("First error").add_error("Second error")

        assert not result.is_valid
        assert len(result.errors) == 2

    def test_add_warning(self):
        """Test warnings don't affect validity."""
        result = ValidationResult(is_valid=True)
        result.add_warning("Warning message")

        assert result.is_valid
        assert result.has_warnings

    def test_get_summary_valid(self):
        """Test summary for valid result."""
        assert ValidationResult(is_valid=True).get_summary() == "Validation passed"

    def test_get_summary_with_errors(self):
        """Test summary with errors and warnings."""
        result = ValidationResult(is_valid=True)
        result.add_error("Error 1").add_warning("Warning 1")

        summary = result.get_summary()

        assert "Errors (1)" in summary
        assert "Error 1" in summary
        assert "Warnings (1)" in summary


class TestLessonLogValidator:
    """Test cases for LessonLogValidator."""

    @pytest.fixture
    def validator(self):
        """Create validator instance."""
        return LessonLogValidator()

    @pytest.fixture
    def valid_log(self):
        """Create valid lesson log data."""
        return {
            "date": "2024-04-05",
            "student_id": "S001",
            "course_id": "C001",
            "count": "2",
            "kind": "actual"
        }

    def test_valid_log(self, validator, valid_log):
        """Test validation of valid log."""
        result = validator.validate(valid_log)

        assert result.is_valid
        assert not result.has_warnings

    def test_missing_required_field(self, validator, valid_log):
        """Test missing required field."""
        del valid_log["student_id"]

        result = validator.validate(valid_log)

        assert not result.is_valid
        assert any("student_id" in error for error in result.errors)

    def test_invalid_date_format(self, validator, valid_log):
        """Test invalid date format."""
        valid_log["date"] = "2024/04/05"

        result = validator.validate(valid_log)

        assert any("date format" in error.lower() for error in result.errors)

    def test_impossible_date(self, validator, valid_log):
        """Test a well-formed but impossible date."""
        valid_log["date"] = "2024-02-30"

        assert not validator.validate(valid_log).is_valid

    @pytest.mark.parametrize("count", ["0", -2, "abc"])
    def test_invalid_count(self, validator, valid_log, count):
        """Test count must be positive."""
        valid_log["count"] = count

        result = validator.validate(valid_log)

        assert any("count" in error for error in result.errors)

    def test_count_unusually_high(self, validator, valid_log):
        """Test a high count is only a warning."""
        valid_log["count"] = 12

        result = validator.validate(valid_log)

        assert result.is_valid
        assert result.has_warnings

    def test_invalid_kind(self, validator, valid_log):
        """Test unknown kind is rejected."""
        valid_log["kind"] = "maybe"

        result = validator.validate(valid_log)

        assert any("kind" in error.lower() for error in result.errors)

    def test_blank_kind_allowed(self, validator, valid_log):
        """Test blank kind is accepted (defaults later)."""
        valid_log["kind"] = ""

        assert validator.validate(valid_log).is_valid


class TestEnrollmentValidator:
    """Test cases for EnrollmentValidator."""

    @pytest.fixture
    def validator(self):
        """Create validator instance."""
        return EnrollmentValidator()

    @pytest.fixture
    def valid_enrollment(self):
        """Create valid enrollment data."""
        return {
            "student_id": "S001",
            "course_id": "C001",
            "planned_sessions": "20",
            "start_date": "2024-04-01",
            "end_date": "2024-09-30"
        }

    def test_valid_enrollment(self, validator, valid_enrollment):
        result = validator.validate(valid_enrollment)

        assert result.is_valid
        assert not result.has_warnings

    def test_missing_course(self, validator, valid_enrollment):
        valid_enrollment["course_id"] = ""

        assert not validator.validate(valid_enrollment).is_valid

    @pytest.mark.parametrize("planned", ["-1", "abc", "nan", "inf", "1e999"])
    def test_invalid_planned_sessions(self, validator, valid_enrollment, planned):
        valid_enrollment["planned_sessions"] = planned

        result = validator.validate(valid_enrollment)

        assert any("planned_sessions" in error for error in result.errors)

    def test_blank_planned_sessions_allowed(self, validator, valid_enrollment):
        valid_enrollment["planned_sessions"] = ""

        assert validator.validate(valid_enrollment).is_valid

    def test_invalid_date(self, validator, valid_enrollment):
        valid_enrollment["end_date"] = "2024/09/30"

        result = validator.validate(valid_enrollment)

        assert any("end_date" in error for error in result.errors)

    def test_inverted_span_warns(self, validator, valid_enrollment):
        valid_enrollment["start_date"], valid_enrollment["end_date"] = "2024-09-30", "2024-04-01"

        result = validator.validate(valid_enrollment)

        assert result.is_valid
        assert any("after end_date" in warning for warning in result.warnings)

    def test_single_bound_warns(self, validator, valid_enrollment):
        valid_enrollment["end_date"] = ""

        result = validator.validate(valid_enrollment)

        assert result.is_valid
        assert result.has_warnings


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
