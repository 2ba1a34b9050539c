"""
Unit tests for the daily calendar roll-up.
"""

import pytest

from lesson_progress.models.achievement import DailyTotals
from lesson_progress.progress.daily import daily_totals


@pytest.fixture
def logs():
    """Create lesson logs for two students."""
    return [
        {"date": "2024-04-05", "student_id": "S001", "count": "2", "kind": "actual",
         "registered_by": "tutor1"},
        {"date": "2024-04-05", "student_id": "S001", "count": "1", "kind": "planned",
         "registered_by": "admin"},
        {"date": "2024-04-05", "student_id": "S001", "count": "1", "kind": "",
         "registered_by": "planned"},
        {"date": "2024-04-20", "student_id": "S001", "count": "1.5", "kind": "actual",
         "registered_by": "tutor1"},
        {"date": "2024-05-01", "student_id": "S001", "count": "3", "kind": "actual",
         "registered_by": "tutor1"},
        {"date": "2023-04-05", "student_id": "S001", "count": "3", "kind": "actual",
         "registered_by": "tutor1"},
        {"date": "2024-04-05", "student_id": "S002", "count": "4", "kind": "actual",
         "registered_by": "tutor1"},
        {"date": "", "student_id": "S001", "count": "4", "kind": "actual",
         "registered_by": "tutor1"},
    ]


class TestDailyTotals:
    """Test cases for daily_totals()."""

    def test_planned_and_actual_per_day(self, logs):
        """Test counts split by classification."""
        totals = daily_totals(logs, "S001", 2024, 3)

        assert totals["2024-04-05"] == DailyTotals(planned=2, actual=2)
        assert totals["2024-04-20"] == DailyTotals(planned=0, actual=1.5)

    def test_only_requested_month_and_student(self, logs):
        """Test other months, years and students are ignored."""
        totals = daily_totals(logs, "S001", 2024, 3)

        assert set(totals) == {"2024-04-05", "2024-04-20"}

    def test_days_without_logs_absent(self, logs):
        """Test days without logs are not zero-filled."""
        totals = daily_totals(logs, "S001", 2024, 3)

        assert "2024-04-01" not in totals

    def test_empty_month(self, logs):
        """Test a month without logs gives an empty mapping."""
        assert daily_totals(logs, "S001", 2024, 5) == {}

    def test_month_is_zero_based(self):
        """Test month 0 is January and 11 is December."""
        logs = [
            {"date": "2024-01-31", "student_id": "S001", "count": "1", "kind": "actual"},
            {"date": "2024-12-01", "student_id": "S001", "count": "2", "kind": "actual"},
        ]

        assert set(daily_totals(logs, "S001", 2024, 0)) == {"2024-01-31"}
        assert set(daily_totals(logs, "S001", 2024, 11)) == {"2024-12-01"}

    def test_month_four_is_may(self, logs):
        """Test passing 4 selects May, not April."""
        assert set(daily_totals(logs, "S001", 2024, 4)) == {"2024-05-01"}

    def test_unknown_student(self, logs):
        """Test an unknown student gives an empty mapping."""
        assert daily_totals(logs, "S999", 2024, 3) == {}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
