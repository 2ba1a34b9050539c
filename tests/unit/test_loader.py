"""
Unit tests for the CSV snapshot loader.
"""

import pytest

from lesson_progress.loader import load_record_store
from lesson_progress.progress.classifier import is_planned


STUDENTS_CSV = (
    "student_id,grade,course_group,status\n"
    "S001,高1,理系,active\n"
    "S002,高2,,inactive\n"
    ",,,\n"
)
COURSES_CSV = (
    " course_id , course_name ,target_grade,standard_sessions,note\n"
    'C001,数学IA,高1,30,"基礎, 応用"\n'
)
ENROLLMENTS_CSV = (
    "student_id,course_id,planned_sessions,start_date,end_date\n"
    "S001,C001,20,2024-04-01,2024-09-30\n"
    "S002,C001,,,\n"
)
LOGS_WITH_KIND_CSV = (
    "log_id,date,student_id,course_id,count,registered_by,created_at,kind\n"
    "20240405-S001-1,2024-04-05,S001,C001,2,tutor1,2024-04-05T10:00:00,actual\n"
    "20240406-S001-1,2024-04-06,S001,C001,1,plan,2024-04-05T10:00:00,\n"
)
LOGS_WITHOUT_KIND_CSV = (
    "log_id,date,student_id,course_id,count,registered_by,created_at\n"
    "20240405-S001-1,2024-04-05,S001,C001,2,tutor1,2024-04-05T10:00:00\n"
    "20240406-S001-1,2024-04-06,S001,C001,1,planned,2024-04-05T10:00:00\n"
)


@pytest.fixture
def data_dir(tmp_path):
    """Create a directory with all four CSV files."""
    (tmp_path / "students.csv").write_text(STUDENTS_CSV, encoding="utf-8")
    (tmp_path / "courses.csv").write_text(COURSES_CSV, encoding="utf-8")
    (tmp_path / "student_courses.csv").write_text(ENROLLMENTS_CSV, encoding="utf-8")
    (tmp_path / "lesson_logs.csv").write_text(LOGS_WITH_KIND_CSV, encoding="utf-8")
    return tmp_path


class TestLoadRecordStore:
    """Test cases for load_record_store()."""

    def test_loads_all_collections(self, data_dir):
        """Test every file becomes a collection of text records."""
        store = load_record_store(data_dir)

        assert len(store.students) == 2  # blank row dropped
        assert len(store.courses) == 1
        assert len(store.enrollments) == 2
        assert len(store.logs) == 2
        assert store.students[0]["student_id"] == "S001"
        assert store.enrollments[0]["planned_sessions"] == "20"

    def test_blank_cells_are_empty_strings(self, data_dir):
        """Test empty cells are not NaN."""
        store = load_record_store(data_dir)

        assert store.students[1]["course_group"] == ""
        assert store.enrollments[1]["start_date"] == ""

    def test_header_whitespace_and_quotes(self, data_dir):
        """Test header names are stripped and quoted cells kept whole."""
        course = load_record_store(data_dir).courses[0]

        assert course["course_id"] == "C001"
        assert course["note"] == "基礎, 応用"

    def test_existing_kind_column_is_kept(self, data_dir):
        """Test blank kind stays blank so the fallback still works."""
        logs = load_record_store(data_dir).logs

        assert logs[0]["kind"] == "actual"
        assert logs[1]["kind"] == ""
        assert is_planned(logs[1])

    def test_missing_kind_column_defaults_to_actual(self, data_dir):
        """Test logs without a kind column get kind=actual."""
        (data_dir / "lesson_logs.csv").write_text(LOGS_WITHOUT_KIND_CSV, encoding="utf-8")

        logs = load_record_store(data_dir).logs

        assert [log["kind"] for log in logs] == ["actual", "actual"]
        assert not is_planned(logs[0])
        assert is_planned(logs[1])  # registered_by fallback

    def test_missing_file_gives_empty_collection(self, data_dir):
        """Test a missing file does not abort the load."""
        (data_dir / "courses.csv").unlink()

        store = load_record_store(data_dir)

        assert store.courses == []
        assert len(store.students) == 2

    def test_empty_directory(self, tmp_path):
        """Test an empty directory gives an empty store."""
        store = load_record_store(tmp_path)

        assert store.students == []
        assert store.logs == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
