"""
CSV snapshot loader.

Reads the four published CSV files and builds a complete RecordStore.
The store is only returned once every collection has been read, so the
caller can swap snapshots in one step.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from .models.records import DEFAULT_LOG_KIND
from .models.store import RecordStore
from .utils.file_utils import load_csv


logger = logging.getLogger(__name__)


CSV_FILES: Dict[str, str] = {
    "students": "students.csv",
    "courses": "courses.csv",
    "enrollments": "student_courses.csv",
    "logs": "lesson_logs.csv",
}


def _read_rows(path: Path) -> Optional[List[dict]]:
    df = load_csv(path)
    if df is None:
        return None
    return df.to_dict(orient="records")


def normalize_log_kinds(logs: List[dict], has_kind_column: bool) -> List[dict]:
    """
    Default ``kind`` to "actual" when the source has no kind column.

    When the column exists, blank cells are kept as they are so the
    registered_by fallback of is_planned() still applies.
    """
    if not has_kind_column:
        for log in logs:
            log.setdefault("kind", DEFAULT_LOG_KIND)
    return logs


def load_record_store(data_dir: Union[str, Path]) -> RecordStore:
    """
    Load a RecordStore snapshot from a directory of CSV files.

    Args:
        data_dir: Directory containing students.csv, courses.csv,
            student_courses.csv and lesson_logs.csv

    Returns:
        RecordStore with all four collections; a missing or unreadable
        file yields an empty collection (logged as a warning)

    Examples:
        >>> store = load_record_store("data")
        >>> len(store.students)
        12
    """
    data_dir = Path(data_dir)
    logger.info(f"Loading CSV snapshot from {data_dir}")

    collections: Dict[str, List[dict]] = {}
    has_kind_column = False
    for name, filename in CSV_FILES.items():
        rows = _read_rows(data_dir / filename)
        if rows is None:
            logger.warning(f"{filename} could not be read, using an empty collection")
            rows = []
        elif name == "logs" and rows:
            has_kind_column = "kind" in rows[0]
        collections[name] = rows

    normalize_log_kinds(collections["logs"], has_kind_column)

    store = RecordStore(
        students=collections["students"],
        courses=collections["courses"],
        enrollments=collections["enrollments"],
        logs=collections["logs"]
    )
    logger.info(
        f"Loaded {len(store.students)} students, {len(store.courses)} courses, "
        f"{len(store.enrollments)} enrollments, {len(store.logs)} lesson logs"
    )
    return store
