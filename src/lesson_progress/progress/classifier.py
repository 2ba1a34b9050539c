"""
Lesson log classification (planned vs. actual).

A log is planned when its ``kind`` says so. Older data has no usable
``kind`` and marks planned entries through ``registered_by`` instead,
so that field is checked as a fallback.
"""

from collections.abc import Mapping
from typing import Any


PLANNED_KIND = "planned"
PLANNED_REGISTRANTS = ("plan", "planned")


def _lowered(value: Any) -> str:
    if value is None:
        return ""
    return str(value).lower()


def is_planned(log: Any) -> bool:
    """
    Check whether a lesson log is a planned (not yet held) session.

    Args:
        log: Lesson log mapping

    Returns:
        True if ``kind`` is "planned", or ``registered_by`` is "plan" or
        "planned" (both case-insensitive); False otherwise, including for
        malformed input

    Examples:
        >>> is_planned({"kind": "planned", "registered_by": "tutor1"})
        True
        >>> is_planned({"kind": "", "registered_by": "Plan"})
        True
        >>> is_planned({"kind": "actual", "registered_by": "tutor1"})
        False
    """
    if not isinstance(log, Mapping):
        return False

    if _lowered(log.get("kind")) == PLANNED_KIND:
        return True

    return _lowered(log.get("registered_by")) in PLANNED_REGISTRANTS


def is_actual(log: Any) -> bool:
    """Inverse of is_planned()."""
    return not is_planned(log)
