"""
Progress computation engine.

Pure functions over plain record collections: log classification,
date-range apportionment, achievement aggregation, timeline buckets
and the daily calendar roll-up.
"""

from .classifier import is_actual, is_planned
from .apportion import apportion
from .aggregator import (
    compute_course_achievement,
    compute_enrollment_progress,
    compute_student_achievement,
)
from .timeline import TimelineUnit, bucketize
from .daily import daily_totals

__all__ = [
    "is_actual",
    "is_planned",
    "apportion",
    "compute_course_achievement",
    "compute_enrollment_progress",
    "compute_student_achievement",
    "TimelineUnit",
    "bucketize",
    "daily_totals",
]
