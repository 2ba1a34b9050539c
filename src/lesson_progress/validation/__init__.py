"""
Record validation.
"""

from .validators import Validator, ValidationResult
from .log_validator import LessonLogValidator
from .enrollment_validator import EnrollmentValidator

__all__ = [
    "Validator",
    "ValidationResult",
    "LessonLogValidator",
    "EnrollmentValidator",
]
