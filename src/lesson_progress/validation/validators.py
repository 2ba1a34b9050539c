"""
Validation framework with Strategy pattern.

This module provides:
- Abstract Validator interface
- ValidationResult for consistent validation reporting
- Field checks shared by the record validators
"""

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..progress.dates import parse_date, to_number


@dataclass
class ValidationResult:
    """
    Result of record validation.

    Attributes:
        is_valid: Whether validation passed
        errors: List of error messages
        warnings: List of warning messages (non-fatal)
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> 'ValidationResult':
        """
        Add an error message.

        Returns:
            Self for method chaining
        """
        self.errors.append(message)
        self.is_valid = False
        return self

    def add_warning(self, message: str) -> 'ValidationResult':
        """
        Add a warning message.

        Returns:
            Self for method chaining
        """
        self.warnings.append(message)
        return self

    @property
    def has_errors(self) -> bool:
        """Check if there are errors."""
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        """Check if there are warnings."""
        return len(self.warnings) > 0

    def get_summary(self) -> str:
        """
        Get validation summary.

        Returns:
            Human-readable summary of validation results
        """
        if self.is_valid and not self.has_warnings:
            return "Validation passed"

        parts = []

        if self.has_errors:
            parts.append(f"Errors ({len(self.errors)}):")
            parts.extend(f"  - {error}" for error in self.errors)

        if self.has_warnings:
            parts.append(f"Warnings ({len(self.warnings)}):")
            parts.extend(f"  - {warning}" for warning in self.warnings)

        return "\n".join(parts)


class Validator(ABC):
    """
    Abstract base class for record validators.

    Subclasses implement validate() for one record type and reuse the
    field checks below, each of which returns an error message or None.
    """

    @abstractmethod
    def validate(self, data: Any) -> ValidationResult:
        """
        Validate a record.

        Args:
            data: Record to validate

        Returns:
            ValidationResult with errors and warnings
        """
        pass

    def validate_required_fields(
        self,
        data: dict,
        required_fields: List[str]
    ) -> List[str]:
        """
        Validate that required fields exist and are not blank.

        Returns:
            List of error messages for missing fields
        """
        errors = []
        for name in required_fields:
            value = data.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                errors.append(f"Missing required field: {name}")
        return errors

    def validate_date_format(
        self,
        date_str: Any,
        field_name: str = "date"
    ) -> Optional[str]:
        """
        Validate date format (YYYY-MM-DD) and that it is a real date.

        Returns:
            Error message if invalid, None if valid
        """
        pattern = r'^\d{4}-\d{2}-\d{2}$'
        if not isinstance(date_str, str) or not re.match(pattern, date_str):
            return f"Invalid {field_name} format: {date_str} (expected YYYY-MM-DD)"
        if parse_date(date_str) is None:
            return f"Invalid {field_name}: {date_str} is not a calendar date"
        return None

    def validate_positive_number(
        self,
        value: Any,
        field_name: str
    ) -> Optional[str]:
        """
        Validate that value is (or parses to) a positive number.

        Returns:
            Error message if invalid, None if valid
        """
        if to_number(value) <= 0:
            return f"{field_name} must be a positive number, got {value!r}"
        return None

    def validate_non_negative_number(
        self,
        value: Any,
        field_name: str
    ) -> Optional[str]:
        """
        Validate that value parses to a number >= 0.

        Blank values are accepted (they count as 0).

        Returns:
            Error message if invalid, None if valid
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        try:
            number = float(value)
        except (TypeError, ValueError):
            return f"{field_name} must be a number, got {value!r}"
        if not math.isfinite(number):
            return f"{field_name} must be a finite number, got {value!r}"
        if number < 0:
            return f"{field_name} must not be negative, got {value!r}"
        return None
