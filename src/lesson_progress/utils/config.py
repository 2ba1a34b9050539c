"""
Configuration management with environment variables.

This module provides centralized configuration management
with validation and type safety.
"""

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv


class Config:
    """
    Application configuration manager.

    Loads configuration from environment variables (and a .env file if
    present) and provides validated access to configuration values.

    Attributes:
        data_dir: Directory holding the four CSV files
        output_dir: Directory for reports and logs
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        timeline_unit: Default timeline bucket (day, week, month)

    Examples:
        >>> config = Config()
        >>> if config.validate():
        ...     print(f"Reading CSV files from: {config.data_dir}")
    """

    VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    VALID_TIMELINE_UNITS = ["day", "week", "month"]

    def __init__(self, env_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration by loading environment variables.

        Args:
            env_file: Explicit .env path (default: search upwards for .env)
        """
        # Load .env file if it exists
        load_dotenv(env_file)

        self._data_dir = Path(os.getenv("PROGRESS_DATA_DIR", "data"))
        self._output_dir = Path(os.getenv("OUTPUT_DIR", "output"))
        self._log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self._log_file = os.getenv("LOG_FILE") or None
        self._timeline_unit = os.getenv("PROGRESS_TIMELINE_UNIT", "week").lower()

    @property
    def data_dir(self) -> Path:
        """Get CSV data directory path."""
        return self._data_dir

    @property
    def output_dir(self) -> Path:
        """Get output directory path."""
        return self._output_dir

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self._log_level

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path, or None for console-only logging."""
        return self._log_file

    @property
    def timeline_unit(self) -> str:
        """Get default timeline bucket unit."""
        return self._timeline_unit

    def validate(self) -> bool:
        """
        Validate configuration values.

        Returns:
            True if all configuration is valid

        Raises:
            ValueError: If validation fails
        """
        errors = []

        if not str(self._data_dir).strip():
            errors.append("PROGRESS_DATA_DIR is required")

        if self._log_level not in self.VALID_LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL must be one of: {', '.join(self.VALID_LOG_LEVELS)}"
            )

        if self._timeline_unit not in self.VALID_TIMELINE_UNITS:
            errors.append(
                f"PROGRESS_TIMELINE_UNIT must be one of: "
                f"{', '.join(self.VALID_TIMELINE_UNITS)}"
            )

        if errors:
            error_msg = "Configuration validation failed:\n  - " + "\n  - ".join(errors)
            raise ValueError(error_msg)

        return True

    def create_output_directories(self):
        """Create output directories if they don't exist."""
        directories = [
            self.output_dir / "reports",
            self.output_dir / "logs",
        ]

        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)


# Singleton instance
config = Config()
