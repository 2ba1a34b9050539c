"""
File operation utilities.

CSV snapshots are read with pandas; reports are written as JSON.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Optional

import pandas as pd


logger = logging.getLogger(__name__)


def save_json(data: Dict[str, Any], filepath: Path) -> bool:
    """
    Save data to JSON file.

    Args:
        data: Dictionary data to save
        filepath: Path to save the JSON file

    Returns:
        True if save successful, False otherwise
    """
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2, default=str)

        logger.debug(f"Saved JSON file: {filepath}")
        return True

    except Exception as e:
        logger.error(f"Failed to save JSON file {filepath}: {e}", exc_info=True)
        return False


def load_csv(filepath: Path) -> Optional[pd.DataFrame]:
    """
    Load a CSV file with every column as text.

    Empty cells stay empty strings (no NaN), header names are stripped
    and rows whose cells are all blank are dropped.

    Args:
        filepath: Path to the CSV file

    Returns:
        Loaded DataFrame, or None if the file is missing or unreadable

    Examples:
        >>> df = load_csv(Path("data/students.csv"))
        >>> if df is not None:
        ...     print(df.head())
    """
    try:
        if not filepath.exists():
            logger.warning(f"CSV file not found: {filepath}")
            return None

        df = pd.read_csv(
            filepath,
            encoding='utf-8-sig',
            dtype=str,
            keep_default_na=False
        )
        # Short rows still come back as NaN for their missing cells
        df = df.fillna("")
        df.columns = [str(column).strip() for column in df.columns]

        if len(df):
            blank = df.apply(lambda row: all(not str(cell).strip() for cell in row), axis=1)
            df = df[~blank].reset_index(drop=True)

        logger.debug(f"Loaded CSV file: {filepath} ({len(df)} rows)")
        return df

    except pd.errors.EmptyDataError:
        logger.warning(f"CSV file is empty: {filepath}")
        return None

    except Exception as e:
        logger.error(f"Failed to load CSV file {filepath}: {e}", exc_info=True)
        return None


def generate_filename(prefix: str, extension: str) -> str:
    """
    Generate timestamped filename.

    Examples:
        >>> generate_filename("progress_report", "json")
        'progress_report_20240501_103045.json'
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{timestamp}.{extension}"
