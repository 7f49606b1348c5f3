"""
Loader for student record files.

A missing or unreadable file yields an empty collection, which the insight
generator renders as its placeholder rather than an error.
"""
import json
import logging
from pathlib import Path
from typing import Any, List, Union

logger = logging.getLogger(__name__)


def safe_path(path: Union[str, Path]) -> Path:
    """
    Convert a path string to a Path object and expand user/home.

    Args:
        path: Path string or Path object.

    Returns:
        Path object with expanded user directory.
    """
    return Path(path).expanduser().resolve()


def load_student_records(file_path: Union[str, Path]) -> List[Any]:
    """
    Load a JSON array of student records.

    Args:
        file_path: Path to a JSON file such as students.json.

    Returns:
        List of record dicts in file order; [] if the file is missing,
        unreadable, or does not hold a JSON array.
    """
    path = safe_path(file_path)

    if not path.exists():
        logger.warning(f"Student data file not found: {path}")
        return []

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read student data from {path}: {e}")
        return []

    if not isinstance(data, list):
        logger.warning(f"Expected a JSON array in {path}, got {type(data).__name__}")
        return []

    logger.info(f"Loaded {len(data)} student records from {path}")
    return data
