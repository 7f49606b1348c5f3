"""
Configuration management for student insights.
Loads YAML config (data path, regression line domain, log level).
Also loads environment variables from .env file.
"""
import copy
import math
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "insights.yaml"

env_path = PROJECT_ROOT / ".env"
if env_path.exists():
    load_dotenv(env_path)

DEFAULTS: Dict[str, Any] = {
    'data': {
        'students_path': 'data/students.json',
    },
    'regression_line': {
        'domain_start': 0,
        'domain_end': 100,
        'step': 5,
    },
    'logging': {
        'level': 'INFO',
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration from insights.yaml.

    Args:
        config_path: Explicit config file. Falls back to $STUDENT_INSIGHTS_CONFIG,
            then config/insights.yaml at the project root.

    Returns:
        Dict of settings merged over the built-in defaults.
    """
    explicit = config_path or os.environ.get('STUDENT_INSIGHTS_CONFIG')
    path = Path(explicit).expanduser() if explicit else DEFAULT_CONFIG_PATH

    if not path.exists():
        if explicit:
            raise FileNotFoundError(
                f"Config file not found at {path}. "
                "Copy insights.example.yaml to insights.yaml and configure."
            )
        return copy.deepcopy(DEFAULTS)

    with open(path, 'r') as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    return _merge(DEFAULTS, config)


def get_data_path(config: Dict[str, Any]) -> Path:
    """
    Get the student records file.

    $STUDENT_DATA_PATH wins over the config; relative paths resolve against
    the project root.
    """
    raw = os.environ.get('STUDENT_DATA_PATH') or config.get('data', {}).get('students_path')
    path = Path(raw or DEFAULTS['data']['students_path']).expanduser()
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


def get_line_settings(config: Dict[str, Any]) -> Dict[str, float]:
    """
    Get domain_start, domain_end and step for sampling the regression line.

    Raises:
        ValueError: If a setting is not a finite number
    """
    settings = _merge(DEFAULTS['regression_line'], config.get('regression_line') or {})
    result = {}
    for key in ('domain_start', 'domain_end', 'step'):
        value = settings[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"regression_line.{key} must be a number, got {value!r}")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"regression_line.{key} must be finite, got {value!r}")
        result[key] = value
    return result


def get_log_level(config: Dict[str, Any]) -> str:
    return str(config.get('logging', {}).get('level', 'INFO')).upper()


if __name__ == "__main__":
    # Test configuration loading
    print("Testing configuration...")
    try:
        cfg = load_config()
        print(f"Data path: {get_data_path(cfg)}")
        print(f"Line settings: {get_line_settings(cfg)}")
        print(f"Log level: {get_log_level(cfg)}")
    except Exception as e:
        print(f"Configuration error: {e}")
