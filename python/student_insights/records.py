"""
Student record model and typed metric access.

Records arrive either as StudentRecord instances or as plain dicts using the
wire field names (e.g. 'class', 'assessment_score'). Every numeric read goes
through metric_value() so a malformed record only degrades to 0.
"""

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Mapping, NamedTuple, Optional

import numpy as np
import pandas as pd


class Metric(str, Enum):
    """Numeric fields of a student record."""

    COMPREHENSION = 'comprehension'
    ATTENTION = 'attention'
    FOCUS = 'focus'
    RETENTION = 'retention'
    ASSESSMENT_SCORE = 'assessment_score'
    ENGAGEMENT_TIME = 'engagement_time'

    @property
    def label(self) -> str:
        return self.value.replace('_', ' ').title()


@dataclass(frozen=True)
class StudentRecord:
    """
    One student's metric bundle.

    Skill metrics and assessment_score are conventionally in [0, 100];
    engagement_time is minutes.
    """

    student_id: Any = None
    name: str = ''
    class_name: str = ''
    comprehension: Any = 0.0
    attention: Any = 0.0
    focus: Any = 0.0
    retention: Any = 0.0
    assessment_score: Any = 0.0
    engagement_time: Any = 0.0
    persona: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'StudentRecord':
        """
        Build a record from a wire-format dict.

        Args:
            data: Dict keyed by wire field names ('class' rather than 'class_name')

        Returns:
            StudentRecord with unknown keys ignored and missing metrics left as 0
        """
        kwargs = {
            'student_id': data.get('student_id'),
            'name': data.get('name', ''),
            'class_name': data.get('class', data.get('class_name', '')),
            'persona': data.get('persona'),
        }
        for metric in Metric:
            if metric.value in data:
                kwargs[metric.value] = data[metric.value]
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {
            'student_id': self.student_id,
            'name': self.name,
            'class': self.class_name,
            **{metric.value: getattr(self, metric.value) for metric in Metric},
            'persona': self.persona,
        }


class SeriesPair(NamedTuple):
    """Index-aligned predictor (x) and outcome (y) series."""

    x: List[float]
    y: List[float]


def _raw_field(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def coerce_number(value: Any) -> float:
    """
    Convert a raw metric value to a finite float, 0.0 when that is not possible.

    Numeric strings are parsed; booleans, NaN, infinities and anything
    non-scalar count as missing.
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        return 0.0
    if isinstance(value, numbers.Real):
        number = float(value)
    elif isinstance(value, str):
        number = pd.to_numeric(value.strip(), errors='coerce')
        if pd.isna(number):
            return 0.0
        number = float(number)
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


def metric_value(record: Any, metric: Metric) -> float:
    """Read one numeric metric off a record (dict or object)."""
    return coerce_number(_raw_field(record, Metric(metric).value))


def record_field(record: Any, field: str, default: Any = None) -> Any:
    """Read a non-numeric field ('student_id', 'name', 'class', 'persona')."""
    if field == 'class' and not isinstance(record, Mapping):
        field = 'class_name'
    value = _raw_field(record, field)
    return default if value is None else value


def to_records(rows: Optional[Iterable[Any]]) -> list:
    """Materialise an input collection; None is treated as no records."""
    if rows is None:
        return []
    return list(rows)
