"""
Data Aggregator Module
Projects numeric series out of student records and computes per-skill averages.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

import pandas as pd

from .records import Metric, SeriesPair, metric_value, record_field, to_records

logger = logging.getLogger(__name__)

# Skills shown on the skill-vs-assessment chart and the radar profile, in display order
SKILL_AXES = [Metric.ATTENTION, Metric.FOCUS, Metric.RETENTION, Metric.COMPREHENSION]


class DataAggregator:
    """
    Aggregates student records for analysis.
    """

    def series(self, records: Optional[Iterable[Any]], metric: Metric) -> pd.Series:
        """
        Project one metric out of the records.

        Args:
            records: Student records (dicts or StudentRecord)
            metric: Metric to select

        Returns:
            Float Series in record order; missing or non-numeric values are 0.0
        """
        values = [metric_value(record, metric) for record in to_records(records)]
        return pd.Series(values, dtype='float64', name=Metric(metric).value)

    def series_pair(
        self,
        records: Optional[Iterable[Any]],
        x_metric: Metric,
        y_metric: Metric
    ) -> SeriesPair:
        """Index-aligned (x, y) projection of two metrics."""
        records = to_records(records)
        return SeriesPair(
            x=self.series(records, x_metric).tolist(),
            y=self.series(records, y_metric).tolist(),
        )

    def mean(self, records: Optional[Iterable[Any]], metric: Metric) -> float:
        """
        Arithmetic mean of a metric across records.

        Args:
            records: Student records, possibly empty
            metric: Metric to average

        Returns:
            Mean value, or exactly 0.0 when there are no records
        """
        values = self.series(records, metric)
        if values.empty:
            return 0.0
        return float(values.mean())

    def averages(self, records: Optional[Iterable[Any]]) -> Optional[Dict[str, float]]:
        """
        Means of every numeric metric, keyed by metric name.

        Returns None for an empty collection so the caller can show a placeholder.
        """
        records = to_records(records)
        if not records:
            return None
        return {metric.value: self.mean(records, metric) for metric in Metric}

    def skill_comparison(self, records: Optional[Iterable[Any]]) -> List[Dict[str, Any]]:
        """
        Average of each skill next to the average assessment score.

        Returns:
            One row per skill with 'skill', 'average' and 'score'
        """
        records = to_records(records)
        if not records:
            return []
        score = self.mean(records, Metric.ASSESSMENT_SCORE)
        return [
            {'skill': skill.label, 'average': self.mean(records, skill), 'score': score}
            for skill in SKILL_AXES
        ]

    def attention_scatter(self, records: Optional[Iterable[Any]]) -> List[Tuple[float, float]]:
        """(attention, assessment_score) per record."""
        pair = self.series_pair(records, Metric.ATTENTION, Metric.ASSESSMENT_SCORE)
        return list(zip(pair.x, pair.y))

    def student_profile(
        self,
        records: Optional[Iterable[Any]],
        student_id: Any = None
    ) -> Optional[Dict[str, Any]]:
        """
        Radar-chart profile for one student.

        Args:
            records: Student records
            student_id: Student to select; falls back to the first record when
                None or not found

        Returns:
            Dict with student_id, name and axes [(label, value), ...], or None
            when there are no records
        """
        records = to_records(records)
        if not records:
            return None

        selected = None
        if student_id is not None:
            selected = next(
                (r for r in records if record_field(r, 'student_id') == student_id),
                None
            )
            if selected is None:
                logger.debug(f"Student {student_id} not found, using first record")
        if selected is None:
            selected = records[0]

        return {
            'student_id': record_field(selected, 'student_id'),
            'name': record_field(selected, 'name', ''),
            'axes': [(skill.label, metric_value(selected, skill)) for skill in SKILL_AXES],
        }
