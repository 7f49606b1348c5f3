"""
Statistical Analyzer Module
Pearson correlation, least-squares regression and regression-line sampling.

Both the correlation and regression formulas divide by max(DENOMINATOR_FLOOR, d)
so constant or empty series give 0 instead of NaN or infinity.
"""

import logging
import math
import numbers
from typing import (
    Any, Dict, Iterable, List, Mapping, NamedTuple, Optional, Sequence, Tuple
)

import numpy as np

from .data_aggregator import DataAggregator
from .records import Metric, SeriesPair, coerce_number, to_records

logger = logging.getLogger(__name__)

DENOMINATOR_FLOOR = 1e-9

# Chart value range; sampled line points are clipped to it
VALUE_MIN = 0.0
VALUE_MAX = 100.0


class RegressionModel(NamedTuple):
    """Fitted line y = slope * x + intercept."""

    slope: float
    intercept: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


def _as_array(values: Sequence[Any], n: int) -> np.ndarray:
    return np.array([coerce_number(v) for v in list(values)[:n]], dtype=float)


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def _split_points(points: Any) -> SeriesPair:
    """Accept a SeriesPair, or a sequence of (x, y) tuples or {x, y} dicts."""
    if isinstance(points, SeriesPair):
        return points
    xs, ys = [], []
    for point in ([] if points is None else points):
        if isinstance(point, Mapping):
            point = (point.get('x'), point.get('y'))
        try:
            x, y = point
        except (TypeError, ValueError):
            continue
        xs.append(x)
        ys.append(y)
    return SeriesPair(x=xs, y=ys)


class StatisticalAnalyzer:
    """
    Performs statistical analysis on student metric series.
    """

    def __init__(self, aggregator: Optional[DataAggregator] = None):
        """
        Initialize statistical analyzer.

        Args:
            aggregator: Used to project series out of records (optional)
        """
        self.aggregator = aggregator or DataAggregator()

    def correlation(self, a: Sequence[Any], b: Sequence[Any]) -> float:
        """
        Pearson product-moment correlation.

        Args:
            a: First series
            b: Second series; both are truncated to their common length

        Returns:
            r in [-1, 1]; 0.0 for empty input or when either series is constant
        """
        a = [] if a is None else list(a)
        b = [] if b is None else list(b)
        n = min(len(a), len(b))
        if n == 0:
            return 0.0

        da = _as_array(a, n)
        db = _as_array(b, n)
        da -= da.mean()
        db -= db.mean()

        numerator = float(np.dot(da, db))
        spread = math.sqrt(float(np.dot(da, da)) * float(np.dot(db, db)))
        if spread < DENOMINATOR_FLOOR:
            logger.debug(f"Zero-variance series (n={n}), correlation floored")
        r = numerator / max(DENOMINATOR_FLOOR, spread)
        return max(-1.0, min(1.0, r))

    def fit_linear(self, points: Any) -> RegressionModel:
        """
        Ordinary least squares fit of y on x.

        Args:
            points: SeriesPair, or a sequence of (x, y) points or {x, y}
                dicts. Extra values on the longer side of a SeriesPair are
                ignored; malformed points are skipped.

        Returns:
            RegressionModel; slope 0 and intercept 0 for empty input
        """
        x_values, y_values = _split_points(points)
        size = min(len(x_values), len(y_values))
        x = _as_array(x_values, size)
        y = _as_array(y_values, size)
        n = max(size, 1)

        sum_x = float(x.sum())
        sum_y = float(y.sum())
        sum_xy = float(np.dot(x, y))
        sum_x2 = float(np.dot(x, x))

        denominator = n * sum_x2 - sum_x * sum_x
        if denominator < DENOMINATOR_FLOOR:
            logger.debug(f"Degenerate predictor (n={size}), slope denominator floored")

        slope = (n * sum_xy - sum_x * sum_y) / max(DENOMINATOR_FLOOR, denominator)
        intercept = (sum_y - slope * sum_x) / n
        return RegressionModel(slope=slope, intercept=intercept)

    def sample_line(
        self,
        model: RegressionModel,
        domain_start: float = 0,
        domain_end: float = 100,
        step: float = 5
    ) -> List[Tuple[float, float]]:
        """
        Evaluate a fitted line at regular x steps for plotting.

        Args:
            model: Fitted regression line
            domain_start: First x value
            domain_end: Last x value (inclusive when reached exactly)
            step: Spacing between x values

        Returns:
            List of (x, y) with y clipped to [VALUE_MIN, VALUE_MAX]
        """
        bounds = (domain_start, domain_end, step)
        valid = (
            all(_is_finite_number(v) for v in bounds)
            and step > 0
            and domain_end >= domain_start
            and math.isfinite((domain_end - domain_start) / step)
        )
        if not valid:
            logger.warning(
                f"Invalid line domain start={domain_start} end={domain_end} step={step}, "
                "returning no points"
            )
            return []

        count = int(math.floor((domain_end - domain_start) / step + 1e-9)) + 1
        points = []
        for i in range(count):
            x = domain_start + i * step
            y = min(VALUE_MAX, max(VALUE_MIN, model.predict(x)))
            points.append((x, y))
        return points

    def correlate_with_outcome(
        self,
        records: Optional[Iterable[Any]],
        metrics: Iterable[Metric],
        outcome: Metric = Metric.ASSESSMENT_SCORE
    ) -> Dict[str, float]:
        """
        Correlate each metric with the outcome across records.

        Returns:
            Dict mapping metric name to r, in the order requested
        """
        records = to_records(records)
        outcome_series = self.aggregator.series(records, outcome).tolist()
        return {
            Metric(metric).value: self.correlation(
                self.aggregator.series(records, metric).tolist(), outcome_series
            )
            for metric in metrics
        }

    def regress(
        self,
        records: Optional[Iterable[Any]],
        x_metric: Metric = Metric.ATTENTION,
        y_metric: Metric = Metric.ASSESSMENT_SCORE
    ) -> RegressionModel:
        """Fit y_metric on x_metric across records."""
        return self.fit_linear(self.aggregator.series_pair(records, x_metric, y_metric))
