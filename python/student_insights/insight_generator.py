"""
Insight Generator Module
Orchestrates aggregation, statistical analysis, and insight formatting.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from .data_aggregator import DataAggregator
from .records import Metric, to_records
from .statistical_analyzer import StatisticalAnalyzer
from .templates import EMPTY_PLACEHOLDER, InsightTemplates

logger = logging.getLogger(__name__)

# (metric, verb) per correlation sentence; output order is fixed
CORRELATION_SENTENCES = [
    (Metric.FOCUS, 'shows'),
    (Metric.RETENTION, 'shows'),
    (Metric.ATTENTION, 'has'),
]


class InsightGenerator:
    """
    Main class for generating insights from student records.
    """

    def __init__(
        self,
        aggregator: Optional[DataAggregator] = None,
        analyzer: Optional[StatisticalAnalyzer] = None,
        line_settings: Optional[Dict[str, float]] = None
    ):
        """
        Initialize insight generator.

        Args:
            aggregator: DataAggregator (optional)
            analyzer: StatisticalAnalyzer (optional, shares the aggregator)
            line_settings: domain_start/domain_end/step for the regression line
        """
        self.aggregator = aggregator or DataAggregator()
        self.analyzer = analyzer or StatisticalAnalyzer(self.aggregator)
        self.templates = InsightTemplates()
        self.line_settings = dict(line_settings or {})

    def generate(self, records: Optional[Iterable[Any]]) -> List[str]:
        """
        Render the insight sentences for a record collection.

        Args:
            records: Full (unfiltered) student collection

        Returns:
            [placeholder] when empty, otherwise focus, retention, attention
            and engagement sentences in that order
        """
        records = to_records(records)
        if not records:
            return [EMPTY_PLACEHOLDER]

        correlations = self.analyzer.correlate_with_outcome(
            records, [metric for metric, _ in CORRELATION_SENTENCES]
        )
        sentences = [
            self.templates.format_correlation_insight(metric.label, correlations[metric.value], verb)
            for metric, verb in CORRELATION_SENTENCES
        ]
        sentences.append(
            self.templates.format_engagement_insight(
                self.aggregator.mean(records, Metric.ENGAGEMENT_TIME)
            )
        )
        logger.debug(f"Generated {len(sentences)} insights from {len(records)} records")
        return sentences

    def generate_report(
        self,
        records: Optional[Iterable[Any]],
        student_id: Any = None
    ) -> Dict[str, Any]:
        """
        Generate every dashboard panel from one record collection.

        Args:
            records: Full student collection
            student_id: Student for the radar profile (defaults to the first)

        Returns:
            Dict with summary, skill_comparison, correlations, regression,
            regression_line, scatter, profile and insights
        """
        records = to_records(records)
        regression = self.analyzer.regress(records)

        return {
            'summary': self.aggregator.averages(records),
            'skill_comparison': self.aggregator.skill_comparison(records),
            'correlations': self.analyzer.correlate_with_outcome(
                records, [metric for metric, _ in CORRELATION_SENTENCES]
            ),
            'regression': regression,
            'regression_line': self.analyzer.sample_line(regression, **self.line_settings),
            'scatter': self.aggregator.attention_scatter(records),
            'profile': self.aggregator.student_profile(records, student_id),
            'insights': self.generate(records),
        }

    def format_insights_text(self, records: Optional[Iterable[Any]]) -> str:
        """
        Format averages and insights as readable text.

        Args:
            records: Full student collection

        Returns:
            Formatted text string
        """
        records = to_records(records)
        return self.templates.format_summary_insights(
            self.aggregator.averages(records), self.generate(records)
        )

    def format_insights_json(self, report: Dict[str, Any]) -> Dict[str, Any]:
        """
        Format a report as structured JSON.

        Args:
            report: Output of generate_report

        Returns:
            JSON-serialisable dict
        """
        return self.templates.format_json_insights(report)
