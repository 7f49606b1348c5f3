"""
Templates for formatting statistical insights into readable text.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional

EMPTY_PLACEHOLDER = 'Load data to see insights generated from correlations and distributions.'

# Checked highest first with strict '>', so a boundary value lands in the lower band
STRENGTH_BANDS = [
    (0.7, 'a strong'),
    (0.4, 'a moderate'),
    (0.2, 'a weak'),
]
NO_CORRELATION = 'little to no'


def format_fixed(value: float, places: int) -> str:
    """
    Fixed-point text with exact ties rounded away from zero.

    Matches the dashboard's number formatting, e.g. 36.25 -> '36.3' where
    f'{36.25:.1f}' would give '36.2'.
    """
    if not math.isfinite(value):
        return f"{value:.{places}f}"
    if value == 0:
        value = 0.0
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


class InsightTemplates:
    """
    Templates for formatting statistical insights.
    """

    @staticmethod
    def strength(r: float) -> str:
        """
        Qualitative label for a correlation coefficient.

        Args:
            r: Pearson r (sign is ignored)

        Returns:
            'a strong', 'a moderate', 'a weak' or 'little to no'
        """
        magnitude = abs(r)
        for threshold, label in STRENGTH_BANDS:
            if magnitude > threshold:
                return label
        return NO_CORRELATION

    @staticmethod
    def format_correlation_insight(skill: str, r: float, verb: str = 'shows') -> str:
        """
        Sentence describing how one skill relates to performance.

        Args:
            skill: Display name of the skill (e.g. 'Focus')
            r: Correlation with assessment score
            verb: 'shows' or 'has'

        Returns:
            e.g. "Focus shows a moderate correlation with performance (r=0.52)."
        """
        return (
            f"{skill} {verb} {InsightTemplates.strength(r)} "
            f"correlation with performance (r={format_fixed(r, 2)})."
        )

    @staticmethod
    def format_engagement_insight(average_minutes: float) -> str:
        return f"Average engagement time is {format_fixed(average_minutes, 1)} minutes."

    @staticmethod
    def format_summary_insights(
        averages: Optional[Dict[str, float]],
        insights: List[str]
    ) -> str:
        """
        Plain-text overview of averages followed by insight bullets.

        Args:
            averages: Output of DataAggregator.averages (None when no records)
            insights: Output of InsightGenerator.generate

        Returns:
            Formatted summary text
        """
        lines = ["Student Insights", "=" * 50, ""]

        lines.append("OVERVIEW:")
        overview = [
            ('Avg Score', 'assessment_score', '/100'),
            ('Avg Attention', 'attention', '/100'),
            ('Avg Focus', 'focus', '/100'),
            ('Avg Retention', 'retention', '/100'),
            ('Avg Comprehension', 'comprehension', '/100'),
            ('Avg Engagement', 'engagement_time', 'm'),
        ]
        for title, key, suffix in overview:
            value = format_fixed(averages[key], 1) if averages else '—'
            lines.append(f"  {title}: {value}{suffix}")
        lines.append("")

        lines.append("INSIGHTS:")
        for sentence in insights:
            lines.append(f"  • {sentence}")
        lines.append("")

        return "\n".join(lines)

    @staticmethod
    def format_json_insights(report: Dict[str, Any]) -> Dict[str, Any]:
        """
        Shape a report for JSON consumers (points become {x, y} objects).

        Args:
            report: Output of InsightGenerator.generate_report

        Returns:
            JSON-serialisable dict
        """
        regression = report.get('regression')
        profile = report.get('profile')
        return {
            'summary': report.get('summary'),
            'skill_comparison': report.get('skill_comparison', []),
            'correlations': report.get('correlations', {}),
            'regression': dict(regression._asdict()) if regression is not None else None,
            'regression_line': [
                {'x': x, 'y': y} for x, y in report.get('regression_line', [])
            ],
            'scatter': [{'x': x, 'y': y} for x, y in report.get('scatter', [])],
            'profile': (
                {
                    'student_id': profile['student_id'],
                    'name': profile['name'],
                    'axes': [{'subject': s, 'value': v} for s, v in profile['axes']],
                }
                if profile else None
            ),
            'insights': report.get('insights', []),
        }
