"""
Student Insights
Descriptive statistics, attention/score regression and correlation-based
insight sentences for a collection of student records.
"""

from .data_aggregator import DataAggregator
from .insight_generator import InsightGenerator
from .records import Metric, SeriesPair, StudentRecord
from .statistical_analyzer import RegressionModel, StatisticalAnalyzer
from .templates import InsightTemplates

__all__ = [
    'DataAggregator',
    'StatisticalAnalyzer',
    'InsightGenerator',
    'InsightTemplates',
    'Metric',
    'RegressionModel',
    'SeriesPair',
    'StudentRecord',
]
