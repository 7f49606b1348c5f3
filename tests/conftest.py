"""Test fixtures"""
import pytest

from student_insights import DataAggregator, InsightGenerator, StatisticalAnalyzer


@pytest.fixture
def aggregator() -> DataAggregator:
    return DataAggregator()


@pytest.fixture
def analyzer() -> StatisticalAnalyzer:
    return StatisticalAnalyzer()


@pytest.fixture
def generator() -> InsightGenerator:
    return InsightGenerator()


@pytest.fixture
def students() -> list:
    """Small class where every skill rises with the score."""
    return [
        {"student_id": 1, "name": "Ava", "class": "7A", "comprehension": 80, "attention": 70,
         "focus": 60, "retention": 75, "assessment_score": 78, "engagement_time": 40},
        {"student_id": 2, "name": "Liam", "class": "7A", "comprehension": 60, "attention": 50,
         "focus": 45, "retention": 55, "assessment_score": 58, "engagement_time": 30},
        {"student_id": 3, "name": "Noah", "class": "7B", "comprehension": 40, "attention": 30,
         "focus": 35, "retention": 40, "assessment_score": 37, "engagement_time": 20,
         "persona": "Distracted Learners"},
        {"student_id": 4, "name": "Mia", "class": "7B", "comprehension": 90, "attention": 95,
         "focus": 88, "retention": 92, "assessment_score": 96, "engagement_time": 55},
    ]
