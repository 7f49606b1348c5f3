import pytest

from student_insights.records import Metric, SeriesPair
from student_insights.statistical_analyzer import (
    DENOMINATOR_FLOOR,
    RegressionModel,
    StatisticalAnalyzer,
)


def test_correlation_of_series_with_itself_is_one(analyzer):
    x = [3, 7, 1, 9, 4]
    assert analyzer.correlation(x, x) == pytest.approx(1.0)


def test_correlation_of_perfectly_inverse_series(analyzer):
    assert analyzer.correlation([1, 2, 3], [30, 20, 10]) == pytest.approx(-1.0)


def test_correlation_with_constant_series_is_zero(analyzer):
    assert analyzer.correlation([1, 5, 2, 8], [50, 50, 50, 50]) == 0.0
    assert analyzer.correlation([4, 4, 4], [4, 4, 4]) == 0.0


def test_correlation_of_empty_series_is_zero(analyzer):
    assert analyzer.correlation([], []) == 0.0
    assert analyzer.correlation([1, 2, 3], []) == 0.0


def test_correlation_is_symmetric(analyzer):
    a = [12, 45, 33, 80, 61, 5]
    b = [20, 41, 39, 70, 75, 18]
    assert analyzer.correlation(a, b) == analyzer.correlation(b, a)
    assert -1.0 <= analyzer.correlation(a, b) <= 1.0


def test_correlation_truncates_to_common_length(analyzer):
    # The trailing 0 in the first series is ignored
    assert analyzer.correlation([1, 2, 3, 0], [2, 4, 6]) == pytest.approx(1.0)


def test_fit_linear_recovers_exact_line(analyzer):
    xs = [0, 10, 25, 40, 90]
    pair = SeriesPair(x=xs, y=[2 * x + 3 for x in xs])

    model = analyzer.fit_linear(pair)

    assert model.slope == pytest.approx(2.0)
    assert model.intercept == pytest.approx(3.0)


def test_fit_linear_accepts_points(analyzer):
    model = analyzer.fit_linear([(1, 5), (2, 7), (3, 9)])
    assert model.slope == pytest.approx(2.0)
    assert model.intercept == pytest.approx(3.0)


def test_fit_linear_accepts_xy_dicts(analyzer):
    model = analyzer.fit_linear([{"x": 0, "y": 3}, {"x": 1, "y": 5}, {"x": 2, "y": 7}])
    assert model.slope == pytest.approx(2.0)
    assert model.intercept == pytest.approx(3.0)


def test_fit_linear_skips_malformed_points(analyzer):
    model = analyzer.fit_linear([(1, 5), None, (2, 7), (3,), 42, (3, 9)])
    assert model.slope == pytest.approx(2.0)
    assert model.intercept == pytest.approx(3.0)


def test_fit_linear_on_empty_input_is_flat_zero_line(analyzer):
    assert analyzer.fit_linear([]) == RegressionModel(slope=0.0, intercept=0.0)
    assert analyzer.fit_linear(SeriesPair(x=[], y=[])) == RegressionModel(0.0, 0.0)


def test_fit_linear_with_constant_predictor_uses_floor(analyzer):
    # n*sum(x^2) - sum(x)^2 is zero, so the slope numerator (also zero) is divided by the floor
    model = analyzer.fit_linear(SeriesPair(x=[5, 5, 5], y=[1, 2, 3]))
    assert model.slope == 0.0
    assert model.intercept == pytest.approx(2.0)
    assert DENOMINATOR_FLOOR == 1e-9


def test_sample_line_default_domain(analyzer):
    points = analyzer.sample_line(RegressionModel(slope=0.5, intercept=10))

    assert len(points) == 21
    assert points[0] == (0, 10.0)
    assert points[-1] == (100, 60.0)
    assert [x for x, _ in points] == list(range(0, 101, 5))


def test_sample_line_clips_out_of_range_values(analyzer):
    points = dict(analyzer.sample_line(RegressionModel(slope=2.0, intercept=-20)))

    assert points[0] == 0.0
    assert points[5] == 0.0
    assert points[30] == 40.0
    assert points[60] == 100.0
    assert points[100] == 100.0


def test_sample_line_is_restartable(analyzer):
    points = analyzer.sample_line(RegressionModel(1.0, 0.0), 0, 20, 10)
    assert list(points) == list(points) == [(0, 0.0), (10, 10.0), (20, 20.0)]


def test_sample_line_invalid_domain_returns_no_points(analyzer):
    model = RegressionModel(1.0, 0.0)
    assert analyzer.sample_line(model, step=0) == []
    assert analyzer.sample_line(model, domain_start=50, domain_end=10) == []


@pytest.mark.parametrize(
    "start, end, step",
    [
        (0, float("nan"), 5),
        (0, float("inf"), 5),
        (float("-inf"), 100, 5),
        (0, 100, float("nan")),
        (0, 100, float("inf")),
        (0, 1e308, 1e-300),
        (0, 100, None),
        ("0", 100, 5),
    ],
)
def test_sample_line_non_finite_domain_returns_no_points(analyzer, start, end, step):
    assert analyzer.sample_line(RegressionModel(1.0, 0.0), start, end, step) == []


def test_correlate_with_outcome(analyzer, students):
    correlations = analyzer.correlate_with_outcome(
        students, [Metric.FOCUS, Metric.RETENTION, Metric.ATTENTION]
    )

    assert list(correlations) == ["focus", "retention", "attention"]
    assert all(r > 0.9 for r in correlations.values())


def test_regress_attention_on_score():
    records = [
        {"attention": 50, "assessment_score": 50},
        {"attention": 100, "assessment_score": 100},
    ]
    model = StatisticalAnalyzer().regress(records)

    assert model.slope == pytest.approx(1.0)
    assert model.intercept == pytest.approx(0.0)
