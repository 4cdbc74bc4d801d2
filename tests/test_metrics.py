import math

import pytest

from swr_tester.analytics.metrics import Results, summarize


def test_summarize_counts_and_statistics():
    res = summarize([3.0, 1.0, 2.0, 0.0])
    assert res.successes == 3
    assert res.failures == 1
    assert res.total == 4
    assert res.success_rate == 75.0
    assert res.tv_minimum == 0.0
    assert res.tv_maximum == 3.0
    assert res.tv_average == pytest.approx(1.5)


def test_median_is_conventional_for_even_counts():
    assert summarize([4.0, 1.0, 3.0, 2.0]).tv_median == pytest.approx(2.5)


def test_median_for_odd_counts():
    assert summarize([5.0, 1.0, 3.0]).tv_median == 3.0


def test_singleton():
    res = summarize([42.0])
    assert res.tv_median == res.tv_minimum == res.tv_maximum == res.tv_average == 42.0
    assert res.success_rate == 100.0


def test_non_positive_values_are_failures():
    res = summarize([-1.0, 0.0, 1e-9])
    assert (res.successes, res.failures) == (1, 2)
    assert res.success_rate == pytest.approx(100.0 / 3.0)


def test_empty_input_does_not_index_out_of_range():
    res = summarize([])
    assert (res.successes, res.failures, res.success_rate) == (0, 0, 0.0)
    assert math.isnan(res.tv_median)
    assert math.isnan(res.tv_average)


def test_results_are_immutable():
    res = summarize([1.0])
    with pytest.raises(AttributeError):
        res.successes = 5
    assert isinstance(res, Results)
    assert set(res.as_dict()) == {
        "successes", "failures", "success_rate",
        "tv_median", "tv_minimum", "tv_maximum", "tv_average",
    }
