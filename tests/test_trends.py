"""
Tests for the yearly frequency trend estimator.
"""

import pytest

from climate_hazards.trends import (
    TrendEstimate,
    classify_trend,
    estimate_trend,
    linear_trend,
    percent_change,
)


def test_decreasing_trend_scenario():
    trend = estimate_trend([10, 10, 10, 10, 10, 4])
    assert trend.percent_change == pytest.approx(-60.0)
    assert trend.direction == "decreasing"
    assert trend.magnitude == -60.0


def test_increasing_trend():
    trend = estimate_trend([2, 3, 3, 4, 5])
    assert trend.magnitude == 150.0
    assert trend.direction == "increasing"
    assert trend.slope > 0


def test_zero_first_value_substituted_by_one():
    assert percent_change([0, 2, 5]) == pytest.approx(400.0)


def test_zero_last_value_substituted_by_one():
    assert percent_change([4, 2, 0]) == pytest.approx(-75.0)


def test_all_zero_frequencies_are_stable():
    trend = estimate_trend([0, 0, 0, 0])
    assert trend == TrendEstimate(slope=0.0, percent_change=0.0,
                                  direction="stable", magnitude=0.0)


def test_empty_series():
    trend = estimate_trend([])
    assert trend.slope == 0.0
    assert trend.percent_change == 0.0
    assert trend.direction == "stable"


@pytest.mark.parametrize("change, expected", [
    (5.0, "stable"),
    (-5.0, "stable"),
    (0.0, "stable"),
    (5.1, "increasing"),
    (-5.1, "decreasing"),
])
def test_stable_band(change, expected):
    assert classify_trend(change) == expected


def test_small_change_is_stable():
    trend = estimate_trend([25, 30, 20, 26])
    assert trend.magnitude == 4.0
    assert trend.direction == "stable"


def test_linear_trend_uses_index_not_year():
    assert linear_trend([0, 1, 2, 3]) == pytest.approx(1.0)
    assert linear_trend([6, 4, 2]) == pytest.approx(-2.0)


def test_linear_trend_needs_two_points():
    assert linear_trend([7]) == 0.0
    assert linear_trend([]) == 0.0


def test_magnitude_is_signed_and_rounded():
    trend = estimate_trend([3, 1, 1, 2])
    # (2 - 3) / 3 * 100 = -33.33...
    assert trend.magnitude == -33.3
    assert trend.direction == "decreasing"
