"""
Tests for the per-hazard detectors and the dispatch table.
"""

import functools
import operator
from datetime import date, timedelta

import pytest

from climate_hazards.detectors import (
    HAZARD_SPECS,
    HazardKind,
    clamp_intensity,
    compute_threshold,
    detect_events,
    resolve_hazard_kind,
)
from climate_hazards.events import Direction
from climate_hazards.io_utils import observations_to_frame

START = date(2000, 1, 1)


def day(i):
    return START + timedelta(days=i)


# ============================================================================
# 调度表 (Dispatch table)
# ============================================================================

def test_every_kind_has_a_spec():
    assert set(HAZARD_SPECS) == set(HazardKind)


@pytest.mark.parametrize("kind, percentile, direction, min_duration", [
    (HazardKind.HEATWAVE, 0.95, Direction.ABOVE, 3),
    (HazardKind.DROUGHT, 0.10, Direction.BELOW, 30),
    (HazardKind.HEAVY_RAINFALL, 0.95, Direction.ABOVE, 1),
    (HazardKind.COLD_WAVE, 0.05, Direction.BELOW, 3),
])
def test_spec_parameters(kind, percentile, direction, min_duration):
    spec = HAZARD_SPECS[kind]
    assert spec.percentile == percentile
    assert spec.direction is direction
    assert spec.min_duration == min_duration


def test_resolve_hazard_kind():
    assert resolve_hazard_kind("cold_wave") is HazardKind.COLD_WAVE
    assert resolve_hazard_kind(HazardKind.DROUGHT) is HazardKind.DROUGHT
    assert resolve_hazard_kind("tornado") is HazardKind.HEATWAVE
    assert resolve_hazard_kind("") is HazardKind.HEATWAVE
    assert resolve_hazard_kind(None) is HazardKind.HEATWAVE


@pytest.mark.parametrize("score, expected", [(-3, 1.0), (0.5, 1.0), (4.2, 4.2), (50, 10.0)])
def test_clamp_intensity(score, expected):
    assert clamp_intensity(score) == expected


# ============================================================================
# 热浪 (Heatwave)
# ============================================================================

def test_heatwave_scenario(make_observations):
    temps = [30, 31, 32, 33, 34] + [20] * 95
    events = detect_events(make_observations(temperature=temps), "heatwave")

    # sorted[floor(100 * 0.95)] == 30, so the run is 31..34
    assert len(events) == 1
    event = events[0]
    assert event.start_date == day(1)
    assert event.end_date == day(4)
    assert event.duration == 4
    assert event.intensity == pytest.approx(max(1, min(10, (34 - 30) / 2)))
    assert event.max_temperature == 34.0
    assert event.avg_temperature == pytest.approx(32.5)
    assert event.min_temperature is None


def test_heatwave_needs_three_days(make_observations):
    temps = [20] * 10 + [40, 40] + [20] * 88
    assert detect_events(make_observations(temperature=temps), "heatwave") == []


def test_heatwave_intensity_is_clamped_to_ten(make_observations):
    temps = [20] * 10 + [60, 70, 65] + [20] * 87
    events = detect_events(make_observations(temperature=temps), "heatwave")
    assert [e.intensity for e in events] == [10.0]


def test_unknown_kind_detects_heatwaves(make_observations):
    obs = make_observations(temperature=[30, 31, 32, 33, 34] + [20] * 95)
    assert detect_events(obs, "hurricane") == detect_events(obs, "heatwave")


# ============================================================================
# 干旱 (Drought)
# ============================================================================

def _drought_precipitation(close_early):
    # Day 0 is very wet so the shrinking windows at the start stay high;
    # a single dry day lowers the 30-day sum to 290 for the following 30 days.
    precip = [1000.0] + [10.0] * 399
    precip[100] = 0.0
    if close_early:
        precip[129] = 20.0
    return precip


def test_drought_thirty_days_below_threshold(make_observations):
    obs = make_observations(precipitation=_drought_precipitation(close_early=False))

    frame = observations_to_frame(obs)
    spec = HAZARD_SPECS[HazardKind.DROUGHT]
    assert compute_threshold(spec.metric(frame), spec) == 300.0

    events = detect_events(obs, "drought")
    assert len(events) == 1
    assert events[0].start_date == day(100)
    assert events[0].end_date == day(129)
    assert events[0].duration == 30
    # (300 - 290) / 300 * 10 is below the floor of the scale
    assert events[0].intensity == 1.0
    assert events[0].avg_temperature is None


def test_drought_twenty_nine_days_is_not_an_event(make_observations):
    obs = make_observations(precipitation=_drought_precipitation(close_early=True))
    assert detect_events(obs, "drought") == []


def test_drought_fractional_rainfall(make_observations):
    # 0.1 mm drizzle with one dry day: windows covering the dry day sum to
    # 29 * 0.1, every other full window to 30 * 0.1, bit for bit
    precip = [100.0] + [0.1] * 399
    precip[100] = 0.0
    obs = make_observations(precipitation=precip)

    frame = observations_to_frame(obs)
    spec = HAZARD_SPECS[HazardKind.DROUGHT]
    rolling = spec.metric(frame)
    full_window = functools.reduce(operator.add, [0.1] * 30, 0.0)
    dry_window = functools.reduce(operator.add, [0.1] * 29, 0.0)
    assert set(rolling[30:100].tolist()) == {full_window}
    assert set(rolling[100:130].tolist()) == {dry_window}
    assert set(rolling[130:].tolist()) == {full_window}
    # 30 dry windows sort first, so sorted index 40 is a full window
    assert compute_threshold(rolling, spec) == full_window

    events = detect_events(obs, "drought")
    assert len(events) == 1
    assert events[0].start_date == day(100)
    assert events[0].end_date == day(129)
    assert events[0].duration == 30
    assert events[0].intensity == 1.0


def test_drought_intensity_formula(make_observations):
    # Long dry spell: the rolling sum falls to zero
    precip = [1000.0] + [10.0] * 399
    for i in range(100, 160):
        precip[i] = 0.0
    events = detect_events(make_observations(precipitation=precip), "drought")
    assert len(events) == 1
    # threshold > 0 and min rolling sum == 0 -> (t - 0) / t * 10
    assert events[0].intensity == 10.0


# ============================================================================
# 强降水 (Heavy rainfall)
# ============================================================================

def _rain_series():
    precip = [1.0] * 200
    for i in range(50, 60):
        precip[i] = 5.0
    precip[20] = 50.0
    for i in range(195, 200):
        precip[i] = 60.0
    return precip


def test_heavy_rainfall_trailing_run_is_not_reported(make_observations):
    events = detect_events(make_observations(precipitation=_rain_series()), "heavy_rainfall")

    # threshold is 5.0; day 20 is a closed one-day event, the last five
    # days are an open run at the end of the record and are dropped
    assert len(events) == 1
    assert events[0].start_date == day(20)
    assert events[0].end_date == day(20)
    assert events[0].duration == 1
    assert events[0].intensity == 10.0


def test_heavy_rainfall_threshold_uses_wet_days_only(make_observations):
    precip = [0.0] * 90 + list(range(1, 11))
    frame = observations_to_frame(make_observations(precipitation=precip))
    spec = HAZARD_SPECS[HazardKind.HEAVY_RAINFALL]

    # wet days are 1..10; with the dry days included the threshold would be 6
    assert compute_threshold(spec.metric(frame), spec) == 10.0


def test_heavy_rainfall_without_wet_days_returns_no_events(make_observations):
    obs = make_observations(precipitation=[0.0] * 50)
    assert detect_events(obs, "heavy_rainfall") == []


def test_heavy_rainfall_intensity_formula(make_observations):
    precip = [1.0] * 100
    precip[10] = 3.0
    precip[30] = 4.0
    precip[40] = 2.0
    precip[41] = 2.0
    precip[60] = 2.0
    precip[70] = 2.0
    events = detect_events(make_observations(precipitation=precip), "heavy_rainfall")
    # sorted[95] == 2.0: events on days 10 and 30, scored max / 2 * 5
    assert [e.start_date for e in events] == [day(10), day(30)]
    assert [e.intensity for e in events] == [7.5, 10.0]


# ============================================================================
# 寒潮 (Cold wave)
# ============================================================================

def test_cold_wave(make_observations):
    temps = [20.0] * 100
    temps[10:13] = [-10.0, -12.0, -11.0]
    temps[50:52] = [0.0, 0.0]
    events = detect_events(make_observations(temperature=temps), "cold_wave")

    assert len(events) == 1
    event = events[0]
    assert event.start_date == day(10)
    assert event.duration == 3
    assert event.intensity == pytest.approx((20 - (-12)) / 5)
    assert event.min_temperature == -12.0
    assert event.avg_temperature == pytest.approx(-11.0)
    assert event.max_temperature is None


# ============================================================================
# 通用性质 (General properties)
# ============================================================================

@pytest.mark.parametrize("kind", list(HazardKind))
def test_events_lie_within_observation_span(synthetic_observations, kind):
    events = detect_events(synthetic_observations, kind)
    first = synthetic_observations[0].date
    last = synthetic_observations[-1].date
    for event in events:
        assert first <= event.start_date <= event.end_date <= last
        assert event.duration == (event.end_date - event.start_date).days + 1
        assert 1.0 <= event.intensity <= 10.0


@pytest.mark.parametrize("kind", list(HazardKind))
def test_empty_observations_give_no_events(kind):
    assert detect_events([], kind) == []


def test_dataframe_input(make_observations):
    obs = make_observations(temperature=[30, 31, 32, 33, 34] + [20] * 95)
    frame = observations_to_frame(obs)
    assert detect_events(frame, "heatwave") == detect_events(obs, "heatwave")
