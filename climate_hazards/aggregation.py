"""
年度统计模块 (Yearly Aggregation)

Buckets detected events by the calendar year of their start date. The set of
years comes from the observations, not from the events, so years without
any event still appear with zero frequency, intensity and duration.
"""

import math
from typing import Iterable, List, Sequence

import pandas as pd

from .io_utils import ObservationsLike, observations_to_frame
from .models import HazardEvent, YearlyHazardData


def round_half_up(value: float, decimals: int = 1) -> float:
    """Round half up, ties go towards +inf (2.25 -> 2.3, -2.25 -> -2.2).

    ``round()`` uses banker's rounding, which would report 2.2 here.

    >>> round_half_up(2.25)
    2.3
    >>> round_half_up(-2.25)
    -2.2
    """
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def rounded_mean(values: Sequence[float]) -> float:
    """Mean rounded to 1 decimal, 0.0 for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return round_half_up(sum(values) / len(values))


def observed_years(frame: pd.DataFrame) -> List[int]:
    return sorted({d.year for d in frame["date"]})


def aggregate_by_year(
    observations: ObservationsLike,
    events: Iterable[HazardEvent],
) -> List[YearlyHazardData]:
    """
    按年份统计事件频次、平均强度和平均持续时间
    Per-year frequency, mean intensity and mean duration.

    Parameters
    ----------
    observations : sequence of Observation or pd.DataFrame
        Full observation record; defines which years are reported.
    events : iterable of HazardEvent
        Detected events. An event is counted in the year of its
        ``start_date`` even when it ends in the next year.

    Returns
    -------
    yearly : list of YearlyHazardData
        One entry per observed year, ascending.
    """
    frame = observations_to_frame(observations)
    return aggregate_frame(frame, list(events))


def aggregate_frame(
    frame: pd.DataFrame, events: List[HazardEvent]
) -> List[YearlyHazardData]:
    """``aggregate_by_year`` for an already validated observation frame."""
    yearly = []
    for year in observed_years(frame):
        year_events = [e for e in events if e.start_date.year == year]
        yearly.append(
            YearlyHazardData(
                year=int(year),
                frequency=len(year_events),
                intensity=rounded_mean([e.intensity for e in year_events]),
                duration=rounded_mean([e.duration for e in year_events]),
            )
        )
    return yearly
