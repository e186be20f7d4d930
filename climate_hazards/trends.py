"""Trend estimation over yearly event frequencies.

趋势估计：
- OLS 线性斜率（以年序号为自变量）
- 首末年频次百分比变化及方向判定
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from scipy import stats

from .aggregation import round_half_up
from .config import TREND_STABLE_BAND


@dataclass(frozen=True)
class TrendEstimate:
    slope: float
    percent_change: float
    direction: str
    magnitude: float


def linear_trend(y: Sequence[float]) -> float:
    """OLS slope of ``y`` against its index 0..n-1; 0.0 below two points."""
    y = np.asarray(y, dtype=float)
    if y.size < 2:
        return 0.0
    slope, _, _, _, _ = stats.linregress(np.arange(y.size), y)
    return float(slope)


def percent_change(frequencies: Sequence[float]) -> float:
    """Percent change from the first to the last value.

    A first or last value of 0 is taken as 1, so an empty record or a
    record starting at zero still yields a finite number.
    """
    first = frequencies[0] if len(frequencies) else 0
    last = frequencies[-1] if len(frequencies) else 0
    first = first or 1
    last = last or 1
    return (last - first) / first * 100


def classify_trend(change: float) -> str:
    if abs(change) <= TREND_STABLE_BAND:
        return "stable"
    return "increasing" if change > 0 else "decreasing"


def estimate_trend(frequencies: Sequence[float]) -> TrendEstimate:
    """
    Fit the yearly frequency trend.

    Parameters
    ----------
    frequencies : sequence of numbers
        Yearly event counts in ascending year order.

    Returns
    -------
    TrendEstimate
        ``slope`` from OLS on the year index (diagnostic only),
        ``percent_change`` first-to-last, ``direction`` in
        {"increasing", "decreasing", "stable"} and ``magnitude`` (the percent
        change rounded to 1 decimal, signed).

    Examples
    --------
    >>> estimate_trend([10, 10, 10, 10, 10, 4]).magnitude
    -60.0
    """
    frequencies = list(frequencies)
    change = percent_change(frequencies)
    return TrendEstimate(
        slope=linear_trend(frequencies),
        percent_change=float(change),
        direction=classify_trend(change),
        magnitude=round_half_up(change),
    )
