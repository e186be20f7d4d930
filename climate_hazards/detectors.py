"""
灾害事件检测模块 (Hazard Detection Module)

Every hazard kind is one ``HazardSpec`` entry in ``HAZARD_SPECS``: how to
pull the daily metric from the observation frame, which sample the
percentile threshold is taken from, the comparison direction, the minimum run
length and the intensity formula. Detection itself is the same for all
kinds (threshold, then run extraction, then scoring), so adding a hazard kind
means adding an entry rather than a new code path.

检测参数 (Detection Parameters):
-------------------------------
================  ==========================  =========  =====  =========
kind              metric                      threshold  side   min days
================  ==========================  =========  =====  =========
heatwave          daily temperature           p95        above  3
drought           30-day trailing precip sum  p10        below  30
heavy_rainfall    daily precipitation         p95 (>0)   above  1
cold_wave         daily temperature           p5         below  3
================  ==========================  =========  =====  =========
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

import numpy as np
import pandas as pd

from . import config
from .events import Direction, Run, extract_runs
from .io_utils import ObservationsLike, observations_to_frame
from .models import HazardEvent
from .thresholds import nearest_rank_percentile, trailing_rolling_sum


class HazardKind(str, Enum):
    HEATWAVE = "heatwave"
    DROUGHT = "drought"
    HEAVY_RAINFALL = "heavy_rainfall"
    COLD_WAVE = "cold_wave"


DEFAULT_HAZARD_KIND = HazardKind.HEATWAVE


@dataclass(frozen=True)
class HazardSpec:
    """Detection parameters for one hazard kind.

    Attributes
    ----------
    metric : callable
        Observation frame -> daily metric array scanned for runs.
    sample : callable
        Metric array -> values the percentile threshold is taken from.
    percentile : float
        Nearest-rank percentile as a fraction.
    direction : Direction
        Side of the threshold that counts as a hazard day.
    min_duration : int
        Minimum run length in days.
    intensity : callable
        (run values, threshold) -> raw score, clamped afterwards.
    temperature_fields : callable, optional
        Run values -> extra ``HazardEvent`` temperature fields.
    """

    metric: Callable[[pd.DataFrame], np.ndarray]
    sample: Callable[[np.ndarray], np.ndarray]
    percentile: float
    direction: Direction
    min_duration: int
    intensity: Callable[[np.ndarray, float], float]
    temperature_fields: Optional[Callable[[np.ndarray], Dict[str, float]]] = None


# ============================================================================
# 指标与强度公式 (Metrics and Intensity Formulas)
# ============================================================================

def _temperature(frame: pd.DataFrame) -> np.ndarray:
    return frame["temperature"].to_numpy(dtype=float)


def _precipitation(frame: pd.DataFrame) -> np.ndarray:
    return frame["precipitation"].to_numpy(dtype=float)


def _rolling_precipitation(frame: pd.DataFrame) -> np.ndarray:
    return trailing_rolling_sum(_precipitation(frame), config.DROUGHT_ROLLING_WINDOW)


def _whole_series(metric: np.ndarray) -> np.ndarray:
    return metric


def _wet_days(metric: np.ndarray) -> np.ndarray:
    return metric[metric > 0]


def _heat_intensity(values: np.ndarray, threshold: float) -> float:
    return (np.max(values) - threshold) / 2


def _drought_intensity(values: np.ndarray, threshold: float) -> float:
    return (threshold - np.min(values)) / threshold * 10


def _rainfall_intensity(values: np.ndarray, threshold: float) -> float:
    return np.max(values) / threshold * 5


def _cold_intensity(values: np.ndarray, threshold: float) -> float:
    return (threshold - np.min(values)) / 5


def _heat_fields(values: np.ndarray) -> Dict[str, float]:
    return {
        "max_temperature": float(np.max(values)),
        "avg_temperature": float(np.mean(values)),
    }


def _cold_fields(values: np.ndarray) -> Dict[str, float]:
    return {
        "min_temperature": float(np.min(values)),
        "avg_temperature": float(np.mean(values)),
    }


HAZARD_SPECS: Dict[HazardKind, HazardSpec] = {
    HazardKind.HEATWAVE: HazardSpec(
        metric=_temperature,
        sample=_whole_series,
        percentile=config.HEATWAVE_PERCENTILE,
        direction=Direction.ABOVE,
        min_duration=config.HEATWAVE_MIN_DURATION,
        intensity=_heat_intensity,
        temperature_fields=_heat_fields,
    ),
    HazardKind.DROUGHT: HazardSpec(
        metric=_rolling_precipitation,
        sample=_whole_series,
        percentile=config.DROUGHT_PERCENTILE,
        direction=Direction.BELOW,
        min_duration=config.DROUGHT_MIN_DURATION,
        intensity=_drought_intensity,
    ),
    HazardKind.HEAVY_RAINFALL: HazardSpec(
        metric=_precipitation,
        sample=_wet_days,
        percentile=config.HEAVY_RAINFALL_PERCENTILE,
        direction=Direction.ABOVE,
        min_duration=config.HEAVY_RAINFALL_MIN_DURATION,
        intensity=_rainfall_intensity,
    ),
    HazardKind.COLD_WAVE: HazardSpec(
        metric=_temperature,
        sample=_whole_series,
        percentile=config.COLD_WAVE_PERCENTILE,
        direction=Direction.BELOW,
        min_duration=config.COLD_WAVE_MIN_DURATION,
        intensity=_cold_intensity,
        temperature_fields=_cold_fields,
    ),
}


# ============================================================================
# 检测函数 (Detection Functions)
# ============================================================================

def resolve_hazard_kind(kind: Union[HazardKind, str, None]) -> HazardKind:
    """Map a hazard kind name to ``HazardKind``; unknown names mean heatwave.

    >>> resolve_hazard_kind("drought")
    <HazardKind.DROUGHT: 'drought'>
    >>> resolve_hazard_kind("tornado")
    <HazardKind.HEATWAVE: 'heatwave'>
    """
    try:
        return HazardKind(kind)
    except ValueError:
        return DEFAULT_HAZARD_KIND


def clamp_intensity(score: float) -> float:
    return float(min(config.INTENSITY_MAX, max(config.INTENSITY_MIN, score)))


def compute_threshold(metric: np.ndarray, spec: HazardSpec) -> Optional[float]:
    """Percentile threshold for ``spec``, or None when its sample is empty."""
    sample = spec.sample(metric)
    if sample.size == 0:
        return None
    return nearest_rank_percentile(sample, spec.percentile)


def _build_event(
    run: Run, dates: List, threshold: float, spec: HazardSpec
) -> HazardEvent:
    values = np.asarray(run.values, dtype=float)
    extra = spec.temperature_fields(values) if spec.temperature_fields else {}
    return HazardEvent(
        start_date=dates[run.start_index],
        end_date=dates[run.end_index],
        duration=run.length,
        intensity=clamp_intensity(spec.intensity(values, threshold)),
        **extra,
    )


def detect_events(
    observations: ObservationsLike,
    hazard_kind: Union[HazardKind, str] = DEFAULT_HAZARD_KIND,
) -> List[HazardEvent]:
    """
    检测指定类型的灾害事件
    Detect hazard events of one kind in an observation series.

    Parameters
    ----------
    observations : sequence of Observation or pd.DataFrame
        Daily observations, strictly ascending by date.
    hazard_kind : HazardKind or str, default="heatwave"
        Unknown names fall back to heatwave.

    Returns
    -------
    events : list of HazardEvent
        Closed runs in date order. Empty when the threshold sample is
        empty (no observations, or no wet days for heavy rainfall).

    Examples
    --------
    >>> from climate_hazards.utils import generate_synthetic_observations
    >>> from climate_hazards.models import Region
    >>> obs = generate_synthetic_observations(Region("Phoenix, AZ", 33.4, -112.1), 2000, 2004)
    >>> events = detect_events(obs, "heatwave")
    >>> all(1 <= e.intensity <= 10 for e in events)
    True
    """
    frame = observations_to_frame(observations)
    return detect_in_frame(frame, resolve_hazard_kind(hazard_kind))


def detect_in_frame(frame: pd.DataFrame, kind: HazardKind) -> List[HazardEvent]:
    """``detect_events`` for a frame already returned by ``observations_to_frame``."""
    spec = HAZARD_SPECS[kind]
    metric = spec.metric(frame)

    threshold = compute_threshold(metric, spec)
    if threshold is None:
        return []

    dates = frame["date"].tolist()
    runs = extract_runs(metric, threshold, spec.direction, spec.min_duration)
    return [_build_event(run, dates, threshold, spec) for run in runs]
