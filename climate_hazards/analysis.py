"""
灾害分析主流程 (Hazard Analysis Orchestrator)

observations -> threshold -> events -> yearly buckets -> trend -> report

``analyze`` keeps no state between calls and is deterministic, so it can be
re-run whenever the input changes and run in parallel across regions or
hazard kinds.
"""

from typing import Union

from .aggregation import aggregate_frame, rounded_mean
from .detectors import HazardKind, detect_in_frame, resolve_hazard_kind
from .io_utils import ObservationsLike, observations_to_frame
from .models import HazardAnalysis
from .trends import estimate_trend


def analyze(
    observations: ObservationsLike,
    hazard_kind: Union[HazardKind, str] = HazardKind.HEATWAVE,
) -> HazardAnalysis:
    """
    分析指定灾害类型的事件统计与趋势
    Detect one hazard kind and summarise its events and trend.

    Parameters
    ----------
    observations : sequence of Observation or pd.DataFrame
        Daily observations, strictly ascending by date.
    hazard_kind : HazardKind or str, default="heatwave"
        One of heatwave, drought, heavy_rainfall, cold_wave. Any other
        value is analysed as heatwave.

    Returns
    -------
    analysis : HazardAnalysis
        ``total_events``, mean intensity and duration over all events
        (rounded to 1 decimal, 0 without events), the trend classification
        of yearly frequencies and one ``YearlyHazardData`` per observed year.

    Raises
    ------
    InvalidObservationsError
        If dates are not strictly ascending or precipitation is negative.

    Examples
    --------
    >>> from climate_hazards.models import Region
    >>> from climate_hazards.utils import generate_synthetic_observations
    >>> obs = generate_synthetic_observations(Region("Miami, FL", 25.8, -80.2), 1990, 1999)
    >>> result = analyze(obs, "heavy_rainfall")
    >>> [y.year for y in result.yearly_data][:3]
    [1990, 1991, 1992]
    """
    frame = observations_to_frame(observations)
    kind = resolve_hazard_kind(hazard_kind)

    events = detect_in_frame(frame, kind)
    yearly = aggregate_frame(frame, events)
    trend = estimate_trend([y.frequency for y in yearly])

    return HazardAnalysis(
        total_events=len(events),
        average_intensity=rounded_mean([e.intensity for e in events]),
        average_duration=rounded_mean([e.duration for e in events]),
        trend_direction=trend.direction,
        trend_magnitude=trend.magnitude,
        yearly_data=tuple(yearly),
    )
