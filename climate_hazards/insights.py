"""
Textual insights derived from a hazard analysis.

These helpers turn a ``HazardAnalysis`` into the headline figures of a
report: risk level, peak year, the recent-versus-earlier frequency
comparison and a short list of key-finding sentences. The region helpers
give the approximate analysis area and a rough elevation estimate.
"""

import warnings
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import numpy as np

from .config import (
    COMPARISON_WINDOW_YEARS,
    DEFAULT_RISK_LEVEL,
    KM_PER_DEGREE,
    RISK_LEVELS,
)
from .detectors import HazardKind
from .models import HazardAnalysis, Region, YearlyHazardData


@dataclass(frozen=True)
class PeriodComparison:
    recent_average: float
    earlier_average: float
    change_percent: Optional[float]


def format_hazard_kind(kind: Union[HazardKind, str]) -> str:
    """``"heavy_rainfall"`` -> ``"Heavy Rainfall"``."""
    value = kind.value if isinstance(kind, HazardKind) else str(kind)
    return " ".join(word[:1].upper() + word[1:] for word in value.split("_"))


def assess_risk_level(average_intensity: float) -> str:
    for lower_bound, level in RISK_LEVELS:
        if average_intensity >= lower_bound:
            return level
    return DEFAULT_RISK_LEVEL


def analysis_area_km2(region: Region) -> Optional[float]:
    """Bounding-box area, treating a degree as 111 km on both axes.

    None when the region has no bounds.
    """
    if region.bounds is None:
        return None
    b = region.bounds
    return (b.north - b.south) * (b.east - b.west) * KM_PER_DEGREE * KM_PER_DEGREE


def estimated_elevation_m(region: Region) -> float:
    # placeholder estimate, ten metres per degree of latitude
    return abs(region.lat * 10)


def peak_year(analysis: HazardAnalysis) -> Optional[YearlyHazardData]:
    """First year with the highest frequency, or None for an empty record."""
    peak = None
    for entry in analysis.yearly_data:
        if peak is None or entry.frequency > peak.frequency:
            peak = entry
    return peak


def compare_recent_to_earlier(
    yearly_data: Sequence[YearlyHazardData],
    window: int = COMPARISON_WINDOW_YEARS,
) -> Optional[PeriodComparison]:
    """
    Compare mean yearly frequency of the last and first ``window`` years.

    Returns None for an empty record. ``change_percent`` is None when the
    earlier average is zero. Records shorter than ``2 * window`` years give
    overlapping periods; a warning is emitted in that case.
    """
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")
    if not yearly_data:
        return None

    if len(yearly_data) < 2 * window:
        warnings.warn(
            f"Only {len(yearly_data)} years available; recent and earlier "
            f"{window}-year periods overlap."
        )

    frequencies = np.array([y.frequency for y in yearly_data], dtype=float)
    recent = float(np.mean(frequencies[-window:]))
    earlier = float(np.mean(frequencies[:window]))
    change = (recent - earlier) / earlier * 100 if earlier else None

    return PeriodComparison(
        recent_average=recent,
        earlier_average=earlier,
        change_percent=change,
    )


def summarize_insights(
    analysis: HazardAnalysis,
    region: Region,
    start_year: int,
    hazard_kind: Union[HazardKind, str],
) -> List[str]:
    """Key-finding sentences for a report header."""
    kind_label = format_hazard_kind(hazard_kind)
    kind_name = hazard_kind.value if isinstance(hazard_kind, HazardKind) else hazard_kind

    insights = [
        f"{kind_label} events have {analysis.trend_direction} by "
        f"{abs(analysis.trend_magnitude):.1f}% in {region.name} since {start_year}.",
        f"The average duration of {kind_name} events is "
        f"{analysis.average_duration:.1f} days.",
    ]

    peak = peak_year(analysis)
    if peak is not None:
        insights.append(
            f"Peak activity occurred in {peak.year} with {peak.frequency} events."
        )

    level = assess_risk_level(analysis.average_intensity)
    insights.append(
        f"Current risk level is assessed as {level.lower()} based on recent "
        f"intensity patterns."
    )
    return insights
