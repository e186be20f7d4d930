"""Record types exchanged by the hazard analysis pipeline.

观测、灾害事件与分析结果的数据结构（不可变）。
"""

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Observation:
    """One day of weather at a region."""

    date: date
    temperature: float
    humidity: float
    precipitation: float
    wind_speed: float
    pressure: float


@dataclass(frozen=True)
class HazardEvent:
    """A closed run of hazard days.

    ``intensity`` is a severity score clamped to [1, 10]. The temperature
    fields are only filled for temperature-driven hazards.
    """

    start_date: date
    end_date: date
    duration: int
    intensity: float
    max_temperature: Optional[float] = None
    min_temperature: Optional[float] = None
    avg_temperature: Optional[float] = None


@dataclass(frozen=True)
class YearlyHazardData:
    year: int
    frequency: int
    intensity: float
    duration: float


@dataclass(frozen=True)
class HazardAnalysis:
    """Summary of one hazard kind over an observation record."""

    total_events: int
    average_intensity: float
    average_duration: float
    trend_direction: str
    trend_magnitude: float
    yearly_data: Tuple[YearlyHazardData, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["yearly_data"] = [asdict(y) for y in self.yearly_data]
        return result


@dataclass(frozen=True)
class Bounds:
    north: float
    south: float
    east: float
    west: float


@dataclass(frozen=True)
class Region:
    name: str
    lat: float
    lon: float
    bounds: Optional[Bounds] = None
