"""
Tabular conversion and export helpers.

Observations travel through the pipeline as a pandas DataFrame with one row
per day; these helpers build that frame from records (or validate a frame the
caller already has) and turn analysis results back into tables for CSV
export.
"""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Iterable, List, Sequence, Union

import numpy as np
import pandas as pd

from .config import OBSERVATION_COLUMNS, YEARLY_COLUMNS
from .exceptions import InvalidObservationsError
from .models import HazardAnalysis, HazardEvent, Observation, Region

ObservationsLike = Union[pd.DataFrame, Sequence[Observation]]


def observations_to_frame(observations: ObservationsLike) -> pd.DataFrame:
    """Return a validated observation frame indexed 0..n-1.

    Accepts a sequence of ``Observation`` records or a DataFrame holding the
    observation columns. The ``date`` column is normalised to
    ``datetime.date``. Dates must be strictly ascending and precipitation
    non-negative; gaps between dates are allowed.
    """
    if isinstance(observations, pd.DataFrame):
        missing = [c for c in OBSERVATION_COLUMNS if c not in observations.columns]
        if missing:
            raise InvalidObservationsError(
                f"Observation frame is missing columns: {', '.join(missing)}"
            )
        frame = observations.loc[:, list(OBSERVATION_COLUMNS)].copy()
    else:
        frame = pd.DataFrame(
            [asdict(obs) for obs in observations],
            columns=list(OBSERVATION_COLUMNS),
        )

    frame = frame.reset_index(drop=True)
    timestamps = pd.to_datetime(frame["date"])

    not_ascending = np.flatnonzero((timestamps.diff() <= pd.Timedelta(0)).to_numpy())
    if not_ascending.size:
        raise InvalidObservationsError(
            "Observation dates must be strictly ascending with no duplicates",
            index=int(not_ascending[0]),
        )

    frame["date"] = timestamps.dt.date
    for column in OBSERVATION_COLUMNS[1:]:
        frame[column] = frame[column].astype(float)

    negative = np.flatnonzero((frame["precipitation"] < 0).to_numpy())
    if negative.size:
        raise InvalidObservationsError(
            "Precipitation must be non-negative", index=int(negative[0])
        )

    return frame


def frame_to_observations(frame: pd.DataFrame) -> List[Observation]:
    frame = observations_to_frame(frame)
    return [
        Observation(
            date=row.date,
            temperature=float(row.temperature),
            humidity=float(row.humidity),
            precipitation=float(row.precipitation),
            wind_speed=float(row.wind_speed),
            pressure=float(row.pressure),
        )
        for row in frame.itertuples(index=False)
    ]


def events_to_frame(events: Iterable[HazardEvent]) -> pd.DataFrame:
    """One row per event, columns named after the ``HazardEvent`` fields."""
    columns = list(HazardEvent.__dataclass_fields__)
    return pd.DataFrame([asdict(e) for e in events], columns=columns)


def yearly_to_frame(analysis: HazardAnalysis) -> pd.DataFrame:
    """Yearly table with the export columns ``Year, Frequency, Intensity, Duration``."""
    rows = [
        (y.year, y.frequency, y.intensity, y.duration)
        for y in analysis.yearly_data
    ]
    return pd.DataFrame(rows, columns=list(YEARLY_COLUMNS))


def _plain_number(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)


def export_yearly_csv(analysis: HazardAnalysis, path: Union[str, Path]) -> Path:
    """
    Write the yearly table to ``path`` and return the path.

    Whole-valued means are written without a decimal part (``4``, not
    ``4.0``), so rows read ``2000,1,2,4`` while ``3.5`` keeps its decimal.
    """
    path = Path(path)
    table = yearly_to_frame(analysis)
    for column in ("Intensity", "Duration"):
        table[column] = [_plain_number(v) for v in table[column]]
    table.to_csv(path, index=False)
    return path


def export_filename(region: Region, start_year: int, end_year: int) -> str:
    return f"climate-hazard-analysis-{region.name}-{start_year}-{end_year}.csv"
