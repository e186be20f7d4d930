"""
Shared fixtures for the hazard analysis tests.
"""

from datetime import date, timedelta

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from climate_hazards.models import Observation, Region


def build_observations(temperature=None, precipitation=None, start=date(2000, 1, 1)):
    """Daily observations from a temperature and/or precipitation series.

    The missing series is filled with a neutral value (20 degC, 0 mm).
    """
    if temperature is None and precipitation is None:
        raise ValueError("temperature or precipitation is required")
    n = len(temperature) if temperature is not None else len(precipitation)
    if temperature is None:
        temperature = [20.0] * n
    if precipitation is None:
        precipitation = [0.0] * n

    return [
        Observation(
            date=start + timedelta(days=i),
            temperature=float(t),
            humidity=60.0,
            precipitation=float(p),
            wind_speed=5.0,
            pressure=1013.0,
        )
        for i, (t, p) in enumerate(zip(temperature, precipitation))
    ]


@pytest.fixture
def make_observations():
    return build_observations


@pytest.fixture
def phoenix():
    return Region(name="Phoenix, AZ", lat=33.4484, lon=-112.074)


@pytest.fixture
def synthetic_observations(phoenix):
    from climate_hazards.utils import generate_synthetic_observations
    return generate_synthetic_observations(phoenix, 1995, 2004, seed=7)


@pytest.fixture
def rng():
    return np.random.RandomState(42)
