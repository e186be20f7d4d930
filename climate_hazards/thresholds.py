"""
百分位阈值计算模块 (Percentile Threshold Module)

Nearest-rank percentile thresholds and the trailing rolling sums that feed
the drought detector.

阈值选取规则 (Threshold Rule):
-----------------------------
The threshold is the element at sorted index ``floor(n * p)``. There is no
interpolation between neighbours, so the threshold is always a member of the
sample. This differs from ``np.percentile`` / ``np.quantile`` defaults and
changes event counts near ties, so do not swap one for the other.
"""

import math
from typing import List, Union

import numpy as np
import pandas as pd

from .config import DROUGHT_ROLLING_WINDOW
from .exceptions import EmptyInputError


def nearest_rank_percentile(
    values: Union[np.ndarray, List, pd.Series],
    p: float,
) -> float:
    """
    使用最近秩法计算百分位数
    Nearest-rank percentile of a numeric sample.

    Parameters
    ----------
    values : array-like
        数值样本 / Numeric sample, any order.
    p : float
        百分位（小数形式）/ Percentile as a fraction in [0, 1].

    Returns
    -------
    threshold : float
        Element at sorted index ``floor(len(values) * p)``, clamped to the
        last index so that ``p = 1`` returns the maximum.

    Raises
    ------
    EmptyInputError
        如果样本为空 / If the sample is empty.
    ValueError
        如果 p 不在 [0, 1] 范围内 / If ``p`` is outside [0, 1].

    Examples
    --------
    >>> nearest_rank_percentile([5, 1, 4, 2, 3], 0.5)
    3.0
    >>> nearest_rank_percentile([5, 1, 4, 2, 3], 1.0)
    5.0
    """
    if not 0 <= p <= 1:
        raise ValueError(f"Percentile must be in range [0, 1], got {p}")

    data = np.sort(np.asarray(values, dtype=float).ravel())
    if data.size == 0:
        raise EmptyInputError()

    index = min(int(math.floor(data.size * p)), data.size - 1)
    return float(data[index])


def trailing_rolling_sum(
    values: Union[np.ndarray, List, pd.Series],
    window: int = DROUGHT_ROLLING_WINDOW,
) -> np.ndarray:
    """
    计算尾随滑动累计值
    Trailing rolling sum over the current day and up to ``window - 1``
    prior days.

    The window shrinks at the start of the series instead of producing NaN,
    so the output has the same length as the input.

    Each window is summed on its own, oldest day first, starting from 0.0.
    An incremental running sum (add the new day, subtract the one leaving)
    drifts in the last bits for fractional rainfall, which moves values
    across the drought threshold.

    Examples
    --------
    >>> trailing_rolling_sum([1, 2, 3, 4], window=2)
    array([1., 3., 5., 7.])
    """
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")

    data = np.asarray(values, dtype=float).ravel()
    # leading zeros shrink the first windows; 0.0 + x is exact
    padded = np.concatenate([np.zeros(window - 1), data])
    total = np.zeros(data.size)
    for offset in range(window):
        total += padded[offset:offset + data.size]
    return total
