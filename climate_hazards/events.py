"""
连续事件提取模块 (Run-Length Event Extraction)

Scans a daily metric against a threshold and yields the closed runs of days
that satisfy the comparison. The scanner is shared by every hazard kind;
intensity scoring happens in the detectors.
"""

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple, Union

import numpy as np
import pandas as pd


class Direction(str, Enum):
    """Which side of the threshold counts as a hazard day."""

    ABOVE = "above"
    BELOW = "below"

    @property
    def compare(self):
        return operator.gt if self is Direction.ABOVE else operator.lt


@dataclass(frozen=True)
class Run:
    """A closed run: index of its first day and the metric values in it."""

    start_index: int
    values: Tuple[float, ...]

    @property
    def end_index(self) -> int:
        return self.start_index + len(self.values) - 1

    @property
    def length(self) -> int:
        return len(self.values)


def extract_runs(
    values: Union[np.ndarray, List, pd.Series],
    threshold: float,
    direction: Union[Direction, str],
    min_length: int = 1,
) -> Iterator[Run]:
    """
    提取满足阈值条件的连续时段
    Lazily yield runs of consecutive days beyond ``threshold``.

    扫描规则 (Scan Rules):
    --------------------
    1. 满足比较条件的日子追加到当前开放时段
       Days passing the comparison extend the open run
    2. 第一个不满足条件的日子关闭时段；长度 >= min_length 才输出
       The first failing day closes the run; it is yielded only if its
       length is at least ``min_length``, shorter runs are dropped
    3. 序列结束时仍开放的时段被丢弃（无论长度）
       A run still open at the end of the series is dropped, whatever its
       length; only runs confirmed by a closing day are reported

    Parameters
    ----------
    values : array-like
        Daily metric values in date order.
    threshold : float
        Comparison threshold.
    direction : Direction or {"above", "below"}
        ``above`` uses ``value > threshold``, ``below`` uses
        ``value < threshold``. Values equal to the threshold never qualify.
    min_length : int, default=1
        Minimum run length in days.

    Yields
    ------
    run : Run

    Examples
    --------
    >>> runs = extract_runs([0, 5, 6, 7, 0, 5, 5], 4, "above", min_length=2)
    >>> [(r.start_index, r.values) for r in runs]
    [(1, (5.0, 6.0, 7.0))]
    """
    if min_length < 1:
        raise ValueError(f"min_length must be >= 1, got {min_length}")

    compare = Direction(direction).compare
    data = np.asarray(values, dtype=float)

    start = None
    current: List[float] = []

    for i, value in enumerate(data):
        if compare(value, threshold):
            # 开启或延长时段 (open or extend the run)
            if start is None:
                start = i
            current.append(float(value))
        else:
            # 关闭时段 (close the run)
            if start is not None and len(current) >= min_length:
                yield Run(start_index=start, values=tuple(current))
            start = None
            current = []
