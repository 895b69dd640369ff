from __future__ import annotations
import math
from typing import Sequence

import numpy as np


def population_stdev(values: Sequence[int] | np.ndarray) -> float:
    """Population standard deviation (denominator n). 0.0 for no values."""
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        return 0.0
    mean = data.sum() / data.size
    return float(math.sqrt(np.sum((data - mean) ** 2) / data.size))


class RunningMoments:
    """Running sum and sum of squares for O(1) mean / population stdev."""

    def __init__(self):
        self.n = 0
        self.sum = 0
        self.sum_sq = 0

    def add(self, value: int):
        self.n += 1
        self.sum += value
        self.sum_sq += value * value

    def mean(self) -> float:
        if self.n == 0:
            return 0.0
        return self.sum / self.n

    def variance(self) -> float:
        if self.n == 0:
            return 0.0
        # exact integer numerator, a single float division
        return max(0.0, (self.n * self.sum_sq - self.sum**2) / self.n**2)

    def stdev(self) -> float:
        return math.sqrt(self.variance())
