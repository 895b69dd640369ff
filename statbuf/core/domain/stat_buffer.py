from __future__ import annotations
import logging
import numbers
from collections import Counter
from enum import Enum, auto
from typing import Iterator, List, Optional, Sequence

import numpy as np

from statbuf.core.domain.errors import CapacityExceededError, InvalidArgumentError
from statbuf.core.domain.summary import BufferSummary
from statbuf.utils.stats import RunningMoments, population_stdev

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 31  # most days in a month

# values are stored in a preallocated int64 array
INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)


class BufferState(Enum):
    GROWING = auto()
    FULL = auto()


class StdDevMethod(Enum):
    RECOMPUTE = auto()
    RUNNING = auto()

    @classmethod
    def from_str(cls, name: str) -> StdDevMethod:
        try:
            return cls[name.upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown std dev method: {name!r}")


def _check_int(value) -> int:
    # bool is an Integral too, but it is never an observation
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(
            f"StatBuffer only accepts integers, got {type(value).__name__}"
        )
    value = int(value)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidArgumentError(f"Value {value} does not fit in a 64-bit integer")
    return value


class StatBuffer:
    """Fixed capacity integer buffer with live summary statistics.

    min, max, range, sum, mean and mode are updated in O(1) on every append.
    The population standard deviation is recomputed over the valid elements
    (O(n)) unless the buffer was built with ``StdDevMethod.RUNNING``.

    Args:
        capacity: Maximum number of values the buffer will ever hold.
        std_dev_method: How the standard deviation is maintained.

    NOTES:
      Mode ties go to the value that reached the tied frequency first; a later
      value only takes over by strictly exceeding it.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        std_dev_method: StdDevMethod = StdDevMethod.RECOMPUTE,
    ):
        if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral):
            raise InvalidArgumentError(
                f"capacity must be an integer, got {type(capacity).__name__}"
            )
        if capacity < 0:
            raise InvalidArgumentError(f"capacity must be >= 0, got {capacity}")

        self._capacity = int(capacity)
        self._values = np.zeros(self._capacity, dtype=np.int64)
        self._count = 0
        self._std_dev_method = std_dev_method

        self._frequency: Counter[int] = Counter()
        self._mode_value: Optional[int] = None
        self._mode_frequency = 0

        self._min: Optional[int] = None
        self._max: Optional[int] = None
        self._range: Optional[int] = None
        self._sum = 0
        self._mean = 0.0
        self._std_dev = 0.0
        self._moments = RunningMoments()

    @classmethod
    def from_sequence(
        cls,
        values: Optional[Sequence[int]],
        std_dev_method: StdDevMethod = StdDevMethod.RECOMPUTE,
    ) -> StatBuffer:
        """Wrap an existing sequence; the buffer is full from the start.

        All statistics are computed once, in a single pass over ``values``.
        """
        if values is None:
            logger.warning("StatBuffer handed None instead of a sequence")
            raise InvalidArgumentError("Cannot build a StatBuffer from None")

        items = [_check_int(v) for v in values]
        buf = cls(len(items), std_dev_method=std_dev_method)
        if not items:
            return buf

        buf._values[:] = items
        buf._count = len(items)
        buf._min = buf._max = items[0]
        for v in items:
            buf._sum += v
            buf._moments.add(v)
            if v < buf._min:
                buf._min = v
            if v > buf._max:
                buf._max = v
            buf._count_for_mode(v)

        buf._range = buf._max - buf._min
        buf._mean = buf._sum / buf._count
        buf._update_std_dev()
        return buf

    # ------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------

    def append(self, value: int):
        """Add one value and refresh every statistic."""
        value = _check_int(value)
        if self._count >= self._capacity:
            logger.warning(
                "Append rejected, buffer full (%d/%d)", self._count, self._capacity
            )
            raise CapacityExceededError(self._capacity, self._count, 1)

        self._values[self._count] = value
        self._count += 1

        if self._count == 1:
            self._min = self._max = value
            self._range = 0
        elif value < self._min:
            self._min = value
            self._range = self._max - self._min
        elif value > self._max:
            self._max = value
            self._range = self._max - self._min

        self._sum += value
        self._mean = self._sum / self._count
        self._moments.add(value)
        self._count_for_mode(value)
        self._update_std_dev()

    def append_all(self, values: Sequence[int]):
        """Add a batch of values in order, or none of them.

        A batch is only accepted while it leaves at least one free slot:
        ``count + len(values)`` must stay below capacity.
        """
        if values is None:
            raise InvalidArgumentError("Cannot append None as a batch")

        items = [_check_int(v) for v in values]
        if self._count + len(items) >= self._capacity:
            logger.warning(
                "Batch of %d rejected, buffer at %d/%d",
                len(items),
                self._count,
                self._capacity,
            )
            raise CapacityExceededError(self._capacity, self._count, len(items))

        for v in items:
            self.append(v)
        logger.debug("Buffer after batch: %s", self)

    def _count_for_mode(self, value: int):
        self._frequency[value] += 1
        freq = self._frequency[value]
        if freq > self._mode_frequency:
            self._mode_frequency = freq
            self._mode_value = value

    def _update_std_dev(self):
        if self._std_dev_method == StdDevMethod.RUNNING:
            self._std_dev = self._moments.stdev()
        else:
            self._std_dev = population_stdev(self._values[: self._count])

    # ------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------

    def mode(self) -> Optional[int]:
        """Most frequent value, or None when no value occurred twice."""
        if self._mode_frequency <= 1:
            return None
        return self._mode_value

    def mode_frequency(self) -> int:
        return self._mode_frequency

    def min(self) -> Optional[int]:
        return self._min

    def max(self) -> Optional[int]:
        return self._max

    def range(self) -> Optional[int]:
        return self._range

    def sum(self) -> int:
        return self._sum

    def mean(self) -> float:
        return self._mean

    def std_dev(self) -> float:
        return self._std_dev

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return self._count

    @property
    def remaining(self) -> int:
        return self._capacity - self._count

    @property
    def state(self) -> BufferState:
        if self._count == self._capacity:
            return BufferState.FULL
        return BufferState.GROWING

    @property
    def is_full(self) -> bool:
        return self.state == BufferState.FULL

    @property
    def std_dev_method(self) -> StdDevMethod:
        return self._std_dev_method

    def values(self) -> List[int]:
        """Copy of the valid elements, in insertion order."""
        return [int(v) for v in self._values[: self._count]]

    def summary(self) -> BufferSummary:
        return BufferSummary(
            capacity=self._capacity,
            count=self._count,
            min=self._min,
            max=self._max,
            range=self._range,
            sum=self._sum,
            mean=self._mean,
            mode=self.mode(),
            std_dev=self._std_dev,
        )

    def __len__(self):
        return self._count

    def __iter__(self) -> Iterator[int]:
        return iter(self.values())

    def __str__(self):
        return "[" + ", ".join(str(v) for v in self.values()) + "]"

    def __repr__(self):
        return f"StatBuffer(capacity={self._capacity}, count={self._count}, values={self})"
