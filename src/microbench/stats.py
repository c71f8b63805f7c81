"""Statistics over benchmark samples.

Provides:
- A running (Welford) accumulator, updated in O(1) per sample
- A pure reduction of a sample sequence into summary statistics
- Relative standard deviation (RSD), safe for a zero mean
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass


def relative_stddev(stddev: float, mean: float) -> float:
    """Return stddev as a percentage of mean, or 0.0 for a zero mean."""
    if mean == 0:
        return 0.0
    return stddev / mean * 100.0


class RunningStats:
    """Incremental mean and sample variance using Welford's algorithm.

    Avoids the catastrophic cancellation of the naive sum-of-squares
    formula when many samples of similar magnitude are accumulated.
    """

    def __init__(self) -> None:
        self.count = 0
        self.mean = 0.0
        self.total = 0.0
        self.min = math.inf
        self.max = -math.inf
        self._m2 = 0.0

    def push(self, value: float) -> None:
        """Add a sample."""
        self.count += 1
        self.total += value
        delta = value - self.mean
        self.mean += delta / self.count
        self._m2 += delta * (value - self.mean)
        self.min = min(self.min, value)
        self.max = max(self.max, value)

    def extend(self, values: Iterable[float]) -> None:
        for value in values:
            self.push(value)

    @property
    def variance(self) -> float:
        """Sample variance (n - 1 denominator), 0.0 below two samples."""
        if self.count < 2:
            return 0.0
        return max(self._m2, 0.0) / (self.count - 1)

    @property
    def stddev(self) -> float:
        return math.sqrt(self.variance)

    @property
    def rsd(self) -> float:
        """Relative standard deviation in percent."""
        return relative_stddev(self.stddev, self.mean)


@dataclass(frozen=True)
class SampleStats:
    """Statistical summary of a sample sequence.

    Attributes:
        count: Number of samples.
        total: Sum of samples.
        mean: Arithmetic mean.
        stddev: Sample standard deviation.
        rsd: Relative standard deviation (percent).
        min: Smallest sample.
        max: Largest sample.
    """

    count: int
    total: float
    mean: float
    stddev: float
    rsd: float
    min: float
    max: float

    @classmethod
    def from_running(cls, running: RunningStats) -> SampleStats:
        """Snapshot a running accumulator."""
        if running.count == 0:
            return cls(
                count=0, total=0.0, mean=0.0, stddev=0.0, rsd=0.0, min=0.0, max=0.0
            )
        return cls(
            count=running.count,
            total=running.total,
            mean=running.mean,
            stddev=running.stddev,
            rsd=running.rsd,
            min=running.min,
            max=running.max,
        )


def compute_stats(samples: Iterable[float]) -> SampleStats:
    """Compute summary statistics from samples.

    Args:
        samples: Sample durations in seconds.

    Returns:
        SampleStats; all fields are zero for an empty input.
    """
    running = RunningStats()
    running.extend(samples)
    return SampleStats.from_running(running)
