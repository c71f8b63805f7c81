"""Benchmark results and throughput."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from microbench.stats import compute_stats


class StopReason(Enum):
    """Why the sampler stopped collecting batches."""

    MAX_SAMPLES = "max_samples"
    MAX_DURATION = "max_duration"
    STABLE = "stable"


class Unit(Enum):
    """Unit of the volume processed by one operation invocation."""

    NONE = "none"
    BYTES = "bytes"
    BITS = "bits"


@dataclass(frozen=True)
class Results:
    """Immutable outcome of a benchmark run.

    All durations are in seconds and refer to whole batches of
    `iterations` invocations.

    Attributes:
        samples: Batch durations, in measurement order.
        iterations: Invocations per batch.
        total_time: Sum of all batch durations.
        mean: Mean batch duration.
        stddev: Sample standard deviation of batch durations.
        rsd: Relative standard deviation (percent), 0.0 for a zero mean.
        min: Fastest batch.
        max: Slowest batch.
        stop_reason: Condition that ended sampling, None if not sampled.
    """

    samples: tuple[float, ...]
    iterations: int
    total_time: float
    mean: float
    stddev: float
    rsd: float
    min: float
    max: float
    stop_reason: StopReason | None = None

    @classmethod
    def from_samples(
        cls,
        samples: Iterable[float],
        iterations: int,
        stop_reason: StopReason | None = None,
    ) -> Results:
        """Build results from raw batch durations."""
        samples = tuple(samples)
        stats = compute_stats(samples)
        return cls(
            samples=samples,
            iterations=iterations,
            total_time=stats.total,
            mean=stats.mean,
            stddev=stats.stddev,
            rsd=stats.rsd,
            min=stats.min,
            max=stats.max,
            stop_reason=stop_reason,
        )

    @property
    def iterations_total(self) -> int:
        """Invocations measured across all batches."""
        return self.iterations * len(self.samples)

    @property
    def best(self) -> float:
        """Duration of the fastest batch."""
        return self.min

    @property
    def per_iteration(self) -> float:
        """Mean duration of a single invocation."""
        if self.iterations <= 0:
            return 0.0
        return self.mean / self.iterations

    def throughput(self, size: float) -> float:
        """Units processed per second.

        Args:
            size: Units (e.g. bytes) processed by one invocation.

        Returns:
            `size * iterations_total / total_time`, or 0.0 when no time
            was measured.
        """
        if self.total_time <= 0:
            return 0.0
        return size * self.iterations_total / self.total_time

    def throughput_bits(self, size: float) -> float:
        """Bits per second for `size` bytes processed per invocation."""
        return self.throughput(size * 8)
