"""Adaptive sampling of a measured operation.

Runs an untimed warm-up, then times batches of invocations until one of
the stop conditions fires, checked after each batch in priority order:
- The maximum sample count is reached
- The time budget is spent (even below the minimum sample count)
- The minimum sample count is reached and the running RSD is within target
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from microbench.clock import Clock, default_clock
from microbench.options import Options
from microbench.results import Results, StopReason
from microbench.stats import RunningStats

logger = logging.getLogger(__name__)

Operation = Callable[[], Any]


@dataclass(frozen=True)
class SamplerProgress:
    """Progress callback information.

    Attributes:
        index: 1-based index of the sample just collected.
        duration: Duration of that batch in seconds.
        mean: Running mean batch duration.
        rsd: Running relative standard deviation (percent).
        elapsed: Time since measurement started, in seconds.
    """

    index: int
    duration: float
    mean: float
    rsd: float
    elapsed: float


# Type for progress callbacks
ProgressCallback = Callable[[SamplerProgress], None]


def _stop_reason(
    options: Options, running: RunningStats, elapsed: float
) -> StopReason | None:
    if running.count >= max(1, options.max_samples):
        return StopReason.MAX_SAMPLES
    if options.max_duration is not None and elapsed >= options.max_duration:
        return StopReason.MAX_DURATION
    if running.count >= options.min_samples and running.rsd <= options.max_rsd:
        return StopReason.STABLE
    return None


def collect_samples(
    options: Options,
    operation: Operation,
    clock: Clock,
    progress_callback: ProgressCallback | None = None,
) -> tuple[list[float], StopReason]:
    """Warm up, then time batches of `operation` until a stop condition fires.

    Exceptions raised by `operation` propagate unchanged.

    Args:
        options: Benchmark options.
        operation: Zero-argument callable; its return value is discarded.
        clock: Time source.
        progress_callback: Called after each batch.

    Returns:
        Tuple of (batch durations in measurement order, stop reason).
    """
    log = logger.info if options.verbose else logger.debug
    iterations = range(options.iterations)

    log("Starting a new benchmark.")
    if options.warmup_iterations > 0:
        log("Warming up for %d iterations.", options.warmup_iterations)
    for _ in range(options.warmup_iterations):
        operation()

    samples: list[float] = []
    running = RunningStats()
    start = clock.now()
    while True:
        log("Running sample %d.", running.count + 1)
        batch_start = clock.now()
        for _ in iterations:
            operation()
        duration = clock.elapsed(batch_start)
        elapsed = clock.elapsed(start)

        samples.append(duration)
        running.push(duration)
        log(
            "Sample %d: %.9fs (mean %.9fs +/- %.2f%%)",
            running.count,
            duration,
            running.mean,
            running.rsd,
        )
        if progress_callback:
            progress_callback(
                SamplerProgress(
                    index=running.count,
                    duration=duration,
                    mean=running.mean,
                    rsd=running.rsd,
                    elapsed=elapsed,
                )
            )

        reason = _stop_reason(options, running, elapsed)
        if reason is not None:
            break

    if reason is StopReason.STABLE:
        log("Enough samples have been collected.")
    elif reason is StopReason.MAX_DURATION:
        log(
            "Time budget of %.3fs spent after %d sample(s).",
            options.max_duration,
            len(samples),
        )
    elif running.rsd > options.max_rsd:
        log("RSD %.2f%% did not reach the %.2f%% target.", running.rsd, options.max_rsd)
    return samples, reason


class Bench:
    """A benchmarking environment bound to a clock."""

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock = clock or default_clock()

    def run(
        self,
        options: Options,
        operation: Operation,
        progress_callback: ProgressCallback | None = None,
    ) -> Results:
        """Benchmark `operation` and return its results."""
        samples, reason = collect_samples(
            options, operation, self.clock, progress_callback
        )
        results = Results.from_samples(samples, options.iterations, reason)
        log = logger.info if options.verbose else logger.debug
        log(
            "Result: %.9fs per batch +/- %.2f%% over %d sample(s).",
            results.mean,
            results.rsd,
            len(results.samples),
        )
        return results


def run(
    options: Options,
    operation: Operation,
    clock: Clock | None = None,
    progress_callback: ProgressCallback | None = None,
) -> Results:
    """Benchmark `operation` with the given options.

    Args:
        options: Benchmark options.
        operation: Zero-argument callable to measure.
        clock: Time source (default: best clock for this platform).
        progress_callback: Called after each timed batch.

    Returns:
        Immutable Results.
    """
    return Bench(clock).run(options, operation, progress_callback)
