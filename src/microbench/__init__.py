"""Adaptive micro-benchmarking harness.

Times a zero-argument callable in batches until the relative standard
deviation of the batch durations is within target, bounded by a sample
count cap and a time budget.
"""

from __future__ import annotations

from microbench.clock import Clock, MonotonicClock, PerfCounterClock, default_clock
from microbench.options import ConfigError, Options, load_options
from microbench.report import format_results
from microbench.results import Results, StopReason, Unit
from microbench.sampler import Bench, collect_samples, run
from microbench.stats import RunningStats, SampleStats, compute_stats

__all__ = [
    "Bench",
    "Clock",
    "ConfigError",
    "MonotonicClock",
    "Options",
    "PerfCounterClock",
    "Results",
    "RunningStats",
    "SampleStats",
    "StopReason",
    "Unit",
    "collect_samples",
    "compute_stats",
    "default_clock",
    "format_results",
    "load_options",
    "run",
]
