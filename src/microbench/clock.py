"""Clock sources for timing benchmark batches.

The sampler only needs two things from a clock: a monotonic instant and the
elapsed time since such an instant. Native interpreters use the
high-resolution performance counter; WebAssembly builds of CPython
(Emscripten, WASI) fall back to the monotonic clock.
"""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Protocol

# Platforms where perf_counter is not reliably finer than monotonic
WASM_PLATFORMS = ("emscripten", "wasi")


class Clock(Protocol):
    """Monotonic time source."""

    name: str

    def now(self) -> int:
        """Return an opaque monotonic instant."""
        ...

    def elapsed(self, since: int) -> float:
        """Return seconds elapsed since an instant returned by `now`."""
        ...


class PerfCounterClock:
    """Clock backed by `time.perf_counter_ns`."""

    name = "perf_counter"

    def now(self) -> int:
        return time.perf_counter_ns()

    def elapsed(self, since: int) -> float:
        return (time.perf_counter_ns() - since) / 1e9


class MonotonicClock:
    """Clock backed by `time.monotonic_ns`."""

    name = "monotonic"

    def now(self) -> int:
        return time.monotonic_ns()

    def elapsed(self, since: int) -> float:
        return (time.monotonic_ns() - since) / 1e9


def default_clock(platform: str | None = None) -> Clock:
    """Return the clock best suited to the running platform.

    Args:
        platform: Platform name to select for (default: `sys.platform`).

    Returns:
        A `MonotonicClock` on WebAssembly platforms, else a `PerfCounterClock`.
    """
    platform = platform or sys.platform
    if platform in WASM_PLATFORMS:
        return MonotonicClock()
    return PerfCounterClock()


@dataclass(frozen=True)
class ClockInfo:
    """Information about a clock source.

    Attributes:
        name: Clock name as accepted by `time.get_clock_info`.
        implementation: Underlying OS function.
        resolution: Resolution in seconds.
        monotonic: Whether the clock can go backward.
        default: Whether it is the default clock on this platform.
    """

    name: str
    implementation: str
    resolution: float
    monotonic: bool
    default: bool


def clock_info() -> list[ClockInfo]:
    """Describe the clock sources usable by the sampler."""
    default_name = default_clock().name
    infos = []
    for name in ("perf_counter", "monotonic"):
        try:
            info = time.get_clock_info(name)
        except ValueError:
            continue
        infos.append(
            ClockInfo(
                name=name,
                implementation=info.implementation,
                resolution=info.resolution,
                monotonic=info.monotonic,
                default=name == default_name,
            )
        )
    return infos
