"""Human-readable rendering of benchmark results."""

from __future__ import annotations

from microbench.results import Results, Unit

UNIT_SUFFIXES = {
    Unit.NONE: "/s",
    Unit.BYTES: "B/s",
    Unit.BITS: "b/s",
}


def format_duration(seconds: float) -> str:
    """Format a duration with an auto-scaled unit, e.g. "12.34us"."""
    magnitude = abs(seconds)
    if magnitude >= 1.0:
        return f"{seconds:.2f}s"
    if magnitude >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    if magnitude >= 1e-6:
        return f"{seconds * 1e6:.2f}us"
    return f"{seconds * 1e9:.2f}ns"


def format_throughput(
    rate: float, unit: Unit = Unit.NONE, binary: bool = False
) -> str:
    """Format a per-second rate with a K/M/G prefix, e.g. "1.50 MB/s".

    Args:
        rate: Units per second.
        unit: Unit of the rate.
        binary: Use powers of 1024 (Ki/Mi/Gi) instead of powers of 1000.
    """
    suffix = UNIT_SUFFIXES[unit]
    base = 1024.0 if binary else 1000.0
    infix = "i" if binary else ""
    if rate < base:
        return f"{rate:.2f} {suffix}"
    if rate < base**2:
        return f"{rate / base:.2f} K{infix}{suffix}"
    if rate < base**3:
        return f"{rate / base**2:.2f} M{infix}{suffix}"
    return f"{rate / base**3:.2f} G{infix}{suffix}"


def format_results(
    results: Results,
    size: float | None = None,
    unit: Unit = Unit.NONE,
    binary: bool = False,
) -> str:
    """Format results for display.

    Args:
        results: Benchmark results.
        size: Units processed per invocation, to include throughput.
        unit: Unit of `size`, also used for the rate.
        binary: Use binary prefixes for the rate.

    Returns:
        Formatted string like
        "1.23ms +/- 0.45% (5 samples x 1000 iterations) 812.00 KB/s".
    """
    line = (
        f"{format_duration(results.mean)} +/- {results.rsd:.2f}% "
        f"({len(results.samples)} samples x {results.iterations} iterations)"
    )
    if size is not None:
        rate = results.throughput(size)
        line += f" {format_throughput(rate, unit, binary)}"
    return line


def format_results_table(results: Results) -> str:
    """Format results as a multi-line summary table."""
    rows = [
        ("Samples", str(len(results.samples))),
        ("Iterations", f"{results.iterations} per sample, {results.iterations_total} total"),
        ("Mean", format_duration(results.mean)),
        ("Per iteration", format_duration(results.per_iteration)),
        ("Stddev", format_duration(results.stddev)),
        ("RSD", f"{results.rsd:.2f}%"),
        ("Min", format_duration(results.min)),
        ("Max", format_duration(results.max)),
        ("Total", format_duration(results.total_time)),
        ("Stopped by", results.stop_reason.value if results.stop_reason else "-"),
    ]
    lines = ["=" * 40]
    lines.extend(f"{label:<15} {value}" for label, value in rows)
    lines.append("=" * 40)
    return "\n".join(lines)
