"""Unit tests for microbench.results module."""

from __future__ import annotations

import pytest

from microbench.results import Results, StopReason


class TestFromSamples:
    """Tests for Results.from_samples."""

    def test_summary_fields(self) -> None:
        results = Results.from_samples([0.2, 0.4, 0.3], iterations=100)

        assert results.samples == (0.2, 0.4, 0.3)
        assert results.total_time == pytest.approx(0.9)
        assert results.mean == pytest.approx(0.3)
        assert results.stddev == pytest.approx(0.1)
        assert results.rsd == pytest.approx(100 / 3)
        assert results.min == 0.2
        assert results.max == 0.4
        assert results.best == 0.2
        assert results.iterations_total == 300
        assert results.per_iteration == pytest.approx(0.003)

    def test_keeps_sample_order(self) -> None:
        results = Results.from_samples([3.0, 1.0, 2.0], iterations=1)
        assert results.samples == (3.0, 1.0, 2.0)

    def test_all_zero_samples(self) -> None:
        """All-zero durations give rsd == 0 rather than an error."""
        results = Results.from_samples([0.0, 0.0, 0.0], iterations=10)

        assert results.mean == 0.0
        assert results.rsd == 0.0

    def test_stop_reason(self) -> None:
        results = Results.from_samples([1.0], 1, StopReason.MAX_DURATION)
        assert results.stop_reason is StopReason.MAX_DURATION

    def test_stop_reason_defaults_to_none(self) -> None:
        """Results built by hand carry no stop condition."""
        assert Results.from_samples([1.0], 1).stop_reason is None

    def test_is_frozen(self) -> None:
        results = Results.from_samples([1.0], iterations=1)

        with pytest.raises(Exception):  # FrozenInstanceError
            results.mean = 0.5  # type: ignore[misc]


class TestThroughput:
    """Tests for throughput computation."""

    def test_bytes_per_second(self) -> None:
        """1000 calls of 1 MB per 1 s batch is 1 GB/s."""
        results = Results.from_samples([1.0] * 4, iterations=1000)

        assert results.throughput(1_000_000) == pytest.approx(1_000_000_000)

    def test_bits_per_second(self) -> None:
        results = Results.from_samples([1.0] * 4, iterations=1000)

        assert results.throughput_bits(1_000_000) == pytest.approx(8_000_000_000)

    def test_uses_total_time(self) -> None:
        results = Results.from_samples([0.5, 1.5], iterations=10)

        # 20 calls in 2 s
        assert results.throughput(1) == pytest.approx(10.0)

    def test_zero_total_time(self) -> None:
        """No measured time yields the 0.0 sentinel."""
        results = Results.from_samples([0.0, 0.0], iterations=0)

        assert results.throughput(1024) == 0.0

    def test_is_pure(self) -> None:
        results = Results.from_samples([0.25, 0.75], iterations=4)

        assert results.throughput(3) == results.throughput(3)
        assert results.samples == (0.25, 0.75)


class TestPerIteration:
    def test_zero_iterations(self) -> None:
        results = Results.from_samples([0.0], iterations=0)
        assert results.per_iteration == 0.0
