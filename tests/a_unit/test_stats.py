"""Unit tests for microbench.stats module."""

from __future__ import annotations

import statistics

import pytest

from microbench.stats import (
    RunningStats,
    SampleStats,
    compute_stats,
    relative_stddev,
)


class TestRelativeStddev:
    """Tests for relative_stddev function."""

    def test_percentage(self) -> None:
        assert relative_stddev(5.0, 100.0) == pytest.approx(5.0)

    def test_zero_mean(self) -> None:
        """A zero mean yields 0.0 instead of dividing by zero."""
        assert relative_stddev(0.0, 0.0) == 0.0
        assert relative_stddev(1.0, 0.0) == 0.0


class TestRunningStats:
    """Tests for the Welford accumulator."""

    def test_empty(self) -> None:
        running = RunningStats()

        assert running.count == 0
        assert running.mean == 0.0
        assert running.variance == 0.0
        assert running.rsd == 0.0

    def test_single_sample(self) -> None:
        """One sample has no dispersion."""
        running = RunningStats()
        running.push(0.25)

        assert running.count == 1
        assert running.mean == 0.25
        assert running.stddev == 0.0
        assert running.rsd == 0.0
        assert running.min == running.max == 0.25

    def test_matches_statistics_module(self) -> None:
        """Running values agree with a full recomputation."""
        data = [0.1, 0.11, 0.09, 0.10, 0.105, 0.097]
        running = RunningStats()
        running.extend(data)

        assert running.mean == pytest.approx(statistics.mean(data))
        assert running.stddev == pytest.approx(statistics.stdev(data))
        assert running.total == pytest.approx(sum(data))
        assert running.min == 0.09
        assert running.max == 0.11

    def test_rsd_known_value(self) -> None:
        # Mean = 100, sample stddev = sqrt(12.5)
        running = RunningStats()
        running.extend([95.0, 100.0, 105.0, 100.0, 100.0])

        assert running.rsd == pytest.approx(12.5**0.5)

    def test_stable_with_large_offset(self) -> None:
        """Small variations on a large value keep their variance."""
        offset = 1e9
        data = [offset + x for x in (4.0, 7.0, 13.0, 16.0)]
        running = RunningStats()
        running.extend(data)

        assert running.variance == pytest.approx(30.0)

    def test_all_zero_samples(self) -> None:
        """Zero-duration samples give a zero RSD, not a division error."""
        running = RunningStats()
        running.extend([0.0, 0.0, 0.0])

        assert running.mean == 0.0
        assert running.rsd == 0.0


class TestComputeStats:
    """Tests for compute_stats function."""

    def test_basic_stats(self) -> None:
        stats = compute_stats([0.1, 0.11, 0.09, 0.10, 0.105])

        assert stats.count == 5
        assert stats.mean == pytest.approx(0.101)
        assert stats.stddev > 0
        assert stats.rsd == pytest.approx(stats.stddev / stats.mean * 100)
        assert stats.min == 0.09
        assert stats.max == 0.11

    def test_empty(self) -> None:
        stats = compute_stats([])

        assert stats == SampleStats(
            count=0, total=0.0, mean=0.0, stddev=0.0, rsd=0.0, min=0.0, max=0.0
        )

    def test_accepts_generator(self) -> None:
        stats = compute_stats(x * 0.5 for x in range(1, 4))

        assert stats.count == 3
        assert stats.total == pytest.approx(3.0)

    def test_is_frozen(self) -> None:
        stats = compute_stats([1.0])

        with pytest.raises(Exception):  # FrozenInstanceError
            stats.mean = 0.5  # type: ignore[misc]
