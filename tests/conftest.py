"""Shared fixtures for microbench tests."""

from __future__ import annotations

import pytest


class FakeClock:
    """Clock whose time only moves when `advance` is called."""

    name = "fake"

    def __init__(self) -> None:
        self.ns = 0

    def advance(self, seconds: float) -> None:
        self.ns += round(seconds * 1e9)

    def now(self) -> int:
        return self.ns

    def elapsed(self, since: int) -> float:
        return (self.ns - since) / 1e9


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
