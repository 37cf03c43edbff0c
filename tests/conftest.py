"""Shared fixtures for the AI cache tests."""

import pytest

from ai_cache.services import AICacheService


class FakeClock:
    """Manual millisecond clock."""

    def __init__(self, start: float = 1_700_000_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock():
    """Create a manual clock."""
    return FakeClock()


@pytest.fixture
def cache(clock):
    """Create a fresh cache driven by the manual clock."""
    return AICacheService.create(clock=clock)
