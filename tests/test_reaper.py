"""
Tests for the background reaper.
"""

import asyncio

import pytest

from ai_cache.services import CacheReaper


def test_start_without_event_loop_degrades(cache, clock):
    """No running loop means no periodic sweep, lazy expiry still works."""
    reaper = CacheReaper(cache, interval_ms=10)
    assert reaper.start() is False
    assert reaper.is_running is False

    cache.set("f", "a", "A", ttl_ms=5)
    clock.advance(6)
    assert cache.get("f", "a") is None


def test_sweep_runs_cleanup(cache, clock):
    """A single sweep removes expired entries only."""
    cache.set("f", "a", "A", ttl_ms=5)
    cache.set("f", "b", "B")
    clock.advance(6)
    assert CacheReaper(cache).sweep() == 1
    assert len(cache) == 1


def test_invalid_interval(cache):
    """Interval must be positive."""
    with pytest.raises(ValueError):
        CacheReaper(cache, interval_ms=0)


@pytest.mark.asyncio
async def test_reaper_removes_unread_expired_entries(cache, clock):
    """Expired entries disappear without any read traffic."""
    cache.set("f", "a", "A", ttl_ms=5)
    cache.set("f", "b", "B")
    clock.advance(6)

    reaper = CacheReaper(cache, interval_ms=10)
    assert reaper.start() is True
    assert reaper.is_running is True

    await asyncio.sleep(0.1)
    await reaper.stop()

    assert reaper.is_running is False
    assert len(cache) == 1
    assert cache.get_stats().total_requests == 0


@pytest.mark.asyncio
async def test_start_is_idempotent(cache):
    """Starting twice keeps a single task."""
    reaper = CacheReaper(cache, interval_ms=1000)
    assert reaper.start() is True
    assert reaper.start() is True
    await reaper.stop()
    await reaper.stop()
    assert reaper.is_running is False


@pytest.mark.asyncio
async def test_failed_sweep_keeps_loop_alive(cache, monkeypatch):
    """A failing sweep is logged and the next one still runs."""
    calls = []

    def flaky_cleanup(force=False):
        calls.append(force)
        if len(calls) == 1:
            raise RuntimeError("boom")
        return 0

    monkeypatch.setattr(cache, "cleanup", flaky_cleanup)

    reaper = CacheReaper(cache, interval_ms=10)
    reaper.start()
    await asyncio.sleep(0.1)
    await reaper.stop()

    assert len(calls) >= 2
