"""Tests for the expiring LRU response cache."""

from datetime import datetime, timezone

import pytest

from genesys_cloud_mcp.jobs import ResponseCache, TimeRange, usage_cache_key


class FakeTimer:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def timer() -> FakeTimer:
    return FakeTimer()


def test_entries_expire_after_ttl(timer: FakeTimer) -> None:
    cache = ResponseCache(maxsize=10, ttl=300, timer=timer)
    cache.set("key", "value")

    timer.now += 299
    assert cache.get("key") == "value"

    timer.now += 1
    assert cache.get("key") is None
    assert "key" not in cache


def test_reads_do_not_extend_lifetime(timer: FakeTimer) -> None:
    cache = ResponseCache(maxsize=10, ttl=300, timer=timer)
    cache.set("key", "value")

    timer.now += 200
    assert cache.get("key") == "value"
    assert "key" in cache

    timer.now += 101
    assert cache.get("key") is None


def test_least_recently_used_entry_is_evicted(timer: FakeTimer) -> None:
    cache = ResponseCache(maxsize=2, ttl=300, timer=timer)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.get("a")
    cache.set("c", 3)

    assert cache.get("a") == 1
    assert cache.get("b") is None
    assert cache.get("c") == 3


def test_membership_check_does_not_mark_entry_as_used(timer: FakeTimer) -> None:
    cache = ResponseCache(maxsize=2, ttl=300, timer=timer)
    cache.set("a", 1)
    cache.set("b", 2)
    assert "a" in cache
    cache.set("c", 3)

    assert "a" not in cache
    assert len(cache) == 2


def test_last_writer_wins(timer: FakeTimer) -> None:
    cache = ResponseCache(maxsize=2, ttl=300, timer=timer)
    cache.set("a", 1)
    cache.set("a", 2)

    assert cache.get("a") == 2
    assert len(cache) == 1


def test_maxsize_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ResponseCache(maxsize=0)


def test_usage_cache_key_uses_epoch_milliseconds() -> None:
    time_range = TimeRange(
        start=datetime(2024, 1, 1, tzinfo=timezone.utc),
        end=datetime(2024, 1, 2, tzinfo=timezone.utc),
    )

    assert usage_cache_key("client-1", time_range) == "oauthClientUsage.client-1-1704067200000-1704153600000"
