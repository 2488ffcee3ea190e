import pytest

from ppnfl.cache import ResultCache
from ppnfl.models import ProjectionRecord


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def _records() -> list[ProjectionRecord]:
    return [ProjectionRecord(Player="J. Doe", Stat="Passing Yards", Line=24.5, id="1")]


def test_get_on_empty_cache_misses():
    assert ResultCache(60, clock=FakeClock()).get() is None


def test_set_then_get_within_ttl_returns_records():
    clock = FakeClock()
    cache = ResultCache(60, clock=clock)
    records = _records()

    cache.set(records)
    clock.now += 59.9

    assert cache.get() == records


def test_get_after_ttl_misses():
    clock = FakeClock()
    cache = ResultCache(60, clock=clock)

    cache.set(_records())
    clock.now += 60

    assert cache.get() is None


def test_set_resets_expiry_and_last_write_wins():
    clock = FakeClock()
    cache = ResultCache(60, clock=clock)
    cache.set(_records())

    clock.now += 50
    newer = [ProjectionRecord(Player="R. Roe", Stat="Rush Yards", Line=None, id="2")]
    cache.set(newer)
    clock.now += 50

    assert cache.get() == newer


def test_empty_list_is_a_hit():
    cache = ResultCache(60, clock=FakeClock())
    cache.set([])
    assert cache.get() == []


def test_zero_ttl_never_expires():
    clock = FakeClock()
    cache = ResultCache(0, clock=clock)
    cache.set(_records())
    clock.now += 10_000
    assert cache.get() == _records()


def test_negative_ttl_rejected():
    with pytest.raises(ValueError):
        ResultCache(-1)
