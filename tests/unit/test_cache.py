from datetime import datetime, timedelta, timezone

from src.beluga_content.tools.cache import CacheStore


class FakeClock:
    def __init__(self) -> None:
        self.now = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def test_get_missing_key_returns_none() -> None:
    store = CacheStore()
    assert store.get("missing") is None
    assert len(store) == 0


def test_put_records_payload_and_clock_time() -> None:
    clock = FakeClock()
    store = CacheStore(clock=clock)

    payload = [{"_id": "1"}]
    entry = store.put("key", payload)

    assert entry.data is payload
    assert entry.timestamp == clock.now
    assert store.get("key") is entry
    assert "key" in store


def test_entry_is_fresh_only_strictly_inside_ttl() -> None:
    clock = FakeClock()
    store = CacheStore(clock=clock)
    ttl = timedelta(minutes=5)
    store.put("key", "data")

    clock.advance(minutes=4, seconds=59)
    assert store.get_fresh("key", ttl) is not None

    clock.advance(seconds=1)
    assert store.get_fresh("key", ttl) is None


def test_stale_entries_are_kept_until_overwritten() -> None:
    clock = FakeClock()
    store = CacheStore(clock=clock)
    ttl = timedelta(minutes=5)
    store.put("key", "old")

    clock.advance(minutes=10)
    assert store.get_fresh("key", ttl) is None
    assert store.get("key").data == "old"
    assert len(store) == 1

    store.put("key", "new")
    assert store.get_fresh("key", ttl).data == "new"
    assert len(store) == 1


def test_stores_are_independent() -> None:
    first = CacheStore()
    second = CacheStore()
    first.put("key", 1)

    assert second.get("key") is None
    first.clear()
    assert len(first) == 0
