from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CacheEntry:
    data: Any
    timestamp: datetime


class CacheStore:
    """Process-lifetime map from request key to the last payload seen for it.

    The store never evicts. Entries go stale once they are older than the
    caller's TTL and are overwritten by the next fetch for the same key.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow) -> None:
        self._entries: Dict[str, CacheEntry] = {}
        self._clock = clock

    def get(self, key: str) -> Optional[CacheEntry]:
        return self._entries.get(key)

    def put(self, key: str, data: Any) -> CacheEntry:
        entry = CacheEntry(data=data, timestamp=self._clock())
        self._entries[key] = entry
        return entry

    def is_fresh(self, entry: CacheEntry, ttl: timedelta) -> bool:
        return self._clock() - entry.timestamp < ttl

    def get_fresh(self, key: str, ttl: timedelta) -> Optional[CacheEntry]:
        entry = self.get(key)
        if entry is None or not self.is_fresh(entry, ttl):
            return None
        return entry

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries
