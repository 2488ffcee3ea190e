"""Single-slot, short-TTL cache for the normalized projection list."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ppnfl.models import ProjectionRecord


CACHE_KEY = "nfl_props"


@dataclass
class CacheEntry:
    records: List[ProjectionRecord]
    expires_at: Optional[float]


class ResultCache:
    """Holds the latest record list under one fixed key.

    Entries expire passively ``ttl_seconds`` after they are written; a TTL of
    0 keeps them until overwritten. Writes replace the slot wholesale, so the
    last writer wins.
    """

    def __init__(self, ttl_seconds: float, *, clock: Callable[[], float] = time.monotonic) -> None:
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must be >= 0")
        self.ttl = ttl_seconds
        self._clock = clock
        self._slots: dict[str, CacheEntry] = {}

    def get(self) -> Optional[List[ProjectionRecord]]:
        entry = self._slots.get(CACHE_KEY)
        if entry is None:
            return None
        if entry.expires_at is not None and self._clock() >= entry.expires_at:
            return None
        return entry.records

    def set(self, records: Sequence[ProjectionRecord]) -> None:
        expires_at = self._clock() + self.ttl if self.ttl else None
        self._slots[CACHE_KEY] = CacheEntry(records=list(records), expires_at=expires_at)


__all__ = ["CACHE_KEY", "CacheEntry", "ResultCache"]
