"""Bounded, expiring cache for completed tool responses."""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from typing import Callable, Generic, Hashable, Optional, Tuple, TypeVar

from .dates import TimeRange

V = TypeVar("V")

USAGE_CACHE_PREFIX = "oauthClientUsage"


class ResponseCache(Generic[V]):
    """Least-recently-used cache whose entries expire a fixed time after being set.

    Reading an entry marks it as recently used but never extends its lifetime,
    and expired entries are never served.
    """

    def __init__(
        self,
        maxsize: int = 500,
        ttl: float = 300.0,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        if maxsize <= 0:
            raise ValueError("maxsize must be positive")
        self.maxsize = maxsize
        self.ttl = ttl
        self._timer = timer
        self._entries: "OrderedDict[Hashable, Tuple[float, V]]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[V]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            if self._timer() >= expires_at:
                del self._entries[key]
                return None
            self._entries.move_to_end(key)
            return value

    def set(self, key: Hashable, value: V) -> None:
        with self._lock:
            self._entries[key] = (self._timer() + self.ttl, value)
            self._entries.move_to_end(key)
            while len(self._entries) > self.maxsize:
                self._entries.popitem(last=False)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            entry = self._entries.get(key)  # type: ignore[arg-type]
            return entry is not None and self._timer() < entry[0]

    def __len__(self) -> int:
        with self._lock:
            now = self._timer()
            return sum(1 for expires_at, _ in self._entries.values() if now < expires_at)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


def usage_cache_key(client_id: str, time_range: TimeRange) -> str:
    return f"{USAGE_CACHE_PREFIX}.{client_id}-{time_range.start_ms}-{time_range.end_ms}"
