"""In-process response cache backed by cachetools."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Optional

from cachetools import TLRUCache

from ..types import CacheMode

logger = logging.getLogger(__name__)
LOG_PREFIX = "[CACHE]"

DEFAULT_MAXSIZE = 1024


@dataclass(frozen=True)
class _Entry:
    value: Any
    seconds: float
    mode: CacheMode


def _time_to_use(_key: str, entry: _Entry, now: float) -> float:
    return now + entry.seconds


class MemoryCache:
    """
    Bounded in-memory store with absolute or sliding expiration per entry.

    Sliding entries are re-inserted on every hit, which moves their expiry
    ``duration`` past the time of the hit.
    """

    def __init__(self, maxsize: int = DEFAULT_MAXSIZE, timer: Callable[[], float] = time.monotonic) -> None:
        self._store = TLRUCache(maxsize=maxsize, ttu=_time_to_use, timer=timer)
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            if entry.mode == CacheMode.SLIDING:
                self._store[key] = entry
        return entry.value

    def set(self, key: str, value: Any, duration: timedelta, mode: CacheMode = CacheMode.ABSOLUTE) -> None:
        seconds = duration.total_seconds()
        if seconds <= 0:
            logger.debug(f"{LOG_PREFIX} Skipping non-positive duration for key={key!r}")
            return
        with self._lock:
            self._store[key] = _Entry(value=value, seconds=seconds, mode=CacheMode(mode))

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        with self._lock:
            self._store.expire()
            return len(self._store)


def create_memory_cache(maxsize: int = DEFAULT_MAXSIZE, timer: Callable[[], float] = time.monotonic) -> MemoryCache:
    """Factory for an in-process cache the caller owns."""
    return MemoryCache(maxsize=maxsize, timer=timer)


__all__ = ["MemoryCache", "create_memory_cache"]
