from __future__ import annotations
import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: float
    fetched_at: float


class _Flight:
    """One in-progress fetch; waiters read its outcome once done is set."""
    def __init__(self):
        self.done = threading.Event()
        self.value: Optional[float] = None
        self.error: Optional[BaseException] = None


class QuoteCache:
    """
    Read-through TTL cache for last traded prices.

    Entries are never evicted; a stale entry stays in place until a fetch for
    its key succeeds. Only one fetch per key is in flight: concurrent callers
    of the same key wait for it and get its value or its exception. The
    mapping lock is never held across a fetch, so other keys are not blocked.
    """
    def __init__(self, ttl_seconds: float = 30.0, clock: Callable[[], float] = time.monotonic):
        self._ttl = float(ttl_seconds)
        self._clock = clock
        self._store: Dict[str, CacheEntry] = {}
        self._flights: Dict[str, _Flight] = {}
        self._lock = threading.Lock()

    @property
    def ttl(self) -> float:
        return self._ttl

    def _is_fresh(self, entry: Optional[CacheEntry]) -> bool:
        return entry is not None and self._clock() - entry.fetched_at < self._ttl

    def get_or_fetch(self, key: str, fetch: Callable[[], float]) -> float:
        with self._lock:
            entry = self._store.get(key)
            if self._is_fresh(entry):
                logger.debug("cache hit for %s", key)
                return entry.value
            flight = self._flights.get(key)
            leader = flight is None
            if leader:
                flight = self._flights[key] = _Flight()

        if not leader:
            logger.debug("waiting on in-flight fetch for %s", key)
            flight.done.wait()
            if flight.error is not None:
                raise flight.error
            return flight.value

        logger.debug("cache miss for %s, fetching", key)
        try:
            value = fetch()
        except BaseException as e:
            flight.error = e
            raise
        else:
            flight.value = value
            fetched = CacheEntry(key=key, value=value, fetched_at=self._clock())
            with self._lock:
                current = self._store.get(key)
                if current is None or current.fetched_at <= fetched.fetched_at:
                    self._store[key] = fetched
            return value
        finally:
            with self._lock:
                self._flights.pop(key, None)
            flight.done.set()

    def peek(self, key: str) -> Optional[CacheEntry]:
        """Return the stored entry for key, fresh or stale."""
        with self._lock:
            return self._store.get(key)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
