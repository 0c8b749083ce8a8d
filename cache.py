"""TTL cache with lazy eviction and explicit purge.

Entries carry an absolute expiry in epoch milliseconds. Nothing is reclaimed in
the background: expired entries leave the store when ``retrieve`` observes them
or when ``purge`` is called.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Hashable
from typing import Callable, Generic, Optional, TypeVar

from config import load_default_ttl_ms
from models import CacheItem

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class CacheError(Exception):
    """Base class for cache errors."""


class InvalidKeyError(CacheError):
    """Raised when None is used as a key for insert."""


class InvalidValueError(CacheError):
    """Raised when None is inserted as a value."""


class InvalidArgumentError(CacheError):
    """Raised when None or a malformed TTL reaches a lookup or predicate."""


class KeyAlreadyExistsError(CacheError):
    """Raised when inserting over an entry that has not expired yet."""


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def _validate_ttl(ttl_ms: object) -> None:
    if isinstance(ttl_ms, bool) or not isinstance(ttl_ms, int):
        raise InvalidArgumentError(f"TTL must be an integer number of milliseconds, got {ttl_ms!r}")
    if ttl_ms < 0:
        raise InvalidArgumentError(f"TTL must be non-negative, got {ttl_ms}")


class TTLCache(Generic[K, V]):
    """Thread-safe in-memory cache with per-entry TTL expiration.

    Args:
        default_ttl_ms: Lifetime applied when ``insert`` gets no override.
                        None reads TTLCACHE_DEFAULT_TTL_MS (default 60000).
        clock: Returns the current time in milliseconds. Defaults to ``now_ms``.
        is_expired: Optional predicate replacing the clock comparison in
                    ``is_expired``; lets callers simulate expiry per entry.

    Operations run under a reentrant lock that is held while ``clock`` and
    ``is_expired`` are called, so those callables may read the cache from
    the same thread.
    """

    def __init__(
        self,
        default_ttl_ms: Optional[int] = None,
        *,
        clock: Optional[Callable[[], int]] = None,
        is_expired: Optional[Callable[[CacheItem[V]], bool]] = None,
    ) -> None:
        if default_ttl_ms is None:
            default_ttl_ms = load_default_ttl_ms()
        _validate_ttl(default_ttl_ms)
        self._default_ttl = default_ttl_ms
        self._clock = clock or now_ms
        self._expired_predicate = is_expired
        self._store: dict[K, CacheItem[V]] = {}
        self._lock = threading.RLock()

    @property
    def default_ttl_ms(self) -> int:
        return self._default_ttl

    def is_expired(self, item: Optional[CacheItem[V]]) -> bool:
        """Return True once the current time reaches ``item.expires_at``.

        Raises:
            InvalidArgumentError: If item is None.
        """
        if item is None:
            raise InvalidArgumentError("Invalid parameter 'None'")
        if self._expired_predicate is not None:
            return self._expired_predicate(item)
        return self._clock() >= item.expires_at

    def insert(self, key: K, value: V, ttl_ms: Optional[int] = None) -> None:
        """Store a value that stays valid for ``ttl_ms`` (or the default TTL).

        An expired entry under the same key is replaced; a valid one is not.

        Raises:
            InvalidKeyError: If key is None.
            InvalidValueError: If value is None.
            KeyAlreadyExistsError: If a valid entry is stored under key.
            InvalidArgumentError: If ttl_ms is negative or not an integer.
        """
        if key is None:
            raise InvalidKeyError("Can't add object under key 'None'")
        if value is None:
            raise InvalidValueError("Can't add 'None' to cache")
        ttl = self._default_ttl if ttl_ms is None else ttl_ms
        _validate_ttl(ttl)

        with self._lock:
            current = self._store.get(key)
            if current is not None:
                if not self.is_expired(current):
                    logger.debug("Rejected insert over valid key %r", key)
                    raise KeyAlreadyExistsError(
                        f"There already is an object stored under the key '{key}'"
                    )
                logger.debug("Replacing expired entry under key %r", key)
            self._store[key] = CacheItem(value=value, expires_at=self._clock() + ttl)

    def retrieve(self, key: K) -> Optional[V]:
        """Return the cached value, or None if missing or expired.

        An expired entry is removed as part of the lookup.

        Raises:
            InvalidArgumentError: If key is None.
        """
        if key is None:
            raise InvalidArgumentError("Invalid argument 'None'")
        with self._lock:
            item = self._store.get(key)
            if item is None:
                return None
            if self.is_expired(item):
                self._store.pop(key, None)
                logger.debug("Evicted expired entry under key %r on read", key)
                return None
            return item.value

    def purge(self) -> None:
        """Remove every expired entry."""
        with self._lock:
            expired = [k for k, item in list(self._store.items()) if self.is_expired(item)]
            for k in expired:
                self._store.pop(k, None)
        if expired:
            logger.debug("Purged %d expired entries", len(expired))

    def count(self) -> int:
        """Number of valid entries. Expired ones are skipped, not removed."""
        with self._lock:
            return sum(1 for item in list(self._store.values()) if not self.is_expired(item))

    def __len__(self) -> int:
        return self.count()
