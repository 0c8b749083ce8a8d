"""Immutable data structures for cached entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class CacheItem(Generic[V]):
    """Stored value with its absolute expiry in epoch milliseconds."""

    value: V
    expires_at: int
