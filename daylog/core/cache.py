from __future__ import annotations

import enum
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional, Tuple, TypeVar

T = TypeVar("T")


class CacheTier(str, enum.Enum):
    corpus = "corpus"
    selection = "selection"
    result = "result"


@dataclass(slots=True)
class TierStats:
    entries: int = 0
    hits: int = 0
    misses: int = 0


class CacheService:
    """In-memory cache with one namespace per tier and a lock per key.

    Keys are supplied by the caller and never derived from content. Entries
    live until :meth:`clear` is called; there is no eviction.
    """

    def __init__(self) -> None:
        self._tiers: Dict[CacheTier, Dict[Hashable, Any]] = {tier: {} for tier in CacheTier}
        self._hits: Dict[CacheTier, int] = {tier: 0 for tier in CacheTier}
        self._misses: Dict[CacheTier, int] = {tier: 0 for tier in CacheTier}
        self._locks: Dict[Tuple[CacheTier, Hashable], threading.RLock] = {}
        self._guard = threading.Lock()

    def lock(self, tier: CacheTier, key: Hashable) -> threading.RLock:
        """Return the lock guarding ``key`` in ``tier``, creating it on first use."""
        with self._guard:
            lock = self._locks.get((tier, key))
            if lock is None:
                lock = threading.RLock()
                self._locks[(tier, key)] = lock
            return lock

    def get(self, tier: CacheTier, key: Hashable) -> Optional[Any]:
        with self._guard:
            value = self._tiers[tier].get(key)
            if value is None:
                self._misses[tier] += 1
            else:
                self._hits[tier] += 1
            return value

    def insert(self, tier: CacheTier, key: Hashable, value: Any) -> None:
        if value is None:
            raise ValueError("Cannot cache None")
        with self._guard:
            self._tiers[tier][key] = value

    def get_or_create(self, tier: CacheTier, key: Hashable, factory: Callable[[], T]) -> T:
        """Return the cached value or build it once under the key's lock.

        Concurrent callers asking for the same key wait for the first one and
        then read its result instead of running ``factory`` again.
        """
        with self.lock(tier, key):
            cached = self.get(tier, key)
            if cached is not None:
                return cached
            value = factory()
            self.insert(tier, key, value)
            return value

    def contains(self, tier: CacheTier, key: Hashable) -> bool:
        with self._guard:
            return key in self._tiers[tier]

    def clear(self, tier: Optional[CacheTier] = None) -> None:
        with self._guard:
            targets = [tier] if tier is not None else list(CacheTier)
            for target in targets:
                self._tiers[target].clear()
                self._hits[target] = 0
                self._misses[target] = 0
            # lock() recreates these on demand
            self._locks = {
                (lock_tier, key): lock
                for (lock_tier, key), lock in self._locks.items()
                if lock_tier not in targets
            }

    def stats(self) -> Dict[CacheTier, TierStats]:
        with self._guard:
            return {
                tier: TierStats(
                    entries=len(self._tiers[tier]),
                    hits=self._hits[tier],
                    misses=self._misses[tier],
                )
                for tier in CacheTier
            }


_default_cache = CacheService()


def get_cache() -> CacheService:
    """Return the process-wide default cache service."""
    return _default_cache


__all__ = ["CacheService", "CacheTier", "TierStats", "get_cache"]
