"""A thread-safe LRU cache split into independently locked shards."""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class _Shard(Generic[K, V]):
    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self.lock = threading.Lock()
        self.entries: OrderedDict[K, V] = OrderedDict()


class AsyncLru(Generic[K, V]):
    """LRU cache of ``group`` shards, each holding up to ``group_cap`` entries.

    A key always lands in the same shard, chosen by its hash; eviction is per shard.
    """

    def __init__(self, group: int = 8, group_cap: int = 1024) -> None:
        if group <= 0:
            raise ValueError("group must be positive")
        if group_cap <= 0:
            raise ValueError("group_cap must be positive")
        self._shards: list[_Shard[K, V]] = [_Shard(group_cap) for _ in range(group)]

    def _shard(self, key: K) -> _Shard[K, V]:
        return self._shards[hash(key) % len(self._shards)]

    def put(self, key: K, value: V) -> None:
        """Store ``value`` as the most recently used entry of its shard."""
        shard = self._shard(key)
        with shard.lock:
            shard.entries[key] = value
            shard.entries.move_to_end(key)
            while len(shard.entries) > shard.capacity:
                shard.entries.popitem(last=False)

    def get(self, key: K) -> Optional[V]:
        """The value under ``key``, marked as most recently used; None when absent."""
        shard = self._shard(key)
        with shard.lock:
            if key not in shard.entries:
                return None
            shard.entries.move_to_end(key)
            return shard.entries[key]