from __future__ import annotations

import threading
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar


K = TypeVar("K")
V = TypeVar("V")


@dataclass
class LRUCache(Generic[K, V]):
    """Bounded mapping shared by request threads; every access takes the lock."""

    max_size: int = 4096
    hits: int = field(default=0, init=False)
    misses: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self._store: OrderedDict[K, V] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def get(self, key: K) -> V | None:
        with self._lock:
            if key not in self._store:
                self.misses += 1
                return None
            self.hits += 1
            self._store.move_to_end(key)
            return self._store[key]

    def set(self, key: K, value: V) -> None:
        with self._lock:
            self._store[key] = value
            self._store.move_to_end(key)
            while len(self._store) > self.max_size:
                self._store.popitem(last=False)

    def get_or_compute(self, key: K, compute: Callable[[K], V]) -> V:
        cached = self.get(key)
        if cached is not None:
            return cached
        # Computed outside the lock; concurrent misses may compute twice.
        value = compute(key)
        self.set(key, value)
        return value

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
            self.hits = 0
            self.misses = 0
