"""
Shared building blocks for the in-memory repositories.

Each table guards its own map with a lock, so concurrent requests served
from the worker thread pool see last-writer-wins semantics per table.
Ids come from one allocator shared by every table of a store.
"""

import itertools
import threading
from datetime import datetime, timezone
from typing import Callable, Generic, Hashable, Iterator, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class IdAllocator:
    """Thread-safe sequential integer id source starting at 1."""

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)


class InMemoryTable(Generic[K, T]):
    """An insertion-ordered map of entities behind a lock."""

    def __init__(self) -> None:
        self._rows: dict[K, T] = {}
        self._lock = threading.Lock()

    def get(self, key: K) -> Optional[T]:
        with self._lock:
            return self._rows.get(key)

    def put(self, key: K, row: T) -> T:
        with self._lock:
            self._rows[key] = row
        return row

    def replace(self, key: K, update: Callable[[T], T]) -> Optional[T]:
        """Apply ``update`` to the row under ``key`` atomically.

        Returns the new row, or None if the key is absent.
        """
        with self._lock:
            current = self._rows.get(key)
            if current is None:
                return None
            new_row = update(current)
            self._rows[key] = new_row
            return new_row

    def upsert(self, key: K, build: Callable[[Optional[T]], T]) -> T:
        """Store ``build(existing_or_none)`` under ``key`` atomically."""
        with self._lock:
            row = build(self._rows.get(key))
            self._rows[key] = row
            return row

    def remove(self, key: K) -> bool:
        with self._lock:
            return self._rows.pop(key, None) is not None

    def values(self) -> list[T]:
        with self._lock:
            return list(self._rows.values())

    def __iter__(self) -> Iterator[T]:
        return iter(self.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)
