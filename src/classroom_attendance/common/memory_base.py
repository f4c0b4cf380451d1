from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Generic, Iterable, Iterator, List, Protocol, Sequence, TypeVar


class HasId(Protocol):
    id: int


T = TypeVar("T", bound=HasId)


class InMemoryTable(Generic[T]):
    """Ordered list of records guarded by one lock per store.

    Writers and readers both go through ``locked()``; there is no isolation
    across calls, so the last write wins.
    """

    def __init__(self, rows: Iterable[T] = ()):
        self._lock = threading.RLock()
        self._rows: List[T] = list(rows)

    @contextmanager
    def locked(self) -> Iterator[List[T]]:
        with self._lock:
            yield self._rows


def next_id(rows: Sequence[HasId]) -> int:
    """max(existing ids) + 1, or 1 for an empty table."""
    return max((r.id for r in rows), default=0) + 1


def index_of(rows: Sequence[HasId], record_id: int) -> int:
    for i, row in enumerate(rows):
        if row.id == record_id:
            return i
    return -1
