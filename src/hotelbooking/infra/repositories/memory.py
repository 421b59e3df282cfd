"""In-memory repository for development and tests.

Keeps entities in insertion order. add() assigns a sequential integer id
to entities whose id is None; entities are stored by reference.
"""

from __future__ import annotations

import itertools
from threading import Lock
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    def __init__(self, entities: Iterable[T] = ()) -> None:
        self._lock = Lock()
        self._entities: list[T] = []
        self._ids = itertools.count(1)
        for entity in entities:
            self.add(entity)

    def get_all(self) -> list[T]:
        # Copy so callers iterating the snapshot never see a concurrent add.
        with self._lock:
            return list(self._entities)

    def add(self, entity: T) -> None:
        with self._lock:
            if getattr(entity, "id", None) is None:
                entity.id = next(self._ids)  # type: ignore[attr-defined]
            else:
                # Keep generated ids clear of explicitly provided ones.
                self._ids = itertools.count(max(entity.id, self._max_id()) + 1)  # type: ignore[attr-defined]
            self._entities.append(entity)

    def _max_id(self) -> int:
        return max((getattr(e, "id", 0) or 0 for e in self._entities), default=0)
