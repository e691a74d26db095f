"""A container that keeps objects both in insertion order and by key."""

from __future__ import annotations

import copy as _copy
from typing import Any, Generic, Hashable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class IndexedMap(Generic[K, V]):
    """Objects reachable by position and by key.

    Inserting under an existing key appends the object again and makes the key
    refer to the new object.
    """

    def __init__(self) -> None:
        self._keys: list[K] = []
        self._values: list[V] = []
        self._map: dict[K, V] = {}

    def __len__(self) -> int:
        return len(self._values)

    def at(self, i: int) -> V:
        """The object at position i."""
        return self._values[i]

    def __getitem__(self, key: K) -> V:
        return self._map[key]

    def insert(self, key: K, obj: V) -> None:
        self._keys.append(key)
        self._values.append(obj)
        self._map[key] = obj

    def append(self, obj: Any) -> None:
        """Insert obj under the key returned by its key() method."""
        self.insert(obj.key(), obj)

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __iter__(self) -> Iterator[V]:
        return iter(list(self._values))

    def clear(self) -> None:
        self._keys.clear()
        self._values.clear()
        self._map.clear()

    def copy(self) -> "IndexedMap[K, V]":
        """A new map holding copies of the objects under the same keys."""
        result: IndexedMap[K, V] = type(self)()
        for key, obj in zip(self._keys, self._values):
            result.insert(key, _copy.copy(obj))
        return result

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in zip(self._keys, self._values))
        return f"IndexedMap({{{items}}})"