"""Lock-striped dictionary safe for concurrent writers."""

from __future__ import annotations

from collections.abc import Hashable, Iterator, MutableMapping
from threading import Lock
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_STRIPES = 16


class StripedDict(MutableMapping[K, V], Generic[K, V]):
    """Mapping split into independent stripes, each with its own lock.

    Writers touching different stripes never contend. Every mutation of a
    stripe happens under that stripe's lock, so concurrent `put` calls never
    lose updates.
    """

    def __init__(self, stripes: int = DEFAULT_STRIPES) -> None:
        if stripes < 1:
            raise ValueError(f"stripes must be >= 1, got {stripes}")
        self._stripes: list[dict[K, V]] = [{} for _ in range(stripes)]
        self._locks = [Lock() for _ in range(stripes)]

    @property
    def stripe_count(self) -> int:
        return len(self._stripes)

    def _index(self, key: K) -> int:
        return hash(key) % len(self._stripes)

    def put(self, key: K, value: V) -> None:
        index = self._index(key)
        with self._locks[index]:
            self._stripes[index][key] = value

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __getitem__(self, key: K) -> V:
        index = self._index(key)
        with self._locks[index]:
            return self._stripes[index][key]

    def __delitem__(self, key: K) -> None:
        index = self._index(key)
        with self._locks[index]:
            del self._stripes[index][key]

    def __contains__(self, key: object) -> bool:
        try:
            index = hash(key) % len(self._stripes)
        except TypeError:
            return False
        with self._locks[index]:
            return key in self._stripes[index]

    def __len__(self) -> int:
        total = 0
        for lock, stripe in zip(self._locks, self._stripes):
            with lock:
                total += len(stripe)
        return total

    def __iter__(self) -> Iterator[K]:
        # Iterates over a copy; concurrent writes after the call are not seen.
        return iter(self.snapshot())

    def clear(self) -> None:
        for lock, stripe in zip(self._locks, self._stripes):
            with lock:
                stripe.clear()

    def snapshot(self) -> dict[K, V]:
        """Returns a plain dict copy of the current contents."""

        merged: dict[K, V] = {}
        for lock, stripe in zip(self._locks, self._stripes):
            with lock:
                merged.update(stripe)
        return merged

    def __repr__(self) -> str:
        return f"{type(self).__name__}(stripes={self.stripe_count}, size={len(self)})"
