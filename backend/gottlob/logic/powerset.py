"""
Powerset enumeration.

Produces every subset of a finite collection exactly once, lazily, by
treating the inclusion flags of the items as a binary counter.
"""

from __future__ import annotations

from typing import FrozenSet, Generic, Hashable, Iterable, Iterator, List, TypeVar

T = TypeVar("T", bound=Hashable)


class PowerSet(Generic[T]):
    """
    Single-use iterator over all subsets of ``items``.

    The empty set comes first. Each step clears the leading run of set
    flags and sets the next clear one; once the carry runs off the end,
    the iterator is exhausted. Build a new ``PowerSet`` to enumerate again.
    """

    def __init__(self, items: Iterable[T]):
        self._items: List[List] = []
        seen = set()
        for item in items:
            if item in seen:
                continue
            seen.add(item)
            self._items.append([False, item])
        self._done = False

    def __len__(self) -> int:
        """Total number of subsets, not the number remaining."""
        return 2 ** len(self._items)

    def __iter__(self) -> Iterator[FrozenSet[T]]:
        return self

    def __next__(self) -> FrozenSet[T]:
        if self._done:
            raise StopIteration

        subset = frozenset(item for included, item in self._items if included)

        carrying = True
        for entry in self._items:
            if not carrying:
                break
            if entry[0]:
                entry[0] = False
            else:
                entry[0] = True
                carrying = False

        if carrying:
            self._done = True
        return subset


def powerset(items: Iterable[T]) -> PowerSet[T]:
    """Convenience constructor for ``PowerSet``."""
    return PowerSet(items)
