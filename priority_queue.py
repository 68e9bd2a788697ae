"""
Binary-heap priority queue shared by A*, Dijkstra and Jarník/Prim.

Wraps Python's heapq. Items are compared with ``<`` only; a descending queue
wraps each item so the comparison is inverted and heapq's min-heap behaves as
a max-heap.
"""

from __future__ import annotations

from typing import Generic, Iterable, List, Optional, TypeVar
import heapq

T = TypeVar("T")


class _Descending(Generic[T]):
    """Heap entry whose ordering is the reverse of the wrapped item's."""

    __slots__ = ("item",)

    def __init__(self, item: T) -> None:
        self.item = item

    def __lt__(self, other: "_Descending[T]") -> bool:
        return other.item < self.item  # type: ignore[operator]


class PriorityQueue(Generic[T]):
    """
    Heap-ordered queue of comparable items.

    With ``ascending=True`` (the default) ``pop`` returns the smallest item,
    otherwise the largest. Equal items come out in no particular order: the
    heap is not stable and insertion order is not used as a tie-breaker.
    """

    def __init__(self, ascending: bool = True, starting_values: Iterable[T] = ()) -> None:
        self._ascending = ascending
        self._heap: List = [self._wrap(item) for item in starting_values]
        heapq.heapify(self._heap)

    @property
    def ascending(self) -> bool:
        return self._ascending

    @property
    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, item: T) -> None:
        """Insert ``item`` and restore heap order (sift-up)."""
        heapq.heappush(self._heap, self._wrap(item))

    def pop(self) -> Optional[T]:
        """
        Remove and return the extremal item, or None when the queue is empty.

        None is therefore not a meaningful item to store.
        """
        if not self._heap:
            return None
        return self._unwrap(heapq.heappop(self._heap))

    def peek(self) -> Optional[T]:
        """Return the extremal item without removing it."""
        if not self._heap:
            return None
        return self._unwrap(self._heap[0])

    def _wrap(self, item: T):
        return item if self._ascending else _Descending(item)

    def _unwrap(self, entry) -> T:
        return entry if self._ascending else entry.item

    def __repr__(self) -> str:
        order = "ascending" if self._ascending else "descending"
        return f"PriorityQueue({order}, size={len(self._heap)})"
