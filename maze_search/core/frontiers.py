"""
Frontier containers for the maze searches.

FIFO for breadth-first, LIFO for depth-first and a keyed min-heap shared
by Dijkstra and A*.
"""

import heapq
import itertools
from collections import deque
from typing import Callable, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")


class FIFOFrontier(Generic[T]):
    """First in, first out."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        return self._items.popleft()

    def peek(self) -> T:
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


class LIFOFrontier(Generic[T]):
    """Last in, first out. Also exposes its contents bottom to top."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        return self._items.pop()

    def peek(self) -> T:
        return self._items[-1]

    def items(self) -> list[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


class PriorityFrontier(Generic[T]):
    """
    Min-heap keyed by an orderable priority.

    Pushing an item that is already queued replaces its priority: the old
    heap entry stays in place and is skipped when it surfaces. Entries
    with equal priority come out in insertion order.
    """

    def __init__(self, key: Optional[Callable[[T], Hashable]] = None) -> None:
        self._heap: list[tuple] = []
        self._latest: dict[Hashable, int] = {}
        self._counter = itertools.count()
        self._key = key or (lambda item: item)

    def push(self, priority, item: T) -> None:
        uid = next(self._counter)
        self._latest[self._key(item)] = uid
        heapq.heappush(self._heap, (priority, uid, item))

    def pop(self) -> T:
        """
        Remove and return the item with the lowest priority.

        Raises:
            IndexError: If the frontier is empty.
        """
        while self._heap:
            _, uid, item = heapq.heappop(self._heap)
            key = self._key(item)
            if self._latest.get(key) == uid:
                del self._latest[key]
                return item
        raise IndexError("pop from an empty frontier")

    def __contains__(self, item: T) -> bool:
        return self._key(item) in self._latest

    def __len__(self) -> int:
        return len(self._latest)

    def __bool__(self) -> bool:
        return bool(self._latest)
