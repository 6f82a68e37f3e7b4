"""Array-backed binary heap used as a priority queue."""

from __future__ import annotations

import logging
import operator
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from spgraph.logging import get_logger

logger = get_logger(__name__)

V = TypeVar("V")

#: Strict "comes before" relation between two queued values.
Comparator = Callable[[V, V], bool]


class PriorityQueue(Generic[V]):
    """
    Binary heap over values with a total order, optionally bounded.

    A single comparator decides the order for both sift directions. With the
    default ``operator.lt`` the queue is a min-queue: ``pop`` returns the
    smallest live value.

    Attributes:
        max_size: Upper bound on live elements, or None for unbounded.
    """

    def __init__(
        self,
        data: Optional[Iterable[V]] = None,
        max_size: Optional[int] = None,
        less: Comparator = operator.lt,
    ) -> None:
        """
        Initialize a PriorityQueue.

        Args:
            data: Initial (unsorted) elements. They become live and are
                heapified; if they exceed max_size the extremal ones are evicted.
            max_size: Optional bound on the number of live elements.
            less: Returns True when the first argument must be popped before
                the second.

        Raises:
            ValueError: If max_size is given and is not a positive integer.
        """
        if max_size is not None and max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")

        self.max_size = max_size
        self._less = less
        self._data: List[V] = list(data) if data is not None else []

        for i in reversed(range(len(self._data) // 2)):
            self._sift_down(i)

        if max_size is not None:
            while len(self._data) > max_size:
                self.pop()

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"PriorityQueue({self._data!r}, max_size={self.max_size!r})"

    def size(self) -> int:
        """Number of live elements."""
        return len(self._data)

    def is_full(self) -> bool:
        return self.max_size is not None and len(self._data) >= self.max_size

    def snapshot(self) -> List[V]:
        """Return a copy of the live backing array in heap order."""
        return list(self._data)

    def push(self, value: V) -> None:
        """
        Insert a value, evicting the current extremal element when full.

        Args:
            value: Value to insert.
        """
        if self.is_full():
            evicted = self.pop()
            logger.debug("Queue at capacity %d, evicted %s", self.max_size, evicted)

        self._data.append(value)
        self._sift_up(len(self._data) - 1)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("push %s -> %s", value, self.snapshot())

    def pop(self) -> Optional[V]:
        """
        Remove and return the extremal element.

        Returns:
            The root of the heap, or None when the queue is empty.
        """
        if not self._data:
            return None

        top = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("pop %s -> %s", top, self.snapshot())
        return top

    def _sift_up(self, i: int) -> None:
        data = self._data
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(data[i], data[parent]):
                break
            data[i], data[parent] = data[parent], data[i]
            i = parent

    def _sift_down(self, i: int) -> None:
        data = self._data
        size = len(data)
        while True:
            left = 2 * i + 1
            right = left + 1
            best = i
            if left < size and self._less(data[left], data[best]):
                best = left
            if right < size and self._less(data[right], data[best]):
                best = right
            if best == i:
                return
            data[i], data[best] = data[best], data[i]
            i = best


def build_priority_queue(
    data: Optional[Iterable[V]] = None,
    max_size: Optional[int] = None,
    less: Comparator = operator.lt,
) -> PriorityQueue[V]:
    """
    Create a PriorityQueue.

    Args:
        data: Initial (unsorted) elements, or None for an empty queue.
        max_size: Optional bound on the number of live elements.
        less: Ordering used by both sift directions (min-queue by default).

    Returns:
        A new PriorityQueue.
    """
    return PriorityQueue(data, max_size=max_size, less=less)
