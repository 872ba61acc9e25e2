"""
Indexed binary min-heap with decrease-key and delete-by-key.

Unlike heapq, every entry is addressable by a string key, so a search can
lower the priority of a cell already in the open set instead of pushing a
duplicate entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class QueueNode(Generic[T]):
    """
    A single heap entry.

    Attributes:
        value: Payload stored in the queue
        priority: Sort key (lowest comes out first)
        key: Unique identifier within the queue
        sequence: Insertion counter, breaks ties between equal priorities
    """

    value: T
    priority: float
    key: str
    sequence: int = field(default=0, compare=False)


class MinPriorityQueue(Generic[T]):
    """
    Binary min-heap backed by a list plus a key -> index map.

    The index map is kept consistent on every swap. Entries with equal
    priority come out in insertion order; callers should not depend on
    that beyond reproducibility.
    """

    def __init__(self) -> None:
        self._data: list[QueueNode[T]] = []
        self._index: dict[str, int] = {}
        self._counter = 0

    @staticmethod
    def _parent(i: int) -> int:
        return (i - 1) // 2

    def _less(self, i: int, j: int) -> bool:
        a, b = self._data[i], self._data[j]
        return (a.priority, a.sequence) < (b.priority, b.sequence)

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]
        self._index[self._data[i].key] = i
        self._index[self._data[j].key] = j

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = self._parent(i)
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        n = len(self._data)
        while True:
            left, right = 2 * i + 1, 2 * i + 2
            smallest = i
            if left < n and self._less(left, smallest):
                smallest = left
            if right < n and self._less(right, smallest):
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def insert(self, value: T, priority: float, key: str) -> None:
        """
        Add value under key.

        If key is already queued this only ever lowers its priority
        (see decrease_priority); it never raises it.
        """
        if key in self._index:
            self.decrease_priority(key, priority)
            return

        self._counter += 1
        self._data.append(QueueNode(value, priority, key, self._counter))
        i = len(self._data) - 1
        self._index[key] = i
        self._sift_up(i)

    def extract_min(self) -> QueueNode[T] | None:
        """Remove and return the lowest-priority node, or None if empty."""
        if not self._data:
            return None

        root = self._data[0]
        last = self._data.pop()
        del self._index[root.key]

        if self._data:
            self._data[0] = last
            self._index[last.key] = 0
            self._sift_down(0)

        return root

    def decrease_priority(self, key: str, new_priority: float) -> None:
        """Lower the priority of key. No-op if absent or not an improvement."""
        i = self._index.get(key)
        if i is None or new_priority >= self._data[i].priority:
            return

        self._data[i].priority = new_priority
        self._sift_up(i)

    def delete(self, key: str) -> bool:
        """
        Remove the entry for key.

        Returns:
            True if an entry was removed, False if key was not queued
        """
        i = self._index.get(key)
        if i is None:
            return False

        last = len(self._data) - 1
        if i != last:
            self._swap(i, last)
        removed = self._data.pop()
        del self._index[removed.key]

        if i < len(self._data):
            if i > 0 and self._less(i, self._parent(i)):
                self._sift_up(i)
            else:
                self._sift_down(i)

        return True

    def has(self, key: str) -> bool:
        return key in self._index

    def peek(self) -> QueueNode[T] | None:
        """The lowest-priority node without removing it, or None if empty."""
        return self._data[0] if self._data else None

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def keys(self) -> list[str]:
        """Keys of all queued entries, in heap (not priority) order."""
        return [node.key for node in self._data]

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self._data)})"
