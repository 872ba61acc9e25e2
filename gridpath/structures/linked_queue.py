"""
FIFO queue as a singly linked list with head and tail references.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class _ListNode(Generic[T]):
    value: T
    next: _ListNode[T] | None = None


class Queue(Generic[T]):
    """
    First-in, first-out queue.

    enqueue appends at the tail and dequeue removes from the head, both
    in O(1).
    """

    def __init__(self) -> None:
        self._head: _ListNode[T] | None = None
        self._tail: _ListNode[T] | None = None
        self._size = 0

    def enqueue(self, value: T) -> None:
        node = _ListNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def dequeue(self) -> T | None:
        """Remove and return the oldest value, or None if the queue is empty."""
        if self._head is None:
            return None

        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def peek(self) -> T | None:
        return self._head.value if self._head is not None else None

    @property
    def empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next
