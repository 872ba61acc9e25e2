"""
Insertion-ordered set with optional capacity and uniform random pick.

Used as the maze generator's frontier.
"""

from __future__ import annotations

import math
import random as _random
from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class OrderedSet(Generic[T]):
    """
    List-backed set that remembers insertion order.

    Membership is O(1) through a companion dict; removal is linear since
    the remaining elements keep their order.

    Attributes:
        max_length: Capacity; adds beyond it are silently dropped
    """

    def __init__(self, max_length: float = math.inf) -> None:
        self._items: list[T] = []
        self._members: dict[T, None] = {}
        self.max_length = max_length

    def add(self, element: T) -> None:
        if element in self._members or len(self._items) >= self.max_length:
            return
        self._items.append(element)
        self._members[element] = None

    def remove(self, element: T) -> None:
        """Remove element if present."""
        if element not in self._members:
            return
        del self._members[element]
        self._items.remove(element)

    def get(self, index: int) -> T:
        return self._items[index]

    def has(self, element: T) -> bool:
        return element in self._members

    def index_of(self, element: T) -> int:
        """Position of element in insertion order, or -1 if absent."""
        if element not in self._members:
            return -1
        return self._items.index(element)

    def random(self, rng: _random.Random | None = None) -> T:
        """
        Pick an element uniformly at random.

        Args:
            rng: Random source; defaults to the module-level generator

        Raises:
            IndexError: If the set is empty
        """
        if not self._items:
            raise IndexError("random() on an empty OrderedSet")
        return (rng or _random).choice(self._items)

    def clear(self) -> None:
        self._items.clear()
        self._members.clear()

    @property
    def size(self) -> int:
        return len(self._items)

    def __contains__(self, element: object) -> bool:
        return element in self._members

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._items!r})"
