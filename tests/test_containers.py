"""
Unit tests for the FIFO queue and ordered set.
"""

import random

import pytest

from gridpath.structures import OrderedSet, Queue


class TestQueue:
    """Test the linked-list FIFO queue."""

    def test_fifo_order(self):
        """Values should come out in the order they went in."""
        q = Queue()
        for i in range(5):
            q.enqueue(i)
        assert [q.dequeue() for _ in range(5)] == [0, 1, 2, 3, 4]

    def test_dequeue_empty_returns_none(self):
        """Dequeue on an empty queue should return None."""
        q = Queue()
        assert q.empty
        assert q.dequeue() is None

    def test_empty_and_len(self):
        """empty and len should track contents."""
        q = Queue()
        q.enqueue("a")
        q.enqueue("b")
        assert not q.empty
        assert len(q) == 2
        q.dequeue()
        q.dequeue()
        assert q.empty
        assert len(q) == 0

    def test_reuse_after_drain(self):
        """The tail should reset once the queue is drained."""
        q = Queue()
        q.enqueue(1)
        q.dequeue()
        q.enqueue(2)
        q.enqueue(3)
        assert q.peek() == 2
        assert list(q) == [2, 3]
        assert q.dequeue() == 2
        assert q.dequeue() == 3

    def test_iteration_does_not_consume(self):
        """Iterating should leave the queue intact."""
        q = Queue()
        for c in "abc":
            q.enqueue(c)
        assert list(q) == ["a", "b", "c"]
        assert len(q) == 3


class TestOrderedSet:
    """Test the insertion-ordered set."""

    def test_keeps_insertion_order(self):
        """Iteration and get() should follow insertion order."""
        s = OrderedSet()
        for x in [3, 1, 2]:
            s.add(x)
        assert list(s) == [3, 1, 2]
        assert s.get(0) == 3
        assert s.index_of(2) == 2

    def test_duplicates_ignored(self):
        """Adding an existing element should do nothing."""
        s = OrderedSet()
        s.add("a")
        s.add("b")
        s.add("a")
        assert s.size == 2
        assert list(s) == ["a", "b"]

    def test_max_length_drops_extra(self):
        """Adds beyond capacity should be silently dropped."""
        s = OrderedSet(max_length=2)
        for x in range(5):
            s.add(x)
        assert list(s) == [0, 1]
        assert not s.has(2)

    def test_remove(self):
        """Removing should keep the rest in order; absent elements are ignored."""
        s = OrderedSet()
        for x in range(4):
            s.add(x)
        s.remove(1)
        s.remove(42)
        assert list(s) == [0, 2, 3]
        assert 1 not in s
        assert s.index_of(1) == -1

    def test_random_pick_is_member(self):
        """random() should always return a member."""
        s = OrderedSet()
        for x in range(10):
            s.add(x)
        rng = random.Random(5)
        picks = {s.random(rng) for _ in range(200)}
        assert picks <= set(range(10))
        # 200 uniform draws over 10 items should hit most of them
        assert len(picks) >= 8

    def test_random_is_reproducible(self):
        """The same seed should give the same picks."""
        s = OrderedSet()
        for x in "abcdef":
            s.add(x)
        first = [s.random(random.Random(3)) for _ in range(3)]
        second = [s.random(random.Random(3)) for _ in range(3)]
        assert first == second

    def test_random_empty_raises(self):
        """random() on an empty set should raise IndexError."""
        with pytest.raises(IndexError):
            OrderedSet().random()

    def test_clear(self):
        """clear() should empty the set."""
        s = OrderedSet()
        s.add(1)
        s.clear()
        assert len(s) == 0
        assert not s.has(1)
