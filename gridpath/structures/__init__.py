"""
Container module.

Provides the data structures the search algorithms and maze generator
are built on:
- MinPriorityQueue: Indexed binary heap with decrease-key and delete
- Queue: Linked-list FIFO queue
- OrderedSet: Insertion-ordered set with random pick
"""

from gridpath.structures.linked_queue import Queue
from gridpath.structures.ordered_set import OrderedSet
from gridpath.structures.priority_queue import MinPriorityQueue, QueueNode

__all__ = [
    "MinPriorityQueue",
    "QueueNode",
    "Queue",
    "OrderedSet",
]
