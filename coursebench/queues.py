"""Queues backed by a bounded array and by a singly linked list.

The ``Recursive`` variants do their bulk work (copying, rendering and
releasing) with recursive helpers instead of loops. The helpers split the
work in halves, so the recursion depth grows with the logarithm of the size.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional

FULL_MESSAGE = "Queue is full! Please dequeue before enqueueing"
EMPTY_MESSAGE = "Queue is empty! Please enqueue before dequeuing"


class QueueFullError(Exception):
    """Raised when enqueueing into a queue that has reached its capacity."""

    def __init__(self, message: str = FULL_MESSAGE) -> None:
        super().__init__(message)


class QueueEmptyError(IndexError):
    """Raised when dequeueing from or peeking at an empty queue."""

    def __init__(self, message: str = EMPTY_MESSAGE) -> None:
        super().__init__(message)


@dataclass(slots=True)
class _Node:
    data: Any
    next: Optional[_Node] = None


def _join_recursive(values: Sequence[Any], lo: int = 0, hi: Optional[int] = None) -> str:
    if hi is None:
        hi = len(values)
    if hi <= lo:
        return ""
    if hi - lo == 1:
        return str(values[lo])
    mid = (lo + hi) // 2
    return f"{_join_recursive(values, lo, mid)} {_join_recursive(values, mid, hi)}"


def _fill_recursive(source: Sequence[Any], dest: list[Any], lo: int, hi: int) -> None:
    if hi <= lo:
        return
    if hi - lo == 1:
        dest[lo] = source[lo]
        return
    mid = (lo + hi) // 2
    _fill_recursive(source, dest, lo, mid)
    _fill_recursive(source, dest, mid, hi)


def _unlink_recursive(nodes: Sequence[_Node], lo: int, hi: int) -> None:
    if hi <= lo:
        return
    if hi - lo == 1:
        nodes[lo].next = None
        return
    mid = (lo + hi) // 2
    _unlink_recursive(nodes, lo, mid)
    _unlink_recursive(nodes, mid, hi)


class ArrayQueue:
    """A first-in first-out queue holding at most ``max_size`` items."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._items: deque[Any] = deque()

    def copy_from(self, other: ArrayQueue) -> None:
        """Replace this queue's capacity and contents with those of ``other``."""
        self.max_size = other.max_size
        self._items = deque(other._items)

    def clear(self) -> None:
        """Release the storage; the capacity drops to zero."""
        self._items = deque()
        self.max_size = 0

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, item: Any) -> None:
        if len(self._items) >= self.max_size:
            raise QueueFullError()
        self._items.append(item)

    def dequeue(self) -> Any:
        if not self._items:
            raise QueueEmptyError()
        return self._items.popleft()

    def peek(self) -> Any:
        if not self._items:
            raise QueueEmptyError()
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the rear."""
        return iter(self._items)

    def __str__(self) -> str:
        return " ".join(map(str, self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_size={self.max_size}, items={list(self._items)!r})"


class RecursiveArrayQueue(ArrayQueue):
    """An array queue whose copy and rendering are recursive."""

    def copy_from(self, other: ArrayQueue) -> None:
        source = tuple(other._items)
        items: list[Any] = [None] * len(source)
        _fill_recursive(source, items, 0, len(source))
        self.max_size = other.max_size
        self._items = deque(items)

    def __str__(self) -> str:
        return _join_recursive(tuple(self._items))


class LinkedQueue:
    """An unbounded first-in first-out queue built from linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def clear(self) -> None:
        node = self._head
        while node is not None:
            node.next, node = None, node.next
        self._head = self._tail = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._head is None

    def enqueue(self, item: Any) -> None:
        node = _Node(item)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def dequeue(self) -> Any:
        if self._head is None:
            raise QueueEmptyError()
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        if self._head is None:
            raise QueueEmptyError()
        return self._head.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the rear."""
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return " ".join(map(str, self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class RecursiveLinkedQueue(LinkedQueue):
    """A linked queue whose release and rendering are recursive."""

    def clear(self) -> None:
        nodes = tuple(self._nodes())
        _unlink_recursive(nodes, 0, len(nodes))
        self._head = self._tail = None
        self._size = 0

    def __str__(self) -> str:
        return _join_recursive(tuple(self))