"""Stacks backed by a bounded array and by a singly linked list.

The ``Recursive`` variants do their bulk work (copying, rendering and
releasing) with recursive helpers instead of loops. The helpers split the
work in halves, so the recursion depth grows with the logarithm of the size.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional

FULL_MESSAGE = "Stack is full! Please pop before pushing"
EMPTY_MESSAGE = "Stack is empty! Please push before popping"


class StackFullError(Exception):
    """Raised when pushing onto a stack that has reached its capacity."""

    def __init__(self, message: str = FULL_MESSAGE) -> None:
        super().__init__(message)


class StackEmptyError(IndexError):
    """Raised when popping or peeking at an empty stack."""

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


def _link_recursive(values: Sequence[Any], lo: int, hi: int, tail: Optional[_Node]) -> Optional[_Node]:
    """Build a chain holding ``values[lo:hi]`` in order, ending in ``tail``."""
    if hi <= lo:
        return tail
    if hi - lo == 1:
        return _Node(values[lo], tail)
    mid = (lo + hi) // 2
    return _link_recursive(values, lo, mid, _link_recursive(values, mid, hi, tail))


def _unlink_recursive(nodes: Sequence[_Node], lo: int, hi: int) -> None:
    if hi <= lo:
        return
    if hi - lo == 1:
        nodes[lo].next = None
        return
    mid = (lo + hi) // 2
    _unlink_recursive(nodes, lo, mid)
    _unlink_recursive(nodes, mid, hi)


class ArrayStack:
    """A stack holding at most ``max_size`` items."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._items: list[Any] = []

    def copy_from(self, other: ArrayStack) -> None:
        """Replace this stack's capacity and contents with those of ``other``."""
        self.max_size = other.max_size
        self._items = list(other._items)

    def clear(self) -> None:
        """Release the storage; the capacity drops to zero."""
        self._items = []
        self.max_size = 0

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: Any) -> None:
        if len(self._items) >= self.max_size:
            raise StackFullError()
        self._items.append(item)

    def pop(self) -> Any:
        if not self._items:
            raise StackEmptyError()
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise StackEmptyError()
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __str__(self) -> str:
        return " ".join(map(str, self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_size={self.max_size}, items={self._items!r})"


class RecursiveArrayStack(ArrayStack):
    """An array stack whose copy and rendering are recursive."""

    def copy_from(self, other: ArrayStack) -> None:
        source = other._items
        items: list[Any] = [None] * len(source)
        _fill_recursive(source, items, 0, len(source))
        self.max_size = other.max_size
        self._items = items

    def __str__(self) -> str:
        return _join_recursive(self._items)


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def _nodes(self) -> Iterator[_Node]:
        node = self._top
        while node is not None:
            yield node
            node = node.next

    def copy_from(self, other: LinkedStack) -> None:
        """Replace the contents with a copy of ``other``, keeping its order."""
        values = list(other)
        self.clear()
        for value in reversed(values):
            self._top = _Node(value, self._top)
        self._size = len(values)

    def clear(self) -> None:
        node = self._top
        while node is not None:
            node.next, node = None, node.next
        self._top = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, item: Any) -> None:
        self._top = _Node(item, self._top)
        self._size += 1

    def pop(self) -> Any:
        if self._top is None:
            raise StackEmptyError()
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        if self._top is None:
            raise StackEmptyError()
        return self._top.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return " ".join(map(str, self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class RecursiveLinkedStack(LinkedStack):
    """A linked stack whose copy, release and rendering are recursive."""

    def copy_from(self, other: LinkedStack) -> None:
        values = tuple(other)
        self.clear()
        self._top = _link_recursive(values, 0, len(values), None)
        self._size = len(values)

    def clear(self) -> None:
        nodes = tuple(self._nodes())
        _unlink_recursive(nodes, 0, len(nodes))
        self._top = None
        self._size = 0

    def __str__(self) -> str:
        return _join_recursive(tuple(self))