"""A bounded stack of values with optional doubling growth and positional access."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack that cannot grow."""


class StackUnderflowError(Exception):
    """Raised when reading from or removing out of an empty stack."""


class Stack:
    """A stack with a fixed capacity, or one that doubles its capacity when full.

    Positions used by :meth:`push_at` and :meth:`pop_at` count from the bottom
    of the stack, starting at 0. Iteration runs from the top down.
    """

    def __init__(self, capacity: int, growable: bool = False) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._growable = growable
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """The number of values the stack can hold before it is full."""
        return self._capacity

    @property
    def growable(self) -> bool:
        """Whether a full stack doubles its capacity instead of overflowing."""
        return self._growable

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def _make_room(self) -> None:
        if not self.is_full():
            return
        if not self._growable:
            raise StackOverflowError("Stack Overflow")
        self._capacity = self._capacity * 2 if self._capacity else 1

    def push(self, value: Any) -> None:
        """Put a value on top, doubling the capacity first if the stack grows."""
        self._make_room()
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("Stack Underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("Stack Underflow")
        return self._items[-1]

    def push_at(self, position: int, value: Any) -> None:
        """Insert a value at a position counted from the bottom.

        A position equal to the current size places the value on top.
        """
        self._make_room()
        if not 0 <= position <= len(self._items):
            raise IndexError(f"Invalid Position: {position}")
        self._items.insert(position, value)

    def pop_at(self, position: int) -> Any:
        """Remove and return the value at a position counted from the bottom."""
        if not self._items:
            raise StackUnderflowError("Stack Underflow")
        if not 0 <= position < len(self._items):
            raise IndexError(f"Invalid Position: {position}")
        return self._items.pop(position)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"growable={self._growable}, items={self._items!r})"
        )