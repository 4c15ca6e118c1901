"""A bounded last-in, first-out stack."""

import sys
from typing import Any, List


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that is at capacity."""


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class Stack:
    """Stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: List[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, item: Any) -> None:
        """Place ``item`` on top of the stack."""
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __repr__(self) -> str:
        return f"Stack(capacity={self._capacity}, items={self._items!r})"


def _check_state(stack: Stack) -> None:
    if stack.is_full():
        print("\nstack is full\n", file=sys.stderr)
    elif stack.is_empty():
        print("\nstack is empty\n", file=sys.stderr)


def _show(stack: Stack) -> None:
    count = len(stack)
    if count:
        print(f"numValues: {count}\tpeeked: {stack.peek()}")
    else:
        print(f"numValues: {count}")
    _check_state(stack)


def main(argv=None) -> int:
    """Fill a stack of ten numbers, then empty it, reporting each step."""
    stack = Stack(10)
    _check_state(stack)

    for value in range(10, 101, 10):
        stack.push(value)
        print(f"pushed: {value}")
        _show(stack)

    while not stack.is_empty():
        print(f"popped: {stack.pop()}")
        _show(stack)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())