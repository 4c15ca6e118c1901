"""An unbounded first-in, first-out queue."""

import sys
from collections import deque
from typing import Any, Deque, Iterable, Iterator


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


class Queue:
    """FIFO queue with access to both its front and its rear."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: Deque[Any] = deque(items)

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front item without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def rear(self) -> Any:
        """Return the rear item without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def is_empty(self) -> bool:
        return not self._items


def _check_state(queue: Queue) -> None:
    if queue.is_empty():
        print("\nqueue is empty\n", file=sys.stderr)


def _show(queue: Queue) -> None:
    count = len(queue)
    if count:
        print(f"numValues: {count}\tfront: {queue.front()}\tback: {queue.rear()}")
    else:
        print(f"numValues: {count}")
    _check_state(queue)


def main(argv=None) -> int:
    """Enqueue ten numbers, then dequeue them all, reporting each step."""
    queue = Queue()
    _check_state(queue)

    for value in range(10, 101, 10):
        queue.enqueue(value)
        print(f"enqueued: {value}")
        _show(queue)
    print()

    while not queue.is_empty():
        print(f"dequeued: {queue.dequeue()}")
        _show(queue)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())