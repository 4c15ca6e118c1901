"""A singly linked list that keeps its items in ascending order."""

from bisect import bisect_left
from typing import Any, Iterable, Iterator, List


class SortedLinkedList:
    """Ordered collection; new items go before any equal items already held."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: List[Any] = []
        for item in items:
            self.insert(item)

    def _position(self, item: Any) -> int:
        # First position whose stored value is not less than ``item``.
        return bisect_left(self._items, item)

    def _find(self, item: Any) -> int:
        position = self._position(item)
        if position < len(self._items) and self._items[position] == item:
            return position
        raise ValueError(f"{item!r} not in list")

    def insert(self, item: Any) -> None:
        """Insert ``item`` ahead of the first stored value that is not smaller."""
        self._items.insert(self._position(item), item)

    def remove(self, item: Any) -> Any:
        """Remove and return the stored value equal to ``item``."""
        return self._items.pop(self._find(item))

    def retrieve(self, item: Any) -> Any:
        """Return the stored value equal to ``item``."""
        return self._items[self._find(item)]

    def front(self) -> Any:
        """Return the smallest item."""
        if not self._items:
            raise IndexError("list is empty")
        return self._items[0]

    def rear(self) -> Any:
        """Return the largest item."""
        if not self._items:
            raise IndexError("list is empty")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SortedLinkedList({self._items!r})"

    def is_empty(self) -> bool:
        return not self._items

    def display(self) -> str:
        """Return the items joined by arrows, front to rear."""
        return " -> ".join(str(item) for item in self._items)


def _check_state(items: SortedLinkedList) -> None:
    if items.is_empty():
        print("\nlist is empty\n")


def _show(items: SortedLinkedList) -> None:
    print(items.display())
    count = len(items)
    if count:
        print(f"numValues: {count}\tfront: {items.front()}\trear: {items.rear()}")
    else:
        print(f"numValues: {count}")
    _check_state(items)


def main(argv=None) -> int:
    """Insert, retrieve and remove a handful of numbers, reporting each step."""
    items = SortedLinkedList()
    _check_state(items)

    for value in range(10, 51, 10):
        items.insert(value)
        print(f"inserted {value}")
        _show(items)
    print()

    for value in (10, 20):
        found = items.retrieve(value)
        print(f"retrieved {found}")
        _show(items)
    print()

    for value in range(50, 9, -10):
        removed = items.remove(value)
        print(f"removed {removed}")
        _show(items)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())