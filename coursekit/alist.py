"""An array-backed list that grows by half its capacity when full."""

import sys
from typing import Any, Iterator, List

_MIN_CAPACITY = 2


class AList:
    """Ordered list with an explicit capacity that grows by 50% on demand."""

    def __init__(self, capacity: int = 5) -> None:
        self._capacity = max(capacity, _MIN_CAPACITY)
        self._items: List[Any] = []

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"AList(capacity={self._capacity}, items={self._items!r})"

    def _grow_if_full(self) -> None:
        if self.is_full():
            self._capacity += self._capacity // 2

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def _require_items(self) -> None:
        if not self._items:
            raise IndexError("list is empty")

    def insert_front(self, item: Any) -> None:
        """Insert ``item`` before every other item."""
        self._grow_if_full()
        self._items.insert(0, item)

    def insert_back(self, item: Any) -> None:
        """Append ``item`` after every other item."""
        self._grow_if_full()
        self._items.append(item)

    def insert_at(self, item: Any, index: int) -> None:
        """Insert ``item`` at ``index``; ``index`` may equal the length."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        self._grow_if_full()
        self._items.insert(index, item)

    def remove_front(self) -> Any:
        """Remove and return the first item."""
        self._require_items()
        return self._items.pop(0)

    def remove_back(self) -> Any:
        """Remove and return the last item."""
        self._require_items()
        return self._items.pop()

    def remove_at(self, index: int) -> Any:
        """Remove and return the item at ``index``."""
        self._check_index(index)
        return self._items.pop(index)

    def remove(self, item: Any) -> Any:
        """Remove and return the first stored item equal to ``item``."""
        for position, stored in enumerate(self._items):
            if stored == item:
                return self._items.pop(position)
        raise ValueError(f"{item!r} not in list")

    def retrieve_front(self) -> Any:
        """Return the first item."""
        self._require_items()
        return self._items[0]

    def retrieve_back(self) -> Any:
        """Return the last item."""
        self._require_items()
        return self._items[-1]

    def retrieve_at(self, index: int) -> Any:
        """Return the item at ``index``."""
        self._check_index(index)
        return self._items[index]

    def retrieve(self, item: Any) -> Any:
        """Return the first stored item equal to ``item``."""
        for stored in self._items:
            if stored == item:
                return stored
        raise ValueError(f"{item!r} not in list")

    def update_front(self, item: Any) -> None:
        """Replace the first item."""
        self._require_items()
        self._items[0] = item

    def update_back(self, item: Any) -> None:
        """Replace the last item."""
        self._require_items()
        self._items[-1] = item

    def update_at(self, item: Any, index: int) -> None:
        """Replace the item at ``index``."""
        self._check_index(index)
        self._items[index] = item

    def update(self, item: Any) -> None:
        """Replace the first stored item equal to ``item`` with ``item``."""
        for position, stored in enumerate(self._items):
            if stored == item:
                self._items[position] = item
                return
        raise ValueError(f"{item!r} not in list")

    def display(self) -> str:
        """Return one ``[index]  value`` line per item; empty when no items."""
        return "\n".join(f"[{i}]  {value}" for i, value in enumerate(self._items))

    def smallest(self) -> Any:
        """Return the smallest item, the earliest one on ties."""
        self._require_items()
        result = self._items[0]
        for value in self._items[1:]:
            if value < result:
                result = value
        return result

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def clear(self) -> None:
        """Remove every item, keeping the current capacity."""
        self._items.clear()


def _check_state(alist: AList) -> None:
    if alist.is_full():
        print("list is full\n", file=sys.stderr)
    elif alist.is_empty():
        print("list is empty\n", file=sys.stderr)


def _show(alist: AList) -> None:
    listing = alist.display()
    if listing:
        print(listing)
    if len(alist):
        print(
            f"capacity: {alist.capacity}\tnumVal: {len(alist)}"
            f"\tsmallest: {alist.smallest()}"
        )
    else:
        print(f"capacity: {alist.capacity}\tnumValues: {len(alist)}")
    print()
    _check_state(alist)


def _inserts(alist: AList) -> None:
    alist.insert_front(10)
    print("insert front: 10")
    _show(alist)

    alist.insert_at(20, 0)
    print("insert index 0: 20")
    _show(alist)

    for value in (30, 40, 50):
        alist.insert_back(value)
        print(f"insert back: {value}")
        _show(alist)


def _updates(alist: AList) -> None:
    alist.update_front(1)
    print("\nupdate front: 1")
    _show(alist)

    alist.update_at(2, 1)
    print("update index 1: 2")
    _show(alist)

    alist.update_back(4)
    print("update back: 4")
    _show(alist)

    alist.update(30)
    print("update value 30: 30")
    _show(alist)


def _retrieves(alist: AList) -> None:
    value = alist.retrieve_front()
    print(f"\nretrieve front: {value}")
    _show(alist)

    value = alist.retrieve_back()
    print(f"retrieve back: {value}")
    _show(alist)

    value = alist.retrieve_at(2)
    print(f"retrieve index 2: {value}")
    _show(alist)

    value = alist.retrieve(value)
    print(f"retrieve value {value}: {value}")
    _show(alist)


def _removes(alist: AList) -> None:
    value = alist.remove_front()
    print(f"\nremove front: {value}")
    _show(alist)

    value = alist.remove_at(0)
    print(f"remove index 0: {value}")
    _show(alist)

    value = alist.remove_back()
    print(f"remove back: {value}")
    _show(alist)

    for target in (30, 40):
        value = alist.remove(target)
        print(f"remove value {value}: {value}")
        _show(alist)


def main(argv=None) -> int:
    """Exercise inserts, updates, retrieves and removes on a small list."""
    alist = AList(3)
    _check_state(alist)
    _inserts(alist)
    _updates(alist)
    _retrieves(alist)
    _removes(alist)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())