"""A doubly linked list kept in ascending order by its sorted insert."""

from typing import Any, Iterable, Iterator, List


class DLList:
    """Ordered list that can be walked both ways and edited at either end.

    ``insert`` places an item ahead of the first stored value that is not
    smaller. ``insert_front``, ``insert_rear``, ``insert_after`` and
    ``insert_before`` place items where asked, even if that breaks the order.
    ``remove`` and ``retrieve`` search as ``insert`` does and stop at the first
    stored value that is not smaller than the one sought.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: List[Any] = []
        for item in items:
            self.insert(item)

    def _first_not_less(self, item: Any) -> int:
        return next(
            (position for position, stored in enumerate(self._items) if not stored < item),
            len(self._items),
        )

    def _find_sorted(self, item: Any) -> int:
        position = self._first_not_less(item)
        if position < len(self._items) and self._items[position] == item:
            return position
        raise ValueError(f"{item!r} not in list")

    def _find_equal(self, item: Any) -> int:
        for position, stored in enumerate(self._items):
            if stored == item:
                return position
        raise ValueError(f"{item!r} not in list")

    def _require_items(self) -> None:
        if not self._items:
            raise IndexError("list is empty")

    def insert(self, item: Any) -> None:
        """Insert ``item`` ahead of the first stored value that is not smaller."""
        self._items.insert(self._first_not_less(item), item)

    def insert_front(self, item: Any) -> None:
        """Insert ``item`` before every other item."""
        self._items.insert(0, item)

    def insert_rear(self, item: Any) -> None:
        """Insert ``item`` after every other item."""
        self._items.append(item)

    def insert_after(self, item: Any, existing: Any) -> None:
        """Insert ``item`` right after the first stored value equal to ``existing``."""
        self._items.insert(self._find_equal(existing) + 1, item)

    def insert_before(self, item: Any, existing: Any) -> None:
        """Insert ``item`` right before the first stored value equal to ``existing``."""
        self._items.insert(self._find_equal(existing), item)

    def remove(self, item: Any) -> Any:
        """Remove and return the stored value equal to ``item``."""
        return self._items.pop(self._find_sorted(item))

    def remove_front(self) -> Any:
        """Remove and return the first item."""
        self._require_items()
        return self._items.pop(0)

    def remove_rear(self) -> Any:
        """Remove and return the last item."""
        self._require_items()
        return self._items.pop()

    def retrieve(self, item: Any) -> Any:
        """Return the stored value equal to ``item``."""
        return self._items[self._find_sorted(item)]

    def front(self) -> Any:
        """Return the first item."""
        self._require_items()
        return self._items[0]

    def rear(self) -> Any:
        """Return the last item."""
        self._require_items()
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __reversed__(self) -> Iterator[Any]:
        return iter(self._items[::-1])

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"DLList({self._items!r})"

    def is_empty(self) -> bool:
        return not self._items