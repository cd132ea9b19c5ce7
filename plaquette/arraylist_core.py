"""A list with an explicit capacity that is either fixed or grows on demand."""

from collections.abc import Callable, Iterable, Iterator
from enum import Enum
from typing import Any

__all__ = ["SizeType", "ArrayListCore"]

_LOAD_FACTOR = 0.8
_GROWTH_FACTOR = 1.5


class SizeType(Enum):
    """Whether the capacity of a list may grow."""

    FIXED = "fixed"
    DYNAMIC = "dynamic"


class ArrayListCore:
    """List of items bounded by a capacity.

    A ``FIXED`` list raises :class:`OverflowError` when an item would exceed
    its capacity; a ``DYNAMIC`` list grows its capacity by half instead.
    """

    def __init__(
        self, initial_capacity: int = 8, size_type: SizeType = SizeType.DYNAMIC
    ) -> None:
        if initial_capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: list[Any] = []
        self._capacity = int(initial_capacity)
        self._size_type = size_type

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._items!r}, capacity={self._capacity}, "
            f"size_type={self._size_type.name})"
        )

    @property
    def size_type(self) -> SizeType:
        return self._size_type

    def _grow(self) -> None:
        self._capacity = max(int(self._capacity * _GROWTH_FACTOR), self._capacity + 1)

    def _make_room(self, needed: int) -> None:
        if needed <= self._capacity:
            return
        if self._size_type is SizeType.FIXED:
            raise OverflowError(
                f"fixed-size list of capacity {self._capacity} cannot hold {needed} items"
            )
        while self._capacity < needed:
            self._grow()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def add(self, item: Any) -> None:
        """Append ``item``, growing a dynamic list once it is 80% full."""
        count = len(self._items)
        if self._size_type is SizeType.FIXED:
            if count >= self._capacity:
                raise OverflowError(f"fixed-size list is full ({self._capacity} items)")
        elif self._capacity == 0 or count / self._capacity >= _LOAD_FACTOR:
            self._grow()
        self._items.append(item)

    def add_all(self, items: Iterable[Any]) -> None:
        """Append every item of ``items``."""
        new_items = list(items)
        self._make_room(len(self._items) + len(new_items))
        self._items.extend(new_items)

    def insert(self, index: int, item: Any) -> None:
        """Insert ``item`` before position ``index`` (``index`` may equal the length)."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        if len(self._items) == self._capacity:
            if self._size_type is SizeType.FIXED:
                raise OverflowError(f"fixed-size list is full ({self._capacity} items)")
            self._grow()
        self._items.insert(index, item)

    def insert_all(self, index: int, items: Iterable[Any]) -> None:
        """Insert every item of ``items`` before position ``index``."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        new_items = list(items)
        self._make_room(len(self._items) + len(new_items))
        self._items[index:index] = new_items

    def remove_item(self, item: Any) -> bool:
        """Remove the first occurrence of ``item``; return whether one was found."""
        index = self.index_of(item)
        if index < 0:
            return False
        del self._items[index]
        return True

    def remove(self, index: int) -> None:
        """Remove the item at ``index``."""
        self._check_index(index)
        del self._items[index]

    def remove_if(self, predicate: Callable[[Any], bool]) -> bool:
        """Remove every item for which ``predicate`` holds; return whether any was."""
        kept = [item for item in self._items if not predicate(item)]
        changed = len(kept) != len(self._items)
        self._items = kept
        return changed

    def remove_range(self, from_index: int, to_index: int) -> None:
        """Remove items from ``from_index`` (inclusive) to ``to_index`` (exclusive)."""
        if from_index > to_index or from_index < 0 or to_index > len(self._items):
            raise IndexError(f"invalid range [{from_index}, {to_index})")
        del self._items[from_index:to_index]

    def retain_all(self, other: Iterable[Any]) -> bool:
        """Keep only items also found in ``other``; return whether the list changed."""
        pool = other if hasattr(other, "__contains__") else list(other)
        kept = [item for item in self._items if item in pool]
        changed = len(kept) != len(self._items)
        self._items = kept
        return changed

    def clear(self) -> None:
        """Remove all items, keeping the capacity."""
        self._items = []

    def get(self, index: int) -> Any:
        """Return the item at ``index``."""
        self._check_index(index)
        return self._items[index]

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def get_as_string(self, index: int) -> str:
        """Return the item at ``index`` as a string."""
        return str(self.get(index))

    def contains(self, item: Any) -> bool:
        """Return whether ``item`` is in the list."""
        return item in self._items

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def index_of(self, item: Any) -> int:
        """Return the position of the first occurrence of ``item``, or -1."""
        for position, candidate in enumerate(self._items):
            if candidate == item:
                return position
        return -1

    def capacity(self) -> int:
        """Return how many items fit without growing."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def is_empty(self) -> bool:
        """Return whether the list holds no items."""
        return not self._items

    def set(self, index: int, item: Any) -> None:
        """Replace the item at ``index``."""
        self._check_index(index)
        self._items[index] = item