"""A list that keeps a fixed-size static block and grows a dynamic block past it."""

from collections.abc import Iterator
from typing import Any

__all__ = ["HybridArrayList", "DEFAULT_STATIC_CAPACITY", "DYNAMIC_GROWTH_FACTOR"]

DEFAULT_STATIC_CAPACITY = 8
DYNAMIC_GROWTH_FACTOR = 1.5


class HybridArrayList:
    """List whose capacity starts at a static size and then grows dynamically.

    The first ``static_capacity`` items live in the static block. Once it is
    full, a dynamic block is allocated with half the static capacity, and it
    grows by a factor of 1.5 of the total capacity whenever it fills up.
    """

    def __init__(self, static_capacity: int = DEFAULT_STATIC_CAPACITY) -> None:
        if static_capacity < 0:
            raise ValueError("static capacity must not be negative")
        self._static_capacity = int(static_capacity)
        self._dynamic_capacity = 0
        self._dynamic_allocated = False
        self._items: list[Any] = []

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._items!r}, "
            f"static_capacity={self._static_capacity}, capacity={self.capacity()})"
        )

    @property
    def static_capacity(self) -> int:
        return self._static_capacity

    def _ensure_capacity(self) -> None:
        size = len(self._items)
        if size == self._static_capacity and not self._dynamic_allocated:
            self._dynamic_capacity = int(
                self._static_capacity * (DYNAMIC_GROWTH_FACTOR - 1)
            )
            self._dynamic_allocated = True
        if size >= self.capacity():
            grown = int(self.capacity() * DYNAMIC_GROWTH_FACTOR) - self._static_capacity
            self._dynamic_capacity = max(grown, self._dynamic_capacity + 1)
            self._dynamic_allocated = True

    def add(self, item: Any) -> None:
        """Append ``item`` to the end of the list."""
        self._ensure_capacity()
        self._items.append(item)

    def insert(self, index: int, item: Any) -> None:
        """Insert ``item`` before position ``index`` (``index`` may equal the length)."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        self._ensure_capacity()
        self._items.insert(index, item)

    def index_of(self, item: Any) -> int:
        """Return the position of the first occurrence of ``item``, or -1."""
        for position, candidate in enumerate(self._items):
            if candidate == item:
                return position
        return -1

    def remove_item(self, item: Any) -> bool:
        """Remove the first occurrence of ``item``; return whether one was found."""
        index = self.index_of(item)
        if index < 0:
            return False
        del self._items[index]
        return True

    def remove(self, index: int) -> None:
        """Remove the item at ``index``; the capacity is kept."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        del self._items[index]

    def __getitem__(self, index: int) -> Any:
        """Return the item at ``index``, clamped to the valid range."""
        if not self._items:
            raise IndexError("list is empty")
        index = min(max(int(index), 0), len(self._items) - 1)
        return self._items[index]

    def get(self, index: int) -> Any:
        """Return the item at ``index``, clamped to the valid range."""
        return self[index]

    def remove_all(self) -> None:
        """Remove every item without changing the capacity."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def capacity(self) -> int:
        """Return the static plus dynamic capacity."""
        return self._static_capacity + self._dynamic_capacity