"""Array list with replacement, iteration, copying, capacity and sorting helpers."""

from collections.abc import Callable
from enum import Enum
from typing import Any

from plaquette.arraylist_core import ArrayListCore, SizeType

__all__ = ["SortAlgorithm", "ArrayList", "SizeType"]

Comparator = Callable[[Any, Any], bool]


class SortAlgorithm(Enum):
    """Sorting algorithm used by :meth:`ArrayList.sort`."""

    BUBBLE_SORT = "bubble_sort"
    QUICK_SORT = "quick_sort"


class ArrayList(ArrayListCore):
    """Capacity-bounded list with helpers for bulk operations and sorting."""

    def replace_all(self, operator: Callable[[Any], Any]) -> None:
        """Replace every item with ``operator(item)``."""
        self._items = [operator(item) for item in self._items]

    def for_each(self, consumer: Callable[[Any], Any]) -> None:
        """Call ``consumer`` on every item in order."""
        for item in list(self._items):
            consumer(item)

    def to_list(self) -> list[Any]:
        """Return the items as a new Python list."""
        return list(self._items)

    def sublist(self, from_index: int, to_index: int) -> "ArrayList":
        """Return a new list of the items from ``from_index`` up to ``to_index``.

        The new list has the same size type and a capacity equal to its length.
        """
        if from_index > to_index or from_index < 0 or to_index > len(self._items):
            raise IndexError(f"invalid range [{from_index}, {to_index})")
        result = ArrayList(to_index - from_index, self._size_type)
        result.add_all(self._items[from_index:to_index])
        return result

    def clone(self) -> "ArrayList":
        """Return a copy with the same size type, capacity and items."""
        result = ArrayList(self._capacity, self._size_type)
        result.add_all(self._items)
        return result

    def ensure_capacity(self, min_capacity: int) -> None:
        """Raise the capacity to ``min_capacity`` if it is lower."""
        if min_capacity > self._capacity:
            self._capacity = int(min_capacity)

    def trim_to_size(self) -> None:
        """Shrink the capacity of a dynamic list to its current length."""
        if self._size_type is SizeType.DYNAMIC and len(self._items) < self._capacity:
            self._capacity = len(self._items)

    def sort(
        self,
        comparator: Comparator,
        algorithm: SortAlgorithm = SortAlgorithm.BUBBLE_SORT,
    ) -> None:
        """Sort in place with ``comparator`` using the chosen algorithm."""
        if algorithm is SortAlgorithm.BUBBLE_SORT:
            self.bubble_sort(comparator)
        elif algorithm is SortAlgorithm.QUICK_SORT:
            self.quick_sort(comparator)
        else:
            raise ValueError(f"unknown sort algorithm: {algorithm!r}")

    def bubble_sort(self, comparator: Comparator) -> None:
        """Bubble sort; ``comparator(a, b)`` is true when ``a`` belongs after ``b``."""
        items = self._items
        count = len(items)
        for i in range(count - 1):
            for j in range(count - i - 1):
                if comparator(items[j], items[j + 1]):
                    items[j], items[j + 1] = items[j + 1], items[j]

    def quick_sort(self, comparator: Comparator) -> None:
        """Quick sort; ``comparator(a, pivot)`` is true when ``a`` belongs before the pivot."""
        items = self._items
        pending = [(0, len(items) - 1)]
        while pending:
            low, high = pending.pop()
            if low >= high:
                continue
            pivot_index = self._partition(comparator, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))

    def _partition(self, comparator: Comparator, low: int, high: int) -> int:
        items = self._items
        pivot = items[high]
        i = low - 1
        for j in range(low, high):
            if comparator(items[j], pivot):
                i += 1
                items[i], items[j] = items[j], items[i]
        items[i + 1], items[high] = items[high], items[i + 1]
        return i + 1