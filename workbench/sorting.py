"""In-place sorting algorithms behind a common interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import MutableSequence
from enum import Enum
from typing import Any


def swap(items: MutableSequence[Any], i: int, j: int) -> None:
    """Exchange the elements at positions ``i`` and ``j``."""
    items[i], items[j] = items[j], items[i]


class Sorter(ABC):
    """Something that sorts a mutable sequence in place, ascending."""

    @abstractmethod
    def sort(self, items: MutableSequence[Any]) -> None:
        """Sort ``items`` in place."""


class BubbleSorter(Sorter):
    """Repeatedly bubbles the largest remaining element to the end."""

    def sort(self, items: MutableSequence[Any]) -> None:
        for last in range(len(items) - 1, 0, -1):
            for j in range(last):
                if items[j] > items[j + 1]:
                    swap(items, j, j + 1)


class SelectionSorter(Sorter):
    """Fixes each position in turn by swapping smaller elements into it."""

    def sort(self, items: MutableSequence[Any]) -> None:
        size = len(items)
        for i in range(size - 1):
            for j in range(i + 1, size):
                if items[j] < items[i]:
                    swap(items, i, j)


class InsertionSorter(Sorter):
    """Moves each element before the first larger element on its left."""

    def sort(self, items: MutableSequence[Any]) -> None:
        for i in range(1, len(items)):
            for j in range(i):
                if items[j] > items[i]:
                    items.insert(j, items.pop(i))
                    break


class QuickSorter(Sorter):
    """Partitions around a middle pivot and recurses on both sides."""

    def sort(self, items: MutableSequence[Any]) -> None:
        self._sort_range(items, 0, len(items))

    def _sort_range(self, items: MutableSequence[Any], start: int, end: int) -> None:
        if start >= end:
            return
        pivot = (start + end) // 2
        i, j = start, end - 1
        while i < j:
            while i < pivot and items[i] <= items[pivot]:
                i += 1
            swap(items, i, pivot)
            pivot = i

            while j > pivot and items[j] >= items[pivot]:
                j -= 1
            swap(items, j, pivot)
            pivot = j

        self._sort_range(items, start, pivot)
        self._sort_range(items, pivot + 1, end)


class MergeSorter(Sorter):
    """Stable top-down merge sort."""

    def sort(self, items: MutableSequence[Any]) -> None:
        self._sort_range(items, 0, len(items))

    def _sort_range(self, items: MutableSequence[Any], start: int, end: int) -> None:
        if end - start <= 1:
            return
        mid = (start + end) // 2
        self._sort_range(items, start, mid)
        self._sort_range(items, mid, end)

        left = list(items[start:mid])
        right = list(items[mid:end])
        merged: list[Any] = []
        li = ri = 0
        while li < len(left) and ri < len(right):
            if left[li] <= right[ri]:
                merged.append(left[li])
                li += 1
            else:
                merged.append(right[ri])
                ri += 1
        merged.extend(left[li:])
        merged.extend(right[ri:])
        items[start:end] = merged


class Sorters(Enum):
    """The available sorting algorithms."""

    BUBBLE_SORT = "bubble"
    SELECTION_SORT = "selection"
    INSERTION_SORT = "insertion"
    QUICK_SORT = "quick"
    MERGE_SORT = "merge"

    def new(self) -> Sorter:
        """Return the shared sorter for this algorithm."""
        return _SORTERS[self]


_SORTERS: dict[Sorters, Sorter] = {
    Sorters.BUBBLE_SORT: BubbleSorter(),
    Sorters.SELECTION_SORT: SelectionSorter(),
    Sorters.INSERTION_SORT: InsertionSorter(),
    Sorters.QUICK_SORT: QuickSorter(),
    Sorters.MERGE_SORT: MergeSorter(),
}