"""
quick_sort.py — Quick Sort (Lomuto)
===================================
Pivot = last element of the range.  Everything strictly smaller than the
pivot is swapped to the front, then the pivot drops in right after them.
The pivot's index is final the moment the partition ends, so it is marked
sorted immediately; one-element ranges are marked sorted as well, which
leaves every index sorted when the recursion unwinds.
"""

from typing import Generator, List, TYPE_CHECKING

from algorithms.events import Event, EventKind, EventStream, info

if TYPE_CHECKING:
    from engine.state import SortingState


PSEUDOCODE: List[str] = [
    "def quickSort(lo, hi):",
    "    if lo < hi:",
    "        p ← partition(lo, hi)       # pivot = a[hi]",
    "        quickSort(lo, p-1);  quickSort(p+1, hi)",
]


def quick_sort(state: "SortingState") -> EventStream:
    yield info("Starting Quick Sort...")
    yield from _sort(state, 0, len(state.bars) - 1)
    yield info("Quick Sort completed!")


def _sort(state: "SortingState", low: int, high: int) -> EventStream:
    if low < high:
        pivot_index = yield from _partition(state, low, high)
        state.mark_sorted(pivot_index)
        yield Event(EventKind.MARK, f"Pivot at index {pivot_index} is now sorted.")
        yield from _sort(state, low, pivot_index - 1)
        yield from _sort(state, pivot_index + 1, high)
    elif low == high:
        state.mark_sorted(low)
        yield Event(EventKind.MARK, f"Single element at index {low} is sorted.")


def _partition(state: "SortingState", low: int, high: int) -> Generator:
    arr   = state.bars
    pivot = arr[high]
    i     = low - 1

    state.active = [high]
    yield Event(EventKind.SELECT, f"Choosing {pivot} (at index {high}) as the pivot.", pace="bar")

    for j in range(low, high):
        state.active = [j, high]
        state.comparison_count += 1
        yield Event(EventKind.COMPARE, f"Comparing {arr[j]} with pivot {pivot}.", pace="bar")
        if arr[j] < pivot:
            i += 1
            if i != j:
                state.swapping = [i, j]
                yield Event(
                    EventKind.SWAP,
                    f"{arr[j]} < {pivot}, swapping {arr[j]} with element at index {i}.",
                    pace="bar",
                )
                arr[i], arr[j] = arr[j], arr[i]
                state.write_count += 2
                state.swapping = []

    if i + 1 != high:
        state.swapping = [i + 1, high]
        yield Event(
            EventKind.SWAP,
            f"Placing pivot {pivot} at its correct position index {i + 1}.",
            pace="bar",
        )
        arr[i + 1], arr[high] = arr[high], arr[i + 1]
        state.write_count += 2
        state.swapping = []

    state.active = []
    return i + 1
