"""
selection_sort.py — Selection Sort
==================================
Scan the unsorted remainder for its minimum and swap it into position i.
At most one swap per outer iteration.
"""

from typing import List, TYPE_CHECKING

from algorithms.events import Event, EventKind, EventStream, info

if TYPE_CHECKING:
    from engine.state import SortingState


PSEUDOCODE: List[str] = [
    "for i in 0 … n-2:",
    "    min ← i",
    "    for j in i+1 … n-1:",
    "        if a[j] < a[min]: min ← j",
    "    if min ≠ i: swap(a[i], a[min])",
    "    mark i sorted",
    "mark n-1 sorted",
]


def selection_sort(state: "SortingState") -> EventStream:
    arr = state.bars
    n   = len(arr)
    yield info("Starting Selection Sort...")

    for i in range(n - 1):
        min_index = i
        yield info(f"Finding the minimum of the unsorted portion starting at index {i}.")

        for j in range(i + 1, n):
            state.active = [i, j]
            state.comparison_count += 1
            yield Event(
                EventKind.COMPARE,
                f"Comparing {arr[j]} with current minimum {arr[min_index]}.",
                pace="bar",
            )
            if arr[j] < arr[min_index]:
                min_index = j
                yield info(f"New minimum found: {arr[j]} at index {j}.")
        state.active = []

        if min_index != i:
            state.swapping = [i, min_index]
            yield Event(
                EventKind.SWAP,
                f"Swapping {arr[i]} with minimum element {arr[min_index]}.",
                pace="bar",
            )
            arr[i], arr[min_index] = arr[min_index], arr[i]
            state.write_count += 2
            state.swapping = []
        else:
            yield info(f"{arr[i]} is already the smallest element in the unsorted part.")

        state.mark_sorted(i)
        yield Event(EventKind.MARK, f"Index {i} now holds {arr[i]}.")

    state.mark_sorted(n - 1)
    yield info("Selection Sort completed!")
