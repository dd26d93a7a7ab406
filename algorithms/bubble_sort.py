"""
bubble_sort.py — Bubble Sort
============================
Adjacent compare-and-swap.  Each pass bubbles the largest remaining value
to the end of the unsorted region, and that trailing index is marked
sorted once the pass ends.  Runs the full n passes (no early exit) so the
sorted set grows by exactly one index per pass.
"""

from typing import List, TYPE_CHECKING

from algorithms.events import Event, EventKind, EventStream, info

if TYPE_CHECKING:
    from engine.state import SortingState


PSEUDOCODE: List[str] = [
    "for i in 0 … n-1:",
    "    for j in 0 … n-i-2:",
    "        if a[j] > a[j+1]: swap(a[j], a[j+1])",
    "    mark n-i-1 sorted",
]


def bubble_sort(state: "SortingState") -> EventStream:
    arr = state.bars
    n   = len(arr)
    yield info("Starting Bubble Sort...")

    for i in range(n):
        for j in range(n - i - 1):
            state.active   = [j, j + 1]
            state.comparison_count += 1
            yield Event(EventKind.COMPARE, f"Comparing {arr[j]} and {arr[j + 1]}.", pace="bar")

            if arr[j] > arr[j + 1]:
                state.swapping = [j, j + 1]
                yield Event(EventKind.SWAP, f"{arr[j]} > {arr[j + 1]}, swapping them.", pace="bar")
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                state.write_count += 2
                state.swapping = []

        last = n - i - 1
        state.mark_sorted(last)
        state.active = []
        yield Event(EventKind.MARK, f"{arr[last]} has bubbled up to index {last}.")

    yield info("Bubble Sort completed!")
