"""
insertion_sort.py — Insertion Sort
==================================
Grow a sorted prefix one key at a time: shift every larger element one
slot right, then drop the key into the gap.  After outer step i the whole
prefix 0..i is marked sorted.
"""

from typing import List, TYPE_CHECKING

from algorithms.events import Event, EventKind, EventStream, info

if TYPE_CHECKING:
    from engine.state import SortingState


PSEUDOCODE: List[str] = [
    "for i in 1 … n-1:",
    "    key ← a[i];  j ← i-1",
    "    while j ≥ 0 and a[j] > key:",
    "        a[j+1] ← a[j];  j ← j-1",
    "    a[j+1] ← key",
]


def insertion_sort(state: "SortingState") -> EventStream:
    arr = state.bars
    n   = len(arr)
    yield info("Starting Insertion Sort...")

    state.mark_sorted(0)

    for i in range(1, n):
        key = arr[i]
        j   = i - 1
        state.active = [i]
        yield Event(EventKind.SELECT, f"Picking {key} at index {i} to insert into the sorted part.", pace="bar")

        while j >= 0:
            state.active = [i, j]
            state.comparison_count += 1
            if arr[j] <= key:
                break
            yield Event(
                EventKind.COMPARE,
                f"{arr[j]} > {key}, shifting {arr[j]} one position to the right.",
                pace="bar",
            )
            state.swapping = [j, j + 1]
            yield Event(EventKind.WRITE, f"Moving {arr[j]} from index {j} to {j + 1}.", pace="bar")
            arr[j + 1] = arr[j]
            state.write_count += 1
            j -= 1
            state.swapping = []

        arr[j + 1] = key
        state.write_count += 1
        state.active = []
        for k in range(i + 1):
            state.mark_sorted(k)
        yield Event(EventKind.WRITE, f"Inserting {key} at index {j + 1}.")

    yield info("Insertion Sort completed!")
