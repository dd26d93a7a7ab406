"""
merge_sort.py — Merge Sort
==========================
Top-down: split at mid = (left + right) // 2, sort both halves, then
merge them back through temporary copies.  The merge takes from the left
half on ties (``<=``) which keeps the sort stable.

No index is final until the last merge, so the sorted set is filled only
at the very end.
"""

from typing import List, TYPE_CHECKING

from algorithms.events import Event, EventKind, EventStream, info

if TYPE_CHECKING:
    from engine.state import SortingState


PSEUDOCODE: List[str] = [
    "def mergeSort(l, r):",
    "    if l < r:",
    "        m ← (l + r) // 2",
    "        mergeSort(l, m);  mergeSort(m+1, r)",
    "        merge(l, m, r)          # left wins ties",
]


def merge_sort(state: "SortingState") -> EventStream:
    yield info("Starting Merge Sort...")
    yield from _sort(state, 0, len(state.bars) - 1)
    for k in range(len(state.bars)):
        state.mark_sorted(k)
    yield info("Merge Sort completed!")


def _sort(state: "SortingState", left: int, right: int) -> EventStream:
    if left >= right:
        return
    mid = (left + right) // 2
    yield info(f"Splitting array into [{left}...{mid}] and [{mid + 1}...{right}].")
    yield from _sort(state, left, mid)
    yield from _sort(state, mid + 1, right)
    yield from _merge(state, left, mid, right)


def _merge(state: "SortingState", left: int, mid: int, right: int) -> EventStream:
    arr = state.bars
    yield info(f"Merging subarrays [{left}...{mid}] and [{mid + 1}...{right}].")

    left_part  = arr[left:mid + 1]
    right_part = arr[mid + 1:right + 1]
    i = j = 0
    k = left

    while i < len(left_part) and j < len(right_part):
        state.active = [left + i, mid + 1 + j]
        state.comparison_count += 1
        yield Event(
            EventKind.COMPARE,
            f"Comparing {left_part[i]} and {right_part[j]} from both halves.",
            pace="bar",
        )
        state.swapping = [k]
        if left_part[i] <= right_part[j]:
            yield Event(EventKind.WRITE, f"{left_part[i]} <= {right_part[j]}, picking from the left half.", pace="bar")
            arr[k] = left_part[i]
            i += 1
        else:
            yield Event(EventKind.WRITE, f"{left_part[i]} > {right_part[j]}, picking from the right half.", pace="bar")
            arr[k] = right_part[j]
            j += 1
        state.write_count += 1
        state.swapping = []
        k += 1

    state.active = []
    for remaining, side in ((left_part[i:], "left"), (right_part[j:], "right")):
        for value in remaining:
            state.swapping = [k]
            yield Event(EventKind.WRITE, f"Copying remaining element {value} from the {side} half.", pace="bar")
            arr[k] = value
            state.write_count += 1
            state.swapping = []
            k += 1
