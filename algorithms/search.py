"""
search.py — Linear & Binary Search
===================================
Both searches only move pointers over ``state.numbers``; the array itself
is never touched.  Every probe increments ``comparisons_count``.

Binary search assumes the numbers are sorted ascending (``init`` seeds a
sorted array for it); on unsorted input it still terminates, it just may
miss the target.
"""

from typing import List, TYPE_CHECKING

from algorithms.events import Event, EventKind, EventStream, info

if TYPE_CHECKING:
    from engine.state import SearchState


PSEUDOCODE_LINEAR: List[str] = [
    "for i in 0 … n-1:",
    "    if a[i] == target: return i",
    "return NOT FOUND",
]

PSEUDOCODE_BINARY: List[str] = [
    "low ← 0;  high ← n-1",
    "while low ≤ high:",
    "    mid ← (low + high) // 2",
    "    if a[mid] == target: return mid",
    "    if a[mid] < target: low ← mid + 1",
    "    else: high ← mid - 1",
    "return NOT FOUND",
]


def linear_search(state: "SearchState", target: int) -> EventStream:
    numbers = state.numbers
    yield info(f"Starting Linear Search for target {target}...")

    for i, value in enumerate(numbers):
        state.current_index = i
        state.comparisons_count += 1
        yield Event(EventKind.PROBE, f"Checking index {i}: Is {value} equal to {target}?", pace="probe")
        if value == target:
            state.found_index = i
            yield Event(EventKind.FOUND, f"Target {target} found at index {i}!")
            return

    state.not_found = True
    yield info(f"Target {target} not found in the array.")


def binary_search(state: "SearchState", target: int) -> EventStream:
    numbers = state.numbers
    yield info(f"Starting Binary Search for target {target}...")

    state.low, state.high = 0, len(numbers) - 1
    while state.low <= state.high:
        mid = (state.low + state.high) // 2
        state.mid = mid
        state.comparisons_count += 1
        yield Event(
            EventKind.PROBE,
            f"Current range: [{state.low}...{state.high}]. Midpoint at index {mid} is {numbers[mid]}.",
            pace="probe",
        )

        if numbers[mid] == target:
            state.found_index = mid
            yield Event(EventKind.FOUND, f"Target {target} found at index {mid}!")
            return

        if numbers[mid] < target:
            state.low = mid + 1
            yield info(f"{numbers[mid]} < {target}, ignoring the left half. New low: {mid + 1}.")
        else:
            state.high = mid - 1
            yield info(f"{numbers[mid]} > {target}, ignoring the right half. New high: {mid - 1}.")

    state.not_found = True
    yield info(f"Target {target} not found in the array.")
