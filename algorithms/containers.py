"""
containers.py — Stack & Queue Operations
=========================================
Each operation is a short two-phase animation: highlight the slot being
touched, change the contents, then clear the highlight.  The generator's
return value is the operation's result (the pushed / removed / peeked
value, or None when the operation was refused).

Overflow (container at ``max_size``) and underflow (container empty) are
narrated as warnings and leave the state untouched.

The queue is drawn as an array whose front is always index 0.
"""

from typing import Generator, Optional, TYPE_CHECKING

from algorithms.events import Event, EventKind

if TYPE_CHECKING:
    from engine.state import StackState, QueueState


OpStream = Generator[Event, None, Optional[int]]


# ---------------------------------------------------------------------------
# Stack
# ---------------------------------------------------------------------------
def push(state: "StackState", value: int) -> OpStream:
    if len(state.stack) >= state.max_size:
        yield Event(
            EventKind.WARN,
            f"⚠️ Stack Overflow! Cannot push {value}: maximum size of {state.max_size} reached.",
        )
        return None

    state.animation_type = "push"
    yield Event(
        EventKind.INFO,
        f"Pushing {value}: stack is not full ({len(state.stack)}/{state.max_size}).",
        pace="phase_short",
    )

    state.stack.append(value)
    state.top_index = len(state.stack) - 1
    state.animating_index = state.top_index
    yield Event(EventKind.PUSH, f"Added {value} on top. New top index: {state.top_index}.", pace="phase")

    state.animating_index = -1
    state.animation_type = None
    yield Event(EventKind.INFO, f"✓ Pushed {value}. Stack size: {len(state.stack)}/{state.max_size}. O(1)")
    return value


def pop(state: "StackState") -> OpStream:
    if not state.stack:
        yield Event(EventKind.WARN, "⚠️ Stack Underflow! Cannot pop from empty stack.")
        return None

    state.animation_type = "pop"
    state.animating_index = state.top_index
    value = state.stack[state.top_index]
    yield Event(EventKind.PEEK, f"Popping {value}: top element at index {state.top_index}.", pace="phase")
    yield Event(EventKind.INFO, "Removing top element and updating the top pointer.", pace="phase_short")

    state.stack.pop()
    state.top_index = len(state.stack) - 1
    state.animating_index = -1
    state.animation_type = None
    top = state.stack[state.top_index] if state.stack else "empty"
    yield Event(
        EventKind.POP,
        f"✓ Popped {value}. New top: {top}. Stack size: {len(state.stack)}/{state.max_size}. O(1)",
    )
    return value


def peek(state: "StackState") -> OpStream:
    if not state.stack:
        yield Event(EventKind.WARN, "⚠️ Stack is empty! Cannot peek at empty stack.")
        return None

    state.animation_type = "peek"
    state.highlighted_index = state.top_index
    value = state.stack[state.top_index]
    yield Event(EventKind.PEEK, f"Peeking at top element: {value}.", pace="phase_long")

    state.highlighted_index = -1
    state.animation_type = None
    yield Event(EventKind.INFO, f"✓ Peek: {value}. Element remains in stack. O(1)")
    return value


# ---------------------------------------------------------------------------
# Queue
# ---------------------------------------------------------------------------
def enqueue(state: "QueueState", value: int) -> OpStream:
    if len(state.queue) >= state.max_size:
        yield Event(
            EventKind.WARN,
            f"⚠️ Queue Overflow! Cannot enqueue {value}: maximum size of {state.max_size} reached.",
        )
        return None

    state.animation_type = "enqueue"
    yield Event(
        EventKind.INFO,
        f"Enqueueing {value}: queue is not full ({len(state.queue)}/{state.max_size}).",
        pace="phase_short",
    )

    state.queue.append(value)
    if state.front_index == -1:
        state.front_index = 0
    state.rear_index = len(state.queue) - 1
    state.animating_index = state.rear_index
    yield Event(EventKind.PUSH, f"Added {value} at the rear. New rear index: {state.rear_index}.", pace="phase")

    state.animating_index = -1
    state.animation_type = None
    yield Event(EventKind.INFO, f"✓ Enqueued {value}. Queue size: {len(state.queue)}/{state.max_size}. O(1)")
    return value


def dequeue(state: "QueueState") -> OpStream:
    if not state.queue:
        yield Event(EventKind.WARN, "⚠️ Queue Underflow! Cannot dequeue from empty queue.")
        return None

    state.animation_type = "dequeue"
    state.animating_index = 0
    value = state.queue[0]
    yield Event(EventKind.PEEK, f"Dequeueing {value}: front element.", pace="phase")
    yield Event(EventKind.INFO, "Removing front element and shifting the rest.", pace="phase_short")

    state.queue.pop(0)
    if state.queue:
        state.rear_index = len(state.queue) - 1
    else:
        state.front_index = -1
        state.rear_index = -1
    state.animating_index = -1
    state.animation_type = None
    front = state.queue[0] if state.queue else "None"
    yield Event(
        EventKind.POP,
        f"✓ Dequeued {value}. New front: {front}. Queue size: {len(state.queue)}/{state.max_size}. O(1)",
    )
    return value


def peek_front(state: "QueueState") -> OpStream:
    if not state.queue:
        yield Event(EventKind.WARN, "⚠️ Queue is empty! Cannot peek at empty queue.")
        return None

    state.animation_type = "peek"
    state.highlighted_index = 0
    value = state.queue[0]
    yield Event(EventKind.PEEK, f"Peeking at front element: {value}.", pace="phase_long")

    state.highlighted_index = -1
    state.animation_type = None
    yield Event(EventKind.INFO, f"✓ Peek: {value}. Element remains in queue. O(1)")
    return value
