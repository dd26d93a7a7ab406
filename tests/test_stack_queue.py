import asyncio

import pytest

from engine import QueueSession, Settings, StackSession


@pytest.fixture
def stack(make_session):
    session = make_session(StackSession)
    session.clear()
    return session


@pytest.fixture
def queue(make_session):
    session = make_session(QueueSession)
    session.clear()
    return session


# ---------------------------------------------------------------------------
# Stack
# ---------------------------------------------------------------------------
def test_push_pop_is_lifo(stack):
    async def scenario():
        for value in (1, 2, 3):
            await stack.push(value)
        return [await stack.pop() for _ in range(3)]

    assert asyncio.run(scenario()) == [3, 2, 1]
    assert stack.state.stack == []
    assert stack.state.top_index == -1


def test_peek_leaves_stack_unchanged(stack):
    stack.state.stack = [4, 9]
    stack.state.top_index = 1

    assert asyncio.run(stack.peek()) == 9
    assert stack.state.stack == [4, 9]
    assert stack.state.highlighted_index == -1


def test_stack_underflow_and_overflow_are_warnings(make_session):
    session = make_session(StackSession)
    session.clear()

    assert asyncio.run(session.pop()) is None
    assert "Underflow" in session.state.explanation[-1]

    session.state.stack = list(range(session.state.max_size))
    session.state.top_index = session.state.max_size - 1
    assert asyncio.run(session.push(5)) is None
    assert "Overflow" in session.state.explanation[-1]
    assert len(session.state.stack) == session.state.max_size


def test_push_requires_a_value(stack, run_live):
    assert run_live(stack, "push") is None
    assert stack.state.stack == []


def test_max_size_comes_from_settings():
    session = StackSession(Settings(time_scale=0, stack_max_size=4))

    assert session.state.max_size == 4
    assert 2 <= len(session.state.stack) <= 3


def test_push_timeline_animates_top_slot(stack):
    steps = stack.registry.get("push").generate_steps(7)

    assert [s.animating_index for s in steps] == [-1, 0, -1]
    assert steps[-1].stack == [7]
    assert stack.state.stack == []


# ---------------------------------------------------------------------------
# Queue
# ---------------------------------------------------------------------------
def test_enqueue_dequeue_is_fifo(queue):
    async def scenario():
        for value in (1, 2, 3):
            await queue.enqueue(value)
        return [await queue.dequeue() for _ in range(3)]

    assert asyncio.run(scenario()) == [1, 2, 3]
    assert queue.state.queue == []
    assert queue.state.front_index == -1
    assert queue.state.rear_index == -1


def test_queue_pointers_follow_contents(queue):
    async def scenario():
        await queue.enqueue(10)
        await queue.enqueue(20)

    asyncio.run(scenario())

    assert queue.state.front_index == 0
    assert queue.state.rear_index == 1
    assert asyncio.run(queue.peek()) == 10
    assert queue.state.queue == [10, 20]


def test_queue_underflow_and_overflow_are_warnings(queue):
    assert asyncio.run(queue.dequeue()) is None
    assert "Underflow" in queue.state.explanation[-1]

    queue.state.queue = list(range(queue.state.max_size))
    assert asyncio.run(queue.enqueue(1)) is None
    assert "Overflow" in queue.state.explanation[-1]


def test_generated_queue_has_consistent_pointers(make_session):
    session = make_session(QueueSession, seed=3)

    assert session.state.front_index == 0
    assert session.state.rear_index == len(session.state.queue) - 1
