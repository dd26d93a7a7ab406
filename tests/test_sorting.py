import random
from collections import Counter

import pytest

from engine import SortingSession


SORTS = ["bubble", "selection", "insertion", "merge", "quick"]


def test_bubble_sort_concrete_scenario(make_session, run_live):
    session = make_session(SortingSession)
    session.state.bars = [5, 3, 8, 1]

    run_live(session, "bubble")

    assert session.state.bars == [1, 3, 5, 8]
    assert set(session.state.sorted) == {0, 1, 2, 3}
    assert session.state.is_running is False


@pytest.mark.parametrize("key", SORTS)
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_live_sort_is_sorted_permutation(make_session, run_live, key, seed):
    session = make_session(SortingSession, seed=seed)
    original = list(session.state.bars)

    run_live(session, key)

    bars = session.state.bars
    assert bars == sorted(bars)
    assert Counter(bars) == Counter(original)


@pytest.mark.parametrize("key", SORTS)
def test_sort_handles_duplicates_and_sorted_input(make_session, run_live, key):
    session = make_session(SortingSession)
    for data in ([4, 4, 1, 4, 1], [1, 2, 3, 4], [9, 7, 5, 3, 1], [42]):
        session.state.bars = list(data)
        run_live(session, key)
        assert session.state.bars == sorted(data)


@pytest.mark.parametrize("key", SORTS)
def test_sorted_indices_only_grow(make_session, key):
    session = make_session(SortingSession)
    session.state.bars = [random.Random(3).randint(10, 99) for _ in range(12)]

    steps = session.registry.get(key).generate_steps()

    assert steps
    previous = set()
    for step in steps:
        current = set(step.sorted)
        assert previous <= current
        previous = current
    assert previous == set(range(12))
    assert steps[-1].bars == sorted(session.state.bars)


def test_generate_steps_leaves_live_state_untouched(make_session):
    session = make_session(SortingSession)
    before = list(session.state.bars)

    session.registry.get("quick").generate_steps()

    assert session.state.bars == before
    assert session.state.sorted == []


def test_counters_are_reported(make_session, run_live):
    session = make_session(SortingSession)
    session.state.bars = [3, 2, 1]

    run_live(session, "bubble")

    assert session.state.comparison_count == 3
    assert session.state.write_count == 6


def test_empty_bars_is_a_no_op(make_session, run_live):
    session = make_session(SortingSession)
    session.state.bars = []

    assert run_live(session, "merge") is None
    assert session.registry.get("merge").generate_steps() == []
    assert session.state.explanation == []
