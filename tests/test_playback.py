import asyncio
import random
from dataclasses import replace

import pytest

from engine import GraphSession, SortingSession, StepperState
from models import Graph


@pytest.fixture
def session(make_session):
    session = make_session(SortingSession)
    session.state.bars = [4, 1, 3, 2]
    session.registry.prepare_steps("insertion")
    return session


def test_prepare_loads_steps_before_first(session):
    playback = session.playback

    assert playback.total_steps > 0
    assert playback.step_index == -1
    assert playback.status == StepperState.READY
    assert session.state.explanation[-1].startswith(f"Prepared {playback.total_steps} steps")
    assert session.state.bars == [4, 1, 3, 2]


def test_next_applies_and_narrates(session):
    playback = session.playback
    lines = len(session.state.explanation)

    assert playback.next_step() is True

    first = playback.steps[0]
    assert playback.step_index == 0
    assert session.state.snapshot() == replace(first, description="")
    assert session.state.explanation[-1] == first.description
    assert len(session.state.explanation) == lines + 1


def test_previous_does_not_narrate(session):
    playback = session.playback
    playback.next_step()
    playback.next_step()
    lines = list(session.state.explanation)

    assert playback.previous_step() is True
    assert playback.step_index == 0
    assert session.state.explanation == lines
    assert playback.previous_step() is False


def test_goto_is_bounds_checked(session):
    playback = session.playback
    last = playback.total_steps - 1

    assert playback.goto_step(last) is True
    assert playback.is_finished
    assert session.state.bars == [1, 2, 3, 4]
    assert playback.next_step() is False
    assert playback.goto_step(last + 1) is False
    assert playback.goto_step(-1) is False
    assert playback.step_index == last


def test_reapplying_a_step_is_idempotent(session):
    playback = session.playback
    playback.goto_step(3)
    once = session.state.snapshot()

    playback.goto_step(3)

    assert session.state.snapshot() == once


def test_play_runs_to_the_end(session):
    async def scenario():
        task = session.playback.play()
        assert session.playback.play() is None
        await task

    asyncio.run(scenario())

    playback = session.playback
    assert playback.step_index == playback.total_steps - 1
    assert playback.is_playing is False
    assert session.state.bars == [1, 2, 3, 4]


def test_stop_is_idempotent(session):
    async def scenario():
        session.playback.play()
        session.playback.stop()
        session.playback.stop()
        await asyncio.sleep(0)

    asyncio.run(scenario())

    assert session.playback.is_playing is False
    assert session.playback.step_index < session.playback.total_steps - 1


def test_play_without_steps_is_a_no_op(make_session):
    session = make_session(SortingSession)

    async def scenario():
        return session.playback.play()

    assert asyncio.run(scenario()) is None
    assert session.playback.status == StepperState.IDLE


def test_reset_clears_the_timeline(session):
    session.playback.next_step()

    session.reset()

    assert session.playback.total_steps == 0
    assert session.playback.step_index == -1
    assert session.state.sorted == []


@pytest.mark.parametrize("key", ["bfs", "dfs", "dijkstra", "astar", "bellman_ford", "prims"])
def test_replayed_timeline_matches_live_run(make_session, run_live, key):
    graph = Graph.generate_random(rng=random.Random(5))
    target = graph.node_count() - 1

    live = make_session(GraphSession)
    live.load_graph(graph)
    if key == "prims":
        run_live(live, key, 0)
    else:
        run_live(live, key, 0, target)

    replay = make_session(GraphSession)
    replay.load_graph(graph)
    replay.select(start=0, target=target)
    replay.registry.prepare_steps(key)
    replay.playback.goto_step(replay.playback.total_steps - 1)

    assert replay.state.snapshot() == live.state.snapshot()
    assert replay.state.visited_nodes == live.state.visited_nodes
    assert replay.state.distances == live.state.distances


def test_auto_play_outside_an_event_loop_only_loads(make_session):
    session = make_session(SortingSession)
    session.state.bars = [3, 1, 2]

    count = session.registry.prepare_steps("bubble", auto_play=True)

    assert count > 0
    assert session.playback.total_steps == count
    assert session.playback.is_playing is False
    assert session.playback.status == StepperState.READY


def test_auto_play_inside_an_event_loop_plays(make_session):
    session = make_session(SortingSession)
    session.state.bars = [3, 1, 2]

    async def scenario():
        session.registry.prepare_steps("bubble", auto_play=True)
        assert session.playback.is_playing is True
        await session.playback._task

    asyncio.run(scenario())

    assert session.playback.status == StepperState.FINISHED
    assert session.state.bars == [1, 2, 3]
