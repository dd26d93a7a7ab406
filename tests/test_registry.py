import asyncio
import logging

from algorithms import REGISTRY, DOMAINS, algorithms_by_tag, algorithms_for, get_algorithm
from engine import AlgorithmBundle, AlgorithmRegistry, GraphSession, SortingSession


def test_catalogue_covers_every_domain():
    for domain in DOMAINS:
        assert algorithms_for(domain)
    assert get_algorithm("graph", "bfs").label == "Breadth-First Search"
    assert get_algorithm("graph", "nope") is None
    assert {a.key for a in algorithms_by_tag("mst")} == {"prims", "kruskals"}
    assert len(REGISTRY) == 23


def test_session_registers_its_domain(make_session):
    session = make_session(GraphSession)

    assert session.registry.keys() == [a.key for a in algorithms_for("graph")]
    assert [b.info for b in session.registry.list_all()] == algorithms_for("graph")
    assert session.registry.has("dijkstra")
    assert "quick" not in session.registry


def test_unknown_key_warns_and_is_a_no_op(make_session, caplog):
    session = make_session(SortingSession)
    before = session.state.snapshot()

    with caplog.at_level(logging.WARNING, logger="engine.registry"):
        result = asyncio.run(session.registry.run("bogo"))
        assert session.registry.init("bogo") is False
        assert session.registry.prepare_steps("bogo") == 0

    assert result is None
    assert session.state.snapshot() == before
    assert caplog.text.count("'bogo' not found") == 3


def test_register_overwrites_and_extends(make_session):
    session = make_session(SortingSession)
    registry = AlgorithmRegistry()
    original = session.registry.get("bubble")
    registry.register(original)

    calls = []

    async def fake_run(*args):
        calls.append(args)
        return "done"

    registry.register(AlgorithmBundle(
        key="bubble", info=original.info, run=fake_run,
        generate_steps=original.generate_steps, prepare_steps=original.prepare_steps,
        init=original.init,
    ))

    assert len(registry) == 1
    assert asyncio.run(registry.run("bubble", 1, 2)) == "done"
    assert calls == [(1, 2)]


def test_init_selects_and_seeds(make_session):
    session = make_session(GraphSession)
    session.state.graph.directed = True

    session.registry.init("prims")

    assert session.state.algorithm.key == "prims"
    assert session.state.graph.directed is False
    assert all(edge.weight is not None for edge in session.state.graph.edges)
    assert session.state.explanation[0] == "ALGO: Prim's Algorithm"
