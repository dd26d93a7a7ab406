import random
from collections import deque

import pytest

from engine import GraphSession
from models import Graph


def graph_session(make_session, graph):
    session = make_session(GraphSession)
    session.load_graph(graph)
    return session


def path_nodes(edges):
    """Turn target-first path edges into a start → target node list."""
    if not edges:
        return []
    return [edges[-1][0]] + [b for _, b in reversed(edges)]


def hop_distances(graph, start):
    dist = {start: 0}
    todo = deque([start])
    while todo:
        node = todo.popleft()
        for nbr, _ in graph.neighbours(node):
            if nbr not in dist:
                dist[nbr] = dist[node] + 1
                todo.append(nbr)
    return dist


def reference_mst_weight(graph):
    parent = {n: n for n in graph.node_ids()}

    def find(x):
        while parent[x] != x:
            x = parent[x]
        return x

    total = 0
    for edge in sorted(graph.edges, key=lambda e: e.cost):
        a, b = find(edge.source), find(edge.target)
        if a != b:
            parent[a] = b
            total += edge.cost
    return total


def random_graph(seed, **kwargs):
    return Graph.generate_random(rng=random.Random(seed), **kwargs)


# ---------------------------------------------------------------------------
# Shortest paths
# ---------------------------------------------------------------------------
def test_dijkstra_three_node_scenario(make_session, run_live, triangle):
    session = graph_session(make_session, triangle)

    run_live(session, "dijkstra", 0, 2)

    state = session.state
    assert state.target_found is True
    assert state.distances[2] == 5
    assert path_nodes(state.shortest_path_edges) == [0, 1, 2]
    assert state.shortest_path_edges == [(1, 2), (0, 1)]


@pytest.mark.parametrize("key", ["astar", "bellman_ford"])
def test_weighted_searches_agree_on_triangle(make_session, run_live, triangle, key):
    session = graph_session(make_session, triangle)

    run_live(session, key, 0, 2)

    assert session.state.target_found is True
    assert path_nodes(session.state.shortest_path_edges) == [0, 1, 2]


@pytest.mark.parametrize("seed", range(6))
@pytest.mark.parametrize("key", ["bfs", "dfs", "dijkstra", "astar", "bellman_ford"])
def test_reachable_target_is_found_with_unbroken_chain(make_session, run_live, seed, key):
    graph = random_graph(seed)
    session = graph_session(make_session, graph)
    target = graph.node_count() - 1

    run_live(session, key, 0, target)

    state = session.state
    assert state.target_found is True
    nodes = path_nodes(state.shortest_path_edges)
    assert nodes[0] == 0 and nodes[-1] == target
    assert len(set(nodes)) == len(nodes)
    for a, b in zip(nodes, nodes[1:]):
        assert graph.has_edge_between(a, b)


@pytest.mark.parametrize("seed", range(8))
def test_bfs_path_is_shortest_by_hops(make_session, run_live, seed):
    graph = random_graph(seed, weighted=False)
    session = graph_session(make_session, graph)
    oracle = hop_distances(graph, 0)

    for target in graph.node_ids()[1:]:
        run_live(session, "bfs", 0, target)
        assert len(session.state.shortest_path_edges) == oracle[target]


def test_bfs_visits_every_node_once_without_target(make_session, run_live):
    graph = random_graph(11)
    session = graph_session(make_session, graph)

    run_live(session, "bfs", 0)

    visited = session.state.visited_nodes
    assert sorted(visited) == graph.node_ids()
    assert session.state.visited_count == graph.node_count()
    assert session.state.target_found is False
    assert session.state.queue == []


def test_dfs_call_stack_unwinds(make_session):
    graph = Graph.from_edges(4, [(0, 1), (1, 2), (0, 3)])
    session = graph_session(make_session, graph)

    steps = session.registry.get("dfs").generate_steps(0)

    assert max(len(s.dfs_call_stack) for s in steps) == 3
    assert steps[-1].dfs_call_stack == []
    assert steps[-1].visited_nodes == [0, 1, 2, 3]


def test_unreachable_target_completes_without_path(make_session, run_live):
    graph = Graph.from_edges(4, [(0, 1, 1), (2, 3, 1)])
    session = graph_session(make_session, graph)

    for key in ("bfs", "dijkstra", "astar", "bellman_ford"):
        run_live(session, key, 0, 3)
        assert session.state.target_found is False
        assert session.state.shortest_path_edges == []
        assert session.state.is_running is False


def test_dijkstra_ties_prefer_lowest_node_id(make_session):
    graph = Graph.from_edges(3, [(0, 2, 1), (0, 1, 1)])
    session = graph_session(make_session, graph)

    steps = session.registry.get("dijkstra").generate_steps(0)

    assert steps[-1].visited_nodes == [0, 1, 2]


def test_zero_weight_edges_keep_their_weight(make_session, run_live):
    graph = Graph.from_edges(3, [(0, 1, 0), (1, 2, 0), (0, 2, 1)])
    session = graph_session(make_session, graph)

    run_live(session, "dijkstra", 0, 2)

    assert session.state.distances[2] == 0


# ---------------------------------------------------------------------------
# Bellman-Ford
# ---------------------------------------------------------------------------
def test_negative_cycle_detected_and_path_suppressed(make_session, run_live):
    graph = Graph.from_edges(4, [(0, 1, 1), (1, 2, -3), (2, 1, 1), (2, 3, 2)], directed=True)
    session = graph_session(make_session, graph)

    run_live(session, "bellman_ford", 0, 3)

    state = session.state
    assert state.negative_cycle is True
    assert state.target_found is False
    assert state.shortest_path_edges == []
    assert any("NEGATIVE CYCLE" in line for line in state.explanation)


def test_bellman_ford_negative_edge_without_cycle(make_session, run_live):
    graph = Graph.from_edges(3, [(0, 1, 4), (0, 2, 5), (2, 1, -3)], directed=True)
    session = graph_session(make_session, graph)

    run_live(session, "bellman_ford", 0, 1)

    state = session.state
    assert state.negative_cycle is False
    assert state.distances[1] == 2
    assert path_nodes(state.shortest_path_edges) == [0, 2, 1]
    assert 0 in state.visited_nodes


# ---------------------------------------------------------------------------
# Minimum spanning trees
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("seed", range(8))
def test_prims_and_kruskals_build_the_same_weight_spanning_tree(make_session, run_live, seed):
    graph = random_graph(seed, directed=False, weighted=True)
    expected = reference_mst_weight(graph)
    n = graph.node_count()

    prim = graph_session(make_session, graph)
    run_live(prim, "prims", 0)
    kruskal = graph_session(make_session, graph)
    run_live(kruskal, "kruskals")

    for state in (prim.state, kruskal.state):
        assert len(state.mst_edges) == n - 1
        assert state.mst_weight == expected
        assert sum(w for _, _, w in state.mst_edges) == expected

        parent = {v: v for v in graph.node_ids()}

        def find(x):
            while parent[x] != x:
                x = parent[x]
            return x

        for a, b, _ in state.mst_edges:
            ra, rb = find(a), find(b)
            assert ra != rb
            parent[ra] = rb
        assert len({find(v) for v in graph.node_ids()}) == 1


def test_prims_warns_about_unreachable_nodes(make_session, run_live):
    graph = Graph.from_edges(4, [(0, 1, 1), (2, 3, 1)])
    session = graph_session(make_session, graph)

    run_live(session, "prims", 0)

    assert session.state.mst_edges == [(0, 1, 1)]
    assert any("unreachable" in line for line in session.state.explanation)


# ---------------------------------------------------------------------------
# Argument handling
# ---------------------------------------------------------------------------
def test_missing_start_is_a_no_op(make_session, run_live, triangle):
    session = graph_session(make_session, triangle)
    before = session.state.snapshot()

    assert run_live(session, "bfs") is None
    assert session.registry.get("dijkstra").generate_steps() == []
    assert session.state.snapshot() == before


def test_astar_requires_a_target(make_session, triangle):
    session = graph_session(make_session, triangle)

    assert session.registry.get("astar").generate_steps(0) == []
    assert session.registry.get("astar").generate_steps(0, 2) != []


def test_selected_nodes_are_used_by_default(make_session, run_live, triangle):
    session = graph_session(make_session, triangle)
    session.select(start=0, target=2)

    run_live(session, "dijkstra")

    assert session.state.target_found is True


def test_selecting_unknown_node_clears_picker(make_session, triangle):
    session = graph_session(make_session, triangle)
    session.select(start=0, target=99)

    assert session.state.selected_start_node == 0
    assert session.state.selected_target_node is None


def test_empty_graph_is_a_no_op(make_session, run_live):
    session = graph_session(make_session, Graph())

    assert run_live(session, "kruskals") is None
    assert session.registry.get("kruskals").generate_steps() == []


@pytest.mark.parametrize("edges", [
    [(0, 1), (1, 7)],
    [(0, 1, "3")],
    [(0, 1, True)],
])
def test_graph_rejects_dangling_edges_and_non_numeric_weights(edges):
    with pytest.raises(ValueError):
        Graph.from_edges(2, edges)


def test_graph_from_dict_validates_edges():
    data = {
        "nodes": [{"id": 0}, {"id": 1}],
        "edges": [{"from": 0, "to": 1, "weight": 2.5}],
    }
    assert Graph.from_dict(data).edges[0].cost == 2.5

    data["edges"].append({"from": 1, "to": 7, "weight": 1})
    with pytest.raises(ValueError):
        Graph.from_dict(data)
