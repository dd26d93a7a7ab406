"""
astar.py — A* Search
=====================
Dijkstra guided by a heuristic: always expand the open-set node with the
smallest f = g + h, where g is the cost so far and h is the straight-line
canvas distance to the target scaled down by 50 (so it stays comparable
to the 1–9 edge weights).

Closed nodes are never reopened.  The open set is mirrored into
``state.queue`` (ascending id) so the renderer can show the frontier.
Ties on f go to the lowest node id.
"""

from typing import List, Set, TYPE_CHECKING

from algorithms.events import Event, EventKind, EventStream, info
from algorithms.paths import edge_key, reconstruct_edges, describe_path, fmt_cost

if TYPE_CHECKING:
    from engine.state import GraphState
    from models import Graph


INF = float("inf")
HEURISTIC_SCALE = 50

PSEUDOCODE: List[str] = [
    "open ← {source};  g[source] ← 0",
    "while open:",
    "    u ← argmin g[u] + h(u) over open",
    "    if u == target: return path",
    "    move u from open to closed",
    "    for (v, w) in adj(u), v not closed:",
    "        if v not in open or g[u] + w < g[v]:",
    "            g[v] ← g[u] + w;  prev[v] ← u;  open.add(v)",
]


def heuristic(graph: "Graph", node_id: int, target: int) -> float:
    """Euclidean canvas distance / 50."""
    a, b = graph.get_node(node_id), graph.get_node(target)
    if a is None or b is None:
        return 0.0
    return a.distance_to(b) / HEURISTIC_SCALE


def astar(state: "GraphState", start: int, target: int) -> EventStream:
    graph = state.graph
    label = graph.label

    state.distances    = {nid: INF for nid in graph.node_ids()}
    state.predecessors = {nid: None for nid in graph.node_ids()}
    state.distances[start] = 0
    open_set:   Set[int] = {start}
    closed_set: Set[int] = set()
    explored:   Set      = set()
    state.queue = [start]

    yield info(f"Starting A* Search from {label(start)} towards {label(target)}.")

    while open_set:
        current = None
        best_f = INF
        for nid in sorted(open_set):
            f = state.distances[nid] + heuristic(graph, nid, target)
            if f < best_f:
                best_f = f
                current = nid
        if current is None:
            break

        g = state.distances[current]
        state.current_node = current
        yield Event(
            EventKind.SELECT,
            f"Selecting node {label(current)} with fScore = {best_f:.1f} "
            f"(g: {fmt_cost(g)}, h: {heuristic(graph, current, target):.1f}).",
            pace="node",
        )

        if current == target:
            state.target_found = True
            state.visited_nodes.append(current)
            state.visited_count += 1
            yield Event(EventKind.FOUND, f"Target node {label(current)} reached!")
            break

        open_set.discard(current)
        closed_set.add(current)
        state.queue = sorted(open_set)
        state.visited_nodes.append(current)
        state.visited_count += 1

        for nbr, edge in graph.neighbours(current):
            if nbr in closed_set:
                continue
            weight = edge.cost
            key = edge_key(current, nbr, graph.directed)
            if key not in explored:
                explored.add(key)
                state.edge_explored_count += 1

            state.current_edge = (current, nbr)
            yield Event(
                EventKind.RELAX,
                f"Checking neighbor {label(nbr)} (edge weight: {fmt_cost(weight)}).",
                pace="edge",
            )

            tentative = g + weight
            if nbr not in open_set or tentative < state.distances[nbr]:
                state.predecessors[nbr] = current
                state.distances[nbr] = tentative
                if nbr not in open_set:
                    open_set.add(nbr)
                    state.queue = sorted(open_set)
                    yield Event(EventKind.UPDATE, f"Added {label(nbr)} to open set.")
                else:
                    yield Event(EventKind.UPDATE, f"Found better path to {label(nbr)}.")
            state.current_edge = None

        state.current_node = None

    state.current_node = None
    state.current_edge = None
    state.queue = []

    if state.target_found:
        state.shortest_path_edges = reconstruct_edges(state.predecessors, target)
        yield Event(
            EventKind.PATH,
            f"Shortest path highlighted: {describe_path(state.shortest_path_edges, label) or label(target)}.",
        )
    else:
        yield info(f"Open set exhausted: {label(target)} is not reachable from {label(start)}.")

    yield info("A* Search algorithm completed!")
