"""
dijkstra.py — Dijkstra's Algorithm
===================================
Repeatedly settle the unvisited node with the smallest tentative distance
and relax every edge leading to a still-unvisited neighbour.

Tie-break: candidates are scanned in ascending node id and only a
strictly smaller distance replaces the current pick, so among equal
distances the lowest id wins.  Missing edge weights count as 1.

Stops when no reachable unvisited node is left or the target is picked.
"""

from typing import List, Optional, Set, TYPE_CHECKING

from algorithms.events import Event, EventKind, EventStream, info
from algorithms.paths import edge_key, reconstruct_edges, describe_path, fmt_cost

if TYPE_CHECKING:
    from engine.state import GraphState


INF = float("inf")

PSEUDOCODE: List[str] = [
    "dist ← {v: ∞};  dist[source] ← 0",
    "while unvisited:",
    "    u ← argmin dist over unvisited",
    "    if dist[u] == ∞ or u == target: break",
    "    for (v, w) in adj(u) with v unvisited:",
    "        if dist[u] + w < dist[v]: dist[v] ← dist[u] + w;  prev[v] ← u",
]


def dijkstra(state: "GraphState", start: int, target: Optional[int] = None) -> EventStream:
    graph = state.graph
    label = graph.label

    state.distances    = {nid: INF for nid in graph.node_ids()}
    state.predecessors = {nid: None for nid in graph.node_ids()}
    state.distances[start] = 0
    unvisited: Set[int] = set(graph.node_ids())
    explored:  Set      = set()

    yield info(f"Starting Dijkstra from node {label(start)}: distance 0 there, ∞ everywhere else.")

    while unvisited:
        current: Optional[int] = None
        best = INF
        for nid in sorted(unvisited):
            if state.distances[nid] < best:
                best = state.distances[nid]
                current = nid
        if current is None:
            break

        state.current_node = current
        yield Event(
            EventKind.SELECT,
            f"Visiting node {label(current)} with current shortest distance {fmt_cost(best)}.",
            pace="node",
        )

        if current == target:
            state.target_found = True
            state.visited_nodes.append(current)
            state.visited_count += 1
            yield Event(EventKind.FOUND, f"Target {label(current)} reached with distance {fmt_cost(best)}.")
            break

        unvisited.discard(current)
        state.visited_nodes.append(current)
        state.visited_count += 1

        for nbr, edge in graph.neighbours(current):
            if nbr not in unvisited:
                continue
            weight = edge.cost
            key = edge_key(current, nbr, graph.directed)
            if key not in explored:
                explored.add(key)
                state.edge_explored_count += 1

            state.current_edge = (current, nbr)
            yield Event(
                EventKind.RELAX,
                f"Checking edge {label(current)} → {label(nbr)} (weight: {fmt_cost(weight)}).",
                pace="edge",
            )

            candidate = state.distances[current] + weight
            if candidate < state.distances[nbr]:
                state.distances[nbr] = candidate
                state.predecessors[nbr] = current
                yield Event(EventKind.UPDATE, f"Updated distance for node {label(nbr)} to {fmt_cost(candidate)}.")
            state.current_edge = None

        state.current_node = None

    state.current_node = None
    state.current_edge = None

    if state.target_found and target is not None:
        state.shortest_path_edges = reconstruct_edges(state.predecessors, target)
        yield Event(
            EventKind.PATH,
            f"Shortest path: {describe_path(state.shortest_path_edges, label) or label(target)} "
            f"(distance {fmt_cost(state.distances[target])}).",
        )
    elif target is not None:
        yield info(f"Target {label(target)} is not reachable from {label(start)}.")

    yield info("Dijkstra's algorithm completed!")

