"""
bellman_ford.py — Bellman–Ford Algorithm
=========================================
The single-source shortest-path algorithm that copes with NEGATIVE edge
weights, and tells you when a negative cycle makes "shortest" meaningless.

Structure:
  • Up to V-1 passes relaxing every arc (both directions of an undirected
    edge), stopping early after a pass that changed nothing.
  • One detector pass over the same arcs: any arc that can still be
    relaxed proves a negative cycle reachable from the source.

Bookkeeping quirks worth knowing:
  • A node joins ``visited_nodes`` the first time its distance improves,
    and the source joins at the end of the first pass.  "Visited" here
    means "distance improved at least once".
  • ``edge_explored_count`` counts every relaxation attempt from a reached
    node, not distinct edges.
  • The negative-cycle flag suppresses path reconstruction; the run still
    finishes normally and the detector pass always scans every arc.
"""

from typing import List, Optional, Tuple, TYPE_CHECKING

from algorithms.events import Event, EventKind, EventStream, info
from algorithms.paths import reconstruct_edges, describe_path, fmt_cost

if TYPE_CHECKING:
    from engine.state import GraphState


INF = float("inf")

# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "dist ← {v: ∞};  dist[source] ← 0",
    "repeat |V|-1 times:",
    "    for each arc (u, v, w):",
    "        if dist[u] + w < dist[v]: dist[v] ← dist[u] + w;  prev[v] ← u",
    "    stop early if nothing changed",
    "for each arc (u, v, w):",
    "    if dist[u] + w < dist[v]: NEGATIVE CYCLE",
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bellman_ford(state: "GraphState", start: int, target: Optional[int] = None) -> EventStream:
    graph = state.graph
    label = graph.label
    arcs: List[Tuple[int, int, float]] = graph.arcs()
    node_count = graph.node_count()

    state.distances    = {nid: INF for nid in graph.node_ids()}
    state.predecessors = {nid: None for nid in graph.node_ids()}
    state.distances[start] = 0

    yield info("Starting Bellman-Ford Algorithm...")
    yield info(f"Initialized all distances to ∞, source node {label(start)} distance = 0.")

    # ==============================================================
    # MAIN PASSES
    # ==============================================================
    for i in range(node_count - 1):
        yield info(f"--- Iteration {i + 1} of {node_count - 1} ---")
        updated = False

        for u, v, w in arcs:
            if state.distances[u] == INF:
                continue
            state.current_edge = (u, v)
            state.edge_explored_count += 1
            yield Event(EventKind.RELAX, f"Checking edge {label(u)} → {label(v)} (weight: {fmt_cost(w)}).", pace="sweep")

            candidate = state.distances[u] + w
            if candidate < state.distances[v]:
                state.distances[v] = candidate
                state.predecessors[v] = u
                updated = True
                if v not in state.visited_nodes:
                    state.visited_nodes.append(v)
                    state.visited_count += 1
                yield Event(
                    EventKind.UPDATE,
                    f"Relaxed edge {label(u)} → {label(v)}: distance updated to {fmt_cost(candidate)}.",
                )
            state.current_edge = None

        if start not in state.visited_nodes:
            state.visited_nodes.append(start)
            state.visited_count += 1

        if not updated:
            yield info("No updates in this iteration. Algorithm can terminate early.")
            break
        yield Event(EventKind.MARK, f"Iteration {i + 1} complete.")

    # ==============================================================
    # NEGATIVE-CYCLE DETECTOR
    # ==============================================================
    yield info("--- Checking for negative cycles ---")
    for u, v, w in arcs:
        if state.distances[u] == INF:
            continue
        state.current_edge = (u, v)
        yield Event(EventKind.PROBE, f"Re-checking edge {label(u)} → {label(v)}.", pace="detect")
        if state.distances[u] + w < state.distances[v]:
            state.negative_cycle = True
            yield Event(
                EventKind.WARN,
                f"⚠️ NEGATIVE CYCLE DETECTED! Edge {label(u)} → {label(v)} can still be relaxed.",
            )
        state.current_edge = None

    # ==============================================================
    # PATH RECONSTRUCTION
    # ==============================================================
    state.current_edge = None
    if not state.negative_cycle and target is not None and state.distances.get(target, INF) != INF:
        state.shortest_path_edges = reconstruct_edges(state.predecessors, target)
        state.target_found = True
        yield Event(
            EventKind.PATH,
            f"Shortest path highlighted: {describe_path(state.shortest_path_edges, label) or label(target)} "
            f"(distance {fmt_cost(state.distances[target])}).",
        )
    elif not state.negative_cycle and target is not None:
        yield info(f"Target {label(target)} is not reachable from {label(start)}.")

    if state.negative_cycle:
        yield info("Bellman-Ford Algorithm completed. Negative cycle detected - shortest paths are not valid!")
    else:
        yield info("Bellman-Ford Algorithm completed! Shortest paths found.")
