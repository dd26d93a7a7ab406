"""
prims.py — Prim's Minimum Spanning Tree
========================================
Grow a single tree from the start node.  ``distances`` holds, for every
node outside the tree, the cheapest known edge weight connecting it to
the tree (its "key"); ``predecessors`` remembers which tree node offers
that edge.

Each round absorbs the outside node with the smallest key (lowest id on
ties) and records the edge to its predecessor as an MST edge.  Nodes that
never get a finite key are reported as unreachable; that is a normal
finish, not an error.
"""

from typing import List, Set, TYPE_CHECKING

from algorithms.events import Event, EventKind, EventStream, info
from algorithms.paths import edge_key, fmt_cost

if TYPE_CHECKING:
    from engine.state import GraphState


INF = float("inf")

PSEUDOCODE: List[str] = [
    "key ← {v: ∞};  key[source] ← 0",
    "while nodes remain outside the tree:",
    "    u ← argmin key over outside nodes;  stop if ∞",
    "    add u (and edge prev[u]–u) to the tree",
    "    for (v, w) in adj(u), v outside:",
    "        if w < key[v]: key[v] ← w;  prev[v] ← u",
]


def prims(state: "GraphState", start: int) -> EventStream:
    graph = state.graph
    label = graph.label

    state.distances    = {nid: INF for nid in graph.node_ids()}
    state.predecessors = {nid: None for nid in graph.node_ids()}
    state.distances[start] = 0
    outside:  Set[int] = set(graph.node_ids())
    explored: Set      = set()

    yield info(f"Starting Prim's Algorithm from node {label(start)}.")

    while outside:
        current = None
        best = INF
        for nid in sorted(outside):
            if state.distances[nid] < best:
                best = state.distances[nid]
                current = nid
        if current is None:
            yield Event(
                EventKind.WARN,
                f"Remaining nodes are unreachable: {', '.join(label(n) for n in sorted(outside))}.",
            )
            break

        state.current_node = current
        yield Event(
            EventKind.SELECT,
            f"Selecting node {label(current)} with minimum edge weight "
            f"{'0 (start)' if current == start else fmt_cost(best)}.",
            pace="node",
        )

        outside.discard(current)
        state.visited_nodes.append(current)
        state.visited_count += 1

        prev = state.predecessors[current]
        if prev is not None:
            state.mst_edges.append((prev, current, best))
            state.mst_weight += best
            yield Event(EventKind.ACCEPT, f"Added edge {label(prev)} - {label(current)} to MST.")

        for nbr, edge in graph.neighbours(current):
            if nbr not in outside:
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
            if weight < state.distances[nbr]:
                state.distances[nbr] = weight
                state.predecessors[nbr] = current
                yield Event(EventKind.UPDATE, f"Updated minimum edge weight for {label(nbr)} to {fmt_cost(weight)}.")
            state.current_edge = None

        state.current_node = None

    state.current_node = None
    state.current_edge = None
    yield info(f"Prim's Algorithm completed! MST weight: {fmt_cost(state.mst_weight)}.")
