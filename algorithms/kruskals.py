"""
kruskals.py — Kruskal's Minimum Spanning Tree
==============================================
Sort every edge ascending by weight (stable, so equal weights keep their
insertion order) and accept an edge iff its endpoints currently sit in
different components.  A union-find structure answers that question.

Needs no start node; the whole edge set is processed even after the tree
is complete, so every rejection is narrated.
"""

from typing import Dict, List, TYPE_CHECKING

from algorithms.events import Event, EventKind, EventStream, info
from algorithms.paths import fmt_cost

if TYPE_CHECKING:
    from engine.state import GraphState


PSEUDOCODE: List[str] = [
    "sort edges by weight",
    "for (u, v, w) in edges:",
    "    if find(u) ≠ find(v):",
    "        union(u, v);  accept (u, v)",
    "    else: skip — would form a cycle",
]


class DisjointSet:
    """Union-find with path halving and union by size."""

    def __init__(self, items):
        self.parent: Dict[int, int] = {i: i for i in items}
        self.size:   Dict[int, int] = {i: 1 for i in items}

    def find(self, item: int) -> int:
        while self.parent[item] != item:
            self.parent[item] = self.parent[self.parent[item]]
            item = self.parent[item]
        return item

    def union(self, a: int, b: int) -> bool:
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self.size[root_a] < self.size[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        self.size[root_a] += self.size[root_b]
        return True


def kruskals(state: "GraphState") -> EventStream:
    graph = state.graph
    label = graph.label

    edges = sorted(graph.edges, key=lambda e: e.cost)
    components = DisjointSet(graph.node_ids())

    yield info(f"Starting Kruskal's Algorithm: {len(edges)} edges sorted by weight.")

    for edge in edges:
        a, b, w = edge.source, edge.target, edge.cost
        state.current_edge = (a, b)
        state.edge_explored_count += 1
        yield Event(
            EventKind.RELAX,
            f"Checking edge {label(a)} - {label(b)} (weight: {fmt_cost(w)}).",
            pace="node",
        )

        if components.union(a, b):
            state.mst_edges.append((a, b, w))
            state.mst_weight += w
            for node in (a, b):
                if node not in state.visited_nodes:
                    state.visited_nodes.append(node)
            state.visited_count = len(state.visited_nodes)
            yield Event(EventKind.ACCEPT, f"Added edge {label(a)} - {label(b)} to MST.")
        else:
            yield Event(EventKind.REJECT, f"Edge {label(a)} - {label(b)} forms a cycle. Skipping.")
        state.current_edge = None

    state.current_edge = None
    yield info(f"Kruskal's Algorithm completed! MST weight: {fmt_cost(state.mst_weight)}.")
