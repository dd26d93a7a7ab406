"""
bfs.py — Breadth-First Search
==============================
FIFO queue.  A node is marked visited when it is dequeued, and unseen
neighbours are enqueued in adjacency (edge insertion) order.  Events:

  1. Dequeue a node            →  VISIT (current_node set)
  2. Node recorded as visited  →  MARK
  3. Walk an edge to a new nbr →  EXPLORE (current_edge set)
  4. Neighbour enqueued        →  ENQUEUE
  5. Target dequeued           →  FOUND + shortest (hop-count) path

Explored edges are counted once per undirected pair, or once per directed
edge on a directed graph.
"""

from typing import List, Optional, Set, TYPE_CHECKING

from algorithms.events import Event, EventKind, EventStream, info
from algorithms.paths import edge_key, reconstruct_edges, describe_path

if TYPE_CHECKING:
    from engine.state import GraphState


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, source, target):",
    "    queue ← [source];  seen ← {source}",
    "    while queue is not empty:",
    "        node ← queue.dequeue();  visit(node)",
    "        if node == target: return path",
    "        for neighbour in adj(node):",
    "            if neighbour not in seen:",
    "                seen.add(neighbour);  parent[neighbour] ← node",
    "                queue.enqueue(neighbour)",
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(state: "GraphState", start: int, target: Optional[int] = None) -> EventStream:
    graph = state.graph
    label = graph.label

    seen:     Set[int] = {start}
    explored: Set      = set()
    state.queue        = [start]
    state.predecessors = {nid: None for nid in graph.node_ids()}

    yield info(f"Starting BFS traversal from node {label(start)}.")

    while state.queue:
        node = state.queue.pop(0)
        state.current_node = node
        yield Event(EventKind.VISIT, f"Dequeued node {label(node)}.", pace="node")

        state.visited_nodes.append(node)
        state.visited_count += 1
        state.current_node = None
        yield Event(EventKind.MARK, f"Marked node {label(node)} as visited.")

        if node == target:
            state.target_found = True
            state.shortest_path_edges = reconstruct_edges(state.predecessors, target)
            yield Event(
                EventKind.FOUND,
                f"Target {label(target)} found! Path: {describe_path(state.shortest_path_edges, label) or label(target)}.",
            )
            break

        for nbr, _edge in graph.neighbours(node):
            if nbr in seen:
                continue
            key = edge_key(node, nbr, graph.directed)
            if key not in explored:
                explored.add(key)
                state.edge_explored_count += 1

            state.current_edge = (node, nbr)
            yield Event(EventKind.EXPLORE, f"Exploring edge {label(node)} → {label(nbr)}.", pace="edge")

            seen.add(nbr)
            state.predecessors[nbr] = node
            state.queue.append(nbr)
            state.current_edge = None
            yield Event(EventKind.ENQUEUE, f"Neighbor {label(nbr)} added to queue.")

    state.current_node = None
    state.current_edge = None
    state.queue = []
    if target is not None and not state.target_found:
        yield info(f"Target {label(target)} is not reachable from {label(start)}.")
    yield info("BFS traversal completed!")
