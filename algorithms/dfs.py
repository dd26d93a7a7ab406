"""
dfs.py — Depth-First Search
============================
Recursive descent.  A node is marked visited on entry, neighbours are
tried in adjacency order, and the call stack mirrors the recursion
exactly: pushed on entry, popped on backtrack.  When the target is found
the recursion stops and the stack is left as it was at that moment.

DFS does NOT guarantee a shortest path; the path highlighted on success
is the branch of the DFS tree that reached the target.
"""

from typing import Generator, List, Optional, Set, TYPE_CHECKING

from algorithms.events import Event, EventKind, EventStream, info
from algorithms.paths import edge_key, reconstruct_edges, describe_path

if TYPE_CHECKING:
    from engine.state import GraphState


PSEUDOCODE: List[str] = [
    "def DFS(node):",
    "    push node on call stack;  visit(node)",
    "    if node == target: stop",
    "    for neighbour in adj(node):",
    "        if neighbour not visited:",
    "            DFS(neighbour)",
    "    pop call stack            # backtrack",
]


def dfs(state: "GraphState", start: int, target: Optional[int] = None) -> EventStream:
    graph = state.graph
    label = graph.label
    state.predecessors = {nid: None for nid in graph.node_ids()}

    yield info(f"Starting DFS traversal from node {label(start)}.")
    yield from _visit(state, start, target, set(), set())

    if state.target_found:
        state.shortest_path_edges = reconstruct_edges(state.predecessors, target)
        yield Event(
            EventKind.PATH,
            f"Path found: {describe_path(state.shortest_path_edges, label) or label(target)}.",
        )
    elif target is not None:
        yield info(f"Target {label(target)} is not reachable from {label(start)}.")

    state.current_node = None
    state.current_edge = None
    state.dfs_call_stack = []
    yield info("DFS traversal completed!")


def _visit(
    state: "GraphState",
    node: int,
    target: Optional[int],
    visited: Set[int],
    explored: Set,
) -> Generator:
    graph = state.graph
    label = graph.label

    state.dfs_call_stack.append(node)
    visited.add(node)
    state.visited_count += 1
    state.current_node = node
    yield Event(EventKind.VISIT, f"Visiting node {label(node)}.", pace="node")

    state.visited_nodes.append(node)
    state.current_node = None
    yield Event(EventKind.MARK, f"Marked node {label(node)} as visited.")

    if node == target:
        state.target_found = True
        yield Event(EventKind.FOUND, f"Target {label(node)} found!")
        return True

    for nbr, _edge in graph.neighbours(node):
        if nbr in visited:
            continue
        key = edge_key(node, nbr, graph.directed)
        if key not in explored:
            explored.add(key)
            state.edge_explored_count += 1
        state.predecessors[nbr] = node
        state.current_edge = (node, nbr)
        yield Event(EventKind.EXPLORE, f"Exploring edge {label(node)} → {label(nbr)}.", pace="edge")
        state.current_edge = None

        if (yield from _visit(state, nbr, target, visited, explored)):
            return True

    state.dfs_call_stack.pop()
    yield Event(EventKind.BACKTRACK, f"Backtracking from node {label(node)}.")
    return False
