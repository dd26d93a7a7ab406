"""
tree_traversal.py — Depth-First Tree Traversals
================================================
In-order (L-N-R), pre-order (N-L-R) and post-order (L-R-N) share one
recursive walk; only the moment the node's value is emitted changes.

For every node the walk:
  1. pushes it on the call stack and makes it current     →  ENTER
  2. walks to each existing child, counting the edge      →  DESCEND
  3. emits its value at the position the order dictates   →  EMIT
  4. pops the call stack on the way out                   →  BACKTRACK

The traversal always starts at the root, id 0.
"""

from typing import Generator, List, Optional, TYPE_CHECKING

from algorithms.events import Event, EventKind, EventStream, info

if TYPE_CHECKING:
    from engine.state import TreeState


IN_ORDER   = "in-order"
PRE_ORDER  = "pre-order"
POST_ORDER = "post-order"

_TITLES = {
    IN_ORDER:   "In-Order Traversal (Left → Node → Right)",
    PRE_ORDER:  "Pre-Order Traversal (Node → Left → Right)",
    POST_ORDER: "Post-Order Traversal (Left → Right → Node)",
}

PSEUDOCODE = {
    IN_ORDER:   ["def inOrder(n):", "    inOrder(n.left)", "    visit(n)", "    inOrder(n.right)"],
    PRE_ORDER:  ["def preOrder(n):", "    visit(n)", "    preOrder(n.left)", "    preOrder(n.right)"],
    POST_ORDER: ["def postOrder(n):", "    postOrder(n.left)", "    postOrder(n.right)", "    visit(n)"],
}


def in_order(state: "TreeState") -> EventStream:
    return traverse(state, IN_ORDER)


def pre_order(state: "TreeState") -> EventStream:
    return traverse(state, PRE_ORDER)


def post_order(state: "TreeState") -> EventStream:
    return traverse(state, POST_ORDER)


def traverse(state: "TreeState", order: str) -> EventStream:
    title = _TITLES[order]
    yield info(f"Starting {title}...")
    yield from _walk(state, state.tree.ROOT, order)
    state.current_node = None
    state.current_edge = None
    state.call_stack = []
    yield info(f"{title.split(' (')[0]} Complete! Result: [{_joined(state.traversal_result)}]")


def _walk(state: "TreeState", node_id: Optional[int], order: str) -> Generator:
    node = state.tree.get(node_id)
    if node is None:
        return

    state.call_stack.append(node.id)
    state.current_node = node.id
    yield Event(EventKind.ENTER, f"Entering node {node.label}", pace="enter")

    if order == PRE_ORDER:
        yield from _emit(state, node)

    for side, child in (("left", node.left), ("right", node.right)):
        if order == IN_ORDER and side == "right":
            yield from _emit(state, node)
        if child is None:
            continue
        state.current_edge = (node.id, child)
        state.edge_explored_count += 1
        yield Event(EventKind.DESCEND, f"Going to {side} child of {node.label}", pace="descend")
        state.current_edge = None
        yield from _walk(state, child, order)

    if order == POST_ORDER:
        yield from _emit(state, node)

    state.call_stack.pop()
    state.current_node = None
    yield Event(EventKind.BACKTRACK, f"Backtrack from {node.label}")


def _emit(state: "TreeState", node) -> EventStream:
    state.current_node = node.id
    state.visited_nodes.append(node.id)
    state.traversal_result.append(node.value)
    state.visited_count += 1
    yield Event(
        EventKind.EMIT,
        f"VISIT: {node.label} → Result: [{_joined(state.traversal_result)}]",
        pace="emit",
    )


def _joined(values: List[int]) -> str:
    return ", ".join(str(v) for v in values)
