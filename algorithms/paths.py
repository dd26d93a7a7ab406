"""
paths.py — shared graph bookkeeping helpers
"""

from typing import Dict, FrozenSet, List, Optional, Tuple, Union


EdgeKey = Union[Tuple[int, int], FrozenSet[int]]


def edge_key(a: int, b: int, directed: bool) -> EdgeKey:
    """Identity used to count an explored edge once (per pair when undirected)."""
    return (a, b) if directed else frozenset((a, b))


def reconstruct_edges(predecessors: Dict[int, Optional[int]], target: int) -> List[Tuple[int, int]]:
    """
    Walk predecessors back from `target`, emitting (prev, node) edges in
    reverse traversal order (the edge into the target comes first).
    Stops at the first missing predecessor or at a repeated node.
    """
    edges: List[Tuple[int, int]] = []
    seen = {target}
    current = target
    while predecessors.get(current) is not None:
        prev = predecessors[current]
        edges.append((prev, current))
        if prev in seen:
            break
        seen.add(prev)
        current = prev
    return edges


def describe_path(edges: List[Tuple[int, int]], label) -> str:
    if not edges:
        return ""
    nodes = [edges[-1][0]] + [b for _, b in reversed(edges)]
    return " → ".join(label(n) for n in nodes)


def fmt_cost(value: float) -> str:
    """Distance / weight for narration: ∞ for unreached, no trailing .0."""
    if value == float("inf"):
        return "∞"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
