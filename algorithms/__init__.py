"""
algorithms/__init__.py — Algorithm Catalogue
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm, algorithms_for

REGISTRY is a flat dict keyed by ``"<domain>/<key>"``:
    {
        "graph/bfs": AlgoInfo(key="bfs", domain="graph", fn=bfs, …),
        …
    }

AlgoInfo is a lightweight dataclass: static metadata plus the event
generator.  Sessions (engine/session.py) bind each card to their own state
store, which is what turns it into a runnable bundle.  Adding an algorithm
is: write the generator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble_sort    import bubble_sort,    PSEUDOCODE as _bubble_pc
from algorithms.selection_sort import selection_sort, PSEUDOCODE as _selection_pc
from algorithms.insertion_sort import insertion_sort, PSEUDOCODE as _insertion_pc
from algorithms.merge_sort     import merge_sort,     PSEUDOCODE as _merge_pc
from algorithms.quick_sort     import quick_sort,     PSEUDOCODE as _quick_pc
from algorithms.bfs            import bfs,            PSEUDOCODE as _bfs_pc
from algorithms.dfs            import dfs,            PSEUDOCODE as _dfs_pc
from algorithms.dijkstra       import dijkstra,       PSEUDOCODE as _dij_pc
from algorithms.astar          import astar,          PSEUDOCODE as _ast_pc
from algorithms.prims          import prims,          PSEUDOCODE as _prim_pc
from algorithms.kruskals       import kruskals,       PSEUDOCODE as _krus_pc
from algorithms.bellman_ford   import bellman_ford,   PSEUDOCODE as _bf_pc
from algorithms.tree_traversal import (
    in_order, pre_order, post_order,
    IN_ORDER, PRE_ORDER, POST_ORDER, PSEUDOCODE as _tree_pc,
)
from algorithms.search         import (
    linear_search, binary_search,
    PSEUDOCODE_LINEAR as _lin_pc, PSEUDOCODE_BINARY as _bin_pc,
)
from algorithms import containers


SORTING = "sorting"
GRAPH   = "graph"
TREE    = "tree"
SEARCH  = "search"
STACK   = "stack"
QUEUE   = "queue"

DOMAINS = (SORTING, GRAPH, TREE, SEARCH, STACK, QUEUE)


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # key within its domain, e.g. "bfs"
    label:            str                    # human label, e.g. "Breadth-First Search"
    domain:           str                    # one of DOMAINS
    fn:               Callable               # the event generator
    pseudocode:       List[str] = field(default_factory=list)
    tags:             List[str] = field(default_factory=list)
    requires_start:   bool      = False      # graph: start node mandatory
    accepts_target:   bool      = False      # graph/search: target passed through
    requires_target:  bool      = False      # A*, searches: run refused without one
    requires_value:   bool      = False      # push / enqueue
    seed:             Dict[str, Any] = field(default_factory=dict)   # generate_data kwargs for init()
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""

    @property
    def qualified_key(self) -> str:
        return f"{self.domain}/{self.key}"

    def summary_lines(self) -> List[str]:
        """The info card narrated when the algorithm is selected."""
        return [
            f"ALGO: {self.label}",
            f"WHAT: {self.description}",
            f"TIME: {self.complexity_time}",
            f"SPACE: {self.complexity_space}",
        ]

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "domain":           self.domain,
            "tags":             list(self.tags),
            "pseudocode":       list(self.pseudocode),
            "requires_start":   self.requires_start,
            "accepts_target":   self.accepts_target,
            "requires_target":  self.requires_target,
            "requires_value":   self.requires_value,
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
_CARDS: List[AlgoInfo] = [

    # -- sorting -----------------------------------------------------------
    AlgoInfo(
        key="bubble", label="Bubble Sort", domain=SORTING, fn=bubble_sort, pseudocode=_bubble_pc,
        tags=["comparison", "stable", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps adjacent elements that are out of order, bubbling the maximum to the end.",
    ),
    AlgoInfo(
        key="selection", label="Selection Sort", domain=SORTING, fn=selection_sort, pseudocode=_selection_pc,
        tags=["comparison", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly finds the minimum element and puts it at the beginning. Few swaps.",
    ),
    AlgoInfo(
        key="insertion", label="Insertion Sort", domain=SORTING, fn=insertion_sort, pseudocode=_insertion_pc,
        tags=["comparison", "stable", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Builds the sorted array one item at a time. Very efficient for nearly sorted data.",
    ),
    AlgoInfo(
        key="merge", label="Merge Sort", domain=SORTING, fn=merge_sort, pseudocode=_merge_pc,
        tags=["comparison", "stable", "divide-and-conquer"],
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Splits the array in halves, sorts them recursively and merges the sorted halves.",
    ),
    AlgoInfo(
        key="quick", label="Quick Sort", domain=SORTING, fn=quick_sort, pseudocode=_quick_pc,
        tags=["comparison", "in-place", "divide-and-conquer"],
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Partitions around the last element as pivot, then sorts both sides recursively.",
    ),

    # -- graph -------------------------------------------------------------
    AlgoInfo(
        key="bfs", label="Breadth-First Search", domain=GRAPH, fn=bfs, pseudocode=_bfs_pc,
        tags=["unweighted", "shortest-path", "traversal"],
        requires_start=True, accepts_target=True,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer-by-layer. Finds shortest path by hop count.",
    ),
    AlgoInfo(
        key="dfs", label="Depth-First Search", domain=GRAPH, fn=dfs, pseudocode=_dfs_pc,
        tags=["unweighted", "traversal"],
        requires_start=True, accepts_target=True,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Does NOT guarantee shortest path.",
    ),
    AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", domain=GRAPH, fn=dijkstra, pseudocode=_dij_pc,
        tags=["weighted", "shortest-path"],
        requires_start=True, accepts_target=True,
        complexity_time="O(V²)", complexity_space="O(V)",
        description="Greedily settles the closest node. Optimal for non-negative weights.",
    ),
    AlgoInfo(
        key="astar", label="A* Search", domain=GRAPH, fn=astar, pseudocode=_ast_pc,
        tags=["weighted", "shortest-path", "heuristic"],
        requires_start=True, accepts_target=True, requires_target=True,
        complexity_time="O(E log V)", complexity_space="O(V)",
        description="Dijkstra + Euclidean heuristic guidance towards the target.",
    ),
    AlgoInfo(
        key="prims", label="Prim's Algorithm", domain=GRAPH, fn=prims, pseudocode=_prim_pc,
        tags=["weighted", "mst"],
        requires_start=True, seed={"directed": False, "weighted": True},
        complexity_time="O(V²)", complexity_space="O(V)",
        description="Grows a minimum spanning tree from the start node one cheapest edge at a time.",
    ),
    AlgoInfo(
        key="kruskals", label="Kruskal's Algorithm", domain=GRAPH, fn=kruskals, pseudocode=_krus_pc,
        tags=["weighted", "mst", "union-find"],
        seed={"directed": False, "weighted": True},
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Takes edges cheapest-first, skipping any that would close a cycle.",
    ),
    AlgoInfo(
        key="bellman_ford", label="Bellman–Ford", domain=GRAPH, fn=bellman_ford, pseudocode=_bf_pc,
        tags=["weighted", "shortest-path", "negative-edges"],
        requires_start=True, accepts_target=True,
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Handles negative edges. Detects negative cycles. Slower than Dijkstra.",
    ),

    # -- tree --------------------------------------------------------------
    AlgoInfo(
        key="inorder", label="In-Order Traversal", domain=TREE, fn=in_order, pseudocode=_tree_pc[IN_ORDER],
        tags=["traversal", "dfs"],
        complexity_time="O(n)", complexity_space="O(h) where h is height",
        description="Left → Node → Right (L-N-R). Prints BST nodes in sorted ascending order.",
    ),
    AlgoInfo(
        key="preorder", label="Pre-Order Traversal", domain=TREE, fn=pre_order, pseudocode=_tree_pc[PRE_ORDER],
        tags=["traversal", "dfs"],
        complexity_time="O(n)", complexity_space="O(h) where h is height",
        description="Node → Left → Right (N-L-R). Useful for copying a tree.",
    ),
    AlgoInfo(
        key="postorder", label="Post-Order Traversal", domain=TREE, fn=post_order, pseudocode=_tree_pc[POST_ORDER],
        tags=["traversal", "dfs"],
        complexity_time="O(n)", complexity_space="O(h) where h is height",
        description="Left → Right → Node (L-R-N). Useful for deleting a tree bottom-up.",
    ),

    # -- search ------------------------------------------------------------
    AlgoInfo(
        key="linear", label="Linear Search", domain=SEARCH, fn=linear_search, pseudocode=_lin_pc,
        tags=["search"],
        accepts_target=True, requires_target=True, seed={"sorted": False},
        complexity_time="O(n)", complexity_space="O(1)",
        description="Checks every element sequentially. Works on unsorted data.",
    ),
    AlgoInfo(
        key="binary", label="Binary Search", domain=SEARCH, fn=binary_search, pseudocode=_bin_pc,
        tags=["search", "divide-and-conquer"],
        accepts_target=True, requires_target=True, seed={"sorted": True},
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Halves the search interval each step. Requires sorted data.",
    ),

    # -- stack -------------------------------------------------------------
    AlgoInfo(
        key="push", label="Stack Push", domain=STACK, fn=containers.push,
        tags=["lifo"], requires_value=True,
        complexity_time="O(1)", complexity_space="O(n)",
        description="Adds an element on top of the stack (LIFO).",
    ),
    AlgoInfo(
        key="pop", label="Stack Pop", domain=STACK, fn=containers.pop,
        tags=["lifo"],
        complexity_time="O(1)", complexity_space="O(n)",
        description="Removes and returns the top element of the stack.",
    ),
    AlgoInfo(
        key="peek", label="Stack Peek", domain=STACK, fn=containers.peek,
        tags=["lifo"],
        complexity_time="O(1)", complexity_space="O(n)",
        description="Reads the top element without removing it.",
    ),

    # -- queue -------------------------------------------------------------
    AlgoInfo(
        key="enqueue", label="Queue Enqueue", domain=QUEUE, fn=containers.enqueue,
        tags=["fifo"], requires_value=True,
        complexity_time="O(1)", complexity_space="O(n)",
        description="Adds an element at the rear of the queue (FIFO).",
    ),
    AlgoInfo(
        key="dequeue", label="Queue Dequeue", domain=QUEUE, fn=containers.dequeue,
        tags=["fifo"],
        complexity_time="O(1)", complexity_space="O(n)",
        description="Removes and returns the front element of the queue.",
    ),
    AlgoInfo(
        key="peek", label="Queue Peek", domain=QUEUE, fn=containers.peek_front,
        tags=["fifo"],
        complexity_time="O(1)", complexity_space="O(n)",
        description="Reads the front element without removing it.",
    ),
]

REGISTRY: Dict[str, AlgoInfo] = {card.qualified_key: card for card in _CARDS}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(domain: str, key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by domain + key, or None."""
    return REGISTRY.get(f"{domain}/{key}")


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_for(domain: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.domain == domain]


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "DOMAINS",
    "SORTING", "GRAPH", "TREE", "SEARCH", "STACK", "QUEUE",
    "get_algorithm",
    "list_algorithms",
    "algorithms_for",
    "algorithms_by_tag",
]
