"""
step.py — Algorithm Step Snapshots
===================================
A Step is a frozen-in-time picture of everything the visualizer needs to
render one frame of a run, plus the sentence explaining it.

There is one Step type per domain; its fields are exactly the run-scoped
fields of that domain's state store (engine/state.py).  The store builds
Steps with ``snapshot(**overrides)`` and restores them with ``apply(step)``.

Design decisions:
  - Steps are frozen dataclasses.  Containers are cloned on the way in and
    on the way out, so a Step never aliases live state.
  - Input data that the algorithm never changes (the graph, the tree, the
    numbers being searched) is NOT copied into every step.  Sorting bars
    and stack / queue contents ARE run fields, because the run rewrites them.
"""

import math
from dataclasses import MISSING, dataclass, field, fields
from typing import Dict, List, Optional, Tuple, Any


EdgeRef = Tuple[int, int]               # (from, to)
WeightedEdge = Tuple[int, int, float]   # (from, to, weight)


@dataclass(frozen=True)
class SortingStep:
    bars:             List[int] = field(default_factory=list)
    active:           List[int] = field(default_factory=list)    # being compared
    swapping:         List[int] = field(default_factory=list)    # being exchanged / written
    sorted:           List[int] = field(default_factory=list)    # final positions, grows only
    comparison_count: int       = 0
    write_count:      int       = 0
    description:      str       = ""


@dataclass(frozen=True)
class GraphStep:
    """
    Attributes:
        visited_nodes        : Visit order, append-only, no duplicates.
        current_node         : Node being expanded right now (highlight only).
        current_edge         : (from, to) being walked right now.
        queue                : BFS queue / A* open set, in order.
        dfs_call_stack       : DFS recursion, bottom first.
        visited_count        : Tally shown in the stats panel.
        edge_explored_count  : Distinct edges explored (BFS/DFS/Dijkstra/A*),
                               edges checked (Kruskal) or relaxations tried (BF).
        target_found         : Target reached (and, for BF, no negative cycle).
        distances            : {node_id: tentative distance}; inf = unreached.
        predecessors         : {node_id: previous node or None}.
        shortest_path_edges  : Reconstructed path, target end first.
        mst_edges            : Accepted spanning-tree edges (from, to, weight).
        mst_weight           : Sum of accepted MST weights.
        negative_cycle       : Bellman-Ford detector tripped.
    """

    visited_nodes:       List[int]                 = field(default_factory=list)
    current_node:        Optional[int]             = None
    current_edge:        Optional[EdgeRef]         = None
    queue:               List[int]                 = field(default_factory=list)
    dfs_call_stack:      List[int]                 = field(default_factory=list)
    visited_count:       int                       = 0
    edge_explored_count: int                       = 0
    target_found:        bool                      = False
    distances:           Dict[int, float]          = field(default_factory=dict)
    predecessors:        Dict[int, Optional[int]]  = field(default_factory=dict)
    shortest_path_edges: List[EdgeRef]             = field(default_factory=list)
    mst_edges:           List[WeightedEdge]        = field(default_factory=list)
    mst_weight:          float                     = 0
    negative_cycle:      bool                      = False
    description:         str                       = ""


@dataclass(frozen=True)
class TreeStep:
    visited_nodes:       List[int]          = field(default_factory=list)
    current_node:        Optional[int]      = None
    current_edge:        Optional[EdgeRef]  = None
    call_stack:          List[int]          = field(default_factory=list)
    traversal_result:    List[int]          = field(default_factory=list)   # values in visit order
    visited_count:       int                = 0
    edge_explored_count: int                = 0
    description:         str                = ""


@dataclass(frozen=True)
class SearchStep:
    current_index:     Optional[int] = None
    low:               Optional[int] = None
    high:              Optional[int] = None
    mid:               Optional[int] = None
    found_index:       Optional[int] = None
    not_found:         bool          = False
    comparisons_count: int           = 0
    description:       str           = ""


@dataclass(frozen=True)
class StackStep:
    stack:             List[int]     = field(default_factory=list)
    top_index:         int           = -1
    highlighted_index: int           = -1
    animating_index:   int           = -1
    animation_type:    Optional[str] = None
    description:       str           = ""


@dataclass(frozen=True)
class QueueStep:
    queue:             List[int]     = field(default_factory=list)
    front_index:       int           = -1
    rear_index:        int           = -1
    highlighted_index: int           = -1
    animating_index:   int           = -1
    animation_type:    Optional[str] = None
    description:       str           = ""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def field_names(step_type) -> List[str]:
    """Observable field names of a Step type (description excluded)."""
    return [f.name for f in fields(step_type) if f.name != "description"]


def field_default(step_type, name: str) -> Any:
    for f in fields(step_type):
        if f.name == name:
            if f.default_factory is not MISSING:
                return f.default_factory()
            return f.default
    raise KeyError(name)


def jsonable(value: Any) -> Any:
    """Recursively turn a step / state value into JSON-safe data (inf → None)."""
    if isinstance(value, float) and math.isinf(value):
        return None
    if isinstance(value, dict):
        return {k: jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [jsonable(v) for v in value]
    return value
