"""
state.py — Shared Mutable State Stores
=======================================
One store per visualization domain.  A store is the single source of truth
the renderer reads: the input data (bars, graph, tree, numbers, stack or
queue), the run-scoped fields of the current algorithm and the control
flags (speed, running, paused) plus the narration list.

The run-scoped fields of a store are exactly the fields of its Step type
(algorithms/step.py), which is what makes these three operations total:

    snapshot(**overrides) → Step     every observable field, cloned
    apply(step)                      overwrite every observable field
    reset_run()                      every run field back to its default

Stores are plain objects owned by a session; nothing here is module-global.
"""

import copy
from typing import Any, Dict, List, Optional, Tuple, TYPE_CHECKING

from algorithms.step import (
    SortingStep, GraphStep, TreeStep, SearchStep, StackStep, QueueStep,
    field_names, field_default, jsonable,
)
from models import Graph, BinaryTree

if TYPE_CHECKING:
    from algorithms import AlgoInfo


def _clone(value: Any) -> Any:
    if isinstance(value, (list, dict, set)):
        return copy.copy(value)
    return value


class VisualizationState:
    """
    Attributes:
        speed       : 1 … 100 slider value; higher = shorter delays.
        is_running  : Guard flag; exactly one run per store at a time.
        is_paused   : Cooperative pause flag polled by the live driver.
        explanation : Narration lines, newest last.
        algorithm   : AlgoInfo of the selected algorithm (or None).
    """

    domain:         str             = ""
    step_type:      type            = type(None)
    # kept across reset_run() and carried into scratch copies
    carried_fields: Tuple[str, ...] = ()

    def __init__(self):
        self.speed:       int                   = 50
        self.is_running:  bool                  = False
        self.is_paused:   bool                  = False
        self.explanation: List[str]             = []
        self.algorithm:   Optional["AlgoInfo"]  = None
        self.reset_run()

    # ------------------------------------------------------------------
    # Snapshot / apply
    # ------------------------------------------------------------------
    def snapshot(self, **overrides):
        values = {
            name: _clone(getattr(self, name))
            for name in field_names(self.step_type)
        }
        for name, value in overrides.items():
            values[name] = _clone(value)
        return self.step_type(**values)

    def apply(self, step) -> None:
        for name in field_names(self.step_type):
            setattr(self, name, _clone(getattr(step, name)))

    def reset_run(self) -> None:
        for name in field_names(self.step_type):
            if name not in self.carried_fields:
                setattr(self, name, field_default(self.step_type, name))

    def scratch(self) -> "VisualizationState":
        """Fresh store of the same type holding a private copy of the input data."""
        clone = type(self)()
        clone.speed = self.speed
        clone.algorithm = self.algorithm
        for name in self.carried_fields:
            setattr(clone, name, _clone(getattr(self, name)))
        return clone

    # ------------------------------------------------------------------
    # Derived flags
    # ------------------------------------------------------------------
    def has_data(self) -> bool:
        return True

    @property
    def can_start(self) -> bool:
        return not self.is_running and self.has_data()

    @property
    def can_pause(self) -> bool:
        return self.is_running

    @property
    def can_reset(self) -> bool:
        return not self.is_running

    # ------------------------------------------------------------------
    # Narration
    # ------------------------------------------------------------------
    @property
    def info_lines(self) -> List[str]:
        return self.algorithm.summary_lines() if self.algorithm else []

    def set_algorithm(self, info: Optional["AlgoInfo"]) -> None:
        self.algorithm = info
        self.explanation = list(self.info_lines)

    def narrate(self, line: str) -> None:
        self.explanation.append(line)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def data_dict(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        run = {name: getattr(self, name) for name in field_names(self.step_type)}
        run.update(self.data_dict())
        run.update({
            "domain":      self.domain,
            "algorithm":   self.algorithm.key if self.algorithm else None,
            "speed":       self.speed,
            "is_running":  self.is_running,
            "is_paused":   self.is_paused,
            "can_start":   self.can_start,
            "can_pause":   self.can_pause,
            "can_reset":   self.can_reset,
            "explanation": list(self.explanation),
        })
        return jsonable(run)


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------
class SortingState(VisualizationState):
    domain         = "sorting"
    step_type      = SortingStep
    carried_fields = ("bars",)

    def __init__(self):
        self.bars: List[int] = []
        super().__init__()

    @property
    def is_sorting(self) -> bool:
        return self.is_running

    def has_data(self) -> bool:
        return bool(self.bars)

    def mark_sorted(self, index: int) -> None:
        if 0 <= index < len(self.bars) and index not in self.sorted:
            self.sorted.append(index)


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------
class GraphState(VisualizationState):
    domain         = "graph"
    step_type      = GraphStep
    carried_fields = ("graph", "selected_start_node", "selected_target_node")

    def __init__(self):
        self.graph:                Graph          = Graph()
        self.selected_start_node:  Optional[int]  = None
        self.selected_target_node: Optional[int]  = None
        super().__init__()

    @property
    def is_traversing(self) -> bool:
        return self.is_running

    @property
    def graph_type(self) -> str:
        return self.graph.graph_type

    def has_data(self) -> bool:
        return self.graph.node_count() > 0

    def data_dict(self) -> Dict[str, Any]:
        return {
            "graph":                self.graph.to_dict(),
            "selected_start_node":  self.selected_start_node,
            "selected_target_node": self.selected_target_node,
        }


# ---------------------------------------------------------------------------
# Tree
# ---------------------------------------------------------------------------
class TreeState(VisualizationState):
    domain         = "tree"
    step_type      = TreeStep
    carried_fields = ("tree",)

    def __init__(self):
        self.tree: BinaryTree = BinaryTree()
        super().__init__()

    @property
    def is_traversing(self) -> bool:
        return self.is_running

    def has_data(self) -> bool:
        return len(self.tree) > 0

    def data_dict(self) -> Dict[str, Any]:
        return {"tree": self.tree.to_dict()}


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
class SearchState(VisualizationState):
    domain         = "search"
    step_type      = SearchStep
    carried_fields = ("numbers", "target")

    def __init__(self):
        self.numbers: List[int]     = []
        self.target:  Optional[int] = None
        super().__init__()

    @property
    def is_searching(self) -> bool:
        return self.is_running

    def has_data(self) -> bool:
        return bool(self.numbers)

    def data_dict(self) -> Dict[str, Any]:
        return {"numbers": list(self.numbers), "target": self.target}


# ---------------------------------------------------------------------------
# Stack / Queue
# ---------------------------------------------------------------------------
class StackState(VisualizationState):
    domain         = "stack"
    step_type      = StackStep
    carried_fields = ("stack", "top_index", "max_size")

    def __init__(self):
        self.stack:     List[int] = []
        self.top_index: int       = -1
        self.max_size:  int       = 10
        super().__init__()

    @property
    def is_animating(self) -> bool:
        return self.is_running

    def data_dict(self) -> Dict[str, Any]:
        return {"max_size": self.max_size}


class QueueState(VisualizationState):
    domain         = "queue"
    step_type      = QueueStep
    carried_fields = ("queue", "front_index", "rear_index", "max_size")

    def __init__(self):
        self.queue:       List[int] = []
        self.front_index: int       = -1
        self.rear_index:  int       = -1
        self.max_size:    int       = 10
        super().__init__()

    @property
    def is_animating(self) -> bool:
        return self.is_running

    def data_dict(self) -> Dict[str, Any]:
        return {"max_size": self.max_size}
