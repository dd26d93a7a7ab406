"""
edge.py — Graph Edge
====================
Connects two node ids.  Carries an optional weight: ``None`` means the
graph is being treated as unweighted and every traversal costs 1.

Design decisions:
  - `source` and `target` are integer node ids, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - Directedness is a graph-level property; an Edge never decides on its
    own which way it can be walked.
  - Parallel edges are representable; the random generator avoids them.
"""

from typing import Optional


class Edge:
    """
    Attributes:
        source : Tail node id ("from").
        target : Head node id ("to").
        weight : Numeric cost, or None for "absent" (treated as 1).
                 May be negative for Bellman-Ford demos.
    """

    __slots__ = ("source", "target", "weight")

    def __init__(self, source: int, target: int, weight: Optional[float] = None):
        self.source: int             = source
        self.target: int             = target
        self.weight: Optional[float] = weight

    @property
    def cost(self) -> float:
        """Weight used by the weighted algorithms (absent ⇒ 1)."""
        return 1 if self.weight is None else self.weight

    def connects(self, node_a: int, node_b: int, directed: bool = False) -> bool:
        """True if this edge links node_a → node_b (either way when undirected)."""
        if self.source == node_a and self.target == node_b:
            return True
        return not directed and self.source == node_b and self.target == node_a

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"from": self.source, "to": self.target, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=int(data["from"]),
            target=int(data["to"]),
            weight=data.get("weight"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source}-{self.target}, w={self.weight})"
