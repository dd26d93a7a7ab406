"""
node.py — Graph Node
====================
A positioned, labelled vertex.  Ids are dense integers ``0..n-1`` assigned
when the graph is generated and never reused while a run is in flight.

Position is only consumed by the A* heuristic and the renderer; algorithms
otherwise treat nodes as opaque ids.
"""

from typing import Optional


class Node:
    """
    Attributes:
        id     : Dense integer identifier.
        label  : Human-readable name shown on the canvas ("A", "B", …).
        x, y   : Canvas coordinates in pixels.
    """

    __slots__ = ("id", "label", "x", "y")

    def __init__(
        self,
        node_id: int,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
    ):
        self.id:    int   = node_id
        self.label: str   = label if label is not None else _default_label(node_id)
        self.x:     float = x
        self.y:     float = y

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def distance_to(self, other: "Node") -> float:
        """Euclidean distance — the base of the A* heuristic."""
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            node_id=int(data["id"]),
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            label=data.get("label"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label}, pos=({self.x:.1f},{self.y:.1f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


def _default_label(node_id: int) -> str:
    if 0 <= node_id < 26:
        return chr(ord("A") + node_id)
    return str(node_id)
