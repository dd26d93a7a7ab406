"""
tree.py — Binary Search Tree
============================
Nodes are stored in insertion order, so ids follow insertion (not BST)
order and the root is always id 0.  Every left subtree holds strictly
smaller values, every right subtree values >= the parent.

Layout is computed at insertion time: each level halves the horizontal
span of its parent, which keeps the canvas free of overlaps for the
depths the generator allows.
"""

import random
from typing import Dict, List, Optional, Tuple


CANVAS_WIDTH  = 800
CANVAS_HEIGHT = 600
MARGIN_X      = 60
MARGIN_TOP    = 80
MARGIN_BOTTOM = 60
MAX_LEVELS    = 5
MAX_NODES     = 15


class TreeNode:
    __slots__ = ("id", "value", "label", "x", "y", "left", "right", "parent")

    def __init__(
        self,
        node_id: int,
        value: int,
        x: float = 0.0,
        y: float = 0.0,
        parent: Optional[int] = None,
    ):
        self.id:     int           = node_id
        self.value:  int           = value
        self.label:  str           = str(value)
        self.x:      float         = x
        self.y:      float         = y
        self.left:   Optional[int] = None
        self.right:  Optional[int] = None
        self.parent: Optional[int] = parent

    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "value":  self.value,
            "label":  self.label,
            "x":      self.x,
            "y":      self.y,
            "left":   self.left,
            "right":  self.right,
            "parent": self.parent,
        }

    def __repr__(self) -> str:
        return f"TreeNode(id={self.id}, value={self.value}, left={self.left}, right={self.right})"


class BinaryTree:
    """
    Attributes:
        nodes : [TreeNode] indexed by id
        edges : [(parent_id, child_id)] in insertion order
    """

    ROOT = 0

    def __init__(self):
        self.nodes: List[TreeNode]          = []
        self.edges: List[Tuple[int, int]]   = []
        # horizontal span reserved for each node's subtree
        self._span: Dict[int, Tuple[float, float]] = {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def root(self) -> Optional[TreeNode]:
        return self.nodes[self.ROOT] if self.nodes else None

    def get(self, node_id: Optional[int]) -> Optional[TreeNode]:
        if node_id is None or not 0 <= node_id < len(self.nodes):
            return None
        return self.nodes[node_id]

    def __len__(self) -> int:
        return len(self.nodes)

    def values(self) -> List[int]:
        return [n.value for n in self.nodes]

    def depth(self, node_id: int) -> int:
        level, node = 0, self.nodes[node_id]
        while node.parent is not None:
            level += 1
            node = self.nodes[node.parent]
        return level

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    def insert(self, value: int, max_depth: int = MAX_LEVELS - 1) -> Optional[TreeNode]:
        """
        BST insert.  Returns the new node, or None when the value would land
        deeper than `max_depth` or the tree is already full.
        """
        if len(self.nodes) >= MAX_NODES:
            return None
        if not self.nodes:
            return self._attach(value, None, False, 0, MARGIN_X, CANVAS_WIDTH - MARGIN_X)

        current, level = self.ROOT, 0
        while level < max_depth:
            node = self.nodes[current]
            x_min, x_max = self._span[current]
            mid = (x_min + x_max) / 2
            if value < node.value:
                if node.left is None:
                    return self._attach(value, current, True, level + 1, x_min, mid)
                current = node.left
            else:
                if node.right is None:
                    return self._attach(value, current, False, level + 1, mid, x_max)
                current = node.right
            level += 1
        return None

    def _attach(
        self,
        value: int,
        parent_id: Optional[int],
        is_left: bool,
        level: int,
        x_min: float,
        x_max: float,
    ) -> TreeNode:
        level_height = (CANVAS_HEIGHT - MARGIN_TOP - MARGIN_BOTTOM) / MAX_LEVELS
        node = TreeNode(
            len(self.nodes),
            value,
            x=(x_min + x_max) / 2,
            y=MARGIN_TOP + level * level_height,
            parent=parent_id,
        )
        self.nodes.append(node)
        self._span[node.id] = (x_min, x_max)
        if parent_id is not None:
            self.edges.append((parent_id, node.id))
            if is_left:
                self.nodes[parent_id].left = node.id
            else:
                self.nodes[parent_id].right = node.id
        return node

    @classmethod
    def from_values(cls, values: List[int]) -> "BinaryTree":
        tree = cls()
        for v in values:
            tree.insert(v)
        return tree

    @classmethod
    def generate_random(cls, rng: Optional[random.Random] = None) -> "BinaryTree":
        """7–11 random values in 1..99, de-duplicated, inserted in draw order."""
        rng = rng or random.Random()
        drawn = [rng.randint(1, 99) for _ in range(rng.randint(7, 11))]
        return cls.from_values(list(dict.fromkeys(drawn)))

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [{"from": a, "to": b} for a, b in self.edges],
        }
