"""
graph.py — Graph Container & Generator
=======================================
Single source of truth for the graph structure.  Algorithms only ever
read it; the run-scoped state (visited, distances, …) lives on the
session's state store, never on nodes or edges.

Responsibilities:
  1. Building the node / edge sets            (add / create)
  2. Adjacency queries                        (neighbours, has_edge_between, …)
  3. Random connected-graph generation        (spanning tree + extra edges)
  4. Serialisation round-trip                 (to_dict / from_dict)

Design decisions:
  - Nodes live in a list indexed by id because ids are dense ``0..n-1``.
  - `_adj[node_id] → [(neighbour_id, edge_index)]` is maintained
    incrementally, in edge insertion order.  Traversals that iterate
    neighbours therefore follow the order edges were added.
  - `directed` is a graph-level flag controlling adjacency symmetry.
"""

import random
from typing import Dict, List, Tuple, Optional, Iterable

from models.node import Node
from models.edge import Edge


CANVAS_WIDTH  = 800
CANVAS_HEIGHT = 600
MARGIN_X      = 80
MARGIN_TOP    = 120
MARGIN_BOTTOM = 120
MIN_NODE_DISTANCE = 100


class Graph:
    """
    Attributes:
        nodes      : [Node] indexed by id
        edges      : [Edge] in insertion order
        directed   : bool – graph-level directedness
        _adj       : {node_id: [(neighbour_id, edge_index), …]}
    """

    def __init__(self, directed: bool = False):
        self.nodes:    List[Node] = []
        self.edges:    List[Edge] = []
        self.directed: bool       = directed
        self._adj:     Dict[int, List[Tuple[int, int]]] = {}

    # ==================================================================
    # NODES
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        if node.id != len(self.nodes):
            raise ValueError(f"node ids must be dense: expected {len(self.nodes)}, got {node.id}")
        self.nodes.append(node)
        self._adj.setdefault(node.id, [])
        return node

    def create_node(self, x: float = 0.0, y: float = 0.0, label: Optional[str] = None) -> Node:
        """Convenience: create + add in one call, assigning the next id."""
        return self.add_node(Node(len(self.nodes), x=x, y=y, label=label))

    def get_node(self, node_id: int) -> Optional[Node]:
        if self.has_node(node_id):
            return self.nodes[node_id]
        return None

    def has_node(self, node_id: Optional[int]) -> bool:
        return isinstance(node_id, int) and 0 <= node_id < len(self.nodes)

    def label(self, node_id: Optional[int]) -> str:
        node = self.get_node(node_id) if node_id is not None else None
        return node.label if node else str(node_id)

    # ==================================================================
    # EDGES
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        """Endpoints must already be nodes; weight is None or a number."""
        for end in (edge.source, edge.target):
            if not self.has_node(end):
                raise ValueError(f"edge {edge.source}-{edge.target}: no node {end!r}")
        if edge.weight is not None and (
            isinstance(edge.weight, bool) or not isinstance(edge.weight, (int, float))
        ):
            raise ValueError(f"edge {edge.source}-{edge.target}: weight must be a number, got {edge.weight!r}")
        index = len(self.edges)
        self.edges.append(edge)
        self._adj.setdefault(edge.source, []).append((edge.target, index))
        if not self.directed:
            self._adj.setdefault(edge.target, []).append((edge.source, index))
        return edge

    def create_edge(self, source: int, target: int, weight: Optional[float] = None) -> Edge:
        return self.add_edge(Edge(source, target, weight))

    def has_edge_between(self, a: int, b: int) -> bool:
        """Either direction, regardless of graph type — used to avoid duplicates."""
        return any(e.connects(a, b) for e in self.edges)

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: int) -> List[Tuple[int, Edge]]:
        """Return [(neighbour_id, edge)] in edge insertion order."""
        return [(nbr, self.edges[index]) for nbr, index in self._adj.get(node_id, [])]

    def arcs(self) -> List[Tuple[int, int, float]]:
        """Every traversable (from, to, cost) — both directions when undirected."""
        result = []
        for e in self.edges:
            result.append((e.source, e.target, e.cost))
            if not self.directed:
                result.append((e.target, e.source, e.cost))
        return result

    def node_ids(self) -> List[int]:
        return [n.id for n in self.nodes]

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    @property
    def graph_type(self) -> str:
        return "directed" if self.directed else "undirected"

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "graph_type": self.graph_type,
            "nodes":      [n.to_dict() for n in self.nodes],
            "edges":      [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls(directed=data.get("graph_type", "undirected") == "directed")
        for nd in sorted(data.get("nodes", []), key=lambda d: int(d["id"])):
            g.add_node(Node.from_dict(nd))
        for ed in data.get("edges", []):
            g.add_edge(Edge.from_dict(ed))
        return g

    @classmethod
    def from_edges(
        cls,
        node_count: int,
        edges: Iterable[Tuple],
        directed: bool = False,
    ) -> "Graph":
        """
        Build a graph from ``(from, to)`` or ``(from, to, weight)`` tuples.
        Nodes are laid out on a row; handy for fixtures and hand-built demos.
        """
        g = cls(directed=directed)
        for i in range(node_count):
            g.create_node(x=MARGIN_X + i * MIN_NODE_DISTANCE, y=CANVAS_HEIGHT / 2)
        for item in edges:
            weight = item[2] if len(item) > 2 else None
            g.create_edge(item[0], item[1], weight)
        return g

    # ==================================================================
    # GENERATOR
    # ==================================================================
    @classmethod
    def generate_random(
        cls,
        rng: Optional[random.Random] = None,
        num_nodes: Optional[int] = None,
        directed: bool = False,
        weighted: bool = True,
    ) -> "Graph":
        """
        Connected random graph.

        Nodes are scattered over the canvas keeping MIN_NODE_DISTANCE apart
        (up to 100 placement attempts each).  A random spanning tree
        (every node i > 0 attaches to a parent in [0, i)) guarantees
        connectivity, then a random number of extra edges are attempted,
        skipping self-loops and pairs that are already connected.
        """
        rng = rng or random.Random()
        if num_nodes is None:
            num_nodes = rng.randint(6, 9)

        g = cls(directed=directed)

        for _ in range(num_nodes):
            x = y = 0.0
            for _attempt in range(100):
                x = rng.uniform(MARGIN_X, CANVAS_WIDTH - MARGIN_X)
                y = rng.uniform(MARGIN_TOP, CANVAS_HEIGHT - MARGIN_BOTTOM)
                if all(((x - n.x) ** 2 + (y - n.y) ** 2) ** 0.5 >= MIN_NODE_DISTANCE for n in g.nodes):
                    break
            g.create_node(x, y)

        def weight() -> Optional[int]:
            return rng.randint(1, 9) if weighted else None

        # spanning tree
        for i in range(1, num_nodes):
            g.create_edge(rng.randrange(i), i, weight())

        # extra edges
        for _ in range(rng.randrange(num_nodes) if num_nodes else 0):
            a = rng.randrange(num_nodes)
            b = rng.randrange(num_nodes)
            if a != b and not g.has_edge_between(a, b):
                g.create_edge(a, b, weight())

        return g

    # ==================================================================
    # Dunder
    # ==================================================================
    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()}, {self.graph_type})"
