"""
models/
-------
Core data layer.  Public API:

    from models import Graph, Node, Edge
    from models import BinaryTree, TreeNode
"""

from models.node  import Node
from models.edge  import Edge
from models.graph import Graph
from models.tree  import BinaryTree, TreeNode

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "BinaryTree", "TreeNode",
]
