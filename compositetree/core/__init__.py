"""Core abstractions for compositetree.

This package contains the Node interface, its Leaf and Branch variants and
the traversers that walk them.
"""

from .node import Node
from .leaf import Leaf
from .branch import Branch
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)

__all__ = [
    "Node",
    "Leaf",
    "Branch",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
]
