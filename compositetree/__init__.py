"""compositetree - uniform leaves and branches.

compositetree lets calling code treat a single element and an arbitrarily
deep hierarchy of elements the same way: build a tree out of Leaf and Branch
nodes, then call ``operation()`` on whichever node you hold.

    from compositetree import Branch, Leaf

    tree = Branch()
    tree.add(Leaf())
    tree.operation()  # 'BRANCH[LEAF]'
"""

__version__ = "0.1.0"

from .core import (
    Node,
    Leaf,
    Branch,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .config import (
    CompositeConfig,
    ResultFormat,
    ReparentPolicy,
    DEFAULT_CONFIG,
)
from .exceptions import (
    CompositeError,
    UnsupportedOperationError,
    CycleError,
    AlreadyAttachedError,
    InvalidConfigError,
)
from .api import (
    traverse_tree,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
    get_ancestors,
    get_root,
    get_depth,
    get_path,
    fold,
    render_tree,
)

__all__ = [
    "__version__",
    # Core
    "Node",
    "Leaf",
    "Branch",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    # Config
    "CompositeConfig",
    "ResultFormat",
    "ReparentPolicy",
    "DEFAULT_CONFIG",
    # Errors
    "CompositeError",
    "UnsupportedOperationError",
    "CycleError",
    "AlreadyAttachedError",
    "InvalidConfigError",
    # API
    "traverse_tree",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_tree_stats",
    "get_ancestors",
    "get_root",
    "get_depth",
    "get_path",
    "fold",
    "render_tree",
]
