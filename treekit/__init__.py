"""TreeKit - Generic tree containers.

TreeKit provides two tree types built on the same node machinery:

    Tree        - N-ary tree, children kept in insertion order
    BinaryTree  - binary search tree, ordered insertion only

Both support search, height, inversion and box-drawing rendering:

    from treekit import BinaryTree

    tree = BinaryTree(5)
    for value in (3, 7, 2):
        tree.insert(value)
    print(tree)
"""

import logging

__version__ = "0.1.0"

from .errors import (
    TreeError,
    InvalidValueError,
    UnsupportedOperationError,
    StyleError,
    OwnershipError,
)
from .config import RenderStyle
from .core import Appendable, Insertable, BaseTree, Tree, BinaryTree
from .api import (
    build_tree,
    build_binary_tree,
    find_value,
    render_tree,
    get_tree_stats,
)

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    "TreeError",
    "InvalidValueError",
    "UnsupportedOperationError",
    "StyleError",
    "OwnershipError",
    # Config
    "RenderStyle",
    # Core
    "Appendable",
    "Insertable",
    "BaseTree",
    "Tree",
    "BinaryTree",
    # API
    "build_tree",
    "build_binary_tree",
    "find_value",
    "render_tree",
    "get_tree_stats",
]
