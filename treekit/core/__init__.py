"""Core tree types for TreeKit.

This module contains the tree containers and the capability interfaces
that describe how each one grows.
"""

from .capabilities import Appendable, Insertable
from .tree import BaseTree, Tree
from .binary import BinaryTree

__all__ = [
    "Appendable",
    "Insertable",
    "BaseTree",
    "Tree",
    "BinaryTree",
]
