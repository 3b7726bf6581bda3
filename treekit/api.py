"""High-level API for TreeKit.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of use
in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, Optional, TypeVar, Union

from .config import RenderStyle
from .core.binary import BinaryTree
from .core.tree import BaseTree, Tree
from .errors import InvalidValueError
from .render import render_tree as _render_tree

T = TypeVar("T")


def build_tree(value: T, *children: Any) -> Tree[T]:
    """Build a general tree from nested values in one expression.

    Each child may be:
    - a Tree, adopted as-is
    - a ``(value, [children...])`` tuple, built recursively
    - any other value, which becomes a leaf

    Args:
        value: Value of the root
        *children: Children of the root, in order

    Returns:
        The root Tree

    Raises:
        InvalidValueError: If any value is None

    Example:
        >>> tree = build_tree(5, (3, [1, 6]), (7, [8]), 2)
        >>> tree.height()
        2
    """
    nodes = []
    for child in children:
        if isinstance(child, BaseTree):
            nodes.append(child)
        elif isinstance(child, tuple) and len(child) == 2 and isinstance(child[1], (list, tuple)):
            child_value, grandchildren = child
            nodes.append(build_tree(child_value, *grandchildren))
        else:
            nodes.append(Tree(child))
    return Tree(value, nodes)


def build_binary_tree(values: Iterable[T]) -> BinaryTree[T]:
    """Build a binary search tree by inserting values in order.

    The first value becomes the root. Duplicates are dropped.

    Args:
        values: Values to insert

    Returns:
        The root BinaryTree

    Raises:
        InvalidValueError: If values is empty or contains None
    """
    iterator = iter(values)
    try:
        root = BinaryTree(next(iterator))
    except StopIteration:
        raise InvalidValueError("Cannot build a binary tree from no values.") from None

    for value in iterator:
        root.insert(value)
    return root


def find_value(tree: BaseTree[T], predicate: Callable[[T], bool]) -> Optional[T]:
    """Return the first value (pre-order) matching predicate, or None.

    Args:
        tree: Root of the tree to search
        predicate: Function taking a value and returning True on a match
    """
    return tree.search(predicate)


def render_tree(tree: BaseTree[T],
                renderer: Optional[Callable[[T], str]] = None,
                style: Union[RenderStyle, str, None] = None) -> str:
    """Render a tree as text, optionally with a different glyph style.

    Args:
        tree: Root of the tree to render
        renderer: Converts the root value to text (default ``str``)
        style: A RenderStyle, or "unicode" / "ascii"

    Returns:
        Multi-line rendering of the tree

    Raises:
        StyleError: If the style is invalid
        ValueError: If style is an unknown style name
    """
    if isinstance(style, str):
        styles = {
            "unicode": RenderStyle.unicode,
            "ascii": RenderStyle.ascii,
        }
        if style not in styles:
            raise ValueError(f"Unknown render style: {style!r}. Choose from {sorted(styles)}")
        style = styles[style]()

    return _render_tree(tree, renderer, style)


def get_tree_stats(tree: BaseTree[T]) -> Dict[str, Any]:
    """Get summary information about a tree.

    Args:
        tree: Root of the tree

    Returns:
        Dictionary containing:
        - root: Value of the root node
        - height: Height of the tree
        - is_leaf: Whether the root has no children
        and, for binary trees:
        - max_nodes: Node count of a complete tree of the same height
        - min: Smallest value (left-most node)
        - max: Largest value (right-most node)
    """
    stats: Dict[str, Any] = {
        'root': tree.value,
        'height': tree.height(),
        'is_leaf': tree.is_leaf(),
    }

    if isinstance(tree, BinaryTree):
        stats['max_nodes'] = tree.max_nodes()
        stats['min'] = tree.left_most().value
        stats['max'] = tree.right_most().value

    return stats
