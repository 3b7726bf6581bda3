"""General N-ary trees for TreeKit.

A tree is represented by its root node: a value plus an ordered list of
child nodes. Child slots may be empty (None); every operation skips them.
"""

import logging
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from ..errors import InvalidValueError
from ..render import render_tree
from .capabilities import Appendable

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseTree(Generic[T]):
    """Node machinery shared by every tree type.

    Holds the value and the child slots, and implements the read-only and
    structural operations that do not depend on how children are added.
    Subclasses decide how the tree grows (see Appendable and Insertable).
    """

    def __init__(self, value: Optional[T] = None,
                 children: Optional[List[Optional["BaseTree[T]"]]] = None):
        """Create a node.

        Args:
            value: The value of the node. Required.
            children: Child nodes, adopted as-is (None entries are empty slots)

        Raises:
            InvalidValueError: If no value is supplied
        """
        if value is None:
            raise InvalidValueError("The value of a tree cannot be None.")
        self._value = value
        self._children: List[Optional[BaseTree[T]]] = children if children is not None else []

    @property
    def value(self) -> T:
        """Value held by this node. Fixed for the node's lifetime."""
        return self._value

    @property
    def children(self) -> Sequence[Optional["BaseTree[T]"]]:
        """Child slots in storage order. None marks an empty slot."""
        return self._children

    def is_leaf(self) -> bool:
        """Check if this node has no children (empty slots do not count)."""
        return all(child is None for child in self._children)

    def search(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Find the first value matching predicate.

        Nodes are checked depth-first, pre-order: a node before its
        children, children in storage order. The walk stops at the first
        match.

        Args:
            predicate: Function taking a value and returning True on a match

        Returns:
            The first matching value, or None if no node matches
        """
        # Explicit stack so deep trees do not hit the recursion limit
        stack: List[BaseTree[T]] = [self]

        while stack:
            node = stack.pop()
            if predicate(node._value):
                return node._value

            # Push in reverse so the first child is visited first
            for child in reversed(node._children):
                if child is not None:
                    stack.append(child)

        return None

    def height(self) -> int:
        """Return the height of the tree.

        The height is the number of edges on the longest path from this
        node down to a leaf. A node whose slots are all empty is a leaf
        and has height 0.
        """
        # Level by level: each non-empty level below the root adds one edge
        height = 0
        level = [child for child in self._children if child is not None]

        while level:
            height += 1
            level = [
                grandchild
                for node in level
                for grandchild in node._children
                if grandchild is not None
            ]

        return height

    def invert(self) -> None:
        """Mirror the tree in place.

        Reverses the order of this node's children, then inverts every
        child subtree. Values are untouched.
        """
        stack: List[BaseTree[T]] = [self]

        while stack:
            node = stack.pop()
            node._children.reverse()
            stack.extend(child for child in node._children if child is not None)

    def to_string(self, renderer: Optional[Callable[[T], str]] = None) -> str:
        """Return a multi-line text rendering of the tree.

        Args:
            renderer: Converts this node's value to text (default ``str``).
                Descendant values are always rendered with ``str``.

        Example:
            >>> tree = Tree(5)
            >>> tree.add(3)
            >>> tree.add(7)
            >>> tree.children[0].add(1)
            >>> print(tree.to_string())
            5
            ├─3
            │ └─1
            └─7
        """
        return render_tree(self, renderer)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        present = sum(1 for child in self.children if child is not None)
        return f"{self.__class__.__name__}(value={self._value!r}, children={present})"


class Tree(BaseTree[T], Appendable):
    """An N-ary tree whose children keep insertion order.

    No ordering, deduplication or balancing is applied; ``add`` simply
    appends a new leaf.

    Example:
        >>> tree = Tree("root")
        >>> tree.add("a")
        >>> tree.add("b")
        >>> tree.height()
        1
        >>> tree.search(lambda v: v.startswith("b"))
        'b'
    """

    @property
    def children(self) -> List[Optional[BaseTree[T]]]:
        """Child slots in insertion order. This is the list itself, open to direct edits."""
        return self._children

    def add(self, value: T) -> None:
        """Append a new leaf holding value to this node's children.

        Args:
            value: Value for the new child

        Raises:
            InvalidValueError: If value is None
        """
        self._children.append(Tree(value))
        logger.debug("Added %r under %r", value, self._value)
