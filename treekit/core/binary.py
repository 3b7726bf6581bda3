"""Binary search trees for TreeKit.

A BinaryTree has exactly two child slots, ``left`` (slot 0) and ``right``
(slot 1), and grows only through ``insert``, which keeps the ordering
invariant: every value in the left subtree is smaller than the node's value
and every value in the right subtree is larger.
"""

import logging
import weakref
from typing import Any, NoReturn, Optional, Tuple, TypeVar

from ..errors import InvalidValueError, OwnershipError, UnsupportedOperationError
from .capabilities import Insertable
from .tree import BaseTree

logger = logging.getLogger(__name__)

T = TypeVar("T")

LEFT = 0
RIGHT = 1


class BinaryTree(BaseTree[T], Insertable):
    """A binary search tree.

    Values must support a strict total order (``<`` and ``>``). Duplicate
    values are silently ignored by ``insert``. No balancing is performed.

    Each child keeps a weak reference to the node holding it, available as
    ``parent``. The reference never keeps a node alive; ownership runs only
    from parent to child.

    Note that ``invert`` mirrors the tree, after which the values descend
    from left to right. ``insert`` still assumes ascending order.

    Example:
        >>> tree = BinaryTree(5)
        >>> for value in (3, 7, 2):
        ...     tree.insert(value)
        >>> print(tree)
        5
        ├─3
        │ └─2
        └─7
    """

    def __init__(self, value: Optional[T] = None,
                 left: Optional["BinaryTree[T]"] = None,
                 right: Optional["BinaryTree[T]"] = None):
        """Create a binary tree node.

        Args:
            value: The value of the node. Required.
            left: Left subtree (values smaller than value)
            right: Right subtree (values larger than value)

        Raises:
            InvalidValueError: If no value is supplied
        """
        super().__init__(value, [None, None])
        self._parent: Optional[weakref.ref] = None
        self.left = left
        self.right = right

    @property
    def children(self) -> Tuple[Optional["BinaryTree[T]"], Optional["BinaryTree[T]"]]:
        """The (left, right) slots.

        Returned as a tuple: the two slots change only through ``left``,
        ``right`` and ``insert``, which keep parent links consistent.
        """
        return (self._children[LEFT], self._children[RIGHT])

    @property
    def left(self) -> Optional["BinaryTree[T]"]:
        """Left child, or None."""
        return self._children[LEFT]

    @left.setter
    def left(self, node: Optional["BinaryTree[T]"]) -> None:
        self._attach(LEFT, node)

    @property
    def right(self) -> Optional["BinaryTree[T]"]:
        """Right child, or None."""
        return self._children[RIGHT]

    @right.setter
    def right(self, node: Optional["BinaryTree[T]"]) -> None:
        self._attach(RIGHT, node)

    @property
    def parent(self) -> Optional["BinaryTree[T]"]:
        """Node currently holding this one, or None for a root."""
        if self._parent is None:
            return None
        return self._parent()

    def _attach(self, slot: int, node: Optional["BinaryTree[T]"]) -> None:
        """Place node in slot, keeping every node owned by exactly one parent.

        A node that already has a parent is moved: its old slot is emptied.
        The displaced occupant of slot becomes a detached root.

        Raises:
            OwnershipError: If node is this node or one of its ancestors
        """
        previous = self._children[slot]
        if previous is node:
            return

        if node is not None:
            if node is self or (not node.is_leaf() and node._is_ancestor_of(self)):
                raise OwnershipError(
                    f"Cannot attach {node!r} below itself or its descendant {self!r}."
                )

            owner = node.parent
            if owner is not None:
                for index, child in enumerate(owner._children):
                    if child is node:
                        owner._children[index] = None
                logger.debug("Moved %r from under %r to under %r", node._value, owner._value, self._value)

        if previous is not None:
            previous._parent = None
        if node is not None:
            node._parent = weakref.ref(self)
        self._children[slot] = node

    def _is_ancestor_of(self, node: "BinaryTree[T]") -> bool:
        ancestor = node.parent
        while ancestor is not None:
            if ancestor is self:
                return True
            ancestor = ancestor.parent
        return False

    def insert(self, value: T) -> None:
        """Insert value, keeping the binary search tree ordering.

        Smaller values go left, larger values go right. A value equal to
        one already in the tree is dropped.

        Args:
            value: Value to insert

        Raises:
            InvalidValueError: If value is None
        """
        if value is None:
            raise InvalidValueError("Cannot insert None into a binary tree.")

        node = self
        while True:
            if value < node._value:
                if node.left is None:
                    node.left = self.__class__(value)
                    return
                node = node.left
            elif value > node._value:
                if node.right is None:
                    node.right = self.__class__(value)
                    return
                node = node.right
            else:
                logger.debug("Ignoring duplicate value %r", value)
                return

    def left_most(self) -> "BinaryTree[T]":
        """Return the node holding the smallest value in this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node

    def right_most(self) -> "BinaryTree[T]":
        """Return the node holding the largest value in this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node

    def add(self, value: Any = None) -> NoReturn:
        """Not supported: binary trees only grow through ``insert``.

        Raises:
            UnsupportedOperationError: Always
        """
        raise UnsupportedOperationError(
            "BinaryTree.add is not supported. Use BinaryTree.insert instead."
        )

    def max_nodes(self) -> int:
        """Return the number of nodes a complete tree of this height holds.

        This is ``2 ** (height + 1) - 1``, an upper bound on the node count,
        not the actual number of nodes in this (possibly unbalanced) tree.

        Example:
            >>> tree = BinaryTree(5)
            >>> for value in (3, 7, 2, 4, 6):
            ...     tree.insert(value)
            >>> tree.max_nodes()
            7
        """
        return 2 ** (self.height() + 1) - 1
