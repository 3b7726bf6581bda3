"""Capability interfaces for TreeKit trees.

Trees differ in how they accept new values. General trees append children
in any order; ordered trees place values according to a comparison. These
ABCs let callers check which kind of growth a tree supports before using it:

    if isinstance(tree, Appendable):
        tree.add(value)
    elif isinstance(tree, Insertable):
        tree.insert(value)
"""

from abc import ABC, abstractmethod
from typing import Any


class Appendable(ABC):
    """A tree that accepts new values as unordered children."""

    @abstractmethod
    def add(self, value: Any) -> None:
        """Append a new leaf holding value.

        Args:
            value: Value for the new leaf
        """
        pass


class Insertable(ABC):
    """A tree that places new values according to their ordering."""

    @abstractmethod
    def insert(self, value: Any) -> None:
        """Insert value at the position its ordering dictates.

        Args:
            value: Value to insert. Must be comparable with existing values.
        """
        pass
