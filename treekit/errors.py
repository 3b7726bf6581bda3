"""Exception types raised by TreeKit.

Every error the library raises derives from TreeError, so callers can catch
the whole family at once. Each concrete error also derives from the closest
built-in exception, which keeps ``except ValueError`` style handlers working.
"""


class TreeError(Exception):
    """Base class for all TreeKit errors."""
    pass


class InvalidValueError(TreeError, ValueError):
    """Raised when a tree node is constructed without a value."""
    pass


class UnsupportedOperationError(TreeError, NotImplementedError):
    """Raised when an operation is not available on a tree type.

    The canonical case is calling ``add`` on a BinaryTree, which only
    supports ordered insertion.
    """
    pass


class StyleError(TreeError, ValueError):
    """Raised when a RenderStyle fails validation."""
    pass


class OwnershipError(TreeError, ValueError):
    """Raised when attaching a node would create a cycle in the tree.

    A node may only be attached below a node that is not itself or one of
    its own descendants.
    """
    pass
