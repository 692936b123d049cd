"""Exception hierarchy for ordered_tree.

Each error also derives from the built-in exception a caller would
naturally catch for that failure, so ``except ValueError`` keeps working.
"""

from __future__ import annotations


class OrderedTreeError(Exception):
    """Base exception for all ordered_tree errors."""
    pass


class EmptyCollectionError(OrderedTreeError, ValueError):
    """Raised when a tree is built from a collection with no elements."""
    pass


class EmptyTreeError(OrderedTreeError, ValueError):
    """Raised when a query needs at least one element but the tree has none."""
    pass


class IncomparableValueError(OrderedTreeError, TypeError):
    """Raised when two values have no defined order (e.g. NaN)."""

    def __init__(self, left: object, right: object) -> None:
        super().__init__(f"cannot order {left!r} against {right!r}")
        self.left = left
        self.right = right


class ConsumedTreeError(OrderedTreeError, RuntimeError):
    """Raised when a tree is used after into_iter() took its contents."""
    pass
