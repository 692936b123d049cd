"""Binary search tree with balanced bulk construction."""

from .errors import (
    ConsumedTreeError,
    EmptyCollectionError,
    EmptyTreeError,
    IncomparableValueError,
    OrderedTreeError,
)
from .iterators import IntoIterator, TreeIterator
from .tree import OrderedTree, compare

__all__ = [
    'OrderedTree',
    'TreeIterator',
    'IntoIterator',
    'compare',
    'OrderedTreeError',
    'EmptyCollectionError',
    'EmptyTreeError',
    'IncomparableValueError',
    'ConsumedTreeError',
]

__version__ = "0.1.0"
