"""Iterators over an OrderedTree in ascending order.

TreeIterator leaves the tree intact; IntoIterator owns the values once
the tree has handed them over.
"""

from collections import deque
from typing import TYPE_CHECKING, TypeVar, Generic, Deque, Iterator, List, Optional

if TYPE_CHECKING:
    from .tree import OrderedTree

T = TypeVar('T')


class TreeIterator(Generic[T]):
    """Single-shot ascending iterator over a snapshot of the tree.

    The buffer is filled right subtree first, so it holds the values in
    descending order and each step pops the smallest off the end.
    """

    def __init__(self, root: Optional['OrderedTree.Node']) -> None:
        self._buffer: List[T] = []
        stack: List['OrderedTree.Node'] = []
        node = root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            self._buffer.append(node.value)
            node = node.left

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self._buffer:
            raise StopIteration
        return self._buffer.pop()

    def __length_hint__(self) -> int:
        return len(self._buffer)


class IntoIterator(Generic[T]):
    """Ascending iterator that owns the values taken out of a tree."""

    def __init__(self, values: List[T]) -> None:
        self._values: Deque[T] = deque(values)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self._values:
            raise StopIteration
        return self._values.popleft()

    def __length_hint__(self) -> int:
        return len(self._values)
