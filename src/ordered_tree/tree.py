import logging
from collections import deque
from functools import cmp_to_key
from typing import TypeVar, Generic, Iterable, List, Optional

from .errors import (
    ConsumedTreeError,
    EmptyCollectionError,
    EmptyTreeError,
    IncomparableValueError,
)
from .iterators import IntoIterator, TreeIterator

logger = logging.getLogger(__name__)

T = TypeVar('T')


def compare(a: T, b: T) -> int:
    """Three-way comparison that refuses to guess.

    Returns -1, 0 or 1. Raises IncomparableValueError when the operands
    are not mutually ordered, either because the comparison itself raises
    TypeError or ArithmeticError (Decimal NaN), or because none of <, >
    and == holds (float NaN).
    """
    try:
        if a < b:
            return -1
        if b < a:
            return 1
        if a == b:
            return 0
    except (TypeError, ArithmeticError) as exc:
        raise IncomparableValueError(a, b) from exc
    raise IncomparableValueError(a, b)


def _check_orderable(value: T) -> None:
    compare(value, value)


class OrderedTree(Generic[T]):
    """Binary search tree over comparable values.

    Every value in a node's left subtree orders at or below the node, and
    every value in its right subtree at or above it. ``insert`` always
    sends an equal value right; ``build`` may leave equal values on both
    sides of a midpoint. Nothing rebalances after build, so insert and
    remove can degrade the shape towards a chain.

    Use ``OrderedTree.build(values)`` or ``OrderedTree.new(value)`` to
    create a tree.
    """

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['OrderedTree.Node'] = None
            self.right: Optional['OrderedTree.Node'] = None

    def __init__(self) -> None:
        self._root: Optional[OrderedTree.Node] = None
        self._size: int = 0
        self._consumed: bool = False

    @classmethod
    def build(cls, data: Iterable[T]) -> 'OrderedTree[T]':
        """Build a height-balanced tree from an unsorted collection.

        The values are sorted, then the floor midpoint of each slice becomes
        the root of that subtree, so n values give height ceil(log2(n + 1)).

        Raises:
            EmptyCollectionError: if ``data`` yields no values.
            IncomparableValueError: if any value cannot be ordered.
        """
        values = list(data)
        if not values:
            raise EmptyCollectionError("cannot build a tree from an empty collection")
        for value in values:
            _check_orderable(value)
        values.sort(key=cmp_to_key(compare))

        tree: OrderedTree[T] = cls()
        tree._root = cls._build_range(values, 0, len(values) - 1)
        tree._size = len(values)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Built tree of %d values, height %d", tree._size, tree.height())
        return tree

    @classmethod
    def new(cls, value: T) -> 'OrderedTree[T]':
        """Create a tree holding a single value."""
        _check_orderable(value)
        tree: OrderedTree[T] = cls()
        tree._root = OrderedTree.Node(value)
        tree._size = 1
        return tree

    @classmethod
    def _build_range(cls, values: List[T], start: int, end: int) -> Optional[Node]:
        if start > end:
            return None
        mid = (start + end) // 2
        node = OrderedTree.Node(values[mid])
        node.left = cls._build_range(values, start, mid - 1)
        node.right = cls._build_range(values, mid + 1, end)
        return node

    @property
    def root(self) -> T:
        self._check_live()
        if self._root is None:
            raise EmptyTreeError("root of empty tree")
        return self._root.value

    def insert(self, value: T) -> None:
        """Insert ``value``; duplicates go to the right of their equal."""
        self._check_live()
        if self._root is None:
            _check_orderable(value)
            self._root = OrderedTree.Node(value)
            self._size += 1
            return

        node = self._root
        while True:
            if compare(value, node.value) < 0:
                if node.left is None:
                    node.left = OrderedTree.Node(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = OrderedTree.Node(value)
                    break
                node = node.right
        self._size += 1

    def remove(self, value: T) -> None:
        """Remove one occurrence of ``value``. Absent values are ignored."""
        self._check_live()
        parent: Optional[OrderedTree.Node] = None
        node = self._root
        is_left_child = False

        while node is not None:
            order = compare(value, node.value)
            if order == 0:
                break
            parent = node
            if order < 0:
                node = node.left
                is_left_child = True
            else:
                node = node.right
                is_left_child = False

        if node is None:
            logger.debug("remove(%r): value not present", value)
            return

        if node.left is not None and node.right is not None:
            # Unlink the in-order successor where it stands; it has no left child.
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            self._size -= 1
            return

        replacement = node.left if node.left is not None else node.right
        if parent is None:
            self._root = replacement
        elif is_left_child:
            parent.left = replacement
        else:
            parent.right = replacement
        self._size -= 1

    def exists(self, value: T) -> bool:
        self._check_live()
        node = self._root
        while node is not None:
            order = compare(value, node.value)
            if order == 0:
                return True
            node = node.left if order < 0 else node.right
        return False

    def find_min(self) -> T:
        self._check_live()
        if self._root is None:
            raise EmptyTreeError("min from empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def find_max(self) -> T:
        self._check_live()
        if self._root is None:
            raise EmptyTreeError("max from empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        self._check_live()
        if self._root is None:
            return 0
        height = 0
        level = deque([self._root])
        while level:
            height += 1
            for _ in range(len(level)):
                node = level.popleft()
                if node.left is not None:
                    level.append(node.left)
                if node.right is not None:
                    level.append(node.right)
        return height

    def inorder(self) -> List[T]:
        self._check_live()
        result: List[T] = []
        stack: List[OrderedTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def preorder(self) -> List[T]:
        self._check_live()
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> List[T]:
        self._check_live()
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def iter(self) -> TreeIterator[T]:
        """Ascending iterator over a snapshot of the current values."""
        self._check_live()
        return TreeIterator(self._root)

    def into_iter(self) -> IntoIterator[T]:
        """Hand the values over in ascending order and retire this tree.

        Every later call on this tree raises ConsumedTreeError.
        """
        values = self.inorder()
        self._root = None
        self._size = 0
        self._consumed = True
        logger.debug("Tree consumed into iterator of %d values", len(values))
        return IntoIterator(values)

    def size(self) -> int:
        self._check_live()
        return self._size

    def is_empty(self) -> bool:
        self._check_live()
        return self._size == 0

    def clear(self) -> None:
        self._check_live()
        self._root = None
        self._size = 0

    def copy(self) -> 'OrderedTree[T]':
        """Independent tree with the same shape and values."""
        self._check_live()
        clone: OrderedTree[T] = type(self)()
        if self._root is None:
            return clone
        clone._root = OrderedTree.Node(self._root.value)
        stack = [(self._root, clone._root)]
        while stack:
            source, target = stack.pop()
            if source.left is not None:
                target.left = OrderedTree.Node(source.left.value)
                stack.append((source.left, target.left))
            if source.right is not None:
                target.right = OrderedTree.Node(source.right.value)
                stack.append((source.right, target.right))
        clone._size = self._size
        return clone

    def _check_live(self) -> None:
        if self._consumed:
            raise ConsumedTreeError("tree was consumed by into_iter()")

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: T) -> bool:
        return self.exists(value)

    def __iter__(self) -> TreeIterator[T]:
        return self.iter()

    def __repr__(self) -> str:
        if self._consumed:
            return "OrderedTree(<consumed>)"
        return f"OrderedTree({self.inorder()})"

    def __str__(self) -> str:
        if self._consumed:
            return "OrderedTree(<consumed>)"
        return f"OrderedTree(size={self._size})"
