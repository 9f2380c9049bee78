"""An unbalanced binary search tree with cached size and height."""

from collections.abc import Iterable
from typing import Any, Generic, Optional, TypeVar

from bintree.iterators import IntoIter, Iter
from bintree.node import Node

T = TypeVar("T")


class IncomparableValueError(TypeError):
    """
    Raised when a value cannot be ordered against a value already in the tree.

    This is a usage error rather than a runtime condition: placing such a
    value anywhere would break the search tree property, so the operation is
    abandoned before the tree is touched.
    """

    def __init__(self, value: Any, other: Any) -> None:
        self.value = value
        self.other = other
        super().__init__(
            f"cannot order {value!r} against {other!r}: the comparison is "
            "undefined, so the value has no place in a binary search tree"
        )


def compare(value: Any, other: Any) -> int:
    """Return -1, 0 or 1 as ``value`` is less than, equal to, or greater than
    ``other``, raising IncomparableValueError if it is none of those."""
    try:
        if value < other:
            return -1
        if other < value:
            return 1
        if value == other:
            return 0
    except TypeError as err:
        raise IncomparableValueError(value, other) from err
    # e.g. float("nan"), or a partial order such as set inclusion
    raise IncomparableValueError(value, other)


class BinaryTree(Generic[T]):
    """
    A binary search tree holding distinct values in insertion-dependent shape.

    The tree is never rebalanced, so inserting values in sorted order produces
    a list-shaped tree of height ``count()``. ``count()`` and ``height()`` are
    kept up to date by ``insert``, so reading them is O(1).
    """

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[Node[T]] = None
        self._count = 0
        self._height = 0
        if values is not None:
            self.extend(values)

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> "BinaryTree[T]":
        return cls(values)

    @classmethod
    def from_root(cls, root: Optional[Node[T]]) -> "BinaryTree[T]":
        """Wrap an already built node structure, measuring its count and height.

        The nodes are not checked: the caller guarantees they are ordered and
        distinct, as ``insert`` would have left them.
        """
        tree: BinaryTree[T] = cls()
        if root is None:
            return tree
        pending = [(root, 1)]
        while pending:
            node, depth = pending.pop()
            tree._count += 1
            tree._height = max(tree._height, depth)
            for child in (node.left, node.right):
                if child is not None:
                    pending.append((child, depth + 1))
        tree._root = root
        return tree

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None
        self._count = 0
        self._height = 0

    def count(self) -> int:
        return self._count

    def height(self) -> int:
        return self._height

    def root(self) -> Optional[T]:
        if self._root is None:
            return None
        return self._root.value

    @property
    def root_node(self) -> Optional[Node[T]]:
        return self._root

    def min(self) -> Optional[T]:
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> Optional[T]:
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.value

    def contains(self, target: T) -> bool:
        node = self._root
        while node is not None:
            order = compare(target, node.value)
            if order == 0:
                return True
            node = node.left if order < 0 else node.right
        return False

    def insert(self, value: T) -> bool:
        """Insert ``value``, returning False if it was already present.

        Raises IncomparableValueError, leaving the tree unchanged, if
        ``value`` cannot be ordered against a value on its search path.
        """
        if self._root is None:
            self._root = Node(value)
            self._count = 1
            self._height = 1
            return True

        node = self._root
        depth = 1
        while True:
            order = compare(value, node.value)
            if order == 0:
                return False
            depth += 1
            if order < 0:
                if node.left is None:
                    node.set_left(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.set_right(value)
                    break
                node = node.right

        self._count += 1
        self._height = max(self._height, depth)
        return True

    def extend(self, values: Iterable[T]) -> None:
        for value in values:
            self.insert(value)

    def iter(self) -> Iter[T]:
        """Preorder traversal which leaves the tree intact."""
        return Iter(self._root, self._count)

    def into_iter(self) -> IntoIter[T]:
        """Preorder traversal which takes over the tree's nodes.

        The tree is empty once this returns.
        """
        root, count = self._root, self._count
        self.clear()
        return IntoIter(root, count)

    def copy(self) -> "BinaryTree[T]":
        clone: BinaryTree[T] = type(self)()
        if self._root is None:
            return clone
        clone._root = Node(self._root.value)
        pending = [(self._root, clone._root)]
        while pending:
            source, target = pending.pop()
            if source.left is not None:
                pending.append((source.left, target.set_left(source.left.value)))
            if source.right is not None:
                pending.append((source.right, target.set_right(source.right.value)))
        clone._count = self._count
        clone._height = self._height
        return clone

    __copy__ = copy

    def __len__(self) -> int:
        return self._count

    def __contains__(self, target: object) -> bool:
        return self.contains(target)  # type: ignore

    def __iter__(self) -> Iter[T]:
        return self.iter()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryTree):
            return NotImplemented
        return (
            self._count == other._count
            and self._height == other._height
            and self._root == other._root
        )

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        # preorder reinserted into an empty tree rebuilds the same shape
        return f"{type(self).__name__}({list(self.iter())!r})"
