"""Preorder traversals over a tree of nodes.

Both iterators walk depth first with an explicit stack: the most recently
discovered node is expanded next, and expanding a node schedules its right
child before its left one, so values come out as node, left subtree, right
subtree. Neither can be restarted; ask the tree for a fresh one instead.
"""

from typing import Generic, Optional, TypeVar

from bintree.node import Node

T = TypeVar("T")


class Iter(Generic[T]):
    """Borrowing traversal, the nodes are left exactly as they were."""

    def __init__(self, root: Optional[Node[T]], count: int) -> None:
        self._stack: list[Node[T]] = [] if root is None else [root]
        self._remaining = count

    def __iter__(self) -> "Iter[T]":
        return self

    def __next__(self) -> T:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        if node.right is not None:
            self._stack.append(node.right)
        if node.left is not None:
            self._stack.append(node.left)
        self._remaining -= 1
        return node.value

    def __length_hint__(self) -> int:
        return max(self._remaining, 0)


class IntoIter(Generic[T]):
    """Owning traversal: each node is unlinked from its children as it is
    expanded, so the tree is released piece by piece as values are consumed."""

    def __init__(self, root: Optional[Node[T]], count: int) -> None:
        self._stack: list[Node[T]] = [] if root is None else [root]
        self._remaining = count

    def __iter__(self) -> "IntoIter[T]":
        return self

    def __next__(self) -> T:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        left, right = node.take_children()
        if right is not None:
            self._stack.append(right)
        if left is not None:
            self._stack.append(left)
        self._remaining -= 1
        return node.value

    def __length_hint__(self) -> int:
        return max(self._remaining, 0)
