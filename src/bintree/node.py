from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """
    One cell of a binary tree: a value plus up to two child cells.

    Each child belongs to exactly one parent, so a node's lifetime is bounded
    by its parent's. Nodes know nothing about ordering; keeping the search
    tree property is the job of the container that builds them.
    """

    __slots__ = ("_value", "_left", "_right")

    def __init__(self, value: T) -> None:
        self._value = value
        self._left: Optional[Node[T]] = None
        self._right: Optional[Node[T]] = None

    @property
    def value(self) -> T:
        return self._value

    @property
    def left(self) -> Optional["Node[T]"]:
        return self._left

    @property
    def right(self) -> Optional["Node[T]"]:
        return self._right

    def set_left(self, value: T) -> "Node[T]":
        # overwrites any existing child, callers check the slot first
        self._left = Node(value)
        return self._left

    def set_right(self, value: T) -> "Node[T]":
        self._right = Node(value)
        return self._right

    def take_children(self) -> tuple[Optional["Node[T]"], Optional["Node[T]"]]:
        """Unlink both children and return them as (left, right)."""
        children = (self._left, self._right)
        self._left = self._right = None
        return children

    def is_leaf(self) -> bool:
        return self._left is None and self._right is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        # walked with an explicit stack, list-shaped trees can be very deep
        pairs: list[tuple[Optional[Node[Any]], Optional[Node[Any]]]] = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if a is None or b is None:
                if a is not b:
                    return False
                continue
            # identity first, so a stored nan matches itself
            if a._value is not b._value and a._value != b._value:
                return False
            pairs.append((a._right, b._right))
            pairs.append((a._left, b._left))
        return True

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return f"Node({self._value!r})"

    __str__ = __repr__
