"""An unbalanced binary search tree with preorder traversal and JSON support."""

from bintree.iterators import IntoIter, Iter
from bintree.node import Node
from bintree.serialization import (
    BinaryTreeEncoder,
    DeserializationError,
    SerializationError,
    from_dict,
    from_json,
    to_dict,
    to_json,
)
from bintree.tree import BinaryTree, IncomparableValueError

__version__ = "26.10.01"
__all__: list[str] = [
    "BinaryTree",
    "BinaryTreeEncoder",
    "DeserializationError",
    "IncomparableValueError",
    "IntoIter",
    "Iter",
    "Node",
    "SerializationError",
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
