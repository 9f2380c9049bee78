from typing import Any

from bintree import BinaryTree


def check_invariants(tree: BinaryTree[Any]) -> list[Any]:
    """Walk the whole tree, asserting ordering, count and height, and return
    its values in preorder."""
    values = []
    height = 0
    pending = [] if tree.root_node is None else [(tree.root_node, 1, None, None)]
    while pending:
        node, depth, lower, upper = pending.pop()
        if lower is not None:
            assert lower.value < node.value, (lower.value, node.value)
        if upper is not None:
            assert node.value < upper.value, (node.value, upper.value)
        values.append(node.value)
        height = max(height, depth)
        if node.right is not None:
            pending.append((node.right, depth + 1, node, upper))
        if node.left is not None:
            pending.append((node.left, depth + 1, lower, node))

    assert tree.count() == len(values) == len(tree)
    assert tree.height() == height
    assert tree.is_empty() == (not values)
    return values


def reference_preorder(node):
    # recursive on purpose, only used on small trees
    if node is None:
        return []
    return [
        node.value,
        *reference_preorder(node.left),
        *reference_preorder(node.right),
    ]


def unique(values):
    # first occurrence of each value, in order
    seen = []
    for v in values:
        if v not in seen:
            seen.append(v)
    return seen
