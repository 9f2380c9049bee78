"""Tests for the bintree library."""

import operator

from common import reference_preorder
from hypothesis import given
from strategies import trees

from bintree import BinaryTree, IntoIter, Iter


@given(trees)
def test_borrowing_traversal_is_preorder(tree):
    assert list(tree.iter()) == reference_preorder(tree.root_node)


@given(trees)
def test_owning_traversal_matches_borrowing(tree):
    expected = list(tree.iter())
    assert list(tree.into_iter()) == expected


@given(trees)
def test_borrowing_leaves_tree_intact(tree):
    before = tree.copy()
    for _ in tree:
        pass
    assert tree == before


def test_owning_traversal_empties_the_tree():
    tree = BinaryTree([5, 4, 6])
    root = tree.root_node
    values = tree.into_iter()
    assert isinstance(values, IntoIter)
    assert tree.is_empty()
    assert tree.count() == tree.height() == 0
    assert list(values) == [5, 4, 6]
    assert root.is_leaf()


def test_traversals_are_not_restartable():
    tree = BinaryTree([2, 1, 3])
    for values in (tree.iter(), BinaryTree([2, 1, 3]).into_iter()):
        assert iter(values) is values
        assert list(values) == [2, 1, 3]
        assert list(values) == []
        assert next(values, None) is None


def test_each_iter_call_starts_fresh():
    tree = BinaryTree([2, 1, 3])
    first = tree.iter()
    assert isinstance(first, Iter)
    assert next(first) == 2
    assert list(tree.iter()) == [2, 1, 3]
    assert list(first) == [1, 3]


@given(trees)
def test_length_hint_counts_down(tree):
    values = tree.iter()
    for remaining in range(tree.count(), 0, -1):
        assert operator.length_hint(values) == remaining
        next(values)
    assert operator.length_hint(values) == 0


def test_empty_traversals():
    assert list(BinaryTree().iter()) == []
    assert list(BinaryTree().into_iter()) == []
