import random

import pytest

from dsakit.avl_tree import AvlNode, AvlTree


def _check_balanced(node: AvlNode | None) -> int:
    """Return the height of ``node``, asserting every balance factor is correct."""
    if node is None:
        return 0
    lh = _check_balanced(node.left)
    rh = _check_balanced(node.right)
    assert node.bfactor == rh - lh
    assert node.bfactor in (-1, 0, 1)
    return 1 + max(lh, rh)


def test_empty_tree():
    tree = AvlTree()
    assert tree.is_empty()
    assert len(tree) == 0
    assert tree.depth() == 0
    assert not tree.search(1)


def test_ascending_insert_rotates():
    tree = AvlTree()
    for v in (1, 2, 3):
        assert tree.insert(v)
    assert tree.root.val == 2
    assert tree.depth() == 2
    _check_balanced(tree.root)


def test_duplicate_not_inserted():
    tree = AvlTree()
    assert tree.insert(5)
    assert not tree.insert(5)
    assert len(tree) == 1


@pytest.mark.parametrize(
    "values",
    [
        list(range(1, 101)),
        list(range(100, 0, -1)),
        [50, 20, 70, 10, 30, 25, 27, 26, 80, 75, 77, 76],
    ],
)
def test_balance_and_order(values):
    tree = AvlTree()
    for v in values:
        tree.insert(v)
    assert len(tree) == len(set(values))
    assert list(tree) == sorted(set(values))
    assert tree.depth() == _check_balanced(tree.root)
    for v in values:
        assert tree.search(v)
    assert not tree.search(max(values) + 1)
    assert not tree.search(min(values) - 1)


def test_random_inserts_stay_balanced():
    rng = random.Random(42)
    values = [rng.randrange(500) for _ in range(300)]
    tree = AvlTree()
    for v in values:
        tree.insert(v)
        _check_balanced(tree.root)
    assert list(tree) == sorted(set(values))