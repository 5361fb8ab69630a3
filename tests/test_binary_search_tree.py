import random

import pytest

from algocraft.data_structures.binary_search_tree import BinarySearchTree


def build(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


@pytest.fixture
def sample_tree():
    return build([10, 14, 12, 5])


def test_example_traversals(sample_tree):
    assert list(sample_tree.inorder()) == [5, 10, 12, 14]
    assert list(sample_tree.preorder()) == [10, 5, 14, 12]
    assert list(sample_tree.postorder()) == [5, 12, 14, 10]


def test_example_after_removing_root(sample_tree):
    assert sample_tree.search(10)
    sample_tree.remove(10)
    assert not sample_tree.search(10)
    assert list(sample_tree.inorder_iterative()) == [5, 12, 14]
    assert list(sample_tree.preorder_iterative())[0] == 12
    assert list(sample_tree.postorder_iterative())[-1] == 12


def test_empty_tree_traversals_are_empty():
    tree = BinarySearchTree()
    assert list(tree.inorder()) == []
    assert list(tree.inorder_iterative()) == []
    assert list(tree.preorder_iterative()) == []
    assert list(tree.postorder_iterative()) == []
    assert 3 not in tree


def test_remove_from_empty_raises():
    with pytest.raises(KeyError):
        BinarySearchTree().remove(1)


def test_remove_missing_raises(sample_tree):
    with pytest.raises(KeyError):
        sample_tree.remove(99)
    assert list(sample_tree.inorder()) == [5, 10, 12, 14]


def test_remove_only_value_empties_tree():
    tree = build([7])
    tree.remove(7)
    assert list(tree.inorder()) == []
    tree.insert(3)
    assert list(tree.inorder()) == [3]


def test_duplicates_are_kept_and_removed_one_at_a_time():
    tree = build([5, 5, 5])
    assert list(tree.inorder()) == [5, 5, 5]
    tree.remove(5)
    assert list(tree.inorder()) == [5, 5]
    assert 5 in tree


def test_remove_node_with_only_left_child():
    tree = build([10, 5, 3, 7])
    tree.remove(10)
    assert list(tree.inorder()) == [3, 5, 7]
    assert list(tree.preorder())[0] == 5


@pytest.mark.parametrize("seed", range(5))
def test_traversals_agree_and_inorder_is_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(60)]
    tree = build(values)
    assert list(tree.inorder()) == sorted(values)
    assert list(tree.inorder_iterative()) == sorted(values)
    assert list(tree.preorder_iterative()) == list(tree.preorder())
    assert list(tree.postorder_iterative()) == list(tree.postorder())
    assert list(tree.preorder())[0] == values[0]
    assert list(tree.postorder())[-1] == values[0]


@pytest.mark.parametrize("seed", range(5))
def test_random_removals_keep_tree_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 30) for _ in range(40)]
    tree = build(values)
    remaining = sorted(values)
    for value in rng.sample(values, 25):
        tree.remove(value)
        remaining.remove(value)
        assert list(tree.inorder()) == remaining
        assert list(tree.postorder_iterative()) == list(tree.postorder())
        assert list(tree.preorder_iterative()) == list(tree.preorder())
    for value in range(31):
        assert tree.search(value) == (value in remaining)