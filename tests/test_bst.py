import io
import random

import pytest

from dslab.bst import INITIAL_VALUES, BinarySearchTree, main


def test_inorder_is_sorted():
    tree = BinarySearchTree(INITIAL_VALUES)
    assert tree.inorder() == sorted(INITIAL_VALUES)


def test_random_inorder_sorted():
    rng = random.Random(7)
    values = [rng.randint(-100, 100) for _ in range(200)]
    tree = BinarySearchTree(values)
    assert tree.inorder() == sorted(values)


def test_contains():
    tree = BinarySearchTree(INITIAL_VALUES)
    assert all(tree.contains(v) for v in INITIAL_VALUES)
    assert not tree.contains(55)
    assert 60 in tree


def test_height_of_balanced_seed():
    assert BinarySearchTree(INITIAL_VALUES).height() == 3


def test_height_degenerate_chain():
    values = list(range(1, 30))
    assert BinarySearchTree(values).height() == len(values)


def test_height_empty():
    assert BinarySearchTree().height() == 0


def test_minimum():
    assert BinarySearchTree(INITIAL_VALUES).minimum() == min(INITIAL_VALUES)


def test_minimum_empty_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().minimum()


def test_mirror_reverses_inorder():
    tree = BinarySearchTree(INITIAL_VALUES)
    tree.mirror()
    assert tree.inorder() == sorted(INITIAL_VALUES, reverse=True)
    assert tree.minimum() == max(INITIAL_VALUES)


def test_mirror_twice_restores():
    tree = BinarySearchTree(INITIAL_VALUES)
    tree.mirror()
    tree.mirror()
    assert tree.inorder() == sorted(INITIAL_VALUES)
    assert tree.height() == BinarySearchTree(INITIAL_VALUES).height()


def test_duplicates_kept():
    tree = BinarySearchTree([5, 5, 5])
    assert tree.inorder() == [5, 5, 5]
    assert tree.height() == 3


def test_main_inorder(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 40\n2 45\n6\n7\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Found\n" in out
    assert "Not Found" in out
    assert "Inorder: 20 30 40 50 60 70 80 " in out