import io

import pytest

from dslab.obst import main, optimal_bst


def test_single_key_without_gaps_costs_its_probability():
    tree = optimal_bst([7], [0.5], [0.0, 0.0])
    assert tree.cost == pytest.approx(0.5)
    assert tree.root_key == 7


def test_two_keys_heavier_one_at_root():
    tree = optimal_bst([10, 20], [1, 2], [0, 0, 0])
    assert tree.cost == pytest.approx(4)
    assert tree.root_key == 20
    assert tree.root_index == 2


def test_textbook_example():
    tree = optimal_bst([10, 20, 30, 40], [3, 3, 1, 1], [2, 3, 1, 1, 1])
    assert tree.cost == pytest.approx(40)
    assert tree.root_key == 20


def test_cost_at_least_total_weight():
    p, q = [0.1, 0.2, 0.3], [0.05, 0.1, 0.15, 0.1]
    tree = optimal_bst([1, 2, 3], p, q)
    assert tree.cost >= sum(p) + sum(q)
    assert tree.root_key in (1, 2, 3)


def test_subrange_roots_lie_within_range():
    tree = optimal_bst([1, 2, 3, 4], [1, 2, 3, 4], [1, 1, 1, 1, 1])
    for i in range(5):
        for j in range(i + 1, 5):
            assert i + 1 <= tree.roots[i][j] <= j


@pytest.mark.parametrize(
    "keys, p, q",
    [([], [], [0.1]), ([1, 2], [0.5], [0.1, 0.1, 0.1]), ([1], [0.5], [0.1])],
)
def test_invalid_sizes(keys, p, q):
    with pytest.raises(ValueError):
        optimal_bst(keys, p, q)


def test_main_prints_cost_and_root(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n10 20\n1 2\n0 0 0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Minimum cost of OBST: 4\n" in out
    assert "Root key: 20\n" in out