import io

import pytest

from dslab.landmarks import SAMPLE_EDGES, LandmarkGraph, main


@pytest.fixture
def campus():
    return LandmarkGraph(SAMPLE_EDGES)


def test_bfs_sample_graph(campus):
    assert campus.bfs("Library") == [
        "Library",
        "Canteen",
        "Admin Block",
        "Auditorium",
        "Main Gate",
        "Playground",
    ]


def test_dfs_sample_graph(campus):
    assert campus.dfs("Library") == [
        "Library",
        "Canteen",
        "Auditorium",
        "Playground",
        "Main Gate",
        "Admin Block",
    ]


@pytest.mark.parametrize("start", [u for u, _ in SAMPLE_EDGES])
def test_traversals_visit_every_landmark_once(campus, start):
    for order in (campus.bfs(start), campus.dfs(start)):
        assert order[0] == start
        assert sorted(order) == campus.landmarks


def test_edges_are_undirected():
    graph = LandmarkGraph([("a", "b")])
    assert graph.neighbours("a") == ["b"]
    assert graph.neighbours("b") == ["a"]


def test_format_lists_sorted_landmarks():
    graph = LandmarkGraph([("b", "a")])
    assert graph.format() == "a -> b, \nb -> a, "


def test_unknown_start_yields_only_start(campus):
    assert campus.bfs("Nowhere") == ["Nowhere"]
    assert campus.dfs("Nowhere") == ["Nowhere"]


def test_disconnected_component_not_reached():
    graph = LandmarkGraph([("a", "b"), ("c", "d")])
    assert set(graph.bfs("a")) == {"a", "b"}
    assert set(graph.dfs("c")) == {"c", "d"}


def test_main_prints_traversals(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Library\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert (
        "BFS Traversal starting from Library:\n"
        "Library Canteen Admin Block Auditorium Main Gate Playground \n"
    ) in out