import io

import pytest

from searchlab.traversal import bfs, build_adjacency, dfs, main_bfs, main_dfs

EDGES = [(0, 1), (0, 2), (1, 3)]


def test_build_adjacency():
    assert build_adjacency(4, EDGES) == [[1, 2], [0, 3], [0], [1]]


def test_build_adjacency_is_symmetric():
    adjacency = build_adjacency(5, [(0, 4), (2, 3), (4, 3)])
    for u, neighbours in enumerate(adjacency):
        for v in neighbours:
            assert u in adjacency[v]


@pytest.mark.parametrize("edges", [[(0, 4)], [(-1, 0)]])
def test_build_adjacency_out_of_range(edges):
    with pytest.raises(ValueError):
        build_adjacency(4, edges)


def test_build_adjacency_negative_count():
    with pytest.raises(ValueError):
        build_adjacency(-1, [])


def test_bfs_order():
    assert bfs(build_adjacency(4, EDGES)) == [0, 1, 2, 3]


def test_dfs_order():
    assert dfs(build_adjacency(4, EDGES)) == [0, 1, 3, 2]


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_only_component_of_zero(traverse):
    adjacency = build_adjacency(6, [(0, 1), (1, 2), (3, 4), (4, 5)])
    order = traverse(adjacency)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2]


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_visits_each_vertex_once(traverse):
    adjacency = build_adjacency(5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 0)])
    order = traverse(adjacency)
    assert sorted(order) == list(range(5))


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_empty_graph(traverse):
    assert traverse([]) == []


def test_main_bfs(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n3\n0 1\n0 2\n1 3\n"))
    assert main_bfs([]) == 0
    expected = " ".join(map(str, bfs(build_adjacency(4, EDGES))))
    assert f"BFS Traversal starting from node 0: {expected}" in capsys.readouterr().out


def test_main_dfs(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 3 0 1 0 2 1 3"))
    assert main_dfs([]) == 0
    expected = " ".join(map(str, dfs(build_adjacency(4, EDGES))))
    assert f"DFS Traversal using Stack starting from node 0: {expected}" in capsys.readouterr().out


def test_main_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n3\n0 1\n"))
    assert main_bfs([]) == 1
    assert "error" in capsys.readouterr().err