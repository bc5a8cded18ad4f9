import io
import math

import pytest

from searchlab.shortest_path import dijkstra, format_distances, main

GRAPH = [
    [0, 10, 0, 0, 5],
    [0, 0, 1, 0, 2],
    [0, 0, 0, 4, 0],
    [7, 0, 6, 0, 0],
    [0, 3, 9, 2, 0],
]


def test_example_distances():
    assert dijkstra(GRAPH, 0) == [0, 8, 9, 7, 5]


@pytest.mark.parametrize("source", range(5))
def test_distances_satisfy_edges(source):
    distances = dijkstra(GRAPH, source)
    assert distances[source] == 0
    for u, row in enumerate(GRAPH):
        for v, weight in enumerate(row):
            if weight:
                assert distances[v] <= distances[u] + weight


def test_unreachable_is_infinite():
    graph = [[0, 1, 0], [0, 0, 0], [0, 0, 0]]
    assert dijkstra(graph, 0)[2] == math.inf


def test_edges_are_directed():
    graph = [[0, 3], [0, 0]]
    assert dijkstra(graph, 1)[0] == math.inf
    assert dijkstra(graph, 0)[1] == 3


@pytest.mark.parametrize("source", [-1, 5])
def test_bad_source(source):
    with pytest.raises(ValueError):
        dijkstra(GRAPH, source)


def test_non_square_matrix():
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 0)


def test_format_distances():
    text = format_distances([0, math.inf])
    assert text.splitlines() == ["Vertex\tDistance from Source", "0\t0", "1\tINF"]


def test_main(monkeypatch, capsys):
    rows = "\n".join(" ".join(map(str, row)) for row in GRAPH)
    monkeypatch.setattr("sys.stdin", io.StringIO(f"5\n{rows}\n0\n"))
    assert main([]) == 0
    assert format_distances(dijkstra(GRAPH, 0)) in capsys.readouterr().out


def test_main_missing_source(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n0\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err