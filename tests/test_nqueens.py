import io
from itertools import combinations

import pytest

from searchlab.nqueens import NQueens, format_board, main


def _non_attacking(board):
    for (r1, c1), (r2, c2) in combinations(enumerate(board), 2):
        if c1 == c2 or abs(r1 - r2) == abs(c1 - c2):
            return False
    return True


def test_four_queens_count():
    assert NQueens(4).count() == 2


@pytest.mark.parametrize("size", [2, 3])
def test_unsolvable_sizes(size):
    assert list(NQueens(size).solutions()) == []


def test_single_square():
    assert list(NQueens(1).solutions()) == [(0,)]


@pytest.mark.parametrize("size", [4, 5, 6])
def test_solutions_are_valid_and_distinct(size):
    boards = list(NQueens(size).solutions())
    assert len(boards) == len(set(boards))
    for board in boards:
        assert len(board) == size
        assert _non_attacking(board)


def test_solutions_in_search_order():
    boards = list(NQueens(5).solutions())
    assert boards == sorted(boards)


def test_count_matches_solutions():
    solver = NQueens(6)
    assert solver.count() == len(list(solver.solutions()))


def test_is_safe_on_empty_board():
    assert NQueens(4).is_safe(2, 3) is True


@pytest.mark.parametrize("row, col", [(-1, 0), (0, 4), (4, 0)])
def test_is_safe_off_board(row, col):
    with pytest.raises(ValueError):
        NQueens(4).is_safe(row, col)


def test_negative_size():
    with pytest.raises(ValueError):
        NQueens(-1)


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Total solutions: 2" in out
    for board in NQueens(4).solutions():
        assert format_board(board) in out


def test_main_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("four\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err