import io
import itertools
import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodeck.nqueens import format_board, is_safe, main, solve_n_queens


def _brute_force(n):
    return sorted(
        perm
        for perm in itertools.permutations(range(n))
        if all(
            abs(perm[a] - perm[b]) != b - a
            for a, b in itertools.combinations(range(n), 2)
        )
    )


@pytest.mark.parametrize("n", range(8))
def test_matches_brute_force(n):
    assert sorted(solve_n_queens(n)) == _brute_force(n)


def test_eight_queens_count():
    assert sum(1 for _ in solve_n_queens(8)) == 92


def test_solutions_come_in_lexicographic_order():
    solutions = list(solve_n_queens(6))
    assert solutions == sorted(solutions)


def test_every_queen_of_a_solution_is_safe():
    for queens in solve_n_queens(6):
        assert all(is_safe(queens, row, col) for row, col in enumerate(queens))


@given(st.lists(st.integers(0, 7), min_size=1, max_size=7), st.data())
def test_shared_column_is_unsafe(queens, data):
    col = data.draw(st.sampled_from(queens))
    assert not is_safe(queens, len(queens), col)


@given(st.integers(0, 6), st.integers(1, 6), st.integers(0, 6))
def test_diagonal_is_unsafe(col, distance, row_offset):
    queens = [0] * row_offset + [col]
    row = row_offset + distance
    assert not is_safe(queens, row, col + distance)
    assert not is_safe(queens, row, col - distance)


def test_format_board():
    assert format_board((1, 0)) == ". Q \nQ . "


def test_format_board_shape():
    for queens in solve_n_queens(5):
        lines = format_board(queens).split("\n")
        assert len(lines) == 5
        assert [line.index("Q") // 2 for line in lines] == list(queens)


def test_negative_rejected():
    with pytest.raises(ValueError):
        list(solve_n_queens(-1))


def test_main_prints_all_boards(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    for queens in solve_n_queens(4):
        assert format_board(queens) in out
    assert out.endswith("One or more solutions found above.\n")


def test_main_without_solution(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("No solution exists for 3 queens.\n")


def test_main_empty_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([]) == 1
    assert "unexpected end of input" in capsys.readouterr().err