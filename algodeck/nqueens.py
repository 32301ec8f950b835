"""N-queens solutions found by backtracking."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence


def is_safe(queens: Sequence[int], row: int, col: int) -> bool:
    """Tell whether a queen at ``(row, col)`` is attacked by those in earlier rows.

    ``queens[r]`` is the column of the queen placed in row ``r``.
    """
    return all(
        placed != col and abs(placed - col) != row - placed_row
        for placed_row, placed in enumerate(queens[:row])
    )


def solve_n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` non-attacking queens, as column per row."""
    if n < 0:
        raise ValueError("number of queens must not be negative")

    def place(queens: list[int]) -> Iterator[tuple[int, ...]]:
        row = len(queens)
        if row == n:
            yield tuple(queens)
            return
        for col in range(n):
            if is_safe(queens, row, col):
                queens.append(col)
                yield from place(queens)
                queens.pop()

    yield from place([])


def format_board(queens: Sequence[int]) -> str:
    """Render a placement as rows of ``Q`` and ``.`` cells."""
    size = len(queens)
    return "\n".join(
        "".join("Q " if cell == col else ". " for cell in range(size)) for col in queens
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Read N from standard input and print every solution."""
    parser = argparse.ArgumentParser(
        prog="nqueens", description="Print every solution of the N-queens puzzle."
    )
    parser.parse_args(argv)
    print("Enter the number of queens (N): ", end="")
    tokens = sys.stdin.read().split()
    try:
        if not tokens:
            raise EOFError("unexpected end of input")
        n = int(tokens[0])
        solutions = solve_n_queens(n)
        found = False
        for queens in solutions:
            found = True
            board = format_board(queens)
            print(board + "\n" if board else "")
    except (EOFError, ValueError) as error:
        print(f"\nerror: {error}", file=sys.stderr)
        return 1
    if found:
        print("One or more solutions found above.")
    else:
        print(f"No solution exists for {n} queens.")
    return 0


if __name__ == "__main__":
    sys.exit(main())