"""0-1 knapsack solved by dynamic programming."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Iterable, Iterator, Sequence


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the largest total value of items whose weights fit in ``capacity``.

    As in the classic table formulation, a knapsack of capacity zero holds
    nothing, even items of weight zero.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, max(weight, 1) - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def _read_ints(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for token in line.split():
            yield int(token)


def _take(numbers: Iterator[int], count: int) -> list[int]:
    taken = list(itertools.islice(numbers, count))
    if len(taken) < count:
        raise EOFError("unexpected end of input")
    return taken


def main(argv: Sequence[str] | None = None) -> int:
    """Read a knapsack problem from standard input and print the best value."""
    parser = argparse.ArgumentParser(
        prog="knapsack",
        description="Solve a 0-1 knapsack problem read from standard input.",
    )
    parser.parse_args(argv)
    numbers = _read_ints(sys.stdin)
    try:
        print("Enter number of items: ", end="")
        (count,) = _take(numbers, 1)
        if count < 0:
            raise ValueError("number of items must not be negative")
        print("Enter values of the items:")
        values = _take(numbers, count)
        print("Enter weights of the items:")
        weights = _take(numbers, count)
        print("Enter capacity of knapsack: ", end="")
        (capacity,) = _take(numbers, 1)
        best = knapsack(capacity, weights, values)
    except (EOFError, ValueError) as error:
        print(f"\nerror: {error}", file=sys.stderr)
        return 1
    print(f"Maximum value in knapsack = {best}")
    return 0


if __name__ == "__main__":
    sys.exit(main())