"""All-pairs shortest paths by the Floyd-Warshall algorithm."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence

INF = math.inf

_EXAMPLE = [
    [0, 5, INF, 10],
    [INF, 0, 3, INF],
    [INF, INF, 0, 1],
    [INF, INF, INF, 0],
]


def floyd_warshall(graph: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the matrix of shortest distances for an adjacency matrix.

    Missing edges are ``INF``; the input is left unchanged.
    """
    dist = [list(row) for row in graph]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("adjacency matrix must be square")

    for k in range(size):
        row_k = dist[k]
        for row_i in dist:
            via = row_i[k]
            if via == INF:
                continue
            for j, onward in enumerate(row_k):
                if onward < INF and via + onward < row_i[j]:
                    row_i[j] = via + onward
    return dist


def format_matrix(dist: Sequence[Sequence[float]]) -> str:
    """Render a distance matrix as tab-separated rows, ``INF`` for no path."""
    return "".join(
        "".join(("INF" if value == INF else str(value)) + "\t" for value in row) + "\n"
        for row in dist
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print the all-pairs distances of a small example graph."""
    parser = argparse.ArgumentParser(
        prog="floyd-warshall",
        description="Print all-pairs shortest paths of an example graph.",
    )
    parser.parse_args(argv)
    print("Shortest distances between every pair of vertices:")
    print(format_matrix(floyd_warshall(_EXAMPLE)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())