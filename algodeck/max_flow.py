"""Maximum flow by Ford-Fulkerson with breadth-first augmenting paths."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator, Sequence

_EXAMPLE = [
    [0, 16, 13, 0, 0, 0],
    [0, 0, 10, 12, 0, 0],
    [0, 4, 0, 0, 14, 0],
    [0, 0, 9, 0, 0, 20],
    [0, 0, 0, 7, 0, 4],
    [0, 0, 0, 0, 0, 0],
]


def _augmenting_path(
    residual: list[list[int]], source: int, sink: int
) -> dict[int, int] | None:
    parent = {source: source}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, capacity in enumerate(residual[u]):
            if v not in parent and capacity > 0:
                parent[v] = u
                queue.append(v)
    return parent if sink in parent else None


def _path_edges(parent: dict[int, int], source: int, sink: int) -> Iterator[tuple[int, int]]:
    v = sink
    while v != source:
        u = parent[v]
        yield u, v
        v = u


def ford_fulkerson(capacity: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Return the maximum flow from ``source`` to ``sink`` of a capacity matrix."""
    residual = [list(row) for row in capacity]
    size = len(residual)
    if any(len(row) != size for row in residual):
        raise ValueError("capacity matrix must be square")
    for vertex in (source, sink):
        if not 0 <= vertex < size:
            raise ValueError(f"vertex {vertex} out of range")
    if source == sink:
        raise ValueError("source and sink must differ")

    flow = 0
    while (parent := _augmenting_path(residual, source, sink)) is not None:
        path = list(_path_edges(parent, source, sink))
        bottleneck = min(residual[u][v] for u, v in path)
        for u, v in path:
            residual[u][v] -= bottleneck
            residual[v][u] += bottleneck
        flow += bottleneck
    return flow


def main(argv: Sequence[str] | None = None) -> int:
    """Print the maximum flow of a small example network."""
    parser = argparse.ArgumentParser(
        prog="max-flow", description="Print the maximum flow of an example network."
    )
    parser.parse_args(argv)
    print(f"The maximum possible flow is {ford_fulkerson(_EXAMPLE, 0, 5)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())