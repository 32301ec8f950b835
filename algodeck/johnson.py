"""All-pairs shortest paths by Johnson's reweighting algorithm."""

from __future__ import annotations

import argparse
import heapq
import math
import sys
from collections.abc import Iterable, Sequence

from algodeck.bellman_ford import Graph
from algodeck.floyd_warshall import format_matrix

INF = math.inf

_EXAMPLE_EDGES = [
    (0, 1, -1), (0, 2, 4),
    (1, 2, 3), (1, 3, 2), (1, 4, 2),
    (3, 2, 5), (3, 1, 1),
    (4, 3, -3),
]


def _dijkstra(adjacency: list[list[tuple[int, int]]], source: int) -> list[float]:
    dist: list[float] = [INF] * len(adjacency)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, weight in adjacency[u]:
            if dist[v] > d + weight:
                dist[v] = d + weight
                heapq.heappush(heap, (dist[v], v))
    return dist


def johnson(num_vertices: int, edges: Iterable[tuple[int, int, int]]) -> list[list[float]]:
    """Return the all-pairs distance matrix of a directed graph.

    ``edges`` holds ``(u, v, weight)`` triples; weights may be negative.
    Raises ``NegativeCycleError`` when the graph has a negative cycle.
    """
    if num_vertices < 0:
        raise ValueError("number of vertices must not be negative")
    edges = [tuple(edge) for edge in edges]
    for u, v, _ in edges:
        for vertex in (u, v):
            if not 0 <= vertex < num_vertices:
                raise ValueError(f"vertex {vertex} out of range")

    augmented = Graph(num_vertices + 1)
    for u, v, weight in edges:
        augmented.add_edge(u, v, weight)
    for v in range(num_vertices):
        augmented.add_edge(num_vertices, v, 0)
    potential = augmented.bellman_ford(num_vertices)

    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(num_vertices)]
    for u, v, weight in edges:
        adjacency[u].append((v, weight + potential[u] - potential[v]))

    return [
        [
            INF if d == INF else d - potential[u] + potential[v]
            for v, d in enumerate(_dijkstra(adjacency, u))
        ]
        for u in range(num_vertices)
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the all-pairs distances of a small example graph."""
    parser = argparse.ArgumentParser(
        prog="johnson", description="Print all-pairs shortest paths of an example graph."
    )
    parser.parse_args(argv)
    print("All-Pairs Shortest Paths:")
    print(format_matrix(johnson(5, _EXAMPLE_EDGES)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())