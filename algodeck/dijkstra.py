"""Single-source shortest paths by Dijkstra's algorithm on an undirected graph."""

from __future__ import annotations

import argparse
import heapq
import math
import sys
from collections.abc import Sequence

INF = math.inf


class Graph:
    """An undirected graph with non-negative edge weights."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(num_vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise ValueError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Add an undirected edge between ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        self._adjacency[u].append((v, weight))
        self._adjacency[v].append((u, weight))

    def dijkstra(self, source: int) -> list[float]:
        """Return the distance from ``source`` to each vertex, ``INF`` if unreachable."""
        self._check(source)
        dist: list[float] = [INF] * self.num_vertices
        dist[source] = 0
        heap = [(0, source)]
        while heap:
            d, u = heapq.heappop(heap)
            if d > dist[u]:
                continue
            for v, weight in self._adjacency[u]:
                if dist[v] > d + weight:
                    dist[v] = d + weight
                    heapq.heappush(heap, (dist[v], v))
        return dist


def main(argv: Sequence[str] | None = None) -> int:
    """Print shortest distances of a small example graph from vertex 0."""
    parser = argparse.ArgumentParser(
        prog="dijkstra", description="Print single-source shortest paths of an example graph."
    )
    parser.parse_args(argv)
    graph = Graph(9)
    for u, v, weight in [
        (0, 1, 4), (0, 7, 8), (1, 2, 8), (1, 7, 11), (2, 3, 7), (2, 8, 2), (2, 5, 4),
        (3, 4, 9), (3, 5, 14), (4, 5, 10), (5, 6, 2), (6, 7, 1), (6, 8, 6), (7, 8, 7),
    ]:
        graph.add_edge(u, v, weight)
    print("Vertex \t Distance from Source")
    for vertex, d in enumerate(graph.dijkstra(0)):
        print(f"{vertex} \t {'INFINITY' if d == INF else d}")
    return 0


if __name__ == "__main__":
    sys.exit(main())