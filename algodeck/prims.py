"""Minimum spanning tree by Prim's algorithm with a binary heap."""

from __future__ import annotations

import argparse
import heapq
import math
import sys
from collections.abc import Sequence

INF = math.inf


class Graph:
    """An undirected graph kept as adjacency lists."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(num_vertices)]

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Add an undirected edge between ``u`` and ``v``."""
        for vertex in (u, v):
            if not 0 <= vertex < self.num_vertices:
                raise ValueError(f"vertex {vertex} out of range")
        self._adjacency[u].append((v, weight))
        self._adjacency[v].append((u, weight))

    def prim_mst(self) -> list[tuple[int | None, int, float]]:
        """Return ``(parent, vertex, weight)`` for each vertex other than 0.

        The tree grows from vertex 0; a vertex it never reaches has parent
        ``None`` and weight ``INF``.
        """
        if self.num_vertices == 0:
            return []
        key: list[float] = [INF] * self.num_vertices
        parent: list[int | None] = [None] * self.num_vertices
        in_tree = [False] * self.num_vertices
        key[0] = 0
        heap = [(0, 0)]
        while heap:
            _, u = heapq.heappop(heap)
            in_tree[u] = True
            for v, weight in self._adjacency[u]:
                if not in_tree[v] and weight < key[v]:
                    key[v] = weight
                    parent[v] = u
                    heapq.heappush(heap, (weight, v))
        return [(parent[v], v, key[v]) for v in range(1, self.num_vertices)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the minimum spanning tree of a small example graph."""
    parser = argparse.ArgumentParser(
        prog="prims", description="Print the minimum spanning tree of an example graph."
    )
    parser.parse_args(argv)
    graph = Graph(5)
    for u, v, weight in [
        (0, 1, 2), (0, 3, 6), (1, 2, 3), (1, 3, 8), (1, 4, 5), (2, 4, 7), (3, 4, 9),
    ]:
        graph.add_edge(u, v, weight)
    print("Edge \tWeight")
    for parent, vertex, weight in graph.prim_mst():
        shown_parent = -1 if parent is None else parent
        shown_weight = "INF" if weight == INF else weight
        print(f"{shown_parent} - {vertex}\t{shown_weight}")
    return 0


if __name__ == "__main__":
    sys.exit(main())