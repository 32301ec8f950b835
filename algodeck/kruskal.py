"""Minimum spanning tree by Kruskal's algorithm with union-find."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An undirected, weighted edge."""

    u: int
    v: int
    weight: int


class UnionFind:
    """Disjoint sets with union by rank and path compression."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n

    def find(self, u: int) -> int:
        """Return the representative of the set holding ``u``."""
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[u] != root:
            following = self._parent[u]
            self._parent[u] = root
            u = following
        return root

    def union(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``; return False if already joined."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return False
        if self._rank[root_u] < self._rank[root_v]:
            self._parent[root_u] = root_v
        elif self._rank[root_u] > self._rank[root_v]:
            self._parent[root_v] = root_u
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1
        return True


class Graph:
    """An undirected graph kept as a list of edges."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self.edges: list[Edge] = []

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Add an undirected edge between ``u`` and ``v``."""
        for vertex in (u, v):
            if not 0 <= vertex < self.num_vertices:
                raise ValueError(f"vertex {vertex} out of range")
        self.edges.append(Edge(u, v, weight))

    def kruskal_mst(self) -> list[Edge]:
        """Return the edges of a minimum spanning forest, lightest first."""
        sets = UnionFind(self.num_vertices)
        return [
            edge
            for edge in sorted(self.edges, key=lambda edge: edge.weight)
            if sets.union(edge.u, edge.v)
        ]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the minimum spanning tree of a small example graph."""
    parser = argparse.ArgumentParser(
        prog="kruskal", description="Print the minimum spanning tree of an example graph."
    )
    parser.parse_args(argv)
    graph = Graph(5)
    for u, v, weight in [
        (0, 1, 2), (0, 3, 6), (1, 2, 3), (1, 3, 8), (1, 4, 5), (2, 4, 7), (3, 4, 9),
    ]:
        graph.add_edge(u, v, weight)
    print("Edge \tWeight")
    for edge in graph.kruskal_mst():
        print(f"{edge.u} - {edge.v}\t{edge.weight}")
    return 0


if __name__ == "__main__":
    sys.exit(main())