"""Single-source shortest paths by Bellman-Ford, with negative cycle detection."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass

INF = math.inf


class NegativeCycleError(ValueError):
    """Raised when a graph holds a negative weight cycle reachable from the source."""


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge."""

    src: int
    dest: int
    weight: int


class Graph:
    """A directed graph kept as a list of edges."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self.edges: list[Edge] = []

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise ValueError(f"vertex {vertex} out of range")

    def add_edge(self, src: int, dest: int, weight: int) -> None:
        """Add a directed edge from ``src`` to ``dest``."""
        self._check(src)
        self._check(dest)
        self.edges.append(Edge(src, dest, weight))

    def bellman_ford(self, source: int) -> list[float]:
        """Return the distance from ``source`` to each vertex, ``INF`` if unreachable."""
        self._check(source)
        dist: list[float] = [INF] * self.num_vertices
        dist[source] = 0
        for _ in range(self.num_vertices - 1):
            for edge in self.edges:
                if dist[edge.src] != INF and dist[edge.src] + edge.weight < dist[edge.dest]:
                    dist[edge.dest] = dist[edge.src] + edge.weight
        if any(
            dist[edge.src] != INF and dist[edge.src] + edge.weight < dist[edge.dest]
            for edge in self.edges
        ):
            raise NegativeCycleError("Graph contains negative weight cycle")
        return dist


def format_distances(dist: Sequence[float]) -> str:
    """Render distances as a table of vertex and distance."""
    lines = ["Vertex \t Distance from Source"]
    lines.extend(
        f"{vertex} \t {'INFINITY' if d == INF else d}" for vertex, d in enumerate(dist)
    )
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print shortest distances of a small example graph from vertex 0."""
    parser = argparse.ArgumentParser(
        prog="bellman-ford",
        description="Print single-source shortest paths of an example graph.",
    )
    parser.parse_args(argv)
    graph = Graph(5)
    for src, dest, weight in [
        (0, 1, -1), (0, 2, 4), (1, 2, 3), (1, 3, 2),
        (1, 4, 2), (3, 2, 5), (3, 1, 1), (4, 3, -3),
    ]:
        graph.add_edge(src, dest, weight)
    try:
        dist = graph.bellman_ford(0)
    except NegativeCycleError as error:
        print(error)
        return 0
    print(format_distances(dist), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())