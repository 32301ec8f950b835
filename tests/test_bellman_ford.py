import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodeck import dijkstra
from algodeck.bellman_ford import (
    INF,
    Edge,
    Graph,
    NegativeCycleError,
    format_distances,
    main,
)

EXAMPLE_EDGES = [
    (0, 1, -1), (0, 2, 4), (1, 2, 3), (1, 3, 2),
    (1, 4, 2), (3, 2, 5), (3, 1, 1), (4, 3, -3),
]
EXAMPLE_DIST = [0, -1, 2, -2, 1]


def _graph(num_vertices, edges):
    graph = Graph(num_vertices)
    for edge in edges:
        graph.add_edge(*edge)
    return graph


@st.composite
def undirected_graphs(draw):
    size = draw(st.integers(1, 6))
    vertex = st.integers(0, size - 1)
    edges = draw(st.lists(st.tuples(vertex, vertex, st.integers(0, 20)), max_size=12))
    return size, edges


def test_example():
    assert _graph(5, EXAMPLE_EDGES).bellman_ford(0) == EXAMPLE_DIST


def test_edges_are_recorded():
    graph = _graph(3, [(0, 1, 4)])
    assert graph.edges == [Edge(0, 1, 4)]


@given(undirected_graphs(), st.data())
def test_agrees_with_dijkstra(spec, data):
    size, edges = spec
    source = data.draw(st.integers(0, size - 1))
    directed = Graph(size)
    undirected = dijkstra.Graph(size)
    for u, v, w in edges:
        directed.add_edge(u, v, w)
        directed.add_edge(v, u, w)
        undirected.add_edge(u, v, w)
    assert directed.bellman_ford(source) == undirected.dijkstra(source)


@given(undirected_graphs())
def test_distances_respect_edges(spec):
    size, edges = spec
    dist = _graph(size, edges).bellman_ford(0)
    for u, v, w in edges:
        assert dist[v] <= dist[u] + w


def test_unreachable_is_infinite():
    dist = _graph(3, [(0, 1, 2)]).bellman_ford(0)
    assert dist[2] == INF


def test_negative_cycle():
    graph = _graph(3, [(0, 1, 1), (1, 2, -2), (2, 1, 1)])
    with pytest.raises(NegativeCycleError):
        graph.bellman_ford(0)


def test_unreachable_negative_cycle_is_ignored():
    graph = _graph(3, [(1, 2, -2), (2, 1, 1)])
    assert graph.bellman_ford(0)[1:] == [INF, INF]


def test_vertex_out_of_range():
    with pytest.raises(ValueError):
        Graph(2).add_edge(0, 2, 1)
    with pytest.raises(ValueError):
        Graph(2).bellman_ford(5)


def test_format_distances():
    assert format_distances([0, INF]) == (
        "Vertex \t Distance from Source\n0 \t 0\n1 \t INFINITY\n"
    )


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == format_distances(EXAMPLE_DIST)