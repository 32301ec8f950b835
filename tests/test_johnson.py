import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodeck.bellman_ford import NegativeCycleError
from algodeck.floyd_warshall import INF, floyd_warshall, format_matrix
from algodeck.johnson import johnson, main

EXAMPLE_EDGES = [
    (0, 1, -1), (0, 2, 4),
    (1, 2, 3), (1, 3, 2), (1, 4, 2),
    (3, 2, 5), (3, 1, 1),
    (4, 3, -3),
]


def _matrix(size, edges):
    matrix = [[0 if i == j else INF for j in range(size)] for i in range(size)]
    for u, v, w in edges:
        matrix[u][v] = min(matrix[u][v], w)
    return matrix


@st.composite
def directed_graphs(draw, low):
    size = draw(st.integers(1, 5))
    vertex = st.integers(0, size - 1)
    edges = draw(st.lists(st.tuples(vertex, vertex, st.integers(low, 20)), max_size=10))
    return size, edges


def test_example_first_row():
    assert johnson(5, EXAMPLE_EDGES)[0] == [0, -1, 2, -2, 1]


def test_example_matches_floyd_warshall():
    assert johnson(5, EXAMPLE_EDGES) == floyd_warshall(_matrix(5, EXAMPLE_EDGES))


@given(directed_graphs(0))
def test_matches_floyd_warshall_without_negative_edges(spec):
    size, edges = spec
    assert johnson(size, edges) == floyd_warshall(_matrix(size, edges))


@given(directed_graphs(-5))
def test_matches_floyd_warshall_or_detects_cycle(spec):
    size, edges = spec
    reference = floyd_warshall(_matrix(size, edges))
    if any(reference[i][i] < 0 for i in range(size)):
        with pytest.raises(NegativeCycleError):
            johnson(size, edges)
    else:
        assert johnson(size, edges) == reference


def test_negative_cycle_raises():
    with pytest.raises(NegativeCycleError):
        johnson(2, [(0, 1, 1), (1, 0, -2)])


def test_unreachable_is_infinite():
    assert johnson(2, [(0, 1, 3)])[1][0] == INF


def test_vertex_out_of_range():
    with pytest.raises(ValueError):
        johnson(2, [(0, 2, 1)])


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == (
        "All-Pairs Shortest Paths:\n" + format_matrix(johnson(5, EXAMPLE_EDGES))
    )