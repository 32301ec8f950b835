import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodeck.max_flow import ford_fulkerson, main

EXAMPLE = [
    [0, 16, 13, 0, 0, 0],
    [0, 0, 10, 12, 0, 0],
    [0, 4, 0, 0, 14, 0],
    [0, 0, 9, 0, 0, 20],
    [0, 0, 0, 7, 0, 4],
    [0, 0, 0, 0, 0, 0],
]


@st.composite
def networks(draw):
    size = draw(st.integers(2, 5))
    return [
        [0 if i == j else draw(st.integers(0, 10)) for j in range(size)]
        for i in range(size)
    ]


def _min_cut(capacity, source, sink):
    size = len(capacity)
    others = [v for v in range(size) if v not in (source, sink)]
    cuts = []
    for count in range(len(others) + 1):
        for chosen in itertools.combinations(others, count):
            side = {source, *chosen}
            cuts.append(
                sum(capacity[u][v] for u in side for v in range(size) if v not in side)
            )
    return min(cuts)


def test_example():
    assert ford_fulkerson(EXAMPLE, 0, 5) == 23


@given(networks())
def test_equals_minimum_cut(capacity):
    sink = len(capacity) - 1
    assert ford_fulkerson(capacity, 0, sink) == _min_cut(capacity, 0, sink)


@given(networks())
def test_bounded_by_source_and_sink_capacity(capacity):
    sink = len(capacity) - 1
    flow = ford_fulkerson(capacity, 0, sink)
    assert flow <= sum(capacity[0])
    assert flow <= sum(row[sink] for row in capacity)


def test_disconnected_network_has_no_flow():
    capacity = [[0, 5, 0], [0, 0, 0], [0, 0, 0]]
    assert ford_fulkerson(capacity, 0, 2) == 0


def test_input_unchanged():
    capacity = [row[:] for row in EXAMPLE]
    ford_fulkerson(capacity, 0, 5)
    assert capacity == EXAMPLE


def test_source_equal_to_sink():
    with pytest.raises(ValueError):
        ford_fulkerson(EXAMPLE, 2, 2)


def test_vertex_out_of_range():
    with pytest.raises(ValueError):
        ford_fulkerson(EXAMPLE, 0, 6)


def test_non_square_rejected():
    with pytest.raises(ValueError):
        ford_fulkerson([[0, 1], [0]], 0, 1)


def test_main_output(capsys):
    assert main([]) == 0
    expected = ford_fulkerson(EXAMPLE, 0, 5)
    assert capsys.readouterr().out == f"The maximum possible flow is {expected}\n"