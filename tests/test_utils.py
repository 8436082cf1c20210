from __future__ import annotations

import networkx as nx
import pytest

from cyclebasis import CycleUtils, EdgeListGraph, InvalidCycleError


def test_cycle_edges():
    assert CycleUtils.cycle_edges(["a", "b", "c"]) == [("a", "b"), ("b", "c"), ("c", "a")]
    assert CycleUtils.cycle_edges(["a"]) == [("a", "a")]


def test_components_and_cyclomatic_number():
    g = EdgeListGraph.from_edges([(0, 1), (1, 2), (2, 0), (3, 3), (4, 5), (4, 5)], vertices=[9])
    assert CycleUtils.connected_components_count(g) == 4
    # 6 edges - 7 vertices + 4 components
    assert CycleUtils.cyclomatic_number(g) == 3
    assert CycleUtils.cyclomatic_number(nx.empty_graph(0)) == 0


def test_assert_simple_cycle():
    G = nx.cycle_graph(4)
    CycleUtils.assert_simple_cycle(G, [0, 1, 2, 3])
    with pytest.raises(InvalidCycleError):
        CycleUtils.assert_simple_cycle(G, [0, 1, 2])
    with pytest.raises(InvalidCycleError):
        CycleUtils.assert_simple_cycle(G, [0, 1, 0, 3])
    with pytest.raises(InvalidCycleError):
        CycleUtils.assert_simple_cycle(G, [])


def test_two_vertex_cycle_needs_parallel_edges():
    with pytest.raises(InvalidCycleError):
        CycleUtils.assert_simple_cycle(nx.path_graph(2), [0, 1])
    CycleUtils.assert_simple_cycle(nx.MultiGraph([(0, 1), (0, 1)]), [0, 1])
    CycleUtils.assert_simple_cycle(EdgeListGraph.from_edges([("a", "b"), ("b", "a")]), ["b", "a"])


def test_is_independent():
    assert CycleUtils.is_independent([[0, 1, 2], [0, 2, 3]])
    # outer square is the sum of the two triangles
    assert not CycleUtils.is_independent([[0, 1, 2], [0, 2, 3], [0, 1, 2, 3]])
    assert not CycleUtils.is_independent([[0, 1, 2], [2, 1, 0]])
    assert CycleUtils.is_independent([])
