"""
Fundamental cycle basis of an undirected graph (Paton's algorithm).

K. Paton, An algorithm for finding a fundamental set of cycles of a graph,
Comm. ACM 12 (1969), pp. 514-518.
"""
from __future__ import annotations

from typing import Any, Dict, Hashable, List, Optional, Set

from .errors import GraphNotSetError, InvalidGraphError
from .graph import GraphView, as_graph


def _require_undirected(graph: Any) -> GraphView:
    view = as_graph(graph)
    if view.is_directed():
        raise InvalidGraphError("Graph must be undirected")
    return view


def paton_cycle_basis(graph: Any) -> List[List[Hashable]]:
    """
    Compute a fundamental cycle basis of an undirected graph.

    Parameters
    ----------
    graph : GraphView, networkx.Graph or igraph.Graph
        The input graph (undirected, self-loops and parallel edges allowed).

    Returns
    -------
    list[list]
        One cycle per non-tree edge. Each cycle is a list of vertices whose
        first element is the vertex the closing edge leads back to. A
        self-loop gives [v]; a parallel edge gives [child, parent].

    Examples
    --------
    >>> import networkx as nx
    >>> len(paton_cycle_basis(nx.grid_2d_graph(4, 4)))
    9
    """
    view = _require_undirected(graph)

    used: Dict[Hashable, Set[Hashable]] = {}
    parent: Dict[Hashable, Hashable] = {}
    stack: List[Hashable] = []
    cycles: List[List[Hashable]] = []

    for root in view.vertices():
        # one pass per connected component
        if root in parent:
            continue

        used.clear()

        parent[root] = root
        used[root] = set()
        stack.append(root)

        # BFS with a LIFO instead of a FIFO: every vertex still on the stack
        # hangs off the current ancestor chain, so back edges close on it.
        while stack:
            current = stack.pop()
            current_used = used[current]
            for e in view.edges_of(current):
                neighbor = view.other_endpoint(e, current)
                if neighbor not in used:
                    # tree edge
                    parent[neighbor] = current
                    used[neighbor] = {current}
                    stack.append(neighbor)
                elif neighbor == current:
                    cycles.append([current])
                elif neighbor in current_used:
                    continue
                elif parent[neighbor] == current:
                    # second edge to a child discovered from here
                    cycles.append([neighbor, current])
                else:
                    neighbor_used = used[neighbor]
                    cycle = [neighbor, current]
                    p = parent[current]
                    while p not in neighbor_used:
                        cycle.append(p)
                        p = parent[p]
                    cycle.append(p)
                    cycles.append(cycle)
                    neighbor_used.add(current)

    return cycles


class PatonCycleBase:
    """Cycle base finder bound to an (optional) undirected graph."""

    def __init__(self, graph: Any = None):
        self._graph: Optional[GraphView] = None
        if graph is not None:
            self._graph = _require_undirected(graph)

    def get_graph(self) -> Optional[GraphView]:
        return self._graph

    def set_graph(self, graph: Any) -> None:
        self._graph = _require_undirected(graph)

    graph = property(get_graph, set_graph)

    def find_cycle_base(self, graph: Any = None) -> List[List[Hashable]]:
        """
        Return a fundamental cycle basis.

        An explicit graph is used for this call only and leaves the bound
        graph untouched.
        """
        if graph is None:
            graph = self._graph
        if graph is None:
            raise GraphNotSetError("no graph")
        return paton_cycle_basis(graph)
