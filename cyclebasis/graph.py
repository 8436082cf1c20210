from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

import networkx as nx

from .errors import InvalidGraphError


# =====================================================
# Graph contract
# =====================================================
class GraphView(ABC):
    """
    Minimal read-only view of an undirected (multi)graph used by the cycle finder.

    - vertices(): all vertices, in a stable order
    - edges_of(v): every edge incident on v (self-loops once, parallel edges each)
    - other_endpoint(e, v): the endpoint of e that is not v (v itself for a self-loop)
    - is_directed(): directed views are refused by the finder
    """

    @abstractmethod
    def vertices(self) -> Iterable[Hashable]:
        raise NotImplementedError

    @abstractmethod
    def edges_of(self, v: Hashable) -> Iterable[Any]:
        raise NotImplementedError

    @abstractmethod
    def other_endpoint(self, edge: Any, v: Hashable) -> Hashable:
        raise NotImplementedError

    def is_directed(self) -> bool:
        return False


# =====================================================
# In-memory edge list multigraph
# =====================================================
class EdgeListGraph(GraphView):
    """
    Undirected multigraph with integer edge ids.

    Vertices keep their insertion order; edges_of() lists edge ids in the
    order the edges were added.
    """

    def __init__(self) -> None:
        self._incidence: Dict[Hashable, List[int]] = {}
        self._edges: List[Tuple[Hashable, Hashable]] = []

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Hashable, Hashable]],
        vertices: Optional[Iterable[Hashable]] = None,
    ) -> "EdgeListGraph":
        g = cls()
        if vertices is not None:
            for v in vertices:
                g.add_vertex(v)
        g.add_edges_from(edges)
        return g

    @classmethod
    def from_lines(cls, rows: Iterable[Sequence[str]]) -> "EdgeListGraph":
        """Build from tokenized rows: one token declares a vertex, two or more an edge."""
        g = cls()
        for row in rows:
            tokens = [str(x).strip() for x in row if x is not None and str(x).strip()]
            if not tokens:
                continue
            if len(tokens) == 1:
                g.add_vertex(tokens[0])
            else:
                g.add_edge(tokens[0], tokens[1])
        return g

    def add_vertex(self, v: Hashable) -> None:
        if v not in self._incidence:
            self._incidence[v] = []

    def add_edge(self, u: Hashable, v: Hashable) -> int:
        self.add_vertex(u)
        self.add_vertex(v)
        eid = len(self._edges)
        self._edges.append((u, v))
        self._incidence[u].append(eid)
        if u != v:
            self._incidence[v].append(eid)
        return eid

    def add_edges_from(self, edges: Iterable[Tuple[Hashable, Hashable]]) -> List[int]:
        return [self.add_edge(u, v) for u, v in edges]

    def edge_endpoints(self, eid: int) -> Tuple[Hashable, Hashable]:
        return self._edges[eid]

    def number_of_vertices(self) -> int:
        return len(self._incidence)

    def number_of_edges(self) -> int:
        return len(self._edges)

    def has_vertex(self, v: Hashable) -> bool:
        return v in self._incidence

    def vertices(self) -> List[Hashable]:
        return list(self._incidence)

    def edges_of(self, v: Hashable) -> List[int]:
        return self._incidence[v]

    def other_endpoint(self, edge: int, v: Hashable) -> Hashable:
        u, w = self._edges[edge]
        return w if u == v else u


# =====================================================
# Third-party graph adapters
# =====================================================
class NetworkXGraph(GraphView):
    """View over a networkx graph; multigraph edges are (u, v, key) triples."""

    def __init__(self, G: nx.Graph) -> None:
        self.G = G
        self._multi = G.is_multigraph()

    def vertices(self) -> List[Hashable]:
        return list(self.G.nodes())

    def edges_of(self, v: Hashable) -> List[Tuple]:
        if self._multi:
            return list(self.G.edges(v, keys=True))
        return list(self.G.edges(v))

    def other_endpoint(self, edge: Tuple, v: Hashable) -> Hashable:
        u, w = edge[0], edge[1]
        return w if u == v else u

    def is_directed(self) -> bool:
        return self.G.is_directed()


class IGraphGraph(GraphView):
    """View over an igraph.Graph: vertices are indices, edges are edge ids."""

    def __init__(self, g: Any) -> None:
        self.g = g

    def vertices(self) -> range:
        return range(self.g.vcount())

    def edges_of(self, v: int) -> List[int]:
        # igraph reports a loop edge once per incidence
        seen = set()
        out: List[int] = []
        for eid in self.g.incident(v, mode="all"):
            if eid in seen:
                continue
            seen.add(eid)
            out.append(eid)
        return out

    def other_endpoint(self, edge: int, v: int) -> int:
        u, w = self.g.es[edge].tuple
        return w if u == v else u

    def is_directed(self) -> bool:
        return self.g.is_directed()


def _is_igraph(obj: Any) -> bool:
    return all(hasattr(obj, name) for name in ("vcount", "incident", "es", "is_directed"))


def as_graph(obj: Any) -> GraphView:
    """Return a GraphView for obj, wrapping networkx and igraph graphs."""
    if obj is None:
        raise InvalidGraphError("Graph must not be None")
    if isinstance(obj, GraphView):
        return obj
    if isinstance(obj, nx.Graph):
        return NetworkXGraph(obj)
    if _is_igraph(obj):
        return IGraphGraph(obj)
    if all(hasattr(obj, name) for name in ("vertices", "edges_of", "other_endpoint", "is_directed")):
        return obj
    raise InvalidGraphError(f"Unsupported graph type: {type(obj).__name__}")
