from __future__ import annotations

from collections import deque
from typing import Any, Dict, FrozenSet, Hashable, List, Sequence, Set, Tuple

from .errors import InvalidCycleError
from .graph import as_graph


# =====================================================
# Utils
# =====================================================
class CycleUtils:
    @staticmethod
    def cycle_edges(cycle: Sequence[Hashable]) -> List[Tuple[Hashable, Hashable]]:
        """
        Consecutive vertex pairs of a cycle, closing pair included.
        [a, b, c] -> [(a, b), (b, c), (c, a)]; [a] -> [(a, a)]
        """
        n = len(cycle)
        return [(cycle[i], cycle[(i + 1) % n]) for i in range(n)]

    @staticmethod
    def connected_components_count(graph: Any) -> int:
        """Count connected components, isolated vertices included."""
        view = as_graph(graph)
        visited: Set[Hashable] = set()
        comp = 0
        for root in view.vertices():
            if root in visited:
                continue
            comp += 1
            q = deque([root])
            visited.add(root)
            while q:
                x = q.popleft()
                for e in view.edges_of(x):
                    y = view.other_endpoint(e, x)
                    if y not in visited:
                        visited.add(y)
                        q.append(y)
        return comp

    @staticmethod
    def cyclomatic_number(graph: Any) -> int:
        """|E| - |V| + cc, counting self-loops and parallel edges."""
        view = as_graph(graph)
        n_vertices = 0
        # every non-loop edge is listed by both endpoints, a loop by one
        incidences = 0
        loops = 0
        for v in view.vertices():
            n_vertices += 1
            for e in view.edges_of(v):
                incidences += 1
                if view.other_endpoint(e, v) == v:
                    loops += 1
        n_edges = (incidences - loops) // 2 + loops
        return n_edges - n_vertices + CycleUtils.connected_components_count(view)

    @staticmethod
    def assert_simple_cycle(graph: Any, cycle: Sequence[Hashable], idx: int = -1) -> None:
        """
        Strict simple cycle check: distinct vertices, consecutive vertices adjacent.
        A two-vertex cycle needs two distinct edges between its vertices.
        """
        view = as_graph(graph)
        if not cycle:
            raise InvalidCycleError(f"Empty cycle (index={idx})")
        if len(set(cycle)) != len(cycle):
            raise InvalidCycleError(f"Non-simple cycle (index={idx})")

        if len(cycle) == 2:
            u, v = cycle
            parallel = sum(1 for e in view.edges_of(u) if view.other_endpoint(e, u) == v)
            if parallel < 2:
                raise InvalidCycleError(f"Two-vertex cycle over {parallel} edge(s) {u!r}-{v!r} (index={idx})")
            return

        neighbors: Dict[Hashable, Set[Hashable]] = {}
        for u, v in CycleUtils.cycle_edges(cycle):
            if u not in neighbors:
                neighbors[u] = {view.other_endpoint(e, u) for e in view.edges_of(u)}
            if v not in neighbors[u]:
                raise InvalidCycleError(f"Missing edge {u!r}-{v!r} (index={idx})")

    @staticmethod
    def cycle_to_mask(cycle: Sequence[Hashable], edge_index: Dict[FrozenSet[Hashable], int]) -> int:
        m = 0
        for u, v in CycleUtils.cycle_edges(cycle):
            key = frozenset((u, v))
            eid = edge_index.get(key)
            if eid is None:
                eid = len(edge_index)
                edge_index[key] = eid
            m ^= (1 << eid)
        return m

    @staticmethod
    def is_independent(cycles: Sequence[Sequence[Hashable]]) -> bool:
        """
        GF(2) independence of cycles taken as vertex-pair edge sets.
        Only meaningful for simple graphs (parallel edges share a pair).
        """
        edge_index: Dict[FrozenSet[Hashable], int] = {}
        basis: Dict[int, int] = {}

        def reduce_mask(m: int) -> int:
            while m:
                p = m & -m
                b = basis.get(p)
                if b is None:
                    break
                m ^= b
            return m

        for cycle in cycles:
            r = reduce_mask(CycleUtils.cycle_to_mask(cycle, edge_index))
            if r == 0:
                return False
            basis[r & -r] = r
        return True
