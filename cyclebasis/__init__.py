from .errors import CycleBasisError, GraphNotSetError, InvalidCycleError, InvalidGraphError
from .graph import EdgeListGraph, GraphView, IGraphGraph, NetworkXGraph, as_graph
from .paton import PatonCycleBase, paton_cycle_basis
from .utils import CycleUtils

__all__ = [
    "CycleBasisError",
    "CycleUtils",
    "EdgeListGraph",
    "GraphNotSetError",
    "GraphView",
    "IGraphGraph",
    "InvalidCycleError",
    "InvalidGraphError",
    "NetworkXGraph",
    "PatonCycleBase",
    "as_graph",
    "paton_cycle_basis",
]

__version__ = "0.1.0"
