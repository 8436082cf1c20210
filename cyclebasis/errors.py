from __future__ import annotations


class CycleBasisError(Exception):
    """Base class for all cycle basis errors."""


class InvalidGraphError(CycleBasisError, ValueError):
    """The supplied graph is missing, directed, or not a graph at all."""


class GraphNotSetError(CycleBasisError, RuntimeError):
    """A cycle base was requested before a graph was configured."""


class InvalidCycleError(CycleBasisError, RuntimeError):
    """A cycle failed validation against its graph."""
