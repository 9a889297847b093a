"""Weighted directed graph ADT over string vertices.

Two interchangeable representations share one public contract:

- :class:`AdjacencyDigraph` keeps per-vertex adjacency maps in a NetworkX
  ``DiGraph`` (default; cheap ``targets``/``sources`` lookups).
- :class:`EdgeListDigraph` keeps a vertex set plus a flat list of
  immutable :class:`WeightedEdge` records.

Zero-weight edges are never stored. Every mutation re-checks the
representation invariant with ``assert``, so checks disappear under ``-O``.
Pure domain code, no infrastructure dependencies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

import networkx as nx

type GraphKind = str

ADJACENCY = "adjacency"
EDGE_LIST = "edge-list"


@dataclass(frozen=True, order=True)
class WeightedEdge:
    """A single directed edge with a positive weight."""

    source: str
    target: str
    weight: int


def _require_label(vertex: object) -> str:
    if vertex is None:
        raise ValueError("Vertex label must not be None")
    if not isinstance(vertex, str):
        raise TypeError(f"Vertex label must be str, got {type(vertex).__name__}")
    return vertex


def _require_weight(weight: int) -> int:
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise TypeError(f"Edge weight must be int, got {type(weight).__name__}")
    if weight < 0:
        raise ValueError(f"Edge weight must be non-negative, got {weight}")
    return weight


class WeightedDigraph(ABC):
    """Mutable, finite, simple weighted digraph.

    At most one edge exists per ordered ``(source, target)`` pair and every
    stored edge has a positive weight. Self-loops are allowed. Query methods
    return fresh containers: mutating them never touches the graph, and
    later graph mutations never show through them.
    """

    @abstractmethod
    def add(self, vertex: str) -> bool:
        """Add *vertex*; return True iff it was not already present."""

    @abstractmethod
    def set(self, source: str, target: str, weight: int) -> int:
        """Add, replace, or (with ``weight == 0``) delete the edge source→target.

        Missing endpoints are created. Returns the weight the edge had
        before the call, or 0 if there was none.

        Raises:
            TypeError: If *weight* is not an ``int`` (``bool`` included).
            ValueError: If *weight* is negative.
        """

    @abstractmethod
    def remove(self, vertex: str) -> bool:
        """Remove *vertex* and every edge touching it; False if absent."""

    @abstractmethod
    def vertices(self) -> frozenset[str]:
        """Snapshot of the vertex labels."""

    @abstractmethod
    def sources(self, target: str) -> dict[str, int]:
        """Map each vertex with an edge into *target* to that edge's weight."""

    @abstractmethod
    def targets(self, source: str) -> dict[str, int]:
        """Map each vertex reached by an edge from *source* to that edge's weight."""

    @abstractmethod
    def edges(self) -> list[WeightedEdge]:
        """Snapshot of every edge, sorted by ``(source, target)``."""

    def __len__(self) -> int:
        return len(self.vertices())

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.vertices()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={len(self)}, edges={len(self.edges())})"


# ---------------------------------------------------------------------------
# Adjacency-map representation
# ---------------------------------------------------------------------------


class AdjacencyDigraph(WeightedDigraph):
    """Weighted digraph stored as NetworkX adjacency maps."""

    # Rep: a nx.DiGraph whose nodes are the vertices and whose edges carry
    # an int ``weight`` attribute > 0.

    def __init__(self) -> None:
        self._g: nx.DiGraph[str] = nx.DiGraph()
        self._check_rep()

    def _check_rep(self, *touched: str) -> None:
        """Check every edge, or only edges incident to *touched* vertices."""
        if not __debug__:
            return
        if touched:
            edges = [
                *self._g.out_edges(touched, data="weight"),
                *self._g.in_edges(touched, data="weight"),
            ]
        else:
            edges = list(self._g.edges(data="weight"))
        for source, target, weight in edges:
            assert isinstance(source, str) and isinstance(target, str)
            assert isinstance(weight, int) and weight > 0, (source, target, weight)

    def add(self, vertex: str) -> bool:
        label = _require_label(vertex)
        if label in self._g:
            return False
        self._g.add_node(label)
        self._check_rep(label)
        return True

    def set(self, source: str, target: str, weight: int) -> int:
        source, target = _require_label(source), _require_label(target)
        weight = _require_weight(weight)
        self._g.add_nodes_from((source, target))

        previous: int = self._g.succ[source].get(target, {}).get("weight", 0)
        if weight == 0:
            if previous:
                self._g.remove_edge(source, target)
        else:
            self._g.add_edge(source, target, weight=weight)
        self._check_rep(source, target)
        return previous

    def remove(self, vertex: str) -> bool:
        label = _require_label(vertex)
        if label not in self._g:
            return False
        # NetworkX drops incident in- and out-edges with the node.
        self._g.remove_node(label)
        self._check_rep()
        return True

    def vertices(self) -> frozenset[str]:
        return frozenset(self._g.nodes)

    def sources(self, target: str) -> dict[str, int]:
        if target not in self._g:
            return {}
        return {src: attrs["weight"] for src, attrs in self._g.pred[target].items()}

    def targets(self, source: str) -> dict[str, int]:
        if source not in self._g:
            return {}
        return {dst: attrs["weight"] for dst, attrs in self._g.succ[source].items()}

    def edges(self) -> list[WeightedEdge]:
        return sorted(WeightedEdge(s, t, w) for s, t, w in self._g.edges(data="weight"))

    def __len__(self) -> int:
        return self._g.number_of_nodes()

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, str) and vertex in self._g


# ---------------------------------------------------------------------------
# Edge-list representation
# ---------------------------------------------------------------------------


class EdgeListDigraph(WeightedDigraph):
    """Weighted digraph stored as a vertex set and a list of edge records."""

    # Rep: every edge endpoint is in _vertices, every weight > 0, and no two
    # records share a (source, target) pair.

    def __init__(self) -> None:
        self._vertices: set[str] = set()
        self._edges: list[WeightedEdge] = []
        self._check_rep()

    def _check_rep(self) -> None:
        if not __debug__:
            return
        seen: set[tuple[str, str]] = set()
        for edge in self._edges:
            assert edge.weight > 0, edge
            assert edge.source in self._vertices, edge
            assert edge.target in self._vertices, edge
            assert (edge.source, edge.target) not in seen, edge
            seen.add((edge.source, edge.target))

    def _find(self, source: str, target: str) -> int | None:
        for i, edge in enumerate(self._edges):
            if edge.source == source and edge.target == target:
                return i
        return None

    def add(self, vertex: str) -> bool:
        label = _require_label(vertex)
        if label in self._vertices:
            return False
        self._vertices.add(label)
        self._check_rep()
        return True

    def set(self, source: str, target: str, weight: int) -> int:
        source, target = _require_label(source), _require_label(target)
        weight = _require_weight(weight)
        self._vertices.update((source, target))

        index = self._find(source, target)
        previous = 0
        if index is not None:
            previous = self._edges.pop(index).weight
        if weight > 0:
            self._edges.append(WeightedEdge(source, target, weight))
        self._check_rep()
        return previous

    def remove(self, vertex: str) -> bool:
        label = _require_label(vertex)
        if label not in self._vertices:
            return False
        self._vertices.discard(label)
        self._edges = [e for e in self._edges if label not in (e.source, e.target)]
        self._check_rep()
        return True

    def vertices(self) -> frozenset[str]:
        return frozenset(self._vertices)

    def sources(self, target: str) -> dict[str, int]:
        return {e.source: e.weight for e in self._edges if e.target == target}

    def targets(self, source: str) -> dict[str, int]:
        return {e.target: e.weight for e in self._edges if e.source == source}

    def edges(self) -> list[WeightedEdge]:
        return sorted(self._edges)

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertices


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

GRAPH_KINDS: dict[GraphKind, type[WeightedDigraph]] = {
    ADJACENCY: AdjacencyDigraph,
    EDGE_LIST: EdgeListDigraph,
}


def empty(kind: GraphKind = ADJACENCY) -> WeightedDigraph:
    """Return a new empty graph using the named representation.

    Raises:
        ValueError: If *kind* is not one of :data:`GRAPH_KINDS`.
    """
    try:
        cls = GRAPH_KINDS[kind]
    except KeyError:
        valid = ", ".join(sorted(GRAPH_KINDS))
        raise ValueError(f"Unknown graph kind '{kind}' (expected one of: {valid})") from None
    return cls()


def from_edges(edges: Iterable[WeightedEdge], kind: GraphKind = ADJACENCY) -> WeightedDigraph:
    """Build a graph of the named representation from edge records."""
    graph = empty(kind)
    for edge in edges:
        graph.set(edge.source, edge.target, edge.weight)
    return graph
