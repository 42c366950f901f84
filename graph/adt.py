# graph/adt.py
from __future__ import annotations

from typing import (
    Any, Callable, Dict, FrozenSet, Generic, Hashable, Iterable, Iterator,
    List, Optional, Tuple, TypeVar,
)

N = TypeVar("N", bound=Hashable)
Edge = Tuple[Any, Any]


class InvalidEdgeError(ValueError):
    """An edge that cannot support the requested action in this graph
    (missing endpoint, self loop, already present)."""

    def __init__(self, edge: Edge, message: str = "invalid edge"):
        super().__init__(f"{message}: {edge!r}")
        self.edge = edge


class InvalidNodeError(ValueError):
    """A node that cannot support the requested action in this graph
    (already present, rename collision, not a member)."""

    def __init__(self, node: Any, message: str = "invalid node"):
        super().__init__(f"{message}: {node!r}")
        self.node = node


def canonical_order(nodes: Iterable[N]) -> List[N]:
    """
    Deterministic enumeration of a node set.
    Uses natural ordering when the labels support it, otherwise (type name, repr).
    """
    nodes = list(nodes)
    try:
        return sorted(nodes)
    except TypeError:
        return sorted(nodes, key=lambda n: (type(n).__name__, repr(n)))


class _AdjacencyGraph(Generic[N]):
    """
    Immutable graph stored as frozen node/edge sets plus precomputed
    successor/predecessor maps. Every updater returns a new graph of the
    receiver's own type; nothing is ever modified in place.

    Node labels must be hashable and should be immutable.
    """

    __slots__ = ("_nodes", "_edges", "_succ", "_pred", "_hash")

    def __init__(self, nodes: Iterable[N] = (), edges: Iterable[Edge] = ()):
        node_set = frozenset(nodes)
        edge_set = self._close_edges(frozenset(tuple(e) for e in edges))
        for e in edge_set:
            u, v = e
            if u not in node_set or v not in node_set:
                raise InvalidEdgeError(e, "edge endpoint not in graph")
            if u == v:
                raise InvalidEdgeError(e, "self-loops are not supported")

        succ: Dict[N, set] = {n: set() for n in node_set}
        pred: Dict[N, set] = {n: set() for n in node_set}
        for u, v in edge_set:
            succ[u].add(v)
            pred[v].add(u)

        self._nodes: FrozenSet[N] = node_set
        self._edges: FrozenSet[Edge] = edge_set
        self._succ = {n: frozenset(s) for n, s in succ.items()}
        self._pred = {n: frozenset(s) for n, s in pred.items()}
        self._hash: Optional[int] = None

    @staticmethod
    def _close_edges(edges: FrozenSet[Edge]) -> FrozenSet[Edge]:
        return edges

    def _make(self, nodes: Iterable[N], edges: Iterable[Edge]):
        return type(self)(nodes, edges)

    # --------------------------
    # structure
    # --------------------------

    @property
    def nodes(self) -> FrozenSet[N]:
        return self._nodes

    @property
    def edges(self) -> FrozenSet[Edge]:
        return self._edges

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[N]:
        return iter(canonical_order(self._nodes))

    def __contains__(self, n: object) -> bool:
        return n in self._nodes

    def has_node(self, n: N) -> bool:
        return n in self._nodes

    def has_edge(self, u: N, v: N) -> bool:
        return (u, v) in self._edges

    @property
    def is_empty(self) -> bool:
        return not self._nodes

    # --------------------------
    # functional updates
    # --------------------------

    def maybe_add_node(self, n: N):
        """Copy also containing n; structurally unchanged if n is present."""
        return self._make(self._nodes | {n}, self._edges)

    def maybe_add_edge(self, u: N, v: N):
        """Copy also containing u->v; both ends must already be nodes."""
        if u not in self._nodes or v not in self._nodes:
            raise InvalidEdgeError((u, v), "edge endpoint not in graph")
        return self._make(self._nodes, self._edges | {(u, v)})

    def add_node(self, n: N):
        if n in self._nodes:
            raise InvalidNodeError(n, "node already in graph")
        return self.maybe_add_node(n)

    def add_edge(self, u: N, v: N):
        if (u, v) in self._edges:
            raise InvalidEdgeError((u, v), "edge already in graph")
        return self.maybe_add_edge(u, v)

    def remove_node(self, n: N):
        """Copy lacking n and every edge incident to it; no-op if n is absent."""
        if n not in self._nodes:
            return self
        return self._make(
            self._nodes - {n},
            (e for e in self._edges if n not in e),
        )

    def remove_edge(self, u: N, v: N):
        return self._make(self._nodes, self._edges - {(u, v)})

    # --------------------------
    # adjacency queries (absent nodes -> empty)
    # --------------------------

    def edges_from(self, n: N) -> FrozenSet[Edge]:
        return frozenset((n, v) for v in self._succ.get(n, ()))

    def edges_into(self, n: N) -> FrozenSet[Edge]:
        return frozenset((u, n) for u in self._pred.get(n, ()))

    def predecessors_of(self, n: N) -> FrozenSet[N]:
        return self._pred.get(n, frozenset())

    def successors_of(self, n: N) -> FrozenSet[N]:
        return self._succ.get(n, frozenset())

    def neighbors_of(self, n: N) -> FrozenSet[N]:
        return self.predecessors_of(n) | self.successors_of(n)

    def arity_of(self, n: N) -> int:
        """Number of edges out of n."""
        return len(self.successors_of(n))

    def arbitrary_node(self) -> N:
        if not self._nodes:
            raise InvalidNodeError(None, "graph is empty")
        return canonical_order(self._nodes)[0]

    def maximum_arity(self) -> int:
        if not self._nodes:
            raise InvalidNodeError(None, "graph is empty")
        return max(self.arity_of(n) for n in self._nodes)

    def maximum_arity_node(self) -> N:
        if not self._nodes:
            raise InvalidNodeError(None, "graph is empty")
        return max(canonical_order(self._nodes), key=self.arity_of)

    def maximum_arity_nodes(self) -> FrozenSet[N]:
        if not self._nodes:
            return frozenset()
        top = self.maximum_arity()
        return frozenset(n for n in self._nodes if self.arity_of(n) == top)

    # --------------------------
    # relabel / combine / restrict
    # --------------------------

    def rename(self, f: Callable[[N], Any]):
        """Copy with every label mapped through f; f must be injective on the nodes."""
        mapping = {n: f(n) for n in self._nodes}
        if len(set(mapping.values())) != len(mapping):
            seen: Dict[Any, N] = {}
            for n in canonical_order(self._nodes):
                image = mapping[n]
                if image in seen:
                    raise InvalidNodeError(image, "rename caused duplicate node")
                seen[image] = n
        return self._make(
            mapping.values(),
            ((mapping[u], mapping[v]) for u, v in self._edges),
        )

    def _require_same_variant(self, other) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot union {type(self).__name__} with {type(other).__name__}"
            )

    def unsafe_union(self, other):
        """
        Union of node and edge sets. Equal labels on both sides collapse
        into one node.
        """
        self._require_same_variant(other)
        return self._make(self._nodes | other.nodes, self._edges | other.edges)

    def safe_union(self, other, left: Callable[[N], Any], right: Callable[[N], Any]):
        """Rename both operands, require disjoint labels, then union."""
        self._require_same_variant(other)
        lhs = self.rename(left)
        rhs = other.rename(right)
        clash = lhs.nodes & rhs.nodes
        if clash:
            raise InvalidNodeError(
                canonical_order(clash)[0], "safe_union relabelings must produce disjoint nodes"
            )
        return lhs.unsafe_union(rhs)

    def subgraph_with(self, ns: Iterable[N]):
        """Induced subgraph on ns (which must be nodes of this graph)."""
        keep = frozenset(ns)
        extra = keep - self._nodes
        if extra:
            raise InvalidNodeError(canonical_order(extra)[0], "subgraph node not in graph")
        return self._make(
            keep,
            (e for e in self._edges if e[0] in keep and e[1] in keep),
        )

    def subgraph_without(self, ns: Iterable[N]):
        """Induced subgraph lacking ns and any edge touching them."""
        drop = frozenset(ns)
        extra = drop - self._nodes
        if extra:
            raise InvalidNodeError(canonical_order(extra)[0], "subgraph node not in graph")
        return self.subgraph_with(self._nodes - drop)

    # --------------------------
    # interop
    # --------------------------

    def to_networkx(self):
        """Convert to a networkx graph for drawing and ad-hoc experimentation."""
        import networkx as nx

        g = nx.DiGraph() if self.directed else nx.Graph()
        g.add_nodes_from(canonical_order(self._nodes))
        g.add_edges_from(self._edges)
        return g

    # --------------------------
    # value semantics
    # --------------------------

    directed = True

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._nodes == other._nodes and self._edges == other._edges

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((type(self).__name__, self._nodes, self._edges))
        return self._hash

    def __repr__(self) -> str:
        nodes = canonical_order(self._nodes)
        edges = canonical_order(self._edges)
        return f"{type(self).__name__}({nodes!r}, {edges!r})"


class DirectedGraph(_AdjacencyGraph[N]):
    """Immutable directed graph; each edge (u, v) is stored once."""

    __slots__ = ()
    directed = True

    def to_undirected(self) -> "UndirectedGraph[N]":
        return UndirectedGraph(self._nodes, self._edges)


class UndirectedGraph(_AdjacencyGraph[N]):
    """
    Immutable undirected graph. Both (u, v) and (v, u) are stored for every
    logical edge, so predecessors, successors and neighbors coincide.
    """

    __slots__ = ()
    directed = False

    @staticmethod
    def _close_edges(edges: FrozenSet[Edge]) -> FrozenSet[Edge]:
        return edges | frozenset((v, u) for u, v in edges)

    def remove_edge(self, u: N, v: N):
        # drop the reverse too, or the constructor would restore it
        return self._make(self._nodes, self._edges - {(u, v), (v, u)})

    def undirected_edges(self) -> List[Edge]:
        """Each logical edge once, as (u, v) in canonical order of the endpoints."""
        out = []
        for u, v in canonical_order(self._edges):
            if canonical_order([u, v])[0] == u:
                out.append((u, v))
        return out
