# graph/loader.py
from __future__ import annotations

import re
from pathlib import Path
from typing import List, Tuple, Union

import networkx as nx

from graph.adt import DirectedGraph, UndirectedGraph


def from_networkx(G) -> Union[UndirectedGraph, DirectedGraph]:
    """networkx graph -> immutable graph of the matching variant; self loops are dropped."""
    edges = [(u, v) for u, v in G.edges() if u != v]
    if G.is_directed():
        return DirectedGraph(G.nodes(), edges)
    return UndirectedGraph(G.nodes(), edges)


def load_demo_graph(seed: int = 0, n: int = 12, p: float = 0.3) -> UndirectedGraph:
    # small random graph for quick tests
    return from_networkx(nx.erdos_renyi_graph(n=n, p=p, seed=seed))


# --------------------------
# DIMACS .col and edge lists
# --------------------------

_DIMACS_P_LINE = re.compile(r"^\s*p\s+(\w+)\s+(\d+)\s+(\d+)\s*$", re.IGNORECASE)
_DIMACS_E_LINE = re.compile(r"^\s*e\s+(\d+)\s+(\d+)\s*$", re.IGNORECASE)


def load_dimacs_col(path: Union[str, Path]) -> UndirectedGraph:
    """
    DIMACS .col format:
      c comment
      p edge <n> <m>
      e u v
    Nodes are 1-based in the file and 0-based in the result.
    """
    path = Path(path)
    n_decl = None
    edges: List[Tuple[int, int]] = []
    with path.open("r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("c"):
                continue
            mp = _DIMACS_P_LINE.match(line)
            if mp:
                n_decl = int(mp.group(2))
                continue
            me = _DIMACS_E_LINE.match(line)
            if me:
                u, v = int(me.group(1)) - 1, int(me.group(2)) - 1
                if u != v:
                    edges.append((u, v))

    if n_decl is None:
        # infer n from the largest node id
        n_decl = max((max(u, v) for u, v in edges), default=-1) + 1
    return UndirectedGraph(range(n_decl), edges)


def load_edgelist_txt(path: Union[str, Path]) -> UndirectedGraph:
    """
    Whitespace separated "u v" lines with integer labels.
    Lines starting with # or c are ignored, as are self loops.
    """
    path = Path(path)
    nodes = set()
    edges: List[Tuple[int, int]] = []
    with path.open("r", encoding="utf-8", errors="ignore") as f:
        for lineno, line in enumerate(f, start=1):
            s = line.strip()
            if not s or s.startswith("#") or s.startswith("c"):
                continue
            parts = s.split()
            try:
                u = int(parts[0])
                v = int(parts[1]) if len(parts) > 1 else None
            except ValueError as e:
                raise ValueError(f"{path}:{lineno}: bad edge line {s!r}") from e
            nodes.add(u)
            if v is None:
                continue
            nodes.add(v)
            if u != v:
                edges.append((u, v))
    return UndirectedGraph(nodes, edges)


# --------------------------
# pseudo-graphviz statements: "a; b -> c; d -- e;"
# --------------------------

_WRAPPER = re.compile(r"^\s*(?:strict\s+)?(?:di)?graph\s*\w*\s*\{|\}\s*$", re.IGNORECASE | re.MULTILINE)
_ATTRS = re.compile(r"\[[^\]]*\]")
_EDGE_STMT = re.compile(r"^(\w+)\s*(->|--)\s*(\w+)$")
_NODE_STMT = re.compile(r"^(\w+)$")


def parse_statements(text: str) -> DirectedGraph:
    """
    Parse ';'-separated statements into a directed graph:
      a        node a
      a -> b   edge a->b
      a -- b   edges a->b and b->a
    A surrounding "graph {" / "digraph {" ... "}" and "[...]" attributes are
    ignored, so dot output of this package reads back in.
    """
    body = _ATTRS.sub(" ", _WRAPPER.sub(" ", text))
    g = DirectedGraph()
    for raw in body.replace("\n", ";").split(";"):
        stmt = raw.strip()
        if not stmt:
            continue
        m = _EDGE_STMT.match(stmt)
        if m:
            left, arrow, right = m.groups()
            g = g.maybe_add_node(left).maybe_add_node(right)
            if left == right:
                continue
            g = g.maybe_add_edge(left, right)
            if arrow == "--":
                g = g.maybe_add_edge(right, left)
            continue
        m = _NODE_STMT.match(stmt)
        if m:
            g = g.maybe_add_node(m.group(1))
            continue
        raise ValueError(f"could not parse statement: {stmt!r}")
    return g
