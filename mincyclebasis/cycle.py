"""
Edge and cycle value types.
"""

import math
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Hashable, Iterable, List, Optional


@dataclass(frozen=True)
class Edge:
    """
    An undirected edge. ``key`` tells parallel edges apart; the weight does
    not take part in equality or hashing.
    """
    u: Hashable
    v: Hashable
    key: Hashable = 0
    weight: float = field(default=1.0, compare=False)

    @property
    def is_loop(self) -> bool:
        return self.u == self.v

    def other(self, node):
        return self.v if node == self.u else self.u


@dataclass(frozen=True)
class Cycle:
    """
    A simple cycle given by its edge set. Two cycles are equal iff their
    edge sets are equal.
    """
    edges: FrozenSet[Edge]
    weight: float = field(compare=False)

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> "Cycle":
        edges = frozenset(edges)
        if not edges:
            raise ValueError("A cycle needs at least one edge")
        return cls(edges, math.fsum(e.weight for e in edges))

    def __len__(self) -> int:
        return len(self.edges)

    def __contains__(self, edge) -> bool:
        return edge in self.edges

    def __repr__(self):
        order = self.vertex_order()
        path = order if order is not None else sorted(self.vertices, key=repr)
        return f"Cycle({path}, weight={self.weight:g})"

    @property
    def vertices(self) -> FrozenSet[Hashable]:
        return frozenset(n for e in self.edges for n in (e.u, e.v))

    def vertex_order(self) -> Optional[List[Hashable]]:
        """
        Walks the cycle once.

        Returns:
            [v1, v2, ..., v1], or None if the edges are not a simple cycle.
        """
        if len(self.edges) == 1:
            (e,) = self.edges
            return [e.u, e.v] if e.is_loop else None

        adj: Dict[Hashable, List[Edge]] = defaultdict(list)
        for e in self.edges:
            adj[e.u].append(e)
            adj[e.v].append(e)

        # simple cycle: every vertex has degree 2
        if any(len(es) != 2 for es in adj.values()):
            return None

        start = min(adj, key=repr) if len(adj) > 1 else next(iter(adj))
        path = [start]
        prev_edge = None
        curr = start
        while True:
            e0, e1 = adj[curr]
            edge = e1 if e0 == prev_edge else e0
            nxt = edge.other(curr)
            if nxt == start:
                path.append(start)
                break
            if nxt in path:
                return None
            path.append(nxt)
            prev_edge, curr = edge, nxt

        if len(path) - 1 != len(self.edges):
            return None
        return path
