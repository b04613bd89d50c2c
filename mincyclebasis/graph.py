"""
Weighted (multi)graph view consumed by the cycle basis engine.

Any undirected networkx graph can be used as input. Edge weights are read
from one edge attribute and validated once, when the view is built.
"""

import logging
import math
import numbers
from collections import defaultdict
from typing import Dict, Hashable, Iterable, List, Optional, Tuple

import networkx as nx
from networkx.utils import not_implemented_for

from .config import DEFAULT_WEIGHT, WEIGHT_KEY
from .cycle import Edge
from .exceptions import InvalidWeightError, WeightKeyConflictError

logger = logging.getLogger(__name__)


def _check_weight(u, v, w) -> float:
    if isinstance(w, bool) or not isinstance(w, numbers.Real):
        raise InvalidWeightError(f"Edge ({u}, {v}) has a non-numeric weight {w!r}")
    w = float(w)
    if math.isnan(w) or w < 0:
        raise InvalidWeightError(f"Edge ({u}, {v}) has an invalid weight {w}")
    return w


class WeightedGraph:
    """
    Read-only weighted multigraph.

    Vertices keep the enumeration order of the wrapped graph. Every edge is
    stored with its endpoints in that order, so two enumerations of the same
    graph give identical ``Edge`` objects.

    Args:
        graph: undirected ``nx.Graph`` or ``nx.MultiGraph``
        weight: name of the edge attribute holding the weight
        default_weight: weight of edges without that attribute
    """

    def __init__(self, graph, weight: str = WEIGHT_KEY,
                 default_weight: float = DEFAULT_WEIGHT):
        _require_undirected(graph)
        self._graph = graph
        self.weight_key = weight
        self.default_weight = default_weight
        self._vertices = list(graph.nodes())
        self._index = {node: i for i, node in enumerate(self._vertices)}

        if graph.is_multigraph():
            raw = graph.edges(keys=True, data=weight, default=default_weight)
        else:
            raw = ((u, v, 0, w) for u, v, w in graph.edges(data=weight, default=default_weight))

        self._edges: List[Edge] = []
        self._by_pair: Dict[Tuple[Hashable, Hashable], List[Edge]] = defaultdict(list)
        for u, v, key, w in raw:
            w = _check_weight(u, v, w)
            if self._index[u] > self._index[v]:
                u, v = v, u
            edge = Edge(u, v, key, w)
            self._edges.append(edge)
            self._by_pair[(u, v)].append(edge)

        logger.debug(f"Weighted graph: n={len(self._vertices)}, m={len(self._edges)}")

    @classmethod
    def from_edges(cls, edges: Iterable[tuple], vertices: Optional[Iterable] = None,
                   weight: str = WEIGHT_KEY) -> "WeightedGraph":
        """
        Builds a multigraph view from ``(u, v)`` or ``(u, v, w)`` tuples.
        """
        G = nx.MultiGraph()
        if vertices is not None:
            G.add_nodes_from(vertices)
        for item in edges:
            if len(item) == 2:
                G.add_edge(*item)
            else:
                u, v, w = item
                G.add_edge(u, v, **{weight: w})
        return cls(G, weight=weight)

    def __len__(self) -> int:
        return len(self._vertices)

    def vertices(self) -> List[Hashable]:
        return list(self._vertices)

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def number_of_edges(self) -> int:
        return len(self._edges)

    def edges_between(self, u, v) -> List[Edge]:
        """All edges joining ``u`` and ``v`` (parallel edges included)."""
        if u not in self._index or v not in self._index:
            return []
        if self._index[u] > self._index[v]:
            u, v = v, u
        return list(self._by_pair.get((u, v), ()))

    def pairs(self):
        """Yields (u, v, edges) for every adjacent vertex pair, first-seen order."""
        for (u, v), edges in self._by_pair.items():
            yield u, v, list(edges)

    def number_of_components(self) -> int:
        return nx.number_connected_components(self._graph) if self._vertices else 0

    def circuit_rank(self) -> int:
        """|E| - |V| + number of connected components."""
        return len(self._edges) - len(self._vertices) + self.number_of_components()


@not_implemented_for("directed")
def _require_undirected(G):
    return G


def weighted_view(graph, weight: Optional[str] = None,
                  default_weight: Optional[float] = None) -> WeightedGraph:
    """
    Wraps ``graph`` in a ``WeightedGraph``. An existing view is returned as
    it is; its weights were read when it was built, so asking for another
    attribute or default raises ``WeightKeyConflictError``.
    """
    if isinstance(graph, WeightedGraph):
        if weight is not None and weight != graph.weight_key:
            raise WeightKeyConflictError(
                f"Graph view reads weights from {graph.weight_key!r}, not {weight!r}"
            )
        if default_weight is not None and default_weight != graph.default_weight:
            raise WeightKeyConflictError(
                f"Graph view uses default weight {graph.default_weight}, not {default_weight}"
            )
        return graph
    return WeightedGraph(graph,
                         weight=WEIGHT_KEY if weight is None else weight,
                         default_weight=DEFAULT_WEIGHT if default_weight is None else default_weight)
