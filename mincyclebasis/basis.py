"""
Minimum cycle basis of a whole (multi)graph.

The input is reduced to a simple graph, split into biconnected components and
every cyclic component is solved on its own. Cycles through removed parallel
edges and self-loops are added as they are: nothing can replace them, so they
are essential, relevant only to themselves and form singleton classes.
"""

import logging
import threading
from dataclasses import dataclass
from functools import partial
from multiprocessing.pool import Pool
from types import MappingProxyType
from typing import Callable, FrozenSet, List, Mapping, Optional, Tuple

import numpy as np

from .biconnected import biconnected_subgraphs
from .config import BasisConfig
from .cycle import Cycle, Edge
from .graph import WeightedGraph, weighted_view
from .horton import Classification, ComponentCycleBasis
from .reduction import reduce_multi_edges

logger = logging.getLogger(__name__)


def _solve(subgraph, tolerance):
    return ComponentCycleBasis(subgraph, tolerance=tolerance)


def _classify(component: ComponentCycleBasis) -> Classification:
    return component.classify()


class _Once:
    """Computes a value at most once and publishes it to every caller."""

    def __init__(self):
        self._lock = threading.Lock()
        self._done = False
        self._value = None

    def get(self, factory: Callable):
        if self._done:
            return self._value
        with self._lock:
            if not self._done:
                self._value = factory()
                self._done = True
        return self._value


@dataclass(frozen=True)
class _Basis:
    components: Tuple[ComponentCycleBasis, ...]
    cycles: Tuple[Cycle, ...]


@dataclass(frozen=True)
class _Classes:
    essential: FrozenSet[Cycle]
    relevant: Mapping[Cycle, Cycle]
    classes: Tuple[FrozenSet[Cycle], ...]


class CycleBasis:
    """
    Constructs a minimum cycle basis of a graph.

    Args:
        graph: undirected ``nx.Graph`` / ``nx.MultiGraph`` or a ``WeightedGraph``
        weight: edge attribute holding the weight (overrides ``config.weight``)
        config: ``BasisConfig``; ``processes > 1`` solves components in a pool

    Raises:
        InvalidWeightError: an edge weight is negative or not a number
        WeightKeyConflictError: ``graph`` is a ``WeightedGraph`` built with
            another weight attribute or default than the one requested
    """

    def __init__(self, graph, weight: Optional[str] = None,
                 config: Optional[BasisConfig] = None):
        self.config = config or BasisConfig()
        if isinstance(graph, WeightedGraph) and config is None:
            # a view keeps the weight settings it was built with
            self._graph = weighted_view(graph, weight=weight)
        else:
            self._graph = weighted_view(graph, weight=weight or self.config.weight,
                                        default_weight=self.config.default_weight)

        reduction = reduce_multi_edges(self._graph)
        self._forced: List[Cycle] = reduction.cycles
        self._removed: List[Edge] = reduction.removed
        self._subgraphs, bridges = biconnected_subgraphs(reduction.simple)
        self._bridges = [reduction.simple[u][v]["edge"] for u, v in bridges]

        self._basis = _Once()
        self._classes = _Once()

        logger.debug(f"Graph: n={len(self._graph)}, m={self._graph.number_of_edges()}, "
                     f"cycle rank k={self._graph.circuit_rank()}, "
                     f"{len(self._subgraphs)} cyclic components")

    def __len__(self) -> int:
        return len(self.cycles())

    @property
    def graph(self):
        return self._graph

    @property
    def bridges(self) -> List[Edge]:
        return list(self._bridges)

    # --------------------------------------------------------------------------
    # Lazy snapshots
    # --------------------------------------------------------------------------

    def _map(self, func, items):
        processes = self.config.processes
        if processes > 1 and len(items) > 1:
            with Pool(processes=min(processes, len(items))) as pool:
                return pool.map(func, items)
        return [func(item) for item in items]

    def _compute_basis(self) -> _Basis:
        components = tuple(self._map(partial(_solve, tolerance=self.config.tolerance),
                                     self._subgraphs))
        cycles = [c for comp in components for c in comp.cycles()]
        cycles.extend(self._forced)
        logger.info(f"Minimum cycle basis: {len(cycles)} cycles")
        return _Basis(components, tuple(cycles))

    def _compute_classes(self) -> _Classes:
        components = self._snapshot().components
        essential = set(self._forced)
        relevant = {}
        classes = []
        for result in self._map(_classify, list(components)):
            essential.update(result.essential)
            relevant.update(result.relevant)
            classes.extend(result.classes)
        for cycle in self._forced:
            relevant[cycle] = cycle
            classes.append(frozenset([cycle]))
        return _Classes(frozenset(essential), MappingProxyType(relevant), tuple(classes))

    def _snapshot(self) -> _Basis:
        return self._basis.get(self._compute_basis)

    def _classification(self) -> _Classes:
        return self._classes.get(self._compute_classes)

    # --------------------------------------------------------------------------
    # Public API
    # --------------------------------------------------------------------------

    def cycles(self) -> Tuple[Cycle, ...]:
        """
        Returns the cycles that form the cycle basis: component bases in
        component order, then the cycles through parallel edges and loops.
        """
        return self._snapshot().cycles

    def essential_cycles(self) -> FrozenSet[Cycle]:
        """Cycles contained in every minimum cycle basis."""
        return self._classification().essential

    def relevant_cycles(self) -> Mapping[Cycle, Cycle]:
        """
        Cycles contained in some minimum cycle basis, each mapped to the
        basis cycle of this basis it can replace.
        """
        return self._classification().relevant

    def equivalence_classes(self) -> Tuple[FrozenSet[Cycle], ...]:
        """
        Groups of basis cycles of equal weight linked by a circuit (a minimal
        dependent set) of relevant cycles.
        """
        return self._classification().classes

    def weight_vector(self) -> np.ndarray:
        """Ascending weights of the basis cycles."""
        return np.sort(np.array([c.weight for c in self.cycles()], dtype=float))

    def edges(self) -> List[Edge]:
        """Component edges, then removed parallel edges / loops, then bridges."""
        result = [e for comp in self._snapshot().components for e in comp.edges()]
        result.extend(self._removed)
        result.extend(self._bridges)
        return result

    def incidence_matrix(self) -> Tuple[np.ndarray, List[Edge]]:
        """
        C_matrix[i, j] = 1 iff edge i is in basis cycle j.

        Returns:
            (C_matrix, edge_list) with rows in ``edge_list`` order.
        """
        edge_list = self._graph.edges()
        edge_to_idx = {e: i for i, e in enumerate(edge_list)}
        cycles = self.cycles()
        C_matrix = np.zeros((len(edge_list), len(cycles)), dtype=int)
        for j, cycle in enumerate(cycles):
            for e in cycle.edges:
                C_matrix[edge_to_idx[e], j] = 1
        return C_matrix, edge_list


def minimum_cycle_basis(graph, weight: Optional[str] = None) -> Tuple[Cycle, ...]:
    """Minimum cycle basis of ``graph`` as a tuple of ``Cycle``."""
    return CycleBasis(graph, weight=weight).cycles()
