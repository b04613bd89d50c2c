"""
Minimum cycle basis of one biconnected component.

Horton candidates + greedy GF(2) selection give a minimum basis. Essential
cycles, relevant cycles and the equivalence classes come from exchanging
basis cycles: a cycle c can replace basis cycle b_i iff b_i takes part in
the decomposition of c and w(c) == w(b_i). All such c are found as shortest
(r, 0) -> (r, 1) paths in a graph lifted by the parity of b_i's witness.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple

import networkx as nx

from .config import WEIGHT_TOLERANCE
from .cycle import Cycle, Edge
from .exceptions import CycleBasisError
from .forest import DisjointSetForest
from .gf2 import GF2Basis, bits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    vector: int
    cycle: Cycle


@dataclass(frozen=True)
class Classification:
    essential: FrozenSet[Cycle]
    relevant: Dict[Cycle, Cycle]            # relevant cycle -> basis cycle it replaces
    classes: Tuple[FrozenSet[Cycle], ...]


# ==============================================================================
# Candidate generation and selection
# ==============================================================================

def edge_vector(edges, edge_bit: Dict[Edge, int]) -> int:
    bv = 0
    for e in edges:
        bv |= 1 << edge_bit[e]
    return bv


def get_horton_candidates(G: nx.Graph, edge_bit: Dict[Edge, int]) -> List[Candidate]:
    """
    Generates the Horton candidates of ``G``:
    for every vertex r, build the shortest path tree T_r.
    For every edge e=(x, y), form cycle = Path_T(r, x) + e + Path_T(y, r)
    whenever the two paths only share r.

    Returns:
        Candidates without duplicate edge sets, sorted by weight. Equal
        weights keep generation order.
    """
    seen = set()
    candidates = []

    for r in G:
        _, paths = nx.single_source_dijkstra(G, r, weight="weight")
        for x, y, data in G.edges(data=True):
            px, py = paths[x], paths[y]
            if len(px) + len(py) < 4:
                continue
            if set(px) & set(py) != {r}:
                continue

            edges = [data["edge"]]
            edges += [G[a][b]["edge"] for a, b in zip(px[:-1], px[1:])]
            edges += [G[a][b]["edge"] for a, b in zip(py[:-1], py[1:])]
            bv = edge_vector(edges, edge_bit)
            if bv in seen:
                continue
            seen.add(bv)
            candidates.append(Candidate(bv, Cycle.from_edges(edges)))

    candidates.sort(key=lambda c: c.cycle.weight)
    return candidates


def select_basis(candidates: List[Candidate], k: int):
    """Greedy selection of the first ``k`` independent candidates."""
    pivots = GF2Basis()
    selected = []
    for cand in candidates:
        if len(selected) >= k:
            break
        if pivots.add(cand.vector):
            selected.append(cand)
    return selected, pivots


# ==============================================================================
# Per-component basis
# ==============================================================================

class ComponentCycleBasis:
    """
    Minimum cycle basis of a biconnected simple graph.

    Args:
        G: biconnected ``nx.Graph`` whose edges carry ``weight`` and ``edge``
            (the originating ``Edge``) attributes
        tolerance: relative tolerance used when comparing cycle weights
    """

    def __init__(self, G: nx.Graph, tolerance: float = WEIGHT_TOLERANCE):
        self._graph = G
        self._tolerance = tolerance
        self._edges: List[Edge] = [d["edge"] for _, _, d in G.edges(data=True)]
        self._edge_bit = {e: i for i, e in enumerate(self._edges)}
        self.rank = G.number_of_edges() - G.number_of_nodes() + nx.number_connected_components(G)

        candidates = get_horton_candidates(G, self._edge_bit)
        selected, self._pivots = select_basis(candidates, self.rank)
        if len(selected) != self.rank:
            raise CycleBasisError(
                f"Found {len(selected)} independent cycles, expected {self.rank}"
            )
        self._cycles = [c.cycle for c in selected]
        self._vectors = [c.vector for c in selected]

        logger.debug(f"Component: n={G.number_of_nodes()}, m={G.number_of_edges()}, "
                     f"rank={self.rank}, {len(candidates)} Horton candidates")

    def __len__(self) -> int:
        return len(self._cycles)

    @property
    def graph(self) -> nx.Graph:
        return self._graph

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def cycles(self) -> List[Cycle]:
        return list(self._cycles)

    def weight_vector(self) -> List[float]:
        return sorted(c.weight for c in self._cycles)

    def _same_weight(self, a: float, b: float) -> bool:
        return math.isclose(a, b, rel_tol=self._tolerance, abs_tol=self._tolerance)

    # --------------------------------------------------------------------------
    # Exchange analysis
    # --------------------------------------------------------------------------

    def _chord_labels(self) -> List[int]:
        """
        Witness labels per edge bit. The XOR of the labels over the edges of
        any cycle is its decomposition in the basis.
        """
        G = self._graph
        tree = nx.Graph(nx.bfs_edges(G, next(iter(G))))
        labels = [0] * len(self._edges)
        for x, y, data in G.edges(data=True):
            if tree.has_edge(x, y):
                continue
            path = nx.shortest_path(tree, x, y)
            edges = [data["edge"]] + [G[a][b]["edge"] for a, b in zip(path[:-1], path[1:])]
            combo = self._pivots.decompose(edge_vector(edges, self._edge_bit))
            if combo is None:
                raise CycleBasisError("Fundamental cycle outside the span of the basis")
            labels[self._edge_bit[data["edge"]]] = combo
        return labels

    def decomposition(self, edges, labels: List[int]) -> int:
        combo = 0
        for e in edges:
            combo ^= labels[self._edge_bit[e]]
        return combo

    def _lifted_graph(self, i: int, labels: List[int]) -> nx.Graph:
        lifted = nx.Graph()
        for x, y, data in self._graph.edges(data=True):
            w = data["weight"]
            if (labels[self._edge_bit[data["edge"]]] >> i) & 1:
                lifted.add_edge((x, 0), (y, 1), weight=w, edge=data["edge"])
                lifted.add_edge((x, 1), (y, 0), weight=w, edge=data["edge"])
            else:
                lifted.add_edge((x, 0), (y, 0), weight=w, edge=data["edge"])
                lifted.add_edge((x, 1), (y, 1), weight=w, edge=data["edge"])
        return lifted

    def _tight_edges(self, lifted: nx.Graph, source, sink) -> Optional[nx.DiGraph]:
        """
        Directed edges of ``lifted`` that lie on a shortest source -> sink path
        within the weight tolerance, so float ties such as 0.1 + 0.2 == 0.3
        are kept.
        """
        from_source = nx.single_source_dijkstra_path_length(lifted, source, weight="weight")
        if sink not in from_source:
            return None
        to_sink = nx.single_source_dijkstra_path_length(lifted, sink, weight="weight")
        length = from_source[sink]

        tight = nx.DiGraph()
        for a, b, data in lifted.edges(data=True):
            if a not in from_source:
                continue
            w = data["weight"]
            for x, y in ((a, b), (b, a)):
                if self._same_weight(from_source[x] + w + to_sink[y], length):
                    tight.add_edge(x, y, edge=data["edge"])
        tight.graph["length"] = length
        return tight

    def replacements(self, i: int, labels: List[int]) -> List[Cycle]:
        """
        All cycles that can replace basis cycle i in a minimum basis,
        starting with the basis cycle itself.
        """
        target = self._cycles[i].weight
        lifted = self._lifted_graph(i, labels)

        starts = []
        for e in self._edges:
            if (labels[self._edge_bit[e]] >> i) & 1:
                starts.extend((e.u, e.v))

        found = [self._cycles[i]]
        seen = {self._vectors[i]}
        for r in dict.fromkeys(starts):
            source, sink = (r, 0), (r, 1)
            tight = self._tight_edges(lifted, source, sink)
            if tight is None:
                continue
            length = tight.graph["length"]
            if length > target and not self._same_weight(length, target):
                continue

            for path in nx.all_simple_paths(tight, source, sink):
                nodes = [n for n, _ in path]
                if len(set(nodes)) != len(nodes) - 1:
                    continue
                edges = [tight[a][b]["edge"] for a, b in zip(path[:-1], path[1:])]
                bv = edge_vector(edges, self._edge_bit)
                if bv in seen:
                    continue
                cycle = Cycle.from_edges(edges)
                if not self._same_weight(cycle.weight, target):
                    continue
                seen.add(bv)
                found.append(cycle)
        return found

    def classify(self) -> Classification:
        """Essential cycles, relevant cycles and equivalence classes."""
        k = len(self._cycles)
        if k == 1:
            (only,) = self._cycles
            return Classification(frozenset([only]), {only: only}, (frozenset([only]),))

        labels = self._chord_labels()
        essential = []
        relevant: Dict[Cycle, Cycle] = {}
        forest = DisjointSetForest(k)

        for i, basis_cycle in enumerate(self._cycles):
            found = self.replacements(i, labels)
            if len(found) == 1:
                essential.append(basis_cycle)
            for cycle in found:
                relevant.setdefault(cycle, basis_cycle)
                if cycle == basis_cycle:
                    continue
                # basis cycles of the same weight in the circuit of this cycle
                for j in bits(self.decomposition(cycle.edges, labels)):
                    if self._same_weight(self._cycles[j].weight, cycle.weight):
                        forest.make_union(i, j)

        classes = tuple(frozenset(self._cycles[j] for j in group)
                        for group in forest.get_sets())
        forest.freeze()
        logger.debug(f"{len(essential)} essential, {len(relevant)} relevant, "
                     f"{len(classes)} equivalence classes")
        return Classification(frozenset(essential), relevant, classes)
