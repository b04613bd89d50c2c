"""
Multigraph -> simple graph reduction.

Parallel edges are collapsed onto the lightest one. Each discarded edge closes
a cycle with the shortest path between its endpoints; self-loops are cycles
on their own. Such cycles cannot be improved upon and are always part of the
basis.
"""

import logging
from dataclasses import dataclass
from typing import List

import networkx as nx

from .cycle import Cycle, Edge
from .graph import WeightedGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reduction:
    simple: nx.Graph            # edge attrs: "weight" (float), "edge" (Edge)
    cycles: List[Cycle]         # cycles through removed edges and self-loops
    removed: List[Edge]


def to_simple_graph(graph: WeightedGraph) -> nx.Graph:
    """Lightest edge of every adjacent vertex pair, self-loops left out."""
    simple = nx.Graph()
    simple.add_nodes_from(graph.vertices())
    for u, v, edges in graph.pairs():
        if u == v:
            continue
        # first lightest edge wins ties
        lightest = min(edges, key=lambda e: e.weight)
        simple.add_edge(u, v, weight=lightest.weight, edge=lightest)
    return simple


def path_edges(simple: nx.Graph, path) -> List[Edge]:
    return [simple[a][b]["edge"] for a, b in zip(path[:-1], path[1:])]


def reduce_multi_edges(graph: WeightedGraph) -> Reduction:
    """
    Builds the working simple graph and the forced cycles.

    For every parallel edge other than the lightest one, the cycle is the
    edge itself plus a Dijkstra shortest path between its endpoints in the
    simple graph.
    """
    simple = to_simple_graph(graph)
    cycles: List[Cycle] = []
    removed: List[Edge] = []

    for u, v, edges in graph.pairs():
        if u == v:
            for loop in edges:
                removed.append(loop)
                cycles.append(Cycle.from_edges([loop]))
            continue
        if len(edges) < 2:
            continue
        kept = simple[u][v]["edge"]
        path = nx.dijkstra_path(simple, u, v, weight="weight")
        closing = path_edges(simple, path)
        for edge in edges:
            if edge == kept:
                continue
            removed.append(edge)
            cycles.append(Cycle.from_edges([edge, *closing]))

    if removed:
        logger.debug(f"Removed {len(removed)} parallel edges / self-loops, "
                     f"{len(cycles)} forced cycles")
    return Reduction(simple, cycles, removed)
