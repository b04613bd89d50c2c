"""
Biconnected components of a simple graph, as edge sets.

Low-link depth-first search: a tree edge (p, c) joins the component of the
tree edge entering p whenever the subtree of c reaches above p, and a back
edge joins the component of the tree edge entering its lower end. The merges
are done in a DisjointSetForest over edge indices.
"""

import logging
from typing import Dict, Hashable, List, Tuple

import networkx as nx

from .forest import DisjointSetForest

logger = logging.getLogger(__name__)


def biconnected_edge_sets(G: nx.Graph) -> List[List[Tuple[Hashable, Hashable]]]:
    """
    Partitions the edges of ``G`` into biconnected components.

    Args:
        G: simple undirected graph without self-loops

    Returns:
        List of edge lists in ``G.edges()`` order. Components are ordered
        by the index of their root in the edge forest, which is the first
        tree edge the DFS takes into the component. A component with a
        single edge is a bridge.
    """
    edges = list(G.edges())
    index: Dict[Tuple[Hashable, Hashable], int] = {}
    for i, (u, v) in enumerate(edges):
        index[(u, v)] = i
        index[(v, u)] = i

    forest = DisjointSetForest(len(edges))
    disc: Dict[Hashable, int] = {}
    low: Dict[Hashable, int] = {}
    entry: Dict[Hashable, int] = {}   # node -> index of the tree edge into it
    counter = 0

    for root in G:
        if root in disc:
            continue
        disc[root] = low[root] = counter
        counter += 1
        stack = [(root, iter(G[root]))]

        while stack:
            node, nbrs = stack[-1]
            descended = False
            for nbr in nbrs:
                e = index[(node, nbr)]
                if e == entry.get(node):
                    continue
                if nbr not in disc:
                    disc[nbr] = low[nbr] = counter
                    counter += 1
                    entry[nbr] = e
                    stack.append((nbr, iter(G[nbr])))
                    descended = True
                    break
                if disc[nbr] < disc[node]:
                    # back edge to an ancestor
                    low[node] = min(low[node], disc[nbr])
                    forest.make_union(entry[node], e)
            if descended:
                continue

            stack.pop()
            if stack:
                parent = stack[-1][0]
                low[parent] = min(low[parent], low[node])
                if parent != root and low[node] < disc[parent]:
                    forest.make_union(entry[parent], entry[node])

    sets = forest.get_sets()
    forest.freeze()
    logger.debug(f"{len(sets)} biconnected edge sets from {len(edges)} edges")
    return [[edges[i] for i in group] for group in sets]


def biconnected_subgraphs(G: nx.Graph):
    """
    Splits ``G`` into cyclic biconnected subgraphs and bridges.

    Returns:
        (subgraphs, bridges): independent graph copies of every component
        with two or more edges, and the (u, v) pairs of single-edge components.
    """
    subgraphs = []
    bridges = []
    for edge_set in biconnected_edge_sets(G):
        if len(edge_set) > 1:
            subgraphs.append(G.edge_subgraph(edge_set).copy())
        else:
            bridges.append(edge_set[0])
    return subgraphs, bridges
