"""
mincyclebasis: minimum cycle bases of weighted multigraphs

Computes a minimum cycle basis of an undirected, possibly multi-edged,
weighted graph together with its essential cycles, relevant cycles and
matroid equivalence classes (ring perception).
"""

__version__ = '0.3.0'
__all__ = ["CycleBasis", "minimum_cycle_basis", "BasisConfig", "Cycle", "Edge",
           "WeightedGraph", "DisjointSetForest", "ComponentCycleBasis"]

import logging

from .config import BasisConfig
from .cycle import Cycle, Edge
from .graph import WeightedGraph
from .forest import DisjointSetForest
from .horton import ComponentCycleBasis
from .basis import CycleBasis, minimum_cycle_basis

logging.getLogger(__name__).addHandler(logging.NullHandler())
