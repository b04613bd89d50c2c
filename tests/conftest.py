import networkx as nx
import pytest


@pytest.fixture
def hexagon():
    return nx.cycle_graph(6)


@pytest.fixture
def k4():
    return nx.complete_graph(4)


@pytest.fixture
def naphthalene():
    G = nx.Graph()
    nx.add_cycle(G, [0, 1, 2, 3, 4, 5])
    nx.add_cycle(G, [5, 4, 6, 7, 8, 9])
    return G


@pytest.fixture
def weighted_square():
    # unit square 0-1-2-3 with a heavy diagonal 0-2
    G = nx.Graph()
    nx.add_cycle(G, [0, 1, 2, 3], weight=1)
    G.add_edge(0, 2, weight=10)
    return G


@pytest.fixture
def multi_edge_tree():
    # path 0-1-2-3 with two parallel edges (weights 2 and 5) between 1 and 2
    G = nx.MultiGraph()
    G.add_edge(0, 1, weight=1)
    G.add_edge(1, 2, weight=2)
    G.add_edge(1, 2, weight=5)
    G.add_edge(2, 3, weight=1)
    return G


@pytest.fixture
def mixed():
    G = nx.Graph()
    nx.add_cycle(G, [0, 1, 2, 3])
    nx.add_cycle(G, [0, 3, 4, 5])
    nx.add_cycle(G, [0, 1, 6, 7, 8])
    G.add_edge(8, 9)
    nx.add_cycle(G, [10, 11, 12])
    nx.add_cycle(G, [12, 13, 14])
    G.add_node(20)
    return G


@pytest.fixture
def decimal_theta():
    # three a-b paths of weight 0.3, 0.3 and 2 with decimal edge weights
    G = nx.Graph()
    nx.add_path(G, ["a", "c", "b"])
    G["a"]["c"]["weight"] = 0.1
    G["c"]["b"]["weight"] = 0.2
    nx.add_path(G, ["a", "d", "b"], weight=0.15)
    nx.add_path(G, ["a", "e", "b"], weight=1.0)
    return G


@pytest.fixture
def twin_k4():
    # K4 on 0..3 and K4 on 4..7 joined by two disjoint paths of length 5
    G = nx.complete_graph(4)
    G.add_edges_from((u + 4, v + 4) for u, v in nx.complete_graph(4).edges())
    nx.add_path(G, [0, 10, 11, 12, 13, 4])
    nx.add_path(G, [1, 14, 15, 16, 17, 5])
    return G
