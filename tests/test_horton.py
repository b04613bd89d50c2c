import networkx as nx
import pytest

from mincyclebasis.graph import WeightedGraph
from mincyclebasis.horton import ComponentCycleBasis, get_horton_candidates
from mincyclebasis.reduction import to_simple_graph


def component(G):
    return ComponentCycleBasis(to_simple_graph(WeightedGraph(G)))


def test_hexagon(hexagon):
    basis = component(hexagon)
    assert basis.rank == 1
    (cycle,) = basis.cycles()
    assert cycle.weight == 6.0

    result = basis.classify()
    assert result.essential == {cycle}
    assert result.relevant == {cycle: cycle}
    assert result.classes == (frozenset([cycle]),)


def test_k4(k4):
    basis = component(k4)
    assert basis.rank == 3
    assert basis.weight_vector() == [3.0, 3.0, 3.0]

    result = basis.classify()
    # any three of the four triangles form a minimum basis
    assert result.essential == frozenset()
    assert len(result.relevant) == 4
    assert all(len(c) == 3 for c in result.relevant)
    assert set(result.relevant.values()) <= set(basis.cycles())
    assert result.classes == (frozenset(basis.cycles()),)


def test_cube():
    basis = component(nx.cubical_graph())
    assert basis.weight_vector() == [4.0] * 5

    result = basis.classify()
    assert result.essential == frozenset()
    assert len(result.relevant) == 6
    assert len(result.classes) == 1


def test_naphthalene(naphthalene):
    basis = component(naphthalene)
    assert basis.weight_vector() == [6.0, 6.0]

    result = basis.classify()
    assert result.essential == set(basis.cycles())
    assert set(result.relevant) == set(basis.cycles())
    assert sorted(len(c) for c in result.classes) == [1, 1]


def test_weighted_square(weighted_square):
    basis = component(weighted_square)
    assert basis.weight_vector() == [4.0, 12.0]
    square, triangle = basis.cycles()

    result = basis.classify()
    assert result.essential == {square}
    assert len(result.relevant) == 3
    other = next(c for c in result.relevant if c not in (square, triangle))
    assert other.weight == 12.0
    assert result.relevant[other] == triangle
    assert result.relevant[square] == square
    assert set(result.classes) == {frozenset([square]), frozenset([triangle])}


def test_candidates_sorted_and_unique(k4):
    G = to_simple_graph(WeightedGraph(k4))
    bit = {d["edge"]: i for i, (_, _, d) in enumerate(G.edges(data=True))}
    candidates = get_horton_candidates(G, bit)
    weights = [c.cycle.weight for c in candidates]
    assert weights == sorted(weights)
    assert len({c.vector for c in candidates}) == len(candidates)
    # every vertex is adjacent to the root, so only the 4 triangles appear
    assert weights == [3.0] * 4


@pytest.mark.parametrize("G", [
    nx.petersen_graph(),
    nx.wheel_graph(7),
    nx.complete_graph(5),
    nx.grid_2d_graph(3, 4),
    nx.dodecahedral_graph(),
])
def test_matches_networkx(G):
    expected = sorted(float(len(c)) for c in nx.minimum_cycle_basis(G))
    assert component(G).weight_vector() == expected


def test_relevant_cycles_are_simple(k4):
    for cycle in component(k4).classify().relevant:
        assert cycle.vertex_order() is not None


def test_decimal_weight_ties(decimal_theta):
    basis = component(decimal_theta)
    assert basis.weight_vector() == pytest.approx([0.6, 2.3])
    light, heavy = sorted(basis.cycles(), key=lambda c: c.weight)

    result = basis.classify()
    assert result.essential == {light}
    assert len(result.relevant) == 3
    other = next(c for c in result.relevant if c not in (light, heavy))
    assert other.weight == pytest.approx(2.3)
    assert result.relevant[other] == heavy
    assert set(result.classes) == {frozenset([light]), frozenset([heavy])}


def test_twin_k4_classes(twin_k4):
    basis = component(twin_k4)
    assert basis.rank == 7
    assert basis.weight_vector() == [3.0] * 6 + [12.0]

    result = basis.classify()
    (long_cycle,) = [c for c in basis.cycles() if c.weight == 12.0]
    assert result.essential == {long_cycle}
    assert len(result.relevant) == 9
    assert sorted(len(c) for c in result.classes) == [1, 3, 3]

    blocks = [set(range(4)), set(range(4, 8))]
    for group in result.classes:
        if len(group) == 1:
            assert group == {long_cycle}
            continue
        vertices = set().union(*(c.vertices for c in group))
        assert vertices in blocks
