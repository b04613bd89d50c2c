import pytest

from mincyclebasis.exceptions import FrozenForestError, IndexOutOfRangeError
from mincyclebasis.forest import ROOT, DisjointSetForest


class TestDisjointSetForest:

    def test_constructor(self):
        forest = DisjointSetForest(10)
        assert len(forest) == 10

    @pytest.mark.parametrize("n", [0, 1, 10])
    def test_get_fresh_forest(self, n):
        forest = DisjointSetForest(n)
        for i in range(n):
            assert forest.get(i) == ROOT

    def test_get_root(self):
        forest = DisjointSetForest(2)
        forest.make_union(0, 1)
        assert forest.get_root(1) == 0
        assert forest.get_root(0) == 0

    def test_make_union(self):
        forest = DisjointSetForest(2)
        forest.make_union(0, 1)
        assert forest.get(1) == 0
        assert forest.get(0) == ROOT

    def test_first_root_is_kept(self):
        forest = DisjointSetForest(4)
        forest.make_union(2, 3)
        forest.make_union(0, 1)
        forest.make_union(3, 1)
        assert forest.get_root(0) == 2
        assert forest.get_root(1) == 2

    def test_union_same_set_is_noop(self):
        forest = DisjointSetForest(3)
        forest.make_union(0, 1)
        forest.make_union(1, 0)
        assert forest.get(0) == ROOT
        assert forest.get(1) == 0

    def test_get_sets(self):
        forest = DisjointSetForest(6)
        forest.make_union(0, 1)
        forest.make_union(2, 3)
        forest.make_union(4, 5)
        assert forest.get_sets() == [[0, 1], [2, 3], [4, 5]]

    def test_get_sets_ordering(self):
        forest = DisjointSetForest(5)
        forest.make_union(4, 0)
        forest.make_union(3, 1)
        # roots 4 and 3 represent the merged sets
        assert forest.get_sets() == [[2], [1, 3], [0, 4]]

    def test_get_sets_empty(self):
        assert DisjointSetForest(0).get_sets() == []

    @pytest.mark.parametrize("i", [-1, 3, 100])
    def test_out_of_range(self, i):
        forest = DisjointSetForest(3)
        with pytest.raises(IndexOutOfRangeError):
            forest.get(i)
        with pytest.raises(IndexOutOfRangeError):
            forest.get_root(i)
        with pytest.raises(IndexError):
            forest.make_union(0, i)

    def test_frozen(self):
        forest = DisjointSetForest(2)
        forest.freeze()
        assert forest.frozen
        with pytest.raises(FrozenForestError):
            forest.make_union(0, 1)
        assert forest.get_sets() == [[0], [1]]
