"""
Disjoint-set forest (union-find) over the integers 0 .. n-1.

Used to merge edges into biconnected components and basis cycles into
equivalence classes.
"""

from typing import List

from .exceptions import FrozenForestError, IndexOutOfRangeError

ROOT = -1


class DisjointSetForest:
    """
    Union-find over ``n`` integer elements.

    Every element starts as the root of its own set. ``make_union(i, j)``
    links the root of ``j`` under the root of ``i``, so the first argument's
    representative is kept. No path compression or ranks are used: ``get``
    always reports the link created by ``make_union``.
    """

    def __init__(self, n: int):
        if n < 0:
            raise IndexOutOfRangeError(f"Forest size must be >= 0, got {n}")
        self._parents = [ROOT] * n
        self._frozen = False

    def __len__(self) -> int:
        return len(self._parents)

    def __repr__(self):
        return f"DisjointSetForest({self._parents})"

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._parents):
            raise IndexOutOfRangeError(
                f"Index {i} out of range for forest of size {len(self._parents)}"
            )

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, i: int) -> int:
        """Parent of ``i``, or ``ROOT`` if ``i`` represents its set."""
        self._check(i)
        return self._parents[i]

    def get_root(self, i: int) -> int:
        """Representative of the set containing ``i``."""
        self._check(i)
        while self._parents[i] != ROOT:
            i = self._parents[i]
        return i

    def make_union(self, i: int, j: int) -> None:
        """Merge the sets of ``i`` and ``j``; the root of ``i`` stays the root."""
        if self._frozen:
            raise FrozenForestError("Cannot merge sets of a frozen forest")
        root_i = self.get_root(i)
        root_j = self.get_root(j)
        if root_i != root_j:
            self._parents[root_j] = root_i

    def get_sets(self) -> List[List[int]]:
        """
        Partition of the elements.

        Returns:
            List of ascending lists, one per root, ordered by ascending root.
        """
        groups = {i: [] for i, parent in enumerate(self._parents) if parent == ROOT}
        for i in range(len(self._parents)):
            groups[self.get_root(i)].append(i)
        return list(groups.values())

    def freeze(self) -> None:
        self._frozen = True
