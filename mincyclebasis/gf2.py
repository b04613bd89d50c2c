"""
Incremental Gaussian elimination over GF(2).

Vectors are Python ints used as bitsets (bit i = edge i). Every stored row
also remembers which of the added vectors it is made of, so a vector in the
span can be written as a sum of added vectors.
"""

import bisect
from typing import Optional, Tuple


def bits(x: int):
    """Yields the indices of the set bits of ``x`` in ascending order."""
    i = 0
    while x:
        if x & 1:
            yield i
        x >>= 1
        i += 1


class GF2Basis:
    """
    Row-echelon rows keyed by their highest set bit.

    ``add`` returns whether a vector is independent of the previously added
    ones; ``decompose`` expresses a vector of the span as a bitset over the
    indices of the added (independent) vectors.
    """

    def __init__(self):
        self._rows = {}     # pivot bit -> (row, combination)
        self._order = []    # pivot bits, ascending
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def reduce(self, vec: int) -> Tuple[int, int]:
        """Returns (residual, combination of the rows used)."""
        x = vec
        combo = 0
        for p in reversed(self._order):
            if (x >> p) & 1:
                row, row_combo = self._rows[p]
                x ^= row
                combo ^= row_combo
        return x, combo

    def add(self, vec: int) -> bool:
        """Adds ``vec`` if it is independent. Returns True when added."""
        x, combo = self.reduce(vec)
        if x == 0:
            return False
        p = x.bit_length() - 1
        self._rows[p] = (x, combo ^ (1 << self._size))
        bisect.insort(self._order, p)
        self._size += 1
        return True

    def decompose(self, vec: int) -> Optional[int]:
        """
        Writes ``vec`` as a sum of added vectors.

        Returns:
            Bitset whose bit k is set when the k-th added vector takes part,
            or None if ``vec`` is outside the span.
        """
        x, combo = self.reduce(vec)
        if x != 0:
            return None
        return combo
