"""
Exceptions raised by the cycle basis engine.
"""


class CycleBasisError(Exception):
    """Base class for every error raised by mincyclebasis."""


class InvalidWeightError(CycleBasisError, ValueError):
    """An edge weight is negative, NaN or not a number."""


class IndexOutOfRangeError(CycleBasisError, IndexError):
    """A disjoint-set forest index lies outside [0, n)."""


class FrozenForestError(CycleBasisError, RuntimeError):
    """A union was requested on a forest whose sets were already consumed."""


class WeightKeyConflictError(CycleBasisError, ValueError):
    """A weighted view was requested with other weight settings than it was built with."""
