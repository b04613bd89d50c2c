"""
Default settings for the cycle basis computation.
"""

from dataclasses import dataclass

# ─── defaults ────────────────────────────────────────────────────────────────
WEIGHT_KEY = "weight"       # edge attribute read as the weight
DEFAULT_WEIGHT = 1.0        # used when an edge has no weight attribute
WEIGHT_TOLERANCE = 1e-9     # relative tolerance when comparing cycle weights
PROCESSES = 1               # > 1 solves biconnected components in a pool
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class BasisConfig:
    weight: str = WEIGHT_KEY
    default_weight: float = DEFAULT_WEIGHT
    tolerance: float = WEIGHT_TOLERANCE
    processes: int = PROCESSES
