from .finalize import assign_tracks
from .neighborhood import unique_pairs
from .optimize import OptimizeResult, optimize
from .score import cost, objective, rank_of, swap_delta

__all__ = [
    "assign_tracks",
    "cost",
    "objective",
    "optimize",
    "OptimizeResult",
    "rank_of",
    "swap_delta",
    "unique_pairs",
]
