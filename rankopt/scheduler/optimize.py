from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from ..models.roster import Roster, position_to_track
from .neighborhood import Pair, unique_pairs
from .score import is_improving, objective, swap_delta


@dataclass
class OptimizeResult:
    passes: int = 0
    swaps: int = 0
    initial_objective: int = 0
    final_objective: int = 0
    swaps_per_pass: List[int] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        return bool(self.swaps_per_pass) and self.swaps_per_pass[-1] == 0


def swap_if_better(roster: Roster, pair: Pair) -> Tuple[bool, int]:
    """Swap the residents at ``pair`` when that strictly lowers their joint cost.

    Returns ``(swapped, gain)`` where ``gain`` is the objective decrease.
    """
    i, j = pair
    old, new = swap_delta(roster, i, j)
    if is_improving(old, new):
        roster.swap(i, j)
        return True, old - new
    return False, 0


def run_pass(roster: Roster, pairs: List[Pair], audit: List[str] | None = None) -> int:
    # One sweep in pair order; later pairs see earlier swaps
    logger = logging.getLogger(__name__)
    swaps = 0
    for pair in pairs:
        swapped, gain = swap_if_better(roster, pair)
        if not swapped:
            continue
        swaps += 1
        i, j = pair
        # After the swap roster[i] is the resident that moved into track i+1
        msg = (
            f"Swap tracks {position_to_track(i)}<->{position_to_track(j)}: "
            f"resident {roster[i].id} -> {position_to_track(i)}, "
            f"resident {roster[j].id} -> {position_to_track(j)} (gain {gain})"
        )
        logger.debug(msg)
        if audit is not None:
            audit.append(msg)
    return swaps


def optimize(roster: Roster) -> Tuple[OptimizeResult, List[str]]:
    """Improve ``roster`` in place by pairwise swaps until a full pass makes none.

    Every applied swap strictly lowers the integer objective, which is bounded
    below by zero, so the loop always terminates at a local optimum.
    """
    logger = logging.getLogger(__name__)
    audit: List[str] = []
    pairs = unique_pairs(len(roster))
    result = OptimizeResult(initial_objective=objective(roster))
    logger.info(
        f"Optimizing {len(roster)} residents over {len(pairs)} pairs "
        f"(objective {result.initial_objective})"
    )

    while True:
        swaps = run_pass(roster, pairs, audit)
        result.passes += 1
        result.swaps += swaps
        result.swaps_per_pass.append(swaps)
        logger.info(f"Pass {result.passes}: {swaps} swap(s)")
        if swaps == 0:
            break

    result.final_objective = objective(roster)
    audit.append(
        f"Converged after {result.passes} pass(es), {result.swaps} swap(s); "
        f"objective {result.initial_objective} -> {result.final_objective}"
    )
    logger.info(audit[-1])
    return result, audit
