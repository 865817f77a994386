from __future__ import annotations

from typing import Tuple

from ..errors import InvalidPreferenceList
from ..models.resident import Resident
from ..models.roster import Roster, position_to_track


def rank_of(resident: Resident, track: int) -> int:
    # Zero-based position of track in the resident's preference list
    try:
        return resident.preferences.index(track)
    except ValueError:
        raise InvalidPreferenceList(resident.id, track) from None


def cost(resident: Resident, track: int) -> int:
    # Quadratic: 1st choice 0, 2nd 1, 3rd 4, k-th k*k
    rank = rank_of(resident, track)
    return rank * rank


def swap_delta(roster: Roster, i: int, j: int) -> Tuple[int, int]:
    """Return ``(old, new)`` cost of the residents at positions ``i`` and ``j``.

    ``old`` is their cost where they stand; ``new`` is their cost if they
    traded tracks. Scores are read from the live roster.
    """
    a, b = roster[i], roster[j]
    ti, tj = position_to_track(i), position_to_track(j)
    old = cost(a, ti) + cost(b, tj)
    new = cost(b, ti) + cost(a, tj)
    return old, new


def is_improving(old: int, new: int) -> bool:
    # Strict: equal-cost swaps are never taken
    return new < old


def objective(roster: Roster) -> int:
    return sum(cost(r, track) for track, r in roster.placements())
