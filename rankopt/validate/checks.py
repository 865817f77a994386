from __future__ import annotations

from collections import Counter
from typing import Dict, List, Tuple

from ..errors import InvalidPreferenceList, MalformedInputError, RankOptError, ShapeMismatchError
from ..models.roster import Roster
from ..scheduler.neighborhood import unique_pairs
from ..scheduler.score import is_improving, objective, rank_of, swap_delta


def check_roster(roster: Roster) -> List[RankOptError]:
    # Every preference list must be a permutation of 1..N, N = resident count
    problems: List[RankOptError] = []
    n = len(roster)
    tracks = set(range(1, n + 1))
    ids = Counter(r.id for r in roster)
    for rid, c in sorted(ids.items()):
        if c > 1:
            problems.append(MalformedInputError(f"duplicate resident id {rid}"))
    for r in roster:
        if len(r.preferences) != n:
            problems.append(
                ShapeMismatchError(
                    f"resident {r.id}: {len(r.preferences)} preferences for {n} tracks"
                )
            )
        dupes = sorted(t for t, c in Counter(r.preferences).items() if c > 1)
        if dupes:
            problems.append(
                InvalidPreferenceList(r.id, dupes[0], f"track {dupes[0]} ranked more than once")
            )
        out_of_range = sorted(t for t in set(r.preferences) if t not in tracks)
        if out_of_range:
            problems.append(
                InvalidPreferenceList(
                    r.id, out_of_range[0], f"track {out_of_range[0]} outside 1..{n}"
                )
            )
        for t in sorted(tracks - set(r.preferences)):
            problems.append(InvalidPreferenceList(r.id, t))
    return problems


def validate_roster(roster: Roster) -> None:
    """Raise the first input problem found, before any optimization runs."""
    problems = check_roster(roster)
    if problems:
        raise problems[0]


def improving_swaps(roster: Roster) -> List[Tuple[int, int]]:
    out: List[Tuple[int, int]] = []
    for i, j in unique_pairs(len(roster)):
        old, new = swap_delta(roster, i, j)
        if is_improving(old, new):
            out.append((i, j))
    return out


def validate_all(roster: Roster) -> Dict[str, object]:
    report: Dict[str, object] = {}
    n = len(roster)
    report["resident_count"] = n
    report["objective"] = objective(roster)

    # Bijection between residents and tracks 1..N
    assigned = [r.assigned_track for r in roster]
    report["unassigned"] = sorted(r.id for r in roster if r.assigned_track is None)
    counts = Counter(t for t in assigned if t is not None)
    report["duplicate_tracks"] = sorted(t for t, c in counts.items() if c > 1)
    report["bijection_ok"] = sorted(t for t in assigned if t is not None) == list(range(1, n + 1))

    # Local optimality: no single swap may still lower the objective
    report["improving_swaps"] = [list(p) for p in improving_swaps(roster)]

    hist: Counter = Counter()
    for r in roster:
        if r.assigned_track is not None:
            hist[rank_of(r, r.assigned_track)] += 1
    report["rank_histogram"] = {k: hist[k] for k in sorted(hist)}
    report["worst_rank"] = max(hist) if hist else None
    return report
