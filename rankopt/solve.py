from __future__ import annotations

from typing import Iterable, List, Tuple

from .models.resident import Resident
from .models.roster import Roster
from .validate.checks import validate_roster
from .scheduler.finalize import assign_tracks
from .scheduler.optimize import OptimizeResult, optimize


def solve(
    residents: Iterable[Resident],
    *,
    validate: bool = True,
) -> Tuple[Roster, OptimizeResult, List[str]]:
    # Input order is the initial assignment: position i holds track i+1
    roster = Roster.of(residents)
    if validate:
        validate_roster(roster)
    result, audit = optimize(roster)
    assign_tracks(roster)
    return roster, result, audit
