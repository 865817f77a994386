from __future__ import annotations

import random
from typing import List, Sequence

import pytest

from rankopt.models.resident import Resident
from rankopt.models.roster import Roster


def make_roster(*prefs: Sequence[int], start_id: int = 1) -> Roster:
    return Roster.of(Resident.from_fields(start_id + k, p) for k, p in enumerate(prefs))


def random_residents(n: int, seed: int) -> List[Resident]:
    rnd = random.Random(seed)
    out: List[Resident] = []
    for k in range(n):
        prefs = list(range(1, n + 1))
        rnd.shuffle(prefs)
        out.append(Resident.from_fields(100 + k, prefs))
    return out


@pytest.fixture
def scenario_a() -> Roster:
    # E1 wants 2, E2 wants 1, E3 wants 3
    return make_roster([2, 1, 3], [1, 2, 3], [3, 1, 2])
