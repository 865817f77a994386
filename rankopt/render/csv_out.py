from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from ..errors import RankOptError
from ..models.roster import Roster
from ..scheduler.score import rank_of

HEADER = "Resident,Track,Rank"


def result_rows(roster: Roster) -> List[Tuple[int, int, int]]:
    # (id, assigned track, zero-based rank of that track), ascending id
    rows: List[Tuple[int, int, int]] = []
    for r in roster.by_id():
        if r.assigned_track is None:
            raise RankOptError(f"resident {r.id} has no assigned track; run assign_tracks first")
        rows.append((r.id, r.assigned_track, rank_of(r, r.assigned_track)))
    return rows


def csv_table(roster: Roster) -> str:
    lines: List[str] = [HEADER]
    for rid, track, rank in result_rows(roster):
        lines.append(f"{rid},{track},{rank}")
    return "\n".join(lines) + "\n"


def write_csv(text: str, outputs_dir: Path) -> None:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    with (outputs_dir / "assignments.csv").open("w", encoding="utf-8") as f:
        f.write(text)
