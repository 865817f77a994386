from __future__ import annotations

import json
from pathlib import Path
from typing import Dict


def write_validation_report(report: Dict[str, object], outputs_dir: Path) -> None:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    with (outputs_dir / "validation.json").open("w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)


def format_validation_report(report: Dict[str, object]) -> str:
    lines: list[str] = []
    lines.append(f"resident_count: {report.get('resident_count')}")
    lines.append(f"objective: {report.get('objective')}")
    lines.append(f"bijection_ok: {report.get('bijection_ok')}")
    unassigned = report.get("unassigned", [])
    if unassigned:
        lines.append(f"unassigned: {unassigned}")
    dupes = report.get("duplicate_tracks", [])
    if dupes:
        lines.append(f"duplicate_tracks: {dupes}")
    swaps = report.get("improving_swaps", [])
    lines.append(f"improving_swaps: {len(swaps)}")
    lines.append("rank_histogram:")
    hist = report.get("rank_histogram", {})
    if isinstance(hist, dict):
        for k, v in hist.items():
            lines.append(f"  - rank {k}: {v}")
    lines.append(f"worst_rank: {report.get('worst_rank')}")
    search = report.get("search")
    if isinstance(search, dict):
        lines.append(f"passes: {search.get('passes')}, swaps: {search.get('swaps')}")
    return "\n".join(lines)
