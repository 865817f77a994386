from __future__ import annotations

import argparse
import json
import random
import sys
from datetime import datetime
from pathlib import Path

# Ensure project root on sys.path
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from rankopt.config import load_config
from rankopt.data.loader import load_residents
from rankopt.errors import RankOptError
from rankopt.models.resident import Resident
from rankopt.render.csv_out import csv_table
from rankopt.solve import solve
from rankopt.validate.checks import validate_all


def build_once(residents: list[Resident], *, seed_offset: int = 0, base_seed: int = 12345):
    # Fresh copies so every restart starts unassigned
    pool = [Resident.from_fields(r.id, r.preferences) for r in residents]
    if seed_offset:
        # Offset 0 keeps the input order
        rnd = random.Random(base_seed + seed_offset)
        rnd.shuffle(pool)
    roster, result, audit = solve(pool)
    metrics = {
        "seed_offset": seed_offset,
        "passes": result.passes,
        "swaps": result.swaps,
        "initial_objective": result.initial_objective,
        "objective": result.final_objective,
    }
    return roster, metrics, audit


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Run the rank list optimizer from shuffled starts")
    ap.add_argument("--input", type=str, default=None, help="Residents CSV (defaults to config)")
    ap.add_argument("--restarts", type=int, default=8)
    ap.add_argument("--seed", type=int, default=12345)
    args = ap.parse_args(argv)

    cfg = load_config(root)
    path = Path(args.input or cfg.input)
    if not path.is_absolute():
        path = root / path
    try:
        residents = load_residents(path)
        best = None
        best_pack = None
        for r in range(max(1, args.restarts)):
            roster, metrics, audit = build_once(residents, seed_offset=r, base_seed=args.seed)
            if best is None or metrics["objective"] < best:
                best = metrics["objective"]
                best_pack = (roster, metrics, audit)
    except RankOptError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    # Save best to outputs/runs/<stamp>/
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    outdir = root / "outputs" / "runs" / stamp
    outdir.mkdir(parents=True, exist_ok=True)
    roster, metrics, audit = best_pack  # type: ignore
    (outdir / "assignments.csv").write_text(csv_table(roster), encoding="utf-8")
    (outdir / "metrics.json").write_text(json.dumps(metrics, indent=2), encoding="utf-8")
    (outdir / "audit.log").write_text("\n".join(audit), encoding="utf-8")
    (outdir / "validation.json").write_text(
        json.dumps(validate_all(roster), indent=2), encoding="utf-8"
    )
    print(f"Saved best run to {outdir}")
    print(json.dumps(metrics, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
