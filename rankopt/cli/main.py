from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer

from ..config import level_from_name, load_config
from ..data.loader import load_residents, load_residents_stream
from ..errors import RankOptError
from ..models.resident import Resident
from ..models.roster import Roster
from ..render.csv_out import csv_table, write_csv
from ..solve import solve
from ..validate.checks import check_roster, validate_all
from ..validate.report import format_validation_report, write_validation_report

STDIN = "-"


def _setup_logging(project_root: Path) -> None:
    logs_dir = project_root / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(logs_dir / "rankopt.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def _load(project_root: Path, input_path: str) -> List[Resident]:
    if input_path == STDIN:
        return load_residents_stream(sys.stdin)
    p = Path(input_path)
    if not p.is_absolute():
        p = project_root / p
    return load_residents(p)


def run_pipeline(
    project_root: Path,
    *,
    input_path: str | None = None,
    log_level: int | None = None,
    validate: bool | None = None,
    write_outputs: bool | None = None,
) -> tuple[str, str, str]:
    cfg = load_config(project_root)
    _setup_logging(project_root)
    if log_level is None:
        log_level = level_from_name(cfg.log_level)
    logging.getLogger().setLevel(log_level)
    logger = logging.getLogger(__name__)

    source = input_path or cfg.input
    residents = _load(project_root, source)
    roster, result, swap_audit = solve(
        residents, validate=cfg.validate if validate is None else validate
    )

    report = validate_all(roster)
    report["search"] = {
        "passes": result.passes,
        "swaps": result.swaps,
        "initial_objective": result.initial_objective,
        "final_objective": result.final_objective,
    }
    csv = csv_table(roster)

    audit_text = "\n".join(
        [f"Loaded {len(roster)} residents from {source}", "", "Swaps:"] + swap_audit
    )
    if cfg.write_outputs if write_outputs is None else write_outputs:
        outputs_dir = project_root / "outputs"
        write_validation_report(report, outputs_dir)
        write_csv(csv, outputs_dir)
        with (outputs_dir / "audit.txt").open("w", encoding="utf-8") as f:
            f.write(audit_text)
        logger.info(f"Wrote outputs to {outputs_dir}")

    return csv, format_validation_report(report), audit_text


def check_input(project_root: Path, input_path: str | None = None) -> List[str]:
    cfg = load_config(project_root)
    roster = Roster.of(_load(project_root, input_path or cfg.input))
    return [str(p) for p in check_roster(roster)]


app = typer.Typer(add_completion=False, help="Rank list optimizer: match residents to tracks")


def _root(root: Optional[Path]) -> Path:
    return (root or Path.cwd()).resolve()


@app.command("solve")
def cli_solve(
    input_path: Optional[str] = typer.Option(
        None, "--input", "-i", help="Residents CSV ('-' for stdin); defaults to config"
    ),
    root: Optional[Path] = typer.Option(None, help="Project root (configs/, outputs/, logs/)"),
    log_level: Optional[str] = typer.Option(None, help="Log level; defaults to config"),
    validate: Optional[bool] = typer.Option(
        None, "--validate/--no-validate", help="Check preference lists before optimizing"
    ),
) -> None:
    try:
        level = level_from_name(log_level) if log_level else None
        csv, validation, audit = run_pipeline(
            _root(root), input_path=input_path, log_level=level, validate=validate
        )
    except RankOptError as e:
        logging.getLogger(__name__).error(f"Run aborted: {e}")
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(csv)
    typer.echo(validation)
    typer.echo(audit)


@app.command("validate")
def cli_validate(
    input_path: Optional[str] = typer.Option(None, "--input", "-i", help="Residents CSV"),
    root: Optional[Path] = typer.Option(None, help="Project root"),
) -> None:
    try:
        problems = check_input(_root(root), input_path)
    except RankOptError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)
    if problems:
        for p in problems:
            typer.echo(f"error: {p}", err=True)
        raise typer.Exit(code=1)
    typer.echo("input OK")


@app.command("export-csv")
def cli_export_csv(
    input_path: Optional[str] = typer.Option(None, "--input", "-i", help="Residents CSV"),
    root: Optional[Path] = typer.Option(None, help="Project root"),
) -> None:
    try:
        csv, _, _ = run_pipeline(_root(root), input_path=input_path)
    except RankOptError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(csv, nl=False)
