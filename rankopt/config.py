from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .errors import RankOptError

CONFIG_RELPATH = Path("configs") / "rankopt.toml"


def level_from_name(name: str) -> int:
    # Registered level names only
    levels = logging.getLevelNamesMapping()
    key = str(name).strip().upper()
    if key not in levels:
        raise RankOptError(f"unknown log level {name!r}; expected one of {sorted(set(levels))}")
    return levels[key]


@dataclass
class RunConfig:
    input: str = "data/residents.csv"
    validate: bool = True
    log_level: str = "INFO"
    write_outputs: bool = True


def load_config(project_root: Path | str) -> RunConfig:
    """Load run settings from configs/rankopt.toml if present, else defaults.

    Keys may sit at the top level or under [run]:
      - input, validate, log_level, write_outputs
    """
    base = RunConfig()
    cfg = Path(project_root) / CONFIG_RELPATH
    if not cfg.exists():
        return base
    try:
        data: Dict[str, Any] = tomllib.loads(cfg.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise RankOptError(f"invalid config {cfg}: {e}") from e
    w = data.get("run") if isinstance(data.get("run"), dict) else data

    def get_bool(name: str, default: bool) -> bool:
        v = w.get(name, default)
        if not isinstance(v, bool):
            raise RankOptError(f"invalid config {cfg}: {name} must be true or false")
        return v

    def get_level(name: str, default: str) -> str:
        v = str(w.get(name, default)).strip().upper()
        try:
            level_from_name(v)
        except RankOptError as e:
            raise RankOptError(f"invalid config {cfg}: {e}") from e
        return v

    return RunConfig(
        input=str(w.get("input", base.input)),
        validate=get_bool("validate", base.validate),
        log_level=get_level("log_level", base.log_level),
        write_outputs=get_bool("write_outputs", base.write_outputs),
    )
