from __future__ import annotations

import csv
import logging
import re
from pathlib import Path
from typing import List, Set, TextIO

from ..errors import MalformedInputError, RankOptError
from ..models.resident import Resident

# Plain ASCII integers only; int() would also take "1_0", "+3" or non-ASCII digits
INT_RE = re.compile(r"^-?[0-9]+$")


def _parse_int(value: str, what: str, line_no: int) -> int:
    if not INT_RE.match(value):
        raise MalformedInputError(f"{what} {value!r} is not an integer", line_no)
    return int(value)


def parse_record(raw: List[str], line_no: int) -> Resident:
    fields = [x.strip() for x in raw]
    # Spreadsheet exports often pad rows with trailing empty cells
    while fields and fields[-1] == "":
        fields.pop()
    if len(fields) < 2:
        raise MalformedInputError("expected a resident id followed by preferences", line_no)
    resident_id = _parse_int(fields[0], "resident id", line_no)
    prefs = [_parse_int(x, "preference", line_no) for x in fields[1:]]
    return Resident.from_fields(resident_id, prefs)


def read_residents(reader) -> List[Resident]:
    """Parse CSV rows into residents, skipping the header row and blank lines.

    Errors carry the physical line the offending record ends on.
    """
    residents: List[Resident] = []
    seen: Set[int] = set()
    header_seen = False
    for raw in reader:
        line_no = reader.line_num
        if not raw or all(not x.strip() for x in raw):
            continue
        if not header_seen:
            header_seen = True
            continue
        r = parse_record(raw, line_no)
        if r.id in seen:
            raise MalformedInputError(f"duplicate resident id {r.id}", line_no)
        seen.add(r.id)
        residents.append(r)
    return residents


def load_residents_stream(stream: TextIO) -> List[Resident]:
    try:
        return read_residents(csv.reader(stream))
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"input is not valid UTF-8: {e}") from e
    except csv.Error as e:
        raise MalformedInputError(f"unreadable CSV: {e}") from e


def load_residents(path: Path) -> List[Resident]:
    logger = logging.getLogger(__name__)
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            residents = load_residents_stream(f)
    except OSError as e:
        raise RankOptError(f"cannot read {path}: {e.strerror or e}") from e
    logger.info(f"Loaded {len(residents)} residents from {path}")
    return residents
