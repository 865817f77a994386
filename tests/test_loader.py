from __future__ import annotations

import io
from pathlib import Path

import pytest

from rankopt.data.loader import load_residents, load_residents_stream
from rankopt.errors import MalformedInputError, RankOptError


def test_header_skipped_and_rows_parsed(tmp_path: Path) -> None:
    p = tmp_path / "residents.csv"
    p.write_text("id,a,b,c\n7, 2, 1, 3\n\n3,1,2,3\n", encoding="utf-8")
    residents = load_residents(p)
    assert [r.id for r in residents] == [7, 3]
    assert residents[0].preferences == (2, 1, 3)
    assert all(r.assigned_track is None for r in residents)


def test_trailing_empty_cells_ignored() -> None:
    residents = load_residents_stream(io.StringIO("id,a,b\n1,2,1,,\n"))
    assert residents[0].preferences == (2, 1)


def test_non_integer_preference_reports_line() -> None:
    with pytest.raises(MalformedInputError) as exc:
        load_residents_stream(io.StringIO("id,a,b\n1,2,1\n2,x,1\n"))
    assert exc.value.line_no == 3
    assert "'x'" in str(exc.value)


def test_row_without_preferences_is_rejected() -> None:
    with pytest.raises(MalformedInputError):
        load_residents_stream(io.StringIO("id,a\n5\n"))


def test_duplicate_id_is_rejected() -> None:
    with pytest.raises(MalformedInputError, match="duplicate resident id 4"):
        load_residents_stream(io.StringIO("id,a,b\n4,1,2\n4,2,1\n"))


def test_header_only_gives_no_residents() -> None:
    assert load_residents_stream(io.StringIO("id,a,b\n")) == []


@pytest.mark.parametrize("value", ["1_0", "+3", "١", "1.0", " 2 3"])
def test_only_plain_integers_accepted(value: str) -> None:
    with pytest.raises(MalformedInputError, match="is not an integer"):
        load_residents_stream(io.StringIO(f"id,a,b\n{value},1,2\n"))


def test_negative_id_still_parses() -> None:
    residents = load_residents_stream(io.StringIO("id,a,b\n-4,1,2\n"))
    assert residents[0].id == -4


def test_line_number_counts_physical_lines() -> None:
    # The first record's quoted field spans lines 2-3
    text = 'id,a,b\n1,"2\n",1\n2,x,1\n'
    with pytest.raises(MalformedInputError) as exc:
        load_residents_stream(io.StringIO(text))
    assert exc.value.line_no == 4


def test_non_utf8_file_is_malformed_input(tmp_path: Path) -> None:
    p = tmp_path / "residents.csv"
    p.write_bytes(b"id,a,b\n2,\xff,1\n")
    with pytest.raises(MalformedInputError, match="not valid UTF-8"):
        load_residents(p)


def test_missing_file_is_a_rankopt_error(tmp_path: Path) -> None:
    with pytest.raises(RankOptError, match="cannot read"):
        load_residents(tmp_path / "nope.csv")
