from __future__ import annotations

import pytest

from rankopt.errors import InvalidPreferenceList, MalformedInputError, ShapeMismatchError
from rankopt.models.roster import Roster
from rankopt.scheduler.finalize import assign_tracks
from rankopt.scheduler.optimize import optimize
from rankopt.validate.checks import check_roster, improving_swaps, validate_all, validate_roster
from rankopt.validate.report import format_validation_report, write_validation_report

from conftest import make_roster, random_residents


def test_valid_roster_passes() -> None:
    roster = Roster.of(random_residents(6, seed=2))
    assert check_roster(roster) == []
    validate_roster(roster)


def test_missing_track_is_fatal() -> None:
    roster = make_roster([1, 2, 3], [3, 1, 1], [2, 3, 1])
    with pytest.raises(InvalidPreferenceList) as exc:
        validate_roster(roster)
    assert exc.value.resident_id == 2
    problems = check_roster(roster)
    # duplicate 1 and missing 2
    assert {p.track for p in problems if isinstance(p, InvalidPreferenceList)} == {1, 2}


def test_length_mismatch_is_fatal() -> None:
    roster = make_roster([1, 2], [2, 1], [1, 2])
    with pytest.raises(ShapeMismatchError):
        validate_roster(roster)


def test_out_of_range_track() -> None:
    roster = make_roster([1, 3], [2, 1])
    with pytest.raises(InvalidPreferenceList, match="outside 1..2"):
        validate_roster(roster)


def test_duplicate_ids() -> None:
    roster = make_roster([1, 2], [2, 1], start_id=1)
    roster.residents[1].id = 1
    with pytest.raises(MalformedInputError, match="duplicate resident id 1"):
        validate_roster(roster)


def test_report_after_optimization(scenario_a: Roster) -> None:
    optimize(scenario_a)
    assign_tracks(scenario_a)
    report = validate_all(scenario_a)
    assert report["resident_count"] == 3
    assert report["objective"] == 0
    assert report["bijection_ok"] is True
    assert report["unassigned"] == []
    assert report["duplicate_tracks"] == []
    assert report["improving_swaps"] == []
    assert report["rank_histogram"] == {0: 3}
    assert report["worst_rank"] == 0


def test_report_flags_unfinished_roster(scenario_a: Roster) -> None:
    report = validate_all(scenario_a)
    assert report["bijection_ok"] is False
    assert report["unassigned"] == [1, 2, 3]
    assert report["improving_swaps"] == [[0, 1]]
    assert improving_swaps(scenario_a) == [(0, 1)]


def test_report_text_and_json(scenario_a: Roster, tmp_path) -> None:
    optimize(scenario_a)
    assign_tracks(scenario_a)
    report = validate_all(scenario_a)
    text = format_validation_report(report)
    assert "bijection_ok: True" in text
    assert "improving_swaps: 0" in text
    write_validation_report(report, tmp_path / "out")
    assert (tmp_path / "out" / "validation.json").exists()
