import json

import pytest

from debatepairing.exceptions import FileLoadException
from debatepairing.testing import make_config, make_judges, make_teams
from debatepairing.testing.__main__ import (
    COMMANDS,
    create_completer,
    handle_interactive_line,
    main,
)
from debatepairing.tournament import (
    DebateRecord,
    RoundSnapshot,
    TournamentHistory,
    load_snapshot,
    save_history,
    save_snapshot,
)


@pytest.fixture
def snapshot_file(tmp_path):
    teams = make_teams(5, num_schools=2)
    teams[0].opponents_faced = ["team-2"]
    snapshot = RoundSnapshot(
        config=make_config(judges_per_debate=1),
        round_number=1,
        teams=teams,
        judges=make_judges(3, num_schools=2),
    )
    path = tmp_path / "round1.json"
    save_snapshot(snapshot, str(path))
    return path


def test_snapshot_file_round_trip(snapshot_file):
    snapshot = load_snapshot(str(snapshot_file))

    assert snapshot.round_number == 1
    assert [t.id for t in snapshot.teams][:2] == ["team-1", "team-2"]
    assert snapshot.teams[0].opponents_faced == ["team-2"]
    assert snapshot.config.judges_per_debate == 1


def test_missing_snapshot_raises(tmp_path):
    with pytest.raises(FileLoadException):
        load_snapshot(str(tmp_path / "missing.json"))


def test_malformed_snapshot_raises(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]", encoding="utf-8")
    no_ids = tmp_path / "no_ids.json"
    no_ids.write_text(json.dumps({"teams": [{"name": "x"}]}), encoding="utf-8")

    for path in (broken, listing, no_ids):
        with pytest.raises(FileLoadException):
            load_snapshot(str(path))


def test_pair_command_prints_json(snapshot_file, capsys):
    exit_code = main(
        ["pair", "--file", str(snapshot_file), "--format", "json", "--seed", "4"]
    )

    assert exit_code == 0
    pairings = json.loads(capsys.readouterr().out)
    assert len(pairings) == 3
    assert sum(1 for p in pairings if p["is_bye_round"]) == 1


def test_pair_command_writes_output(snapshot_file, tmp_path, capsys):
    output = tmp_path / "pairings.json"

    exit_code = main(["pair", "--file", str(snapshot_file), "--output", str(output)])

    assert exit_code == 0
    assert len(json.loads(output.read_text(encoding="utf-8"))) == 3
    assert "Average quality" in capsys.readouterr().out


def test_pair_command_reports_missing_file(tmp_path, capsys):
    exit_code = main(["pair", "--file", str(tmp_path / "nope.json")])

    assert exit_code == 1
    assert "Error" in capsys.readouterr().out


def test_validate_command_flags_errors(snapshot_file, capsys):
    exit_code = main(
        ["validate", "--file", str(snapshot_file), "--prop", "team-1", "--opp", "team-2"]
    )

    assert exit_code == 1
    assert "repeat_opponent" in capsys.readouterr().out


def test_validate_command_flags_judge_school(snapshot_file, capsys):
    exit_code = main(
        [
            "validate",
            "--file",
            str(snapshot_file),
            "--prop",
            "team-1",
            "--opp",
            "team-4",
            "--judges",
            "judge-3",
        ]
    )

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "judge_conflict" in out


def test_simulate_command(capsys):
    exit_code = main(
        ["simulate", "--teams", "6", "--judges", "4", "--rounds", "2", "--seed", "1"]
    )

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Tournament Simulated" in out
    assert "Recommendations" in out


def test_stats_command(tmp_path, capsys):
    history = TournamentHistory(
        make_config(),
        [
            DebateRecord(1, "Room 1", "a", "b", ["j1"], "j1"),
            DebateRecord(2, "Room 1", "a", "b", ["j1"], "j1"),
        ],
    )
    path = tmp_path / "history.json"
    save_history(history, str(path))

    exit_code = main(["stats", "--file", str(path), "--json"])

    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["quality_metrics"]["repeat_matchups"] == 1
    assert sorted(data["matchup_matrix"]) == ["a", "b"]


def test_completer_knows_every_command():
    completer = create_completer()

    for command in COMMANDS:
        assert command in completer.options
        assert f"/{command}" in completer.options


def test_null_sections_are_treated_as_empty(tmp_path):
    path = tmp_path / "nulls.json"
    path.write_text(
        json.dumps(
            {
                "tournament": None,
                "teams": [
                    {"id": "a", "cross_tournament_performance": None},
                    {"id": "b", "side_history": None, "opponents_faced": None},
                ],
                "judges": [{"id": "j1", "cross_tournament_stats": None}],
            }
        ),
        encoding="utf-8",
    )

    snapshot = load_snapshot(str(path))

    assert [t.id for t in snapshot.teams] == ["a", "b"]
    assert snapshot.teams[0].cross_tournament_performance.total_tournaments == 0
    assert snapshot.teams[1].side_history == []
    assert snapshot.judges[0].cross_tournament_stats.total_tournaments == 0
    assert snapshot.config.name == "Untitled Tournament"


def test_wrongly_shaped_sections_raise_file_errors(tmp_path, capsys):
    bad_team = tmp_path / "bad_team.json"
    bad_team.write_text(json.dumps({"teams": ["team-1"]}), encoding="utf-8")
    bad_config = tmp_path / "bad_config.json"
    bad_config.write_text(json.dumps({"tournament": ["x"]}), encoding="utf-8")

    for path in (bad_team, bad_config):
        with pytest.raises(FileLoadException):
            load_snapshot(str(path))

    assert main(["pair", "--file", str(bad_team)]) == 1
    assert "Error" in capsys.readouterr().out


def test_pair_command_reports_unwritable_output(snapshot_file, tmp_path, capsys):
    target = tmp_path / "missing-dir" / "pairings.json"

    exit_code = main(["pair", "--file", str(snapshot_file), "--output", str(target)])

    assert exit_code == 1
    assert "Error" in capsys.readouterr().out


def test_interactive_line_survives_bad_input(capsys):
    assert handle_interactive_line('pair --file "round1.json') is True
    assert "Error" in capsys.readouterr().out

    assert handle_interactive_line("pair --bogus") is True
    assert handle_interactive_line("nonsense") is True
    assert "Unknown command: nonsense" in capsys.readouterr().out


def test_interactive_line_runs_commands_and_quits(snapshot_file, capsys):
    assert handle_interactive_line(f"pair --file {snapshot_file} --format json")
    assert '"is_bye_round"' in capsys.readouterr().out

    assert handle_interactive_line("exit") is False
