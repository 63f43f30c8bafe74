import pytest

from debatepairing.exceptions import InvalidPairingException
from debatepairing.models import PairingResult
from debatepairing.testing import make_config
from debatepairing.validation import (
    round_save_errors,
    update_pairing,
    validate_round_for_save,
)


def _room(prop, opp, judges=("j1",), head="j1"):
    pairing = PairingResult.debate(prop, opp)
    pairing.judges = list(judges)
    pairing.head_judge_id = head
    return pairing


def test_clean_round_can_be_saved():
    rounds = [_room("a", "b"), _room("c", "d", ["j2"], "j2"), PairingResult.bye("e")]

    assert round_save_errors(rounds, make_config()) == []
    validate_round_for_save(rounds, make_config())


def test_round_save_errors_list_every_problem():
    unjudged = PairingResult.debate("e", "f")
    stale_head = _room("g", "h", ["j3"], "j3")
    stale_head.judges = ["j4"]
    rounds = [
        _room("a", "b"),
        _room("a", "c"),
        _room("d", "d"),
        unjudged,
        stale_head,
        _room("i", "k", ["j5", "j6"], "j5"),
    ]

    errors = round_save_errors(rounds, make_config(judges_per_debate=3))

    assert errors == [
        "Team appears multiple times in pairings (Room 2)",
        "Team appears multiple times in pairings (Room 3)",
        "Team cannot debate itself (Room 3)",
        "No judges assigned (Room 4)",
        "Head judge not in judge list (Room 5)",
        "Even number of judges detected (Room 6)",
    ]


def test_even_panel_matching_target_is_allowed():
    rounds = [_room("a", "b", ["j1", "j2"], "j1")]

    assert round_save_errors(rounds, make_config(judges_per_debate=2)) == []


def test_validate_round_for_save_raises_with_all_errors():
    rounds = [_room("a", "b"), PairingResult.debate("c", "d")]

    with pytest.raises(InvalidPairingException) as excinfo:
        validate_round_for_save(rounds, make_config())

    assert str(excinfo.value) == "Validation failed: No judges assigned (Room 2)"


def test_update_pairing_returns_edited_copy():
    original = _room("a", "b", ["j1", "j2", "j3"], "j1")

    edited = update_pairing(
        original, room_name="Hall A", judges=["j2", "j3", "j4"], head_judge_id="j4"
    )

    assert edited.room_name == "Hall A"
    assert edited.judges == ["j2", "j3", "j4"]
    assert edited.head_judge_id == "j4"
    assert (edited.proposition_team_id, edited.opposition_team_id) == ("a", "b")
    assert original.judges == ["j1", "j2", "j3"]
    assert original.room_name == ""


def test_update_pairing_swaps_teams():
    edited = update_pairing(_room("a", "b"), proposition_team_id="c")

    assert edited.team_ids == ["c", "b"]


def test_update_pairing_rejects_bad_edits():
    room = _room("a", "b", ["j1", "j2", "j3"], "j1")

    with pytest.raises(InvalidPairingException, match="Head judge must be in"):
        update_pairing(room, judges=["j2", "j3", "j4"], head_judge_id="j1")
    with pytest.raises(InvalidPairingException, match="Head judge must be in"):
        update_pairing(room, judges=["j2", "j3", "j4"])
    with pytest.raises(InvalidPairingException, match="against itself"):
        update_pairing(room, proposition_team_id="c", opposition_team_id="c")
    with pytest.raises(InvalidPairingException, match="against itself"):
        update_pairing(room, opposition_team_id="a")
