import logging

from debatepairing.models import Team
from debatepairing.pairing.common import find_best_opponent, identity_shuffler
from debatepairing.pairing.fold import pair_fold_system, pair_round_one, split_side_pools
from debatepairing.testing import make_teams


def _pairs(pairings):
    return [(p.proposition_team_id, p.opposition_team_id) for p in pairings]


def test_round_one_pairs_halves_positionally():
    teams = make_teams(4)

    pairings = pair_round_one(teams, identity_shuffler)

    assert _pairs(pairings) == [("team-1", "team-3"), ("team-2", "team-4")]


def test_round_one_uses_the_shuffled_order():
    teams = make_teams(4)

    pairings = pair_round_one(teams, lambda ts: list(reversed(ts)))

    assert _pairs(pairings) == [("team-4", "team-2"), ("team-3", "team-1")]


def test_round_one_ignores_history():
    teams = make_teams(2)
    teams[0].opponents_faced = ["team-2"]

    assert _pairs(pair_round_one(teams, identity_shuffler)) == [("team-1", "team-2")]


def test_side_pools_follow_last_side():
    a = Team(id="a", side_history=["proposition"])
    b = Team(id="b", side_history=["opposition"])
    c = Team(id="c")

    prop_pool, opp_pool = split_side_pools([a, b, c])

    assert [t.id for t in prop_pool] == ["b", "c"]
    assert [t.id for t in opp_pool] == ["a"]


def test_side_pools_are_rebalanced_from_the_tail():
    teams = [Team(id=x, side_history=["proposition"]) for x in "abcd"]

    prop_pool, opp_pool = split_side_pools(teams)

    assert [t.id for t in prop_pool] == ["d", "c"]
    assert [t.id for t in opp_pool] == ["a", "b"]


def test_fold_pairs_across_pools_by_closest_performance():
    a = Team(id="a", side_history=["proposition"], wins=2, performance_score=200)
    b = Team(id="b", side_history=["opposition"], wins=2, performance_score=190)
    c = Team(id="c", side_history=["proposition"], wins=1, performance_score=100)
    d = Team(id="d", side_history=["opposition"], wins=1, performance_score=110)

    pairings = pair_fold_system([a, b, c, d])

    assert _pairs(pairings) == [("b", "a"), ("d", "c")]


def test_fold_avoids_rematches():
    a = Team(id="a", side_history=["proposition"], wins=2, performance_score=200)
    b = Team(
        id="b",
        side_history=["opposition"],
        wins=2,
        performance_score=190,
        opponents_faced=["a"],
    )
    c = Team(id="c", side_history=["proposition"], wins=1, performance_score=100)
    d = Team(id="d", side_history=["opposition"], wins=1, performance_score=110)

    pairings = pair_fold_system([a, b, c, d])

    assert _pairs(pairings) == [("b", "c"), ("d", "a")]


def test_fold_leaves_team_unpaired_without_backtracking(caplog):
    caplog.set_level(logging.WARNING, logger="debatepairing")
    x = Team(id="x", school_id="s1")
    y = Team(id="y", school_id="s1")

    pairings = pair_fold_system([x, y])

    assert pairings == []
    assert "no opponent" in caplog.text


def test_best_opponent_has_no_minimum_score():
    team = Team(id="a", performance_score=0)
    distant = Team(id="b", performance_score=5000)
    closer = Team(id="c", performance_score=1500)

    assert find_best_opponent(team, [distant], set()).id == "b"
    assert find_best_opponent(team, [distant, closer], set()).id == "c"
    assert find_best_opponent(team, [distant], {"b"}) is None


def test_fold_pairs_teams_far_apart_in_performance():
    strong = Team(id="strong", performance_score=2500, side_history=["opposition"])
    weak = Team(id="weak", performance_score=0, side_history=["proposition"])

    assert _pairs(pair_fold_system([strong, weak])) == [("strong", "weak")]
