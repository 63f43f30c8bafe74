from debatepairing.models import Team
from debatepairing.pairing import determine_sides, select_bye_team, sort_by_standings
from debatepairing.pairing.swiss import pair_swiss


def _pairs(pairings):
    return [(p.proposition_team_id, p.opposition_team_id) for p in pairings]


def test_team_owed_proposition_proposes():
    t1 = Team(id="t1", side_history=["proposition", "proposition"])
    t2 = Team(id="t2", side_history=["opposition", "opposition"])

    prop, opp = determine_sides(t1, t2)

    assert (prop.id, opp.id) == ("t2", "t1")


def test_stronger_team_proposes_when_sides_are_level():
    t1 = Team(id="t1", performance_score=10)
    t2 = Team(id="t2", performance_score=20)

    prop, opp = determine_sides(t1, t2)

    assert (prop.id, opp.id) == ("t2", "t1")


def test_first_team_proposes_on_a_full_tie():
    t1 = Team(id="t1", performance_score=5)
    t2 = Team(id="t2", performance_score=5)

    prop, _ = determine_sides(t1, t2)

    assert prop.id == "t1"


def test_standings_order_is_wins_points_then_lower_performance():
    a = Team(id="a", wins=2, total_points=150, performance_score=350)
    b = Team(id="b", wins=3, total_points=100, performance_score=400)
    c = Team(id="c", wins=2, total_points=150, performance_score=340)
    d = Team(id="d", wins=2, total_points=160, performance_score=360)

    assert [t.id for t in sort_by_standings([a, b, c, d])] == ["b", "d", "c", "a"]


def test_swiss_pairs_neighbours_top_down():
    teams = [Team(id=x) for x in "abcd"]

    assert _pairs(pair_swiss(teams)) == [("a", "b"), ("c", "d")]


def test_swiss_skips_previous_opponents():
    a = Team(id="a", performance_score=300, opponents_faced=["b"])
    b = Team(id="b", performance_score=290, opponents_faced=["a"])
    c = Team(id="c", performance_score=280)
    d = Team(id="d", performance_score=270)

    assert _pairs(pair_swiss([a, b, c, d])) == [("a", "c"), ("b", "d")]


def test_swiss_never_pairs_a_team_twice():
    teams = [Team(id=f"t{i}", performance_score=i * 7 % 5) for i in range(10)]

    pairings = pair_swiss(teams)

    placed = [team_id for p in pairings for team_id in p.team_ids]
    assert len(placed) == len(set(placed)) == 10


def test_swiss_leaves_isolated_team_unpaired():
    a = Team(id="a", school_id="s1")
    b = Team(id="b", school_id="s1")
    c = Team(id="c", school_id="s1")

    assert pair_swiss([a, b, c]) == []


def test_bye_prefers_teams_without_a_bye():
    weak_with_bye = Team(id="a", performance_score=0, bye_rounds=[1])
    weak = Team(id="b", performance_score=10)
    strong = Team(id="c", performance_score=90)

    assert select_bye_team([weak_with_bye, weak, strong]).id == "b"


def test_bye_falls_back_to_whole_field():
    teams = [
        Team(id="a", performance_score=50, bye_rounds=[1]),
        Team(id="b", performance_score=20, bye_rounds=[2]),
    ]

    assert select_bye_team(teams).id == "b"
