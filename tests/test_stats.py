from debatepairing.models import Team
from debatepairing.tournament import DebateRecord, compute_pairing_stats


def _debate(round_number, prop, opp, judges=(), head=None):
    return DebateRecord(
        round_number=round_number,
        proposition_team_id=prop,
        opposition_team_id=opp,
        judges=list(judges),
        head_judge_id=head,
    )


def _bye(round_number, team_id):
    return DebateRecord(round_number=round_number, proposition_team_id=team_id, is_bye=True)


def test_clean_schedule():
    teams = [Team(id=x) for x in "abcd"]
    debates = [
        _debate(1, "a", "b", ["j1"], "j1"),
        _debate(1, "c", "d", ["j2"], "j2"),
        _debate(2, "b", "c", ["j2"], "j2"),
        _debate(2, "d", "a", ["j1"], "j1"),
    ]

    stats = compute_pairing_stats(teams, debates)

    assert stats.total_rounds == 2
    assert stats.total_debates == 4
    assert stats.matchup_matrix["a"] == ["b", "d"]
    assert all(b.balance_score == 0 for b in stats.side_balance.values())
    assert stats.quality_metrics.total_quality_score == 0
    assert stats.recommendations == ["Perfect pairing quality achieved!"]


def test_repeats_side_imbalance_and_double_byes():
    teams = [Team(id=x) for x in "abc"]
    debates = [
        _debate(1, "a", "b"),
        _bye(1, "c"),
        _debate(2, "a", "b"),
        _bye(2, "c"),
    ]

    stats = compute_pairing_stats(teams, debates)

    quality = stats.quality_metrics
    assert quality.repeat_matchups == 1
    assert quality.side_imbalances == 2
    assert quality.multiple_byes == 1
    assert quality.total_quality_score == 10 + 10 + 20
    assert stats.public_speaking_rounds == 2
    assert stats.bye_distribution == {"a": 0, "b": 0, "c": 2}
    assert stats.bye_rounds["c"] == [1, 2]
    assert stats.recommendations == [
        "1 repeat matchups detected. Consider using Swiss system for future rounds.",
        "High side imbalance detected. Review side assignment algorithm.",
        "1 teams have multiple bye rounds. Ensure fair distribution.",
        "Moderate pairing quality. Consider algorithm adjustments.",
    ]


def test_same_school_matchups_are_counted_per_school():
    teams = [
        Team(id="a", school_id="s1"),
        Team(id="b", school_id="s1"),
        Team(id="c", school_id="s2"),
        Team(id="d"),
    ]
    debates = [_debate(1, "a", "b"), _debate(1, "c", "d")]

    stats = compute_pairing_stats(teams, debates)

    assert stats.school_conflicts == {"s1": 1}
    assert stats.quality_metrics.school_conflicts == 1
    assert "1 same-school matchups found. Review pairing constraints." in (
        stats.recommendations
    )


def test_judge_workload_and_overload():
    debates = [_debate(1, f"p{i}", f"o{i}", ["busy"], "busy") for i in range(6)]
    debates += [_debate(2, f"x{i}", f"y{i}", [f"j{i}"]) for i in range(4)]

    stats = compute_pairing_stats([], debates)

    busy = stats.judge_workload["busy"]
    assert busy.total_assignments == 6
    assert busy.head_judge_count == 6
    assert busy.rounds == [1] * 6
    assert busy.overload_score == 4.0
    assert stats.judge_workload["j0"].overload_score == 0.0
    assert stats.quality_metrics.judge_overloads == 1
    assert (
        "Some judges are overloaded. Consider recruiting more volunteers."
        in stats.recommendations
    )


def test_long_tournament_without_repeats_is_praised():
    teams = [Team(id=x) for x in "ab"]
    debates = [_bye(n, "a" if n % 2 else "b") for n in range(1, 7)]

    stats = compute_pairing_stats(teams, debates)

    assert stats.total_rounds == 6
    assert "Excellent pairing quality maintained beyond round 5!" in (
        stats.recommendations
    )


def test_stats_dict_is_plain_data():
    teams = [Team(id="a"), Team(id="b")]

    data = compute_pairing_stats(teams, [_debate(1, "a", "b", ["j1"], "j1")]).to_dict()

    assert data["side_balance"]["a"] == {"prop": 1, "opp": 0, "balance_score": 1}
    assert data["judge_workload"]["j1"]["head_judge_count"] == 1
    assert data["quality_metrics"]["total_quality_score"] == 0
