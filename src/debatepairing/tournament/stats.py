"""Whole-tournament schedule statistics and recommendations."""

# Debate Pairing
# Copyright (C) 2025  Debate Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from debatepairing.constants import (
    FOLD_ROUND_LIMIT,
    STATS_MULTIPLE_BYE_WEIGHT,
    STATS_OVERLOAD_LIMIT,
    STATS_OVERLOAD_WEIGHT,
    STATS_REPEAT_WEIGHT,
    STATS_SCHOOL_WEIGHT,
    STATS_SIDE_BALANCE_LIMIT,
    STATS_SIDE_WEIGHT,
)
from debatepairing.models import Team
from debatepairing.tournament.history import DebateRecord
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class SideBalance:
    prop: int = 0
    opp: int = 0

    @property
    def balance_score(self) -> int:
        return abs(self.prop - self.opp)

    def to_dict(self) -> Dict[str, int]:
        return {"prop": self.prop, "opp": self.opp, "balance_score": self.balance_score}


@dataclass
class JudgeWorkload:
    total_assignments: int = 0
    head_judge_count: int = 0
    rounds: List[int] = field(default_factory=list)
    overload_score: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_assignments": self.total_assignments,
            "head_judge_count": self.head_judge_count,
            "rounds": list(self.rounds),
            "overload_score": self.overload_score,
        }


@dataclass
class ScheduleQuality:
    """Penalty counts for a schedule. ``total_quality_score`` 0 is perfect."""

    repeat_matchups: int = 0
    side_imbalances: int = 0
    multiple_byes: int = 0
    school_conflicts: int = 0
    judge_overloads: int = 0

    @property
    def total_quality_score(self) -> int:
        return (
            self.repeat_matchups * STATS_REPEAT_WEIGHT
            + self.side_imbalances * STATS_SIDE_WEIGHT
            + self.multiple_byes * STATS_MULTIPLE_BYE_WEIGHT
            + self.school_conflicts * STATS_SCHOOL_WEIGHT
            + self.judge_overloads * STATS_OVERLOAD_WEIGHT
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "repeat_matchups": self.repeat_matchups,
            "side_imbalances": self.side_imbalances,
            "multiple_byes": self.multiple_byes,
            "school_conflicts": self.school_conflicts,
            "judge_overloads": self.judge_overloads,
            "total_quality_score": self.total_quality_score,
        }


@dataclass
class PairingStats:
    total_rounds: int
    total_teams: int
    total_debates: int
    public_speaking_rounds: int
    matchup_matrix: Dict[str, List[str]]
    side_balance: Dict[str, SideBalance]
    bye_distribution: Dict[str, int]
    bye_rounds: Dict[str, List[int]]
    school_conflicts: Dict[str, int]
    judge_workload: Dict[str, JudgeWorkload]
    quality_metrics: ScheduleQuality
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_rounds": self.total_rounds,
            "total_teams": self.total_teams,
            "total_debates": self.total_debates,
            "public_speaking_rounds": self.public_speaking_rounds,
            "matchup_matrix": {k: list(v) for k, v in self.matchup_matrix.items()},
            "side_balance": {k: v.to_dict() for k, v in self.side_balance.items()},
            "bye_distribution": dict(self.bye_distribution),
            "bye_rounds": {k: list(v) for k, v in self.bye_rounds.items()},
            "school_conflicts": dict(self.school_conflicts),
            "judge_workload": {k: v.to_dict() for k, v in self.judge_workload.items()},
            "quality_metrics": self.quality_metrics.to_dict(),
            "recommendations": list(self.recommendations),
        }


def _count_repeat_matchups(debates: Sequence[DebateRecord]) -> int:
    """Meetings between two teams beyond their first."""
    meetings = Counter(
        frozenset((d.proposition_team_id, d.opposition_team_id))
        for d in debates
        if not d.is_bye and d.proposition_team_id and d.opposition_team_id
    )
    return sum(count - 1 for count in meetings.values() if count > 1)


def _judge_workload(debates: Sequence[DebateRecord]) -> Dict[str, JudgeWorkload]:
    workload: Dict[str, JudgeWorkload] = {}
    for debate in debates:
        for judge_id in debate.judges:
            entry = workload.setdefault(judge_id, JudgeWorkload())
            entry.total_assignments += 1
            entry.rounds.append(debate.round_number)
            if debate.head_judge_id == judge_id:
                entry.head_judge_count += 1

    if workload:
        mean = sum(w.total_assignments for w in workload.values()) / len(workload)
        for entry in workload.values():
            entry.overload_score = max(0.0, entry.total_assignments - mean)
    return workload


def generate_recommendations(
    quality: ScheduleQuality, total_teams: int, total_rounds: int
) -> List[str]:
    """Plain-language advice for tournament staff."""
    recommendations: List[str] = []

    if quality.repeat_matchups > 0:
        recommendations.append(
            f"{quality.repeat_matchups} repeat matchups detected. "
            "Consider using Swiss system for future rounds."
        )
    if quality.side_imbalances > total_teams * 0.3:
        recommendations.append(
            "High side imbalance detected. Review side assignment algorithm."
        )
    if quality.multiple_byes > 0:
        recommendations.append(
            f"{quality.multiple_byes} teams have multiple bye rounds. "
            "Ensure fair distribution."
        )
    if quality.school_conflicts > 0:
        recommendations.append(
            f"{quality.school_conflicts} same-school matchups found. "
            "Review pairing constraints."
        )
    if quality.judge_overloads > 0:
        recommendations.append(
            "Some judges are overloaded. Consider recruiting more volunteers."
        )
    if total_rounds > FOLD_ROUND_LIMIT and quality.repeat_matchups == 0:
        recommendations.append(
            f"Excellent pairing quality maintained beyond round {FOLD_ROUND_LIMIT}!"
        )

    total = quality.total_quality_score
    if total == 0:
        recommendations.append("Perfect pairing quality achieved!")
    elif total < 20:
        recommendations.append("Good pairing quality with minor issues.")
    elif total < 50:
        recommendations.append(
            "Moderate pairing quality. Consider algorithm adjustments."
        )
    else:
        recommendations.append(
            "Poor pairing quality. Manual intervention recommended."
        )
    return recommendations


def compute_pairing_stats(
    teams: Sequence[Team], debates: Sequence[DebateRecord]
) -> PairingStats:
    """Summarise a tournament's schedule so far.

    Debates naming teams that are not in ``teams`` (withdrawn teams, for
    example) still count towards matchups and judge workload but get no
    per-team entry.
    """
    teams_by_id = {team.id: team for team in teams}
    matchups: Dict[str, set] = {team.id: set() for team in teams}
    side_balance = {team.id: SideBalance() for team in teams}
    bye_count = {team.id: 0 for team in teams}
    bye_rounds: Dict[str, List[int]] = {team.id: [] for team in teams}
    school_conflicts: Dict[str, int] = {}

    for debate in debates:
        prop_id = debate.proposition_team_id
        opp_id = debate.opposition_team_id
        if debate.is_bye:
            if prop_id in bye_count:
                bye_count[prop_id] += 1
                bye_rounds[prop_id].append(debate.round_number)
            continue

        if prop_id in side_balance:
            side_balance[prop_id].prop += 1
        if opp_id in side_balance:
            side_balance[opp_id].opp += 1
        if prop_id and opp_id:
            if prop_id in matchups:
                matchups[prop_id].add(opp_id)
            if opp_id in matchups:
                matchups[opp_id].add(prop_id)

            prop_team = teams_by_id.get(prop_id)
            opp_team = teams_by_id.get(opp_id)
            if prop_team and opp_team and prop_team.shares_school_with(opp_team):
                school = prop_team.school_id
                school_conflicts[school] = school_conflicts.get(school, 0) + 1

    workload = _judge_workload(debates)
    total_rounds = len({d.round_number for d in debates})

    quality = ScheduleQuality(
        repeat_matchups=_count_repeat_matchups(debates),
        side_imbalances=sum(
            1 for b in side_balance.values() if b.balance_score > STATS_SIDE_BALANCE_LIMIT
        ),
        multiple_byes=sum(1 for count in bye_count.values() if count > 1),
        school_conflicts=sum(school_conflicts.values()),
        judge_overloads=sum(
            1 for w in workload.values() if w.overload_score > STATS_OVERLOAD_LIMIT
        ),
    )
    logger.debug("Schedule quality over %s rounds: %s", total_rounds, quality)

    return PairingStats(
        total_rounds=total_rounds,
        total_teams=len(teams),
        total_debates=len(debates),
        public_speaking_rounds=sum(1 for d in debates if d.is_bye),
        matchup_matrix={k: sorted(v) for k, v in matchups.items()},
        side_balance=side_balance,
        bye_distribution=bye_count,
        bye_rounds=bye_rounds,
        school_conflicts=school_conflicts,
        judge_workload=workload,
        quality_metrics=quality,
        recommendations=generate_recommendations(quality, len(teams), total_rounds),
    )
