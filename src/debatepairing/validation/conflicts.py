"""Conflict detection for generated rounds and ad hoc pairings.

Two entry points share one conflict vocabulary:

- ``validate_round`` annotates the pairings of a generated round with
  repeat-opponent, same-school, side-imbalance and bye-violation conflicts.
- ``validate_pairing`` checks an arbitrary proposed debate (teams and judges)
  before a caller commits it, adding self-pairing and judge checks.
"""

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

from typing import Dict, Iterable, List, Optional, Sequence

from debatepairing.constants import SIDE_IMBALANCE_LIMIT
from debatepairing.models import (
    Conflict,
    ConflictType,
    Judge,
    PairingResult,
    Severity,
    Team,
)
from debatepairing.type_hints import JudgeId, TeamId
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


def repeat_opponent_conflict(prop_team: Team, opp_team: Team) -> Optional[Conflict]:
    if not prop_team.has_faced(opp_team):
        return None
    return Conflict(
        type=ConflictType.REPEAT_OPPONENT,
        severity=Severity.ERROR,
        description=(
            f"{prop_team.display_name} and {opp_team.display_name} "
            "have faced each other before"
        ),
        team_ids=(prop_team.id, opp_team.id),
    )


def same_school_conflict(prop_team: Team, opp_team: Team) -> Optional[Conflict]:
    if not prop_team.shares_school_with(opp_team):
        return None
    school = prop_team.school_name or prop_team.school_id
    return Conflict(
        type=ConflictType.SAME_SCHOOL,
        severity=Severity.WARNING,
        description=f"Both teams are from the same school ({school})",
        team_ids=(prop_team.id, opp_team.id),
    )


def side_imbalance_conflict(team: Team) -> Optional[Conflict]:
    if team.side_imbalance <= SIDE_IMBALANCE_LIMIT:
        return None
    return Conflict(
        type=ConflictType.SIDE_IMBALANCE,
        severity=Severity.WARNING,
        description=(
            f"{team.display_name} has significant side imbalance "
            f"({team.proposition_count} proposition, "
            f"{team.opposition_count} opposition)"
        ),
        team_ids=(team.id,),
    )


def bye_violation_conflict(team: Team) -> Optional[Conflict]:
    if not team.has_had_bye:
        return None
    return Conflict(
        type=ConflictType.BYE_VIOLATION,
        severity=Severity.ERROR,
        description=f"{team.display_name} has already had a bye round",
        team_ids=(team.id,),
    )


def _present(conflicts: Iterable[Optional[Conflict]]) -> List[Conflict]:
    return [c for c in conflicts if c is not None]


def debate_conflicts(prop_team: Team, opp_team: Team) -> List[Conflict]:
    """Team-level conflicts of one debate, in reporting order."""
    return _present(
        [
            repeat_opponent_conflict(prop_team, opp_team),
            same_school_conflict(prop_team, opp_team),
            side_imbalance_conflict(prop_team),
            side_imbalance_conflict(opp_team),
        ]
    )


def validate_round(
    pairings: Sequence[PairingResult], teams_by_id: Dict[str, Team]
) -> List[PairingResult]:
    """Append detected conflicts to each pairing of a round (in place)."""
    for pairing in pairings:
        prop_team = teams_by_id.get(pairing.proposition_team_id)
        if pairing.is_bye_round:
            if prop_team is not None:
                pairing.conflicts.extend(_present([bye_violation_conflict(prop_team)]))
            continue

        opp_team = teams_by_id.get(pairing.opposition_team_id)
        if prop_team is None or opp_team is None:
            continue
        pairing.conflicts.extend(debate_conflicts(prop_team, opp_team))
    return list(pairings)


def _judge_conflicts(
    judge: Judge, prop_team: Optional[Team], opp_team: Optional[Team]
) -> List[Conflict]:
    conflicts: List[Conflict] = []
    for team, side in ((prop_team, "proposition"), (opp_team, "opposition")):
        if team is not None and judge.shares_school_with(team.school_id):
            conflicts.append(
                Conflict(
                    type=ConflictType.JUDGE_CONFLICT,
                    severity=Severity.ERROR,
                    description=(
                        f"Judge {judge.display_name} is from the same school "
                        f"as {side} team"
                    ),
                    team_ids=(team.id,),
                    judge_ids=(judge.id,),
                )
            )
    for team in (prop_team, opp_team):
        if team is not None and judge.is_conflicted_with(team.id):
            conflicts.append(
                Conflict(
                    type=ConflictType.FEEDBACK_CONFLICT,
                    severity=Severity.WARNING,
                    description=(
                        f"Judge {judge.display_name} has feedback conflicts "
                        f"with {team.display_name}"
                    ),
                    team_ids=(team.id,),
                    judge_ids=(judge.id,),
                )
            )
    return conflicts


def _panel_size_conflict(judge_ids: List[JudgeId]) -> Optional[Conflict]:
    if not judge_ids:
        return Conflict(
            type=ConflictType.JUDGE_CONFLICT,
            severity=Severity.ERROR,
            description="No judges assigned to this debate",
        )
    if len(judge_ids) > 1 and len(judge_ids) % 2 == 0:
        return Conflict(
            type=ConflictType.JUDGE_CONFLICT,
            severity=Severity.WARNING,
            description=(
                f"Even number of judges ({len(judge_ids)}) may cause tie decisions"
            ),
            judge_ids=tuple(judge_ids),
        )
    return None


def validate_pairing(
    teams: Sequence[Team],
    judges: Sequence[Judge],
    proposition_team_id: Optional[TeamId] = None,
    opposition_team_id: Optional[TeamId] = None,
    judge_ids: Optional[Sequence[JudgeId]] = None,
) -> List[Conflict]:
    """Check a proposed debate without generating a round.

    Unknown team or judge ids are ignored. When ``judge_ids`` is given the
    panel size is checked too: an empty panel is an error and an even panel
    a warning. The function is pure: identical inputs always give identical
    conflict lists.
    """
    teams_by_id = {team.id: team for team in teams}
    judges_by_id = {judge.id: judge for judge in judges}
    prop_team = teams_by_id.get(proposition_team_id) if proposition_team_id else None
    opp_team = teams_by_id.get(opposition_team_id) if opposition_team_id else None

    conflicts: List[Conflict] = []
    if proposition_team_id is not None and proposition_team_id == opposition_team_id:
        conflicts.append(
            Conflict(
                type=ConflictType.SAME_SCHOOL,
                severity=Severity.ERROR,
                description="Team cannot debate against itself",
                team_ids=(proposition_team_id,),
            )
        )
    elif prop_team is not None and opp_team is not None:
        conflicts.extend(
            _present(
                [
                    repeat_opponent_conflict(prop_team, opp_team),
                    same_school_conflict(prop_team, opp_team),
                ]
            )
        )

    for judge_id in judge_ids or ():
        judge = judges_by_id.get(judge_id)
        if judge is None:
            logger.debug("Ignoring unknown judge id %s", judge_id)
            continue
        conflicts.extend(_judge_conflicts(judge, prop_team, opp_team))

    if judge_ids is not None:
        panel_conflict = _panel_size_conflict(list(judge_ids))
        if panel_conflict is not None:
            conflicts.append(panel_conflict)

    return conflicts
