"""Judge panel assignment with conflict filtering and load balancing."""

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

from typing import Dict, List, Optional, Sequence

from debatepairing.models import (
    Conflict,
    ConflictType,
    Judge,
    PairingResult,
    Severity,
    Team,
)
from debatepairing.type_hints import Workload
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


def panel_size(judges_per_debate: int, eligible_count: int) -> int:
    """Number of judges to seat on one panel.

    Capped by the eligible pool. A capped even size above one loses a judge
    so the panel can reach a majority.
    """
    size = min(judges_per_debate, eligible_count)
    if size > 1 and size % 2 == 0 and size != judges_per_debate:
        size -= 1
    return size


def select_head_judge(panel: Sequence[Judge]) -> Optional[Judge]:
    """Most experienced judge on the panel; the earlier seat wins ties."""
    if not panel:
        return None
    return max(panel, key=lambda judge: judge.experience_score)


def is_eligible(judge: Judge, prop_team: Optional[Team], opp_team: Optional[Team]) -> bool:
    """A judge may not share a school with, or be conflicted with, either team."""
    for team in (prop_team, opp_team):
        if team is None:
            continue
        if judge.shares_school_with(team.school_id):
            return False
        if judge.is_conflicted_with(team.id):
            return False
    return True


class JudgeAssigner:
    """Seats judges on each debate of a round.

    The pool is ranked once by ``Judge.ranking_score``. ``workload`` starts
    from each judge's ``assignments_this_tournament`` and grows as panels are
    filled; the judges themselves are never modified.
    """

    def __init__(self, judges: Sequence[Judge], judges_per_debate: int) -> None:
        self.judges_per_debate = judges_per_debate
        self.ranked: List[Judge] = sorted(
            judges, key=lambda judge: judge.ranking_score, reverse=True
        )
        self.workload: Workload = {
            judge.id: judge.assignments_this_tournament for judge in self.ranked
        }

    def eligible_judges(
        self, prop_team: Optional[Team], opp_team: Optional[Team]
    ) -> List[Judge]:
        """Eligible judges, least loaded first, better quality first on ties."""
        eligible = [j for j in self.ranked if is_eligible(j, prop_team, opp_team)]
        return sorted(
            eligible,
            key=lambda judge: (self.workload.get(judge.id, 0), -judge.quality_score),
        )

    def assign(
        self, pairing: PairingResult, teams_by_id: Dict[str, Team]
    ) -> PairingResult:
        """Fill ``pairing`` with a panel and head judge. Byes are untouched."""
        if pairing.is_bye_round:
            return pairing

        prop_team = teams_by_id.get(pairing.proposition_team_id)
        opp_team = teams_by_id.get(pairing.opposition_team_id)

        candidates = self.eligible_judges(prop_team, opp_team)
        panel = candidates[: panel_size(self.judges_per_debate, len(candidates))]
        for judge in panel:
            self.workload[judge.id] = self.workload.get(judge.id, 0) + 1

        head = select_head_judge(panel)
        pairing.judges = [judge.id for judge in panel]
        pairing.head_judge_id = head.id if head else None

        if len(panel) < self.judges_per_debate:
            logger.warning(
                "Only %s of %s judges available for %s vs %s",
                len(panel),
                self.judges_per_debate,
                pairing.proposition_team_id,
                pairing.opposition_team_id,
            )
            pairing.conflicts.append(
                Conflict(
                    type=ConflictType.JUDGE_CONFLICT,
                    severity=Severity.ERROR if not panel else Severity.WARNING,
                    description=(
                        f"Only {len(panel)} judges assigned "
                        f"(target: {self.judges_per_debate})"
                    ),
                    judge_ids=tuple(pairing.judges),
                )
            )
        return pairing

    def assign_all(
        self, pairings: Sequence[PairingResult], teams_by_id: Dict[str, Team]
    ) -> List[PairingResult]:
        return [self.assign(pairing, teams_by_id) for pairing in pairings]
