"""Swiss pairing for the later rounds."""

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

from typing import List, Sequence, Set, Tuple

from debatepairing.models import PairingResult, Team
from debatepairing.pairing.common import find_best_opponent
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


def determine_sides(team1: Team, team2: Team) -> Tuple[Team, Team]:
    """Return ``(proposition, opposition)`` for a newly formed pair.

    The team that has opposed more often relative to proposing proposes.
    On an exact tie the higher performance score proposes, and ``team1``
    proposes if the performance scores are equal too.
    """
    need1 = team1.proposition_need
    need2 = team2.proposition_need

    if need1 > need2:
        return team1, team2
    if need2 > need1:
        return team2, team1
    if team1.performance_score >= team2.performance_score:
        return team1, team2
    return team2, team1


def pair_swiss(ranked_teams: Sequence[Team]) -> List[PairingResult]:
    """Greedy Swiss pairing over teams already in standings order.

    Each unpaired team, top down, takes the best free opponent it may meet.
    A team with no valid opponent stays unpaired; there is no backtracking.
    """
    pairings: List[PairingResult] = []
    paired: Set[str] = set()

    for team in ranked_teams:
        if team.id in paired:
            continue

        opponent = find_best_opponent(team, ranked_teams, paired | {team.id})
        if opponent is None:
            logger.warning(
                "Swiss pairing found no opponent for %s; team is unpaired",
                team.display_name,
            )
            continue

        prop_team, opp_team = determine_sides(team, opponent)
        pairings.append(PairingResult.debate(prop_team.id, opp_team.id))
        paired.add(team.id)
        paired.add(opponent.id)

    return pairings
