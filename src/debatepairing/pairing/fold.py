"""Fold (power) pairing for the early rounds."""

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

from debatepairing.constants import PROPOSITION
from debatepairing.models import PairingResult, Team
from debatepairing.pairing.common import find_best_opponent, sort_by_standings
from debatepairing.type_hints import Shuffler
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


def pair_round_one(teams: Sequence[Team], shuffle: Shuffler) -> List[PairingResult]:
    """Round 1: shuffle, split at the midpoint and pair halves positionally.

    There is no performance history yet, so no seeding is applied.
    """
    shuffled = shuffle(teams)
    midpoint = len(shuffled) // 2
    prop_teams = shuffled[:midpoint]
    opp_teams = shuffled[midpoint:]

    return [
        PairingResult.debate(prop.id, opp.id) for prop, opp in zip(prop_teams, opp_teams)
    ]


def split_side_pools(teams: Sequence[Team]) -> Tuple[List[Team], List[Team]]:
    """Split ranked teams by their last side, then even out the pools.

    A team that last proposed goes to the opposition pool, every other team
    (including teams with no history) to the proposition pool. Teams move
    from the tail of the larger pool until the sizes differ by at most one.
    """
    prop_pool: List[Team] = []
    opp_pool: List[Team] = []
    for team in teams:
        if team.last_side == PROPOSITION:
            opp_pool.append(team)
        else:
            prop_pool.append(team)

    while abs(len(prop_pool) - len(opp_pool)) > 1:
        if len(prop_pool) > len(opp_pool):
            opp_pool.append(prop_pool.pop())
        else:
            prop_pool.append(opp_pool.pop())

    return prop_pool, opp_pool


def pair_fold_system(teams: Sequence[Team]) -> List[PairingResult]:
    """Rounds 2-5: greedy cross-pool pairing of ranked teams.

    Each proposition-pool team takes the best free opposition-pool team it
    may meet. A team with no valid candidate is left out of the round; the
    pass does not backtrack.
    """
    ranked = sort_by_standings(teams)
    prop_pool, opp_pool = split_side_pools(ranked)

    pairings: List[PairingResult] = []
    taken: Set[str] = set()
    for prop_team in prop_pool:
        opponent = find_best_opponent(prop_team, opp_pool, taken)
        if opponent is None:
            logger.warning(
                "Fold pairing found no opponent for %s; team is unpaired",
                prop_team.display_name,
            )
            continue
        pairings.append(PairingResult.debate(prop_team.id, opponent.id))
        taken.add(opponent.id)

    for opp_team in opp_pool:
        if opp_team.id not in taken:
            logger.warning(
                "Fold pairing left %s without a proposition opponent",
                opp_team.display_name,
            )

    return pairings
