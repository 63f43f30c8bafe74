"""Helpers shared by the fold and Swiss pairing methods."""

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

import random
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from debatepairing.constants import CANDIDATE_BASE_SCORE
from debatepairing.models import Team
from debatepairing.type_hints import Shuffler
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


def standings_key(team: Team) -> Tuple[float, float, float]:
    """Sort key: wins desc, points desc, then performance score *asc*.

    Among teams level on wins and points the lower performance score comes
    first, which fixes the pairing order.
    """
    return (-team.wins, -team.total_points, team.performance_score)


def sort_by_standings(teams: Iterable[Team]) -> List[Team]:
    return sorted(teams, key=standings_key)


def candidate_score(team: Team, candidate: Team) -> float:
    """Opponent desirability: closer performance scores are better."""
    return CANDIDATE_BASE_SCORE - abs(team.performance_score - candidate.performance_score)


def can_meet(team: Team, candidate: Team) -> bool:
    """Hard pairing constraints: no rematch and no same-school debate."""
    if team.id == candidate.id:
        return False
    if team.has_faced(candidate):
        return False
    return not team.shares_school_with(candidate)


def find_best_opponent(
    team: Team, candidates: Sequence[Team], taken: Set[str]
) -> Optional[Team]:
    """Return the free, valid candidate with the highest score.

    Candidates are scanned in order and the first one reaching the best score
    wins ties. Returns None when every candidate is taken or excluded.
    """
    best: Optional[Team] = None
    best_score = 0.0
    for candidate in candidates:
        if candidate.id in taken or not can_meet(team, candidate):
            continue
        score = candidate_score(team, candidate)
        if best is None or score > best_score:
            best = candidate
            best_score = score
    return best


def select_bye_team(teams: Sequence[Team]) -> Team:
    """Pick the team that sits out when the field is odd.

    Teams that have never had a bye are preferred; among the candidates the
    lowest performance score sits out (first one wins ties).
    """
    fresh = [team for team in teams if not team.has_had_bye]
    pool = fresh if fresh else list(teams)
    bye_team = min(pool, key=lambda team: team.performance_score)
    if not fresh:
        logger.warning(
            "Every team has already had a bye; %s receives a second one",
            bye_team.display_name,
        )
    logger.debug(
        "Bye goes to %s (performance %.1f)",
        bye_team.display_name,
        bye_team.performance_score,
    )
    return bye_team


def random_shuffler(seed: Optional[int] = None) -> Shuffler:
    """Build a shuffler backed by a private ``random.Random``.

    Passing a seed makes round-one pairings reproducible.
    """
    rng = random.Random(seed)

    def shuffle(teams: Sequence[Team]) -> List[Team]:
        shuffled = list(teams)
        rng.shuffle(shuffled)
        return shuffled

    return shuffle


def identity_shuffler(teams: Sequence[Team]) -> List[Team]:
    """Keep the input order. Useful for fixtures."""
    return list(teams)
