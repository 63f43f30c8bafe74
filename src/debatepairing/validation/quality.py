"""Per-room quality scoring."""

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

from typing import Dict, List, Sequence

from debatepairing.constants import (
    BYE_QUALITY_SCORE,
    CLOSE_MATCH_BONUS,
    CLOSE_MATCH_THRESHOLD,
    ERROR_PENALTY,
    FULL_PANEL_BONUS,
    MISMATCH_PENALTY,
    MISMATCH_THRESHOLD,
    QUALITY_BASE_SCORE,
    QUALITY_MAX_SCORE,
    QUALITY_MIN_SCORE,
    WARNING_PENALTY,
)
from debatepairing.models import PairingResult, Team


def score_pairing(
    pairing: PairingResult, teams_by_id: Dict[str, Team], judges_per_debate: int
) -> float:
    """Quality of one room, 0 to 100. Byes always score 0.

    Starts at 100, loses 25 per error and 10 per warning, gains 10 for a
    full panel, and gains or loses 15 depending on how close the two teams'
    performance scores are.
    """
    if pairing.is_bye_round:
        return BYE_QUALITY_SCORE

    score = QUALITY_BASE_SCORE
    score -= pairing.error_count * ERROR_PENALTY
    score -= pairing.warning_count * WARNING_PENALTY

    if len(pairing.judges) >= judges_per_debate:
        score += FULL_PANEL_BONUS

    prop_team = teams_by_id.get(pairing.proposition_team_id)
    opp_team = teams_by_id.get(pairing.opposition_team_id)
    if prop_team is not None and opp_team is not None:
        difference = abs(prop_team.performance_score - opp_team.performance_score)
        if difference < CLOSE_MATCH_THRESHOLD:
            score += CLOSE_MATCH_BONUS
        elif difference > MISMATCH_THRESHOLD:
            score -= MISMATCH_PENALTY

    return max(QUALITY_MIN_SCORE, min(QUALITY_MAX_SCORE, score))


def score_round(
    pairings: Sequence[PairingResult],
    teams_by_id: Dict[str, Team],
    judges_per_debate: int,
) -> List[PairingResult]:
    for pairing in pairings:
        pairing.quality_score = score_pairing(pairing, teams_by_id, judges_per_debate)
    return list(pairings)


def average_quality(pairings: Sequence[PairingResult]) -> float:
    """Mean quality over debates, ignoring byes. 0.0 for an all-bye round."""
    debates = [p for p in pairings if not p.is_bye_round]
    if not debates:
        return 0.0
    return sum(p.quality_score for p in debates) / len(debates)
