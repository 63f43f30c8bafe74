"""Rewriting a round's pairings when a team withdraws."""

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

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from debatepairing.constants import BYE_QUALITY_SCORE, BYE_ROOM_PREFIX, ROOM_PREFIX
from debatepairing.models import PairingResult
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class AffectedRoom:
    """A room changed by a withdrawal."""

    room_name: str
    remaining_team_id: Optional[str]
    released_judges: List[str] = field(default_factory=list)


@dataclass
class WithdrawalOutcome:
    """Pairings after the withdrawal, plus what changed."""

    team_id: str
    pairings: List[PairingResult]
    affected: List[AffectedRoom] = field(default_factory=list)


def _bye_room_name(room_name: str) -> str:
    if room_name.startswith(f"{ROOM_PREFIX} "):
        return BYE_ROOM_PREFIX + room_name[len(ROOM_PREFIX):]
    return room_name


def withdraw_team(pairings: Sequence[PairingResult], team_id: str) -> WithdrawalOutcome:
    """Remove ``team_id`` from a round's pairings.

    The opponent of the withdrawn team gets a bye in the same room number,
    with the panel released. A bye held by the withdrawn team is dropped.
    The given pairings are not modified.
    """
    updated: List[PairingResult] = []
    affected: List[AffectedRoom] = []

    for pairing in pairings:
        if not pairing.involves(team_id):
            updated.append(pairing)
            continue

        if pairing.is_bye_round:
            affected.append(AffectedRoom(pairing.room_name, None))
            logger.info("Dropped bye in %s for withdrawn team %s", pairing.room_name, team_id)
            continue

        remaining = (
            pairing.opposition_team_id
            if pairing.proposition_team_id == team_id
            else pairing.proposition_team_id
        )
        bye = PairingResult.bye(remaining)
        bye.room_name = _bye_room_name(pairing.room_name)
        bye.quality_score = BYE_QUALITY_SCORE
        updated.append(bye)
        affected.append(
            AffectedRoom(pairing.room_name, remaining, list(pairing.judges))
        )
        logger.info(
            "%s: %s withdrew, %s now has a bye", pairing.room_name, team_id, remaining
        )

    if not affected:
        logger.debug("Team %s is not in any pairing of this round", team_id)

    return WithdrawalOutcome(team_id=team_id, pairings=updated, affected=affected)
