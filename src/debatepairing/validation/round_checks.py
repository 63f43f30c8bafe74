"""Structural checks on a finished round and on manual pairing edits."""

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

from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence, Set

from debatepairing.exceptions import InvalidPairingException
from debatepairing.models import PairingResult, TournamentConfig
from debatepairing.type_hints import JudgeId, TeamId
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


def round_save_errors(
    pairings: Sequence[PairingResult], config: TournamentConfig
) -> List[str]:
    """List every reason the round cannot be stored as it stands.

    Rooms are referred to by their position in ``pairings``, starting at 1.
    """
    errors: List[str] = []

    seen: Set[str] = set()
    for index, pairing in enumerate(pairings, start=1):
        for team_id in pairing.team_ids:
            if team_id in seen:
                errors.append(f"Team appears multiple times in pairings (Room {index})")
            seen.add(team_id)

    for index, pairing in enumerate(pairings, start=1):
        if (
            pairing.proposition_team_id is not None
            and pairing.proposition_team_id == pairing.opposition_team_id
        ):
            errors.append(f"Team cannot debate itself (Room {index})")

    for index, pairing in enumerate(pairings, start=1):
        panel = len(pairing.judges)
        if not pairing.is_bye_round and panel == 0:
            errors.append(f"No judges assigned (Room {index})")
        if pairing.head_judge_id and pairing.head_judge_id not in pairing.judges:
            errors.append(f"Head judge not in judge list (Room {index})")
        if panel > 1 and panel % 2 == 0 and panel != config.judges_per_debate:
            errors.append(f"Even number of judges detected (Room {index})")

    return errors


def validate_round_for_save(
    pairings: Sequence[PairingResult], config: TournamentConfig
) -> None:
    """Raise ``InvalidPairingException`` listing every problem with the round."""
    errors = round_save_errors(pairings, config)
    if errors:
        logger.warning("Round rejected with %s problem(s)", len(errors))
        raise InvalidPairingException(f"Validation failed: {', '.join(errors)}")


def update_pairing(
    pairing: PairingResult,
    room_name: Optional[str] = None,
    judges: Optional[Sequence[JudgeId]] = None,
    head_judge_id: Optional[JudgeId] = None,
    proposition_team_id: Optional[TeamId] = None,
    opposition_team_id: Optional[TeamId] = None,
) -> PairingResult:
    """Apply a manual edit and return the edited copy of ``pairing``.

    Only the arguments that are given change. The head judge must sit on the
    resulting panel and a team cannot be set against itself. Conflicts and
    the quality score are carried over as they were; run ``validate_pairing``
    to check the edited room.
    """
    updates: Dict[str, Any] = {}
    if room_name is not None:
        updates["room_name"] = room_name
    if judges is not None:
        updates["judges"] = list(judges)
    if head_judge_id is not None:
        updates["head_judge_id"] = head_judge_id
    if proposition_team_id is not None:
        updates["proposition_team_id"] = proposition_team_id
    if opposition_team_id is not None:
        updates["opposition_team_id"] = opposition_team_id

    panel = updates.get("judges", pairing.judges)
    head = updates.get("head_judge_id", pairing.head_judge_id)
    if head is not None and head not in panel:
        raise InvalidPairingException("Head judge must be in the judges list")

    prop = updates.get("proposition_team_id", pairing.proposition_team_id)
    opp = updates.get("opposition_team_id", pairing.opposition_team_id)
    if prop is not None and prop == opp:
        raise InvalidPairingException("Team cannot debate against itself")

    edited = replace(pairing, conflicts=list(pairing.conflicts), **updates)
    logger.info("Updated pairing %s: %s", edited.room_name, ", ".join(sorted(updates)))
    return edited
