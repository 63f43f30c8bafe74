"""Loading and saving per-round engine inputs as JSON."""

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

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from debatepairing.exceptions import (
    DebatePairingException,
    FileLoadException,
)
from debatepairing.models import Judge, Team, TournamentConfig
from debatepairing.tournament.history import TournamentHistory
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class RoundSnapshot:
    """Everything the engine needs to pair one round."""

    config: TournamentConfig
    round_number: int
    teams: List[Team] = field(default_factory=list)
    judges: List[Judge] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tournament": self.config.to_dict(),
            "round_number": self.round_number,
            "teams": [t.to_dict() for t in self.teams],
            "judges": [j.to_dict() for j in self.judges],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundSnapshot":
        return cls(
            config=TournamentConfig.from_dict(data.get("tournament") or {}),
            round_number=int(data.get("round_number", 1)),
            teams=[Team.from_dict(t) for t in data.get("teams") or []],
            judges=[Judge.from_dict(j) for j in data.get("judges") or []],
        )


def _read_json(file_path: str) -> Dict[str, Any]:
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        logger.error(f"File not found: {file_path}")
        raise FileLoadException(f"File not found: {file_path}") from e
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read {file_path}: {e}")
        raise FileLoadException(f"Could not read {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise FileLoadException(f"{file_path} does not contain a JSON object")
    return data


def load_snapshot(file_path: str) -> RoundSnapshot:
    """Read a round snapshot written by ``save_snapshot`` or by hand."""
    data = _read_json(file_path)
    try:
        snapshot = RoundSnapshot.from_dict(data)
    except (
        AttributeError,
        KeyError,
        TypeError,
        ValueError,
        DebatePairingException,
    ) as e:
        raise FileLoadException(f"Invalid snapshot in {file_path}: {e}") from e
    logger.info(
        f"Loaded round {snapshot.round_number} snapshot with "
        f"{len(snapshot.teams)} teams and {len(snapshot.judges)} judges"
    )
    return snapshot


def save_snapshot(snapshot: RoundSnapshot, file_path: str) -> None:
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(snapshot.to_dict(), f, indent=2)


def load_history(file_path: str) -> TournamentHistory:
    """Read a tournament history file (``{"tournament", "debates"}``)."""
    data = _read_json(file_path)
    try:
        return TournamentHistory.from_dict(data)
    except (
        AttributeError,
        KeyError,
        TypeError,
        ValueError,
        DebatePairingException,
    ) as e:
        raise FileLoadException(f"Invalid history in {file_path}: {e}") from e


def save_history(history: TournamentHistory, file_path: str) -> None:
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(history.to_dict(), f, indent=2)
