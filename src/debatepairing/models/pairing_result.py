"""PairingResult and Conflict data classes."""

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
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from debatepairing.exceptions import InvalidPairingException


class ConflictType(Enum):
    """Kinds of problems detected in a pairing."""

    REPEAT_OPPONENT = "repeat_opponent"
    SAME_SCHOOL = "same_school"
    SIDE_IMBALANCE = "side_imbalance"
    JUDGE_CONFLICT = "judge_conflict"
    BYE_VIOLATION = "bye_violation"
    FEEDBACK_CONFLICT = "feedback_conflict"


class Severity(Enum):
    """How serious a conflict is."""

    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Conflict:
    """A detected rule violation or risk in a pairing.

    Every conflict is the same flat record; ``type`` tells them apart.
    """

    type: ConflictType
    severity: Severity
    description: str
    team_ids: Tuple[str, ...] = ()
    judge_ids: Tuple[str, ...] = ()

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "description": self.description,
            "team_ids": list(self.team_ids),
            "judge_ids": list(self.judge_ids),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Conflict":
        return cls(
            type=ConflictType(data["type"]),
            severity=Severity(data["severity"]),
            description=data.get("description", ""),
            team_ids=tuple(data.get("team_ids") or ()),
            judge_ids=tuple(data.get("judge_ids") or ()),
        )


@dataclass
class PairingResult:
    """One room of a round: a debate, or a bye for a single team.

    A bye has only the proposition slot filled, no opposition and no judges.
    """

    room_name: str = ""
    proposition_team_id: Optional[str] = None
    opposition_team_id: Optional[str] = None
    judges: List[str] = field(default_factory=list)
    head_judge_id: Optional[str] = None
    is_bye_round: bool = False
    conflicts: List[Conflict] = field(default_factory=list)
    quality_score: float = 0.0

    def __post_init__(self) -> None:
        if self.is_bye_round and (self.opposition_team_id or self.judges):
            raise InvalidPairingException(
                "A bye cannot have an opposition team or judges"
            )
        if self.head_judge_id is not None and self.head_judge_id not in self.judges:
            raise InvalidPairingException(
                f"Head judge {self.head_judge_id} is not on the panel"
            )

    @classmethod
    def bye(cls, team_id: str) -> "PairingResult":
        return cls(proposition_team_id=team_id, is_bye_round=True)

    @classmethod
    def debate(cls, proposition_team_id: str, opposition_team_id: str) -> "PairingResult":
        return cls(
            proposition_team_id=proposition_team_id,
            opposition_team_id=opposition_team_id,
        )

    @property
    def team_ids(self) -> List[str]:
        return [
            team_id
            for team_id in (self.proposition_team_id, self.opposition_team_id)
            if team_id is not None
        ]

    @property
    def error_count(self) -> int:
        return sum(1 for c in self.conflicts if c.is_error)

    @property
    def warning_count(self) -> int:
        return sum(1 for c in self.conflicts if not c.is_error)

    def involves(self, team_id: str) -> bool:
        return team_id in self.team_ids

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "room_name": self.room_name,
            "proposition_team_id": self.proposition_team_id,
            "opposition_team_id": self.opposition_team_id,
            "judges": list(self.judges),
            "head_judge_id": self.head_judge_id,
            "is_bye_round": self.is_bye_round,
            "conflicts": [c.to_dict() for c in self.conflicts],
            "quality_score": self.quality_score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingResult":
        """Deserialize pairing from dictionary."""
        return cls(
            room_name=data.get("room_name", ""),
            proposition_team_id=data.get("proposition_team_id"),
            opposition_team_id=data.get("opposition_team_id"),
            judges=list(data.get("judges") or []),
            head_judge_id=data.get("head_judge_id"),
            is_bye_round=data.get("is_bye_round", False),
            conflicts=[Conflict.from_dict(c) for c in data.get("conflicts") or []],
            quality_score=data.get("quality_score", 0.0),
        )


#  LocalWords:  PairingResult
