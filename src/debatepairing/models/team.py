"""Team standing snapshot used as pairing input."""

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
from typing import Any, Dict, List, Optional

from debatepairing.constants import OPPOSITION, PROPOSITION
from debatepairing.type_hints import Side


@dataclass
class CrossTournamentPerformance:
    """League-wide history of a team's school. Informational only."""

    total_tournaments: int = 0
    total_wins: int = 0
    total_debates: int = 0
    avg_performance: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_tournaments": self.total_tournaments,
            "total_wins": self.total_wins,
            "total_debates": self.total_debates,
            "avg_performance": self.avg_performance,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CrossTournamentPerformance":
        return cls(
            total_tournaments=data.get("total_tournaments", 0),
            total_wins=data.get("total_wins", 0),
            total_debates=data.get("total_debates", 0),
            avg_performance=data.get("avg_performance", 0.0),
        )


@dataclass
class Team:
    """A team's standing in a tournament as of the round being paired.

    Attributes:
        id: Unique identifier for the team
        name: Display name
        school_id: School affiliation, if any
        school_name: School display name, if any
        side_history: Sides played so far, oldest first
        opponents_faced: Ids of teams already debated
        wins: Number of debates won
        total_points: Cumulative team points
        bye_rounds: Round numbers in which the team had a bye
        performance_score: Seeding scalar, higher is stronger
        cross_tournament_performance: League-wide aggregate, never mutated
    """

    id: str
    name: str = ""
    school_id: Optional[str] = None
    school_name: Optional[str] = None
    side_history: List[Side] = field(default_factory=list)
    opponents_faced: List[str] = field(default_factory=list)
    wins: int = 0
    total_points: float = 0.0
    bye_rounds: List[int] = field(default_factory=list)
    performance_score: float = 0.0
    cross_tournament_performance: CrossTournamentPerformance = field(
        default_factory=CrossTournamentPerformance
    )

    @property
    def display_name(self) -> str:
        return self.name or self.id

    @property
    def proposition_count(self) -> int:
        return self.side_history.count(PROPOSITION)

    @property
    def opposition_count(self) -> int:
        return self.side_history.count(OPPOSITION)

    @property
    def side_imbalance(self) -> int:
        """Absolute difference between proposition and opposition debates."""
        return abs(self.proposition_count - self.opposition_count)

    @property
    def proposition_need(self) -> int:
        """How much this team is owed a proposition side."""
        return self.opposition_count - self.proposition_count

    @property
    def last_side(self) -> Optional[Side]:
        return self.side_history[-1] if self.side_history else None

    @property
    def has_had_bye(self) -> bool:
        return len(self.bye_rounds) > 0

    def has_faced(self, other: "Team") -> bool:
        """True if either team lists the other as a previous opponent."""
        return other.id in self.opponents_faced or self.id in other.opponents_faced

    def shares_school_with(self, other: "Team") -> bool:
        return bool(self.school_id) and self.school_id == other.school_id

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "school_id": self.school_id,
            "school_name": self.school_name,
            "side_history": list(self.side_history),
            "opponents_faced": list(self.opponents_faced),
            "wins": self.wins,
            "total_points": self.total_points,
            "bye_rounds": list(self.bye_rounds),
            "performance_score": self.performance_score,
            "cross_tournament_performance": self.cross_tournament_performance.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        """Deserialize team from dictionary."""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            school_id=data.get("school_id"),
            school_name=data.get("school_name"),
            side_history=list(data.get("side_history") or []),
            opponents_faced=list(data.get("opponents_faced") or []),
            wins=data.get("wins", 0),
            total_points=data.get("total_points", 0.0),
            bye_rounds=list(data.get("bye_rounds") or []),
            performance_score=data.get("performance_score", 0.0),
            cross_tournament_performance=CrossTournamentPerformance.from_dict(
                data.get("cross_tournament_performance") or {}
            ),
        )
