"""Judge snapshot used as pairing input."""

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

from debatepairing.constants import (
    DEFAULT_CONSISTENCY_SCORE,
    DEFAULT_FEEDBACK_SCORE,
    HEAD_JUDGE_ELIMINATION_FACTOR,
    HEAD_JUDGE_FEEDBACK_FACTOR,
    JUDGE_QUALITY_FEEDBACK_FACTOR,
    JUDGE_WEIGHT_CONSISTENCY,
    JUDGE_WEIGHT_DEBATES,
    JUDGE_WEIGHT_ELIMINATION,
    JUDGE_WEIGHT_FEEDBACK,
)


@dataclass
class CrossTournamentStats:
    """League-wide judging record. Informational except for consistency."""

    total_tournaments: int = 0
    total_debates: int = 0
    total_elimination_debates: int = 0
    avg_feedback: float = DEFAULT_FEEDBACK_SCORE
    consistency_score: float = DEFAULT_CONSISTENCY_SCORE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_tournaments": self.total_tournaments,
            "total_debates": self.total_debates,
            "total_elimination_debates": self.total_elimination_debates,
            "avg_feedback": self.avg_feedback,
            "consistency_score": self.consistency_score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CrossTournamentStats":
        return cls(
            total_tournaments=data.get("total_tournaments", 0),
            total_debates=data.get("total_debates", 0),
            total_elimination_debates=data.get("total_elimination_debates", 0),
            avg_feedback=data.get("avg_feedback", DEFAULT_FEEDBACK_SCORE),
            consistency_score=data.get("consistency_score", DEFAULT_CONSISTENCY_SCORE),
        )


@dataclass
class Judge:
    """A judge available for the round being paired.

    Attributes:
        id: Unique identifier for the judge
        name: Display name
        school_id: School affiliation, if any
        school_name: School display name, if any
        total_debates_judged: Lifetime debates judged
        elimination_debates: Elimination-round debates judged
        avg_feedback_score: Mean feedback mark received
        conflicts: Ids of teams this judge must not judge
        assignments_this_tournament: Assignments made before this round
        cross_tournament_stats: League-wide judging record
    """

    id: str
    name: str = ""
    school_id: Optional[str] = None
    school_name: Optional[str] = None
    total_debates_judged: int = 0
    elimination_debates: int = 0
    avg_feedback_score: float = DEFAULT_FEEDBACK_SCORE
    conflicts: List[str] = field(default_factory=list)
    assignments_this_tournament: int = 0
    cross_tournament_stats: CrossTournamentStats = field(
        default_factory=CrossTournamentStats
    )

    @property
    def display_name(self) -> str:
        return self.name or self.id

    @property
    def ranking_score(self) -> float:
        """Composite used to order the whole judge pool once per round."""
        return (
            self.total_debates_judged * JUDGE_WEIGHT_DEBATES
            + self.elimination_debates * JUDGE_WEIGHT_ELIMINATION
            + self.avg_feedback_score * JUDGE_WEIGHT_FEEDBACK
            + self.cross_tournament_stats.consistency_score * JUDGE_WEIGHT_CONSISTENCY
        )

    @property
    def quality_score(self) -> float:
        """Tie-break between judges carrying the same load."""
        return (
            self.total_debates_judged
            + self.avg_feedback_score * JUDGE_QUALITY_FEEDBACK_FACTOR
        )

    @property
    def experience_score(self) -> float:
        """Used to pick the head judge of a panel."""
        return (
            self.total_debates_judged
            + self.elimination_debates * HEAD_JUDGE_ELIMINATION_FACTOR
            + self.avg_feedback_score * HEAD_JUDGE_FEEDBACK_FACTOR
        )

    def is_conflicted_with(self, team_id: Optional[str]) -> bool:
        return team_id is not None and team_id in self.conflicts

    def shares_school_with(self, school_id: Optional[str]) -> bool:
        return bool(school_id) and self.school_id == school_id

    def to_dict(self) -> Dict[str, Any]:
        """Serialize judge to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "school_id": self.school_id,
            "school_name": self.school_name,
            "total_debates_judged": self.total_debates_judged,
            "elimination_debates": self.elimination_debates,
            "avg_feedback_score": self.avg_feedback_score,
            "conflicts": list(self.conflicts),
            "assignments_this_tournament": self.assignments_this_tournament,
            "cross_tournament_stats": self.cross_tournament_stats.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Judge":
        """Deserialize judge from dictionary."""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            school_id=data.get("school_id"),
            school_name=data.get("school_name"),
            total_debates_judged=data.get("total_debates_judged", 0),
            elimination_debates=data.get("elimination_debates", 0),
            avg_feedback_score=data.get("avg_feedback_score", DEFAULT_FEEDBACK_SCORE),
            conflicts=list(data.get("conflicts") or []),
            assignments_this_tournament=data.get("assignments_this_tournament", 0),
            cross_tournament_stats=CrossTournamentStats.from_dict(
                data.get("cross_tournament_stats") or {}
            ),
        )
